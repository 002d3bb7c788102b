"""Pattern-driven scanner base class.

A concrete scanner supplies three things:

1. ``catchable_patterns()``: regex fragments whose matches become tokens
2. ``non_catchable_patterns()``: fragments matched and discarded (whitespace)
3. ``classify(value)``: maps matched text to a type tag, optionally with a
   replacement value

The base class composes the fragments into a single expression once per
instance, splits the whole input eagerly, classifies every candidate, and
returns a TokenStream.

Text that no pattern matches is not dropped: it is emitted as its own
candidate, and the classifier decides what it is (usually None).

Example:
    >>> class Calc(Scanner):
    ...     NUMBER = 1
    ...     WORD = 2
    ...
    ...     def catchable_patterns(self):
    ...         return [r"[0-9]+", r"[a-z]+"]
    ...
    ...     def non_catchable_patterns(self):
    ...         return [r"\\s+"]
    ...
    ...     def classify(self, value):
    ...         if value.isdigit():
    ...             return Classification(self.NUMBER, int(value))
    ...         return self.WORD if value.isalpha() else None
    >>> [t.value for t in Calc().tokenize("12 foo 34")]
    [12, 'foo', 34]

Thread Safety:
A scanner instance may be shared between threads. The compiled pattern is
cached with an idempotent write: concurrent first use may compile twice,
and both results are identical.

"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from typing import Any, NamedTuple

from lexis.config import get_scan_config
from lexis.errors import PatternError, ScanError
from lexis.location import PositionResolver
from lexis.stream import TokenStream
from lexis.tokens import Token, TokenTag, same_tag
from lexis.utils.logger import get_logger, scanner_logger

logger = get_logger(__name__)

# Prefix for the named groups wrapping catchable fragments. Groups inside a
# consumer's fragment keep working but are never emitted as candidates.
_GROUP_PREFIX = "_lexis_"

# Engine failures that trigger the whole-input fallback
_ENGINE_ERRORS = (re.error, RecursionError, TypeError, ValueError)


class Classification(NamedTuple):
    """Result of classifying a candidate with a replacement value.

    Return this from ``Scanner.classify`` to emit a token whose value is
    not the matched text (e.g. an ``int`` for a numeric literal).
    """

    type: TokenTag
    value: Any


class _Compiled(NamedTuple):
    pattern: re.Pattern[str]
    groups: tuple[str, ...]


class Scanner(ABC):
    """Base class for regex-driven scanners.

    Subclasses implement the three extension points and may override
    ``flags()``. Public UPPER_CASE class attributes are treated as named
    token types by ``get_literal``.

    """

    _compiled: _Compiled | None = None

    # =========================================================================
    # Extension points
    # =========================================================================

    @abstractmethod
    def catchable_patterns(self) -> Sequence[str]:
        """Ordered fragments whose matches become tokens.

        Fragments must not carry their own enclosing group; each one is
        wrapped in a capturing group by the scanner.
        """

    @abstractmethod
    def non_catchable_patterns(self) -> Sequence[str]:
        """Ordered fragments that are matched but never emitted."""

    @abstractmethod
    def classify(self, value: str) -> Classification | TokenTag:
        """Return the type of a candidate.

        Args:
            value: The candidate's matched text

        Returns:
            A type tag (None if unrecognized), or a Classification when the
            emitted token should carry a different value.
        """

    def flags(self) -> re.RegexFlag:
        """Regex flags for the composed pattern.

        Defaults to the active ScanConfig (case-insensitive, Unicode).
        """
        return get_scan_config().flags

    # =========================================================================
    # Pattern composition
    # =========================================================================

    @property
    def pattern(self) -> re.Pattern[str]:
        """The composed pattern (compiled on first access)."""
        return self._get_compiled().pattern

    def _get_compiled(self) -> _Compiled:
        compiled = self._compiled
        if compiled is None:
            compiled = self._compile()
            # Idempotent write: same result for every caller
            self._compiled = compiled
        return compiled

    def _compile(self) -> _Compiled:
        catchable = list(self.catchable_patterns())
        groups = tuple(f"{_GROUP_PREFIX}{index}" for index in range(len(catchable)))
        parts = [f"(?P<{name}>{fragment})" for name, fragment in zip(groups, catchable)]
        parts.extend(f"(?:{fragment})" for fragment in self.non_catchable_patterns())
        # An empty pattern set matches nothing rather than everywhere
        source = "|".join(parts) if parts else "(?!)"

        try:
            pattern = re.compile(source, self.flags())
        except re.error as exc:
            raise PatternError(type(self).__name__, source, str(exc)) from exc

        logger.debug(
            "Compiled %s pattern with %d catchable group(s): %s",
            type(self).__name__,
            len(groups),
            source,
        )
        return _Compiled(pattern, groups)

    # =========================================================================
    # Scanning
    # =========================================================================

    def iter_candidates(self, text: str) -> Iterator[tuple[str, int]]:
        """Split ``text`` into ``(candidate, offset)`` pairs.

        Yields unmatched text between matches and the text of the catchable
        group that matched. Non-catchable matches and empty pieces are
        skipped. Offsets are absolute.
        """
        pattern, groups = self._get_compiled()
        cursor = 0
        for match in pattern.finditer(text):
            start, end = match.span()
            if start > cursor:
                yield text[cursor:start], cursor
            for name in groups:
                value = match.group(name)
                if value:
                    yield value, match.start(name)
                    break
            cursor = max(cursor, end)
        if cursor < len(text):
            yield text[cursor:], cursor

    def tokenize(self, text: str) -> TokenStream:
        """Scan ``text`` into a TokenStream.

        Args:
            text: Input to scan. Empty input yields an empty stream.

        Returns:
            TokenStream over all tokens, bound to the original text

        Raises:
            PatternError: If the composed pattern does not compile
            ScanError: If the engine fails and the active config is strict
        """
        self._get_compiled()
        log = scanner_logger(type(self))
        try:
            candidates = list(self.iter_candidates(text))
        except _ENGINE_ERRORS as exc:
            config = get_scan_config()
            if config.strict:
                # Reported at the start of the input
                location = PositionResolver(text).locate(0, config.source_file)
                raise ScanError(
                    f"{type(self).__name__} failed to split input: {exc}",
                    lineno=location.lineno,
                    col_offset=location.col_offset,
                    source_file=location.source_file,
                ) from exc
            log.warning(
                "%s failed to split input (%s); using whole input as one token",
                type(self).__name__,
                exc,
            )
            candidates = [(text, 0)]

        tokens = []
        for value, offset in candidates:
            # Type comes from the original text; the value may be replaced
            token_type, token_value = self._classify(value)
            tokens.append(Token(token_value, token_type, offset))

        log.debug("%s produced %d token(s)", type(self).__name__, len(tokens))
        return TokenStream(tokens, text)

    def _classify(self, value: str) -> tuple[TokenTag, Any]:
        result = self.classify(value)
        if isinstance(result, Classification):
            return result.type, result.value
        return result, value

    # =========================================================================
    # Diagnostics
    # =========================================================================

    def get_literal(self, token_type: TokenTag, qualify: bool = False) -> TokenTag:
        """Return the symbolic name of a token type.

        Looks for the first public UPPER_CASE class attribute (own class
        first, then bases) whose value has the same type and value as
        ``token_type``.

        Args:
            token_type: Tag to look up
            qualify: Prefix the name with the scanner class name

        Returns:
            The name, or ``token_type`` unchanged if nothing matches.
        """
        cls = type(self)
        for klass in cls.__mro__:
            for name, value in vars(klass).items():
                if name.startswith("_") or not name.isupper():
                    continue
                if same_tag(value, token_type):
                    return f"{cls.__name__}.{name}" if qualify else name
        return token_type

    def is_a(self, value: str, token_type: TokenTag) -> bool:
        """Check whether ``value`` classifies as ``token_type`` (strict tag match)."""
        return same_tag(self._classify(value)[0], token_type)
