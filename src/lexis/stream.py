"""Cursor over the tokens produced by a single scan.

TokenStream holds a fixed sequence of tokens plus two pieces of state:

- ``position``: index of the current token. Only moves forward through
  ``next``/``skip_until``; moved back explicitly with ``reset`` or
  ``reset_position``.
- ``peek``: transient offset from ``position`` used for multi-step
  lookahead. Cleared by ``next``, ``reset_peek``, ``reset`` and ``glimpse``.

No method raises on an out-of-range index. Misses return None (or False for
``next``) and the parser built on top decides what that means.

Thread Safety:
A stream belongs to the caller that received it from ``Scanner.tokenize``.
Cursor state is not synchronized.

"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Iterator

from lexis.location import PositionResolver
from lexis.tokens import Token, TokenTag, same_tag


class TokenStream:
    """Navigable sequence of tokens.

    Usage:
            >>> stream = scanner.tokenize("12 foo 34")
            >>> stream.read()
            Token(NUMBER, 12, @0)
            >>> stream.next()
            True
            >>> stream.look_ahead()
            Token(NUMBER, 34, @7)

    """

    __slots__ = ("_tokens", "_context", "_position", "_peek")

    def __init__(self, tokens: Iterable[Token], text: str) -> None:
        """Initialize stream.

        Args:
            tokens: Tokens in source order
            text: The original input the tokens were scanned from
        """
        self._tokens: tuple[Token, ...] = tuple(tokens)
        self._context = PositionResolver(text)
        self._position = 0
        self._peek = 0

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __getitem__(self, index: int) -> Token:
        return self._tokens[index]

    def __repr__(self) -> str:
        return f"TokenStream({len(self._tokens)} tokens, position={self._position})"

    @property
    def tokens(self) -> tuple[Token, ...]:
        """All tokens, independent of the cursor."""
        return self._tokens

    @property
    def position(self) -> int:
        """Index of the current token."""
        return self._position

    @property
    def context(self) -> PositionResolver:
        """Resolver bound to the original input."""
        return self._context

    def _at(self, index: int) -> Token | None:
        # Negative indices must not wrap around to the end
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return None

    # =========================================================================
    # Cursor movement
    # =========================================================================

    def next(self) -> bool:
        """Move to the next token.

        Returns:
            True if the cursor advanced, False if there is no next token.
        """
        self._peek = 0
        if self._at(self._position + 1) is None:
            return False
        self._position += 1
        return True

    def reset(self) -> None:
        """Rewind the cursor and the peek offset to the start."""
        self._peek = 0
        self._position = 0

    def reset_position(self, position: int = 0) -> None:
        """Place the cursor at ``position``.

        The index is not validated and the peek offset is left alone.
        """
        self._position = position

    def reset_peek(self) -> None:
        """Clear the peek offset."""
        self._peek = 0

    def skip_until(self, type: TokenTag) -> None:
        """Advance until the look-ahead token has the given type.

        Leaves the cursor on the token just before the first match, or on
        the last token when none matches.
        """
        while (lookahead := self.look_ahead()) is not None and not same_tag(lookahead.type, type):
            self.next()

    # =========================================================================
    # Token access
    # =========================================================================

    def read(self) -> Token | None:
        """Return the current token.

        Links the current token's ``next`` to the following token when both
        exist. This is the only place that link is written.
        """
        token = self._at(self._position)
        lookahead = self._at(self._position + 1)
        if token is not None and lookahead is not None:
            token.link(lookahead)
        return token

    def look_ahead(self) -> Token | None:
        """Return the token after the current one without moving."""
        return self._at(self._position + 1)

    def look_behind(self) -> Token | None:
        """Return the token before the current one."""
        return self._at(self._position - 1)

    def peek(self, distance: int = 1) -> Token | None:
        """Move the peek offset by ``distance`` and return that token.

        Repeated calls accumulate. On a miss the offset is left unchanged.
        """
        peek = self._peek + distance
        token = self._at(self._position + peek)
        if token is not None:
            self._peek = peek
        return token

    def glimpse(self, distance: int = 1) -> Token | None:
        """Peek ``distance`` tokens ahead and clear the peek offset."""
        token = self.peek(distance)
        self._peek = 0
        return token

    def token_after(self, token: Token) -> Token | None:
        """Return the token following ``token`` in this stream.

        Unlike ``Token.next`` this does not depend on read order. Lookup is
        by identity.
        """
        for index, candidate in enumerate(self._tokens):
            if candidate is token:
                return self._at(index + 1)
        return None

    # =========================================================================
    # Predicates
    # =========================================================================

    def at_end(self) -> bool:
        """True when there is no token after the current one."""
        return self.look_ahead() is None

    def is_next_token(self, type: TokenTag) -> bool:
        """True when the look-ahead token has the given type.

        Tags match on type and value, so ``True`` never matches ``1``.
        """
        lookahead = self.look_ahead()
        return lookahead is not None and same_tag(lookahead.type, type)

    def is_next_token_any(self, types: Collection[TokenTag]) -> bool:
        """True when the look-ahead token's type is one of ``types`` (strict match)."""
        lookahead = self.look_ahead()
        return lookahead is not None and any(same_tag(lookahead.type, t) for t in types)

    def where(self) -> tuple[int, int]:
        """Line and column of the current token (end of input if none)."""
        token = self._at(self._position)
        return self._context.where(token.position if token is not None else None)
