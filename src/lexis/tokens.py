"""Token definitions for the Lexis scanner.

A scanner produces Token objects that a hand-written parser consumes through
a TokenStream. Each Token carries a value, a consumer-defined type tag, and
the absolute offset of its first character in the scanned input.

Thread Safety:
Token is frozen. The only post-construction write is the lazy ``next``
link, which the owning stream sets with an idempotent write on read.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# Type tags are supplied by the consumer: plain ints, symbolic strings,
# enum members, or None for input the classifier does not recognize.
TokenTag = int | str | Enum | None


@dataclass(frozen=True, slots=True)
class Token:
    """A lexical unit produced by a Scanner.

    Attributes:
        value: The matched text, or the replacement value returned by the
            scanner's classifier (e.g. an ``int`` for a numeric literal)
        type: Classification tag, or None for unclassifiable input
        position: Absolute 0-based offset of the token in the source
        next: The token that follows this one in its stream. Set only when
            the stream reads this token as current, so an unread token
            keeps ``None`` even if a later token exists.

    Thread Safety:
        Frozen dataclass. ``next`` is excluded from comparison and hashing
        and is written with ``object.__setattr__`` (idempotent).

    """

    value: Any
    type: TokenTag
    position: int
    next: Token | None = field(default=None, repr=False, compare=False, hash=False)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if isinstance(val, str) and len(val) > 20:
            val = val[:17] + "..."
        tag = self.type.name if isinstance(self.type, Enum) else self.type
        return f"Token({tag}, {val!r}, @{self.position})"

    @property
    def end(self) -> int | None:
        """End offset (exclusive) when the value is still the matched text.

        Returns None once classification replaced the value with something
        other than a string, since the source length is no longer known.
        """
        if isinstance(self.value, str):
            return self.position + len(self.value)
        return None

    def link(self, following: Token | None) -> None:
        """Attach the following token (stream use only)."""
        object.__setattr__(self, "next", following)


def same_tag(left: TokenTag, right: TokenTag) -> bool:
    """Compare two tags by type and value.

    ``True`` does not match ``1`` and ``1.0`` does not match ``1``, although
    Python equality treats them as equal.
    """
    return type(left) is type(right) and left == right
