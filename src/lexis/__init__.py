"""
Lexis — regex-driven lexing primitive for hand-written parsers.

Subclass Scanner with a set of patterns and a classifier, call tokenize(),
and walk the resulting TokenStream with lookahead, peek and rewind.

Quick Start:
    >>> from lexis import Classification, Scanner
    >>>
    >>> class Calc(Scanner):
    ...     NUMBER = "number"
    ...     WORD = "word"
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
    >>>
    >>> stream = Calc().tokenize("12 foo 34")
    >>> stream.read()
    Token(number, 12, @0)
    >>> stream.context.where_token(stream.look_ahead())
    (1, 4)
"""

from lexis.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from lexis.errors import LexisError, PatternError, ScanError
from lexis.location import PositionResolver, SourceLocation
from lexis.scanner import Classification, Scanner
from lexis.stream import TokenStream
from lexis.tokens import Token, TokenTag

__version__ = "0.1.0"

__all__ = [
    # Scanning
    "Classification",
    "Scanner",
    "Token",
    "TokenStream",
    "TokenTag",
    # Positions
    "PositionResolver",
    "SourceLocation",
    # Configuration
    "ScanConfig",
    "get_scan_config",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    # Errors
    "LexisError",
    "PatternError",
    "ScanError",
    "__version__",
]
