"""Exception classes for Lexis.

The scanning and cursor operations are silent by design: misses return
None or fall back. Exceptions are reserved for consumer programming errors
(a pattern set that does not compile) and for strict mode.
"""

from __future__ import annotations


class LexisError(Exception):
    """Base exception for all Lexis errors.

    Subclass this for specific error categories.
    """

    pass


class PatternError(LexisError):
    """The composed pattern of a scanner failed to compile.

    The underlying ``re.error`` is chained as ``__cause__``.
    """

    def __init__(self, scanner: str, pattern: str, message: str) -> None:
        """Initialize pattern error.

        Args:
            scanner: Name of the scanner class
            pattern: The composed expression that failed to compile
            message: Description from the regex engine
        """
        self.scanner = scanner
        self.pattern = pattern
        super().__init__(f"Scanner '{scanner}': invalid pattern {pattern!r}: {message}")


class ScanError(LexisError):
    """The regex engine failed while splitting input in strict mode.

    In the default (non-strict) configuration the scanner falls back to a
    single whole-input token instead of raising.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        col_offset: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize scan error with optional location.

        Args:
            message: Error description
            lineno: Line number where scanning failed (1-indexed)
            col_offset: Column where scanning failed (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.col_offset = col_offset
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
            if col_offset is not None:
                location += f"{col_offset}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")
