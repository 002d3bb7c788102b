"""Logger naming for Lexis.

Everything Lexis logs lives under the ``lexis`` namespace, so a consumer can
silence or capture the whole library with one logger. Scan activity is
further split per concrete scanner class:

- ``lexis.scanner``: pattern compilation (module logger)
- ``lexis.scanner.<ScannerClass>``: per-scan token counts and engine fallback

No handlers are installed here.

Example:
    >>> logging.getLogger("lexis.scanner.QueryScanner").setLevel(logging.ERROR)
"""

from __future__ import annotations

import logging

_ROOT = "lexis"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``lexis`` namespace.

    Names already under ``lexis`` are used as given.
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)


def scanner_logger(scanner_cls: type) -> logging.Logger:
    """Return the logger a scanner class reports its scans on.

    Args:
        scanner_cls: Concrete scanner class

    Returns:
        Logger named ``lexis.scanner.<ClassName>``

    Example:
        >>> scanner_logger(CalcScanner).name
        'lexis.scanner.CalcScanner'
    """
    return get_logger(f"scanner.{scanner_cls.__name__}")
