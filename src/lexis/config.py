"""ContextVar-based scan configuration for Lexis.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Scanners read the active config when they compile their pattern and when
they split input.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent
    storage, so no locks are needed.

Usage:
    from lexis.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(strict=True)):
        stream = scanner.tokenize(source)

"""

import re
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

DEFAULT_FLAGS = re.IGNORECASE | re.UNICODE


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        flags: Default regex flags for scanners that do not override
            ``Scanner.flags()``. Applied when a scanner first compiles its
            pattern; later changes do not affect an already compiled scanner.
        strict: Raise ScanError when the regex engine fails to split the
            input, instead of falling back to a single whole-input token
        source_file: Label used in error and log messages

    """

    flags: re.RegexFlag = DEFAULT_FLAGS
    strict: bool = False
    source_file: str | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ScanConfig.from_dict({"strict": True, "other": 1})
            >>> config.strict
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Thread Safety:
        Only affects the current thread's context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(strict=True)):
        ...     get_scan_config().strict
        True

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "DEFAULT_FLAGS",
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
