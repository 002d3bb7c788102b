"""Utility modules for Lexis.

Provides:
- logger: get_logger and scanner_logger
"""

from lexis.utils.logger import get_logger, scanner_logger

__all__ = ["get_logger", "scanner_logger"]
