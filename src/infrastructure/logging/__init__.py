"""Logging infrastructure package.

Usage:
    from src.core.container import get_logger
"""

from src.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
