# Area: Shared
"""
Shared utilities used by the engines, the daily scheduler and the CLI.

This package contains:
- Logging configuration
"""

from .logging_config import (
    setup_logging,
    log_config_error,
    resolve_level,
    TerminalFormatter,
    JSONFormatter,
)

__all__ = [
    "setup_logging",
    "log_config_error",
    "resolve_level",
    "TerminalFormatter",
    "JSONFormatter",
]
