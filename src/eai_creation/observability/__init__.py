"""Observability - structured logging."""

from .logger import LogContext, configure_from_config, configure_logging, get_context

__all__ = [
    "configure_logging",
    "configure_from_config",
    "get_context",
    "LogContext",
]
