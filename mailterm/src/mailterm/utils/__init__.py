"""Shared helpers for mailterm.

Re-exports the structured logging facade so callers can write
``from mailterm.utils import get_logger``.
"""

from .logging import JsonLogger, get_logger, set_log_stream

__all__ = ["JsonLogger", "get_logger", "set_log_stream"]
