"""Structured JSON logging with redaction of message content.

What:
  Offer a small facade over a text stream so mailterm components emit one JSON
  object per line with a stable set of fields.

Why:
  The reader's stdout belongs to the user: subjects and bodies are printed
  there. Diagnostics therefore go to stderr (or a file chosen with
  ``--log-file``) and must never echo message content or credentials.

How:
  :class:`JsonLogger` builds a payload with ``ts``, ``lvl``, ``msg`` and
  ``component``, merges a recursively redacted copy of the keyword context, and
  writes it with :func:`json.dump`, flushing after every line.

Interfaces:
  :class:`JsonLogger`, :func:`get_logger`, :func:`set_log_stream`.

Invariants & Safety:
  - ``subject``, ``body``, ``preview`` and ``password`` values are replaced by
    ``[redacted]`` at any nesting depth.
"""
from __future__ import annotations

import json
import sys
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO


REDACTED = "[redacted]"
_SENSITIVE_KEYS = frozenset({"subject", "body", "preview", "password"})
_STREAM: Optional[TextIO] = None


def _default_stream() -> TextIO:
    return _STREAM if _STREAM is not None else sys.stderr


@dataclass
class JsonLogger:
    """Structured JSON logger with automatic redaction.

    What:
      Emit single-line JSON entries carrying a timestamp, severity, component
      tag, and optional context fields.

    Why:
      A uniform schema keeps log files greppable and lets tests assert on
      entries without parsing free-form text.

    How:
      Resolve the destination stream at write time (so :func:`set_log_stream`
      affects existing loggers unless a stream was pinned), merge the redacted
      extras, and serialise with :mod:`json`.
    """

    component: str = "mailterm"
    stream: Optional[TextIO] = field(default=None)

    def log(self, level: str, message: str, *, extra: Optional[Dict[str, Any]] = None) -> None:
        """Write one JSON entry for ``message`` at ``level``."""

        payload: Dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "lvl": level.upper(),
            "msg": message,
            "component": self.component,
        }
        if extra:
            payload.update(self._redact(extra))
        stream = self.stream if self.stream is not None else _default_stream()
        json.dump(payload, stream, separators=(",", ":"), default=str)
        stream.write("\n")
        stream.flush()

    def info(self, message: str, **kwargs: Any) -> None:
        self.log("INFO", message, extra=kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self.log("WARN", message, extra=kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self.log("ERROR", message, extra=kwargs)

    @staticmethod
    def _redact(data: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of ``data`` with sensitive values masked recursively."""

        result: Dict[str, Any] = {}
        for key, value in data.items():
            if key in _SENSITIVE_KEYS:
                result[key] = REDACTED
            elif isinstance(value, dict):
                result[key] = JsonLogger._redact(value)
            else:
                result[key] = value
        return result


def set_log_stream(stream: Optional[TextIO]) -> None:
    """Route loggers without a pinned stream to ``stream`` (``None`` = stderr)."""

    global _STREAM
    _STREAM = stream


def get_logger(component: str) -> JsonLogger:
    """Return a :class:`JsonLogger` bound to ``component``."""

    return JsonLogger(component=component)
