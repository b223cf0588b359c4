"""
Module: mailterm.__init__

What:
  Aggregate package exports for the mailterm terminal mail reader and expose
  the namespace segments (configuration, rendering core, IMAP session, and
  utilities).

Why:
  Entry points and tests import these subpackages by name; listing them keeps
  the public surface explicit.

Interfaces:
  - config: Account schema and YAML persistence.
  - core: Raw message to display text (parse, decode, render).
  - imap: UID-based session and pagination.
  - utils: Structured logging.
"""

__version__ = "0.1.0"

__all__ = [
    "config",
    "core",
    "imap",
    "utils",
]
