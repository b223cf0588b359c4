"""mailterm configuration package.

What:
  Provide the import surface for the account schema and the YAML loader.

Why:
  Callers should validate credentials through the schema rather than reading
  YAML themselves.

How:
  Re-export the loader helpers, error types, and :class:`AccountConfig`.

Interfaces:
  - load_config / save_config: Read and atomically write ``config.yaml``.
  - resolve_config_path / default_config_path: Path precedence helpers.
  - AccountConfig / ConfigError / ConfigNotFoundError.
"""

from .loader import (
    ConfigError,
    ConfigNotFoundError,
    default_config_path,
    load_config,
    resolve_config_path,
    save_config,
)
from .schema import AccountConfig

__all__ = [
    "AccountConfig",
    "ConfigError",
    "ConfigNotFoundError",
    "default_config_path",
    "load_config",
    "resolve_config_path",
    "save_config",
]
