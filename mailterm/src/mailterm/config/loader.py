"""Locate, load, and persist the mailterm account configuration.

What:
  Resolve where ``config.yaml`` lives, parse it into an
  :class:`~mailterm.config.schema.AccountConfig`, and write it back after a
  successful ``login``.

Why:
  Credentials must reach the IMAP session as an explicit value. Reading them
  from one validated document, instead of process-wide environment variables,
  keeps the session constructor honest and makes tests independent of the
  caller's shell.

How:
  The path precedence is: explicit argument, the ``MAILTERM_CONFIG_PATH``
  environment variable, then ``~/.config/mailterm/config.yaml``. Documents are
  read with ``yaml.safe_load`` and validated through Pydantic; writes go to a
  temporary file in the target directory that is renamed into place.

Interfaces:
  :func:`resolve_config_path`, :func:`default_config_path`,
  :func:`load_config`, :func:`save_config`, :class:`ConfigError`,
  :class:`ConfigNotFoundError`.

Invariants:
  - Every returned configuration has passed strict schema validation.
  - Saved files are readable by the owner only.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError

from .schema import AccountConfig


_CONFIG_ENV = "MAILTERM_CONFIG_PATH"


class ConfigError(Exception):
    """Base error for configuration parsing, validation, or persistence failures.

    What:
      Represent problems with the user's ``config.yaml``.

    Why:
      The CLI reports configuration mistakes differently from IMAP or rendering
      failures, so they get their own family.

    How:
      Carry a message that always names the offending path.
    """


class ConfigNotFoundError(ConfigError):
    """Raised when no configuration file exists at the resolved path."""


def default_config_path() -> Path:
    """Return ``~/.config/mailterm/config.yaml``."""

    return Path("~").expanduser() / ".config" / "mailterm" / "config.yaml"


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Return the configuration path honouring the precedence chain.

    Args:
      path: Explicit location requested by the caller, if any.

    Returns:
      The expanded :class:`~pathlib.Path` that should be read or written.
    """

    if path is not None:
        return Path(path).expanduser()
    env_path = os.environ.get(_CONFIG_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return default_config_path()


def load_config(path: Optional[Union[str, Path]] = None) -> AccountConfig:
    """Read and validate the account configuration.

    What:
      Load the YAML document at the resolved path into an
      :class:`AccountConfig`.

    Why:
      Every command that talks to the server needs validated credentials before
      opening a socket.

    How:
      Resolve the path, read it, parse with ``yaml.safe_load``, and validate the
      mapping. Filesystem, YAML, and schema failures are converted to
      :class:`ConfigError` carrying the path.

    Args:
      path: Optional explicit location of ``config.yaml``.

    Returns:
      The validated configuration.

    Raises:
      ConfigNotFoundError: If the file does not exist.
      ConfigError: If the file cannot be read, parsed, or validated.
    """

    target = resolve_config_path(path)
    try:
        text = target.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigNotFoundError(f"Configuration file missing: {target}") from exc
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file {target}: {exc}") from exc
    try:
        payload = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {target}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ConfigError(f"{target} must contain a mapping at the top-level")
    try:
        return AccountConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration in {target}: {exc}") from exc


def save_config(config: AccountConfig, path: Optional[Union[str, Path]] = None) -> Path:
    """Persist ``config`` atomically and return the path written.

    Parent directories are created when missing. The temporary file is created
    with mode ``0600`` by :mod:`tempfile`, so the password never becomes
    world-readable, even briefly.
    """

    target = resolve_config_path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = yaml.safe_dump(config.model_dump(mode="json"), sort_keys=True)
    with tempfile.NamedTemporaryFile(
        "w", dir=str(target.parent), delete=False, encoding="utf-8"
    ) as handle:
        handle.write(payload)
        temp_path = Path(handle.name)
    temp_path.replace(target)
    return target
