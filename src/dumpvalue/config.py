"""Configuration file resolution and XDG data directory.

This module decides *which* configuration file a command reads and where
diagnostic files live:

* **Configuration file** -- :func:`resolve_config_path` applies the
  precedence chain CLI flag > ``DUMPVALUE_CONFIG`` environment variable >
  ``./ccnet.config`` in the working directory.
* **Data directory** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.dumpvalue/`` on macOS and Windows. Crash logs are written below it.

Parsing the resolved file is the job of :mod:`dumpvalue.parser.loader`.
"""

from __future__ import annotations

import os
import platform
from pathlib import Path
from typing import Optional

from dumpvalue.exceptions import ConfigError, ConfigErrorKind

_APP_NAME = "dumpvalue"
CONFIG_ENV_VAR = "DUMPVALUE_CONFIG"
DEFAULT_CONFIG_FILENAME = "ccnet.config"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/dumpvalue/`` (default ``~/.local/share/dumpvalue/``).
    On macOS/Windows: ``~/.dumpvalue/``.

    Returns:
        Absolute path to the data directory (guaranteed to exist).
    """
    if _is_xdg_platform():
        env_value = os.environ.get("XDG_DATA_HOME", "")
        base = Path(env_value) if env_value else Path.home() / ".local" / "share"
        path = base / _APP_NAME
    else:
        path = Path.home() / f".{_APP_NAME}"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Precedence resolution ---


def resolve_config_path(cli_config: Optional[str] = None) -> Path:
    """Resolve the configuration file to read.

    Precedence (high to low):
        1. CLI flag (``--config``)
        2. Environment variable (``DUMPVALUE_CONFIG``)
        3. ``./ccnet.config`` in the current working directory

    Returns:
        Path of the configuration file. Paths from the flag or environment
        are returned as given, even if the file does not exist yet; the
        loader reports that.

    Raises:
        ConfigError: With ``NOT_FOUND`` when no flag or environment variable
            is set and there is no ``ccnet.config`` in the working directory.
    """
    if cli_config:
        return Path(cli_config).expanduser()

    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        return Path(env_config).expanduser()

    default = Path.cwd() / DEFAULT_CONFIG_FILENAME
    if default.is_file():
        return default

    raise ConfigError(
        f"No configuration file given. Pass --config, set {CONFIG_ENV_VAR}, "
        f"or create ./{DEFAULT_CONFIG_FILENAME}",
        kind=ConfigErrorKind.NOT_FOUND,
    )
