"""Config lifecycle gate.

Each command in the registry states whether it may run without an
existing configuration file. open_config() enforces that policy and
config_lifecycle() guarantees the handle is closed exactly once, however
the command exits.
"""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from ..errors import ConfigError
from .config_file import NotmuchConfig

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "NOTMUCH_CONFIG"
DEFAULT_CONFIG_NAME = ".notmuch-config"


def resolve_config_path(explicit: Optional[str] = None) -> Path:
    """Resolve the configuration file location.

    Resolution order:
    1. Explicit --config path
    2. NOTMUCH_CONFIG environment variable
    3. ~/.notmuch-config

    Args:
        explicit: Path given with --config, if any.

    Returns:
        Path to the configuration file (which may not exist).
    """
    if explicit:
        return Path(explicit).expanduser()

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    return Path.home() / DEFAULT_CONFIG_NAME


def open_config(path: Optional[str], create: bool) -> NotmuchConfig:
    """Open the configuration, creating it in memory if allowed.

    Args:
        path: Alternate configuration file, or None for the default.
        create: If True, a missing file yields a new configuration holding
            the defaults (is_new is set). If False, a missing file fails.

    Returns:
        Open configuration handle.

    Raises:
        ConfigError: If the file is missing and create is False, or it
            cannot be read.
    """
    config_path = resolve_config_path(path)

    if config_path.exists():
        return NotmuchConfig.load(config_path)

    if not create:
        raise ConfigError(
            f"Configuration file {config_path} not found.\n"
            "Try running 'notmuch setup' to create a configuration."
        )

    return NotmuchConfig.create(config_path)


@contextmanager
def config_lifecycle(path: Optional[str], create: bool) -> Iterator[NotmuchConfig]:
    """Open the configuration for the duration of a with block.

    The handle is closed exactly once when the block exits, whether it
    returns normally or raises.
    """
    config = open_config(path, create)
    try:
        yield config
    finally:
        config.close()
