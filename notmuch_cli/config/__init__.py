"""Configuration file handling for the notmuch front end."""

from .config_file import NotmuchConfig
from .lifecycle import config_lifecycle, open_config, resolve_config_path

__all__ = [
    "NotmuchConfig",
    "config_lifecycle",
    "open_config",
    "resolve_config_path",
]
