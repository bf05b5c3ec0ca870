"""Key-file configuration store.

The configuration file uses the familiar INI layout:

    [database]
    path=/home/user/mail

    [user]
    name=Jane Doe
    primary_email=jane@example.com
    other_email=jane@work.example.com;

    [new]
    tags=unread;inbox;
    ignore=

    [search]
    exclude_tags=deleted;spam;

    [maildir]
    synchronize_flags=true

List values are separated by semicolons, with a trailing semicolon.
"""

import configparser
import getpass
import logging
import os
import socket
from collections.abc import Iterator
from pathlib import Path
from typing import List, Optional

from ..errors import ConfigError

logger = logging.getLogger(__name__)

LIST_SEPARATOR = ";"


def _default_database_path() -> str:
    maildir = os.environ.get("MAILDIR")
    if maildir:
        return maildir
    return str(Path.home() / "mail")


def _default_user_name() -> str:
    name = os.environ.get("NAME")
    if name:
        return name
    try:
        import pwd

        gecos = pwd.getpwuid(os.getuid()).pw_gecos
    except (ImportError, KeyError):
        return ""
    return gecos.split(",")[0]


def _default_primary_email() -> str:
    email = os.environ.get("EMAIL")
    if email:
        return email
    return f"{getpass.getuser()}@{socket.getfqdn()}"


def _default_values() -> dict[str, dict[str, str]]:
    return {
        "database": {"path": _default_database_path()},
        "user": {
            "name": _default_user_name(),
            "primary_email": _default_primary_email(),
        },
        "new": {"tags": "unread;inbox;", "ignore": ""},
        "search": {"exclude_tags": "deleted;spam;"},
        "maildir": {"synchronize_flags": "true"},
    }


def split_list(value: str) -> List[str]:
    """Split a semicolon separated list value, dropping empty items."""
    return [item.strip() for item in value.split(LIST_SEPARATOR) if item.strip()]


def join_list(values: List[str]) -> str:
    """Join list items into the stored representation."""
    if not values:
        return ""
    return LIST_SEPARATOR.join(values) + LIST_SEPARATOR


class NotmuchConfig:
    """An open notmuch configuration.

    Instances are created by load() or create(); values missing from the
    file are filled in from the defaults but only written back by save().

    Attributes:
        path: Location of the configuration file.
        is_new: True if no file existed when the configuration was opened.
        closed: True once close() has been called.
    """

    def __init__(self, path: Path, parser: configparser.ConfigParser, is_new: bool):
        self.path = path
        self.is_new = is_new
        self.closed = False
        self._parser = parser
        self._fill_defaults()

    @staticmethod
    def _new_parser() -> configparser.ConfigParser:
        parser = configparser.ConfigParser(interpolation=None)
        parser.optionxform = str  # keep key case as written
        return parser

    @classmethod
    def load(cls, path: Path) -> "NotmuchConfig":
        """Read an existing configuration file.

        Raises:
            ConfigError: If the file cannot be read or parsed.
        """
        parser = cls._new_parser()
        try:
            with path.open(encoding="utf-8") as f:
                parser.read_file(f, source=str(path))
        except OSError as e:
            raise ConfigError(
                f"Cannot read configuration file {path}: {e.strerror}"
            ) from e
        except configparser.Error as e:
            raise ConfigError(f"Failed to parse configuration file {path}: {e}") from e
        logger.debug("Loaded configuration from %s", path)
        return cls(path, parser, is_new=False)

    @classmethod
    def create(cls, path: Path) -> "NotmuchConfig":
        """Create an in-memory configuration holding the defaults."""
        logger.debug("Creating new configuration for %s", path)
        return cls(path, cls._new_parser(), is_new=True)

    def _fill_defaults(self) -> None:
        for section, values in _default_values().items():
            if not self._parser.has_section(section):
                self._parser.add_section(section)
            for key, value in values.items():
                if not self._parser.has_option(section, key):
                    self._parser.set(section, key, value)

    def get(self, section: str, key: str) -> Optional[str]:
        """Return the raw value of section.key, or None if unset."""
        return self._parser.get(section, key, fallback=None)

    def get_list(self, section: str, key: str) -> List[str]:
        """Return section.key split into list items."""
        value = self.get(section, key)
        return split_list(value) if value else []

    def set(self, section: str, key: str, value: str) -> None:
        """Set section.key to a single value, creating the section."""
        if not self._parser.has_section(section):
            self._parser.add_section(section)
        self._parser.set(section, key, value)

    def set_list(self, section: str, key: str, values: List[str]) -> None:
        """Set section.key to a list of values."""
        self.set(section, key, join_list(values))

    def remove(self, section: str, key: str) -> None:
        """Remove section.key, dropping the section once it is empty."""
        if not self._parser.has_section(section):
            return
        self._parser.remove_option(section, key)
        if not self._parser.options(section):
            self._parser.remove_section(section)

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield ("section.key", value) for every stored value."""
        for section in self._parser.sections():
            for key, value in self._parser.items(section):
                yield f"{section}.{key}", value

    @property
    def database_path(self) -> str:
        return self.get("database", "path") or ""

    @property
    def user_name(self) -> str:
        return self.get("user", "name") or ""

    @property
    def user_primary_email(self) -> str:
        return self.get("user", "primary_email") or ""

    @property
    def user_other_email(self) -> List[str]:
        return self.get_list("user", "other_email")

    @property
    def new_tags(self) -> List[str]:
        return self.get_list("new", "tags")

    @property
    def new_ignore(self) -> List[str]:
        return self.get_list("new", "ignore")

    @property
    def search_exclude_tags(self) -> List[str]:
        return self.get_list("search", "exclude_tags")

    @property
    def maildir_synchronize_flags(self) -> bool:
        value = self.get("maildir", "synchronize_flags") or "true"
        return value.strip().lower() in ("true", "yes", "1")

    def save(self) -> None:
        """Write the configuration to its file.

        The file is written to a temporary sibling and renamed into place
        so a failed write never leaves a truncated configuration behind.

        Raises:
            ConfigError: If the file cannot be written.
        """
        temp_file = self.path.with_name(self.path.name + ".tmp")
        try:
            with temp_file.open("w", encoding="utf-8") as f:
                self._parser.write(f, space_around_delimiters=False)
            temp_file.replace(self.path)
        except OSError as e:
            raise ConfigError(
                f"Cannot write configuration file {self.path}: {e.strerror}"
            ) from e
        self.is_new = False
        logger.debug("Saved configuration to %s", self.path)

    def close(self) -> None:
        """Release the configuration. Later access is not supported."""
        self.closed = True
        logger.debug("Closed configuration %s", self.path)
