"""Abstract interface for the mail database backend."""

import argparse
from abc import ABC, abstractmethod
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config.config_file import NotmuchConfig


class DatabaseMode(Enum):
    """Access mode requested when opening the database."""

    READ_ONLY = "read_only"
    READ_WRITE = "read_write"


class Database(ABC):
    """
    Abstract base class for an open mail database.

    Backends are opened by a factory called as ``factory(path, mode)``
    and must implement the methods below. The front end only decides
    whether and how to invoke a command; the backend does the indexing
    and searching.
    """

    @abstractmethod
    def get_revision(self) -> tuple[int, str]:
        """
        Return the current revision of the database.

        Returns
        -------
        tuple[int, str]
            Revision number and database uuid. The uuid changes whenever
            the database is rebuilt or replaced.
        """
        pass

    @abstractmethod
    def run_command(
        self,
        name: str,
        options: argparse.Namespace,
        config: "NotmuchConfig",
    ) -> int:
        """
        Execute a command against this database.

        Parameters
        ----------
        name : str
            Command name (for example ``search`` or ``tag``)
        options : argparse.Namespace
            Options parsed from the command's own schema
        config : NotmuchConfig
            Open configuration for the invocation

        Returns
        -------
        int
            Process exit status for the command
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the database."""
        pass
