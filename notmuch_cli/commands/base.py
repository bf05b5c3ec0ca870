"""Abstract base class for notmuch commands."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config.config_file import NotmuchConfig
    from ..models.invocation import InvocationContext


class Command(ABC):
    """
    Interface implemented once per registered command.

    The dispatcher owns the configuration handle; a command may read and
    modify it (and save it), but must never close it.
    """

    @abstractmethod
    def run(
        self,
        context: "InvocationContext",
        config: "NotmuchConfig",
        argv: list[str],
    ) -> int:
        """
        Run the command.

        Parameters
        ----------
        context : InvocationContext
            Shared option values, format version and collaborators
        config : NotmuchConfig
            Configuration opened by the dispatcher
        argv : list[str]
            Command arguments, starting with the command name. Empty when
            no command name was given.

        Returns
        -------
        int
            Process exit status
        """
        pass
