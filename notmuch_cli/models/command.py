"""Registry entries for commands and help topics."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ..commands.base import Command


@dataclass(frozen=True)
class CommandDescriptor:
    """Binds a command name to the handler that implements it.

    Attributes:
        name: Command name as typed on the command line, or None for the
            action run when no command is given.
        handler: Command instance invoked with the opened configuration.
        create_config: Whether a missing configuration may be created for
            this command instead of failing.
        summary: One-line description shown in the usage table.
    """

    name: Optional[str]
    handler: "Command"
    create_config: bool
    summary: str


@dataclass(frozen=True)
class HelpTopicDescriptor:
    """A documentation page that has no runnable command behind it."""

    name: str
    summary: str
