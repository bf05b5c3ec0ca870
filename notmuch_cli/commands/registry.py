"""Command and help topic registry.

The registry is built once per process and never changes. Lookups are
exact matches only; there is no prefix or fuzzy matching.
"""

from collections.abc import Sequence
from typing import Optional

from ..errors import UnknownCommandError
from ..models.command import CommandDescriptor, HelpTopicDescriptor


class CommandRegistry:
    """Ordered table of commands and help topics.

    Args:
        commands: Command descriptors, in the order shown in the usage text.
        topics: Help topic descriptors, in the order shown in the usage text.

    Raises:
        ValueError: If names are duplicated, a topic shadows a command, or
            there is not exactly one default (unnamed) command.
    """

    def __init__(
        self,
        commands: Sequence[CommandDescriptor],
        topics: Sequence[HelpTopicDescriptor] = (),
    ):
        self.commands = tuple(commands)
        self.topics = tuple(topics)
        self.validate()

    def validate(self) -> None:
        """Check the registry invariants."""
        defaults = [c for c in self.commands if c.name is None]
        if len(defaults) != 1:
            msg = f"Expected exactly one default command, found {len(defaults)}"
            raise ValueError(msg)

        command_names = [c.name for c in self.commands if c.name is not None]
        duplicates = {n for n in command_names if command_names.count(n) > 1}
        if duplicates:
            msg = f"Duplicate command names: {', '.join(sorted(duplicates))}"
            raise ValueError(msg)

        topic_names = [t.name for t in self.topics]
        duplicates = {n for n in topic_names if topic_names.count(n) > 1}
        if duplicates:
            msg = f"Duplicate help topic names: {', '.join(sorted(duplicates))}"
            raise ValueError(msg)

        collisions = set(command_names) & set(topic_names)
        if collisions:
            msg = (
                "Help topics collide with commands: "
                f"{', '.join(sorted(collisions))}"
            )
            raise ValueError(msg)

    def find_command(self, name: Optional[str]) -> Optional[CommandDescriptor]:
        """Return the command registered under name (None for the default)."""
        for command in self.commands:
            if command.name == name:
                return command
        return None

    def find_topic(self, name: str) -> Optional[HelpTopicDescriptor]:
        """Return the help topic registered under name, if any."""
        for topic in self.topics:
            if topic.name == name:
                return topic
        return None

    def resolve(self, name: Optional[str]) -> CommandDescriptor:
        """Return the command to dispatch for name.

        Raises:
            UnknownCommandError: If no command has that name.
        """
        command = self.find_command(name)
        if command is None:
            raise UnknownCommandError(name)
        return command

    @property
    def command_names(self) -> list[str]:
        return [c.name for c in self.commands if c.name is not None]

    @property
    def topic_names(self) -> list[str]:
        return [t.name for t in self.topics]


def build_default_registry() -> CommandRegistry:
    """Build the registry of every notmuch command and help topic."""
    from .config_command import ConfigCommand
    from .engine import (
        AddressCommand,
        CompactCommand,
        CountCommand,
        DumpCommand,
        InsertCommand,
        NewCommand,
        ReplyCommand,
        RestoreCommand,
        SearchCommand,
        ShowCommand,
        TagCommand,
    )
    from .help_command import HelpCommand
    from .main_command import MainCommand
    from .setup import SetupCommand

    commands = [
        CommandDescriptor(None, MainCommand(), True, "Notmuch main command."),
        CommandDescriptor(
            "setup",
            SetupCommand(),
            True,
            "Interactively set up notmuch for first use.",
        ),
        CommandDescriptor(
            "new",
            NewCommand(),
            False,
            "Find and import new messages to the notmuch database.",
        ),
        CommandDescriptor(
            "insert",
            InsertCommand(),
            False,
            "Add a new message into the maildir and notmuch database.",
        ),
        CommandDescriptor(
            "search",
            SearchCommand(),
            False,
            "Search for messages matching the given search terms.",
        ),
        CommandDescriptor(
            "address",
            AddressCommand(),
            False,
            "Get addresses from messages matching the given search terms.",
        ),
        CommandDescriptor(
            "show",
            ShowCommand(),
            False,
            "Show all messages matching the search terms.",
        ),
        CommandDescriptor(
            "count",
            CountCommand(),
            False,
            "Count messages matching the search terms.",
        ),
        CommandDescriptor(
            "reply",
            ReplyCommand(),
            False,
            "Construct a reply template for a set of messages.",
        ),
        CommandDescriptor(
            "tag",
            TagCommand(),
            False,
            "Add/remove tags for all messages matching the search terms.",
        ),
        CommandDescriptor(
            "dump",
            DumpCommand(),
            False,
            "Create a plain-text dump of the tags for each message.",
        ),
        CommandDescriptor(
            "restore",
            RestoreCommand(),
            False,
            "Restore the tags from the given dump file (see 'dump').",
        ),
        CommandDescriptor(
            "compact",
            CompactCommand(),
            False,
            "Compact the notmuch database.",
        ),
        CommandDescriptor(
            "config",
            ConfigCommand(),
            False,
            "Get or set settings in the notmuch configuration file.",
        ),
        # help may create the configuration but never saves it
        CommandDescriptor(
            "help",
            HelpCommand(),
            True,
            "This message, or more detailed help for the named command.",
        ),
    ]

    topics = [
        HelpTopicDescriptor("search-terms", "Common search term syntax."),
        HelpTopicDescriptor(
            "hooks", "Hooks that will be run before or after certain commands."
        ),
    ]

    return CommandRegistry(commands, topics)
