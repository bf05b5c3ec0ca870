"""Help and documentation routing.

`notmuch help` prints the command table; `notmuch help <command>` and
`notmuch help <topic>` hand off to the man page viewer, which replaces
the running process.
"""

import logging
import os
import sys
from typing import TYPE_CHECKING, NoReturn, Optional, TextIO

from ..errors import HelpViewerError
from ..exit_codes import EXIT_FAILURE, EXIT_SUCCESS

if TYPE_CHECKING:
    from ..commands.registry import CommandRegistry

logger = logging.getLogger(__name__)

HELP_SYSTEM_TEXT = """The notmuch help system.

\tNotmuch uses the man command to display help. In case
\tof difficulties check that MANPATH includes the pages
\tinstalled by notmuch.

\tTry "notmuch help" for a list of topics.
"""


class ManPageViewer:
    """Displays a man page by replacing the current process with man(1)."""

    def __init__(self, program: str = "man"):
        self.program = program

    def show(self, page: str) -> NoReturn:
        """Exec the viewer for page.

        Does not return on success: the process image is replaced and
        nothing owned by the caller is cleaned up.

        Raises:
            HelpViewerError: If the viewer cannot be executed.
        """
        # exec discards anything still sitting in Python's buffers
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            os.execvp(self.program, [self.program, page])
        except OSError as e:
            raise HelpViewerError(f"exec {self.program}: {e.strerror}") from e


class HelpRouter:
    """Resolves help requests against the command and topic registry.

    Args:
        registry: Registry of commands and help topics.
        viewer: Man page viewer. Defaults to ManPageViewer().
    """

    def __init__(
        self, registry: "CommandRegistry", viewer: Optional[ManPageViewer] = None
    ):
        self.registry = registry
        self.viewer = viewer or ManPageViewer()

    def usage(self, out: TextIO) -> None:
        """Write the command and help topic tables to out."""
        out.write(
            "Usage: notmuch --help\n"
            "       notmuch --version\n"
            "       notmuch <command> [args...]\n"
        )
        out.write("\n")
        out.write("The available commands are as follows:\n")
        out.write("\n")
        for command in self.registry.commands:
            if command.name:
                out.write(f"  {command.name:<12s}  {command.summary}\n")

        out.write("\n")
        out.write("Additional help topics are as follows:\n")
        out.write("\n")
        for topic in self.registry.topics:
            out.write(f"  {topic.name:<12s}  {topic.summary}\n")

        out.write("\n")
        out.write(
            'Use "notmuch help <command or topic>" for more details '
            "on each command or topic.\n\n"
        )

    def help_for(self, topic_name: Optional[str]) -> int:
        """Show help for a command or topic.

        Commands are matched before help topics. A match hands off to the
        man page viewer and does not return unless the viewer fails.

        Args:
            topic_name: Command or topic name, or None for the usage text.

        Returns:
            EXIT_SUCCESS after printing usage or the help system text,
            EXIT_FAILURE if topic_name is not known.

        Raises:
            HelpViewerError: If the man page viewer cannot be started.
        """
        if topic_name is None:
            print("The notmuch mail system.\n")
            self.usage(sys.stdout)
            return EXIT_SUCCESS

        if topic_name == "help":
            print(HELP_SYSTEM_TEXT)
            return EXIT_SUCCESS

        command = self.registry.find_command(topic_name)
        if command is not None:
            self._show_page(command.name)

        topic = self.registry.find_topic(topic_name)
        if topic is not None:
            self._show_page(topic.name)

        print(
            f"\nSorry, {topic_name} is not a known command. "
            "There's not much I can do to help.\n",
            file=sys.stderr,
        )
        return EXIT_FAILURE

    def _show_page(self, name: str) -> NoReturn:
        page = f"notmuch-{name}"
        logger.debug("Handing off to man page %s", page)
        self.viewer.show(page)
