"""The `notmuch help` command."""

from ..options.shared_options import minimal_options, process_shared_options
from .base import Command


class HelpCommand(Command):
    """Show usage, or hand off to the man page for a command or topic."""

    def run(self, context, config, argv):
        args = minimal_options(context, "help", argv)
        status = process_shared_options(context, "help")
        if status is not None:
            return status

        topic = args[0] if args else None
        return context.help_router.help_for(topic)
