"""Options inherited by every notmuch command.

Any command schema can inherit the shared set by passing
``parents=[shared_options_parser()]`` when building its parser, so that
--version, --help and --uuid are recognized the same way at the top level
and after a command name. Commands that accept the shared set must call
process_shared_options() with their own name once parsing is done.
"""

import argparse
import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Optional

from .. import __version__
from ..exit_codes import EXIT_SUCCESS
from .parser import OptionParser, parse_arguments

if TYPE_CHECKING:
    from ..models.invocation import InvocationContext

logger = logging.getLogger(__name__)


def shared_options_parser() -> OptionParser:
    """Build the parent parser declaring the shared option set."""
    parser = OptionParser()
    parser.add_argument(
        "-v", "--version", action="store_true", help="Print the version and exit"
    )
    parser.add_argument(
        "-h", "--help", action="store_true", help="Show help for the command"
    )
    parser.add_argument(
        "-u",
        "--uuid",
        default=None,
        help="Fail unless the database has this uuid",
    )
    return parser


def process_shared_options(
    context: "InvocationContext", command_name: Optional[str]
) -> Optional[int]:
    """Apply the side effects of the shared options.

    --version takes precedence over --help when both were given.

    Args:
        context: Current invocation context.
        command_name: Command whose help is shown for --help, or None for
            the top-level usage.

    Returns:
        Exit status to terminate with, or None to continue running the
        command.
    """
    if context.shared.version_requested:
        print(f"notmuch {__version__}")
        return EXIT_SUCCESS

    if context.shared.help_requested:
        logger.debug("Routing --help for %s", command_name or "notmuch")
        return context.help_router.help_for(command_name)

    return None


def minimal_options(
    context: "InvocationContext", command_name: str, argv: Sequence[str]
) -> list[str]:
    """Parse only the shared options for a command that skips the database.

    Parsing stops at the first non-option argument; it and everything after
    it are returned unparsed.

    Args:
        context: Current invocation context, updated with the shared values.
        command_name: Name of the command being parsed (used in messages).
        argv: Command arguments, starting with the command name.

    Returns:
        The arguments following the options.

    Raises:
        OptionParseError: If an option is unknown or malformed.
    """
    parser = OptionParser(
        prog=f"notmuch {command_name}", parents=[shared_options_parser()]
    )
    parser.add_argument("args", nargs=argparse.REMAINDER)

    options = parse_arguments(parser, argv[1:])
    context.shared.absorb(options)
    return options.args
