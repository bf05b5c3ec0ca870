"""Command-line interface for notmuch.

This module provides the main entry point for the notmuch front end. It
parses the global options, resolves the command, opens the configuration
according to the command's policy, and runs the command.
"""

import logging
import os
import sys
from collections.abc import Sequence
from typing import Optional

from .commands.registry import build_default_registry
from .config.lifecycle import config_lifecycle
from .diagnostics.memory_report import (
    memory_report_path,
    start_memory_tracking,
    write_memory_report,
)
from .errors import NotmuchError
from .exit_codes import EXIT_FAILURE
from .models.invocation import InvocationContext
from .options.parser import OptionParser, parse_arguments
from .options.shared_options import process_shared_options, shared_options_parser

logger = logging.getLogger(__name__)

DEBUG_ENV = "NOTMUCH_DEBUG"

# Global options whose value may be given as the next argument
VALUE_OPTIONS = ("-c", "--config", "-u", "--uuid")


def build_parser() -> OptionParser:
    """Build the parser for the options given before the command name."""
    parser = OptionParser(
        prog="notmuch",
        description="Not much of an email program (just index and search)",
        parents=[shared_options_parser()],
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Use an alternate configuration file",
    )
    return parser


def split_global_options(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split argv into the global options and the command with its arguments.

    The global options end at the first argument that does not start with
    "-", or at a literal "--" (which is dropped). The command arguments are
    returned exactly as given, so a command still sees its own "--".

    Returns:
        (global options, [command name, *command arguments])
    """
    argv = list(argv)
    index = 0
    while index < len(argv):
        arg = argv[index]
        if arg == "--":
            return argv[:index], argv[index + 1 :]
        if arg == "-" or not arg.startswith("-"):
            break
        index += 2 if arg in VALUE_OPTIONS else 1
    return argv[:index], argv[index:]


def dispatch(context: InvocationContext, argv: Sequence[str]) -> int:
    """Run one invocation of the front end.

    Args:
        context: Invocation context holding the registry and collaborators.
        argv: Command-line arguments, without the program name.

    Returns:
        Exit status of the command.

    Raises:
        NotmuchError: If a gate rejects the invocation.
    """
    global_argv, command_argv = split_global_options(argv)
    options = parse_arguments(build_parser(), global_argv)
    context.config_path = options.config
    context.shared.absorb(options)

    command_name = command_argv[0] if command_argv else None
    status = process_shared_options(context, command_name)
    if status is not None:
        return status

    descriptor = context.registry.resolve(command_name)

    logger.debug(
        "Dispatching %s (create_config=%s)",
        command_name or "default command",
        descriptor.create_config,
    )
    with config_lifecycle(context.config_path, descriptor.create_config) as config:
        return descriptor.handler.run(context, config, command_argv)


def _configure_logging() -> None:
    if os.environ.get(DEBUG_ENV):
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(name)s: %(message)s",
        )


def main(
    argv: Optional[Sequence[str]] = None,
    context: Optional[InvocationContext] = None,
) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
        context: Invocation context (defaults to one using the standard
            command registry).

    Returns:
        Exit code (0 for success, 1 for error, 20/21 for unsupported
        output format versions).
    """
    if argv is None:
        argv = sys.argv[1:]

    _configure_logging()

    report_path = memory_report_path()
    if report_path:
        start_memory_tracking()

    if context is None:
        context = InvocationContext(registry=build_default_registry())

    ret = EXIT_FAILURE
    try:
        ret = dispatch(context, argv)
    except NotmuchError as e:
        print(e.format_message(), file=sys.stderr)
        ret = e.exit_code
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        ret = EXIT_FAILURE
    finally:
        if report_path:
            write_memory_report(report_path)

    return ret


if __name__ == "__main__":
    sys.exit(main())
