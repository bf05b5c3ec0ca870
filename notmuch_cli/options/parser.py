"""Argument parser that reports failures instead of exiting.

argparse normally prints a message and calls sys.exit(2) on bad input.
The front end needs parse failures to reach the dispatcher so the
configuration is released and the exit status is EXIT_FAILURE, so
OptionParser raises OptionParseError instead.
"""

import argparse
from collections.abc import Sequence

from ..errors import OptionParseError


class OptionParser(argparse.ArgumentParser):
    """ArgumentParser raising OptionParseError on malformed input.

    Help is routed through the man page viewer rather than argparse, so
    the automatic -h/--help action is always disabled; the shared option
    set declares its own --help flag.
    """

    def __init__(self, *args, **kwargs):
        kwargs["add_help"] = False
        kwargs["allow_abbrev"] = False
        super().__init__(*args, **kwargs)

    def error(self, message: str):
        raise OptionParseError(f"{self.prog}: error: {message}")


def parse_arguments(
    parser: argparse.ArgumentParser, argv: Sequence[str]
) -> argparse.Namespace:
    """Parse argv against parser.

    Args:
        parser: Parser built from a command's option schema.
        argv: Arguments to parse, without the program or command name.

    Returns:
        Namespace holding the parsed option values.

    Raises:
        OptionParseError: If an option is unknown, malformed, or missing
            its value.
    """
    return parser.parse_args(list(argv))
