"""Option parsing and the option set shared by every command."""

from .parser import OptionParser, parse_arguments
from .shared_options import (
    minimal_options,
    process_shared_options,
    shared_options_parser,
)

__all__ = [
    "OptionParser",
    "minimal_options",
    "parse_arguments",
    "process_shared_options",
    "shared_options_parser",
]
