"""Commands backed by the mail index engine.

Each command declares its own option schema, inheriting the shared
option set, and leaves the actual work to the database backend. Before
handing off, the front end applies the shared options, validates any
requested output format version and checks the --uuid request against
the open database.
"""

import argparse
import logging
from collections.abc import Sequence

from ..database.base import DatabaseMode
from ..database.loader import open_database
from ..gates.db_revision import check_requested_uuid
from ..options.parser import OptionParser, parse_arguments
from ..options.shared_options import process_shared_options, shared_options_parser
from .base import Command

logger = logging.getLogger(__name__)

EXCLUDE_CHOICES = ["true", "false", "all", "flag"]
SORT_CHOICES = ["newest-first", "oldest-first"]


class EngineCommand(Command):
    """Base class for commands executed by the database backend.

    Attributes:
        name: Command name, also used for --help routing.
        mode: Database access mode the command needs.
        checks_uuid: Whether --uuid is compared against the database.
        structured_output: Whether the command accepts --format-version.
    """

    name: str = ""
    mode = DatabaseMode.READ_ONLY
    checks_uuid = True
    structured_output = False

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Declare the command's own options."""

    def build_parser(self) -> OptionParser:
        parser = OptionParser(
            prog=f"notmuch {self.name}", parents=[shared_options_parser()]
        )
        if self.structured_output:
            parser.add_argument(
                "--format-version",
                type=int,
                default=None,
                metavar="N",
                help="Use output format version N",
            )
        self.add_arguments(parser)
        parser.add_argument("terms", nargs=argparse.REMAINDER)
        return parser

    def parse(self, argv: Sequence[str]) -> argparse.Namespace:
        """Parse the arguments following the command name.

        A "--" ends the options; the terms after it may start with "-".
        """
        options = parse_arguments(self.build_parser(), argv)
        if options.terms and options.terms[0] == "--":
            options.terms = options.terms[1:]
        return options

    def run(self, context, config, argv):
        options = self.parse(argv[1:])
        context.shared.absorb(options)
        status = process_shared_options(context, self.name)
        if status is not None:
            return status

        if self.structured_output:
            if options.format_version is not None:
                context.request_format_version(options.format_version)
            options.format_version = context.format_version

        with open_database(context, config.database_path, self.mode) as database:
            if self.checks_uuid:
                check_requested_uuid(
                    context.shared.requested_db_uuid,
                    lambda: database.get_revision()[1],
                )
            logger.debug("Running %s with %s", self.name, options)
            return database.run_command(self.name, options, config)


class NewCommand(EngineCommand):
    name = "new"
    mode = DatabaseMode.READ_WRITE

    def add_arguments(self, parser):
        parser.add_argument("--no-hooks", action="store_true")
        parser.add_argument("--quiet", action="store_true")


class InsertCommand(EngineCommand):
    name = "insert"
    mode = DatabaseMode.READ_WRITE
    checks_uuid = False

    def add_arguments(self, parser):
        parser.add_argument("--folder", default=None)
        parser.add_argument("--create-folder", action="store_true")
        parser.add_argument("--keep", action="store_true")
        parser.add_argument("--no-hooks", action="store_true")


class SearchCommand(EngineCommand):
    name = "search"
    structured_output = True

    def add_arguments(self, parser):
        parser.add_argument(
            "--format", choices=["json", "sexp", "text", "text0"], default="text"
        )
        parser.add_argument(
            "--output",
            choices=["summary", "threads", "messages", "files", "tags"],
            default="summary",
        )
        parser.add_argument("--sort", choices=SORT_CHOICES, default="newest-first")
        parser.add_argument("--offset", type=int, default=0)
        parser.add_argument("--limit", type=int, default=-1)
        parser.add_argument("--exclude", choices=EXCLUDE_CHOICES, default="true")
        parser.add_argument("--duplicate", type=int, default=0)


class AddressCommand(EngineCommand):
    name = "address"
    structured_output = True

    def add_arguments(self, parser):
        parser.add_argument(
            "--format", choices=["json", "sexp", "text", "text0"], default="text"
        )
        parser.add_argument(
            "--output",
            action="append",
            choices=["sender", "recipients", "count"],
            default=None,
        )
        parser.add_argument("--sort", choices=SORT_CHOICES, default="newest-first")
        parser.add_argument("--exclude", choices=EXCLUDE_CHOICES, default="true")


class ShowCommand(EngineCommand):
    name = "show"
    structured_output = True

    def add_arguments(self, parser):
        parser.add_argument(
            "--format",
            choices=["json", "sexp", "text", "mbox", "raw"],
            default="text",
        )
        parser.add_argument("--part", type=int, default=None)
        parser.add_argument(
            "--entire-thread", choices=["true", "false"], default=None
        )
        parser.add_argument("--exclude", choices=["true", "false"], default="true")
        parser.add_argument("--body", choices=["true", "false"], default="true")
        parser.add_argument("--include-html", action="store_true")
        parser.add_argument("--verify", action="store_true")
        parser.add_argument("--decrypt", action="store_true")


class CountCommand(EngineCommand):
    name = "count"

    def add_arguments(self, parser):
        parser.add_argument(
            "--output", choices=["messages", "threads", "files"], default="messages"
        )
        parser.add_argument("--exclude", choices=["true", "false"], default="true")
        parser.add_argument("--batch", action="store_true")
        parser.add_argument("--input", default=None)
        parser.add_argument("--lastmod", action="store_true")


class ReplyCommand(EngineCommand):
    name = "reply"
    structured_output = True

    def add_arguments(self, parser):
        parser.add_argument(
            "--format",
            choices=["default", "json", "sexp", "headers-only"],
            default="default",
        )
        parser.add_argument("--reply-to", choices=["all", "sender"], default="all")
        parser.add_argument("--decrypt", action="store_true")


class TagCommand(EngineCommand):
    """Tag operations start with + or -, so they cannot go through argparse.

    Options end at the first argument that does not start with "--" (or at
    a literal "--"); everything from there on is tag operations followed by
    the query. Options taking a value must use the --name=value form, and
    only the long forms of the shared options are recognized: -h, -v and
    -u are removals of the tags h, v and u.
    """

    name = "tag"
    mode = DatabaseMode.READ_WRITE

    def add_arguments(self, parser):
        parser.add_argument("--batch", action="store_true")
        parser.add_argument("--input", default=None)
        parser.add_argument("--remove-all", action="store_true")

    def parse(self, argv):
        argv = list(argv)
        split = len(argv)
        for index, arg in enumerate(argv):
            if arg == "--" or not arg.startswith("--"):
                split = index
                break

        options = parse_arguments(self.build_parser(), argv[:split])
        terms = argv[split:]
        if terms and terms[0] == "--":
            terms = terms[1:]
        options.terms = terms
        return options


class DumpCommand(EngineCommand):
    name = "dump"

    def add_arguments(self, parser):
        parser.add_argument(
            "--format", choices=["sup", "batch-tag"], default="batch-tag"
        )
        parser.add_argument("--output", default=None)


class RestoreCommand(EngineCommand):
    name = "restore"
    mode = DatabaseMode.READ_WRITE

    def add_arguments(self, parser):
        parser.add_argument(
            "--format", choices=["auto", "batch-tag", "sup"], default="auto"
        )
        parser.add_argument("--accumulate", action="store_true")
        parser.add_argument("--input", default=None)


class CompactCommand(EngineCommand):
    name = "compact"
    mode = DatabaseMode.READ_WRITE
    checks_uuid = False

    def add_arguments(self, parser):
        parser.add_argument("--backup", default=None)
        parser.add_argument("--quiet", action="store_true")
