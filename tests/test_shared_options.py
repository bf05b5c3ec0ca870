"""Tests for the shared option set and its side effects."""

import argparse
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from notmuch_cli import __version__
from notmuch_cli.errors import OptionParseError
from notmuch_cli.exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from notmuch_cli.models.invocation import SharedOptions
from notmuch_cli.options.parser import OptionParser, parse_arguments
from notmuch_cli.options.shared_options import (
    minimal_options,
    process_shared_options,
    shared_options_parser,
)


def parse_shared(argv):
    parser = OptionParser(prog="test", parents=[shared_options_parser()])
    return parse_arguments(parser, argv)


class TestSharedOptionsParser:
    """Test suite for the inheritable option schema."""

    @pytest.mark.parametrize(
        "argv, version, help_flag, uuid",
        [
            ([], False, False, None),
            (["--version"], True, False, None),
            (["-v"], True, False, None),
            (["--help"], False, True, None),
            (["-h"], False, True, None),
            (["--uuid", "ABC"], False, False, "ABC"),
            (["--uuid=ABC"], False, False, "ABC"),
            (["-u", "ABC", "-v"], True, False, "ABC"),
        ],
    )
    def test_flags_recognized(self, argv, version, help_flag, uuid):
        """Test long and short forms of every shared option."""
        options = parse_shared(argv)
        assert options.version is version
        assert options.help is help_flag
        assert options.uuid == uuid

    def test_unknown_option_raises(self):
        """Test that unknown flags raise instead of exiting."""
        with pytest.raises(OptionParseError) as exc:
            parse_shared(["--bogus"])

        assert "unrecognized arguments: --bogus" in str(exc.value)
        assert exc.value.exit_code == EXIT_FAILURE

    def test_missing_value_raises(self):
        """Test that --uuid without a value is a parse error."""
        with pytest.raises(OptionParseError) as exc:
            parse_shared(["--uuid"])

        assert "--uuid" in str(exc.value)

    def test_parse_error_message_has_no_error_prefix(self):
        """Test that parse errors are printed as argparse formats them."""
        with pytest.raises(OptionParseError) as exc:
            parse_shared(["--bogus"])

        assert exc.value.format_message().startswith("test: error:")

    def test_inherited_by_command_schema(self):
        """Test that a command parser recognizes the shared options."""
        parser = OptionParser(prog="notmuch search", parents=[shared_options_parser()])
        parser.add_argument("--limit", type=int)
        options = parse_arguments(parser, ["--limit=3", "--uuid=X", "--help"])

        assert options.limit == 3
        assert options.uuid == "X"
        assert options.help is True


class TestSharedOptionsState:
    """Test suite for merging parsed values into SharedOptions."""

    def test_initially_empty(self):
        shared = SharedOptions()
        assert shared.version_requested is False
        assert shared.help_requested is False
        assert shared.requested_db_uuid is None

    def test_absorb_sets_values(self):
        """Test that parsed values are copied into the shared state."""
        shared = SharedOptions()
        shared.absorb(argparse.Namespace(version=True, help=False, uuid="ABC"))

        assert shared.version_requested is True
        assert shared.help_requested is False
        assert shared.requested_db_uuid == "ABC"

    def test_later_parse_does_not_reset(self):
        """Test that a re-parse without the flags keeps earlier values."""
        shared = SharedOptions()
        shared.absorb(argparse.Namespace(version=False, help=True, uuid="ABC"))
        shared.absorb(argparse.Namespace(version=False, help=False, uuid=None))

        assert shared.help_requested is True
        assert shared.requested_db_uuid == "ABC"

    def test_later_uuid_overrides(self):
        """Test that a uuid given to the command replaces the global one."""
        shared = SharedOptions()
        shared.absorb(argparse.Namespace(version=False, help=False, uuid="ABC"))
        shared.absorb(argparse.Namespace(version=False, help=False, uuid="DEF"))

        assert shared.requested_db_uuid == "DEF"

    def test_absorb_ignores_missing_attributes(self):
        """Test that a namespace without shared fields is harmless."""
        shared = SharedOptions()
        shared.absorb(argparse.Namespace())
        assert shared == SharedOptions()


class TestProcessSharedOptions:
    """Test suite for the --version/--help side effects."""

    def test_nothing_requested_continues(self, context, capsys):
        """Test that None is returned when no shared flag was given."""
        assert process_shared_options(context, "search") is None
        assert capsys.readouterr().out == ""

    def test_version_prints_and_succeeds(self, context, capsys):
        """Test that --version prints the version string."""
        context.shared.version_requested = True

        status = process_shared_options(context, None)

        assert status == EXIT_SUCCESS
        assert capsys.readouterr().out == f"notmuch {__version__}\n"

    def test_version_takes_precedence_over_help(self, context, viewer, capsys):
        """Test that --version wins when --help is also given."""
        context.shared.version_requested = True
        context.shared.help_requested = True

        status = process_shared_options(context, "search")

        assert status == EXIT_SUCCESS
        assert "notmuch" in capsys.readouterr().out
        assert viewer.pages == []

    def test_help_without_command_prints_usage(self, context, capsys):
        """Test that --help with no command prints the usage text."""
        context.shared.help_requested = True

        status = process_shared_options(context, None)

        assert status == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "The notmuch mail system." in out
        assert "Usage: notmuch --help" in out

    def test_help_for_command_opens_man_page(self, context, viewer):
        """Test that --help after a command shows that command's page."""
        context.shared.help_requested = True

        with pytest.raises(SystemExit):
            process_shared_options(context, "tag")

        assert viewer.pages == ["notmuch-tag"]


class TestMinimalOptions:
    """Test suite for commands that only take the shared options."""

    def test_returns_arguments_after_options(self, context):
        """Test that parsing stops at the first non-option argument."""
        args = minimal_options(context, "config", ["config", "set", "a.b", "--x"])
        assert args == ["set", "a.b", "--x"]

    def test_records_shared_values(self, context):
        """Test that shared flags before the arguments are recorded."""
        args = minimal_options(context, "help", ["help", "--uuid=U", "search"])

        assert args == ["search"]
        assert context.shared.requested_db_uuid == "U"

    def test_unknown_option_raises(self, context):
        """Test that unknown flags are parse errors."""
        with pytest.raises(OptionParseError) as exc:
            minimal_options(context, "setup", ["setup", "--bogus"])

        assert "notmuch setup" in str(exc.value)

    def test_empty_argv(self, context):
        """Test that the default action's empty argv is accepted."""
        assert minimal_options(context, "setup", []) == []
