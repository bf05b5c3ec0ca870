"""Tests for the output format version gate."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from notmuch_cli.commands.registry import build_default_registry
from notmuch_cli.errors import FormatTooNewError, FormatTooOldError
from notmuch_cli.exit_codes import EXIT_FORMAT_TOO_NEW, EXIT_FORMAT_TOO_OLD
from notmuch_cli.gates.format_version import (
    FORMAT_CUR,
    FORMAT_MIN,
    FORMAT_MIN_ACTIVE,
    check_format_version,
)
from notmuch_cli.models.invocation import InvocationContext


def check(requested):
    """Check against a window of 1 (min), 2 (min active), 5 (current)."""
    check_format_version(requested, current=5, minimum=1, min_active=2)


class TestCheckFormatVersion:
    """Test suite for check_format_version boundaries."""

    def test_below_minimum_is_too_old(self, capsys):
        """Test that version 0 is rejected as too old."""
        with pytest.raises(FormatTooOldError) as exc:
            check(0)

        assert exc.value.exit_code == EXIT_FORMAT_TOO_OLD
        assert exc.value.requested == 0
        assert "no longer supported" in str(exc.value)
        assert "at least version 1" in str(exc.value)
        assert "upgrade your notmuch front-end" in str(exc.value)

    def test_deprecated_version_warns(self, capsys):
        """Test that version 1 is accepted with a deprecation warning."""
        check(1)

        captured = capsys.readouterr()
        assert "deprecated output format version 1" in captured.err
        assert captured.out == ""

    @pytest.mark.parametrize("requested", [2, 3, 5])
    def test_supported_version_silent(self, requested, capsys):
        """Test that active versions are accepted without output."""
        check(requested)

        captured = capsys.readouterr()
        assert captured.err == ""
        assert captured.out == ""

    def test_above_current_is_too_new(self):
        """Test that version 6 is rejected as too new."""
        with pytest.raises(FormatTooNewError) as exc:
            check(6)

        assert exc.value.exit_code == EXIT_FORMAT_TOO_NEW
        assert exc.value.limit == 5
        assert "only supports up to format version 5" in str(exc.value)
        assert "upgrade your\nnotmuch CLI" in str(exc.value)

    def test_exit_codes_are_distinct(self):
        """Test that too new and too old use different statuses."""
        assert EXIT_FORMAT_TOO_NEW != EXIT_FORMAT_TOO_OLD
        assert EXIT_FORMAT_TOO_NEW not in (0, 1)
        assert EXIT_FORMAT_TOO_OLD not in (0, 1)

    def test_default_window(self):
        """Test that the built-in window is consistent."""
        assert FORMAT_MIN <= FORMAT_MIN_ACTIVE <= FORMAT_CUR
        check_format_version(FORMAT_CUR)


class TestRequestFormatVersion:
    """Test suite for per-invocation format version overrides."""

    @pytest.fixture
    def context(self):
        return InvocationContext(registry=build_default_registry())

    def test_defaults_to_current(self, context):
        """Test that a new context uses the current format version."""
        assert context.format_version == FORMAT_CUR

    def test_override_is_checked(self, context):
        """Test that an override outside the window is rejected."""
        with pytest.raises(FormatTooNewError):
            context.request_format_version(FORMAT_CUR + 1)

        assert context.format_version == FORMAT_CUR

    def test_override_is_stored(self, context):
        """Test that a supported override is kept."""
        context.request_format_version(FORMAT_MIN)
        assert context.format_version == FORMAT_MIN

    def test_every_override_is_checked(self, context):
        """Test that later overrides are validated again."""
        context.request_format_version(FORMAT_CUR)
        with pytest.raises(FormatTooOldError):
            context.request_format_version(FORMAT_MIN - 1)
