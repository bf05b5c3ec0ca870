"""Exception hierarchy for the notmuch front end.

Every failure detected by a gate is raised as a NotmuchError subclass.
The dispatcher in main.py is the only place that turns these into
messages on stderr and process exit statuses.
"""

from .exit_codes import EXIT_FAILURE, EXIT_FORMAT_TOO_NEW, EXIT_FORMAT_TOO_OLD


class NotmuchError(Exception):
    """Base class for user-facing front end failures.

    Attributes:
        exit_code: Process exit status reported for this failure.
    """

    exit_code = EXIT_FAILURE

    def format_message(self) -> str:
        """Return the text written to stderr for this failure."""
        return f"Error: {self}"


class OptionParseError(NotmuchError):
    """Malformed option, unknown flag, or missing option value."""

    def format_message(self) -> str:
        return str(self)


class UnknownCommandError(NotmuchError):
    """No registered command matches the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown command '{name}' (see \"notmuch help\")")


class ConfigError(NotmuchError):
    """Configuration file is missing, unreadable, or cannot be written."""


class FormatVersionError(NotmuchError):
    """Requested output format version is outside the supported window."""

    def __init__(self, requested: int, limit: int, message: str):
        self.requested = requested
        self.limit = limit
        super().__init__(message)

    def format_message(self) -> str:
        return str(self)


class FormatTooNewError(FormatVersionError):
    exit_code = EXIT_FORMAT_TOO_NEW


class FormatTooOldError(FormatVersionError):
    exit_code = EXIT_FORMAT_TOO_OLD


class DatabaseRevisionError(NotmuchError):
    """Requested database uuid does not match, or cannot be verified."""


class DatabaseError(NotmuchError):
    """Mail database backend is unavailable or failed to open."""


class HelpViewerError(NotmuchError):
    """External man page viewer could not be started."""
