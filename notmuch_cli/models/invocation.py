"""Per-invocation state shared by the dispatcher, gates and handlers.

A single InvocationContext is built when the process starts and handed by
reference to every component that needs the shared option values or the
requested output format version.
"""

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Optional

from ..gates.format_version import FORMAT_CUR, check_format_version

if TYPE_CHECKING:
    from ..commands.registry import CommandRegistry
    from ..help.router import HelpRouter, ManPageViewer


@dataclass
class SharedOptions:
    """Values of the options inherited by every command.

    Flags only ever go from False to True. A later parse that omits
    --uuid leaves an earlier value in place.
    """

    version_requested: bool = False
    help_requested: bool = False
    requested_db_uuid: Optional[str] = None

    def absorb(self, options: argparse.Namespace) -> None:
        """Merge the shared option values from a parsed namespace."""
        if getattr(options, "version", False):
            self.version_requested = True
        if getattr(options, "help", False):
            self.help_requested = True
        uuid = getattr(options, "uuid", None)
        if uuid is not None:
            self.requested_db_uuid = uuid


@dataclass
class InvocationContext:
    """State owned by a single run of the front end.

    Attributes:
        registry: Command and help topic registry used for dispatch.
        shared: Values of the shared options seen so far.
        format_version: Structured output format version in effect.
        config_path: Alternate configuration file given with --config.
        help_viewer: Viewer used to display man pages (None for default).
        database_factory: Callable opening the mail database, taking the
            database path and mode (None to discover an installed backend).
    """

    registry: "CommandRegistry"
    shared: SharedOptions = field(default_factory=SharedOptions)
    format_version: int = FORMAT_CUR
    config_path: Optional[str] = None
    help_viewer: Optional["ManPageViewer"] = None
    database_factory: Optional[Callable[..., Any]] = None

    def request_format_version(self, version: int) -> None:
        """Override the output format version, validating the new value."""
        check_format_version(version)
        self.format_version = version

    @property
    def help_router(self) -> "HelpRouter":
        from ..help.router import HelpRouter

        return HelpRouter(self.registry, viewer=self.help_viewer)
