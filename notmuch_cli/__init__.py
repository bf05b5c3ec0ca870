"""Notmuch command-line front end.

This package provides the entry point for the notmuch mail indexing tool:
- Command registry and dispatch for every subcommand
- Shared option handling (--version, --help, --uuid)
- Configuration file lifecycle
- Output format and database revision compatibility checks
- Help routing to the installed man pages
"""

__version__ = "0.21"
