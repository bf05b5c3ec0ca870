"""Data models for the notmuch front end.

This module defines the core data structures used by the dispatcher:
- CommandDescriptor: Registry entry binding a command name to its handler
- HelpTopicDescriptor: Documentation topic not backed by a command
- SharedOptions: Values of the options every command inherits
- InvocationContext: Per-invocation state passed to gates and handlers
"""

from .command import CommandDescriptor, HelpTopicDescriptor
from .invocation import InvocationContext, SharedOptions

__all__ = [
    "CommandDescriptor",
    "HelpTopicDescriptor",
    "InvocationContext",
    "SharedOptions",
]
