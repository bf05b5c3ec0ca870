"""Notmuch commands and the registry that dispatches to them."""

from .base import Command
from .registry import CommandRegistry, build_default_registry

__all__ = ["Command", "CommandRegistry", "build_default_registry"]
