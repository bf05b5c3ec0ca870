"""The `notmuch config` command.

    notmuch config get <section>.<item>
    notmuch config set <section>.<item> [value ...]
    notmuch config list
"""

import sys
from typing import Optional

from ..config.config_file import LIST_SEPARATOR, split_list
from ..exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from ..options.shared_options import minimal_options, process_shared_options
from .base import Command


def _split_item(item: str) -> Optional[tuple[str, str]]:
    section, dot, key = item.partition(".")
    if not dot or not section or not key:
        print(f"Invalid configuration name: {item}", file=sys.stderr)
        return None
    return section, key


class ConfigCommand(Command):
    """Get, set or list values in the configuration file."""

    def run(self, context, config, argv):
        args = minimal_options(context, "config", argv)
        status = process_shared_options(context, "config")
        if status is not None:
            return status

        if not args:
            print(
                "Error: notmuch config requires at least one argument.",
                file=sys.stderr,
            )
            return EXIT_FAILURE

        subcommand, rest = args[0], args[1:]
        if subcommand == "get":
            return self.get_item(config, rest)
        elif subcommand == "set":
            return self.set_item(config, rest)
        elif subcommand == "list":
            return self.list_items(config)

        print(f"Unrecognized command: config {subcommand}", file=sys.stderr)
        return EXIT_FAILURE

    def get_item(self, config, args: list[str]) -> int:
        if len(args) != 1:
            print(
                "Error: notmuch config get requires exactly one argument.",
                file=sys.stderr,
            )
            return EXIT_FAILURE

        item = _split_item(args[0])
        if item is None:
            return EXIT_FAILURE

        value = config.get(*item)
        if value is None:
            return EXIT_FAILURE

        if LIST_SEPARATOR in value:
            for entry in split_list(value):
                print(entry)
        else:
            print(value)
        return EXIT_SUCCESS

    def set_item(self, config, args: list[str]) -> int:
        if not args:
            print(
                "Error: notmuch config set requires at least one argument.",
                file=sys.stderr,
            )
            return EXIT_FAILURE

        item = _split_item(args[0])
        if item is None:
            return EXIT_FAILURE

        values = args[1:]
        if not values:
            config.remove(*item)
        elif len(values) == 1:
            config.set(*item, values[0])
        else:
            config.set_list(*item, values)

        config.save()
        return EXIT_SUCCESS

    def list_items(self, config) -> int:
        for name, value in config.items():
            print(f"{name}={value}")
        return EXIT_SUCCESS
