"""The `notmuch setup` command.

Prompts for each setting with its current value as the default and saves
the configuration. When input runs out (for example when stdin is not a
terminal) the remaining defaults are accepted, so setup also works
non-interactively.
"""

import os
from collections.abc import Callable
from typing import TYPE_CHECKING, Optional

from ..exit_codes import EXIT_SUCCESS
from ..options.shared_options import minimal_options, process_shared_options
from .base import Command

if TYPE_CHECKING:
    from ..config.config_file import NotmuchConfig

WELCOME_TEXT = """\
Welcome to notmuch!

The goal of notmuch is to help you manage and search your collection of
email, and to efficiently keep up with the flow of email as it comes in.

Notmuch needs to know a few things about you such as your name and email
address, as well as the directory that contains your email. This is where
already-synchronized email is stored, not where new mail is delivered.

Each setting is prompted for with a default shown in [brackets]. Press
Enter to accept the default.
"""

RECONFIGURE_TEXT = """\
Notmuch is already configured. The current settings are shown in
[brackets]. Press Enter to keep a setting, or type a new value.
"""

POST_SETUP_NEW_TEXT = """
Notmuch is now configured, and the configuration settings are saved in
{path} . If you'd like to change the configuration in the future,
you can either edit that file directly or run "notmuch setup".  To choose
an alternate configuration location, set ${{NOTMUCH_CONFIG}}.

The next step is to run "notmuch new" which will create a database
that indexes all of your mail. Depending on the amount of mail you have
the initial indexing process can take a long time, so expect that.
Also, the resulting database will require roughly the same amount of
storage space as your mail, so choose your database location accordingly.
"""

POST_SETUP_UPDATED_TEXT = """
Notmuch configuration has been updated. You may want to run "notmuch new"
to pick up any changes in the mail directory.
"""


class SetupCommand(Command):
    """Interactive configuration of notmuch.

    Args:
        prompt: Function used to read an answer; defaults to input().
    """

    def __init__(self, prompt: Optional[Callable[[str], str]] = None):
        self.prompt = prompt or input
        self._exhausted = False

    def _ask(self, question: str, default: str) -> str:
        if self._exhausted:
            return default
        try:
            response = self.prompt(f"{question} [{default}]: ")
        except EOFError:
            self._exhausted = True
            return default
        return response.strip() or default

    def _ask_optional(self, question: str) -> Optional[str]:
        if self._exhausted:
            return None
        try:
            response = self.prompt(f"{question} [Press 'Enter' if none]: ")
        except EOFError:
            self._exhausted = True
            return None
        return response.strip() or None

    def _ask_other_emails(self, config: "NotmuchConfig") -> list[str]:
        emails = []
        for email in config.user_other_email:
            emails.append(self._ask("Additional email address", email))

        while True:
            email = self._ask_optional("Additional email address")
            if email is None:
                break
            emails.append(email)

        return emails

    def run(self, context, config, argv):
        minimal_options(context, "setup", argv)
        status = process_shared_options(context, "setup")
        if status is not None:
            return status

        self._exhausted = False
        was_new = config.is_new
        print(WELCOME_TEXT if was_new else RECONFIGURE_TEXT)

        config.set("user", "name", self._ask("Your full name", config.user_name))
        config.set(
            "user",
            "primary_email",
            self._ask("Your primary email address", config.user_primary_email),
        )
        config.set_list("user", "other_email", self._ask_other_emails(config))

        database_path = self._ask(
            "Top-level directory of your email archive", config.database_path
        )
        config.set(
            "database", "path", os.path.abspath(os.path.expanduser(database_path))
        )

        new_tags = self._ask(
            "Tags to apply to all new messages (separated by spaces)",
            " ".join(config.new_tags),
        )
        config.set_list("new", "tags", new_tags.split())

        exclude_tags = self._ask(
            "Tags to exclude when searching messages (separated by spaces)",
            " ".join(config.search_exclude_tags),
        )
        config.set_list("search", "exclude_tags", exclude_tags.split())

        config.save()

        if was_new:
            print(POST_SETUP_NEW_TEXT.format(path=config.path))
        else:
            print(POST_SETUP_UPDATED_TEXT)
        return EXIT_SUCCESS
