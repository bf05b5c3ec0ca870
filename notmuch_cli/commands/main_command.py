"""Action run when notmuch is invoked without a command.

An unconfigured installation is walked through setup. Otherwise the user
is told whether the database exists yet and how to get started.
"""

import sys
from pathlib import Path
from typing import Optional

from ..exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from .base import Command
from .setup import SetupCommand

NO_DATABASE_TEXT = """\
You probably want to run "notmuch new" now to create that database.

Note that the first run of "notmuch new" can take a very long time
and that the resulting database will use roughly the same amount of
storage space as the email being indexed.
"""

READY_TEXT = """\
Notmuch is configured and appears to have a database. Excellent!

At this point you can start exploring the functionality of notmuch by
using commands such as:

\tnotmuch search tag:inbox

\tnotmuch search to:"{name}"

\tnotmuch search from:"{email}"

\tnotmuch search subject:"my favorite things"

See "notmuch help search" for more details.

You can also use "notmuch show" with any of the thread IDs resulting
from a search. Finally, you may want to explore using a more sophisticated
interface to notmuch such as the emacs interface implemented in notmuch.el
or any other interface described at http://notmuchmail.org

And don't forget to run "notmuch new" whenever new mail arrives.

Have fun, and may your inbox never have much mail.
"""


class MainCommand(Command):
    """Welcome flow for `notmuch` with no arguments."""

    def __init__(self, setup: Optional[SetupCommand] = None):
        self.setup = setup or SetupCommand()

    def run(self, context, config, argv):
        if config.is_new:
            return self.setup.run(context, config, [])

        db_path = Path(config.database_path) / ".notmuch"
        try:
            db_path.stat()
        except FileNotFoundError:
            print(
                "Notmuch is configured, but there's not yet a database at\n\n"
                f"\t{db_path}\n"
            )
            print(NO_DATABASE_TEXT)
            return EXIT_SUCCESS
        except OSError as e:
            print(
                f"Error looking for notmuch database at {db_path}: {e.strerror}",
                file=sys.stderr,
            )
            return EXIT_FAILURE

        print(
            READY_TEXT.format(
                name=config.user_name, email=config.user_primary_email
            )
        )
        return EXIT_SUCCESS
