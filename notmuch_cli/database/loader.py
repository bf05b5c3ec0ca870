"""Opening the mail database through an installed backend.

The index engine is not part of this package. A backend is either
injected through InvocationContext.database_factory or discovered from
the ``notmuch_cli.databases`` entry point group.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from importlib.metadata import entry_points
from typing import TYPE_CHECKING, Optional

from ..errors import DatabaseError, NotmuchError
from .base import Database, DatabaseMode

if TYPE_CHECKING:
    from ..models.invocation import InvocationContext

logger = logging.getLogger(__name__)

BACKEND_ENTRY_POINT_GROUP = "notmuch_cli.databases"

DatabaseFactory = Callable[[str, DatabaseMode], Database]


def discover_backend() -> Optional[DatabaseFactory]:
    """Return the first installed database backend factory, if any."""
    for entry_point in entry_points(group=BACKEND_ENTRY_POINT_GROUP):
        logger.debug("Loading database backend %s", entry_point.name)
        return entry_point.load()
    return None


@contextmanager
def open_database(
    context: "InvocationContext", database_path: str, mode: DatabaseMode
) -> Iterator[Database]:
    """Open the database for the duration of a with block.

    Args:
        context: Invocation context supplying an injected factory, if any.
        database_path: Top-level mail directory from the configuration.
        mode: Access mode for the command.

    Yields:
        Open database, closed when the block exits.

    Raises:
        DatabaseError: If no backend is installed or opening fails.
    """
    factory = context.database_factory or discover_backend()
    if factory is None:
        raise DatabaseError(
            "no mail database backend is installed "
            f"(expected an entry point in group '{BACKEND_ENTRY_POINT_GROUP}')"
        )

    try:
        database = factory(database_path, mode)
    except NotmuchError:
        raise
    except Exception as e:
        raise DatabaseError(
            f"Cannot open notmuch database at {database_path}: {e}"
        ) from e

    try:
        yield database
    finally:
        database.close()
