"""Database uuid consistency check.

A caller that remembers the uuid of the database it last saw can pass it
with --uuid. If the database has since been rebuilt or replaced, its uuid
changes and the command refuses to act on the stale view.
"""

import logging
from collections.abc import Callable
from typing import Optional

from ..errors import DatabaseRevisionError

logger = logging.getLogger(__name__)


def check_requested_uuid(
    requested: Optional[str], uuid_provider: Callable[[], Optional[str]]
) -> None:
    """Compare the requested database uuid against the open database.

    Args:
        requested: Uuid given with --uuid, or None if none was requested.
        uuid_provider: Returns the uuid of the currently open database.
            Not called when requested is None.

    Raises:
        DatabaseRevisionError: If the actual uuid cannot be read or does
            not match the requested one.
    """
    if requested is None:
        return

    try:
        actual = uuid_provider()
    except Exception as e:
        raise DatabaseRevisionError(
            f"unable to read database revision to compare with {requested}: {e}"
        ) from e

    if not actual:
        raise DatabaseRevisionError(
            f"unable to read database revision to compare with {requested}"
        )

    if requested != actual:
        raise DatabaseRevisionError(
            f"requested database revision {requested} does not match {actual}"
        )

    logger.debug("Database uuid %s matches request", actual)
