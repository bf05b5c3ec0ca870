"""Structured output format version checks.

Front ends ask for a specific output format version so that they and the
CLI can evolve independently. The CLI emits every version between
FORMAT_MIN and FORMAT_CUR; versions below FORMAT_MIN_ACTIVE still work but
are deprecated.
"""

import logging
import sys

from ..errors import FormatTooNewError, FormatTooOldError

logger = logging.getLogger(__name__)

# Current (latest) output format version
FORMAT_CUR = 2

# Oldest output format version still emitted
FORMAT_MIN = 1

# Oldest output format version that is not deprecated
FORMAT_MIN_ACTIVE = 1


def check_format_version(
    requested: int,
    current: int = FORMAT_CUR,
    minimum: int = FORMAT_MIN,
    min_active: int = FORMAT_MIN_ACTIVE,
) -> None:
    """Validate a requested output format version.

    Args:
        requested: Format version asked for by the caller.
        current: Newest format version this CLI supports.
        minimum: Oldest format version this CLI still supports.
        min_active: Oldest format version that is not deprecated.

    Raises:
        FormatTooNewError: If requested is newer than current.
        FormatTooOldError: If requested is older than minimum.
    """
    if requested > current:
        raise FormatTooNewError(
            requested,
            current,
            f"A caller requested output format version {requested}, but the "
            f"installed notmuch\nCLI only supports up to format version "
            f"{current}.  You may need to upgrade your\nnotmuch CLI.",
        )
    if requested < minimum:
        raise FormatTooOldError(
            requested,
            minimum,
            f"A caller requested output format version {requested}, which is "
            f"no longer supported\nby the notmuch CLI (it requires at least "
            f"version {minimum}).  You may need to\nupgrade your notmuch "
            f"front-end.",
        )
    if requested < min_active:
        # Warn early so callers move off a version before it is dropped
        print(
            f"A caller requested deprecated output format version {requested}, "
            f"which may not\nbe supported in the future.",
            file=sys.stderr,
        )
        return

    logger.debug("Output format version %d accepted", requested)
