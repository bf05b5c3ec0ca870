"""Compatibility checks run by commands before producing output."""

from .db_revision import check_requested_uuid
from .format_version import (
    FORMAT_CUR,
    FORMAT_MIN,
    FORMAT_MIN_ACTIVE,
    check_format_version,
)

__all__ = [
    "FORMAT_CUR",
    "FORMAT_MIN",
    "FORMAT_MIN_ACTIVE",
    "check_format_version",
    "check_requested_uuid",
]
