"""Boundary to the mail index engine."""

from .base import Database, DatabaseMode
from .loader import BACKEND_ENTRY_POINT_GROUP, open_database

__all__ = ["BACKEND_ENTRY_POINT_GROUP", "Database", "DatabaseMode", "open_database"]
