"""Optional diagnostics written when the process exits."""

from .memory_report import (
    MEMORY_REPORT_ENV,
    memory_report_path,
    start_memory_tracking,
    write_memory_report,
)

__all__ = [
    "MEMORY_REPORT_ENV",
    "memory_report_path",
    "start_memory_tracking",
    "write_memory_report",
]
