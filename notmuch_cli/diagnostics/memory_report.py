"""Resource usage report written at teardown.

Setting NOTMUCH_MEMORY_REPORT to a file path makes the front end trace
allocations for the whole run and write a summary to that file just
before exiting.
"""

import logging
import os
import sys
import tracemalloc
from typing import Optional

logger = logging.getLogger(__name__)

MEMORY_REPORT_ENV = "NOTMUCH_MEMORY_REPORT"

# Number of allocation sites listed in the report
TOP_ALLOCATIONS = 25


def memory_report_path() -> Optional[str]:
    """Return the requested report path, or None if no report is wanted."""
    path = os.environ.get(MEMORY_REPORT_ENV, "")
    return path or None


def start_memory_tracking() -> None:
    """Begin tracing allocations so the report covers the whole run."""
    if not tracemalloc.is_tracing():
        tracemalloc.start()


def _format_report() -> str:
    lines = ["notmuch resource usage report", ""]

    try:
        import resource

        usage = resource.getrusage(resource.RUSAGE_SELF)
        lines.append(f"Max resident set size: {usage.ru_maxrss}")
        lines.append(f"User time: {usage.ru_utime:.3f}s")
        lines.append(f"System time: {usage.ru_stime:.3f}s")
        lines.append("")
    except ImportError:
        pass

    if tracemalloc.is_tracing():
        current, peak = tracemalloc.get_traced_memory()
        lines.append(f"Traced memory: current={current} peak={peak}")
        lines.append("")
        lines.append(f"Top {TOP_ALLOCATIONS} allocation sites:")
        snapshot = tracemalloc.take_snapshot()
        for stat in snapshot.statistics("lineno")[:TOP_ALLOCATIONS]:
            lines.append(f"  {stat}")
    else:
        lines.append("Allocation tracing was not enabled.")

    return "\n".join(lines) + "\n"


def write_memory_report(path: str) -> bool:
    """Write the resource usage report to path.

    A failure is reported on stderr but is not fatal; the caller's exit
    status is left alone.

    Returns:
        True if the report was written, False otherwise.
    """
    try:
        with open(path, "w", encoding="utf-8") as report:
            report.write(_format_report())
    except OSError as e:
        print(
            f"Warning: unable to write memory report {path}: {e.strerror}",
            file=sys.stderr,
        )
        return False
    finally:
        if tracemalloc.is_tracing():
            tracemalloc.stop()

    logger.debug("Wrote memory report to %s", path)
    return True
