"""Composition of the plain-text export report.

Purpose
-------
Turn a snapshot of entries plus its statistics into the report text written by
:meth:`~lib_log_store.application.store.LogStore.export`. Kept pure so the
layout can be tested without touching the filesystem.

Contents
--------
* :func:`render_report` - header, statistics block and delimited entry list.
* :func:`report_file_name` - ``log[<timestamp>]`` naming rule.
* ``START_DELIMITER`` / ``END_DELIMITER`` constants.
"""

from __future__ import annotations

from typing import Sequence

from .entries import LogEntry
from .levels import LogLevel
from .statistics import LogStatistics

START_DELIMITER = "=== START LOGS ==="
END_DELIMITER = "=== END LOGS ==="
TOTAL_GLYPH = "✨"
LOGS_DIRECTORY_NAME = "logs"


def _statistics_lines(statistics: LogStatistics) -> list[str]:
    lines = [f"--- {TOTAL_GLYPH} Total Logs: {statistics.total} ---"]
    for level in LogLevel:
        lines.append(f"--- {level.glyph} Total {level.report_label} Logs: {statistics.count(level)} ---")
    summary = " - ".join(f"{level.percent_label} % {statistics.percentage(level)}" for level in LogLevel)
    lines.append(f"--- {summary} ---")
    return lines


def render_report(
    *,
    application_name: str,
    timestamp: str,
    entries: Sequence[LogEntry],
    statistics: LogStatistics,
) -> str:
    """Return the full report text for ``entries``.

    Entries always use their complex rendering, whatever their own
    complexity. An empty snapshot leaves nothing between the delimiters.

    Examples
    --------
    >>> text = render_report(application_name="App", timestamp="T", entries=[],
    ...                      statistics=LogStatistics.from_entries([]))
    >>> text.splitlines()[0]
    'App logs for T'
    >>> text.endswith("=== START LOGS ===\\n\\n=== END LOGS ===")
    True
    """
    lines = [f"{application_name} logs for {timestamp}"]
    lines.extend(_statistics_lines(statistics))
    lines.append(START_DELIMITER)
    body = "\n".join(entry.complex_description for entry in entries)
    return "\n".join(lines) + "\n" + body + "\n" + END_DELIMITER


def report_file_name(timestamp: str) -> str:
    """Return the file name embedding the formatted export ``timestamp``."""

    return f"log[{timestamp}]"


__all__ = [
    "END_DELIMITER",
    "LOGS_DIRECTORY_NAME",
    "START_DELIMITER",
    "TOTAL_GLYPH",
    "render_report",
    "report_file_name",
]
