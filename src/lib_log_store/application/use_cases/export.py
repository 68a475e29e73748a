"""Use case exporting a buffer snapshot as a timestamped report file.

Purpose
-------
Provide the application-layer glue between a store snapshot, the pure report
composer and the report writer adapter.

System Role
-----------
Invoked by :meth:`lib_log_store.application.store.LogStore.export` after the
store has copied its entries and statistics under its lock; everything here
runs outside that lock.
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path
from typing import Callable, Sequence

from lib_log_store.application.ports.report import ReportWriterPort
from lib_log_store.application.ports.time import ClockPort
from lib_log_store.domain.config import LoggerConfig
from lib_log_store.domain.entries import LogEntry
from lib_log_store.domain.report import LOGS_DIRECTORY_NAME, render_report, report_file_name
from lib_log_store.domain.statistics import LogStatistics

logger = logging.getLogger(__name__)

ExportCallable = Callable[[Sequence[LogEntry], LogStatistics], Path]


def resolve_logs_directory(config: LoggerConfig) -> Path:
    """Return ``<base>/logs`` where base defaults to the system temp dir."""

    base = config.export_directory if config.export_directory is not None else Path(tempfile.gettempdir())
    return base / LOGS_DIRECTORY_NAME


def create_export_report(
    *,
    config: LoggerConfig,
    clock: ClockPort,
    writer: ReportWriterPort,
) -> ExportCallable:
    """Return a callable capturing the export dependencies.

    Why
    ---
    The composition root decides on the clock and writer once; the store then
    only hands over its snapshot.

    Parameters
    ----------
    config:
        Supplies the application name, timestamp rendering and base directory.
    clock:
        Provider of the export timestamp.
    writer:
        Adapter responsible for directory creation and the file write.

    Returns
    -------
    Callable[[Sequence[LogEntry], LogStatistics], Path]
        Function rendering the report and returning the written location.
    """

    def export(entries: Sequence[LogEntry], statistics: LogStatistics) -> Path:
        stamp = config.format_timestamp(clock.now())
        content = render_report(
            application_name=config.application_name,
            timestamp=stamp,
            entries=entries,
            statistics=statistics,
        )
        location = writer.write(
            content,
            directory=resolve_logs_directory(config),
            file_name=report_file_name(stamp),
        )
        logger.debug("exported %d log entries to %s", len(entries), location)
        return location

    return export


__all__ = ["ExportCallable", "create_export_report", "resolve_logs_directory"]
