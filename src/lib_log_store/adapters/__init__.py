"""Adapters connecting the log store to consoles, logging and the filesystem."""

from __future__ import annotations

from .console.rich_console import RichConsoleSink
from .logging_sink import StdlibLoggingSink
from .report_file import FileReportWriter, ReportExportError
from .system import EXIT_FATAL, ProcessTerminator, SystemClock, UuidProvider

__all__ = [
    "EXIT_FATAL",
    "FileReportWriter",
    "ProcessTerminator",
    "ReportExportError",
    "RichConsoleSink",
    "StdlibLoggingSink",
    "SystemClock",
    "UuidProvider",
]
