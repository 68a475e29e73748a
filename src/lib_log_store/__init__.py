"""Public package surface of the bounded log store.

Hosts build one :class:`LogStore` at startup with :func:`build_store`, pass the
handle (or a :class:`LoggerProxy` around it) to the code that logs, and use
:meth:`LogStore.current_entries`, :meth:`LogStore.statistics` and
:meth:`LogStore.export` to present or persist the retained history.
"""

from __future__ import annotations

from .adapters import (
    FileReportWriter,
    ProcessTerminator,
    ReportExportError,
    RichConsoleSink,
    StdlibLoggingSink,
)
from .application.store import LogStore
from .config import enable_dotenv, load_config
from .domain import LogComplexity, LogEntry, LoggerConfig, LogLevel, LogStatistics
from .runtime import LoggerProxy, build_store

__all__ = [
    "FileReportWriter",
    "LogComplexity",
    "LogEntry",
    "LogLevel",
    "LogStatistics",
    "LogStore",
    "LoggerConfig",
    "LoggerProxy",
    "ProcessTerminator",
    "ReportExportError",
    "RichConsoleSink",
    "StdlibLoggingSink",
    "build_store",
    "enable_dotenv",
    "load_config",
]
