"""Bounded, ordered, thread-safe store of log entries.

Purpose
-------
Accept leveled entries, retain the most recent ``history_length`` of them,
emit each through the diagnostic sink, compute statistics on demand and
export the retained history as a report file. Fatal entries terminate the
process once they are buffered and emitted.

Contents
--------
* :class:`LogStore` - the store itself.
* ``_find_caller`` - call-site capture used by :meth:`LogStore.log`.

System Role
-----------
The single stateful component of the package. Hosts construct one per process
through :func:`lib_log_store.runtime.build_store` and pass the handle around.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from threading import RLock

from lib_log_store.application.ports import (
    ClockPort,
    DiagnosticSinkPort,
    IdProvider,
    ReportWriterPort,
    TerminatorPort,
)
from lib_log_store.application.use_cases.export import create_export_report
from lib_log_store.domain import (
    LogComplexity,
    LogEntry,
    LoggerConfig,
    LogLevel,
    LogStatistics,
    RingBuffer,
)

logger = logging.getLogger(__name__)

_UNKNOWN = "<unknown>"


def _find_caller(stacklevel: int) -> tuple[str, int, str]:
    """Return ``(file, line, function)`` of the frame ``stacklevel`` above the caller."""
    try:
        frame = sys._getframe(stacklevel + 1)
    except ValueError:
        return _UNKNOWN, 0, _UNKNOWN
    code = frame.f_code
    return code.co_filename, frame.f_lineno, code.co_name


class LogStore:
    """Capacity-bounded log buffer with statistics and report export.

    Parameters
    ----------
    config:
        Immutable :class:`LoggerConfig`; ``history_length`` bounds retention.
    sink:
        Receives the rendering of every appended entry.
    terminator:
        Invoked with the complex rendering after a fatal entry is recorded.
    clock, id_provider:
        Sources for entry/export timestamps and entry identifiers.
    writer:
        Persists export reports.
    """

    def __init__(
        self,
        *,
        config: LoggerConfig,
        sink: DiagnosticSinkPort,
        terminator: TerminatorPort,
        clock: ClockPort,
        id_provider: IdProvider,
        writer: ReportWriterPort,
    ) -> None:
        self._config = config
        self._sink = sink
        self._terminator = terminator
        self._clock = clock
        self._id_provider = id_provider
        self._buffer = RingBuffer(max_entries=config.history_length)
        self._lock = RLock()
        self._export = create_export_report(config=config, clock=clock, writer=writer)

    @property
    def config(self) -> LoggerConfig:
        return self._config

    def append(self, entry: LogEntry) -> None:
        """Record ``entry``, evict the oldest entry when over capacity and emit it.

        A fatal entry is emitted with its complex rendering and then
        terminates the process; this method does not return in that case.
        """
        fatal = entry.level is LogLevel.FATAL
        line = entry.complex_description if fatal else entry.description
        with self._lock:
            self._buffer.append(entry)
            self._emit(line, entry.level)
        if fatal:
            self._terminator.terminate(line)

    def _emit(self, line: str, level: LogLevel) -> None:
        try:
            self._sink.emit(line, level=level)
        except Exception:
            logger.exception("diagnostic sink failed to emit a %s entry", level.value)

    def log(
        self,
        *messages: object,
        level: LogLevel | None = None,
        complexity: LogComplexity | None = None,
        file: str | None = None,
        line: int | None = None,
        function: str | None = None,
        stacklevel: int = 1,
    ) -> None:
        """Create an entry from ``messages`` and :meth:`append` it.

        Level and complexity default from the configuration. Call-site
        metadata not passed explicitly is taken from the frame
        ``stacklevel`` levels above this call, as :mod:`logging` does.

        Examples
        --------
        >>> from lib_log_store.runtime import build_store
        >>> from lib_log_store.adapters import StdlibLoggingSink
        >>> store = build_store(LoggerConfig(history_length=2), sink=StdlibLoggingSink())
        >>> store.log("hello", "world", level=LogLevel.SUCCESS)
        >>> store.current_entries()[0].simple_description
        '✅ hello, world'
        """
        if file is None or line is None or function is None:
            found_file, found_line, found_function = _find_caller(stacklevel)
            file = found_file if file is None else file
            line = found_line if line is None else line
            function = found_function if function is None else function
        entry = LogEntry(
            entry_id=self._id_provider(),
            timestamp=self._clock.now(),
            messages=tuple(str(part) for part in messages),
            level=level if level is not None else self._config.default_level,
            complexity=complexity if complexity is not None else self._config.default_complexity,
            file=file,
            line=line,
            function=function,
        )
        self.append(entry)

    def current_entries(self) -> list[LogEntry]:
        """Return the retained entries in insertion order."""

        with self._lock:
            return self._buffer.snapshot()

    def statistics(self) -> LogStatistics:
        """Return per-level counts and percentages over the retained entries."""

        with self._lock:
            return LogStatistics.from_entries(self._buffer)

    def export(self) -> Path:
        """Write the retained history and statistics to a timestamped report.

        Returns
        -------
        Path
            Location of the written report.

        Raises
        ------
        ReportExportError
            When the ``logs`` directory cannot be created or the file cannot be
            written. No location is returned in that case.
        """
        with self._lock:
            entries = self._buffer.snapshot()
            statistics = LogStatistics.from_entries(entries)
        return self._export(entries, statistics)

    def __len__(self) -> int:
        with self._lock:
            return len(self._buffer)


__all__ = ["LogStore"]
