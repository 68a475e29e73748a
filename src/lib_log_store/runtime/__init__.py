"""Runtime façade wiring the log store from its adapters.

Purpose
-------
Expose the composition root (:func:`build_store`) and the per-level logging
helpers (:class:`LoggerProxy`) host applications use instead of importing the
inner layers directly.

Contents
--------
* ``build_store`` - assemble a :class:`LogStore` with default adapters.
* ``LoggerProxy`` - ``fatal``/``error``/``warn``/``info``/``success``/
  ``working``/``debug`` helpers capturing the caller's call site.

System Role
-----------
There is no module-level store. The host builds one during startup and passes
the returned handle to the code that logs, which keeps "one store per process"
an application decision rather than hidden global state.
"""

from __future__ import annotations

from lib_log_store.adapters import (
    FileReportWriter,
    ProcessTerminator,
    StdlibLoggingSink,
    SystemClock,
    UuidProvider,
)
from lib_log_store.application.ports import (
    ClockPort,
    DiagnosticSinkPort,
    IdProvider,
    ReportWriterPort,
    TerminatorPort,
)
from lib_log_store.application.store import LogStore
from lib_log_store.domain import LogComplexity, LoggerConfig, LogLevel


def build_store(
    config: LoggerConfig | None = None,
    *,
    sink: DiagnosticSinkPort | None = None,
    terminator: TerminatorPort | None = None,
    clock: ClockPort | None = None,
    id_provider: IdProvider | None = None,
    writer: ReportWriterPort | None = None,
) -> LogStore:
    """Compose a :class:`LogStore`, filling in default adapters.

    Parameters
    ----------
    config:
        Store configuration; :meth:`LoggerConfig.default` when omitted.
    sink:
        Diagnostic sink; defaults to :class:`StdlibLoggingSink`.
    terminator:
        Fatal-entry terminator; defaults to :class:`ProcessTerminator`.
    clock, id_provider, writer:
        Overrides for timestamps, identifiers and report persistence.

    Examples
    --------
    >>> store = build_store(LoggerConfig(history_length=3))
    >>> store.config.history_length
    3
    >>> store.current_entries()
    []
    """

    return LogStore(
        config=config if config is not None else LoggerConfig.default(),
        sink=sink if sink is not None else StdlibLoggingSink(),
        terminator=terminator if terminator is not None else ProcessTerminator(),
        clock=clock if clock is not None else SystemClock(),
        id_provider=id_provider if id_provider is not None else UuidProvider(),
        writer=writer if writer is not None else FileReportWriter(),
    )


class LoggerProxy:
    """Level-specific helpers bound to a :class:`LogStore`.

    Each helper records the call site of its own caller, so
    ``log.info("ready")`` reports the line that called ``info``.
    """

    def __init__(self, store: LogStore) -> None:
        self._store = store

    @property
    def store(self) -> LogStore:
        return self._store

    def fatal(self, *messages: object, complexity: LogComplexity | None = None) -> None:
        """Record a fatal entry; the store's terminator ends the process."""
        self._log(LogLevel.FATAL, messages, complexity)

    def error(self, *messages: object, complexity: LogComplexity | None = None) -> None:
        self._log(LogLevel.ERROR, messages, complexity)

    def warn(self, *messages: object, complexity: LogComplexity | None = None) -> None:
        self._log(LogLevel.WARN, messages, complexity)

    def info(self, *messages: object, complexity: LogComplexity | None = None) -> None:
        self._log(LogLevel.INFO, messages, complexity)

    def success(self, *messages: object, complexity: LogComplexity | None = None) -> None:
        self._log(LogLevel.SUCCESS, messages, complexity)

    def working(self, *messages: object, complexity: LogComplexity | None = None) -> None:
        self._log(LogLevel.WORKING, messages, complexity)

    def debug(self, *messages: object, complexity: LogComplexity | None = None) -> None:
        self._log(LogLevel.DEBUG, messages, complexity)

    def _log(self, level: LogLevel, messages: tuple[object, ...], complexity: LogComplexity | None) -> None:
        # Frames above LogStore.log: _log, the public helper, then the caller.
        self._store.log(*messages, level=level, complexity=complexity, stacklevel=3)


__all__ = ["LoggerProxy", "build_store"]
