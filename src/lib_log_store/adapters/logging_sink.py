"""Diagnostic sink forwarding entries to the standard :mod:`logging` tree.

Purpose
-------
Act as the host platform's logging facility: every entry string is handed to a
stdlib logger at the level returned by :meth:`LogLevel.to_python_level`, so
hosts keep their existing handlers, formatters and filters.
"""

from __future__ import annotations

import logging

from lib_log_store.application.ports.sink import DiagnosticSinkPort
from lib_log_store.domain.levels import LogLevel

DEFAULT_LOGGER_NAME = "lib_log_store.entries"


class StdlibLoggingSink(DiagnosticSinkPort):
    """Emit entry strings through ``logging.getLogger(name)``."""

    def __init__(self, name: str = DEFAULT_LOGGER_NAME, *, logger: logging.Logger | None = None) -> None:
        self._logger = logger if logger is not None else logging.getLogger(name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def emit(self, line: str, *, level: LogLevel) -> None:
        # ``%s`` keeps percent signs inside messages literal.
        self._logger.log(level.to_python_level(), "%s", line, extra={"log_store_level": level.value})


__all__ = ["DEFAULT_LOGGER_NAME", "StdlibLoggingSink"]
