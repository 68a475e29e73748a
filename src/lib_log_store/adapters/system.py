"""System adapters: wall clock, identifiers and process termination."""

from __future__ import annotations

import os
import sys
from datetime import datetime, timezone
from typing import NoReturn
from uuid import uuid4

from lib_log_store.application.ports import ClockPort, IdProvider, TerminatorPort

EXIT_FATAL = 70
"""Exit status used for fatal entries (``EX_SOFTWARE`` from ``sysexits.h``)."""


class SystemClock(ClockPort):
    """Concrete clock port returning timezone-aware UTC timestamps."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class UuidProvider(IdProvider):
    """Generate random hexadecimal identifiers for log entries."""

    def __call__(self) -> str:
        return uuid4().hex


class ProcessTerminator(TerminatorPort):
    """Write the fatal diagnostic to stderr and end the process immediately.

    Ends through :func:`os._exit`; caller ``except`` and ``finally`` blocks
    do not run.
    """

    def __init__(self, *, exit_code: int = EXIT_FATAL) -> None:
        self._exit_code = exit_code

    def terminate(self, message: str) -> NoReturn:
        for stream in (sys.stdout, sys.stderr):
            try:
                stream.flush()
            except (OSError, ValueError):
                pass
        try:
            sys.stderr.write(f"Fatal error: {message}\n")
            sys.stderr.flush()
        finally:
            os._exit(self._exit_code)


__all__ = ["EXIT_FATAL", "ProcessTerminator", "SystemClock", "UuidProvider"]
