from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import pytest

from lib_log_store.adapters import (
    FileReportWriter,
    ProcessTerminator,
    RichConsoleSink,
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
from lib_log_store.domain.levels import LogLevel


@pytest.mark.parametrize(
    "adapter, port",
    [
        (RichConsoleSink(), DiagnosticSinkPort),
        (StdlibLoggingSink(), DiagnosticSinkPort),
        (FileReportWriter(), ReportWriterPort),
        (ProcessTerminator(), TerminatorPort),
        (SystemClock(), ClockPort),
        (UuidProvider(), IdProvider),
    ],
)
def test_adapters_satisfy_ports(adapter: object, port: type) -> None:
    assert isinstance(adapter, port)


def test_structural_fakes_satisfy_ports() -> None:
    class _Sink:
        def emit(self, line: str, *, level: LogLevel) -> None:
            return None

    class _Writer:
        def write(self, content: str, *, directory: Path, file_name: str) -> Path:
            return directory / file_name

    class _Clock:
        def now(self) -> datetime:
            return datetime(2025, 1, 1, tzinfo=timezone.utc)

    assert isinstance(_Sink(), DiagnosticSinkPort)
    assert isinstance(_Writer(), ReportWriterPort)
    assert isinstance(_Clock(), ClockPort)
    assert not isinstance(object(), DiagnosticSinkPort)
