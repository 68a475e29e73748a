from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from io import StringIO
from pathlib import Path
from typing import Any, Callable, Iterator

import pytest
from rich.console import Console

from lib_log_store.application.store import LogStore
from lib_log_store.domain.config import LoggerConfig
from lib_log_store.domain.entries import LogEntry
from lib_log_store.domain.levels import LogComplexity, LogLevel
from lib_log_store.runtime import build_store

FIXED_NOW = datetime(2025, 9, 23, 12, 0, 0, 500000, tzinfo=timezone.utc)


class FatalTermination(Exception):
    """Raised by :class:`RecordingTerminator` in place of ending the process."""


class FixedClock:
    def __init__(self, start: datetime = FIXED_NOW, step: timedelta = timedelta(0)) -> None:
        self.current = start
        self.step = step

    def now(self) -> datetime:
        value = self.current
        self.current = value + self.step
        return value


class SequentialIds:
    def __init__(self) -> None:
        self.counter = 0

    def __call__(self) -> str:
        self.counter += 1
        return f"entry-{self.counter}"


@dataclass
class RecordingSink:
    lines: list[tuple[str, LogLevel]] = field(default_factory=list)

    def emit(self, line: str, *, level: LogLevel) -> None:
        self.lines.append((line, level))


@dataclass
class RecordingTerminator:
    error = FatalTermination
    messages: list[str] = field(default_factory=list)
    on_terminate: Callable[[], None] | None = None

    def terminate(self, message: str) -> None:
        self.messages.append(message)
        if self.on_terminate is not None:
            self.on_terminate()
        raise FatalTermination(message)


@dataclass
class MemoryWriter:
    writes: list[tuple[str, Path, str]] = field(default_factory=list)

    def write(self, content: str, *, directory: Path, file_name: str) -> Path:
        self.writes.append((content, directory, file_name))
        return directory / file_name


def make_entry(
    index: int,
    *messages: str,
    level: LogLevel = LogLevel.INFO,
    complexity: LogComplexity = LogComplexity.SIMPLE,
) -> LogEntry:
    return LogEntry(
        entry_id=f"e{index}",
        timestamp=FIXED_NOW + timedelta(seconds=index),
        messages=messages or (f"message-{index}",),
        level=level,
        complexity=complexity,
        file="app/main.py",
        line=10 + index,
        function="handler()",
    )


@dataclass
class StoreHarness:
    store: LogStore
    sink: Any
    terminator: RecordingTerminator
    clock: FixedClock


@pytest.fixture
def memory_writer() -> MemoryWriter:
    return MemoryWriter()


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def make_store(tmp_path: Path) -> Callable[..., StoreHarness]:
    def _factory(history_length: int = 10, *, sink: object | None = None, **config_overrides: object) -> StoreHarness:
        config_overrides.setdefault("export_directory", tmp_path)
        config_overrides.setdefault("date_format", "yyyy-MM-dd'T'HH-mm-ss.SSSSSS")
        config = LoggerConfig(history_length=history_length, **config_overrides)  # type: ignore[arg-type]
        recording_sink = sink if sink is not None else RecordingSink()
        recording_terminator = RecordingTerminator()
        clock = FixedClock()
        store = build_store(
            config,
            sink=recording_sink,
            terminator=recording_terminator,
            clock=clock,
            id_provider=SequentialIds(),
        )
        return StoreHarness(store=store, sink=recording_sink, terminator=recording_terminator, clock=clock)

    return _factory


@pytest.fixture
def entry_factory() -> Callable[..., LogEntry]:
    return make_entry


@pytest.fixture
def record_console() -> Iterator[Console]:
    console = Console(file=StringIO(), record=True, width=200, color_system=None)
    yield console
