"""Environment and ``.env`` driven configuration for the log store.

Purpose
-------
Translate keyword arguments plus ``LOG_*`` environment overrides into a
validated :class:`~lib_log_store.domain.config.LoggerConfig`, and optionally
seed the environment from the nearest ``.env`` file via python-dotenv.

Contents
--------
* :func:`enable_dotenv` - load ``.env`` once, never overriding real variables.
* :func:`load_config` - build a :class:`LoggerConfig` honouring overrides.
* ``ENV_*`` constants naming the recognised variables.

System Role
-----------
Outer-layer helper used by the CLI and by hosts that configure through the
environment; the domain config stays free of I/O.
"""

from __future__ import annotations

import os
from pathlib import Path
from threading import Lock
from typing import Any

from dotenv import find_dotenv, load_dotenv

from .domain.config import LoggerConfig
from .domain.levels import LogComplexity, LogLevel

DOTENV_ENV_VAR = "LIB_LOG_STORE_USE_DOTENV"

ENV_APP_NAME = "LOG_APP_NAME"
ENV_DEFAULT_LEVEL = "LOG_DEFAULT_LEVEL"
ENV_DEFAULT_COMPLEXITY = "LOG_DEFAULT_COMPLEXITY"
ENV_LEADING_GLYPH = "LOG_LEADING_GLYPH"
ENV_LOCALE = "LOG_LOCALE"
ENV_TIMEZONE = "LOG_TIMEZONE"
ENV_DATE_FORMAT = "LOG_DATE_FORMAT"
ENV_HISTORY_LENGTH = "LOG_HISTORY_LENGTH"
ENV_EXPORT_DIR = "LOG_EXPORT_DIR"

_TRUTHY = {"1", "true", "yes", "on"}

_dotenv_lock = Lock()
_dotenv_loaded_path: Path | None = None
_dotenv_attempted = False


def env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> _ = os.environ.pop('LOG_EXAMPLE_BOOL', None)
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_EXAMPLE_BOOL'] = 'off'
    >>> env_bool('LOG_EXAMPLE_BOOL', default=True)
    False
    """
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def enable_dotenv(*, search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` file into :data:`os.environ`.

    The search walks up from ``search_from`` (default: the working directory).
    Variables already present in the environment keep their values. Repeated
    calls are no-ops and return the first result.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """
    global _dotenv_loaded_path, _dotenv_attempted

    with _dotenv_lock:
        if _dotenv_attempted:
            return _dotenv_loaded_path
        _dotenv_attempted = True
        if search_from is not None:
            candidate = _find_upwards(Path(search_from))
        else:
            found = find_dotenv(usecwd=True)
            candidate = Path(found) if found else None
        if candidate is None:
            return None
        load_dotenv(candidate, override=False)
        _dotenv_loaded_path = candidate.resolve()
        return _dotenv_loaded_path


def _find_upwards(start: Path) -> Path | None:
    start = start.resolve()
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def _reset_dotenv_state_for_testing() -> None:
    global _dotenv_loaded_path, _dotenv_attempted

    with _dotenv_lock:
        _dotenv_loaded_path = None
        _dotenv_attempted = False


def _env_int(name: str, fallback: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return fallback
    try:
        return int(raw.strip().replace("_", ""))
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def load_config(
    *,
    application_name: str | None = None,
    default_level: str | LogLevel | None = None,
    default_complexity: str | LogComplexity | None = None,
    leading_glyph: str | None = None,
    locale: str | None = None,
    timezone: str | None = None,
    date_format: str | None = None,
    history_length: int | None = None,
    export_directory: str | Path | None = None,
) -> LoggerConfig:
    """Return a :class:`LoggerConfig` from arguments and ``LOG_*`` overrides.

    Environment variables take precedence over arguments; unspecified values
    fall back to :meth:`LoggerConfig.default`.

    Raises
    ------
    ValueError
        When a level, complexity, timezone, locale or history length is invalid.

    Examples
    --------
    >>> _ = os.environ.pop('LOG_HISTORY_LENGTH', None)
    >>> load_config(history_length=5, default_level="debug").default_level
    <LogLevel.DEBUG: 'debug'>
    """
    base = LoggerConfig.default()
    values: dict[str, Any] = {}

    values["application_name"] = os.getenv(ENV_APP_NAME, application_name or base.application_name)
    values["leading_glyph"] = os.getenv(ENV_LEADING_GLYPH, leading_glyph or base.leading_glyph)
    values["locale"] = os.getenv(ENV_LOCALE, locale or base.locale)
    values["timezone"] = os.getenv(ENV_TIMEZONE, timezone or base.timezone)
    values["date_format"] = os.getenv(ENV_DATE_FORMAT, date_format or base.date_format)
    values["history_length"] = _env_int(ENV_HISTORY_LENGTH, history_length if history_length is not None else base.history_length)

    level = os.getenv(ENV_DEFAULT_LEVEL) or default_level or base.default_level
    values["default_level"] = level if isinstance(level, LogLevel) else LogLevel.from_name(level)

    complexity = os.getenv(ENV_DEFAULT_COMPLEXITY) or default_complexity or base.default_complexity
    values["default_complexity"] = complexity if isinstance(complexity, LogComplexity) else LogComplexity.from_name(complexity)

    directory = os.getenv(ENV_EXPORT_DIR) or export_directory
    values["export_directory"] = Path(directory).expanduser() if directory else None

    return LoggerConfig(**values)


__all__ = [
    "DOTENV_ENV_VAR",
    "ENV_APP_NAME",
    "ENV_DATE_FORMAT",
    "ENV_DEFAULT_COMPLEXITY",
    "ENV_DEFAULT_LEVEL",
    "ENV_EXPORT_DIR",
    "ENV_HISTORY_LENGTH",
    "ENV_LEADING_GLYPH",
    "ENV_LOCALE",
    "ENV_TIMEZONE",
    "enable_dotenv",
    "env_bool",
    "load_config",
]
