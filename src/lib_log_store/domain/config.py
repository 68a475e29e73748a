"""Immutable logger configuration.

Purpose
-------
Capture the settings a :class:`~lib_log_store.application.store.LogStore` is
constructed with: report naming, defaults for log calls, timestamp rendering
and the retained history capacity.

Contents
--------
* :class:`LoggerConfig` frozen dataclass with validation and timestamp rendering.
* ``DEFAULT_*`` constants mirroring the shipped defaults.

Timestamps are rendered with Babel, so ``date_format`` is an LDML pattern
(``yyyy-MM-dd HH:mm``) and month or day names follow ``locale``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timezone, tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from babel import Locale, UnknownLocaleError
from babel.dates import format_datetime

from .levels import LogComplexity, LogLevel

DEFAULT_APPLICATION_NAME = "Hydrogen Reporter"
DEFAULT_LEADING_GLYPH = "⚫️"
DEFAULT_LOCALE = "en_US"
DEFAULT_TIMEZONE = "UTC"
DEFAULT_DATE_FORMAT = "yyyy-MM-dd'T'HH:mm:ss.SSSxxxxx"
DEFAULT_HISTORY_LENGTH = 100_000


def _resolve_timezone(name: str) -> tzinfo:
    """Translate a timezone identifier into a :class:`tzinfo`.

    Examples
    --------
    >>> _resolve_timezone("utc") is timezone.utc
    True
    """
    cleaned = name.strip()
    if cleaned.upper() in {"UTC", "Z", "GMT"}:
        return timezone.utc
    try:
        return ZoneInfo(cleaned)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {name!r}") from exc


def _resolve_locale(name: str) -> Locale:
    """Translate a locale identifier (``_`` or ``-`` separated) into a Babel :class:`Locale`.

    Examples
    --------
    >>> str(_resolve_locale("de-DE"))
    'de_DE'
    """
    try:
        return Locale.parse(name.strip().replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError) as exc:
        raise ValueError(f"Unknown locale: {name!r}") from exc


@dataclass(slots=True, frozen=True)
class LoggerConfig:
    """Configuration fixed at store construction.

    Attributes
    ----------
    application_name:
        Name printed on the report header line.
    default_level, default_complexity:
        Values applied when a log call omits them.
    leading_glyph:
        Cosmetic glyph kept for hosts that decorate their own output.
    locale:
        CLDR locale identifier (``en_US``, ``de-DE``) used for month and day names.
    timezone:
        IANA timezone identifier (``"UTC"`` accepted case-insensitively).
    date_format:
        LDML date pattern used for report headers and file names.
    history_length:
        Maximum number of retained entries; must be at least 1.
    export_directory:
        Base directory receiving the ``logs`` folder; ``None`` selects the
        system temporary directory.
    """

    application_name: str = DEFAULT_APPLICATION_NAME
    default_level: LogLevel = LogLevel.INFO
    default_complexity: LogComplexity = LogComplexity.SIMPLE
    leading_glyph: str = DEFAULT_LEADING_GLYPH
    locale: str = DEFAULT_LOCALE
    timezone: str = DEFAULT_TIMEZONE
    date_format: str = DEFAULT_DATE_FORMAT
    history_length: int = DEFAULT_HISTORY_LENGTH
    export_directory: Path | None = None

    def __post_init__(self) -> None:
        if self.history_length < 1:
            raise ValueError("history_length must be at least 1")
        if not self.date_format.strip():
            raise ValueError("date_format must not be empty")
        _resolve_timezone(self.timezone)
        _resolve_locale(self.locale)
        if self.export_directory is not None:
            object.__setattr__(self, "export_directory", Path(self.export_directory))

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Return the configuration used when the host supplies none."""

        return cls()

    @property
    def zone(self) -> tzinfo:
        return _resolve_timezone(self.timezone)

    @property
    def babel_locale(self) -> Locale:
        return _resolve_locale(self.locale)

    def format_timestamp(self, moment: datetime) -> str:
        """Render ``moment`` in the configured timezone, locale and format.

        Examples
        --------
        >>> cfg = LoggerConfig(date_format="yyyy-MM-dd HH:mm")
        >>> cfg.format_timestamp(datetime(2025, 1, 2, 3, 4, tzinfo=timezone.utc))
        '2025-01-02 03:04'
        >>> LoggerConfig().format_timestamp(datetime(2025, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc))
        '2025-01-02T03:04:05.678+00:00'
        """
        zone = self.zone
        return format_datetime(moment.astimezone(zone), self.date_format, tzinfo=zone, locale=self.babel_locale)

    def replace(self, **changes: Any) -> "LoggerConfig":
        """Return a copied configuration with ``changes`` applied."""

        return replace(self, **changes)


__all__ = [
    "DEFAULT_APPLICATION_NAME",
    "DEFAULT_DATE_FORMAT",
    "DEFAULT_HISTORY_LENGTH",
    "DEFAULT_LEADING_GLYPH",
    "DEFAULT_LOCALE",
    "DEFAULT_TIMEZONE",
    "LoggerConfig",
]
