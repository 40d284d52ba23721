"""Release date normalization for PR TIMES listings.

Search results render a release time in one of three shapes depending on
its age. This module converts all of them into one display format.

Usage:
    from prtimes_aggregator.utils.date_normalizer import DateNormalizer

    normalizer = DateNormalizer()

    normalizer.normalize("3時間前")                  # now - 3h
    normalizer.normalize("45分前")                   # now - 45m
    normalizer.normalize("2024年12月3日 09時00分")   # "2024年12月03日 09:00"
    normalizer.normalize("unknown")                  # now, logs a warning

    # Inspect which shape matched
    parsed = normalizer.classify("3時間前")
    # -> ParsedDate(kind=DateFormat.RELATIVE_HOURS, ...)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from ..constants import CANONICAL_DATE_FORMAT, DEFAULT_TIMEZONE

logger = logging.getLogger("prtimes")

Clock = Callable[[], datetime]


class DateFormat(str, Enum):
    """Source shapes a release time can arrive in."""

    RELATIVE_HOURS = "relative_hours"
    RELATIVE_MINUTES = "relative_minutes"
    ABSOLUTE = "absolute"
    UNRECOGNIZED = "unrecognized"


@dataclass(frozen=True)
class ParsedDate:
    """A source string resolved to a point in time."""

    source: str
    kind: DateFormat
    value: datetime

    @property
    def is_fallback(self) -> bool:
        """True when the value is the current time substituted for an unknown shape."""
        return self.kind is DateFormat.UNRECOGNIZED

    def format(self) -> str:
        return self.value.strftime(CANONICAL_DATE_FORMAT)


class DateNormalizer:
    """Converts PR TIMES release times into ``YYYY年MM月DD日 HH:MM``.

    Shapes are tried in a fixed order. Relative shapes come first because a
    relative string never parses as an absolute one and would otherwise be
    reported as unrecognized.

    Supported shapes:
    - "3時間前"                 (N hours ago)
    - "45分前"                  (N minutes ago)
    - "2024年12月3日 09時00分"  (absolute, month/day/hour may be unpadded)
    """

    RELATIVE_HOURS_PATTERN = re.compile(r"(\d+)時間前")
    RELATIVE_MINUTES_PATTERN = re.compile(r"(\d+)分前")
    ABSOLUTE_PATTERN = re.compile(
        r"^(\d{4})年(\d{1,2})月(\d{1,2})日\s*(\d{1,2})時(\d{2})分$"
    )

    def __init__(self, timezone: str = DEFAULT_TIMEZONE, clock: Optional[Clock] = None):
        """Initialize the normalizer.

        Args:
            timezone: IANA zone for "now" when resolving relative times.
            clock: Optional zero-argument callable returning the current time.
                Defaults to the wall clock in ``timezone``.
        """
        self.timezone = ZoneInfo(timezone)
        self._clock = clock

    def now(self) -> datetime:
        if self._clock is not None:
            return self._clock()
        return datetime.now(self.timezone)

    def classify(self, value: str) -> ParsedDate:
        """Resolve a source string, falling back to now for unknown shapes."""
        text = (value or "").strip()

        for parse in (self._parse_relative_hours, self._parse_relative_minutes, self._parse_absolute):
            parsed = parse(text)
            if parsed is not None:
                return parsed

        return self._fallback_now(text)

    def normalize(self, value: str) -> str:
        """Convert a source string to the canonical display format."""
        return self.classify(value).format()

    # -------------------------------------------------------------------------
    # Matchers
    # -------------------------------------------------------------------------

    def _parse_relative_hours(self, text: str) -> Optional[ParsedDate]:
        match = self.RELATIVE_HOURS_PATTERN.search(text)
        if not match:
            return None
        try:
            value = self.now() - timedelta(hours=int(match.group(1)))
        except OverflowError:
            # Offset reaches outside the datetime range
            return None
        return ParsedDate(text, DateFormat.RELATIVE_HOURS, value)

    def _parse_relative_minutes(self, text: str) -> Optional[ParsedDate]:
        match = self.RELATIVE_MINUTES_PATTERN.search(text)
        if not match:
            return None
        try:
            value = self.now() - timedelta(minutes=int(match.group(1)))
        except OverflowError:
            return None
        return ParsedDate(text, DateFormat.RELATIVE_MINUTES, value)

    def _parse_absolute(self, text: str) -> Optional[ParsedDate]:
        match = self.ABSOLUTE_PATTERN.match(text)
        if not match:
            return None
        year, month, day, hour, minute = (int(g) for g in match.groups())
        try:
            value = datetime(year, month, day, hour, minute)
        except ValueError:
            # Shape matched but the date does not exist (e.g. 2月30日)
            return None
        return ParsedDate(text, DateFormat.ABSOLUTE, value)

    def _fallback_now(self, text: str) -> ParsedDate:
        logger.warning(f"DATE_PARSE_WARNING | value={text!r} | using current time")
        return ParsedDate(text, DateFormat.UNRECOGNIZED, self.now())


# Module-level convenience function
_default_normalizer: DateNormalizer | None = None


def normalize_release_date(value: str) -> str:
    """Normalize a release time with the default Asia/Tokyo normalizer."""
    global _default_normalizer
    if _default_normalizer is None:
        _default_normalizer = DateNormalizer()
    return _default_normalizer.normalize(value)
