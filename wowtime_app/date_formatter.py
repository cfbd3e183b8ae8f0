# wowtime_app/date_formatter.py

import math
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional
from zoneinfo import ZoneInfo
from .config import AppConfig
from .logger import AppLogger

logger = AppLogger.get_logger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

class DateFormatter:
    """Handles date formatting operations."""

    PLACEHOLDER = "WOW TIME"
    INVALID_DATE = "Invalid Date"
    MONTH_NAMES = (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    )

    def __init__(self, tz: Optional[tzinfo] = None):
        self.tz = tz

    @classmethod
    def from_config(cls, config: AppConfig) -> "DateFormatter":
        """Build a formatter for the configured timezone."""
        if config.timezone is None:
            return cls()
        return cls(ZoneInfo(config.timezone))

    def to_datetime(self, timestamp) -> Optional[datetime]:
        """Convert epoch milliseconds to an aware datetime, or None."""
        if not timestamp:
            return None
        try:
            # Fractional ms truncate toward zero; astimezone(None) is local time
            return (EPOCH + timedelta(milliseconds=math.trunc(timestamp))).astimezone(self.tz)
        except (OverflowError, ValueError, OSError, TypeError) as e:
            logger.debug(f"Unrepresentable timestamp {timestamp!r}: {e}")
            return None

    def format_date(self, timestamp) -> str:
        """Render a timestamp as "<Month> <day>, <year>"."""
        if not timestamp:
            logger.debug("No timestamp given, using placeholder")
            return self.PLACEHOLDER
        date = self.to_datetime(timestamp)
        if date is None:
            return self.INVALID_DATE
        return f"{self.MONTH_NAMES[date.month - 1]} {date.day}, {date.year}"


_default_formatter = DateFormatter()

def format_date(timestamp) -> str:
    """Format epoch milliseconds in host local time, "WOW TIME" when falsy."""
    return _default_formatter.format_date(timestamp)
