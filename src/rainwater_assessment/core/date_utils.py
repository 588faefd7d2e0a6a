"""
Date and timezone utilities.

Centralizes the timestamps stamped onto assessment reports.
"""

import logging
from datetime import datetime
from typing import Optional
import pytz
from pytz.tzinfo import BaseTzInfo


class DateUtils:
    """Utilities for date and timezone handling."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'Asia/Kolkata', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    def now_in_timezone(
        self,
        timezone_str: str,
        reference_time: Optional[datetime] = None
    ) -> datetime:
        """
        Get the current (or reference) time in the specified timezone.

        Args:
            timezone_str: Timezone string
            reference_time: Reference time (defaults to now in UTC). Naive values are treated as UTC.

        Returns:
            Timezone-aware datetime in the target timezone
        """
        tz = self.parse_timezone(timezone_str)

        if reference_time is None:
            reference_time = datetime.now(pytz.UTC)
        elif reference_time.tzinfo is None:
            reference_time = pytz.UTC.localize(reference_time)

        local_time = reference_time.astimezone(tz)
        self.logger.debug(
            f"Reference time: {reference_time.isoformat()} -> "
            f"Local time: {local_time.isoformat()}"
        )
        return local_time

    @staticmethod
    def to_iso_with_timezone(dt: datetime) -> str:
        """
        Convert datetime to ISO format string with timezone.

        Args:
            dt: Datetime object (should be timezone-aware)

        Returns:
            ISO format string with timezone (e.g., '2024-06-01T10:30:00+05:30')

        Raises:
            ValueError: If datetime is not timezone-aware
        """
        if dt.tzinfo is None:
            raise ValueError("Datetime must be timezone-aware")

        return dt.isoformat()

    @staticmethod
    def format_report_date(dt: datetime) -> str:
        """Format a date the way printed reports show it (DD/MM/YYYY)."""
        return dt.strftime("%d/%m/%Y")
