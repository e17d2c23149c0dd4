"""Date parsing and normalization utilities."""

from datetime import date, datetime, timedelta
from typing import Optional, Tuple, Union

from ..core.logger import get_logger

logger = get_logger(__name__)

Timestamp = Union[int, float, datetime]


class DateUtils:
    """Date parsing and normalization utilities."""

    # Formats accepted for calendar-date input
    DATE_FORMATS = [
        '%Y-%m-%d',
        '%Y/%m/%d',
        '%m/%d/%Y',
        '%d-%m-%Y',
        '%Y%m%d',
    ]

    @staticmethod
    def normalize_timestamp(value: Timestamp) -> datetime:
        """Convert epoch seconds or a datetime to a naive local datetime with whole seconds.

        Dropping the sub-second part keeps photo dates stable across save and reload.
        """
        if isinstance(value, datetime):
            dt = value
            if dt.tzinfo is not None:
                dt = dt.astimezone().replace(tzinfo=None)
        elif isinstance(value, (int, float)):
            dt = datetime.fromtimestamp(value)
        else:
            raise TypeError(f"Unsupported timestamp type: {type(value).__name__}")

        return dt.replace(microsecond=0)

    @staticmethod
    def to_date(value: Union[date, datetime, None]) -> Optional[date]:
        """Truncate a datetime to its calendar date; dates pass through."""
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.date()
        return value

    @staticmethod
    def day_bounds(start: date, end: date) -> Tuple[datetime, datetime]:
        """Half-open datetime interval covering every day from start through end."""
        lower = datetime.combine(start, datetime.min.time())
        upper = datetime.combine(end + timedelta(days=1), datetime.min.time())
        return lower, upper

    @staticmethod
    def parse_date_string(date_str: str) -> Optional[date]:
        """Parse a calendar date from string using the accepted formats."""
        if not date_str:
            return None

        date_str = date_str.strip()

        for fmt in DateUtils.DATE_FORMATS:
            try:
                return datetime.strptime(date_str, fmt).date()
            except ValueError:
                continue

        logger.debug(f"Unrecognized date string: {date_str!r}")
        return None

    @staticmethod
    def is_valid_date_range(start_date: Optional[date], end_date: Optional[date]) -> bool:
        """Check that both bounds are present and ordered."""
        if start_date is None or end_date is None:
            return False
        return start_date <= end_date


def parse_date_string(date_str: str) -> Optional[date]:
    """Parse a calendar date from string using the accepted formats."""
    return DateUtils.parse_date_string(date_str)
