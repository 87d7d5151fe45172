"""
Time utility functions for building forecast date windows.
"""

from datetime import datetime, timedelta
from typing import Tuple

DATE_FORMAT = "%Y-%m-%d"
FORECAST_WINDOW = timedelta(hours=24)


def forecast_date_window(now: datetime, date_format: str = DATE_FORMAT) -> Tuple[str, str]:
    """
    Calculate the start and end dates for a 24-hour forecast request.
    
    Args:
        now: Moment of the request, naive local time or timezone-aware
        date_format: strftime format for both dates
    
    Returns:
        Tuple of (start_date, end_date) strings
        
    The end date is the instant 24 elapsed hours after ``now``, formatted in
    the same timezone. It is not the calendar day after the start date, and
    on daylight-saving changeover days it differs from wall-clock ``+ 24h``.
    """
    end = datetime.fromtimestamp(now.timestamp() + FORECAST_WINDOW.total_seconds(), tz=now.tzinfo)
    return now.strftime(date_format), end.strftime(date_format)
