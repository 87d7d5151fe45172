"""
Utility helpers for the Amber API client.
"""

from .time_utils import forecast_date_window

__all__ = [
    "forecast_date_window",
]
