"""
Data models package for the Amber API client.
Contains Pydantic models for sites, prices and error bodies.
"""

from .price import (
    ACTUAL_INTERVAL,
    CHANNEL_CONTROLLED_LOAD,
    CHANNEL_FEED_IN,
    CHANNEL_GENERAL,
    CURRENT_INTERVAL,
    FORECAST_INTERVAL,
    ErrorResponse,
    Price,
)
from .site import Site

__all__ = [
    "Site",
    "Price",
    "ErrorResponse",
    "FORECAST_INTERVAL",
    "CURRENT_INTERVAL",
    "ACTUAL_INTERVAL",
    "CHANNEL_GENERAL",
    "CHANNEL_FEED_IN",
    "CHANNEL_CONTROLLED_LOAD",
]
