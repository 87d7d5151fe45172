"""
Pydantic data models for Amber price intervals and error bodies.
Defines the structure of interval prices returned by the price endpoints.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# Interval types reported in the "type" field
FORECAST_INTERVAL = "ForecastInterval"
CURRENT_INTERVAL = "CurrentInterval"
ACTUAL_INTERVAL = "ActualInterval"

# Channel types reported in the "channelType" field
CHANNEL_GENERAL = "general"
CHANNEL_FEED_IN = "feedIn"
CHANNEL_CONTROLLED_LOAD = "controlledLoad"


class Price(BaseModel):
    """
    A priced time interval for one channel of a site.
    
    Field names follow Python conventions; the JSON camelCase names are
    accepted as aliases:
    {"type": "ForecastInterval", "date": "2021-05-05", "duration": 30,
     "startTime": "2021-05-05T02:00:01Z", "endTime": "2021-05-05T02:30:00Z",
     "nemTime": "2021-05-05T12:30:00+10:00", "perKwh": 6.12, ...}
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)
    
    type: str = Field(description="Interval type, e.g. ForecastInterval or CurrentInterval")
    date: str = Field(description="Calendar date of the interval (YYYY-MM-DD)")
    duration: int = Field(description="Interval length in minutes")
    start_time: datetime = Field(alias="startTime", description="Interval start timestamp")
    end_time: datetime = Field(alias="endTime", description="Interval end timestamp")
    nem_time: str = Field(alias="nemTime", description="Interval time in NEM market time")
    per_kwh: float = Field(
        alias="perKwh",
        description="Price in c/kWh including network and market fees - can be negative"
    )
    renewables: float = Field(description="Percentage of renewables in the grid")
    spot_per_kwh: float = Field(alias="spotPerKwh", description="Wholesale spot price in c/kWh")
    channel_type: str = Field(alias="channelType", description="Channel type: general, feedIn or controlledLoad")
    spike_status: str = Field(alias="spikeStatus", description="Price spike indicator from the server")
    # Actual intervals are never estimates and the server omits the field for them
    estimate: bool = Field(default=False, description="True if the price is provisional")


class ErrorResponse(BaseModel):
    """
    Error body returned with non-success statuses: {"message": "..."}.
    """
    message: str = Field(default="", description="Server supplied error message")
