"""
Pydantic model for metering sites linked to an Amber account.
"""

from pydantic import BaseModel, ConfigDict, Field


class Site(BaseModel):
    """
    A point of electricity consumption or generation tied to the account.
    
    Based on the /sites response:
    [{"id": "01F5A5CRKMZ5BCX9P1S4V990AM", "nmi": "3052282872", ...}]
    """
    model_config = ConfigDict(frozen=True)
    
    id: str = Field(description="Site identifier used in price endpoints")
    nmi: str = Field(description="National Metering Identifier of the connection point")
