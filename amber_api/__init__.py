"""
Amber API - client for the Amber Electric pricing API

An async client that lists the sites linked to an API key and fetches
current and forecast interval prices for a site.

Main components:
- AmberClient for the sites and prices endpoints
- Pydantic models for sites and price intervals
- Domain exceptions for API, decode and request errors
"""

from amber_api.exceptions import AmberAPIException, APIError, DecodeError, RequestConstructionError
from amber_api.models import Price, Site
from amber_api.services import AmberClient, new_client

__version__ = "1.0.0"

__all__ = [
    "AmberClient",
    "new_client",
    "Site",
    "Price",
    "AmberAPIException",
    "APIError",
    "DecodeError",
    "RequestConstructionError",
]
