"""
Services package for the Amber API client.
Contains the HTTP client for sites and price endpoints.
"""

from .amber_client import AmberClient, new_client

__all__ = [
    "AmberClient",
    "new_client",
]
