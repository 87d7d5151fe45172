"""
Domain exceptions for the Amber API client.
Provides clear, typed exceptions for failures the client itself detects.

Network failures (DNS, connection, timeout) are not wrapped: they surface
as the original ``httpx`` exceptions.
"""


class AmberAPIException(Exception):
    """Base exception for all Amber API client errors."""
    pass


class RequestConstructionError(AmberAPIException):
    """Raised when a request cannot be built (malformed URL or method)."""
    pass


class APIError(AmberAPIException):
    """
    Raised when the server answers with a non-success status.
    
    ``str(error)`` is exactly the server's message, or a generic
    ``unknown error, status code: N`` when the body carried none.
    """
    
    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DecodeError(AmberAPIException):
    """Raised when a success response body does not match the expected shape."""
    pass
