"""
Platform Client - Exceptions
"""
from typing import Any, Optional


class PlatformError(Exception):
    """Base exception for platform client errors"""
    pass


class PlatformTransportError(PlatformError):
    """Raised when the request never produced a response (connection, timeout)"""
    pass


class PlatformServerError(PlatformError):
    """Raised when the server answers with an error status"""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: Any = None,
        response: Optional[Any] = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.response = response


class PlatformNotFoundError(PlatformServerError):
    """Raised when the requested resource does not exist (404)"""
    pass


class InvalidArgumentError(PlatformError, ValueError):
    """Raised when a call is rejected locally before any request is sent"""
    pass
