"""Base exceptions for neo-userinfo.

All exceptions inherit from NeoUserInfoError and carry an error code and
structured details for logging.
"""

from typing import Any, Dict, Optional


class NeoUserInfoError(Exception):
    """Base exception for all neo-userinfo errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_details(exception: NeoUserInfoError) -> Dict[str, Any]:
    """Create a structured error dictionary from exception.

    Args:
        exception: The neo-userinfo exception

    Returns:
        Error dictionary suitable for structured logging
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
