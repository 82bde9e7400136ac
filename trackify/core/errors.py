"""
Domain errors raised by services and stores.

Routers never build HTTP responses for these themselves; the handlers
registered in ``trackify.main`` turn them into JSON bodies with the status
code carried by each class.
"""
from typing import Any, Dict, List, Optional

from fastapi import status


class TrackifyError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message}


class ValidationError(TrackifyError):
    """Malformed or missing input. Carries one entry per offending field."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Validation failed"

    def __init__(self, errors: List[Dict[str, str]], message: Optional[str] = None):
        super().__init__(message)
        self.errors = errors

    def to_dict(self) -> Dict[str, Any]:
        return {"detail": self.message, "errors": self.errors}


class Unauthorized(TrackifyError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"

    @property
    def headers(self) -> Optional[Dict[str, str]]:
        return {"WWW-Authenticate": "Bearer"}


class NotFound(TrackifyError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class Conflict(TrackifyError):
    status_code = status.HTTP_409_CONFLICT
    message = "Conflict"


class StorageError(TrackifyError):
    message = "Storage backend error"
