"""Error taxonomy shared by the ledger service, the HTTP layer and the client.

Each error carries the HTTP status the API answers with, so the server can map
any of them to a ``{"message": ...}`` response without a lookup table.
"""
from typing import Optional


class GardenError(Exception):
    status_code = 500

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_dict(self) -> dict:
        body = {"message": self.message}
        if self.detail:
            body["error"] = self.detail
        return body


class ValidationError(GardenError):
    """Request content rejected before anything is persisted."""
    status_code = 400


class NotFoundError(GardenError):
    status_code = 404


class StorageError(GardenError):
    """The document store could not be read or written."""
    status_code = 500


class NetworkError(GardenError):
    """Client could not reach the API at all (no HTTP response)."""
    status_code = 503


__all__ = ['GardenError', 'ValidationError', 'NotFoundError', 'StorageError', 'NetworkError']
