"""
Sync Job Exceptions

Every error here is fatal for the run; the orchestrator logs it and exits 2.
"""


class SyncError(Exception):
    """Base class for failures after configuration has been loaded."""


class TransportError(SyncError):
    """Source API answered with a non-success HTTP status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Source API HTTP {status_code}")


class ShapeError(SyncError):
    """Source API response is missing the data array."""


class ServiceError(SyncError):
    """Spreadsheet service rejected a clear or update call."""
