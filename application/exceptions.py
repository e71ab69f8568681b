"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
"""


class WorkoutRequestNotFoundError(Exception):
    """Raised when generated content is saved for an unknown request ID."""

    def __init__(self, request_id: int):
        self.request_id = request_id
        super().__init__(f"Workout request with ID {request_id} not found")


class HistoryStorageError(Exception):
    """Error while reading or writing workout history.

    Raised by repository implementations when the backing store
    rejects a query or returns no data for a write.
    """

    pass
