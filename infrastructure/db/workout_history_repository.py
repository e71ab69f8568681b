"""
Supabase implementation of WorkoutHistoryRepository.

Queries against:
- workout_requests: Parameters of every generation request
- workout_history: Generated workouts, with the request parameters duplicated
  for easier querying
"""

import logging
from typing import Dict, List

from supabase import Client

from application.exceptions import HistoryStorageError, WorkoutRequestNotFoundError

logger = logging.getLogger(__name__)

REQUEST_FIELDS = ("muscle_groups", "intensity", "workout_type", "goal", "duration")


class SupabaseWorkoutHistoryRepository:
    """
    Supabase-backed workout history repository.

    The client is injected via constructor for testability. Client and
    network errors surface as HistoryStorageError.
    """

    def __init__(self, client: Client):
        """
        Initialize repository with Supabase client.

        Args:
            client: Authenticated Supabase client
        """
        self._client = client

    def create_request(self, data: Dict) -> Dict:
        """
        Store an incoming workout request.

        Args:
            data: Request parameters

        Returns:
            Created request dictionary with generated ID and timestamp

        Raises:
            HistoryStorageError: If the insert fails
        """
        row = {field: data[field] for field in REQUEST_FIELDS}
        try:
            response = self._client.table("workout_requests").insert(row).execute()

            if not response.data:
                raise HistoryStorageError("Insert into workout_requests returned no data")

            return response.data[0]
        except Exception as e:
            if isinstance(e, HistoryStorageError):
                raise
            raise HistoryStorageError(f"Storing workout request failed: {e}") from e

    def save_content(self, request_id: int, content: str) -> Dict:
        """
        Store the generated workout for a request.

        Args:
            request_id: ID of the stored request
            content: Generated workout HTML

        Returns:
            Created history entry

        Raises:
            WorkoutRequestNotFoundError: If the request does not exist
            HistoryStorageError: If a query fails
        """
        try:
            response = (
                self._client.table("workout_requests")
                .select("*")
                .eq("id", request_id)
                .limit(1)
                .execute()
            )
        except Exception as e:
            raise HistoryStorageError(f"Loading workout request {request_id} failed: {e}") from e

        if not response.data:
            raise WorkoutRequestNotFoundError(request_id)
        request = response.data[0]

        row = {
            "request_id": request_id,
            "content": content,
            **{field: request[field] for field in REQUEST_FIELDS},
        }
        try:
            response = self._client.table("workout_history").insert(row).execute()

            if not response.data:
                raise HistoryStorageError("Insert into workout_history returned no data")
        except Exception as e:
            if isinstance(e, HistoryStorageError):
                raise
            raise HistoryStorageError(f"Storing workout history failed: {e}") from e

        logger.debug(f"Saved workout history for request {request_id}")
        return response.data[0]

    def get_history(self) -> List[Dict]:
        """
        Get all generated workouts, newest first.

        Returns:
            List of history entry dictionaries

        Raises:
            HistoryStorageError: If the query fails
        """
        try:
            response = (
                self._client.table("workout_history")
                .select("*")
                .order("timestamp", desc=True)
                .execute()
            )
        except Exception as e:
            raise HistoryStorageError(f"Loading workout history failed: {e}") from e

        return response.data or []
