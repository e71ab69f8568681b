"""
In-memory implementation of WorkoutHistoryRepository.

Used when no database is configured, e.g. local development. Data lives for
the life of the process only.
"""

from datetime import datetime, timezone
from itertools import count
from threading import Lock
from typing import Dict, List

from application.exceptions import WorkoutRequestNotFoundError

REQUEST_FIELDS = ("muscle_groups", "intensity", "workout_type", "goal", "duration")


class InMemoryWorkoutHistoryRepository:
    """
    Process-local workout history store.

    Provides the same interface as SupabaseWorkoutHistoryRepository. IDs are
    sequential integers starting at 1.
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._requests: Dict[int, Dict] = {}
        self._workouts: Dict[int, Dict] = {}
        self._request_ids = count(1)
        self._workout_ids = count(1)
        self._lock = Lock()

    def create_request(self, data: Dict) -> Dict:
        with self._lock:
            request_id = next(self._request_ids)
            request = {
                "id": request_id,
                **{field: data[field] for field in REQUEST_FIELDS},
                "timestamp": datetime.now(timezone.utc),
            }
            self._requests[request_id] = request
            return dict(request)

    def save_content(self, request_id: int, content: str) -> Dict:
        with self._lock:
            request = self._requests.get(request_id)
            if request is None:
                raise WorkoutRequestNotFoundError(request_id)

            workout_id = next(self._workout_ids)
            workout = {
                "id": workout_id,
                "request_id": request_id,
                "content": content,
                "timestamp": datetime.now(timezone.utc),
                **{field: request[field] for field in REQUEST_FIELDS},
            }
            self._workouts[workout_id] = workout
            return dict(workout)

    def get_history(self) -> List[Dict]:
        with self._lock:
            workouts = [dict(w) for w in self._workouts.values()]
        # Ties on timestamp fall back to insertion order, newest first
        return sorted(workouts, key=lambda w: (w["timestamp"], w["id"]), reverse=True)

    def reset(self) -> None:
        """Clear all stored data."""
        with self._lock:
            self._requests.clear()
            self._workouts.clear()
            self._request_ids = count(1)
            self._workout_ids = count(1)
