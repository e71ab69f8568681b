"""
Workout history repository port (interface).

This Protocol defines the contract for storing workout requests and the
workouts generated for them. Infrastructure implementations (Supabase,
in-memory) must satisfy this interface.
"""

from typing import Dict, List, Protocol


class WorkoutHistoryRepository(Protocol):
    """
    Repository interface for workout requests and generated workouts.

    All methods work with dictionaries using snake_case keys:
    muscle_groups, intensity, workout_type, goal, duration.
    """

    def create_request(self, data: Dict) -> Dict:
        """
        Store an incoming workout request.

        Args:
            data: Request parameters

        Returns:
            Stored request dictionary with generated integer `id` and `timestamp`
        """
        ...

    def save_content(self, request_id: int, content: str) -> Dict:
        """
        Store the generated workout for a request.

        The request parameters are copied onto the history entry.

        Args:
            request_id: ID returned by create_request()
            content: Generated workout HTML

        Returns:
            Stored history entry dictionary

        Raises:
            WorkoutRequestNotFoundError: If no request has this ID
        """
        ...

    def get_history(self) -> List[Dict]:
        """
        Get all generated workouts.

        Returns:
            History entries, newest first
        """
        ...
