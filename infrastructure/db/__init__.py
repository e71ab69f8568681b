"""
Database infrastructure package.
"""

from infrastructure.db.workout_history_repository import SupabaseWorkoutHistoryRepository

__all__ = [
    "SupabaseWorkoutHistoryRepository",
]
