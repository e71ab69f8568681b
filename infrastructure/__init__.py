"""
Infrastructure layer package for fitgen-api.

This package contains concrete implementations of the port interfaces.
"""

from infrastructure.db import SupabaseWorkoutHistoryRepository
from infrastructure.memory import InMemoryWorkoutHistoryRepository

__all__ = [
    "InMemoryWorkoutHistoryRepository",
    "SupabaseWorkoutHistoryRepository",
]
