"""
Port interfaces (Protocols) for fitgen-api.

This package defines the interface contracts that the infrastructure
layer must implement. Using Protocols enables:
- Clean separation of concerns
- Easy testing with in-memory implementations
- Dependency inversion (depend on abstractions, not concretions)
"""

from application.ports.workout_history_repository import WorkoutHistoryRepository
from application.ports.workout_writer import WorkoutWriter

__all__ = [
    "WorkoutHistoryRepository",
    "WorkoutWriter",
]
