"""Models package for fitgen-api."""

from models.workout import (
    FitnessGoal,
    GenerateWorkoutResponse,
    MuscleGroup,
    WorkoutHistoryEntry,
    WorkoutParameters,
    WorkoutType,
)

__all__ = [
    "FitnessGoal",
    "GenerateWorkoutResponse",
    "MuscleGroup",
    "WorkoutHistoryEntry",
    "WorkoutParameters",
    "WorkoutType",
]
