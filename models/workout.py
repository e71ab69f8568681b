"""
Request/response models for workout generation.

These models define the API contract for the workout generator. Field names
are snake_case in Python and camelCase on the wire, matching the form the
web client submits.
"""

import re
from datetime import datetime
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.constants import MAX_INTENSITY, MIN_INTENSITY

_WHOLE_MINUTES = re.compile(r"[0-9]+")


class MuscleGroup(str, Enum):
    """Target areas offered by the workout form."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    LEGS = "legs"
    CORE = "core"
    FULLBODY = "fullbody"


class WorkoutType(str, Enum):
    """Training modalities."""

    LIFTING = "lifting"
    CIRCUIT = "circuit"
    CROSSFIT = "crossfit"
    HIIT = "hiit"
    CALISTHENICS = "calisthenics"
    STRETCHING = "stretching"
    COMBINATION = "combination"


class FitnessGoal(str, Enum):
    """Goals a workout can be designed for."""

    WEIGHT_LOSS = "weightLoss"
    MUSCLE_BUILD = "muscleBuild"
    ENDURANCE = "endurance"
    STRENGTH = "strength"
    TONING = "toning"
    FLEXIBILITY = "flexibility"
    MAINTENANCE = "maintenance"


class WorkoutParameters(BaseModel):
    """
    Validated workout preferences.

    Enumeration membership of muscle groups, workout type and goal is not
    enforced here; the synthesizer falls back gracefully for unknown keys.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    muscle_groups: List[str] = Field(
        alias="muscleGroups",
        description="Muscle groups to target (e.g. 'chest', 'legs', 'fullbody')",
    )
    intensity: int = Field(
        strict=True,
        description="Difficulty from 1 (beginner) to 5 (expert), as a JSON integer",
    )
    workout_type: str = Field(
        alias="workoutType",
        description="Training modality (e.g. 'lifting', 'hiit', 'stretching')",
    )
    goal: str = Field(description="Fitness goal (e.g. 'muscleBuild', 'weightLoss')")
    duration: str = Field(description="Session length in minutes, as a string")

    @field_validator("muscle_groups")
    @classmethod
    def validate_muscle_groups(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("Select at least one muscle group")
        return v

    @field_validator("intensity")
    @classmethod
    def validate_intensity(cls, v: int) -> int:
        if not MIN_INTENSITY <= v <= MAX_INTENSITY:
            raise ValueError(
                f"Intensity must be between {MIN_INTENSITY} and {MAX_INTENSITY}"
            )
        return v

    @field_validator("workout_type")
    @classmethod
    def validate_workout_type(cls, v: str) -> str:
        if not v:
            raise ValueError("Workout type is required")
        return v

    @field_validator("goal")
    @classmethod
    def validate_goal(cls, v: str) -> str:
        if not v:
            raise ValueError("Fitness goal is required")
        return v

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, v: str) -> str:
        """Duration must be present and parse to a positive whole number of minutes."""
        if not v:
            raise ValueError("Duration is required")
        if not _WHOLE_MINUTES.fullmatch(v.strip()):
            raise ValueError("Duration must be a whole number of minutes")
        if int(v.strip()) <= 0:
            raise ValueError("Duration must be a positive number of minutes")
        return v

    @property
    def duration_minutes(self) -> int:
        """Duration parsed to an integer number of minutes."""
        return int(self.duration.strip())


class GenerateWorkoutResponse(BaseModel):
    """Response model for a generated workout."""

    model_config = ConfigDict(populate_by_name=True)

    parameters: WorkoutParameters = Field(
        description="The parameters the workout was generated from"
    )
    content: str = Field(description="Workout plan as an HTML fragment")
    is_demo: bool = Field(
        default=False,
        alias="isDemo",
        description="True when the plan came from the rule-based generator",
    )


class WorkoutHistoryEntry(BaseModel):
    """A previously generated workout."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    request_id: int = Field(alias="requestId")
    content: str
    timestamp: datetime
    muscle_groups: List[str] = Field(alias="muscleGroups")
    intensity: int
    workout_type: str = Field(alias="workoutType")
    goal: str
    duration: str
