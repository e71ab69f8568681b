"""
Workouts router.

This router provides endpoints for workout generation:
- Generate a workout plan from form parameters
- List previously generated workouts
- List the options the workout form is built from
"""

import logging
from typing import Any, List

from fastapi import APIRouter, Body, Depends
from fastapi.responses import JSONResponse

from api.deps import get_history_repo, get_workout_generator
from application.ports import WorkoutHistoryRepository
from core.constants import (
    DURATION_OPTIONS,
    GOAL_LABELS,
    INTENSITY_LABELS,
    MUSCLE_GROUP_LABELS,
    WORKOUT_TYPE_LABELS,
)
from models.workout import GenerateWorkoutResponse, WorkoutHistoryEntry
from services.parameter_validator import WorkoutValidationError, validate_workout_parameters
from services.workout_generator import WorkoutGenerationError, WorkoutGenerator

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/workouts",
    tags=["Workouts"],
)


@router.post("/generate", response_model=GenerateWorkoutResponse)
async def generate_workout(
    payload: Any = Body(None),
    generator: WorkoutGenerator = Depends(get_workout_generator),
):
    """
    Generate a personalized workout plan.

    The plan comes from the LLM provider when one is configured and
    reachable; otherwise the rule-based generator produces it and the
    response is flagged with `isDemo: true`.

    Args:
        payload: Form parameters:
            - muscleGroups: Non-empty list of muscle groups
            - intensity: 1 (beginner) to 5 (expert)
            - workoutType: Training modality
            - goal: Fitness goal
            - duration: Session length in minutes, as a string

    Returns:
        The echoed parameters, the workout HTML and the demo flag

    Raises:
        400: If the parameters are invalid (every violation is listed)
        500: If generation fails
    """
    try:
        params = validate_workout_parameters(payload)
    except WorkoutValidationError as e:
        logger.info(f"Rejected workout request: {e.message}")
        return JSONResponse(
            status_code=400,
            content={"message": e.message, "errors": e.errors},
        )

    try:
        return await generator.generate(params)
    except WorkoutGenerationError as e:
        logger.error(f"Workout generation failed: {e}")
    except Exception as e:
        logger.exception(f"Unexpected error during workout generation: {e}")

    return JSONResponse(
        status_code=500,
        content={"message": "Failed to generate workout"},
    )


@router.get("/history", response_model=List[WorkoutHistoryEntry])
def get_workout_history(
    history_repo: WorkoutHistoryRepository = Depends(get_history_repo),
):
    """
    List generated workouts, newest first.

    Returns:
        List of workout history entries
    """
    try:
        return history_repo.get_history()
    except Exception as e:
        logger.exception(f"Error fetching workout history: {e}")
        return JSONResponse(
            status_code=500,
            content={"message": "Failed to fetch workout history"},
        )


@router.get("/options")
def get_workout_options():
    """
    List the choices offered by the workout form.

    Returns:
        dict: Value/label pairs for every form field
    """
    return {
        "muscleGroups": [
            {"value": value, "label": label} for value, label in MUSCLE_GROUP_LABELS.items()
        ],
        "intensityLabels": {str(level): label for level, label in INTENSITY_LABELS.items()},
        "workoutTypes": [
            {"value": value, "label": label} for value, label in WORKOUT_TYPE_LABELS.items()
        ],
        "goals": [
            {"value": value, "label": label} for value, label in GOAL_LABELS.items()
        ],
        "durations": [
            {"value": minutes, "label": f"{minutes} minutes"} for minutes in DURATION_OPTIONS
        ],
    }
