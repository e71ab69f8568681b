"""
Services package for fitgen-api.

Contains business logic services for:
- Parameter validation
- Rule-based workout synthesis (catalog, intensity scaling, workout type
  adaptation, training tips, rendering)
- Workout generation (LLM with rule-based fallback)
"""

from services.exercise_catalog import EXERCISE_CATALOG, ExerciseTemplate
from services.intensity import IntensityScale, scale_intensity
from services.parameter_validator import WorkoutValidationError, validate_workout_parameters
from services.training_tips import TRAINING_TIPS, select_training_tip
from services.workout_generator import WorkoutGenerationError, WorkoutGenerator
from services.workout_renderer import render_workout_html
from services.workout_synthesizer import (
    ExerciseInstance,
    SynthesizedWorkout,
    normalize_muscle_groups,
    select_exercises,
    synthesize_workout,
)
from services.workout_types import adapt_catalog

__all__ = [
    # Catalog
    "EXERCISE_CATALOG",
    "ExerciseTemplate",
    # Intensity
    "IntensityScale",
    "scale_intensity",
    # Validation
    "WorkoutValidationError",
    "validate_workout_parameters",
    # Tips
    "TRAINING_TIPS",
    "select_training_tip",
    # Generation
    "WorkoutGenerationError",
    "WorkoutGenerator",
    # Synthesis
    "ExerciseInstance",
    "SynthesizedWorkout",
    "adapt_catalog",
    "normalize_muscle_groups",
    "render_workout_html",
    "select_exercises",
    "synthesize_workout",
]
