"""
Rule-based workout synthesizer.

Builds a complete workout plan (warm-up, main exercises, cool-down and a
training tip) from validated parameters without calling an LLM. Used as the
fallback whenever the LLM provider is unavailable or not configured.

The pipeline is pure and deterministic:
1. Resolve display labels for workout type, goal and intensity
2. Adapt the exercise catalog to the workout type
3. Pick warm-up lines from the selected muscle groups
4. Scale volume by intensity and select exercises per muscle group
5. Attach the fixed cool-down and a goal-specific training tip
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from core.constants import (
    GOAL_LABELS,
    INTENSITY_LABELS,
    WARMUP_COOLDOWN_MINUTES,
    WORKOUT_TYPE_LABELS,
)
from models.workout import MuscleGroup, WorkoutParameters
from services.exercise_catalog import EXERCISE_CATALOG, ExerciseCatalog
from services.intensity import IntensityScale, scale_intensity
from services.training_tips import select_training_tip
from services.workout_renderer import render_workout_html
from services.workout_types import adapt_catalog

COOLDOWN_LINES: Tuple[str, str] = (
    "Static stretching for worked muscle groups - 3 minutes",
    "Deep breathing and relaxation - 2 minutes",
)


@dataclass(frozen=True)
class ExerciseInstance:
    """An exercise as it appears in a synthesized plan."""

    name: str
    reps: int
    rep_type: str
    tip: str
    sets: int
    rest_seconds: int


@dataclass(frozen=True)
class SynthesizedWorkout:
    """A complete rule-based workout plan plus the parameters it came from."""

    parameters: WorkoutParameters
    workout_type_label: str
    goal_label: str
    intensity_label: str
    warmup_lines: Tuple[str, str]
    main_exercises: Tuple[ExerciseInstance, ...]
    main_workout_minutes: int
    cooldown_lines: Tuple[str, str]
    training_tip: str

    @property
    def content(self) -> str:
        """The plan rendered as an HTML fragment."""
        return render_workout_html(self)


def normalize_muscle_groups(muscle_groups: Sequence[str]) -> Tuple[str, ...]:
    """
    Resolve the muscle groups exercises are drawn from.

    Full-body exercises supersede everything else, so any selection that
    contains 'fullbody' collapses to it. Otherwise the caller's order is kept.
    """
    if MuscleGroup.FULLBODY.value in muscle_groups:
        return (MuscleGroup.FULLBODY.value,)
    return tuple(muscle_groups)


def build_warmup(muscle_groups: Sequence[str]) -> Tuple[str, str]:
    """Pick the two warm-up activities for the selected muscle groups."""
    cardio = (
        "Bodyweight squats and jumping jacks"
        if MuscleGroup.LEGS.value in muscle_groups
        else "Jogging in place and arm circles"
    )
    upper_body = (
        MuscleGroup.SHOULDERS.value in muscle_groups
        or MuscleGroup.ARMS.value in muscle_groups
    )
    mobility = (
        "Arm circles, wrist rotations, and shoulder rolls"
        if upper_body
        else "Hip rotations, torso twists, and bodyweight squats"
    )
    return (cardio, mobility)


def select_exercises(
    muscle_groups: Sequence[str],
    catalog: ExerciseCatalog,
    scale: IntensityScale,
) -> Tuple[ExerciseInstance, ...]:
    """
    Select main exercises across muscle groups.

    Takes the first `exercises_per_group` candidates of every selected group,
    in group order, then truncates the list to `max_total_exercises`, so
    groups listed first win when the cap is reached. Groups missing from the
    catalog contribute nothing.

    Args:
        muscle_groups: Groups in the caller's order
        catalog: Exercise catalog (already adapted to the workout type)
        scale: Volume parameters from scale_intensity()

    Returns:
        Ordered tuple of ExerciseInstance
    """
    exercises: List[ExerciseInstance] = []

    for group in normalize_muscle_groups(muscle_groups):
        for template in catalog.get(group, ())[: scale.exercises_per_group]:
            exercises.append(
                ExerciseInstance(
                    name=template.name,
                    reps=template.reps,
                    rep_type=template.rep_type,
                    tip=template.tip,
                    sets=scale.sets,
                    rest_seconds=scale.rest_seconds,
                )
            )

    return tuple(exercises[: scale.max_total_exercises])


def main_workout_minutes(duration_minutes: int) -> int:
    """Minutes left for the main block once warm-up and cool-down are taken out."""
    return max(duration_minutes - WARMUP_COOLDOWN_MINUTES, 0)


def synthesize_workout(
    params: WorkoutParameters,
    catalog: ExerciseCatalog = EXERCISE_CATALOG,
) -> SynthesizedWorkout:
    """
    Generate a workout plan from validated parameters.

    Args:
        params: Validated workout parameters
        catalog: Base exercise catalog (defaults to the built-in catalog)

    Returns:
        SynthesizedWorkout; use `.content` for the rendered HTML
    """
    workout_type_label = WORKOUT_TYPE_LABELS.get(params.workout_type, params.workout_type)
    goal_label = GOAL_LABELS.get(params.goal, params.goal)
    intensity_label = INTENSITY_LABELS.get(params.intensity, str(params.intensity))

    effective_catalog = adapt_catalog(catalog, params.workout_type)
    warmup = build_warmup(params.muscle_groups)

    scale = scale_intensity(params.intensity)
    exercises = select_exercises(params.muscle_groups, effective_catalog, scale)

    return SynthesizedWorkout(
        parameters=params,
        workout_type_label=workout_type_label,
        goal_label=goal_label,
        intensity_label=intensity_label,
        warmup_lines=warmup,
        main_exercises=exercises,
        main_workout_minutes=main_workout_minutes(params.duration_minutes),
        cooldown_lines=COOLDOWN_LINES,
        training_tip=select_training_tip(params.goal, params.intensity),
    )
