"""
Workout type adaptation of the exercise catalog.

HIIT and stretching sessions are time-based rather than rep-based, so the
catalog is rewritten before exercises are selected. Every other workout type
uses the catalog as-is.
"""

from dataclasses import replace
from types import MappingProxyType

from core.sanitization import humanize_key
from models.workout import WorkoutType
from services.exercise_catalog import ExerciseCatalog, ExerciseTemplate

HIIT_INTERVAL_SECONDS = 30
HIIT_REP_TYPE = "seconds"
HIIT_TIP_SUFFIX = " Focus on intensity and minimal rest."

STRETCH_HOLD_SECONDS = 30
STRETCH_REP_TYPE = "seconds hold"
STRETCH_TIPS = (
    "Focus on breathing deeply and relaxing into the stretch.",
    "Never bounce in a stretched position - hold steady.",
)


def _to_hiit(catalog: ExerciseCatalog) -> ExerciseCatalog:
    return MappingProxyType({
        group: tuple(
            replace(
                template,
                reps=HIIT_INTERVAL_SECONDS,
                rep_type=HIIT_REP_TYPE,
                tip=template.tip + HIIT_TIP_SUFFIX,
            )
            for template in templates
        )
        for group, templates in catalog.items()
    })


def _to_stretching(catalog: ExerciseCatalog) -> ExerciseCatalog:
    return MappingProxyType({
        group: tuple(
            ExerciseTemplate(
                name=f"{humanize_key(group)} Stretch {number}",
                reps=STRETCH_HOLD_SECONDS,
                tip=tip,
                rep_type=STRETCH_REP_TYPE,
            )
            for number, tip in enumerate(STRETCH_TIPS, 1)
        )
        for group in catalog
    })


def adapt_catalog(catalog: ExerciseCatalog, workout_type: str) -> ExerciseCatalog:
    """
    Return the catalog to use for a workout type.

    Args:
        catalog: Base exercise catalog (never modified)
        workout_type: Workout type key

    Returns:
        A new catalog for 'hiit' and 'stretching', otherwise the input catalog
    """
    if workout_type == WorkoutType.HIIT.value:
        return _to_hiit(catalog)
    if workout_type == WorkoutType.STRETCHING.value:
        return _to_stretching(catalog)
    return catalog
