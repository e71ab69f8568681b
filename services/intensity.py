"""
Intensity scaling for rule-based workouts.

Maps the 1-5 intensity dial to the volume knobs used by the synthesizer.
Higher intensity means more sets, shorter rest and fewer, harder movements
per muscle group.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class IntensityScale:
    """Volume parameters derived from a single intensity value."""

    sets: int
    rest_seconds: int
    exercises_per_group: int
    max_total_exercises: int


def scale_intensity(intensity: int) -> IntensityScale:
    """
    Derive sets, rest and exercise counts from intensity.

    Args:
        intensity: Difficulty from 1 (beginner) to 5 (expert)

    Returns:
        IntensityScale with integer-valued knobs:
        - sets: 3 at intensity 1 up to 5
        - rest_seconds: 80 at intensity 1 down to a floor of 45
        - exercises_per_group: 3 at intensity 1 down to a floor of 2
        - max_total_exercises: cap across all groups, between 4 and 6
    """
    return IntensityScale(
        sets=min(3 + intensity // 2, 5),
        rest_seconds=max(90 - intensity * 10, 45),
        exercises_per_group=max(4 - intensity, 2),
        max_total_exercises=min(max(intensity + 3, 4), 6),
    )
