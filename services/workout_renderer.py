"""
HTML rendering for synthesized workouts.

Produces the same fragment structure the LLM is asked for: title, overview,
warm-up, main workout, cool-down and training tips, in that order. Class
attributes are styling hooks for the web client.
"""

from html import escape
from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from services.workout_synthesizer import ExerciseInstance, SynthesizedWorkout


def _render_exercise(index: int, exercise: "ExerciseInstance") -> str:
    return (
        '<div class="bg-neutral-50 p-4 rounded-lg mb-4">\n'
        f'  <p class="font-medium">Exercise {index}: {escape(exercise.name)}</p>\n'
        f"  <p>{exercise.sets} sets of {exercise.reps} {escape(exercise.rep_type)}"
        f" | Rest {exercise.rest_seconds} seconds between sets</p>\n"
        f'  <p class="text-sm text-neutral-600 mt-1">{escape(exercise.tip)}</p>\n'
        "</div>"
    )


def render_workout_html(workout: "SynthesizedWorkout") -> str:
    """
    Render a synthesized workout as an HTML fragment.

    All text that originates from request parameters is escaped.
    """
    params = workout.parameters
    muscle_groups = escape(", ".join(params.muscle_groups))
    intensity = escape(workout.intensity_label.lower())
    goal = escape(workout.goal_label)

    parts: List[str] = [
        f"<h3>Custom {escape(workout.workout_type_label)} Workout</h3>",
        f"<p>This {intensity} intensity workout targets your {muscle_groups}"
        f" and is designed for {goal.lower()}.</p>",
        "",
        "<h4>Warm-up (5 minutes)</h4>",
        "<ul>",
        f"  <li>Light cardio: {escape(workout.warmup_lines[0])} - 2 minutes</li>",
        f"  <li>Dynamic stretching: {escape(workout.warmup_lines[1])} - 3 minutes</li>",
        "</ul>",
        "",
        f"<h4>Main Workout ({workout.main_workout_minutes} minutes)</h4>",
    ]
    parts.extend(
        _render_exercise(index, exercise)
        for index, exercise in enumerate(workout.main_exercises, 1)
    )
    parts.extend([
        "",
        "<h4>Cool Down (5 minutes)</h4>",
        "<ul>",
        *(f"  <li>{escape(line)}</li>" for line in workout.cooldown_lines),
        "</ul>",
        "",
        "<h4>Training Tips</h4>",
        '<div class="bg-blue-50 p-4 rounded-lg mt-4">',
        f'  <p class="font-medium text-blue-800">Pro Tip for {goal}</p>',
        f"  <p>{escape(workout.training_tip)}</p>",
        "</div>",
    ])
    return "\n".join(parts)
