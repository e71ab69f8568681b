"""
Static exercise catalog for rule-based workout generation.

Maps each muscle group to an ordered tuple of equipment-light exercises.
Order matters: the synthesizer takes candidates from the front of each tuple.
The catalog is read-only for the life of the process.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

DEFAULT_REP_TYPE = "reps"


@dataclass(frozen=True)
class ExerciseTemplate:
    """A candidate exercise with its target reps and a form cue."""

    name: str
    reps: int
    tip: str
    rep_type: str = DEFAULT_REP_TYPE


ExerciseCatalog = Mapping[str, Tuple[ExerciseTemplate, ...]]


EXERCISE_CATALOG: ExerciseCatalog = MappingProxyType({
    "chest": (
        ExerciseTemplate("Push-ups", 12, "Keep your core engaged and body in a straight line."),
        ExerciseTemplate("Dumbbell Chest Press", 10, "Focus on a full range of motion, bringing dumbbells to chest level."),
        ExerciseTemplate("Incline Push-ups", 15, "Elevate your hands on a stable surface for a modified version."),
        ExerciseTemplate("Chest Flies", 12, "Maintain a slight bend in the elbows throughout the movement."),
    ),
    "back": (
        ExerciseTemplate("Dumbbell Rows", 12, "Keep your back flat and pull the weight toward your hip."),
        ExerciseTemplate("Superman Holds", 30, "Lift arms and legs simultaneously, engaging your entire back.", "seconds"),
        ExerciseTemplate("Pull-ups", 8, "If too challenging, use an assisted pull-up machine or resistance bands."),
        ExerciseTemplate("Lat Pulldowns", 12, "Focus on pulling with your back muscles, not your arms."),
    ),
    "shoulders": (
        ExerciseTemplate("Shoulder Press", 12, "Avoid arching your back by engaging your core."),
        ExerciseTemplate("Lateral Raises", 12, "Keep a slight bend in your elbows and raise to shoulder height."),
        ExerciseTemplate("Front Raises", 12, "Use a controlled tempo and avoid swinging the weights."),
        ExerciseTemplate("Pike Push-ups", 10, "Form an inverted V with your body and lower your head toward the ground."),
    ),
    "arms": (
        ExerciseTemplate("Bicep Curls", 12, "Keep elbows close to your sides throughout the movement."),
        ExerciseTemplate("Tricep Dips", 12, "Lower yourself with control and keep shoulders away from your ears."),
        ExerciseTemplate("Hammer Curls", 12, "Maintain a neutral grip with palms facing each other."),
        ExerciseTemplate("Diamond Push-ups", 10, "Form a diamond shape with your hands directly under your chest."),
    ),
    "legs": (
        ExerciseTemplate("Bodyweight Squats", 15, "Keep weight in your heels and chest up throughout the movement."),
        ExerciseTemplate("Walking Lunges", 10, "Take a big step forward and keep your front knee above your ankle.", "per leg"),
        ExerciseTemplate("Glute Bridges", 15, "Squeeze your glutes at the top of the movement."),
        ExerciseTemplate("Bulgarian Split Squats", 10, "Keep your front foot flat on the ground and torso upright.", "per leg"),
    ),
    "core": (
        ExerciseTemplate("Plank", 45, "Keep your body in a straight line from head to heels.", "seconds"),
        ExerciseTemplate("Bicycle Crunches", 20, "Focus on the rotation and bringing opposite elbow to knee.", "per side"),
        ExerciseTemplate("Russian Twists", 16, "Keep feet elevated and twist from your core, not your arms.", "total"),
        ExerciseTemplate("Mountain Climbers", 20, "Maintain a strong plank position while alternating knees to chest.", "per leg"),
    ),
    "fullbody": (
        ExerciseTemplate("Burpees", 10, "Focus on proper form rather than speed, especially when fatigued."),
        ExerciseTemplate("Squat to Overhead Press", 12, "Use the power from your legs to help drive the press upward."),
        ExerciseTemplate("Renegade Rows", 8, "Keep hips stable and avoid rotating your torso.", "per arm"),
        ExerciseTemplate("Thruster", 12, "Combine a front squat with an overhead press in one fluid motion."),
    ),
})
