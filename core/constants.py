"""
Shared constants.

Human-readable labels for the workout form options, shared by the prompt
builder, the rule-based synthesizer and the options endpoint.

This module has no dependencies on models or services to avoid circular imports.
"""

from typing import Dict

MUSCLE_GROUP_LABELS: Dict[str, str] = {
    "chest": "Chest",
    "back": "Back",
    "shoulders": "Shoulders",
    "arms": "Arms",
    "legs": "Legs",
    "core": "Core",
    "fullbody": "Full Body",
}

INTENSITY_LABELS: Dict[int, str] = {
    1: "Beginner",
    2: "Light",
    3: "Moderate",
    4: "Challenging",
    5: "Expert",
}

WORKOUT_TYPE_LABELS: Dict[str, str] = {
    "lifting": "Weight Lifting",
    "circuit": "Circuit Training",
    "crossfit": "CrossFit",
    "hiit": "HIIT",
    "calisthenics": "Calisthenics",
    "stretching": "Stretching/Flexibility",
    "combination": "Combination",
}

GOAL_LABELS: Dict[str, str] = {
    "weightLoss": "Weight Loss",
    "muscleBuild": "Muscle Building",
    "endurance": "Endurance",
    "strength": "Strength",
    "toning": "Toning/Definition",
    "flexibility": "Flexibility",
    "maintenance": "General Fitness/Maintenance",
}

# Session lengths offered by the form, in minutes
DURATION_OPTIONS = ("15", "30", "45", "60", "75", "90")

MIN_INTENSITY = 1
MAX_INTENSITY = 5

# Minutes reserved for warm-up and cool-down in a synthesized plan
WARMUP_COOLDOWN_MINUTES = 10

# Maximum length for a single free-text value placed into an LLM prompt
MAX_PROMPT_VALUE_LENGTH = 100
