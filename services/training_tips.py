"""
Canned training tips keyed by fitness goal.

Each goal has three tips ordered from beginner-friendly to advanced; the
intensity picks one of them.
"""

from typing import Dict, Tuple

from models.workout import FitnessGoal

FALLBACK_GOAL = FitnessGoal.MAINTENANCE.value

TRAINING_TIPS: Dict[str, Tuple[str, ...]] = {
    "weightLoss": (
        "For weight loss, consistency is key. Aim to perform this workout 3-4 times per week, incorporating cardio on rest days.",
        "Focus on maintaining a caloric deficit through diet and regular exercise for optimal weight loss results.",
        "Consider adding 15-20 minutes of high-intensity interval training (HIIT) at the end of your workout to boost calorie burn.",
    ),
    "muscleBuild": (
        "For muscle building, ensure you're eating in a slight caloric surplus with adequate protein (1.6-2.2g per kg of bodyweight).",
        "Progressive overload is essential - aim to increase weight or reps every 1-2 weeks.",
        "Allow muscle groups 48-72 hours to recover between training sessions for optimal growth.",
    ),
    "endurance": (
        "For endurance training, focus on maintaining proper form even as fatigue sets in.",
        "Gradually increase workout duration by 5-10% each week to build sustainable endurance.",
        "Stay well-hydrated and consider adding electrolytes to your water during longer training sessions.",
    ),
    "strength": (
        "For strength gains, focus on compound movements and lift in the 80-90% of your one-rep max range.",
        "Ensure proper recovery with 2-3 minutes of rest between heavy sets.",
        "Track your lifts to ensure progressive overload over time - aim for small, consistent strength increases.",
    ),
    "toning": (
        "For muscle toning, use moderate weights with higher repetitions (12-15 reps per set).",
        "Maintain tension throughout each movement with controlled tempos (especially during the lowering phase).",
        "Consider incorporating supersets to increase workout intensity while keeping rest periods short.",
    ),
    "flexibility": (
        "Hold each stretch for 20-30 seconds, breathing deeply to help muscles relax.",
        "Never bounce in a stretched position - instead, ease gently into each stretch.",
        "For best results, practice flexibility work daily, not just during scheduled workouts.",
    ),
    "maintenance": (
        "For general fitness maintenance, aim for consistency with 3-4 workouts per week.",
        "Balance your routine with a mix of strength, cardio, and flexibility exercises.",
        "Listen to your body - adjust workout intensity based on energy levels and recovery.",
    ),
}


def select_training_tip(goal: str, intensity: int) -> str:
    """
    Pick the training tip for a goal at a given intensity.

    Intensity 1 selects the first tip, 2-3 the second and 4-5 the last.
    Unknown goals use the general maintenance tips.
    """
    tips = TRAINING_TIPS.get(goal) or TRAINING_TIPS[FALLBACK_GOAL]
    index = min(intensity // 2, len(tips) - 1)
    return tips[index]
