"""
LLM integration module for fitgen-api.

This module provides LLM-powered workout generation and the prompt and
formatting helpers around it.
"""

from services.llm.client import OpenAIWorkoutWriter, WorkoutWriterError
from services.llm.formatting import format_llm_response
from services.llm.prompts import WORKOUT_SYSTEM_PROMPT, build_workout_prompt

__all__ = [
    "OpenAIWorkoutWriter",
    "WorkoutWriterError",
    "format_llm_response",
    "WORKOUT_SYSTEM_PROMPT",
    "build_workout_prompt",
]
