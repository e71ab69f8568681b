"""
Workout writer port (interface).

Abstracts the LLM provider that turns a prompt into workout text, so the
generator can be tested without network access.
"""

from typing import Protocol


class WorkoutWriter(Protocol):
    """Interface for LLM-backed workout text generation."""

    async def write_workout(self, user_prompt: str) -> str:
        """
        Generate workout text for a prompt.

        Args:
            user_prompt: Fully formatted user prompt

        Returns:
            Raw model output (HTML or plain text)

        Raises:
            WorkoutWriterError: If generation fails
        """
        ...
