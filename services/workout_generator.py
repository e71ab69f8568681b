"""
Workout generator service.

This service orchestrates a single generation request:
1. Record the request
2. Ask the LLM for a workout plan
3. Fall back to the rule-based synthesizer if the LLM is unavailable
4. Record the generated workout
"""

import asyncio
import logging
from functools import partial
from typing import Optional

from application.exceptions import HistoryStorageError, WorkoutRequestNotFoundError
from application.ports import WorkoutHistoryRepository, WorkoutWriter
from models.workout import GenerateWorkoutResponse, WorkoutParameters
from services.llm.formatting import format_llm_response
from services.llm.prompts import build_workout_prompt
from services.workout_synthesizer import synthesize_workout

logger = logging.getLogger(__name__)


class WorkoutGenerationError(Exception):
    """Error during workout generation."""

    pass


class WorkoutGenerator:
    """
    Service for generating workout plans.

    The LLM writer is optional; without one every request is served by the
    rule-based synthesizer and flagged as a demo workout.
    """

    def __init__(
        self,
        history_repo: WorkoutHistoryRepository,
        writer: Optional[WorkoutWriter] = None,
    ):
        """
        Initialize the workout generator.

        Args:
            history_repo: Repository for requests and generated workouts
            writer: LLM-backed workout writer, or None to always use the fallback
        """
        self._history_repo = history_repo
        self._writer = writer

    async def generate(self, params: WorkoutParameters) -> GenerateWorkoutResponse:
        """
        Generate a workout plan.

        Args:
            params: Validated workout parameters

        Returns:
            Response with the echoed parameters, HTML content and demo flag

        Raises:
            WorkoutGenerationError: If the request or result cannot be stored
        """
        logger.info(
            f"Generating workout: groups={params.muscle_groups}, "
            f"intensity={params.intensity}, type={params.workout_type}, "
            f"goal={params.goal}, duration={params.duration}"
        )

        record = params.model_dump(by_alias=False)
        try:
            request = await self._run_sync(self._history_repo.create_request, record)
        except HistoryStorageError as e:
            raise WorkoutGenerationError(f"Could not store workout request: {e}") from e

        content = await self._write_with_llm(params)
        is_demo = content is None
        if is_demo:
            logger.info("Using rule-based workout generation")
            content = synthesize_workout(params).content

        try:
            await self._run_sync(self._history_repo.save_content, request["id"], content)
        except (HistoryStorageError, WorkoutRequestNotFoundError) as e:
            raise WorkoutGenerationError(f"Could not store generated workout: {e}") from e

        return GenerateWorkoutResponse(parameters=params, content=content, is_demo=is_demo)

    async def _write_with_llm(self, params: WorkoutParameters) -> Optional[str]:
        """
        Ask the LLM for a workout.

        Returns:
            Formatted HTML, or None when no writer is configured or the call failed
        """
        if self._writer is None:
            return None

        try:
            raw = await self._writer.write_workout(build_workout_prompt(params))
        except Exception as e:
            logger.warning(f"LLM workout generation failed, falling back: {e}")
            return None

        return format_llm_response(raw)

    @staticmethod
    async def _run_sync(func, *args):
        """Run a blocking repository call without blocking the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(func, *args))
