"""
OpenAI client wrapper for workout generation.

Provides the OpenAIWorkoutWriter class, which asks the LLM provider for a
workout plan and retries transient failures with exponential backoff.
"""

import logging
from typing import Optional

from openai import (
    APIConnectionError,
    APITimeoutError,
    AsyncOpenAI,
    InternalServerError,
    OpenAIError,
    RateLimitError,
)
from tenacity import (
    AsyncRetrying,
    RetryError,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from services.llm.prompts import WORKOUT_SYSTEM_PROMPT

logger = logging.getLogger(__name__)

# Errors worth another attempt; auth and bad-request errors are not
RETRYABLE_ERRORS = (
    RateLimitError,
    APITimeoutError,
    APIConnectionError,
    InternalServerError,
)


class WorkoutWriterError(Exception):
    """Error while generating workout text with the LLM."""

    pass


class OpenAIWorkoutWriter:
    """
    OpenAI-powered workout writer.

    Sends the workout prompt together with the FitGen system prompt and
    returns the raw text of the answer.
    """

    DEFAULT_MODEL = "gpt-4o"
    DEFAULT_TEMPERATURE = 0.7
    DEFAULT_MAX_TOKENS = 1500
    DEFAULT_TIMEOUT_SECONDS = 30.0
    MAX_RETRIES = 2

    # Backoff configuration
    MIN_BACKOFF_SECONDS = 1.0
    MAX_BACKOFF_SECONDS = 10.0

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        max_retries: int = MAX_RETRIES,
        min_backoff_seconds: float = MIN_BACKOFF_SECONDS,
        max_backoff_seconds: float = MAX_BACKOFF_SECONDS,
        client: Optional[AsyncOpenAI] = None,
    ):
        """
        Initialize the workout writer.

        Args:
            api_key: OpenAI API key
            model: Chat model to use
            temperature: Sampling temperature
            max_tokens: Maximum tokens in the answer
            timeout_seconds: Per-request timeout
            max_retries: Retries after the first attempt for transient errors
            min_backoff_seconds: Lower bound of the exponential backoff
            max_backoff_seconds: Upper bound of the exponential backoff
            client: Preconfigured AsyncOpenAI client (mainly for tests)
        """
        # Retries are handled here, not inside the SDK
        self._client = client or AsyncOpenAI(
            api_key=api_key, timeout=timeout_seconds, max_retries=0
        )
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._max_retries = max_retries
        self._min_backoff = min_backoff_seconds
        self._max_backoff = max_backoff_seconds

    @property
    def model(self) -> str:
        return self._model

    async def write_workout(self, user_prompt: str) -> str:
        """
        Generate a workout plan for a prompt.

        Args:
            user_prompt: Prompt built by build_workout_prompt()

        Returns:
            Raw text returned by the model

        Raises:
            WorkoutWriterError: If the call fails after retries or the
                model returns no content
        """
        retrying = AsyncRetrying(
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            stop=stop_after_attempt(self._max_retries + 1),
            wait=wait_exponential(
                multiplier=1, min=self._min_backoff, max=self._max_backoff
            ),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        )

        try:
            async for attempt in retrying:
                with attempt:
                    content = await self._call_llm(user_prompt)
        except (OpenAIError, RetryError) as e:
            logger.error(f"OpenAI workout generation failed: {e}")
            raise WorkoutWriterError(f"LLM call failed: {e}") from e

        if not content or not content.strip():
            raise WorkoutWriterError("Empty response from LLM")

        return content

    async def _call_llm(self, user_prompt: str) -> Optional[str]:
        """
        Call the OpenAI chat completions API.

        Args:
            user_prompt: The user prompt

        Returns:
            Message content of the first choice
        """
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=[
                {"role": "system", "content": WORKOUT_SYSTEM_PROMPT},
                {"role": "user", "content": user_prompt},
            ],
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )
        return response.choices[0].message.content
