"""
Fake implementations for testing.

In-memory fakes of the LLM writer and history repository so tests run without
OpenAI or Supabase.
"""

from tests.fakes.history_repository import FailingHistoryRepository
from tests.fakes.workout_writer import FailingWorkoutWriter, FakeWorkoutWriter

__all__ = [
    "FailingHistoryRepository",
    "FailingWorkoutWriter",
    "FakeWorkoutWriter",
]
