"""
FastAPI Dependency Providers for FitGen API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- Without Supabase credentials, a process-wide in-memory history store is used
- The LLM writer is only created when an OpenAI API key is configured

Usage in routers:
    from api.deps import get_history_repo
    from application.ports import WorkoutHistoryRepository

    @router.get("/history")
    def history(repo: WorkoutHistoryRepository = Depends(get_history_repo)):
        return repo.get_history()

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_history_repo] = lambda: InMemoryWorkoutHistoryRepository()
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends
from supabase import Client, create_client

from application.ports import WorkoutHistoryRepository, WorkoutWriter
from backend.settings import Settings, get_settings as _get_settings
from infrastructure import InMemoryWorkoutHistoryRepository, SupabaseWorkoutHistoryRepository
from services.llm import OpenAIWorkoutWriter
from services.workout_generator import WorkoutGenerator


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


# =============================================================================
# Repository Providers
# =============================================================================


@lru_cache
def get_memory_history_repo() -> InMemoryWorkoutHistoryRepository:
    """Process-wide in-memory history store (cached)."""
    return InMemoryWorkoutHistoryRepository()


def get_history_repo(
    client: Optional[Client] = Depends(get_supabase_client),
) -> WorkoutHistoryRepository:
    """
    Get WorkoutHistoryRepository implementation.

    Returns a SupabaseWorkoutHistoryRepository when Supabase is configured,
    otherwise the shared in-memory repository.

    Args:
        client: Supabase client or None (injected)

    Returns:
        WorkoutHistoryRepository: Repository for workout history
    """
    if client is None:
        return get_memory_history_repo()
    return SupabaseWorkoutHistoryRepository(client)


# =============================================================================
# LLM Writer Provider
# =============================================================================


def get_workout_writer(
    settings: Settings = Depends(get_settings),
) -> Optional[WorkoutWriter]:
    """
    Get the LLM workout writer.

    Args:
        settings: Application settings (injected)

    Returns:
        OpenAIWorkoutWriter, or None when no OpenAI API key is configured
    """
    if not settings.openai_api_key:
        return None

    return OpenAIWorkoutWriter(
        api_key=settings.openai_api_key,
        model=settings.llm_model,
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
        timeout_seconds=settings.llm_timeout_seconds,
        max_retries=settings.llm_max_retries,
    )


def get_workout_generator(
    history_repo: WorkoutHistoryRepository = Depends(get_history_repo),
    writer: Optional[WorkoutWriter] = Depends(get_workout_writer),
) -> WorkoutGenerator:
    """
    Create a WorkoutGenerator instance.

    Args:
        history_repo: Workout history repository (injected)
        writer: LLM workout writer or None (injected)

    Returns:
        Configured WorkoutGenerator instance
    """
    return WorkoutGenerator(history_repo=history_repo, writer=writer)


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    # Repositories
    "get_history_repo",
    "get_memory_history_repo",
    # Generation
    "get_workout_generator",
    "get_workout_writer",
]
