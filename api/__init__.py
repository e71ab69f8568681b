"""
API package for FitGen API.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_history_repo,
    get_settings,
    get_supabase_client,
    get_workout_generator,
    get_workout_writer,
)

__all__ = [
    "get_history_repo",
    "get_settings",
    "get_supabase_client",
    "get_workout_generator",
    "get_workout_writer",
]
