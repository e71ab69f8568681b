"""
Pytest fixtures for fitgen-api tests.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Generator

import pytest
from fastapi.testclient import TestClient

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from api.deps import get_history_repo, get_workout_writer
from backend.main import create_app
from backend.settings import Settings
from infrastructure.memory import InMemoryWorkoutHistoryRepository
from models.workout import WorkoutParameters


# ---------------------------------------------------------------------------
# Mock Environment Variables
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Keep tests away from real credentials."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("SUPABASE_URL", raising=False)
    monkeypatch.delenv("SUPABASE_SERVICE_ROLE_KEY", raising=False)


# ---------------------------------------------------------------------------
# Test App and Client
# ---------------------------------------------------------------------------


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Test settings with minimal configuration."""
    return Settings(environment="test", _env_file=None)


@pytest.fixture(scope="session")
def app(test_settings):
    """Create test application instance."""
    return create_app(settings=test_settings)


@pytest.fixture
def history_repo() -> InMemoryWorkoutHistoryRepository:
    """Fresh in-memory history store."""
    return InMemoryWorkoutHistoryRepository()


@pytest.fixture
def fake_writer():
    """Fake LLM writer returning a fixed HTML workout."""
    from tests.fakes import FakeWorkoutWriter
    return FakeWorkoutWriter()


@pytest.fixture
def client(app, history_repo) -> Generator[TestClient, None, None]:
    """
    TestClient with no LLM configured (rule-based generation only).
    Properly cleans up dependency overrides after each test.
    """
    app.dependency_overrides[get_history_repo] = lambda: history_repo
    app.dependency_overrides[get_workout_writer] = lambda: None
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def client_with_llm(app, history_repo, fake_writer) -> Generator[TestClient, None, None]:
    """TestClient with a fake LLM writer injected."""
    app.dependency_overrides[get_history_repo] = lambda: history_repo
    app.dependency_overrides[get_workout_writer] = lambda: fake_writer
    yield TestClient(app)
    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Domain Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_request() -> Dict[str, Any]:
    """Valid generation payload as the web client sends it."""
    return {
        "muscleGroups": ["chest"],
        "intensity": 3,
        "workoutType": "lifting",
        "goal": "muscleBuild",
        "duration": "30",
    }


@pytest.fixture
def make_params():
    """Factory for WorkoutParameters with sensible defaults."""

    def _make(**overrides: Any) -> WorkoutParameters:
        data = {
            "muscleGroups": ["chest"],
            "intensity": 3,
            "workoutType": "lifting",
            "goal": "muscleBuild",
            "duration": "30",
        }
        data.update(overrides)
        return WorkoutParameters.model_validate(data)

    return _make
