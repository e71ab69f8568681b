"""
Tests for the workout history repositories.

The Supabase repository is exercised against a MagicMock client that records
the query builder calls.
"""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from application.exceptions import HistoryStorageError, WorkoutRequestNotFoundError
from infrastructure.db.workout_history_repository import SupabaseWorkoutHistoryRepository
from infrastructure.memory import InMemoryWorkoutHistoryRepository


REQUEST = {
    "muscle_groups": ["chest"],
    "intensity": 3,
    "workout_type": "lifting",
    "goal": "muscleBuild",
    "duration": "30",
}


# =============================================================================
# In-memory repository
# =============================================================================


@pytest.mark.unit
class TestInMemoryWorkoutHistoryRepository:

    def test_create_request_assigns_sequential_ids(self):
        repo = InMemoryWorkoutHistoryRepository()

        first = repo.create_request(REQUEST)
        second = repo.create_request(REQUEST)

        assert first["id"] == 1
        assert second["id"] == 2
        assert isinstance(first["timestamp"], datetime)
        assert first["goal"] == "muscleBuild"

    def test_create_request_ignores_extra_fields(self):
        repo = InMemoryWorkoutHistoryRepository()
        request = repo.create_request({**REQUEST, "extra": "ignored"})
        assert "extra" not in request

    def test_save_content_copies_request_parameters(self):
        repo = InMemoryWorkoutHistoryRepository()
        request = repo.create_request(REQUEST)

        entry = repo.save_content(request["id"], "<h3>Plan</h3>")

        assert entry["id"] == 1
        assert entry["request_id"] == request["id"]
        assert entry["content"] == "<h3>Plan</h3>"
        for field, value in REQUEST.items():
            assert entry[field] == value

    def test_save_content_unknown_request(self):
        repo = InMemoryWorkoutHistoryRepository()

        with pytest.raises(WorkoutRequestNotFoundError) as exc_info:
            repo.save_content(99, "<h3>Plan</h3>")

        assert exc_info.value.request_id == 99

    def test_history_newest_first(self):
        repo = InMemoryWorkoutHistoryRepository()
        for content in ("first", "second", "third"):
            request = repo.create_request(REQUEST)
            repo.save_content(request["id"], content)

        assert [w["content"] for w in repo.get_history()] == ["third", "second", "first"]

    def test_history_returns_copies(self):
        repo = InMemoryWorkoutHistoryRepository()
        repo.save_content(repo.create_request(REQUEST)["id"], "plan")

        repo.get_history()[0]["content"] = "changed"

        assert repo.get_history()[0]["content"] == "plan"

    def test_reset(self):
        repo = InMemoryWorkoutHistoryRepository()
        repo.save_content(repo.create_request(REQUEST)["id"], "plan")

        repo.reset()

        assert repo.get_history() == []
        assert repo.create_request(REQUEST)["id"] == 1


# =============================================================================
# Supabase repository
# =============================================================================


def _result(data):
    result = MagicMock()
    result.data = data
    return result


@pytest.fixture
def supabase_client():
    return MagicMock()


@pytest.mark.unit
class TestSupabaseWorkoutHistoryRepository:

    def test_create_request_inserts_row(self, supabase_client):
        table = supabase_client.table.return_value
        table.insert.return_value.execute.return_value = _result([{"id": 7, **REQUEST}])
        repo = SupabaseWorkoutHistoryRepository(supabase_client)

        created = repo.create_request({**REQUEST, "extra": "ignored"})

        assert created["id"] == 7
        supabase_client.table.assert_called_with("workout_requests")
        table.insert.assert_called_once_with(REQUEST)

    def test_create_request_without_data(self, supabase_client):
        table = supabase_client.table.return_value
        table.insert.return_value.execute.return_value = _result([])
        repo = SupabaseWorkoutHistoryRepository(supabase_client)

        with pytest.raises(HistoryStorageError):
            repo.create_request(REQUEST)

    def test_save_content_inserts_history_row(self, supabase_client):
        requests_table = MagicMock()
        history_table = MagicMock()
        supabase_client.table.side_effect = lambda name: {
            "workout_requests": requests_table,
            "workout_history": history_table,
        }[name]
        (
            requests_table.select.return_value
            .eq.return_value
            .limit.return_value
            .execute.return_value
        ) = _result([{"id": 7, **REQUEST}])
        history_table.insert.return_value.execute.return_value = _result(
            [{"id": 1, "request_id": 7, "content": "plan", **REQUEST}]
        )
        repo = SupabaseWorkoutHistoryRepository(supabase_client)

        entry = repo.save_content(7, "plan")

        assert entry["request_id"] == 7
        requests_table.select.return_value.eq.assert_called_once_with("id", 7)
        history_table.insert.assert_called_once_with(
            {"request_id": 7, "content": "plan", **REQUEST}
        )

    def test_save_content_unknown_request(self, supabase_client):
        table = supabase_client.table.return_value
        (
            table.select.return_value
            .eq.return_value
            .limit.return_value
            .execute.return_value
        ) = _result([])
        repo = SupabaseWorkoutHistoryRepository(supabase_client)

        with pytest.raises(WorkoutRequestNotFoundError):
            repo.save_content(42, "plan")

        table.insert.assert_not_called()

    def test_get_history_orders_newest_first(self, supabase_client):
        table = supabase_client.table.return_value
        rows = [{"id": 2}, {"id": 1}]
        table.select.return_value.order.return_value.execute.return_value = _result(rows)
        repo = SupabaseWorkoutHistoryRepository(supabase_client)

        assert repo.get_history() == rows
        supabase_client.table.assert_called_with("workout_history")
        table.select.return_value.order.assert_called_once_with("timestamp", desc=True)

    def test_get_history_empty(self, supabase_client):
        table = supabase_client.table.return_value
        table.select.return_value.order.return_value.execute.return_value = _result(None)
        repo = SupabaseWorkoutHistoryRepository(supabase_client)

        assert repo.get_history() == []


class FakeAPIError(Exception):
    """Stand-in for a postgrest APIError or a network failure."""


@pytest.mark.unit
class TestSupabaseClientErrors:
    """Client exceptions surface as HistoryStorageError."""

    def test_create_request_wraps_client_error(self, supabase_client):
        table = supabase_client.table.return_value
        table.insert.return_value.execute.side_effect = FakeAPIError("connection reset")
        repo = SupabaseWorkoutHistoryRepository(supabase_client)

        with pytest.raises(HistoryStorageError, match="connection reset") as exc_info:
            repo.create_request(REQUEST)

        assert isinstance(exc_info.value.__cause__, FakeAPIError)

    def test_save_content_wraps_lookup_error(self, supabase_client):
        table = supabase_client.table.return_value
        (
            table.select.return_value
            .eq.return_value
            .limit.return_value
            .execute.side_effect
        ) = FakeAPIError("permission denied")
        repo = SupabaseWorkoutHistoryRepository(supabase_client)

        with pytest.raises(HistoryStorageError):
            repo.save_content(7, "plan")

    def test_save_content_wraps_insert_error(self, supabase_client):
        table = supabase_client.table.return_value
        (
            table.select.return_value
            .eq.return_value
            .limit.return_value
            .execute.return_value
        ) = _result([{"id": 7, **REQUEST}])
        table.insert.return_value.execute.side_effect = FakeAPIError("timeout")
        repo = SupabaseWorkoutHistoryRepository(supabase_client)

        with pytest.raises(HistoryStorageError):
            repo.save_content(7, "plan")

    def test_save_content_not_found_is_not_wrapped(self, supabase_client):
        table = supabase_client.table.return_value
        (
            table.select.return_value
            .eq.return_value
            .limit.return_value
            .execute.return_value
        ) = _result([])
        repo = SupabaseWorkoutHistoryRepository(supabase_client)

        with pytest.raises(WorkoutRequestNotFoundError):
            repo.save_content(7, "plan")

    def test_get_history_wraps_client_error(self, supabase_client):
        table = supabase_client.table.return_value
        table.select.return_value.order.return_value.execute.side_effect = FakeAPIError("down")
        repo = SupabaseWorkoutHistoryRepository(supabase_client)

        with pytest.raises(HistoryStorageError):
            repo.get_history()
