"""
Tests for the API request logging middleware.
"""

import logging

import pytest

LOGGER = "backend.request_logging"


@pytest.mark.unit
def test_logs_api_requests(client, caplog):
    with caplog.at_level(logging.INFO, logger=LOGGER):
        client.get("/api/workouts/options")

    messages = [r.getMessage() for r in caplog.records if r.name == LOGGER]
    assert len(messages) == 1
    assert messages[0].startswith("GET /api/workouts/options 200 in ")
    assert messages[0].endswith("ms")


@pytest.mark.unit
def test_skips_non_api_requests(client, caplog):
    with caplog.at_level(logging.INFO, logger=LOGGER):
        client.get("/health")

    assert [r for r in caplog.records if r.name == LOGGER] == []


@pytest.mark.unit
def test_long_lines_are_truncated(client, caplog):
    path = "/api/" + "x" * 120
    with caplog.at_level(logging.INFO, logger=LOGGER):
        client.get(path)

    messages = [r.getMessage() for r in caplog.records if r.name == LOGGER]
    assert len(messages[0]) == 80
    assert messages[0].endswith("…")
