"""
Tests for logging configuration.
"""
import json
import logging

import pytest
import structlog

from app.logging import configure_logging


@pytest.fixture
def configured_logging(capsys):
    # capsys first, so the handler binds to the captured stderr
    configure_logging()
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


def test_structlog_events_render_as_json(configured_logging, capsys):
    structlog.get_logger("app.test").info("team_profile.created", team_profile_id=5)

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "team_profile.created"
    assert record["team_profile_id"] == 5
    assert record["level"] == "info"


def test_debug_is_filtered_at_info_level(configured_logging, capsys):
    log = structlog.get_logger("app.test")
    log.debug("REST request to get all TeamProfiles")
    log.info("team_profile.list", count=0)

    err = capsys.readouterr().err
    assert "team_profile.list" in err
    assert "REST request" not in err
