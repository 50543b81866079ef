"""
Tests for alert header construction.
"""
from app.utils.headers import (
    create_alert,
    entity_creation_alert,
    entity_update_alert,
    entity_deletion_alert,
    failure_alert,
)


def test_creation_alert():
    headers = entity_creation_alert("teamProfile", "5", application_name="demoApp")
    assert headers == {
        "X-demoApp-alert": "A new teamProfile is created with identifier 5",
        "X-demoApp-params": "5",
    }


def test_update_alert():
    headers = entity_update_alert("teamProfile", "7", application_name="demoApp")
    assert headers["X-demoApp-alert"] == "A teamProfile is updated with identifier 7"


def test_deletion_alert():
    headers = entity_deletion_alert("teamProfile", "9", application_name="demoApp")
    assert headers["X-demoApp-alert"] == "A teamProfile is deleted with identifier 9"


def test_params_are_url_encoded():
    headers = create_alert("msg", "a b/c", application_name="demoApp")
    assert headers["X-demoApp-params"] == "a%20b%2Fc"


def test_failure_alert():
    headers = failure_alert("teamProfile", "idexists", application_name="demoApp")
    assert headers == {
        "X-demoApp-error": "error.idexists",
        "X-demoApp-params": "teamProfile",
    }


def test_default_application_name_comes_from_settings():
    from app.config import settings

    headers = entity_creation_alert("teamProfile", "1")
    assert f"X-{settings.APP_NAME}-alert" in headers
