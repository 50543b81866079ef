"""
Alert headers attached to mutating responses and error responses.

Clients read ``X-<app>-alert`` to show a notification and
``X-<app>-params`` for the affected identifier (or entity name on failure).
"""
from urllib.parse import quote

from app.config import settings


def _header_name(suffix: str, application_name: str | None = None) -> str:
    return f"X-{application_name or settings.APP_NAME}-{suffix}"


def create_alert(message: str, param: str, application_name: str | None = None) -> dict[str, str]:
    return {
        _header_name("alert", application_name): message,
        _header_name("params", application_name): quote(param, safe=""),
    }


def entity_creation_alert(entity_name: str, param: str, application_name: str | None = None) -> dict[str, str]:
    message = f"A new {entity_name} is created with identifier {param}"
    return create_alert(message, param, application_name)


def entity_update_alert(entity_name: str, param: str, application_name: str | None = None) -> dict[str, str]:
    message = f"A {entity_name} is updated with identifier {param}"
    return create_alert(message, param, application_name)


def entity_deletion_alert(entity_name: str, param: str, application_name: str | None = None) -> dict[str, str]:
    message = f"A {entity_name} is deleted with identifier {param}"
    return create_alert(message, param, application_name)


def failure_alert(entity_name: str, error_key: str, application_name: str | None = None) -> dict[str, str]:
    return {
        _header_name("error", application_name): f"error.{error_key}",
        _header_name("params", application_name): entity_name,
    }
