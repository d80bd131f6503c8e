"""Pydantic models for the Cronitor REST API.

The models mirror the JSON the service speaks. An optional field set to None
is absent: it is left out of request bodies entirely and is never the same
thing as a zero value.
"""

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict


class MonitorType(StrEnum):
    CHECK = "check"
    HEARTBEAT = "heartbeat"


class Platform(StrEnum):
    HTTP = "http"
    LINUX = "linux"


class MonitorRequest(BaseModel):
    """The request block of an HTTP check."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    url: str = ""
    method: str = "GET"
    headers: dict[str, str] | None = None
    cookies: dict[str, str] | None = None
    body: str | None = None
    timeout_seconds: int | None = None
    regions: list[str] | None = None
    follow_redirects: bool = True
    verify_ssl: bool = True


class Monitor(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    key: str | None = None
    name: str = ""
    type: str | None = None
    platform: str | None = None
    schedule: str | None = None
    assertions: list[str] | None = None
    disabled: bool = False
    paused: bool = False
    notify: list[str] | None = None
    tags: list[str] | None = None
    environments: list[str] | None = None
    realert_interval: str | None = None
    failure_tolerance: int | None = None
    grace_seconds: int | None = None
    schedule_tolerance: int | None = None
    timezone: str | None = None
    group: str | None = None
    request: MonitorRequest | None = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class Notifications(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    emails: list[str] | None = None
    slack: list[str] | None = None
    pagerduty: list[str] | None = None
    phones: list[str] | None = None
    webhooks: list[str] | None = None


class NotificationList(BaseModel):
    """A notification list, called a template by the API."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    key: str | None = None
    name: str = ""
    notifications: Notifications = Notifications()

    def to_payload(self) -> dict[str, Any]:
        # destination lists are always sent, an empty list clears them
        payload = self.model_dump(
            mode="json", exclude_none=True, exclude={"notifications"}
        )
        payload["notifications"] = {
            name: value or []
            for name, value in self.notifications.model_dump(mode="json").items()
        }
        return payload
