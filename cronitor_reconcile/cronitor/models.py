"""Declared shapes of the resources managed through Cronitor.

These are what the convergence engine holds in its configuration and state.
They are translated to and from the API models in
cronitor_reconcile.utils.cronitor.models by the mappers module.
"""

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

from cronitor_reconcile.utils.cronitor.client import (
    DEFAULT_ENVIRONMENTS,
    DEFAULT_NOTIFY,
    DEFAULT_REALERT_INTERVAL,
    DEFAULT_TIMEOUT_SECONDS,
)


class Unordered:
    """Annotation marker for collections whose order carries no meaning.

    normalize() reorders every field carrying this marker. Lists tagged this
    way must not hold duplicates.
    """

    def __repr__(self) -> str:
        return "Unordered()"


UNORDERED = Unordered()

UnorderedList = Annotated[list[str] | None, UNORDERED]
UnorderedMap = Annotated[dict[str, str] | None, UNORDERED]


class MonitorKind(StrEnum):
    HTTP = "http"
    HEARTBEAT = "heartbeat"


class ResourceState(StrEnum):
    """Lifecycle of a managed resource.

    state_of() reports the states that can be observed from a read:
    UNMANAGED, SYNCED and DRIFTED. CREATED and DELETED mark the transitions
    made by create() and delete(); the convergence engine records them in its
    own state, nothing here reads them back.
    """

    UNMANAGED = "unmanaged"
    CREATED = "created"
    SYNCED = "synced"
    DRIFTED = "drifted"
    DELETED = "deleted"


class HttpCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["http"] = "http"
    url: str
    method: str = "GET"
    headers: UnorderedMap = None
    cookies: UnorderedMap = None
    body: str | None = None
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS
    regions: UnorderedList = None
    follow_redirects: bool = True
    verify_ssl: bool = True
    assertions: UnorderedList = None


class HeartbeatCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["heartbeat"] = "heartbeat"
    telemetry_url: SecretStr | None = None
    """
    Ping URL of the heartbeat. Derived from the account key and the monitor
    key, it is never sent to the service.
    """


class MonitorSpec(BaseModel):
    """A monitor as declared in configuration, or as read back from Cronitor."""

    model_config = ConfigDict(frozen=True)

    key: str | None = None
    """
    Assigned by Cronitor on creation and immutable afterwards.
    """

    name: str
    disabled: bool = False
    paused: bool = False
    schedule: str | None = None
    notify: UnorderedList = DEFAULT_NOTIFY
    tags: UnorderedList = None
    environments: UnorderedList = DEFAULT_ENVIRONMENTS
    realert_interval: str | None = DEFAULT_REALERT_INTERVAL
    failure_tolerance: int | None = None
    grace_seconds: int | None = None
    schedule_tolerance: int | None = None
    timezone: str | None = None
    group: str | None = None
    variant: Annotated[HttpCheck | HeartbeatCheck, Field(discriminator="kind")]

    @field_validator("notify")
    @classmethod
    def notify_must_not_be_empty(cls, v: list[str] | None) -> list[str] | None:
        if v is not None and not v:
            raise ValueError("notify must contain at least one recipient")
        return v

    @property
    def kind(self) -> MonitorKind:
        return MonitorKind(self.variant.kind)


class NotificationListSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str | None = None
    name: str
    emails: UnorderedList = None
    slack: UnorderedList = None
    pagerduty: UnorderedList = None
    phones: UnorderedList = None
    webhooks: UnorderedList = None
