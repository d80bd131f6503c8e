"""Engine facing resources.

Each resource wraps one CRUD surface of the Cronitor client. Every value
handed back to the engine has been normalized against the declaration it was
applied from, so collections the service reorders do not show up as drift.
"""

import logging
from typing import ClassVar

from cronitor_reconcile.cronitor.drift import state_of
from cronitor_reconcile.cronitor.mappers import (
    monitor_from_wire,
    monitor_to_wire,
    notification_list_from_wire,
    notification_list_to_wire,
)
from cronitor_reconcile.cronitor.models import (
    HttpCheck,
    MonitorKind,
    MonitorSpec,
    NotificationListSpec,
    ResourceState,
)
from cronitor_reconcile.cronitor.normalize import normalize
from cronitor_reconcile.exceptions import MissingKeyError, ValidationError
from cronitor_reconcile.utils.cronitor import CronitorClient, Monitor


def _require_key(key: str | None, what: str) -> str:
    if not key:
        raise MissingKeyError(f"{what} has no key, it was never created or imported")
    return key


class MonitorResource:
    kind: ClassVar[MonitorKind]

    def __init__(self, client: CronitorClient) -> None:
        self.client = client

    def _from_wire(self, monitor: Monitor) -> MonitorSpec:
        spec = monitor_from_wire(monitor, self.client.api_key)
        if spec.kind != self.kind:
            raise ValidationError(
                f"monitor {spec.key} is a {spec.kind} monitor, expected {self.kind}"
            )
        return spec

    def validate_config(self, plan: MonitorSpec) -> None:
        if plan.kind != self.kind:
            raise ValidationError(
                f"monitor {plan.name} is declared as {plan.kind}, expected {self.kind}"
            )

    def create(self, plan: MonitorSpec) -> MonitorSpec:
        self.validate_config(plan)
        logging.info(["create_monitor", self.kind, plan.name, self.client.host])
        monitor = self.client.create_monitor(monitor_to_wire(plan))
        return normalize(plan, self._from_wire(monitor))

    def read(self, state: MonitorSpec) -> MonitorSpec:
        key = _require_key(state.key, f"monitor {state.name}")
        return normalize(state, self._from_wire(self.client.get_monitor(key)))

    def update(self, state: MonitorSpec, plan: MonitorSpec) -> MonitorSpec:
        key = _require_key(state.key, f"monitor {state.name}")
        self.validate_config(plan)
        logging.info(["update_monitor", self.kind, key, self.client.host])
        monitor = monitor_to_wire(plan).model_copy(update={"key": key})
        return normalize(plan, self._from_wire(self.client.update_monitor(monitor)))

    def delete(self, state: MonitorSpec) -> None:
        key = _require_key(state.key, f"monitor {state.name}")
        logging.info(["delete_monitor", self.kind, key, self.client.host])
        self.client.delete_monitor(key)

    def import_state(self, key: str) -> MonitorSpec:
        logging.info(["import_monitor", self.kind, key, self.client.host])
        return self._from_wire(self.client.get_monitor(key))

    def state(self, plan: MonitorSpec, observed: MonitorSpec | None) -> ResourceState:
        return state_of(plan, observed)


class HttpMonitorResource(MonitorResource):
    kind = MonitorKind.HTTP

    def validate_config(self, plan: MonitorSpec) -> None:
        super().validate_config(plan)
        check = plan.variant
        if not isinstance(check, HttpCheck):
            raise ValidationError(f"monitor {plan.name} has no http check")
        problems = [
            f"{what} key must be lowercase: {key}"
            for what, keys in (
                ("header", check.headers),
                ("cookie", check.cookies),
            )
            for key in keys or {}
            if key != key.lower()
        ]
        if problems:
            raise ValidationError(
                f"invalid http check {plan.name}: {'; '.join(problems)}", problems
            )


class HeartbeatMonitorResource(MonitorResource):
    kind = MonitorKind.HEARTBEAT


class NotificationListResource:
    def __init__(self, client: CronitorClient) -> None:
        self.client = client

    def validate_config(self, plan: NotificationListSpec) -> None:
        if not plan.name:
            raise ValidationError("notification list name must not be empty")

    def create(self, plan: NotificationListSpec) -> NotificationListSpec:
        self.validate_config(plan)
        logging.info(["create_notification_list", plan.name, self.client.host])
        notification_list = self.client.create_notification_list(
            notification_list_to_wire(plan)
        )
        return normalize(plan, notification_list_from_wire(notification_list))

    def read(self, state: NotificationListSpec) -> NotificationListSpec:
        key = _require_key(state.key, f"notification list {state.name}")
        return normalize(
            state, notification_list_from_wire(self.client.get_notification_list(key))
        )

    def update(
        self, state: NotificationListSpec, plan: NotificationListSpec
    ) -> NotificationListSpec:
        key = _require_key(state.key, f"notification list {state.name}")
        self.validate_config(plan)
        logging.info(["update_notification_list", key, self.client.host])
        notification_list = notification_list_to_wire(plan).model_copy(
            update={"key": key}
        )
        return normalize(
            plan,
            notification_list_from_wire(
                self.client.update_notification_list(notification_list)
            ),
        )

    def delete(self, state: NotificationListSpec) -> None:
        key = _require_key(state.key, f"notification list {state.name}")
        logging.info(["delete_notification_list", key, self.client.host])
        self.client.delete_notification_list(key)

    def import_state(self, key: str) -> NotificationListSpec:
        logging.info(["import_notification_list", key, self.client.host])
        return notification_list_from_wire(self.client.get_notification_list(key))

    def state(
        self, plan: NotificationListSpec, observed: NotificationListSpec | None
    ) -> ResourceState:
        return state_of(plan, observed)
