from cronitor_reconcile.cronitor.mappers import (
    monitor_from_wire,
    notification_list_from_wire,
)
from cronitor_reconcile.cronitor.models import MonitorSpec, NotificationListSpec
from cronitor_reconcile.utils.cronitor import CronitorClient


class MonitorDataSource:
    """Read-only lookup of an existing monitor of any kind."""

    def __init__(self, client: CronitorClient) -> None:
        self.client = client

    def read(self, key: str) -> MonitorSpec:
        return monitor_from_wire(self.client.get_monitor(key), self.client.api_key)


class NotificationListDataSource:
    """Read-only lookup of an existing notification list."""

    def __init__(self, client: CronitorClient) -> None:
        self.client = client

    def read(self, key: str) -> NotificationListSpec:
        return notification_list_from_wire(self.client.get_notification_list(key))
