from cronitor_reconcile.cronitor.data_sources import (
    MonitorDataSource,
    NotificationListDataSource,
)
from cronitor_reconcile.cronitor.drift import drift, state_of
from cronitor_reconcile.cronitor.models import (
    HeartbeatCheck,
    HttpCheck,
    MonitorKind,
    MonitorSpec,
    NotificationListSpec,
    ResourceState,
)
from cronitor_reconcile.cronitor.normalize import normalize
from cronitor_reconcile.cronitor.provider import CronitorProvider
from cronitor_reconcile.cronitor.resources import (
    HeartbeatMonitorResource,
    HttpMonitorResource,
    NotificationListResource,
)

__all__ = [
    "CronitorProvider",
    "HeartbeatCheck",
    "HeartbeatMonitorResource",
    "HttpCheck",
    "HttpMonitorResource",
    "MonitorDataSource",
    "MonitorKind",
    "MonitorSpec",
    "NotificationListDataSource",
    "NotificationListResource",
    "NotificationListSpec",
    "ResourceState",
    "drift",
    "normalize",
    "state_of",
]
