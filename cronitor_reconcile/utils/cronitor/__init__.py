from cronitor_reconcile.utils.cronitor.client import (
    CronitorApiCallContext,
    CronitorClient,
)
from cronitor_reconcile.utils.cronitor.models import (
    Monitor,
    MonitorRequest,
    MonitorType,
    NotificationList,
    Notifications,
    Platform,
)

__all__ = [
    "CronitorApiCallContext",
    "CronitorClient",
    "Monitor",
    "MonitorRequest",
    "MonitorType",
    "NotificationList",
    "Notifications",
    "Platform",
]
