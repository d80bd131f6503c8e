import logging
from typing import Any, Self

import requests

from cronitor_reconcile.config import CONFIG_SECTION, ProviderSettings
from cronitor_reconcile.cronitor.data_sources import (
    MonitorDataSource,
    NotificationListDataSource,
)
from cronitor_reconcile.cronitor.resources import (
    HeartbeatMonitorResource,
    HttpMonitorResource,
    NotificationListResource,
)
from cronitor_reconcile.utils.cronitor import CronitorApiCallContext, CronitorClient
from cronitor_reconcile.utils.hooks import Hooks


class CronitorProvider:
    """Everything the engine needs to manage one Cronitor account.

    The client is built once from the settings and shared, read-only, by all
    resources and data sources handed out here.
    """

    def __init__(
        self,
        settings: ProviderSettings,
        session: requests.Session | None = None,
        timeout: float | None = None,
        hooks: Hooks[CronitorApiCallContext] | None = None,
    ) -> None:
        self.settings = settings
        self.client = CronitorClient(
            api_key=settings.api_key.get_secret_value(),
            endpoint=settings.endpoint,
            session=session,
            timeout=timeout,
            hooks=hooks,
        )
        logging.debug(["cronitor_provider", self.client.host])
        self.http_monitor = HttpMonitorResource(self.client)
        self.heartbeat_monitor = HeartbeatMonitorResource(self.client)
        self.notification_list = NotificationListResource(self.client)
        self.monitor_data_source = MonitorDataSource(self.client)
        self.notification_list_data_source = NotificationListDataSource(self.client)

    @classmethod
    def from_config(cls, section: str = CONFIG_SECTION, **kwargs: Any) -> Self:
        return cls(ProviderSettings.from_config(section), **kwargs)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.client.cleanup()
