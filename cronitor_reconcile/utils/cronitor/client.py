import contextvars
import logging
import re
import time
from contextlib import AbstractContextManager
from dataclasses import dataclass
from secrets import token_bytes

import requests
from prometheus_client import Counter, Histogram

from cronitor_reconcile.config import DEFAULT_ENDPOINT
from cronitor_reconcile.exceptions import (
    EncodingError,
    FailedCreateMonitorError,
    FailedCreateNotificationListError,
    FailedDeleteMonitorError,
    FailedDeleteNotificationListError,
    FailedGetMonitorError,
    FailedGetNotificationListError,
    FailedUpdateMonitorError,
    FailedUpdateNotificationListError,
    InvalidListKeyError,
    MissingKeyError,
)
from cronitor_reconcile.utils.cronitor.models import (
    Monitor,
    NotificationList,
)
from cronitor_reconcile.utils.hooks import Hooks, invoke_with_hooks
from cronitor_reconcile.utils.rest_api_base import ApiBase

MONITORS_PATH = "/api/monitors"
NOTIFICATION_LISTS_PATH = "/v1/templates"

DEFAULT_REALERT_INTERVAL = "every 8 hours"
DEFAULT_NOTIFY = ["default"]
DEFAULT_ENVIRONMENTS = ["production"]
DEFAULT_TIMEOUT_SECONDS = 5

LIST_KEY_RANDOM_BYTES = 3
LIST_KEY_REGEX = re.compile(r"^[0-9a-z_-]+$")

cronitor_request = Counter(
    "cronitor_reconcile_external_api_cronitor_requests_total",
    "Total number of Cronitor API requests",
    ["method", "verb"],
)

cronitor_request_duration = Histogram(
    "cronitor_reconcile_external_api_cronitor_request_duration_seconds",
    "Cronitor API request duration in seconds",
    ["method", "verb"],
)

# tuple stack so nested calls keep their own start time
_latency_tracker: contextvars.ContextVar[tuple[float, ...]] = contextvars.ContextVar(
    f"{__name__}.latency_tracker", default=()
)


@dataclass(frozen=True)
class CronitorApiCallContext:
    """Context information passed to API call hooks.

    Attributes:
        method: API method name (e.g., "monitors.get")
        verb: HTTP verb (e.g., "GET")
        id: Cronitor endpoint the client talks to
    """

    method: str
    verb: str
    id: str


def _metrics_hook(context: CronitorApiCallContext) -> None:
    cronitor_request.labels(context.method, context.verb).inc()


def _latency_start_hook(_context: CronitorApiCallContext) -> None:
    _latency_tracker.set((*_latency_tracker.get(), time.perf_counter()))


def _latency_end_hook(context: CronitorApiCallContext) -> None:
    stack = _latency_tracker.get()
    start_time = stack[-1]
    _latency_tracker.set(stack[:-1])
    duration = time.perf_counter() - start_time
    cronitor_request_duration.labels(context.method, context.verb).observe(duration)


def _request_log_hook(context: CronitorApiCallContext) -> None:
    logging.debug(["cronitor_api_request", context.method, context.verb, context.id])


BUILTIN_HOOKS: Hooks[CronitorApiCallContext] = Hooks(
    pre_hooks=[_metrics_hook, _request_log_hook],
)

# merged last, a start time is pushed only after every other pre hook ran
LATENCY_HOOKS: Hooks[CronitorApiCallContext] = Hooks(
    pre_hooks=[_latency_start_hook],
    post_hooks=[_latency_end_hook],
)


def derive_notification_list_key(name: str, token: bytes) -> str:
    """Build a notification list key from its name and some random bytes.

    Example:
        >>> derive_notification_list_key("Ops", bytes([0x1A, 0x2B, 0x3C]))
        'ops-1a2b3c'
    """
    return f"{name.lower()}-{token.hex()}"


def validate_notification_list_key(key: str) -> str:
    if not LIST_KEY_REGEX.match(key):
        raise InvalidListKeyError(key)
    return key


def set_create_defaults(monitor: Monitor) -> Monitor:
    """Return a copy of monitor with the create time defaults filled in."""
    update: dict = {}
    if not monitor.realert_interval:
        update["realert_interval"] = DEFAULT_REALERT_INTERVAL
    if not monitor.notify:
        update["notify"] = list(DEFAULT_NOTIFY)
    if not monitor.environments:
        update["environments"] = list(DEFAULT_ENVIRONMENTS)
    if monitor.request is not None and not monitor.request.timeout_seconds:
        update["request"] = monitor.request.model_copy(
            update={"timeout_seconds": DEFAULT_TIMEOUT_SECONDS}
        )
    return monitor.model_copy(update=update)


class CronitorClient(ApiBase):
    """Cronitor API client.

    HTTP checks and heartbeats share the monitors collection, notification
    lists live under the templates collection. Creates and updates always
    re-fetch the resource, the write responses are not the canonical
    representation.
    """

    def __init__(
        self,
        api_key: str,
        endpoint: str = DEFAULT_ENDPOINT,
        session: requests.Session | None = None,
        timeout: float | None = None,
        hooks: Hooks[CronitorApiCallContext] | None = None,
    ) -> None:
        super().__init__(
            host=endpoint or DEFAULT_ENDPOINT,
            api_key=api_key,
            session=session,
            timeout=timeout,
        )
        self.api_key = api_key
        self._hooks = BUILTIN_HOOKS.merge(hooks).merge(LATENCY_HOOKS)

    def _call(self, method: str, verb: str) -> AbstractContextManager[None]:
        return invoke_with_hooks(
            CronitorApiCallContext(method=method, verb=verb, id=self.host),
            self._hooks,
        )

    def get_monitor(self, key: str) -> Monitor:
        """Retrieve a monitor."""
        with self._call("monitors.get", "GET"):
            prepared = self.request("GET", f"{MONITORS_PATH}/{key}")
            response = self.send(prepared)
            if response.status_code != 200:
                raise FailedGetMonitorError(prepared.url or "", response.status_code)
            return self.decode(response, Monitor)

    def create_monitor(self, monitor: Monitor) -> Monitor:
        """Create a monitor and return its canonical representation."""
        with self._call("monitors.create", "POST"):
            payload = set_create_defaults(monitor).to_payload()
            logging.debug(["create_monitor", monitor.name, self.host])
            prepared = self.request("POST", MONITORS_PATH, payload)
            response = self.send(prepared)
            if response.status_code != 201:
                raise FailedCreateMonitorError(
                    prepared.url or "", response.status_code, response.text
                )
            created = self.decode(response, Monitor)
        if not created.key:
            raise EncodingError(f"create response for {monitor.name} has no key")
        return self.get_monitor(created.key)

    def update_monitor(self, monitor: Monitor) -> Monitor:
        """Overwrite a monitor in place and return its canonical representation."""
        if not monitor.key:
            raise MissingKeyError("cannot update monitor with empty key")
        with self._call("monitors.update", "PUT"):
            logging.debug(["update_monitor", monitor.key, self.host])
            prepared = self.request(
                "PUT", f"{MONITORS_PATH}/{monitor.key}", monitor.to_payload()
            )
            response = self.send(prepared)
            if response.status_code != 200:
                raise FailedUpdateMonitorError(
                    prepared.url or "", response.status_code, response.text
                )
        return self.get_monitor(monitor.key)

    def delete_monitor(self, key: str) -> None:
        """Delete a monitor, any status below 300 counts as success."""
        with self._call("monitors.delete", "DELETE"):
            prepared = self.request("DELETE", f"{MONITORS_PATH}/{key}")
            response = self.send(prepared)
            if response.status_code >= 300:
                raise FailedDeleteMonitorError(
                    prepared.url or "", response.status_code, response.text
                )
            logging.debug(["delete_monitor", key, self.host])

    def get_notification_list(self, key: str) -> NotificationList:
        """Retrieve a notification list."""
        with self._call("notification_lists.get", "GET"):
            prepared = self.request("GET", f"{NOTIFICATION_LISTS_PATH}/{key}")
            response = self.send(prepared)
            if response.status_code != 200:
                raise FailedGetNotificationListError(
                    prepared.url or "", response.status_code, response.text
                )
            return self.decode(response, NotificationList)

    def create_notification_list(
        self, notification_list: NotificationList
    ) -> NotificationList:
        """Create a notification list under a freshly derived key.

        The key is validated before anything goes over the wire.
        """
        key = validate_notification_list_key(
            derive_notification_list_key(
                notification_list.name, token_bytes(LIST_KEY_RANDOM_BYTES)
            )
        )
        notification_list = notification_list.model_copy(update={"key": key})
        with self._call("notification_lists.create", "POST"):
            logging.debug(["create_notification_list", key, self.host])
            prepared = self.request(
                "POST", NOTIFICATION_LISTS_PATH, notification_list.to_payload()
            )
            response = self.send(prepared)
            if response.status_code != 201:
                raise FailedCreateNotificationListError(
                    prepared.url or "", response.status_code, response.text
                )
        return self.get_notification_list(key)

    def update_notification_list(
        self, notification_list: NotificationList
    ) -> NotificationList:
        """Overwrite a notification list and return its canonical representation."""
        if not notification_list.key:
            raise MissingKeyError("cannot update notification list with empty key")
        key = notification_list.key
        with self._call("notification_lists.update", "PUT"):
            logging.debug(["update_notification_list", key, self.host])
            prepared = self.request(
                "PUT",
                f"{NOTIFICATION_LISTS_PATH}/{key}",
                notification_list.to_payload(),
            )
            response = self.send(prepared)
            if response.status_code != 200:
                raise FailedUpdateNotificationListError(
                    prepared.url or "", response.status_code, response.text
                )
        return self.get_notification_list(key)

    def delete_notification_list(self, key: str) -> None:
        """Delete a notification list, only 204 No Content counts as success."""
        with self._call("notification_lists.delete", "DELETE"):
            prepared = self.request("DELETE", f"{NOTIFICATION_LISTS_PATH}/{key}")
            response = self.send(prepared)
            if response.status_code != 204:
                raise FailedDeleteNotificationListError(
                    prepared.url or "", response.status_code, response.text
                )
            logging.debug(["delete_notification_list", key, self.host])
