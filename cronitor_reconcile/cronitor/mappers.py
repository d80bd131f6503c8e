from pydantic import SecretStr

from cronitor_reconcile.cronitor.models import (
    HeartbeatCheck,
    HttpCheck,
    MonitorSpec,
    NotificationListSpec,
)
from cronitor_reconcile.utils.cronitor.models import (
    Monitor,
    MonitorRequest,
    MonitorType,
    NotificationList,
    Notifications,
    Platform,
)

TELEMETRY_URL = "https://cronitor.link/p/{api_key}/{key}"


def _list_or_none(value: list[str] | None) -> list[str] | None:
    return list(value) if value else None


def _copy_or_none(value: list[str] | None) -> list[str] | None:
    return None if value is None else list(value)


def _map_or_none(value: dict[str, str] | None) -> dict[str, str] | None:
    return dict(value) if value else None


def telemetry_url(api_key: str, key: str) -> SecretStr:
    return SecretStr(TELEMETRY_URL.format(api_key=api_key, key=key))


def monitor_to_wire(spec: MonitorSpec) -> Monitor:
    """Translate a declared monitor into the API shape.

    Unset tolerances stay unset, a declared 0 is sent as 0. Unset notify and
    environments are left out of the body like any other unset field, the
    service never receives an empty recipient list. The telemetry URL of
    heartbeats is local only and is dropped here.
    """
    monitor = Monitor(
        key=spec.key,
        name=spec.name,
        disabled=spec.disabled,
        paused=spec.paused,
        schedule=spec.schedule or None,
        notify=_copy_or_none(spec.notify),
        tags=list(spec.tags or []),
        environments=_copy_or_none(spec.environments),
        realert_interval=spec.realert_interval,
        failure_tolerance=spec.failure_tolerance,
        grace_seconds=spec.grace_seconds,
        schedule_tolerance=spec.schedule_tolerance,
        timezone=spec.timezone or None,
        group=spec.group or None,
    )
    match spec.variant:
        case HttpCheck() as check:
            return monitor.model_copy(
                update={
                    "type": MonitorType.CHECK,
                    "platform": Platform.HTTP,
                    "assertions": list(check.assertions or []),
                    "request": MonitorRequest(
                        url=check.url,
                        method=check.method,
                        headers=dict(check.headers or {}),
                        cookies=dict(check.cookies or {}),
                        body=check.body,
                        timeout_seconds=check.timeout_seconds,
                        regions=list(check.regions or []),
                        follow_redirects=check.follow_redirects,
                        verify_ssl=check.verify_ssl,
                    ),
                }
            )
        case HeartbeatCheck():
            return monitor.model_copy(
                update={"type": MonitorType.HEARTBEAT, "platform": Platform.LINUX}
            )


def monitor_from_wire(monitor: Monitor, api_key: str) -> MonitorSpec:
    """Translate an API monitor back into the declared shape.

    Empty collections come back as None, the same way an undeclared
    collection looks in configuration. Anything that is not an HTTP check is
    treated as a heartbeat and gets its telemetry URL recomputed.
    """
    if monitor.type == MonitorType.CHECK:
        request = monitor.request or MonitorRequest()
        variant: HttpCheck | HeartbeatCheck = HttpCheck(
            url=request.url,
            method=request.method,
            headers=_map_or_none(request.headers),
            cookies=_map_or_none(request.cookies),
            body=request.body or None,
            timeout_seconds=request.timeout_seconds or 0,
            regions=_list_or_none(request.regions),
            follow_redirects=request.follow_redirects,
            verify_ssl=request.verify_ssl,
            assertions=_list_or_none(monitor.assertions),
        )
    else:
        variant = HeartbeatCheck(
            telemetry_url=telemetry_url(api_key, monitor.key) if monitor.key else None
        )
    return MonitorSpec(
        key=monitor.key,
        name=monitor.name,
        disabled=monitor.disabled,
        paused=monitor.paused,
        schedule=monitor.schedule or None,
        notify=_list_or_none(monitor.notify),
        tags=_list_or_none(monitor.tags),
        environments=_list_or_none(monitor.environments),
        realert_interval=monitor.realert_interval,
        failure_tolerance=monitor.failure_tolerance,
        grace_seconds=monitor.grace_seconds,
        schedule_tolerance=monitor.schedule_tolerance,
        timezone=monitor.timezone,
        group=monitor.group,
        variant=variant,
    )


def notification_list_to_wire(spec: NotificationListSpec) -> NotificationList:
    return NotificationList(
        key=spec.key,
        name=spec.name,
        notifications=Notifications(
            emails=list(spec.emails or []),
            slack=list(spec.slack or []),
            pagerduty=list(spec.pagerduty or []),
            phones=list(spec.phones or []),
            webhooks=list(spec.webhooks or []),
        ),
    )


def notification_list_from_wire(
    notification_list: NotificationList,
) -> NotificationListSpec:
    notifications = notification_list.notifications
    return NotificationListSpec(
        key=notification_list.key,
        name=notification_list.name,
        emails=_list_or_none(notifications.emails),
        slack=_list_or_none(notifications.slack),
        pagerduty=_list_or_none(notifications.pagerduty),
        phones=_list_or_none(notifications.phones),
        webhooks=_list_or_none(notifications.webhooks),
    )
