from typing import Any

import pytest
from pydantic import SecretStr
from pytest_httpserver import HTTPServer

from cronitor_reconcile import config
from cronitor_reconcile.config import ProviderSettings
from cronitor_reconcile.cronitor.models import HttpCheck, MonitorKind
from cronitor_reconcile.cronitor.provider import CronitorProvider
from cronitor_reconcile.exceptions import FailedGetMonitorError


@pytest.fixture
def provider(httpserver: HTTPServer, api_key: str) -> CronitorProvider:
    return CronitorProvider(
        ProviderSettings(api_key=SecretStr(api_key), endpoint=httpserver.url_for("/"))
    )


def test_provider_shares_one_client(provider: CronitorProvider, api_key: str) -> None:
    clients = {
        id(r.client)
        for r in (
            provider.http_monitor,
            provider.heartbeat_monitor,
            provider.notification_list,
            provider.monitor_data_source,
            provider.notification_list_data_source,
        )
    }
    assert clients == {id(provider.client)}
    assert provider.client.api_key == api_key


def test_provider_from_config() -> None:
    config.init({"cronitor": {"api_key": "from-config", "endpoint": ""}})
    try:
        with CronitorProvider.from_config(timeout=10) as provider:
            assert provider.client.host == "https://cronitor.io"
            assert provider.client.timeout == 10
            assert provider.client.api_key == "from-config"
    finally:
        config.init(None)


def test_monitor_data_source(
    httpserver: HTTPServer, provider: CronitorProvider, monitor_http: dict[str, Any]
) -> None:
    httpserver.expect_request("/api/monitors/abc123").respond_with_json(monitor_http)

    spec = provider.monitor_data_source.read("abc123")

    assert spec.kind == MonitorKind.HTTP
    assert isinstance(spec.variant, HttpCheck)
    # no declared value to normalize against
    assert spec.tags == ["web", "prod"]


def test_monitor_data_source_any_kind(
    httpserver: HTTPServer,
    provider: CronitorProvider,
    monitor_heartbeat: dict[str, Any],
) -> None:
    httpserver.expect_request("/api/monitors/nightly-backup").respond_with_json(
        monitor_heartbeat
    )

    assert provider.monitor_data_source.read("nightly-backup").kind == (
        MonitorKind.HEARTBEAT
    )


def test_monitor_data_source_not_found(
    httpserver: HTTPServer, provider: CronitorProvider
) -> None:
    httpserver.expect_request("/api/monitors/missing").respond_with_data(status=404)

    with pytest.raises(FailedGetMonitorError):
        provider.monitor_data_source.read("missing")


def test_notification_list_data_source(
    httpserver: HTTPServer,
    provider: CronitorProvider,
    notification_list: dict[str, Any],
) -> None:
    httpserver.expect_request("/v1/templates/ops-1a2b3c").respond_with_json(
        notification_list
    )

    spec = provider.notification_list_data_source.read("ops-1a2b3c")

    assert spec.key == "ops-1a2b3c"
    assert spec.emails == ["b@example.com", "a@example.com"]
    assert spec.phones is None
