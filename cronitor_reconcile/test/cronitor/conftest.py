from collections.abc import Generator
from typing import Any

import pytest
from pytest_httpserver import HTTPServer

from cronitor_reconcile.test.fixtures import Fixtures
from cronitor_reconcile.utils.cronitor import CronitorClient


@pytest.fixture
def fx() -> Fixtures:
    return Fixtures("cronitor")


@pytest.fixture
def api_key() -> str:
    return "test-api-key"


@pytest.fixture
def cronitor_client(
    httpserver: HTTPServer, api_key: str
) -> Generator[CronitorClient, None, None]:
    client = CronitorClient(api_key=api_key, endpoint=httpserver.url_for("/"))
    yield client
    client.cleanup()


@pytest.fixture
def monitor_http(fx: Fixtures) -> dict[str, Any]:
    return fx.get_json("monitor_http.json")


@pytest.fixture
def monitor_heartbeat(fx: Fixtures) -> dict[str, Any]:
    return fx.get_json("monitor_heartbeat.json")


@pytest.fixture
def notification_list(fx: Fixtures) -> dict[str, Any]:
    return fx.get_json("notification_list.json")
