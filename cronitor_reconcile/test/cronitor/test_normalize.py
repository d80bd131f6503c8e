from cronitor_reconcile.cronitor.drift import drift, state_of
from cronitor_reconcile.cronitor.models import (
    HeartbeatCheck,
    HttpCheck,
    MonitorSpec,
    NotificationListSpec,
    ResourceState,
)
from cronitor_reconcile.cronitor.normalize import is_unordered, normalize


def http_monitor(**kwargs) -> MonitorSpec:
    check = kwargs.pop("check", {})
    return MonitorSpec(
        name="api",
        variant=HttpCheck(url="https://example.com/health", **check),
        **kwargs,
    )


def test_is_unordered() -> None:
    fields = MonitorSpec.model_fields
    assert is_unordered(fields["tags"])
    assert is_unordered(fields["notify"])
    assert not is_unordered(fields["name"])
    assert not is_unordered(fields["variant"])
    assert is_unordered(HttpCheck.model_fields["headers"])
    assert not is_unordered(HttpCheck.model_fields["url"])


def test_normalize_reorders_top_level_and_nested_fields() -> None:
    declared = http_monitor(
        tags=["web", "prod"],
        notify=["default", "oncall"],
        check={
            "regions": ["us-east-1", "eu-central-1"],
            "headers": {"accept": "text/plain", "x-trace": "1"},
            "assertions": ["response.code = 200", "response.time < 2s"],
        },
    )
    observed = http_monitor(
        key="abc123",
        tags=["prod", "web"],
        notify=["oncall", "default"],
        check={
            "regions": ["eu-central-1", "us-east-1"],
            "headers": {"x-trace": "1", "accept": "text/plain"},
            "assertions": ["response.time < 2s", "response.code = 200"],
        },
    )

    result = normalize(declared, observed)

    assert result.key == "abc123"
    assert result.tags == ["web", "prod"]
    assert result.notify == ["default", "oncall"]
    assert isinstance(result.variant, HttpCheck)
    assert result.variant.regions == ["us-east-1", "eu-central-1"]
    assert list(result.variant.headers or {}) == ["accept", "x-trace"]
    assert result.variant.assertions == ["response.code = 200", "response.time < 2s"]


def test_normalize_is_idempotent() -> None:
    declared = http_monitor(tags=["a", "b", "c"])
    observed = http_monitor(tags=["c", "b", "a"])

    once = normalize(declared, observed)

    assert normalize(declared, once) == once


def test_normalize_keeps_real_differences() -> None:
    declared = http_monitor(tags=["a", "b"], check={"regions": ["us-east-1"]})
    observed = http_monitor(
        tags=["b", "a", "c"], check={"regions": ["eu-central-1"]}
    )

    result = normalize(declared, observed)

    assert result.tags == ["b", "a", "c"]
    assert isinstance(result.variant, HttpCheck)
    assert result.variant.regions == ["eu-central-1"]


def test_normalize_different_variants() -> None:
    declared = http_monitor(tags=["a", "b"])
    observed = MonitorSpec(name="api", tags=["b", "a"], variant=HeartbeatCheck())

    result = normalize(declared, observed)

    assert result.tags == ["a", "b"]
    assert result.variant == HeartbeatCheck()


def test_normalize_nothing_to_do() -> None:
    declared = NotificationListSpec(name="Ops", emails=["a@example.com"])
    observed = NotificationListSpec(key="ops-1a2b3c", name="Ops")
    assert normalize(declared, observed) is observed


def test_normalize_absent_declared() -> None:
    declared = NotificationListSpec(name="Ops")
    observed = NotificationListSpec(name="Ops", emails=["b@x", "a@x"])
    assert normalize(declared, observed).emails == ["b@x", "a@x"]


def test_drift_ignores_computed_fields() -> None:
    declared = MonitorSpec(name="job", variant=HeartbeatCheck())
    observed = MonitorSpec(
        key="job",
        name="job",
        variant=HeartbeatCheck(telemetry_url="https://cronitor.link/p/k/job"),
    )

    assert drift(declared, observed).is_empty()
    assert state_of(declared, observed) == ResourceState.SYNCED


def test_drift_reports_changes() -> None:
    declared = http_monitor(tags=["a"], check={"timeout_seconds": 10})
    observed = http_monitor(key="abc123", tags=["a", "b"])

    result = drift(declared, observed)

    assert set(result.change) == {"tags", "variant"}
    assert result.change["tags"].declared == ["a"]
    assert result.change["tags"].observed == ["a", "b"]
    assert state_of(declared, observed) == ResourceState.DRIFTED


def test_drift_after_normalize_is_empty() -> None:
    declared = http_monitor(tags=["web", "prod"], check={"regions": ["b", "a"]})
    observed = http_monitor(
        key="abc123", tags=["prod", "web"], check={"regions": ["a", "b"]}
    )

    assert not drift(declared, observed).is_empty()
    assert drift(declared, normalize(declared, observed)).is_empty()


def test_state_of_unmanaged() -> None:
    assert state_of(http_monitor(), None) == ResourceState.UNMANAGED


def test_state_of_reports_only_observable_states() -> None:
    declared = http_monitor(tags=["a"])
    observed = [None, http_monitor(key="k", tags=["a"]), http_monitor(tags=["b"])]

    states = [state_of(declared, o) for o in observed]

    assert states == [
        ResourceState.UNMANAGED,
        ResourceState.SYNCED,
        ResourceState.DRIFTED,
    ]
    assert ResourceState.CREATED not in states
    assert ResourceState.DELETED not in states
