import pytest

from cronitor_reconcile.utils.ordering import reorder_keys_to_match, reorder_to_match


@pytest.mark.parametrize(
    "declared, observed, expected",
    [
        (["a", "b", "c"], ["c", "a", "b"], ["a", "b", "c"]),
        (["a", "b", "c"], ["a", "b", "c"], ["a", "b", "c"]),
        ([], [], []),
        # length mismatch
        (["a", "b"], ["b", "a", "c"], ["b", "a", "c"]),
        # element not declared
        (["a", "b"], ["b", "x"], ["b", "x"]),
        (None, ["b", "a"], ["b", "a"]),
        (["a", "b"], None, None),
        (None, None, None),
    ],
)
def test_reorder_to_match(
    declared: list[str] | None, observed: list[str] | None, expected: list[str] | None
) -> None:
    assert reorder_to_match(declared, observed) == expected


def test_reorder_to_match_idempotent() -> None:
    declared = ["us-east-1", "eu-central-1", "ap-south-1"]
    once = reorder_to_match(declared, ["ap-south-1", "us-east-1", "eu-central-1"])
    assert reorder_to_match(declared, once) == once == declared


def test_reorder_to_match_returns_copy() -> None:
    declared = ["a", "b"]
    result = reorder_to_match(declared, ["b", "a"])
    assert result == declared
    assert result is not declared


def test_reorder_to_match_empty_is_not_absent() -> None:
    assert reorder_to_match([], None) is None
    assert reorder_to_match(None, []) == []


def test_reorder_to_match_generic_elements() -> None:
    assert reorder_to_match([3, 1, 2], [1, 2, 3]) == [3, 1, 2]


def test_reorder_keys_to_match() -> None:
    declared = {"accept": "text/plain", "x-trace": "0"}
    observed = {"x-trace": "1", "accept": "text/plain"}

    result = reorder_keys_to_match(declared, observed)

    assert list(result or {}) == ["accept", "x-trace"]
    # values always come from what was observed
    assert result == observed


def test_reorder_keys_to_match_mismatch() -> None:
    observed = {"x-trace": "1", "cookie": "a"}
    result = reorder_keys_to_match({"accept": "text/plain", "x-trace": "1"}, observed)
    assert list(result or {}) == ["x-trace", "cookie"]


def test_reorder_keys_to_match_absent() -> None:
    assert reorder_keys_to_match({"a": "1"}, None) is None
    assert reorder_keys_to_match(None, {"a": "1"}) == {"a": "1"}
