"""Result wrapper unit tests."""

import pytest

from ainotes.core.result import NULL_VALUE_ERROR, Result


def test_ok_carries_value():
    result = Result.ok(42)

    assert result.success
    assert not result.failure
    assert result.value == 42
    assert result.error is None


def test_ok_without_value():
    result = Result.ok()

    assert result.success
    assert result.value is None


def test_fail_carries_error_and_no_value():
    result = Result.fail("boom")

    assert result.failure
    assert result.value is None
    assert result.error == "boom"


def test_from_value_none_is_failure():
    result = Result.from_value(None)

    assert result.failure
    assert result.error == NULL_VALUE_ERROR


def test_from_value_falsy_is_success():
    assert Result.from_value(0).success
    assert Result.from_value("").value == ""


@pytest.mark.parametrize(
    "kwargs",
    [
        {"success": True, "error": "unexpected"},
        {"success": False},
        {"success": False, "error": ""},
    ],
)
def test_inconsistent_results_are_rejected(kwargs):
    with pytest.raises(ValueError):
        Result(**kwargs)


def test_result_is_immutable():
    result = Result.ok(1)

    with pytest.raises(AttributeError):
        result.value = 2  # type: ignore[misc]
