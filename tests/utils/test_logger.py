from collections.abc import Set
import logging
from typing import Callable, Final
import pytest
from unittest.mock import patch
from returns.io import IOFailure, IOResult, IOSuccess
from returns.result import Failure, Result, Success, safe

from conversion.exceptions import DegenerateFitError
from utils.logger import FailureLevel, log_railway_function


SUCCESS_MESSAGE: Final[str] = "Bounds computed"
FAILURE_MESSAGE: Final[str] = "Bounds not computed"
ERROR_VALUE: Final[Exception] = DegenerateFitError("Line fit is singular")


@log_railway_function(failure_message=FAILURE_MESSAGE, success_message=SUCCESS_MESSAGE)
def some_io_function(should_succeed: bool):
    if should_succeed:
        return IOSuccess(42)
    return IOFailure(ERROR_VALUE)


@log_railway_function(failure_message=FAILURE_MESSAGE, success_message=SUCCESS_MESSAGE)
def some_function(should_succeed: bool):
    if should_succeed:
        return Success(42)
    return Failure(ERROR_VALUE)


@log_railway_function(failure_message=FAILURE_MESSAGE, success_message=SUCCESS_MESSAGE)
@safe
def some_safe_function(samples: list[float]) -> float:
    """Spread of the samples."""
    if len(samples) < 2:
        raise ERROR_VALUE
    return max(samples) - min(samples)


@pytest.mark.parametrize(
    "function, should_succeed, message, level",
    (
        pytest.param(some_function, True, SUCCESS_MESSAGE, {"INFO"}, id="Success"),
        pytest.param(
            some_function, False, FAILURE_MESSAGE, {"DEBUG", "ERROR"}, id="Failure"
        ),
        pytest.param(some_io_function, True, SUCCESS_MESSAGE, {"INFO"}, id="IOSuccess"),
        pytest.param(
            some_io_function, False, FAILURE_MESSAGE, {"DEBUG", "ERROR"}, id="IOFailure"
        ),
    ),
)
def test_log_railway_function_capture_log_message(
    function: Callable[[bool], Result | IOResult],
    should_succeed: bool,
    message: str,
    level: Set[str],
    caplog: pytest.LogCaptureFixture,
):
    with caplog.at_level(logging.DEBUG):
        _ = function(should_succeed)

    assert message in caplog.text
    assert {record.levelname for record in caplog.records} == level


def test_raised_exceptions_are_logged_as_failures(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG):
        result = some_safe_function([1.0])

    assert isinstance(result, Failure)
    assert f"{FAILURE_MESSAGE}: Line fit is singular" in caplog.text


@pytest.mark.parametrize(
    "failure_level, level_name",
    (
        pytest.param(FailureLevel.WARNING, "WARNING", id="warning"),
        pytest.param(FailureLevel.CRITICAL, "CRITICAL", id="critical"),
    ),
)
def test_failure_level_is_respected(
    failure_level: FailureLevel, level_name: str, caplog: pytest.LogCaptureFixture
):
    @log_railway_function(failure_message=FAILURE_MESSAGE, failure_level=failure_level)
    def failing_function():
        return Failure(ERROR_VALUE)

    with caplog.at_level(logging.DEBUG):
        _ = failing_function()

    assert {record.levelname for record in caplog.records} == {"DEBUG", level_name}


@pytest.mark.parametrize("success_message", (None, ""))
def test_empty_success_message_does_not_log_on_success(
    success_message: str | None, caplog: pytest.LogCaptureFixture
):
    @log_railway_function(
        failure_message=FAILURE_MESSAGE, success_message=success_message
    )
    def empty_success_message_func():
        return IOSuccess(100)

    with caplog.at_level(logging.DEBUG):
        _ = empty_success_message_func()

    assert not {record.levelname for record in caplog.records}


def test_plain_return_values_are_not_logged(caplog: pytest.LogCaptureFixture):
    @log_railway_function(failure_message=FAILURE_MESSAGE, success_message=SUCCESS_MESSAGE)
    def plain_function():
        return 42

    with caplog.at_level(logging.DEBUG):
        assert plain_function() == 42

    assert not caplog.records


def test_decorator_preserves_function_metadata():
    assert some_safe_function.__name__ == "some_safe_function"
    assert some_safe_function.__doc__ == "Spread of the samples."


@patch("utils.logger.VERBOSE", True)
def test_verbose_mode_logs_function_signature(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG):
        _ = some_safe_function([1.0, 3.0])

    assert "Calling some_safe_function([1.0, 3.0])" in caplog.text
