from __future__ import annotations

import httpx

from core.domain.errors import InvalidJsonError, MissingPostDataError, UnsuccessfulStatusError
from core.services.error_classifier import (
    CONNECT_FAILURE_MESSAGE,
    SUCCESS,
    classify_input_error,
    classify_status_error,
    classify_transport_error,
)

_REQUEST = httpx.Request("GET", "http://example.invalid/")


def test_connect_errors_get_the_offline_message() -> None:
    for exc in (
        httpx.ConnectError("[Errno -2] Name or service not known", request=_REQUEST),
        httpx.ConnectTimeout("timed out", request=_REQUEST),
    ):
        report = classify_transport_error(exc)
        assert report.message == CONNECT_FAILURE_MESSAGE
        assert report.exit_code == 1


def test_other_transport_errors_include_detail() -> None:
    report = classify_transport_error(httpx.ReadTimeout("The read operation timed out", request=_REQUEST))
    assert report.message == "Error: Request failed. The read operation timed out"
    assert report.exit_code == 1


def test_input_errors_exit_with_one() -> None:
    report = classify_input_error(MissingPostDataError())
    assert report.message == "Error: POST method requires data."
    assert report.exit_code == 1
    assert classify_input_error(InvalidJsonError("Expecting value")).message.startswith("Error: Invalid JSON data.")


def test_status_error_message() -> None:
    report = classify_status_error(UnsuccessfulStatusError(404))
    assert report.message == "Error: Request failed with status code: 404."
    assert not report.ok


def test_success_report() -> None:
    assert SUCCESS.ok
    assert SUCCESS.exit_code == 0
