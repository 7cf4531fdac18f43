from __future__ import annotations

import httpx
import pytest

from core.config import SuccessPolicy
from core.domain.errors import UnsuccessfulStatusError
from core.services.response_renderer import JSON_HEADING, RAW_HEADING, is_success, render, render_body


@pytest.mark.parametrize("status", [200, 201, 204, 299])
def test_any_2xx_is_success_by_default(status: int) -> None:
    assert is_success(status)


@pytest.mark.parametrize("status", [199, 301, 404, 500])
def test_non_2xx_is_failure(status: int) -> None:
    assert not is_success(status)


def test_exact_200_policy_rejects_other_2xx() -> None:
    assert is_success(200, SuccessPolicy.EXACT_200)
    assert not is_success(201, SuccessPolicy.EXACT_200)
    assert not is_success(204, SuccessPolicy.EXACT_200)


def test_json_object_keys_are_sorted() -> None:
    outcome = render_body(200, '{"b":1,"a":2}')
    assert outcome.heading == JSON_HEADING
    assert outcome.parsed_as_json_object is True
    assert outcome.rendered == '{\n  "a": 2,\n  "b": 1\n}'


def test_nested_objects_keep_their_order() -> None:
    outcome = render_body(200, '{"z": {"y": 1, "x": 2}, "a": 0}')
    rendered = outcome.rendered
    assert rendered.index('"a"') < rendered.index('"z"')
    assert rendered.index('"y"') < rendered.index('"x"')


def test_non_ascii_keys_sort_by_code_point() -> None:
    outcome = render_body(200, '{"é": 1, "e": 2, "Z": 3}')
    assert outcome.rendered == '{\n  "Z": 3,\n  "e": 2,\n  "é": 1\n}'


@pytest.mark.parametrize("body", ["[3,1,2]", "42", "null", '"text"', "true"])
def test_non_object_json_is_printed_raw(body: str) -> None:
    outcome = render_body(200, body)
    assert outcome.heading == RAW_HEADING
    assert outcome.parsed_as_json_object is False
    assert outcome.rendered == body


def test_plain_text_is_printed_raw() -> None:
    outcome = render_body(200, "<html>hi</html>")
    assert outcome.heading == RAW_HEADING
    assert outcome.rendered == "<html>hi</html>"


def test_empty_body_is_printed_raw() -> None:
    assert render_body(204, "").heading == RAW_HEADING


def test_render_raises_on_failure_status() -> None:
    with pytest.raises(UnsuccessfulStatusError) as excinfo:
        render(httpx.Response(404, text="not found"))
    assert excinfo.value.status_code == 404
    assert "status code: 404" in str(excinfo.value)


def test_render_honours_exact_200_policy() -> None:
    response = httpx.Response(201, json={"id": 1})
    assert render(response).parsed_as_json_object
    with pytest.raises(UnsuccessfulStatusError):
        render(response, policy=SuccessPolicy.EXACT_200)


@pytest.mark.parametrize("body", ['{"a": NaN}', '{"b": Infinity, "a": 1}', "-Infinity"])
def test_non_standard_json_constants_are_printed_raw(body: str) -> None:
    outcome = render_body(200, body)
    assert outcome.heading == RAW_HEADING
    assert outcome.parsed_as_json_object is False
    assert outcome.rendered == body
