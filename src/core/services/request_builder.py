"""Construcción de la petición saliente.

Elige método y codificación del body (ninguno, form, JSON) a partir de los
valores crudos de la CLI. Las líneas de traza se generan aquí pero se imprimen
en la CLI: el Core no escribe en consola.
"""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import urlencode

import httpx

from core.domain.errors import InvalidJsonError, MissingPostDataError
from core.domain.models import FormBody, HttpMethod, JsonBody, RequestInput, RequestSpec
from core.logging import get_logger

logger = get_logger(__name__)


def parse_form_data(data: str) -> list[tuple[str, str]]:
    """Parte `a=1&b=2` en pares; un segmento sin '=' tiene valor vacío."""

    pairs: list[tuple[str, str]] = []
    for segment in data.split("&"):
        key, _, value = segment.partition("=")
        pairs.append((key, value))
    return pairs


def parse_json_payload(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidJsonError(str(exc)) from exc


def trace_lines(request: RequestInput, url: str | None = None) -> list[str]:
    """Líneas que documentan la petición antes de enviarla."""

    method = request.effective_method
    lines = [
        f"Requesting URL: {url or request.url}",
        f"Method: {method.value}",
    ]
    if request.json_data is not None:
        lines.append(f"JSON: {request.json_data}")
    elif method is HttpMethod.POST and request.data is not None:
        lines.append(f"Data: {request.data}")
    return lines


def build_spec(request: RequestInput, url: str | None = None) -> RequestSpec:
    """Convierte la entrada cruda en un `RequestSpec`.

    Lanza:
    - `InvalidJsonError` si `--json` no parsea (la petición no se envía).
    - `MissingPostDataError` si `-X POST` llega sin `--data`.
    """

    target = url or request.url

    if request.json_data is not None:
        value = parse_json_payload(request.json_data)
        return RequestSpec(url=target, method=HttpMethod.POST, body=JsonBody(value=value))

    if request.effective_method is HttpMethod.POST:
        if request.data is None:
            raise MissingPostDataError()
        return RequestSpec(
            url=target,
            method=HttpMethod.POST,
            body=FormBody(pairs=parse_form_data(request.data)),
        )

    if request.data is not None:
        logger.warning("data_ignored", reason="--data only applies to POST", method=request.method)
    return RequestSpec(url=target, method=HttpMethod.GET)


def build_request(client: httpx.AsyncClient, spec: RequestSpec) -> httpx.Request:
    """Crea el `httpx.Request` con los defaults del cliente aplicados."""

    if spec.body is None:
        return client.build_request(spec.method.value, spec.url)

    if isinstance(spec.body, JsonBody):
        # Se serializa a mano: `json=None` en httpx significa "sin body",
        # y `null` es un payload válido.
        content = json.dumps(spec.body.value, ensure_ascii=False).encode("utf-8")
        return client.build_request(
            spec.method.value,
            spec.url,
            content=content,
            headers={"Content-Type": "application/json"},
        )

    # urlencode sobre la lista de pares conserva el orden y las claves repetidas.
    return client.build_request(
        spec.method.value,
        spec.url,
        content=urlencode(spec.body.pairs).encode("ascii"),
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
