"""Render de la respuesta HTTP.

Reglas de render:
- Objeto JSON: claves de primer nivel ordenadas y pretty-print (indent=2).
  Los objetos anidados conservan su orden.
- JSON que no es objeto (array, string, número, bool, null) o texto no JSON:
  se imprime el cuerpo crudo.
- Si el estado no cuenta como éxito no se renderiza nada.
"""

from __future__ import annotations

import json
from typing import Any

import httpx

from core.config import SuccessPolicy
from core.domain.errors import UnsuccessfulStatusError
from core.domain.models import ResponseOutcome

JSON_HEADING = "Response body (JSON with sorted keys):"
RAW_HEADING = "Response body:"


def is_success(status_code: int, policy: SuccessPolicy = SuccessPolicy.ANY_2XX) -> bool:
    if policy is SuccessPolicy.EXACT_200:
        return status_code == 200
    return 200 <= status_code < 300


def sort_top_level(obj: dict[str, Any]) -> dict[str, Any]:
    # El orden de str en Python es por code point, igual que por bytes UTF-8.
    return {key: obj[key] for key in sorted(obj)}


def _reject_constant(name: str) -> Any:
    # NaN e Infinity no son JSON válido; esos cuerpos se imprimen crudos.
    raise ValueError(f"non-standard JSON constant: {name}")


def render_body(status_code: int, text: str) -> ResponseOutcome:
    try:
        value = json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        value = None
        is_object = False
    else:
        is_object = isinstance(value, dict)

    if is_object:
        return ResponseOutcome(
            status_code=status_code,
            body_text=text,
            parsed_as_json_object=True,
            heading=JSON_HEADING,
            rendered=json.dumps(sort_top_level(value), indent=2, ensure_ascii=False),
        )

    return ResponseOutcome(
        status_code=status_code,
        body_text=text,
        parsed_as_json_object=False,
        heading=RAW_HEADING,
        rendered=text,
    )


def render(response: httpx.Response, *, policy: SuccessPolicy = SuccessPolicy.ANY_2XX) -> ResponseOutcome:
    """Clasifica el estado y renderiza el cuerpo.

    Lanza `UnsuccessfulStatusError` si el estado no pasa la política; en ese
    caso el cuerpo no se lee como texto.
    """

    if not is_success(response.status_code, policy):
        raise UnsuccessfulStatusError(response.status_code)
    return render_body(response.status_code, response.text)
