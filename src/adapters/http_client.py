"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeout, headers y redirecciones en un único punto.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

Un cliente por invocación: se abre para la única petición y se cierra al
terminar. No hay pool compartido ni reintentos.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings
from core.domain.models import RequestSpec
from core.logging import get_logger
from core.services.request_builder import build_request

logger = get_logger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` para una sola petición.

    Sin `http_timeout_seconds` configurado se mantiene el timeout por defecto
    de httpx.
    """

    settings = settings or AppSettings()
    kwargs: dict[str, object] = {
        "follow_redirects": settings.follow_redirects,
        "headers": {"User-Agent": settings.user_agent},
    }
    if settings.http_timeout_seconds is not None:
        kwargs["timeout"] = httpx.Timeout(settings.http_timeout_seconds)
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.AsyncClient(**kwargs)  # type: ignore[arg-type]


async def send_request(
    spec: RequestSpec,
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.Response:
    """Envía `spec` y devuelve la respuesta con el cuerpo ya leído.

    Los errores de transporte (`httpx.HTTPError`) se propagan tal cual.
    """

    async with build_async_client(settings, transport=transport) as client:
        request = build_request(client, spec)
        logger.info("request_dispatch", method=request.method, url=str(request.url))
        response = await client.send(request)
        logger.info("response_received", status_code=response.status_code, url=str(response.url))
        return response
