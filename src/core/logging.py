"""Logging estructurado (structlog).

Por qué structlog:
- Los eventos llevan campos (url, status_code, error) en vez de texto libre.
- Una única configuración para toda la CLI, llamada una vez al arrancar.

Los logs van siempre a stderr: stdout queda reservado para las líneas de traza
y el cuerpo de la respuesta.
"""

from __future__ import annotations

import logging
import sys

import structlog

from core.config import AppSettings


def _build_shared_processors(*, json_output: bool) -> list[structlog.types.Processor]:
    renderer: structlog.types.Processor
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
        renderer,
    ]


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configura structlog y el módulo logging estándar.

    Se puede llamar varias veces (p.ej. desde tests): reemplaza los handlers
    del root logger en cada llamada.
    """

    settings = settings or AppSettings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.WARNING

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)

    # httpx loguea cada request a INFO; solo lo queremos en DEBUG.
    logging.getLogger("httpx").setLevel(logging.DEBUG if level <= logging.DEBUG else logging.WARNING)

    structlog.configure(
        processors=_build_shared_processors(json_output=settings.log_json),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Devuelve un logger estructurado perezoso.

    No configura nada: el proxy de structlog lee la configuración en cada
    llamada, así que basta con que la CLI llame a `configure_logging` antes
    de loguear.
    """

    return structlog.get_logger(name) if name else structlog.get_logger()
