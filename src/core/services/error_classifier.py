"""Traducción de fallos a mensajes de usuario y códigos de salida.

Todos los fallos son terminales (exit 1); no hay reintentos en ningún punto.
"""

from __future__ import annotations

import httpx

from core.domain.errors import ReqcliError, UnsuccessfulStatusError
from core.domain.models import ExitReport

CONNECT_FAILURE_MESSAGE = (
    "Error: Unable to connect to the server. "
    "Perhaps the network is offline or the server hostname cannot be resolved."
)

# Fallos de conexión: DNS, conexión rechazada, red inalcanzable, timeout al conectar.
_CONNECT_ERRORS: tuple[type[httpx.HTTPError], ...] = (httpx.ConnectError, httpx.ConnectTimeout)

SUCCESS = ExitReport(message="", exit_code=0)


def is_connect_error(exc: httpx.HTTPError) -> bool:
    return isinstance(exc, _CONNECT_ERRORS)


def classify_transport_error(exc: httpx.HTTPError) -> ExitReport:
    if is_connect_error(exc):
        return ExitReport(message=CONNECT_FAILURE_MESSAGE, exit_code=1)
    return ExitReport(message=f"Error: Request failed. {exc}", exit_code=1)


def classify_input_error(exc: ReqcliError) -> ExitReport:
    return ExitReport(message=f"Error: {exc}", exit_code=1)


def classify_status_error(exc: UnsuccessfulStatusError) -> ExitReport:
    return ExitReport(message=f"Error: {exc}", exit_code=1)
