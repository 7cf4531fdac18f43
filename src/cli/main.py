"""CLI principal (Typer).

Flujo de una invocación:
1. Validar la URL (protocolo, host literal, puerto) sin tocar la red.
2. Imprimir la traza y construir la petición (método + body).
3. Enviar con httpx y renderizar, o clasificar el error.

Códigos de salida: 0 éxito, 1 cualquier fallo, 2 uso incorrecto de flags.
"""

from __future__ import annotations

import asyncio
from typing import Annotated

import httpx
import typer

from adapters.http_client import send_request
from cli.ui_components import build_console, print_error_trace, print_lines, print_outcome, print_report
from core.config import AppSettings
from core.domain.errors import HostValidationError, RequestBuildError, UnsuccessfulStatusError
from core.domain.models import ExitReport, RequestInput
from core.logging import configure_logging, get_logger
from core.services.error_classifier import (
    SUCCESS,
    classify_input_error,
    classify_status_error,
    classify_transport_error,
)
from core.services.host_validator import validate
from core.services.request_builder import build_spec, trace_lines
from core.services.response_renderer import render

app = typer.Typer(
    add_completion=False,
    help="Send a single HTTP request and print the response.",
)

_console = build_console()
_err_console = build_console(stderr=True)

logger = get_logger(__name__)


def execute(
    request: RequestInput,
    settings: AppSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ExitReport:
    """Ejecuta una invocación completa e imprime su salida.

    Devuelve el `ExitReport` final; nunca lanza por errores esperados.
    """

    try:
        url = validate(request.url)
    except HostValidationError as exc:
        logger.info("input_rejected", kind=exc.kind.value, url=request.url)
        print_error_trace(_err_console, request.url, str(exc))
        return ExitReport(message=f"Error: {exc}", exit_code=1)

    print_lines(_console, trace_lines(request, str(url)))

    try:
        spec = build_spec(request, str(url))
    except RequestBuildError as exc:
        logger.info("input_rejected", error=str(exc))
        report = classify_input_error(exc)
        print_report(_err_console, report)
        return report

    try:
        response = asyncio.run(send_request(spec, settings, transport=transport))
    except httpx.HTTPError as exc:
        logger.info("transport_error", error_type=type(exc).__name__, error=str(exc))
        report = classify_transport_error(exc)
        print_report(_err_console, report)
        return report

    try:
        outcome = render(response, policy=settings.success_policy)
    except UnsuccessfulStatusError as exc:
        report = classify_status_error(exc)
        print_report(_err_console, report)
        return report

    print_outcome(_console, outcome)
    return SUCCESS


@app.command()
def request(
    url: Annotated[str, typer.Argument(help="Target URL, starting with http:// or https://.")],
    method: Annotated[
        str | None,
        typer.Option("-X", "--method", help="HTTP method. Only POST changes behaviour; anything else is GET."),
    ] = None,
    data: Annotated[
        str | None,
        typer.Option("-d", "--data", help="Form data as key=value pairs joined by '&' (POST only)."),
    ] = None,
    json_data: Annotated[
        str | None,
        typer.Option("--json", help="JSON payload; sends a POST. Cannot be combined with --data."),
    ] = None,
) -> None:
    """Send one request to URL and print the response body."""

    if data is not None and json_data is not None:
        raise typer.BadParameter("--json cannot be used together with --data.", param_hint="'--json'")

    settings = AppSettings()
    configure_logging(settings)

    report = execute(
        RequestInput(url=url, method=method, data=data, json_data=json_data),
        settings,
    )
    raise typer.Exit(code=report.exit_code)


def run() -> None:
    app()
