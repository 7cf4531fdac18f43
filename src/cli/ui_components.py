"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar la orquestación del comando con detalles de salida.
- Las líneas se escriben directo en `Console.file`: el render de Rich quita
  `\\r`, `\\x0c` y expande tabs, y las trazas y cuerpos deben salir tal cual.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console

from core.domain.models import ExitReport, ResponseOutcome


def build_console(*, stderr: bool = False) -> Console:
    return Console(stderr=stderr, highlight=False, markup=False, emoji=False, soft_wrap=True)


def print_lines(console: Console, lines: Iterable[str]) -> None:
    stream = console.file
    for line in lines:
        stream.write(line + "\n")
    stream.flush()


def print_error_trace(console: Console, url: str, message: str) -> None:
    """Traza de un rechazo en validación de URL.

    Siempre muestra `Method: GET`: la URL se valida antes de decidir método.
    """

    print_lines(
        console,
        (
            f"Requesting URL: {url}",
            "Method: GET",
            f"Error: {message}",
        ),
    )


def print_outcome(console: Console, outcome: ResponseOutcome) -> None:
    print_lines(console, (outcome.heading, outcome.rendered))


def print_report(console: Console, report: ExitReport) -> None:
    if report.message:
        print_lines(console, (report.message,))
