"""Excepciones del dominio.

El Core lanza estas excepciones; solo la CLI las atrapa y las traduce a un
`ExitReport` (ver `core.services.error_classifier`).
"""

from __future__ import annotations

from core.domain.models import ValidationErrorKind


class ReqcliError(Exception):
    """Base de todos los errores de entrada detectados antes de la red."""


class HostValidationError(ReqcliError):
    def __init__(self, kind: ValidationErrorKind) -> None:
        super().__init__(kind.message())
        self.kind = kind


class RequestBuildError(ReqcliError):
    """La petición no se puede construir con los datos dados."""


class InvalidJsonError(RequestBuildError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Invalid JSON data. {detail}")
        self.detail = detail


class MissingPostDataError(RequestBuildError):
    def __init__(self) -> None:
        super().__init__("POST method requires data.")


class UnsuccessfulStatusError(Exception):
    """El servidor respondió, pero con un estado que no cuenta como éxito."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Request failed with status code: {status_code}.")
        self.status_code = status_code
