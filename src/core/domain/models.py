"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Las invariantes de una petición (body solo con POST, --data y --json
  excluyentes) quedan declaradas en el modelo y no en el orden de los `if`.

Nota:
- Todas las entidades viven una sola invocación; nada se persiste.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal, Union

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class HttpMethod(str, Enum):
    """Métodos que la herramienta distingue."""

    GET = "GET"
    POST = "POST"

    @classmethod
    def from_flag(cls, value: str | None) -> "HttpMethod":
        """Solo `POST` literal selecciona POST; cualquier otro valor es GET."""

        return cls.POST if value == cls.POST.value else cls.GET


class ValidationErrorKind(str, Enum):
    """Motivo por el que una URL fue rechazada antes de tocar la red."""

    INVALID_PROTOCOL = "invalid_protocol"
    INVALID_IPV4 = "invalid_ipv4"
    INVALID_IPV6 = "invalid_ipv6"
    INVALID_PORT = "invalid_port"
    UNPARSABLE_URL = "unparsable_url"

    def message(self) -> str:
        return _VALIDATION_MESSAGES[self]


_VALIDATION_MESSAGES: dict[ValidationErrorKind, str] = {
    ValidationErrorKind.INVALID_PROTOCOL: "The URL does not have a valid base protocol.",
    ValidationErrorKind.INVALID_IPV4: "The URL contains an invalid IPv4 address.",
    ValidationErrorKind.INVALID_IPV6: "The URL contains an invalid IPv6 address.",
    ValidationErrorKind.INVALID_PORT: "The URL contains an invalid port number.",
    ValidationErrorKind.UNPARSABLE_URL: "The URL could not be parsed.",
}


class RequestInput(BaseModel):
    """Valores crudos tal como llegan de la CLI.

    Por qué existe:
    - Las líneas de traza se imprimen con el payload original (sin parsear),
      así que necesitamos conservarlo antes de construir el `RequestSpec`.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(
        ...,
        description="URL tal como la escribió el usuario.",
    )
    method: str | None = Field(
        default=None,
        description="Valor de -X/--method (solo 'POST' tiene efecto).",
    )
    data: str | None = Field(
        default=None,
        description="Pares key=value separados por '&' (form).",
    )
    json_data: str | None = Field(
        default=None,
        description="Payload JSON sin parsear.",
    )

    @model_validator(mode="after")
    def _data_and_json_are_exclusive(self) -> "RequestInput":
        if self.data is not None and self.json_data is not None:
            raise ValueError("--data and --json cannot be used together")
        return self

    @property
    def effective_method(self) -> HttpMethod:
        # --json implica POST aunque no venga -X.
        if self.json_data is not None:
            return HttpMethod.POST
        return HttpMethod.from_flag(self.method)


class FormBody(BaseModel):
    kind: Literal["form"] = "form"
    pairs: list[tuple[str, str]] = Field(
        default_factory=list,
        description="Pares en el orden original; las claves pueden repetirse.",
    )


class JsonBody(BaseModel):
    kind: Literal["json"] = "json"
    value: Any = Field(
        default=None,
        description="Valor JSON ya parseado (se re-serializa al enviar).",
    )


RequestBody = Union[FormBody, JsonBody]


class RequestSpec(BaseModel):
    """Petición lista para despachar."""

    url: str = Field(..., min_length=1)
    method: HttpMethod = Field(default=HttpMethod.GET)
    body: RequestBody | None = Field(default=None)

    @model_validator(mode="after")
    def _body_requires_post(self) -> "RequestSpec":
        if self.body is not None and self.method is not HttpMethod.POST:
            raise ValueError("a request body is only allowed with POST")
        return self


class ResponseOutcome(BaseModel):
    """Resultado de renderizar una respuesta exitosa."""

    status_code: int = Field(..., ge=100, le=599)
    body_text: str = Field(default="")
    parsed_as_json_object: bool = Field(default=False)
    heading: str = Field(
        ...,
        description="Encabezado que precede al cuerpo en stdout.",
    )
    rendered: str = Field(
        default="",
        description="Cuerpo tal como se imprime (JSON ordenado o texto crudo).",
    )


class ExitReport(BaseModel):
    """Valor terminal de cualquier camino: mensaje + código de salida."""

    message: str = Field(default="")
    exit_code: int = Field(default=0, ge=0, le=1)

    @property
    def ok(self) -> bool:
        return self.exit_code == 0
