"""Validación de URL: protocolo, host literal (IPv4/IPv6) y puerto.

Reglas:
- Cada paso corta la validación si falla; el orden importa.
- Un host con forma `d.d.d.d` se trata siempre como IPv4 y debe parsear: no
  cae a "dominio" si tiene octetos fuera de rango.
- Un host sin corchetes con varios ':' se toma entero y sin puerto. Una IPv6
  sin corchetes no se distingue de `host:puerto`, así que no se valida.
- Los dominios no se validan; la resolución DNS la hace el transporte.
"""

from __future__ import annotations

import ipaddress
import re
from dataclasses import dataclass

import httpx

from core.domain.errors import HostValidationError
from core.domain.models import ValidationErrorKind

SUPPORTED_SCHEMES: tuple[str, ...] = ("http://", "https://")

_IPV4_SHAPE = re.compile(r"^[0-9]{1,3}(\.[0-9]{1,3}){3}$")
_PORT_SHAPE = re.compile(r"^[0-9]+$")
_AUTHORITY_END = re.compile(r"[/?#]")

MAX_PORT = 65535


@dataclass(frozen=True)
class HostPort:
    host: str
    port: str | None
    bracketed: bool = False


def check_protocol(url: str) -> str:
    """Devuelve el prefijo de esquema o lanza `INVALID_PROTOCOL`."""

    for scheme in SUPPORTED_SCHEMES:
        if url.startswith(scheme):
            return scheme
    raise HostValidationError(ValidationErrorKind.INVALID_PROTOCOL)


def extract_host_port(url: str) -> HostPort:
    """Separa host y puerto opcional de la autoridad de la URL."""

    scheme = check_protocol(url)
    authority = _AUTHORITY_END.split(url[len(scheme):], maxsplit=1)[0]
    if "@" in authority:
        authority = authority.rsplit("@", 1)[1]

    if authority.startswith("["):
        end = authority.find("]")
        if end == -1:
            raise HostValidationError(ValidationErrorKind.INVALID_IPV6)
        host = authority[1:end]
        tail = authority[end + 1:]
        if not tail:
            return HostPort(host=host, port=None, bracketed=True)
        if not tail.startswith(":"):
            raise HostValidationError(ValidationErrorKind.UNPARSABLE_URL)
        return HostPort(host=host, port=tail[1:] or None, bracketed=True)

    if authority.count(":") == 1:
        host, port = authority.split(":")
        return HostPort(host=host, port=port or None)

    return HostPort(host=authority, port=None)


def check_host(host: str, *, bracketed: bool = False) -> None:
    if bracketed:
        try:
            ipaddress.IPv6Address(host)
        except ValueError:
            raise HostValidationError(ValidationErrorKind.INVALID_IPV6) from None
        return

    if _IPV4_SHAPE.match(host):
        try:
            ipaddress.IPv4Address(host)
        except ValueError:
            raise HostValidationError(ValidationErrorKind.INVALID_IPV4) from None


def check_port(port: str | None) -> None:
    if port is None:
        return
    if not _PORT_SHAPE.match(port) or int(port) > MAX_PORT:
        raise HostValidationError(ValidationErrorKind.INVALID_PORT)


def validate(url: str) -> httpx.URL:
    """Valida la URL completa y la devuelve parseada por httpx.

    Lanza `HostValidationError` con el motivo concreto si algo falla. No hace
    I/O: ninguna validación toca la red.
    """

    host_port = extract_host_port(url)
    check_host(host_port.host, bracketed=host_port.bracketed)
    check_port(host_port.port)

    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL:
        raise HostValidationError(ValidationErrorKind.UNPARSABLE_URL) from None
    if not parsed.host:
        raise HostValidationError(ValidationErrorKind.UNPARSABLE_URL)
    return parsed
