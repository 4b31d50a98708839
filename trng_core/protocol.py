# --------------------------------------------------------------
# File: protocol.py
# Description: Intérprete de la respuesta LEN/COMPLEX/KEY del dispositivo.
# --------------------------------------------------------------
"""Convierte el texto recibido en un `DeviceResponse` o falla sin recuperación."""

from __future__ import annotations

import logging
import re
import sys

from trng_core.errors import ParseError
from trng_core.models import DeviceResponse

lg = logging.getLogger(__name__)

DIGITS = re.compile(r"[0-9]+")
MAX_DIGITS = len(str(sys.maxsize))


def _field(part: str, prefix: str) -> str:
    """Extrae el valor de un campo `PREFIJO:valor` o lanza `ParseError`."""

    if not part.startswith(prefix):
        raise ParseError(f"missing {prefix[:-1]} field")
    return part[len(prefix):]


def _number(value: str, name: str) -> int:
    """Interpreta un entero decimal sin signo."""

    if not DIGITS.fullmatch(value) or len(value.lstrip("0")) > MAX_DIGITS:
        raise ParseError(f"invalid {name} value")
    number = int(value)
    if number > sys.maxsize:
        raise ParseError(f"invalid {name} value")
    return number


def parse_response(text: str) -> DeviceResponse:
    """Interpreta la línea `LEN:<n>,COMPLEX:<c>,KEY:<hex>`.

    Args:
        text (str): Respuesta recibida del dispositivo.

    Returns:
        DeviceResponse: Longitud, complejidad y semilla cifrada en hexadecimal.

    Raises:
        ParseError: Si el número de campos, un prefijo o un valor no es válido.

    """

    parts = text.strip().split(",")
    if len(parts) != 3:
        raise ParseError(f"invalid response format ({len(parts)} parts)")

    length = _number(_field(parts[0], "LEN:"), "LEN")
    complexity = _number(_field(parts[1], "COMPLEX:"), "COMPLEX")
    key_hex = _field(parts[2], "KEY:")

    lg.debug("parsed response: length=%d complexity=%d", length, complexity)
    return DeviceResponse(
        requested_length=length,
        complexity_code=complexity,
        ciphertext_hex=key_hex,
    )
