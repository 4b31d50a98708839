# --------------------------------------------------------------
# File: config.py
# Description: Configuración del dispositivo TRNG y del secreto compartido.
# --------------------------------------------------------------
"""Carga la configuración del cliente desde el entorno o un fichero `.env`."""

from __future__ import annotations

import os
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

load_dotenv()

# Valores compartidos con el firmware del ESP32 (modo punto de acceso).
DEFAULT_HOST = "192.168.4.1"
DEFAULT_PORT = 80
DEFAULT_KEY_HEX = "2B7E151628AED2A6ABF7158809CF4F3C"
DEFAULT_IV_HEX = "FF0102030405060708090A0B0C0D0E0F"
DEFAULT_READ_BUFFER = 256

CipherMode = Literal["cbc", "ecb"]
Framing = Literal["single_read", "line"]


class DeviceConfig(BaseModel):
    """Parámetros inmutables para hablar con el dispositivo.

    Attributes:
        host (str): Dirección IP o nombre del dispositivo.
        port (int): Puerto TCP del dispositivo.
        key (bytes): Clave AES-128 compartida con el firmware.
        iv (bytes): Vector de inicialización para la variante CBC.
        cipher_mode (CipherMode): Variante de protocolo, `cbc` o `ecb`.
        framing (Framing): Estrategia de lectura de la respuesta.
        read_buffer (int): Tamaño máximo de la respuesta en bytes.

    """

    model_config = ConfigDict(frozen=True)

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    key: bytes = Field(default=bytes.fromhex(DEFAULT_KEY_HEX), repr=False)
    iv: bytes = Field(default=bytes.fromhex(DEFAULT_IV_HEX), repr=False)
    cipher_mode: CipherMode = "cbc"
    framing: Framing = "single_read"
    read_buffer: int = Field(default=DEFAULT_READ_BUFFER, gt=0)

    @field_validator("key", "iv", mode="before")
    @classmethod
    def _decode_hex(cls, value):
        """Acepta la clave y el IV como texto hexadecimal."""

        if isinstance(value, str):
            try:
                return bytes.fromhex(value)
            except ValueError as exc:
                raise ValueError("expected a hexadecimal string") from exc
        return value

    @field_validator("cipher_mode", "framing", mode="before")
    @classmethod
    def _lowercase(cls, value):
        return value.lower() if isinstance(value, str) else value

    @field_validator("key", "iv")
    @classmethod
    def _check_block_size(cls, value: bytes) -> bytes:
        """Exige exactamente 16 bytes para la clave y el IV."""

        if len(value) != 16:
            raise ValueError(f"expected 16 bytes, got {len(value)}")
        return value

    @property
    def endpoint(self) -> str:
        """Devuelve la dirección en formato `host:port`."""

        return f"{self.host}:{self.port}"

    @classmethod
    def from_env(cls, **overrides) -> "DeviceConfig":
        """Construye la configuración a partir de variables de entorno.

        Args:
            **overrides: Valores que sustituyen a los leídos del entorno.

        Returns:
            DeviceConfig: Configuración validada.

        Raises:
            pydantic.ValidationError: Si algún valor del entorno no es válido.

        """

        values = {
            "host": os.getenv("TRNG_DEVICE_HOST", DEFAULT_HOST),
            "port": os.getenv("TRNG_DEVICE_PORT", str(DEFAULT_PORT)),
            "key": os.getenv("TRNG_AES_KEY", DEFAULT_KEY_HEX),
            "iv": os.getenv("TRNG_AES_IV", DEFAULT_IV_HEX),
            "cipher_mode": os.getenv("TRNG_CIPHER_MODE", "cbc"),
            "framing": os.getenv("TRNG_FRAMING", "single_read"),
            "read_buffer": os.getenv("TRNG_READ_BUFFER", str(DEFAULT_READ_BUFFER)),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def describe_config_error(exc: ValidationError) -> str:
    """Resume un error de validación sin incluir los valores (pueden ser secretos)."""

    fields = sorted({str(err["loc"][0]) for err in exc.errors() if err["loc"]})
    return f"invalid configuration: {', '.join(fields)}"
