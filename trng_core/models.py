# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos del protocolo con el dispositivo TRNG.
# --------------------------------------------------------------
"""Modelos Pydantic y enumeraciones que viajan entre los módulos del cliente."""

from enum import Enum

from pydantic import BaseModel, Field


class DeviceResponse(BaseModel):
    """Representa una respuesta `LEN/COMPLEX/KEY` ya interpretada.

    Attributes:
        requested_length (int): Longitud de la contraseña solicitada.
        complexity_code (int): Código que selecciona el alfabeto.
        ciphertext_hex (str): Semilla cifrada en hexadecimal, sin validar.

    """

    requested_length: int = Field(ge=0)
    complexity_code: int = Field(ge=0)
    ciphertext_hex: str

    def to_wire(self) -> str:
        """Serializa la respuesta con el formato que envía el dispositivo."""

        return (
            f"LEN:{self.requested_length},"
            f"COMPLEX:{self.complexity_code},"
            f"KEY:{self.ciphertext_hex}"
        )


class RemoteCommand(Enum):
    """Órdenes de control remoto aceptadas por el dispositivo."""

    UP = "CMD_UP\n"
    DOWN = "CMD_DOWN\n"
    SELECT = "CMD_SELECT\n"

    @property
    def wire(self) -> bytes:
        return self.value.encode("ascii")


class CommandStatus(Enum):
    """Resultado de un envío sin confirmación.

    `SENT` solo indica que los bytes se entregaron al sistema operativo; el
    dispositivo nunca responde a las órdenes.
    """

    SENT = "sent"
    NOT_CONFIRMED = "not confirmed"
