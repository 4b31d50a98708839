# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de errores del cliente TRNG.
# --------------------------------------------------------------
"""Excepciones que la capa de servicios traduce a mensajes legibles."""


class DeviceError(Exception):
    """Error recuperable en cualquier fase de la obtención de la contraseña."""


class TransportError(DeviceError):
    """Fallo de red al conectar, escribir o leer.

    Attributes:
        phase (str): Fase que ha fallado (`connect`, `write` o `read`).
        detail (str): Descripción del error de E/S subyacente.

    """

    _LABELS = {
        "connect": "could not connect",
        "write": "failed to send request",
        "read": "failed to read response",
    }

    def __init__(self, phase: str, detail: str) -> None:
        self.phase = phase
        self.detail = detail
        super().__init__(f"{self._LABELS.get(phase, phase)}: {detail}")


class ParseError(DeviceError):
    """La respuesta del dispositivo no respeta el formato esperado."""


class CryptoError(DeviceError):
    """Fallo al decodificar o descifrar la semilla.

    Attributes:
        kind (str): Categoría del fallo (`hex`, `size` o `padding`).

    """

    def __init__(self, kind: str, message: str) -> None:
        self.kind = kind
        super().__init__(message)
