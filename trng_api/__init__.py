"""Capa de servicios del cliente TRNG consumida por la interfaz."""

from trng_api.services import (
    generate_password,
    generate_password_sync,
    send_command,
    send_command_sync,
)

__all__ = [
    "generate_password",
    "generate_password_sync",
    "send_command",
    "send_command_sync",
]
