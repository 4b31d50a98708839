# --------------------------------------------------------------
# File: services.py
# Description: Servicios que la interfaz invoca para generar contraseñas y controlar el dispositivo.
# --------------------------------------------------------------
"""Composición de transporte, protocolo, descifrado y derivación."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional, Tuple

from pydantic import ValidationError

from trng_core.commands import send_remote_command
from trng_core.config import DeviceConfig, describe_config_error
from trng_core.crypto_sym import decrypt_seed
from trng_core.errors import DeviceError
from trng_core.models import CommandStatus, RemoteCommand
from trng_core.password_gen import alphabet_for, derive_password
from trng_core.protocol import parse_response
from trng_core.transport import fetch_device_data

lg = logging.getLogger(__name__)

_CIPHER_LABELS = {"cbc": "AES-128-CBC PKCS#7", "ecb": "AES-128-ECB single block"}


async def generate_password(config: Optional[DeviceConfig] = None) -> Tuple[bool, str, str]:
    """Obtiene una semilla del dispositivo y deriva la contraseña.

    Args:
        config (Optional[DeviceConfig]): Configuración a usar; si falta se lee
            del entorno.

    Returns:
        Tuple[bool, str, str]: Indicador de éxito, contraseña o mensaje de
        error para la interfaz, y traza de depuración sin datos sensibles.

    """

    if config is None:
        try:
            config = DeviceConfig.from_env()
        except ValidationError as exc:
            message = describe_config_error(exc)
            lg.debug("password generation failed: %s", message)
            return False, message, "[GENERATE] ValidationError device=unconfigured"

    try:
        raw = await fetch_device_data(config)
        response = parse_response(raw)
        seed = decrypt_seed(response.ciphertext_hex, config)
    except DeviceError as exc:
        lg.debug("password generation failed: %s", exc)
        return False, str(exc), f"[GENERATE] {type(exc).__name__} device={config.endpoint}"

    password = derive_password(seed, response.requested_length, response.complexity_code)

    # Solo se registran tamaños, nunca la semilla ni la contraseña.
    debug = (
        f"[GENERATE] device={config.endpoint} {_CIPHER_LABELS[config.cipher_mode]}\n"
        f"[GENERATE] seed={len(seed) * 8} bits length={response.requested_length} "
        f"complexity={response.complexity_code} "
        f"alphabet={len(alphabet_for(response.complexity_code))}"
    )
    return True, password, debug


async def send_command(
    command: RemoteCommand, config: Optional[DeviceConfig] = None
) -> CommandStatus:
    """Envía una orden de control remoto sin esperar confirmación.

    Una configuración de entorno inválida se trata como un envío no confirmado.
    """

    if config is None:
        try:
            config = DeviceConfig.from_env()
        except ValidationError as exc:
            lg.debug("%s not sent: %s", command.name, describe_config_error(exc))
            return CommandStatus.NOT_CONFIRMED
    return await send_remote_command(command, config)


def generate_password_sync(config: Optional[DeviceConfig] = None) -> Tuple[bool, str, str]:
    """Versión bloqueante de `generate_password` para llamantes sin bucle de eventos."""

    return asyncio.run(generate_password(config))


def send_command_sync(
    command: RemoteCommand, config: Optional[DeviceConfig] = None
) -> CommandStatus:
    """Versión bloqueante de `send_command`."""

    return asyncio.run(send_command(command, config))
