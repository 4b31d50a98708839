# --------------------------------------------------------------
# File: commands.py
# Description: Envío de órdenes de control remoto sin confirmación.
# --------------------------------------------------------------
"""Órdenes Up/Down/Select enviadas en una conexión TCP propia."""

from __future__ import annotations

import asyncio
import logging

from trng_core.config import DeviceConfig
from trng_core.models import CommandStatus, RemoteCommand

lg = logging.getLogger(__name__)


async def send_remote_command(command: RemoteCommand, config: DeviceConfig) -> CommandStatus:
    """Envía una orden al dispositivo en modo best-effort.

    Los fallos de conexión o escritura nunca se propagan: el dispositivo no
    confirma las órdenes, así que el llamante no puede asumir la entrega.

    Args:
        command (RemoteCommand): Orden a enviar.
        config (DeviceConfig): Dirección del dispositivo.

    Returns:
        CommandStatus: `SENT` si los bytes se escribieron, `NOT_CONFIRMED` si no.

    """

    try:
        _, writer = await asyncio.open_connection(config.host, config.port)
    except OSError as exc:
        lg.debug("%s not sent to %s: %s", command.name, config.endpoint, exc)
        return CommandStatus.NOT_CONFIRMED

    status = CommandStatus.SENT
    try:
        writer.write(command.wire)
        await writer.drain()
    except OSError as exc:
        lg.debug("%s not confirmed by %s: %s", command.name, config.endpoint, exc)
        status = CommandStatus.NOT_CONFIRMED
    finally:
        writer.close()

    try:
        await writer.wait_closed()
    except OSError as exc:
        lg.debug("closing connection to %s failed: %s", config.endpoint, exc)

    if status is CommandStatus.SENT:
        lg.debug("%s sent to %s", command.name, config.endpoint)
    return status
