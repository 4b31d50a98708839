# --------------------------------------------------------------
# File: transport.py
# Description: Petición GET_DATA sobre TCP y lectura de la respuesta.
# --------------------------------------------------------------
"""Capa de transporte asíncrona hacia el dispositivo TRNG."""

from __future__ import annotations

import asyncio
import logging

from trng_core.config import DeviceConfig
from trng_core.errors import TransportError

lg = logging.getLogger(__name__)

REQUEST = b"GET_DATA\n"


async def _read_response(reader: asyncio.StreamReader, config: DeviceConfig) -> bytes:
    """Lee la respuesta según la estrategia de framing configurada."""

    if config.framing == "single_read":
        # Una sola lectura: no se reensamblan respuestas fragmentadas.
        return await reader.read(config.read_buffer)

    try:
        return await reader.readuntil(b"\n")
    except asyncio.IncompleteReadError as exc:
        return exc.partial
    except asyncio.LimitOverrunError as exc:
        raise TransportError(
            "read", f"response exceeds {config.read_buffer} bytes"
        ) from exc


async def fetch_device_data(config: DeviceConfig) -> str:
    """Solicita semilla y parámetros al dispositivo.

    Args:
        config (DeviceConfig): Dirección del dispositivo y estrategia de lectura.

    Returns:
        str: Respuesta decodificada como UTF-8 con reemplazo de bytes inválidos.

    Raises:
        TransportError: Si falla la conexión, el envío o la lectura.

    """

    lg.debug("connecting to %s", config.endpoint)
    try:
        reader, writer = await asyncio.open_connection(
            config.host, config.port, limit=config.read_buffer
        )
    except OSError as exc:
        raise TransportError("connect", str(exc)) from exc

    try:
        try:
            writer.write(REQUEST)
            await writer.drain()
        except OSError as exc:
            raise TransportError("write", str(exc)) from exc

        try:
            data = await _read_response(reader, config)
        except OSError as exc:
            raise TransportError("read", str(exc)) from exc
    finally:
        writer.close()
        try:
            await writer.wait_closed()
        except OSError:
            lg.debug("connection to %s closed with error", config.endpoint)

    lg.debug("received %d bytes from %s", len(data), config.endpoint)
    return data.decode("utf-8", errors="replace")
