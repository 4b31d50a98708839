# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas: entorno aislado, dispositivo simulado y cifrado de semillas.
# --------------------------------------------------------------

import asyncio
import socket
from typing import Iterator

import pytest

from trng_core.config import DeviceConfig
from trng_core.crypto_sym import aes_cbc_encrypt_with_key, aes_ecb_encrypt_block

ENV_VARS = (
    "TRNG_DEVICE_HOST",
    "TRNG_DEVICE_PORT",
    "TRNG_AES_KEY",
    "TRNG_AES_IV",
    "TRNG_CIPHER_MODE",
    "TRNG_FRAMING",
    "TRNG_READ_BUFFER",
)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch) -> Iterator[None]:
    """Elimina las variables TRNG_* para que cada prueba parta de los valores por defecto.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def config() -> DeviceConfig:
    """Configuración por defecto con la clave y el IV del firmware."""
    return DeviceConfig()


@pytest.fixture
def seal():
    """Devuelve una función que cifra una semilla como lo haría el dispositivo."""

    def _seal(seed: bytes, cfg: DeviceConfig = DeviceConfig()) -> str:
        if cfg.cipher_mode == "ecb":
            return aes_ecb_encrypt_block(cfg.key, seed).hex()
        return aes_cbc_encrypt_with_key(cfg.key, cfg.iv, seed).hex()

    return _seal


@pytest.fixture
def closed_port() -> int:
    """Puerto local en el que no escucha nadie."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture
def fake_device():
    """Levanta un dispositivo TCP simulado y ejecuta una corrutina contra él.

    La función devuelta recibe los fragmentos de respuesta que el dispositivo
    enviará tras leer una línea, la corrutina cliente (que recibe la
    configuración apuntando al simulador) y ajustes opcionales de
    `DeviceConfig`. Devuelve el resultado del cliente y la línea recibida.
    """

    def _run(replies, call, delay: float = 0.0, **overrides):
        async def main():
            received: asyncio.Queue = asyncio.Queue()

            async def handle(reader, writer):
                await received.put(await reader.readline())
                try:
                    for chunk in replies:
                        writer.write(chunk)
                        await writer.drain()
                        if delay:
                            await asyncio.sleep(delay)
                except ConnectionError:
                    pass  # el cliente ya cerró tras una única lectura
                writer.close()

            server = await asyncio.start_server(handle, "127.0.0.1", 0)
            port = server.sockets[0].getsockname()[1]
            cfg = DeviceConfig(host="127.0.0.1", port=port, **overrides)
            async with server:
                result = await call(cfg)
                request = await asyncio.wait_for(received.get(), timeout=5)
            return result, request

        return asyncio.run(main())

    return _run
