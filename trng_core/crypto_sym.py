# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-128 (CBC/ECB) para recuperar la semilla del TRNG.
# --------------------------------------------------------------
"""Rutinas de descifrado simétrico de la semilla enviada por el dispositivo."""

from __future__ import annotations

import binascii

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from trng_core.config import DeviceConfig
from trng_core.errors import CryptoError

BLOCK_SIZE = 16

# Tamaño exacto del texto cifrado por variante de protocolo.
EXPECTED_SIZE = {"cbc": 2 * BLOCK_SIZE, "ecb": BLOCK_SIZE}


def aes_cbc_encrypt_with_key(key: bytes, iv: bytes, plaintext: bytes) -> bytes:
    """Cifra datos con AES-CBC aplicando relleno PKCS#7.

    Args:
        key (bytes): Clave simétrica de 128 bits.
        iv (bytes): Vector de inicialización de 128 bits.
        plaintext (bytes): Datos en claro.

    Returns:
        bytes: Texto cifrado, múltiplo de 16 bytes.

    """

    padder = padding.PKCS7(algorithms.AES.block_size).padder()
    padded = padder.update(plaintext) + padder.finalize()
    enc = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    return enc.update(padded) + enc.finalize()


def aes_cbc_decrypt_with_key(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """Descifra datos AES-CBC y elimina el relleno PKCS#7.

    Args:
        key (bytes): Clave simétrica de 128 bits.
        iv (bytes): Vector de inicialización de 128 bits.
        ciphertext (bytes): Texto cifrado, múltiplo de 16 bytes.

    Returns:
        bytes: Mensaje original sin relleno.

    Raises:
        ValueError: Si el relleno no es PKCS#7 válido.

    """

    dec = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    padded = dec.update(ciphertext) + dec.finalize()
    unpadder = padding.PKCS7(algorithms.AES.block_size).unpadder()
    return unpadder.update(padded) + unpadder.finalize()


def aes_ecb_encrypt_block(key: bytes, block: bytes) -> bytes:
    """Cifra un único bloque de 16 bytes con AES-ECB."""

    enc = Cipher(algorithms.AES(key), modes.ECB()).encryptor()
    return enc.update(block) + enc.finalize()


def aes_ecb_decrypt_block(key: bytes, block: bytes) -> bytes:
    """Descifra un único bloque de 16 bytes con AES-ECB, sin relleno."""

    dec = Cipher(algorithms.AES(key), modes.ECB()).decryptor()
    return dec.update(block) + dec.finalize()


def decode_hex(ciphertext_hex: str) -> bytes:
    """Decodifica hexadecimal estricto (sin espacios ni longitud impar)."""

    try:
        return binascii.unhexlify(ciphertext_hex)
    except (binascii.Error, ValueError) as exc:
        raise CryptoError("hex", "invalid HEX key format") from exc


def decrypt_seed(ciphertext_hex: str, config: DeviceConfig) -> bytes:
    """Recupera la semilla en claro a partir del campo `KEY`.

    Args:
        ciphertext_hex (str): Semilla cifrada codificada en hexadecimal.
        config (DeviceConfig): Clave, IV y variante de cifrado.

    Returns:
        bytes: Semilla descifrada; no debe registrarse en logs.

    Raises:
        CryptoError: Si el hexadecimal, el tamaño o el relleno no son válidos.

    """

    ciphertext = decode_hex(ciphertext_hex)
    expected = EXPECTED_SIZE[config.cipher_mode]
    if len(ciphertext) != expected:
        raise CryptoError(
            "size",
            f"expected {expected} bytes of ciphertext, got {len(ciphertext)}",
        )

    if config.cipher_mode == "ecb":
        return aes_ecb_decrypt_block(config.key, ciphertext)

    try:
        return aes_cbc_decrypt_with_key(config.key, config.iv, ciphertext)
    except ValueError as exc:
        raise CryptoError("padding", f"decryption / padding error: {exc}") from exc
