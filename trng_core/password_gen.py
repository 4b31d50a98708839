# --------------------------------------------------------------
# File: password_gen.py
# Description: Derivación determinista de contraseñas a partir de la semilla.
# --------------------------------------------------------------
"""Mapea los bytes de la semilla sobre el alfabeto que fija la complejidad."""

from __future__ import annotations

import string
from itertools import cycle, islice

NUMBERS = string.digits
LOWERCASE = string.ascii_lowercase
UPPERCASE = string.ascii_uppercase
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

ALPHABETS = {
    0: NUMBERS,
    1: LOWERCASE,
    2: UPPERCASE,
    3: LOWERCASE + UPPERCASE,
    4: LOWERCASE + UPPERCASE + NUMBERS,
}
FULL_ALPHABET = LOWERCASE + UPPERCASE + NUMBERS + SYMBOLS


def alphabet_for(complexity: int) -> str:
    """Devuelve el alfabeto asociado al código; 5 o más usa el completo."""

    return ALPHABETS.get(complexity, FULL_ALPHABET)


def derive_password(seed: bytes, length: int, complexity: int) -> str:
    """Genera una contraseña de `length` caracteres a partir de la semilla.

    Cada byte se reduce módulo el tamaño del alfabeto y la semilla se recorre
    de forma cíclica. El sesgo del módulo se mantiene para que la misma semilla
    produzca la misma contraseña que el resto de clientes del dispositivo.

    Args:
        seed (bytes): Semilla descifrada.
        length (int): Número de caracteres de salida.
        complexity (int): Código de complejidad recibido del dispositivo.

    Returns:
        str: Contraseña generada; vacía si `length` es 0 o la semilla está vacía.

    """

    chars = alphabet_for(complexity)
    return "".join(chars[byte % len(chars)] for byte in islice(cycle(seed), length))
