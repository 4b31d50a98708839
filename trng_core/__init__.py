# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del núcleo del cliente TRNG.
# --------------------------------------------------------------
"""Inicializa el paquete `trng_core` y documenta sus módulos principales."""

__all__ = [
    "commands",
    "config",
    "crypto_sym",
    "errors",
    "models",
    "password_gen",
    "protocol",
    "transport",
]
