# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de utilidades criptográficas del paquete core.
# --------------------------------------------------------------
"""Inicializa el paquete `core` y documenta sus módulos principales."""

__all__ = [
    "config",
    "crypto_kdf",
    "crypto_sym",
    "errors",
    "models",
    "padding",
    "password_crypto",
]
