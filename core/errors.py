# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del cifrado previo de contraseñas.
# --------------------------------------------------------------
"""Excepciones propias del paquete `core`."""


class PasswordCryptoError(Exception):
    """Error base para cualquier fallo del cifrado o descifrado de credenciales."""


class ConfigurationError(PasswordCryptoError):
    """La primitiva de cifrado rechazó la clave o el IV derivados.

    Es un error fatal de configuración: no se reintenta y se propaga al
    llamador para abortar el intento de login.
    """


class EnvelopeError(PasswordCryptoError):
    """El sobre `Salted__` recibido está mal formado o no se puede descifrar."""
