# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-256-CBC sin relleno automático.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico por bloques para el sobre `Salted__`.

El relleno se aplica fuera (ver `core.padding`), por lo que aquí los datos
deben llegar ya alineados a 16 bytes.
"""

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from core.errors import ConfigurationError


def _aes_cbc(key: bytes, iv: bytes) -> Cipher:
    """Crea el cifrador AES-CBC traduciendo longitudes inválidas a `ConfigurationError`."""

    try:
        return Cipher(algorithms.AES(key), modes.CBC(iv))
    except ValueError as exc:
        raise ConfigurationError(f"Clave o IV rechazados por AES-CBC: {exc}") from exc


def aes_cbc_encrypt_raw(key: bytes, iv: bytes, padded: bytes) -> bytes:
    """Cifra datos ya rellenados con AES-CBC.

    Args:
        key (bytes): Clave de 32 bytes.
        iv (bytes): Vector de inicialización de 16 bytes.
        padded (bytes): Texto en claro con longitud múltiplo de 16.

    Returns:
        bytes: Ciphertext de la misma longitud que la entrada.

    """

    encryptor = _aes_cbc(key, iv).encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def aes_cbc_decrypt_raw(key: bytes, iv: bytes, ciphertext: bytes) -> bytes:
    """Descifra bloques AES-CBC devolviendo el texto aún con relleno."""

    decryptor = _aes_cbc(key, iv).decryptor()
    return decryptor.update(ciphertext) + decryptor.finalize()
