# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Derivación de clave e IV compatible con EVP_BytesToKey de OpenSSL.
# --------------------------------------------------------------
"""Funciones de derivación de claves para el cifrado previo de contraseñas.

El esquema (MD5 iterado con salt fija) es el legado de `openssl enc` y se
mantiene tal cual porque el backend descifra con el mismo algoritmo.
"""

import hashlib
from typing import Tuple

from core.models import SALT_LEN


def build_salt(salt_front: str, salt_back: str) -> bytes:
    """Combina las dos partes de la salt en exactamente 8 bytes.

    Args:
        salt_front (str): Parte inicial configurada.
        salt_back (str): Parte final configurada.

    Returns:
        bytes: Salt truncada o rellenada con ceros hasta 8 bytes.

    """

    salt = (salt_front + salt_back).encode("utf-8")
    return salt[:SALT_LEN].ljust(SALT_LEN, b"\x00")


def evp_bytes_to_key(
    password: str,
    salt: bytes,
    key_len: int = 32,
    iv_len: int = 16,
) -> Tuple[bytes, bytes]:
    """Deriva clave e IV encadenando `D_i = MD5(D_{i-1} || password || salt)`.

    Args:
        password (str): Secreto compartido de la aplicación (no la contraseña del usuario).
        salt (bytes): Salt de 8 bytes.
        key_len (int): Longitud de la clave en bytes.
        iv_len (int): Longitud del IV en bytes.

    Returns:
        Tuple[bytes, bytes]: Clave de `key_len` bytes e IV de `iv_len` bytes.

    """

    secret = password.encode("utf-8")
    total = key_len + iv_len
    derived = b""
    block = b""
    while len(derived) < total:
        block = hashlib.md5(block + secret + salt).digest()
        derived += block
    return derived[:key_len], derived[key_len:total]
