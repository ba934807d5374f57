# --------------------------------------------------------------
# File: padding.py
# Description: Relleno PKCS#7 explícito para el cifrado por bloques.
# --------------------------------------------------------------
"""Relleno y retirada de relleno PKCS#7."""

from core.errors import EnvelopeError

BLOCK_SIZE = 16


def pkcs7_pad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """Añade entre 1 y `block_size` bytes de valor igual a la longitud del relleno.

    Una entrada ya alineada recibe un bloque completo de relleno.
    """

    pad_len = block_size - (len(data) % block_size)
    return data + bytes([pad_len]) * pad_len


def pkcs7_unpad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """Elimina el relleno PKCS#7 validando su estructura.

    Args:
        data (bytes): Texto descifrado con relleno.
        block_size (int): Tamaño de bloque del cifrador.

    Returns:
        bytes: Datos originales sin relleno.

    Raises:
        EnvelopeError: Si la longitud o los bytes de relleno no son válidos.

    """

    if not data or len(data) % block_size:
        raise EnvelopeError("Longitud no alineada al tamaño de bloque.")
    pad_len = data[-1]
    if not 1 <= pad_len <= block_size:
        raise EnvelopeError("Relleno PKCS#7 inválido.")
    if data[-pad_len:] != bytes([pad_len]) * pad_len:
        raise EnvelopeError("Relleno PKCS#7 inválido.")
    return data[:-pad_len]
