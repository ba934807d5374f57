# --------------------------------------------------------------
# File: test_crypto_sym.py
# Description: Pruebas del cifrado AES-256-CBC sin relleno automático.
# --------------------------------------------------------------

import os

import pytest
from cryptography.hazmat.primitives import padding

from core.crypto_sym import aes_cbc_decrypt_raw, aes_cbc_encrypt_raw
from core.errors import ConfigurationError
from core.padding import pkcs7_pad


def test_aes_cbc_roundtrip_ok():
    """Comprueba que un cifrado AES-CBC pueda revertirse correctamente.

    Returns:
        None: Las aserciones evalúan la igualdad entre claro y descifrado.
    """
    key = os.urandom(32)
    iv = os.urandom(16)
    plaintext = os.urandom(64)
    ct = aes_cbc_encrypt_raw(key, iv, plaintext)
    assert len(ct) == len(plaintext)
    assert aes_cbc_decrypt_raw(key, iv, ct) == plaintext


def test_manual_padding_matches_library_pkcs7():
    """Verifica que el relleno manual coincida con el PKCS7 de `cryptography`.

    Returns:
        None: Las aserciones comparan ambos ciphertexts.
    """
    key = os.urandom(32)
    iv = os.urandom(16)
    data = b"a" * 16
    padder = padding.PKCS7(128).padder()
    library_padded = padder.update(data) + padder.finalize()
    assert pkcs7_pad(data) == library_padded
    assert aes_cbc_encrypt_raw(key, iv, pkcs7_pad(data)) == aes_cbc_encrypt_raw(
        key, iv, library_padded
    )


@pytest.mark.parametrize(
    "key, iv",
    [
        (b"k" * 7, b"i" * 16),
        (b"k" * 32, b"i" * 8),
    ],
)
def test_invalid_key_or_iv_raises_configuration_error(key, iv):
    """Garantiza que longitudes de clave o IV inválidas se traduzcan a `ConfigurationError`.

    Args:
        key (bytes): Clave candidata.
        iv (bytes): IV candidato.

    Returns:
        None: Se espera la excepción de configuración.
    """
    with pytest.raises(ConfigurationError):
        aes_cbc_encrypt_raw(key, iv, b"\x10" * 16)
