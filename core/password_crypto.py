# --------------------------------------------------------------
# File: password_crypto.py
# Description: Cifrado previo de contraseñas en sobres `Salted__` compatibles con OpenSSL.
# --------------------------------------------------------------
"""Construcción y apertura del sobre cifrado que se envía al endpoint de login.

Formato: ``base64("Salted__" || salt(8) || AES-256-CBC(pkcs7(password)))`` con
clave e IV derivados por EVP_BytesToKey/MD5 a partir del secreto compartido.
"""

import base64
import binascii
import logging
from typing import Optional

from core.config import load_encryption_config
from core.crypto_kdf import build_salt, evp_bytes_to_key
from core.crypto_sym import aes_cbc_decrypt_raw, aes_cbc_encrypt_raw
from core.errors import EnvelopeError
from core.models import (
    OPENSSL_MAGIC,
    SALT_LEN,
    CipherEnvelope,
    DerivedKeyMaterial,
    EncryptionConfig,
)
from core.padding import BLOCK_SIZE, pkcs7_pad, pkcs7_unpad

logger = logging.getLogger(__name__)

KEY_LEN = 32
IV_LEN = 16
HEADER_LEN = len(OPENSSL_MAGIC) + SALT_LEN


def derive_key_material(secret: str, salt: bytes) -> DerivedKeyMaterial:
    """Deriva la clave AES-256 y el IV para un secreto y una salt dados."""

    key, iv = evp_bytes_to_key(secret, salt, KEY_LEN, IV_LEN)
    return DerivedKeyMaterial(key=key, iv=iv)


def encrypt_password(password: str, config: Optional[EncryptionConfig] = None) -> str:
    """Cifra la contraseña del usuario antes de enviarla al backend.

    Args:
        password (str): Contraseña en claro introducida por el usuario.
        config (Optional[EncryptionConfig]): Secreto y salt; si se omite se
            lee del entorno con los valores por defecto.

    Returns:
        str: Sobre `Salted__` codificado en Base64.

    Raises:
        ConfigurationError: Si AES rechaza la clave o el IV derivados.

    """

    if config is None:
        config = load_encryption_config()

    salt = build_salt(config.salt_front, config.salt_back)
    material = derive_key_material(config.secret, salt)
    padded = pkcs7_pad(password.encode("utf-8"), BLOCK_SIZE)
    ciphertext = aes_cbc_encrypt_raw(material.key, material.iv, padded)

    envelope = CipherEnvelope(salt=salt, ciphertext=ciphertext)
    logger.debug("Sobre cifrado generado: %d bloques", len(ciphertext) // BLOCK_SIZE)
    return envelope.to_base64()


def parse_envelope(encoded: str) -> CipherEnvelope:
    """Decodifica y valida la estructura de un sobre en Base64.

    Raises:
        EnvelopeError: Si el Base64, el marcador o la alineación no son válidos.

    """

    try:
        raw = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise EnvelopeError("El sobre no es Base64 válido.") from exc

    if len(raw) < HEADER_LEN or not raw.startswith(OPENSSL_MAGIC):
        raise EnvelopeError("Falta la cabecera 'Salted__'.")

    ciphertext = raw[HEADER_LEN:]
    if not ciphertext or len(ciphertext) % BLOCK_SIZE:
        raise EnvelopeError("El ciphertext no está alineado a bloques de 16 bytes.")

    return CipherEnvelope(salt=raw[len(OPENSSL_MAGIC):HEADER_LEN], ciphertext=ciphertext)


def decrypt_password(encoded: str, config: Optional[EncryptionConfig] = None) -> str:
    """Recupera la contraseña en claro a partir del sobre, como hace el servidor.

    La salt se toma del propio sobre; de la configuración solo se usa el
    secreto compartido.

    Args:
        encoded (str): Sobre `Salted__` en Base64.
        config (Optional[EncryptionConfig]): Configuración con el secreto compartido.

    Returns:
        str: Contraseña original.

    Raises:
        EnvelopeError: Si el sobre está mal formado o el relleno no cuadra.

    """

    if config is None:
        config = load_encryption_config()

    envelope = parse_envelope(encoded)
    material = derive_key_material(config.secret, envelope.salt)
    padded = aes_cbc_decrypt_raw(material.key, material.iv, envelope.ciphertext)
    plaintext = pkcs7_unpad(padded, BLOCK_SIZE)
    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EnvelopeError("El texto descifrado no es UTF-8 válido.") from exc
