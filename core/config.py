# --------------------------------------------------------------
# File: config.py
# Description: Lectura de la configuración de cifrado y del backend desde el entorno.
# --------------------------------------------------------------
"""Carga de variables de entorno (y `.env`) con los valores por defecto del frontend."""

import os

from dotenv import load_dotenv

from core.models import EncryptionConfig

load_dotenv()

DEFAULT_ENCRYPTION_KEY = "yV9!pZt8@Q1mH!s4Xj^2bGkEw&uLrN0C"
DEFAULT_SALT_FRONT = "frontSalt1234"
DEFAULT_SALT_BACK = "backSalt5678"
DEFAULT_API_URL = "http://localhost:8080/api"


def load_encryption_config() -> EncryptionConfig:
    """Construye la configuración de cifrado a partir del entorno actual.

    Las variables vacías se consideran ausentes y se sustituyen por el
    valor por defecto.

    Returns:
        EncryptionConfig: Secreto compartido y partes de la salt.

    """

    return EncryptionConfig(
        secret=os.getenv("ENCRYPTION_KEY") or DEFAULT_ENCRYPTION_KEY,
        salt_front=os.getenv("ENCRYPTION_SALT_FRONT") or DEFAULT_SALT_FRONT,
        salt_back=os.getenv("ENCRYPTION_SALT_BACK") or DEFAULT_SALT_BACK,
    )


def load_api_url() -> str:
    """Devuelve la URL base del backend REST sin barra final."""

    return (os.getenv("API_URL") or DEFAULT_API_URL).rstrip("/")
