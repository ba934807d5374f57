# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan configuración, claves y sobres cifrados."""

import base64
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

OPENSSL_MAGIC = b"Salted__"
SALT_LEN = 8


class EncryptionConfig(BaseModel):
    """Secreto compartido y fragmentos de salt acordados con el servidor.

    Attributes:
        secret (str): Passphrase de aplicación compartida fuera de banda.
        salt_front (str): Parte inicial de la salt determinista.
        salt_back (str): Parte final de la salt determinista.

    """

    model_config = ConfigDict(frozen=True)

    secret: str
    salt_front: str
    salt_back: str


class DerivedKeyMaterial(BaseModel):
    """Clave AES-256 e IV obtenidos con EVP_BytesToKey.

    Attributes:
        key (bytes): Clave simétrica de 32 bytes.
        iv (bytes): Vector de inicialización de 16 bytes.

    """

    model_config = ConfigDict(frozen=True)

    key: bytes
    iv: bytes


class CipherEnvelope(BaseModel):
    """Sobre compatible con `openssl enc`: marcador, salt y ciphertext.

    Attributes:
        salt (bytes): Salt de 8 bytes usada en la derivación.
        ciphertext (bytes): Bloques AES-CBC, longitud múltiplo de 16.

    """

    model_config = ConfigDict(frozen=True)

    salt: bytes = Field(min_length=SALT_LEN, max_length=SALT_LEN)
    ciphertext: bytes

    def to_bytes(self) -> bytes:
        """Serializa el sobre como `Salted__ || salt || ciphertext`."""

        return OPENSSL_MAGIC + self.salt + self.ciphertext

    def to_base64(self) -> str:
        """Codifica el sobre en Base64 estándar listo para un campo JSON."""

        return base64.b64encode(self.to_bytes()).decode("ascii")


class LoginRequest(BaseModel):
    """Cuerpo enviado a `POST /auth/login` con la contraseña ya cifrada."""

    username: str
    password: str


class LoginResponse(BaseModel):
    """Respuesta satisfactoria del endpoint de autenticación.

    Attributes:
        token (str): Token de sesión emitido por el backend.
        user (Dict[str, Any]): Datos del usuario o administrador autenticado.

    """

    token: str
    user: Dict[str, Any] = Field(default_factory=dict)
