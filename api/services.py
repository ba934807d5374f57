# --------------------------------------------------------------
# File: services.py
# Description: Cliente del endpoint de autenticación del backend de votaciones.
# --------------------------------------------------------------
"""Capa de servicios que envía credenciales cifradas y gestiona el token de sesión."""

import logging
from typing import Any, Dict, Optional

import httpx

from core.config import load_api_url
from core.models import EncryptionConfig, LoginRequest, LoginResponse
from core.password_crypto import encrypt_password

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SEC = 10.0


class ApiError(Exception):
    """Fallo devuelto por el backend o por la red.

    Attributes:
        status (int): Código HTTP; 0 si no hubo respuesta.
        message (str): Mensaje del backend o descripción del fallo.

    """

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


def _error_message(response: httpx.Response) -> str:
    """Extrae `message` o `error` del cuerpo JSON de una respuesta fallida."""

    try:
        data = response.json()
    except ValueError:
        data = {}
    if isinstance(data, dict):
        detail = data.get("message") or data.get("error")
        if detail:
            return str(detail)
    if response.reason_phrase:
        return f"HTTP {response.status_code}: {response.reason_phrase}"
    return f"HTTP {response.status_code}"


class AuthClient:
    """Cliente síncrono para `/auth/login`, `/auth/logout` y `/me`.

    No aplica reintentos: el llamador decide su política de timeout y reintento.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        config: Optional[EncryptionConfig] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT_SEC,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config
        self._client = httpx.Client(
            base_url=base_url or load_api_url(),
            headers={"Content-Type": "application/json"},
            timeout=timeout,
            transport=transport,
        )
        self.token: Optional[str] = None

    def __enter__(self) -> "AuthClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def build_login_payload(self, username: str, password: str) -> LoginRequest:
        """Cifra la contraseña y arma el cuerpo del login.

        Args:
            username (str): Nombre de usuario.
            password (str): Contraseña en claro.

        Returns:
            LoginRequest: Cuerpo con la contraseña ya en formato `Salted__`.

        """

        return LoginRequest(username=username, password=encrypt_password(password, self._config))

    def _request(self, method: str, endpoint: str, **kwargs: Any) -> httpx.Response:
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        try:
            response = self._client.request(method, endpoint, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            raise ApiError(0, f"Network error: {exc}") from exc

        if response.is_error:
            message = _error_message(response)
            logger.warning("%s %s -> %d: %s", method, endpoint, response.status_code, message)
            raise ApiError(response.status_code, message)
        return response

    def login(self, username: str, password: str) -> LoginResponse:
        """Autentica al usuario y guarda el token de sesión.

        Args:
            username (str): Nombre de usuario.
            password (str): Contraseña en claro; se cifra antes de salir.

        Returns:
            LoginResponse: Token y datos del usuario autenticado.

        Raises:
            ApiError: Credenciales inválidas, cuenta inactiva, respuesta sin
                token o fallo de red.

        """

        payload = self.build_login_payload(username, password)
        response = self._request("POST", "/auth/login", json=payload.model_dump())

        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict) or not data.get("token"):
            raise ApiError(response.status_code, "Invalid login response")

        # Algunos despliegues devuelven el usuario bajo la clave `admin`.
        user = data.get("user") or data.get("admin") or {}
        result = LoginResponse(token=data["token"], user=user)
        self.token = result.token
        logger.info("Sesión iniciada para %s", username)
        return result

    def logout(self) -> None:
        """Cierra la sesión en el backend y descarta el token local."""

        try:
            self._request("POST", "/auth/logout")
        finally:
            self.token = None

    def me(self) -> Dict[str, Any]:
        """Devuelve los datos del usuario asociado al token actual.

        Un cuerpo vacío o que no sea JSON se trata como `{}`.
        """

        response = self._request("GET", "/me")
        try:
            data = response.json()
        except ValueError:
            return {}
        if not isinstance(data, dict):
            raise ApiError(response.status_code, "Invalid response")
        return data
