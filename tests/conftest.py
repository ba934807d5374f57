# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar el entorno y fijar la configuración.
# --------------------------------------------------------------

from typing import Iterator

import pytest

from core.models import EncryptionConfig

ENV_VARS = (
    "ENCRYPTION_KEY",
    "ENCRYPTION_SALT_FRONT",
    "ENCRYPTION_SALT_BACK",
    "API_URL",
)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch) -> Iterator[None]:
    """Elimina las variables de cifrado para que un `.env` local no altere las pruebas.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def test_config() -> EncryptionConfig:
    """Configuración del vector conocido generado con `openssl enc -md md5`.

    Returns:
        EncryptionConfig: Secreto y salt fijos de referencia.
    """
    return EncryptionConfig(
        secret="test-secret-32-bytes-long-value!",
        salt_front="front",
        salt_back="back",
    )
