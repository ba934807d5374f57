# --------------------------------------------------------------
# File: test_config.py
# Description: Pruebas de la lectura de configuración desde el entorno.
# --------------------------------------------------------------

import pytest
from pydantic import ValidationError

from core.config import (
    DEFAULT_API_URL,
    DEFAULT_ENCRYPTION_KEY,
    DEFAULT_SALT_BACK,
    DEFAULT_SALT_FRONT,
    load_api_url,
    load_encryption_config,
)


def test_defaults_when_env_missing():
    """Comprueba los valores por defecto cuando no hay variables definidas.

    Returns:
        None: Las aserciones comparan cada campo.
    """
    config = load_encryption_config()
    assert config.secret == DEFAULT_ENCRYPTION_KEY
    assert config.salt_front == DEFAULT_SALT_FRONT
    assert config.salt_back == DEFAULT_SALT_BACK
    assert load_api_url() == DEFAULT_API_URL


def test_env_overrides_are_read_at_call_time(monkeypatch):
    """Verifica que los cambios del entorno se apliquen sin recargar módulos.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        None: Las aserciones revisan los valores sobrescritos.
    """
    monkeypatch.setenv("ENCRYPTION_KEY", "k")
    monkeypatch.setenv("ENCRYPTION_SALT_FRONT", "ab")
    monkeypatch.setenv("ENCRYPTION_SALT_BACK", "cd")
    monkeypatch.setenv("API_URL", "https://vote.example.com/api/")
    config = load_encryption_config()
    assert (config.secret, config.salt_front, config.salt_back) == ("k", "ab", "cd")
    assert load_api_url() == "https://vote.example.com/api"


def test_empty_values_fall_back_to_defaults(monkeypatch):
    """Garantiza que una variable vacía se trate como ausente.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        None: La aserción compara con el secreto por defecto.
    """
    monkeypatch.setenv("ENCRYPTION_KEY", "")
    assert load_encryption_config().secret == DEFAULT_ENCRYPTION_KEY


def test_config_is_immutable():
    """Comprueba que la configuración no pueda modificarse tras crearse.

    Returns:
        None: Se espera un error de validación de Pydantic.
    """
    config = load_encryption_config()
    with pytest.raises(ValidationError):
        config.secret = "otro"
