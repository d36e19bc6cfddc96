# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar la configuración y las claves.
# --------------------------------------------------------------

import importlib
import os
from typing import Iterator

import pytest

from simple_aes256_gcm.models import Key

DEMO_KEY_TEXT = "01234567890123456789012345678901"


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch) -> Iterator[None]:
    """Fija las variables de entorno de la demo y recarga simple_aes256_gcm.config.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.setenv("DEMO_KEY", DEMO_KEY_TEXT)
    monkeypatch.setenv("DEMO_KEY_B64", "")
    monkeypatch.setenv("DEMO_MESSAGE", "This is a text.")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    import simple_aes256_gcm.config as config_module

    importlib.reload(config_module)

    yield


@pytest.fixture
def key() -> Key:
    """Clave aleatoria de 256 bits para cada prueba.

    Returns:
        Key: Clave construida desde 32 bytes aleatorios.
    """
    return Key.from_bytes(os.urandom(32))
