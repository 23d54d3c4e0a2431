# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar configuración y ficheros.
# --------------------------------------------------------------

import importlib
from typing import Iterator

import pytest

PASSWORD = b"01234567890123456789012345678901"
NONCE = bytes(12)


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch) -> Iterator[None]:
    """Elimina las variables FILECIPHER_* y recarga filecipher.config.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante cada test.
    """
    monkeypatch.delenv("FILECIPHER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FILECIPHER_STRICT_EXIT", raising=False)

    import filecipher.config as config_module

    importlib.reload(config_module)

    yield


@pytest.fixture
def password() -> bytes:
    """Contraseña de 32 bytes usada como clave AES-256."""
    return PASSWORD


@pytest.fixture
def nonce() -> bytes:
    """Nonce de 12 bytes a cero."""
    return NONCE


@pytest.fixture
def plain_file(tmp_path):
    """Crea ``report.txt`` con contenido conocido dentro de tmp_path.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.

    Returns:
        Path: Ruta del fichero en claro.
    """
    path = tmp_path / "report.txt"
    path.write_bytes(b"hello world")
    return path
