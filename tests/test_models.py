# --------------------------------------------------------------
# File: test_models.py
# Description: Pruebas de los modelos de órdenes, nonces y resultados.
# --------------------------------------------------------------

import pytest
from pydantic import ValidationError

from filecipher.models import Command, NonceFormatError, TransformResult, parse_nonce


def test_command_parse_known_values():
    """Comprueba que las dos órdenes válidas se reconozcan."""
    assert Command.parse("encrypt") is Command.ENCRYPT
    assert Command.parse("decrypt") is Command.DECRYPT


@pytest.mark.parametrize("value", ["", "ENCRYPT", "encrypt ", "sign"])
def test_command_parse_unknown_returns_none(value):
    """Verifica que cualquier otro texto sea una orden nula, no un error.

    Args:
        value (str): Texto de orden no soportado.
    """
    assert Command.parse(value) is None


def test_parse_nonce_returns_bytes():
    """Comprueba la conversión de un array JSON a bytes."""
    assert parse_nonce("[1,2,3,4,5,6,7,8,9,10,11,12]") == bytes(range(1, 13))
    assert parse_nonce("[0, 255]") == b"\x00\xff"


def test_parse_nonce_does_not_check_length():
    """Garantiza que la longitud se delegue al motor de cifrado."""
    assert parse_nonce("[]") == b""
    assert len(parse_nonce("[7,7,7]")) == 3


@pytest.mark.parametrize(
    "text",
    ["", "not json", "[1,2,", "{\"a\": 1}", "[256]", "[-1]", "[1.5]", "[\"1\"]", "[true]", "12"],
)
def test_parse_nonce_rejects_malformed_input(text):
    """Verifica que JSON inválido o elementos fuera de rango fallen.

    Args:
        text (str): Representación de nonce inválida.
    """
    with pytest.raises(NonceFormatError):
        parse_nonce(text)


def test_transform_result_rejects_negative_sizes():
    """Comprueba la validación de tamaños del resultado."""
    with pytest.raises(ValidationError):
        TransformResult(
            command=Command.ENCRYPT,
            source_path="a",
            output_path="a.enc",
            bytes_read=-1,
            bytes_written=16,
        )


def test_parse_nonce_enforces_expected_length():
    """Verifica que `expected_len` rechace un número de elementos distinto."""
    assert parse_nonce("[0,0,0,0,0,0,0,0,0,0,0,0]", expected_len=12) == bytes(12)
    with pytest.raises(NonceFormatError, match="expected 12 bytes, got 3"):
        parse_nonce("[1,2,3]", expected_len=12)
