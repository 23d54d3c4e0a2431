# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos de las órdenes y resultados de cifrado.
# --------------------------------------------------------------
"""Modelos Pydantic y validadores compartidos por la CLI y el pipeline."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, List, Optional

from pydantic import BaseModel, Field, StrictInt, TypeAdapter, ValidationError

__all__ = ["Command", "NonceFormatError", "TransformResult", "parse_nonce"]


class Command(str, Enum):
    """Operación solicitada desde la línea de comandos."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @classmethod
    def parse(cls, value: str) -> Optional["Command"]:
        """Devuelve la orden asociada a `value` o `None` si no existe."""

        try:
            return cls(value)
        except ValueError:
            return None


class NonceFormatError(ValueError):
    """El texto del nonce no es un array JSON de bytes (0-255)."""


_NONCE_ADAPTER = TypeAdapter(List[Annotated[StrictInt, Field(ge=0, le=255)]])


def parse_nonce(text: str, expected_len: Optional[int] = None) -> bytes:
    """Deserializa un nonce escrito como array JSON de enteros.

    Sin `expected_len` la longitud no se comprueba; la valida el motor de
    cifrado.

    Args:
        text (str): Texto del tipo ``[1,2,3,4,5,6,7,8,9,10,11,12]``.
        expected_len (Optional[int]): Número exacto de bytes exigido.

    Returns:
        bytes: Bytes del nonce en el mismo orden.

    Raises:
        NonceFormatError: Si el JSON es inválido, algún elemento no es un byte
            o el número de elementos no es `expected_len`.

    """

    try:
        values = _NONCE_ADAPTER.validate_json(text)
    except ValidationError as exc:
        first = exc.errors()[0]
        raise NonceFormatError(first["msg"]) from exc
    if expected_len is not None and len(values) != expected_len:
        raise NonceFormatError(f"expected {expected_len} bytes, got {len(values)}")
    return bytes(values)


class TransformResult(BaseModel):
    """Resumen de una transformación completada sobre un fichero.

    Attributes:
        command (Command): Operación ejecutada.
        source_path (str): Fichero leído.
        output_path (str): Fichero escrito.
        bytes_read (int): Tamaño del fichero de entrada.
        bytes_written (int): Tamaño del fichero de salida.

    """

    command: Command
    source_path: str
    output_path: str
    bytes_read: int = Field(ge=0)
    bytes_written: int = Field(ge=0)
