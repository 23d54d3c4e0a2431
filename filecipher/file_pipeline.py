# --------------------------------------------------------------
# File: file_pipeline.py
# Description: Cifrado y descifrado completo de un fichero en memoria.
# --------------------------------------------------------------
"""Orquestación de lectura, transformación AEAD y escritura de ficheros.

Cada llamada es independiente: lee el fichero entero, construye la clave,
transforma el buffer y escribe el resultado junto al original. La clave y
el tag se validan antes de abrir el destino, por lo que un fallo
criptográfico nunca crea ni trunca el fichero de salida.
"""

from __future__ import annotations

import logging
import os
from typing import Union

from filecipher.crypto_key import build_key
from filecipher.crypto_sym import open_in_place, seal_in_place
from filecipher.errors import IoError
from filecipher.models import Command, TransformResult

__all__ = [
    "ENCRYPTED_SUFFIX",
    "decrypt_file",
    "decrypted_path",
    "encrypt_file",
    "encrypted_path",
]

logger = logging.getLogger(__name__)

ENCRYPTED_SUFFIX = ".enc"

PathLike = Union[str, "os.PathLike[str]"]


def encrypted_path(path: PathLike) -> str:
    """Ruta del artefacto cifrado: la original con el sufijo ``.enc``."""

    return f"{os.fspath(path)}{ENCRYPTED_SUFFIX}"


def decrypted_path(path: PathLike) -> str:
    """Ruta del artefacto descifrado.

    Elimina el texto desde el último ``.`` (incluido). Si no hay ningún
    punto la ruta se devuelve sin cambios y el descifrado sobrescribe la
    entrada.

    Args:
        path (PathLike): Ruta del fichero cifrado.

    Returns:
        str: Ruta de destino del texto en claro.

    """

    text = os.fspath(path)
    index = text.rfind(".")
    if index == -1:
        return text
    return text[:index]


def _read_all(path: str) -> bytearray:
    try:
        with open(path, "rb") as handler:
            return bytearray(handler.read())
    except OSError as exc:
        raise IoError.from_os_error(exc) from exc


def _write_all(path: str, data: bytearray) -> None:
    # Sobrescribe sin confirmación si el destino ya existe.
    try:
        with open(path, "wb") as handler:
            handler.write(data)
    except OSError as exc:
        raise IoError.from_os_error(exc) from exc


def encrypt_file(password: bytes, path: PathLike, nonce: bytes) -> TransformResult:
    """Cifra el fichero `path` y escribe ``<path>.enc``.

    Args:
        password (bytes): Material de clave de 32 bytes.
        path (PathLike): Fichero en claro a cifrar; no se modifica.
        nonce (bytes): Nonce de 12 bytes.

    Returns:
        TransformResult: Rutas y tamaños de la operación.

    Raises:
        IoError: Si no se puede leer el origen o escribir el destino.
        CryptoError: Si la clave o el nonce no son válidos.

    """

    source = os.fspath(path)
    contents = _read_all(source)
    bytes_read = len(contents)
    key = build_key(password)
    seal_in_place(key, nonce, contents)

    output = encrypted_path(source)
    _write_all(output, contents)
    logger.info("Cifrado %s -> %s (%d bytes)", source, output, len(contents))
    return TransformResult(
        command=Command.ENCRYPT,
        source_path=source,
        output_path=output,
        bytes_read=bytes_read,
        bytes_written=len(contents),
    )


def decrypt_file(password: bytes, path: PathLike, nonce: bytes) -> TransformResult:
    """Verifica y descifra `path`, escribiendo el claro sin su última extensión.

    Args:
        password (bytes): Material de clave de 32 bytes.
        path (PathLike): Fichero cifrado (ciphertext + tag).
        nonce (bytes): Nonce usado al cifrar.

    Returns:
        TransformResult: Rutas y tamaños de la operación.

    Raises:
        IoError: Si no se puede leer el origen o escribir el destino.
        CryptoError: Si la clave, el nonce o el tag no son válidos.

    """

    source = os.fspath(path)
    contents = _read_all(source)
    bytes_read = len(contents)
    key = build_key(password)
    open_in_place(key, nonce, contents)

    output = decrypted_path(source)
    if output == source:
        logger.warning("Sin extensión que eliminar; se sobrescribe %s", source)
    _write_all(output, contents)
    logger.info("Descifrado %s -> %s (%d bytes)", source, output, len(contents))
    return TransformResult(
        command=Command.DECRYPT,
        source_path=source,
        output_path=output,
        bytes_read=bytes_read,
        bytes_written=len(contents),
    )
