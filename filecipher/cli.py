# --------------------------------------------------------------
# File: cli.py
# Description: Punto de entrada de línea de comandos para cifrar y descifrar.
# --------------------------------------------------------------
"""Interfaz ``filecipher <encrypt|decrypt> <password> <file> <nonce_json>``.

Los resultados se comunican por la salida estándar: nada si la operación
termina bien y una sola línea si falla.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional

from filecipher import config
from filecipher.crypto_key import password_bytes
from filecipher.crypto_sym import NONCE_LEN
from filecipher.errors import FileCipherError
from filecipher.file_pipeline import decrypt_file, encrypt_file
from filecipher.models import Command, NonceFormatError, parse_nonce

logger = logging.getLogger(__name__)

USAGE = "Usage: filecipher <encrypt|decrypt> <password> <file> <nonce_json>"

_ERROR_PREFIX = {
    Command.ENCRYPT: "Encryption error",
    Command.DECRYPT: "Decryption error",
}


def _log_level() -> int:
    # Solo nombres de nivel reales; cualquier otro valor cae en WARNING.
    return logging.getLevelNamesMapping().get(config.LOG_LEVEL, logging.WARNING)


def _configure_logging() -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Ejecuta una orden completa y devuelve el código de salida.

    Args:
        argv (Optional[List[str]]): Argumentos sin el nombre del programa;
            por defecto ``sys.argv[1:]``.

    Returns:
        int: 0 salvo nonce malformado, o fallo con ``FILECIPHER_STRICT_EXIT``.

    """

    _configure_logging()
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 4:
        print(USAGE)
        return 0

    command_text, password, file_path, nonce_text = args[:4]

    # El nonce se valida antes de tocar ningún fichero.
    try:
        nonce = parse_nonce(nonce_text, expected_len=NONCE_LEN)
    except NonceFormatError as exc:
        print(f"Error parsing nonce: {exc}")
        return 1

    command = Command.parse(command_text)
    if command is None:
        print("Invalid command")
        return 0

    operation = encrypt_file if command is Command.ENCRYPT else decrypt_file
    try:
        operation(password_bytes(password), file_path, nonce)
    except FileCipherError as exc:
        logger.debug("Fallo en %s de %s", command.value, file_path, exc_info=exc)
        print(f"{_ERROR_PREFIX[command]}: {exc}")
        return 1 if config.STRICT_EXIT else 0
    return 0


def run() -> None:
    """Entrada del script de consola."""

    sys.exit(main())
