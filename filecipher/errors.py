# --------------------------------------------------------------
# File: errors.py
# Description: Taxonomía de errores de entrada/salida y criptográficos.
# --------------------------------------------------------------
"""Excepciones públicas del paquete `filecipher`.

Toda operación fallida termina en una de las dos variantes de
`FileCipherError`: `IoError` para el sistema de ficheros y `CryptoError`
para la clave, el nonce o la verificación del tag.
"""

from __future__ import annotations

__all__ = ["FileCipherError", "IoError", "CryptoError"]


class FileCipherError(Exception):
    """Base común para los errores notificables por la línea de comandos."""


class IoError(FileCipherError):
    """Fallo al abrir, leer, crear o escribir un fichero.

    Attributes:
        details (str): Descripción del error del sistema operativo.

    """

    def __init__(self, details: str) -> None:
        super().__init__(details)
        self.details = details

    @classmethod
    def from_os_error(cls, exc: OSError) -> "IoError":
        """Construye el error a partir de un `OSError` conservando su descripción.

        Args:
            exc (OSError): Excepción original del sistema operativo.

        Returns:
            IoError: Error envuelto listo para propagarse.

        """

        if exc.strerror and exc.filename is not None:
            details = f"{exc.strerror}: {exc.filename!r}"
        else:
            details = exc.strerror or str(exc)
        return cls(details)

    def __str__(self) -> str:
        return f"IO error: {self.details}"


class CryptoError(FileCipherError):
    """Fallo en la construcción de la clave, el nonce, el sellado o la apertura.

    El mensaje es deliberadamente opaco: no distingue entre clave errónea,
    nonce inválido o ciphertext corrupto.
    """

    def __init__(self) -> None:
        super().__init__("unspecified")

    def __str__(self) -> str:
        return "AEAD error: unspecified"
