# --------------------------------------------------------------
# File: crypto_key.py
# Description: Construcción de la clave AES-256-GCM a partir de la contraseña.
# --------------------------------------------------------------
"""Construcción de claves AEAD con nonce suministrado por el llamante."""

from __future__ import annotations

import os

from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from pydantic import BaseModel, ConfigDict

from filecipher.errors import CryptoError

__all__ = ["KEY_LEN", "AeadKey", "build_key", "password_bytes"]

# AES-256: la contraseña se usa tal cual como material de clave.
KEY_LEN = 32


class AeadKey(BaseModel):
    """Clave AES-256-GCM inmutable válida para sellar y abrir.

    No gestiona secuencias de nonce: cada operación recibe el nonce del
    llamante, que es responsable de no reutilizarlo.

    Attributes:
        cipher (AESGCM): Primitiva AEAD ligada a la clave de 256 bits.

    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    cipher: AESGCM

    def __repr__(self) -> str:
        return "AeadKey(algorithm='AES-256-GCM')"


def build_key(password: bytes) -> AeadKey:
    """Construye la clave AES-256-GCM usando la contraseña como material directo.

    Args:
        password (bytes): Bytes de la contraseña; deben medir exactamente 32.

    Returns:
        AeadKey: Clave lista para `seal_in_place` y `open_in_place`.

    Raises:
        CryptoError: Si la longitud no coincide con la de la clave.

    """

    # AESGCM admite 16/24/32 bytes; solo se acepta AES-256.
    if len(password) != KEY_LEN:
        raise CryptoError()
    try:
        cipher = AESGCM(bytes(password))
    except (TypeError, ValueError) as exc:
        raise CryptoError() from exc
    return AeadKey(cipher=cipher)


def password_bytes(password: str) -> bytes:
    """Convierte la contraseña de la línea de comandos en sus bytes originales."""

    return os.fsencode(password)
