# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Sellado y apertura AES-GCM en sitio sobre buffers de bytes.
# --------------------------------------------------------------
"""Rutinas de cifrado autenticado que mutan el buffer recibido.

`seal_in_place` añade el tag de 16 bytes al final del buffer y
`open_in_place` lo verifica y lo elimina. Ninguna de las dos conoce
ficheros ni rutas.
"""

from __future__ import annotations

from cryptography.exceptions import InvalidTag

from filecipher.crypto_key import AeadKey
from filecipher.errors import CryptoError

__all__ = ["NONCE_LEN", "TAG_LEN", "seal_in_place", "open_in_place"]

NONCE_LEN = 12
TAG_LEN = 16


def _check_nonce(nonce: bytes) -> bytes:
    # AESGCM acepta nonces de 8 a 128 bytes; aquí solo vale 96 bits.
    if len(nonce) != NONCE_LEN:
        raise CryptoError()
    return bytes(nonce)


def seal_in_place(key: AeadKey, nonce: bytes, buffer: bytearray) -> None:
    """Cifra `buffer` en sitio y le añade la etiqueta de autenticación.

    Args:
        key (AeadKey): Clave construida con `build_key`.
        nonce (bytes): Nonce de 96 bits suministrado por el llamante.
        buffer (bytearray): Texto en claro; al volver contiene ciphertext + tag.

    Raises:
        CryptoError: Si el nonce no mide 12 bytes o el cifrado falla.

    """

    nonce = _check_nonce(nonce)
    try:
        sealed = key.cipher.encrypt(nonce, bytes(buffer), None)
    except (OverflowError, ValueError) as exc:
        raise CryptoError() from exc
    buffer[:] = sealed


def open_in_place(key: AeadKey, nonce: bytes, buffer: bytearray) -> None:
    """Verifica el tag final de `buffer` y lo descifra en sitio.

    Si la verificación falla el buffer queda intacto.

    Args:
        key (AeadKey): Clave construida con `build_key`.
        nonce (bytes): Nonce usado al sellar.
        buffer (bytearray): Ciphertext + tag; al volver contiene el claro.

    Raises:
        CryptoError: Si el nonce no mide 12 bytes o el tag no es válido.

    """

    nonce = _check_nonce(nonce)
    if len(buffer) < TAG_LEN:
        raise CryptoError()
    try:
        plaintext = key.cipher.decrypt(nonce, bytes(buffer), None)
    except (InvalidTag, OverflowError, ValueError) as exc:
        raise CryptoError() from exc
    buffer[:] = plaintext
