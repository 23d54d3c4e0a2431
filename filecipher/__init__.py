# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del cifrador de ficheros AES-256-GCM.
# --------------------------------------------------------------
"""Inicializa el paquete `filecipher` y reexporta su API principal."""

from filecipher.crypto_key import KEY_LEN, AeadKey, build_key
from filecipher.crypto_sym import NONCE_LEN, TAG_LEN, open_in_place, seal_in_place
from filecipher.errors import CryptoError, FileCipherError, IoError
from filecipher.file_pipeline import decrypt_file, decrypted_path, encrypt_file, encrypted_path
from filecipher.models import Command, TransformResult, parse_nonce

__all__ = [
    "KEY_LEN",
    "NONCE_LEN",
    "TAG_LEN",
    "AeadKey",
    "Command",
    "CryptoError",
    "FileCipherError",
    "IoError",
    "TransformResult",
    "build_key",
    "decrypt_file",
    "decrypted_path",
    "encrypt_file",
    "encrypted_path",
    "open_in_place",
    "parse_nonce",
    "seal_in_place",
]
