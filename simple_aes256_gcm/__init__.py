# --------------------------------------------------------------
# File: __init__.py
# Description: API pública del cifrado AES-256-GCM de textos.
# --------------------------------------------------------------
"""Cifrado autenticado AES-256-GCM de textos cortos con intercambio en Base64."""

from simple_aes256_gcm.cipher import decrypt, encrypt
from simple_aes256_gcm.errors import (
    AesGcmError,
    DecryptionError,
    DecryptionFailedError,
    EncryptionError,
    InvalidBase64Error,
    InvalidKeySizeError,
    InvalidKeyTextError,
    InvalidNonceSizeError,
    InvalidSizeError,
    InvalidUtf8OutputError,
)
from simple_aes256_gcm.models import Ciphertext, Key, Nonce, Plaintext

__all__ = [
    "AesGcmError",
    "Ciphertext",
    "DecryptionError",
    "DecryptionFailedError",
    "EncryptionError",
    "InvalidBase64Error",
    "InvalidKeySizeError",
    "InvalidKeyTextError",
    "InvalidNonceSizeError",
    "InvalidSizeError",
    "InvalidUtf8OutputError",
    "Key",
    "Nonce",
    "Plaintext",
    "decrypt",
    "encrypt",
]
