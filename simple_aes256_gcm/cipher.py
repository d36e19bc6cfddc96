# --------------------------------------------------------------
# File: cipher.py
# Description: Cifrado y descifrado AES-256-GCM de textos con nonce aleatorio.
# --------------------------------------------------------------
"""Operaciones `encrypt` y `decrypt` sobre los tipos de valor del paquete."""

from __future__ import annotations

from typing import Tuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from simple_aes256_gcm.errors import (
    DecryptionFailedError,
    EncryptionError,
    InvalidUtf8OutputError,
)
from simple_aes256_gcm.models import Ciphertext, Key, Nonce, Plaintext

__all__ = ["decrypt", "encrypt"]


def _require(value: object, expected: type, name: str) -> None:
    if not isinstance(value, expected):
        raise TypeError(
            f"`{name}` debe ser {expected.__name__}, no {type(value).__name__}."
        )


def encrypt(key: Key, plaintext: Plaintext) -> Tuple[Ciphertext, Nonce]:
    """Cifra un texto con AES-256-GCM usando un nonce nuevo de 96 bits.

    El nonce se genera aquí en cada llamada; no se admite uno externo.

    Args:
        key (Key): Clave de 256 bits.
        plaintext (Plaintext): Texto a cifrar, sin datos adicionales autenticados.

    Returns:
        Tuple[Ciphertext, Nonce]: Ciphertext con la etiqueta anexada y el
        nonce que debe acompañarlo.

    Raises:
        EncryptionError: Si la primitiva rechaza la operación.

    """

    _require(key, Key, "key")
    _require(plaintext, Plaintext, "plaintext")

    nonce = Nonce.generate()
    try:
        ct_full = AESGCM(key.data).encrypt(nonce.data, plaintext.to_bytes(), None)
    except (ValueError, OverflowError) as exc:
        raise EncryptionError("No se ha podido cifrar el mensaje.") from exc
    return Ciphertext(data=ct_full), nonce


def decrypt(key: Key, ciphertext: Ciphertext, nonce: Nonce) -> str:
    """Verifica y descifra un ciphertext producido por :func:`encrypt`.

    Args:
        key (Key): Clave usada al cifrar.
        ciphertext (Ciphertext): Datos cifrados con su etiqueta.
        nonce (Nonce): Nonce devuelto junto al ciphertext.

    Returns:
        str: Texto original.

    Raises:
        DecryptionFailedError: Si la etiqueta no verifica. No distingue entre
            clave errónea, nonce erróneo o datos manipulados.
        InvalidUtf8OutputError: Si el mensaje autenticado no es UTF-8.

    """

    _require(key, Key, "key")
    _require(ciphertext, Ciphertext, "ciphertext")
    _require(nonce, Nonce, "nonce")

    try:
        data = AESGCM(key.data).decrypt(nonce.data, ciphertext.data, None)
    except InvalidTag:
        raise DecryptionFailedError("No se ha podido descifrar el mensaje.") from None

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidUtf8OutputError("El mensaje descifrado no es UTF-8 válido.") from exc
