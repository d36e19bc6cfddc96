# --------------------------------------------------------------
# File: models.py
# Description: Tipos de valor inmutables para clave, nonce, ciphertext y texto.
# --------------------------------------------------------------
"""Modelos Pydantic que validan el material criptográfico y su forma textual.

Cada modelo es inmutable (``frozen``) y se construye con métodos de clase que
lanzan las excepciones de :mod:`simple_aes256_gcm.errors`. La construcción
directa también valida los invariantes, pero los informa como
``pydantic.ValidationError``.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from simple_aes256_gcm.codec import decode, decode_fixed, encode
from simple_aes256_gcm.errors import (
    InvalidKeySizeError,
    InvalidKeyTextError,
    InvalidNonceSizeError,
)

__all__ = ["Ciphertext", "Key", "Nonce", "Plaintext", "KEY_SIZE", "NONCE_SIZE", "TAG_SIZE"]

KEY_SIZE = 32
NONCE_SIZE = 12
TAG_SIZE = 16


def _copy_bytes(data: bytes) -> bytes:
    """Copia un objeto tipo bytes rechazando enteros, textos y otros tipos.

    Args:
        data (bytes): `bytes`, `bytearray`, `memoryview` u otro búfer.

    Returns:
        bytes: Copia inmutable del contenido.

    Raises:
        TypeError: Si `data` no expone el protocolo de búfer.

    """

    try:
        return memoryview(data).tobytes()
    except TypeError:
        raise TypeError(
            f"Se esperaban bytes, se recibió {type(data).__name__}."
        ) from None


class Key(BaseModel):
    """Clave secreta AES-256 de exactamente 32 bytes.

    Attributes:
        data (bytes): Material de la clave; nunca aparece en ``repr``.

    """

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(strict=True, repr=False)

    @field_validator("data")
    @classmethod
    def _check_size(cls, value: bytes) -> bytes:
        if len(value) != KEY_SIZE:
            raise InvalidKeySizeError(expected=KEY_SIZE, actual=len(value))
        return value

    @classmethod
    def from_bytes(cls, data: bytes) -> "Key":
        """Crea la clave copiando bytes crudos.

        Args:
            data (bytes): Material de 32 bytes.

        Returns:
            Key: Clave inmutable.

        Raises:
            TypeError: Si `data` no es un objeto tipo bytes.
            InvalidKeySizeError: Si la longitud no es 32.

        """

        raw = _copy_bytes(data)
        if len(raw) != KEY_SIZE:
            raise InvalidKeySizeError(expected=KEY_SIZE, actual=len(raw))
        return cls(data=raw)

    @classmethod
    def from_base64(cls, text: str) -> "Key":
        """Crea la clave a partir de su representación Base64."""

        return cls(data=decode_fixed(text, KEY_SIZE, InvalidKeySizeError))

    @classmethod
    def from_str(cls, text: str) -> "Key":
        """Crea la clave con los bytes UTF-8 de un texto de 32 bytes.

        Args:
            text (str): Texto cuya codificación UTF-8 ocupa 32 bytes.

        Returns:
            Key: Clave inmutable.

        Raises:
            InvalidKeyTextError: Si el texto no es codificable en UTF-8.
            InvalidKeySizeError: Si la codificación no ocupa 32 bytes.

        """

        try:
            raw = text.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise InvalidKeyTextError("La clave no es codificable en UTF-8.") from exc
        return cls.from_bytes(raw)

    def to_base64(self) -> str:
        """Devuelve la clave en Base64 estándar."""

        return encode(self.data)


class Nonce(BaseModel):
    """Nonce (IV) de 96 bits usado una única vez por mensaje cifrado."""

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(strict=True)

    @field_validator("data")
    @classmethod
    def _check_size(cls, value: bytes) -> bytes:
        if len(value) != NONCE_SIZE:
            raise InvalidNonceSizeError(expected=NONCE_SIZE, actual=len(value))
        return value

    @classmethod
    def generate(cls) -> "Nonce":
        """Genera un nonce con 12 bytes del generador seguro del sistema."""

        return cls(data=os.urandom(NONCE_SIZE))

    @classmethod
    def from_bytes(cls, data: bytes) -> "Nonce":
        """Crea el nonce copiando 12 bytes crudos.

        Args:
            data (bytes): Nonce de 12 bytes.

        Returns:
            Nonce: Nonce inmutable.

        Raises:
            TypeError: Si `data` no es un objeto tipo bytes.
            InvalidNonceSizeError: Si la longitud no es 12.

        """

        raw = _copy_bytes(data)
        if len(raw) != NONCE_SIZE:
            raise InvalidNonceSizeError(expected=NONCE_SIZE, actual=len(raw))
        return cls(data=raw)

    @classmethod
    def from_base64(cls, text: str) -> "Nonce":
        """Reconstruye el nonce recibido junto a un ciphertext.

        Args:
            text (str): Nonce en Base64 (16 caracteres).

        Returns:
            Nonce: Nonce de 12 bytes.

        Raises:
            InvalidBase64Error: Si el texto no es Base64 válido.
            InvalidNonceSizeError: Si no decodifica a 12 bytes.

        """

        return cls(data=decode_fixed(text, NONCE_SIZE, InvalidNonceSizeError))

    def to_base64(self) -> str:
        """Devuelve el nonce en Base64 estándar (16 caracteres)."""

        return encode(self.data)

    def __str__(self) -> str:
        return self.to_base64()


class Ciphertext(BaseModel):
    """Secuencia opaca de bytes cifrados con la etiqueta de 16 bytes al final."""

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(strict=True)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Ciphertext":
        """Crea el ciphertext copiando bytes crudos de cualquier longitud.

        Args:
            data (bytes): Datos cifrados con la etiqueta anexada.

        Returns:
            Ciphertext: Ciphertext inmutable.

        Raises:
            TypeError: Si `data` no es un objeto tipo bytes.

        """

        return cls(data=_copy_bytes(data))

    @classmethod
    def from_base64(cls, text: str) -> "Ciphertext":
        """Decodifica el ciphertext; su longitud depende del mensaje."""

        return cls(data=decode(text))

    def to_base64(self) -> str:
        """Devuelve el ciphertext en Base64 estándar."""

        return encode(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __str__(self) -> str:
        return self.to_base64()


class Plaintext(BaseModel):
    """Texto en claro de entrada a ``encrypt``.

    Existe para que el segundo argumento de ``encrypt`` sea un texto y no un
    búfer de bytes arbitrario (una clave o un ciphertext).
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(strict=True)

    @field_validator("text")
    @classmethod
    def _check_encodable(cls, value: str) -> str:
        try:
            value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValueError("El texto no es codificable en UTF-8.") from exc
        return value

    @classmethod
    def from_str(cls, text: str) -> "Plaintext":
        """Envuelve un texto para cifrarlo.

        Args:
            text (str): Texto en claro.

        Returns:
            Plaintext: Texto en claro inmutable.

        Raises:
            TypeError: Si `text` no es `str`.

        """

        if not isinstance(text, str):
            raise TypeError(f"Se esperaba str, se recibió {type(text).__name__}.")
        return cls(text=text)

    def to_bytes(self) -> bytes:
        """Devuelve los bytes UTF-8 del texto."""

        return self.text.encode("utf-8")

    def __str__(self) -> str:
        return self.text
