# --------------------------------------------------------------
# File: codec.py
# Description: Conversión entre bytes de longitud fija y texto Base64 estándar.
# --------------------------------------------------------------
"""Codificación Base64 (RFC 4648, alfabeto estándar con relleno)."""

from __future__ import annotations

import base64
import binascii
from typing import Type

from simple_aes256_gcm.errors import InvalidBase64Error, InvalidSizeError

__all__ = ["decode", "decode_fixed", "encode"]


def encode(data: bytes) -> str:
    """Codifica datos binarios en Base64 estándar con relleno."""

    return base64.b64encode(data).decode("ascii")


def decode(text: str) -> bytes:
    """Decodifica Base64 estándar rechazando caracteres fuera del alfabeto.

    Args:
        text (str): Cadena Base64 con relleno.

    Returns:
        bytes: Datos binarios originales.

    Raises:
        InvalidBase64Error: Si la cadena no es Base64 válido.

    """

    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidBase64Error("Cadena Base64 inválida.") from exc


def decode_fixed(
    text: str, size: int, error: Type[InvalidSizeError] = InvalidSizeError
) -> bytes:
    """Decodifica Base64 y exige una longitud exacta en bytes.

    La validez del Base64 se comprueba antes que la longitud.

    Args:
        text (str): Cadena Base64 con relleno.
        size (int): Número de bytes esperado tras decodificar.
        error (Type[InvalidSizeError]): Excepción lanzada si la longitud no coincide.

    Returns:
        bytes: Exactamente `size` bytes.

    """

    data = decode(text)
    if len(data) != size:
        raise error(expected=size, actual=len(data))
    return data
