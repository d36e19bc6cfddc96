# --------------------------------------------------------------
# File: messages.py
# Description: Mensajes legibles para cada tipo de error del cifrado.
# --------------------------------------------------------------
"""Traducción de excepciones tipadas a mensajes para la interfaz."""

from __future__ import annotations

from typing import List, Tuple, Type

from simple_aes256_gcm.errors import (
    DecryptionFailedError,
    EncryptionError,
    InvalidBase64Error,
    InvalidKeySizeError,
    InvalidKeyTextError,
    InvalidNonceSizeError,
    InvalidSizeError,
    InvalidUtf8OutputError,
)

__all__ = ["describe_error"]

# Las subclases van antes que sus bases.
_MESSAGES: List[Tuple[Type[BaseException], str]] = [
    (InvalidKeySizeError, "La clave debe medir exactamente 32 bytes."),
    (InvalidKeyTextError, "La clave debe ser texto UTF-8 válido."),
    (InvalidNonceSizeError, "El IV debe medir exactamente 12 bytes."),
    (InvalidSizeError, "El valor no tiene el tamaño esperado."),
    (InvalidBase64Error, "El texto no es Base64 válido."),
    (EncryptionError, "Error inesperado al cifrar."),
    (DecryptionFailedError, "No se ha podido descifrar: clave, IV o datos incorrectos."),
    (InvalidUtf8OutputError, "El mensaje descifrado no es texto UTF-8."),
]

GENERIC_MESSAGE = "Error desconocido."


def describe_error(exc: BaseException) -> str:
    """Devuelve un mensaje distinto por tipo de error sin detalles internos.

    Args:
        exc (BaseException): Excepción capturada en la capa de interfaz.

    Returns:
        str: Mensaje apto para mostrar al usuario.

    """

    for exc_type, message in _MESSAGES:
        if isinstance(exc, exc_type):
            return message
    return GENERIC_MESSAGE
