# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del cifrado AES-256-GCM de textos.
# --------------------------------------------------------------
"""Excepciones tipadas que devuelven la validación y las operaciones de cifrado."""

from __future__ import annotations

__all__ = [
    "AesGcmError",
    "DecryptionError",
    "DecryptionFailedError",
    "EncryptionError",
    "InvalidBase64Error",
    "InvalidKeySizeError",
    "InvalidKeyTextError",
    "InvalidNonceSizeError",
    "InvalidSizeError",
    "InvalidUtf8OutputError",
]


class AesGcmError(Exception):
    """Excepción base de todos los errores del paquete."""


class InvalidBase64Error(AesGcmError, ValueError):
    """El texto recibido no es Base64 estándar válido."""


class InvalidKeyTextError(AesGcmError, ValueError):
    """La clave de texto no es codificable en UTF-8."""


class InvalidSizeError(AesGcmError, ValueError):
    """Los bytes decodificados no tienen la longitud fija esperada.

    Attributes:
        expected (int): Longitud exigida en bytes.
        actual (int): Longitud recibida en bytes.

    """

    what = "valor"

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Tamaño de {self.what} inválido: se esperaban {expected} bytes, "
            f"se recibieron {actual}."
        )


class InvalidKeySizeError(InvalidSizeError):
    """La clave no mide exactamente 32 bytes."""

    what = "clave"


class InvalidNonceSizeError(InvalidSizeError):
    """El nonce no mide exactamente 12 bytes."""

    what = "nonce"


class EncryptionError(AesGcmError):
    """La primitiva AES-GCM rechazó entradas bien formadas."""


class DecryptionError(AesGcmError):
    """Base de los fallos producidos al descifrar."""


class DecryptionFailedError(DecryptionError):
    """Fallo de autenticación: clave, nonce o ciphertext incorrectos."""


class InvalidUtf8OutputError(DecryptionError):
    """El mensaje se autenticó pero sus bytes no son UTF-8 válido."""
