# --------------------------------------------------------------
# File: test_models.py
# Description: Pruebas de validación de clave, nonce, ciphertext y texto en claro.
# --------------------------------------------------------------

import base64
import os

import pytest
from pydantic import ValidationError

from simple_aes256_gcm.errors import (
    AesGcmError,
    InvalidBase64Error,
    InvalidKeySizeError,
    InvalidKeyTextError,
    InvalidNonceSizeError,
)
from simple_aes256_gcm.models import Ciphertext, Key, Nonce, Plaintext


def b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


@pytest.mark.parametrize("size", [0, 16, 31, 33, 64])
def test_key_from_bytes_rejects_wrong_size(size):
    """Comprueba que solo se acepten claves de 32 bytes.

    Args:
        size (int): Longitud inválida de la clave.

    Returns:
        None: Se espera InvalidKeySizeError con la longitud recibida.
    """
    with pytest.raises(InvalidKeySizeError) as info:
        Key.from_bytes(b"\x01" * size)
    assert info.value.actual == size
    assert info.value.expected == 32


@pytest.mark.parametrize("value", [32, 0, "01234567890123456789012345678901", None])
def test_key_from_bytes_rejects_non_bytes(value):
    """Comprueba que un entero o un texto no se acepten como material de clave.

    Args:
        value (object): Valor que no es de tipo bytes.

    Returns:
        None: Se espera TypeError en lugar de una clave de ceros.
    """
    with pytest.raises(TypeError):
        Key.from_bytes(value)


def test_nonce_and_ciphertext_from_bytes_reject_integers():
    """Verifica que un recuento de bytes no se convierta en nonce o ciphertext.

    Returns:
        None: Se espera TypeError para ambos constructores.
    """
    with pytest.raises(TypeError):
        Nonce.from_bytes(12)
    with pytest.raises(TypeError):
        Ciphertext.from_bytes(16)


def test_from_bytes_accepts_memoryview():
    """Asegura que cualquier búfer de bytes siga siendo válido.

    Returns:
        None: Las aserciones comparan el contenido copiado.
    """
    raw = os.urandom(32)
    assert Key.from_bytes(memoryview(raw)).data == raw
    assert Nonce.from_bytes(memoryview(raw[:12])).data == raw[:12]


def test_key_from_bytes_preserves_content():
    """Verifica que la clave conserve exactamente los bytes recibidos.

    Returns:
        None: Las aserciones comparan el material de la clave.
    """
    raw = os.urandom(32)
    assert Key.from_bytes(raw).data == raw
    assert Key.from_bytes(bytearray(raw)).data == raw


def test_key_from_base64_roundtrip():
    """Comprueba que from_base64 y to_base64 sean inversas.

    Returns:
        None: Las aserciones comparan la clave reconstruida.
    """
    key = Key.from_bytes(os.urandom(32))
    assert Key.from_base64(key.to_base64()) == key


def test_key_from_base64_errors():
    """Valida los dos tipos de fallo al decodificar una clave.

    Returns:
        None: Se esperan InvalidBase64Error e InvalidKeySizeError.
    """
    with pytest.raises(InvalidBase64Error):
        Key.from_base64("esto no es base64")
    with pytest.raises(InvalidKeySizeError):
        Key.from_base64(b64(b"\x00" * 33))


def test_key_from_str_uses_utf8_bytes():
    """Asegura que una clave de texto use sus bytes UTF-8.

    Returns:
        None: Las aserciones comparan con la clave construida desde bytes.
    """
    text = "01234567890123456789012345678901"
    assert Key.from_str(text) == Key.from_bytes(text.encode("ascii"))
    assert len(Key.from_str("é" * 16).data) == 32
    with pytest.raises(InvalidKeySizeError):
        Key.from_str("é" * 32)


def test_key_repr_hides_material():
    """Comprueba que repr no exponga el material de la clave.

    Returns:
        None: Las aserciones buscan el material en la representación.
    """
    key = Key.from_str("01234567890123456789012345678901")
    assert "0123456789" not in repr(key)
    assert key.to_base64() not in repr(key)


def test_models_are_immutable():
    """Verifica que los tipos de valor no admitan reasignación.

    Returns:
        None: Se espera ValidationError al asignar.
    """
    key = Key.from_bytes(b"\x00" * 32)
    nonce = Nonce.generate()
    with pytest.raises(ValidationError):
        key.data = b"\x01" * 32
    with pytest.raises(ValidationError):
        nonce.data = b"\x01" * 12


def test_direct_construction_validates():
    """Comprueba que la construcción directa mantenga los invariantes.

    Returns:
        None: Se espera ValidationError para tamaños o tipos inválidos.
    """
    with pytest.raises(ValidationError):
        Key(data=b"\x00" * 31)
    with pytest.raises(ValidationError):
        Key(data="0" * 32)
    with pytest.raises(ValidationError):
        Nonce(data=b"\x00" * 13)


@pytest.mark.parametrize("size", [11, 13])
def test_nonce_from_base64_rejects_wrong_size(size):
    """Garantiza que solo se acepten nonces de 12 bytes.

    Args:
        size (int): Longitud inválida del nonce.

    Returns:
        None: Se espera InvalidNonceSizeError.
    """
    with pytest.raises(InvalidNonceSizeError):
        Nonce.from_base64(b64(b"\x00" * size))


def test_nonce_from_base64_accepts_twelve_bytes():
    """Valida la reconstrucción de un nonce de 12 bytes desde Base64.

    Returns:
        None: Las aserciones comparan bytes y representación textual.
    """
    raw = os.urandom(12)
    nonce = Nonce.from_base64(b64(raw))
    assert nonce.data == raw
    assert nonce.to_base64() == b64(raw)
    assert str(nonce) == b64(raw)
    assert len(str(nonce)) == 16


def test_nonce_from_base64_rejects_invalid_base64():
    """Comprueba que un IV mal codificado produzca InvalidBase64Error.

    Returns:
        None: Se espera la excepción tipada.
    """
    with pytest.raises(InvalidBase64Error):
        Nonce.from_base64("%%%%%%%%%%%%%%%%")


def test_nonce_from_bytes():
    """Verifica el control de tamaño al construir un nonce desde bytes.

    Returns:
        None: Las aserciones cubren el caso válido e inválido.
    """
    raw = os.urandom(12)
    assert Nonce.from_bytes(raw).data == raw
    with pytest.raises(InvalidNonceSizeError):
        Nonce.from_bytes(raw + b"\x00")


def test_nonce_generate_is_unique():
    """Evalúa que dos nonces generados consecutivamente sean distintos.

    Returns:
        None: Las aserciones comprueban longitud y desigualdad.
    """
    first = Nonce.generate()
    second = Nonce.generate()
    assert len(first.data) == 12
    assert first != second


def test_ciphertext_accepts_any_length():
    """Comprueba que el ciphertext no tenga restricción de tamaño.

    Returns:
        None: Las aserciones revisan longitudes y la ida y vuelta Base64.
    """
    for size in (0, 1, 17, 1000):
        raw = os.urandom(size)
        ct = Ciphertext.from_base64(b64(raw))
        assert ct.data == raw
        assert len(ct) == size
        assert str(ct) == ct.to_base64() == b64(raw)
    assert Ciphertext.from_bytes(bytearray(b"abc")).data == b"abc"


def test_ciphertext_rejects_invalid_base64():
    """Garantiza que un ciphertext mal codificado produzca InvalidBase64Error.

    Returns:
        None: Se espera la excepción tipada.
    """
    with pytest.raises(InvalidBase64Error):
        Ciphertext.from_base64("abc$")


def test_plaintext_wraps_text_only():
    """Verifica que Plaintext acepte texto y rechace bytes.

    Returns:
        None: Las aserciones revisan conversión y rechazo de tipos.
    """
    plaintext = Plaintext.from_str("hola mundo ñ")
    assert str(plaintext) == "hola mundo ñ"
    assert plaintext.to_bytes() == "hola mundo ñ".encode("utf-8")
    with pytest.raises(TypeError):
        Plaintext.from_str(b"hola")
    with pytest.raises(ValidationError):
        Plaintext(text=b"hola")


def test_plaintext_rejects_unencodable_text():
    """Comprueba que un surrogate aislado no sea aceptado como texto en claro.

    Returns:
        None: Se espera ValidationError.
    """
    with pytest.raises(ValidationError):
        Plaintext.from_str("\ud800")


def test_key_from_str_rejects_unencodable_text():
    """Comprueba que una clave con surrogates aislados dé un error del paquete.

    Returns:
        None: Se espera InvalidKeyTextError encadenado con el error de codificación.
    """
    with pytest.raises(InvalidKeyTextError) as info:
        Key.from_str("\udc80" * 32)
    assert isinstance(info.value, AesGcmError)
    assert isinstance(info.value.__cause__, UnicodeEncodeError)
