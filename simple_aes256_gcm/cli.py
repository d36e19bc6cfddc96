# --------------------------------------------------------------
# File: cli.py
# Description: Programa de demostración que cifra y descifra un mensaje fijo.
# --------------------------------------------------------------
"""Demostración por consola del flujo completo de cifrado y descifrado."""

from __future__ import annotations

import logging
import sys

from simple_aes256_gcm import config
from simple_aes256_gcm.cipher import decrypt, encrypt
from simple_aes256_gcm.errors import AesGcmError
from simple_aes256_gcm.messages import describe_error
from simple_aes256_gcm.models import Ciphertext, Key, Nonce, Plaintext

log = logging.getLogger("simple_aes256_gcm.cli")


def load_demo_key() -> Key:
    """Construye la clave configurada, priorizando `DEMO_KEY_B64`."""

    if config.DEMO_KEY_B64:
        return Key.from_base64(config.DEMO_KEY_B64)
    return Key.from_str(config.DEMO_KEY)


def run() -> None:
    """Cifra el mensaje configurado, lo reconstruye desde Base64 y lo descifra."""

    key = load_demo_key()
    plaintext = Plaintext.from_str(config.DEMO_MESSAGE)
    ciphertext, nonce = encrypt(key, plaintext)
    log.debug("cifrado: ct_len=%d bytes nonce=%d bits", len(ciphertext), len(nonce.data) * 8)

    print(f"PLAIN TEXT: {plaintext}\n")
    print(f"IV: {nonce}\n")
    print(f"ENCRYPTED: {ciphertext}\n")

    # El par viaja como dos cadenas Base64 independientes.
    received_ct = Ciphertext.from_base64(ciphertext.to_base64())
    received_nonce = Nonce.from_base64(nonce.to_base64())
    print(f"DECRYPTED: {decrypt(key, received_ct, received_nonce)}\n")


def main() -> int:
    """Ejecuta la demo configurando el logging y traduciendo los errores.

    Returns:
        int: Código de salida, 0 si la demo termina y 1 ante un error tipado.

    """

    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s [cli] %(message)s",
    )
    try:
        run()
    except AesGcmError as exc:
        log.debug("demo abortada: %s", type(exc).__name__)
        print(describe_error(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
