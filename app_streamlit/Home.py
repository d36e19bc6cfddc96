# --------------------------------------------------------------
# File: Home.py
# Description: Página de Streamlit para cifrar y descifrar textos con AES-256-GCM.
# --------------------------------------------------------------

import streamlit as st

from simple_aes256_gcm import config
from simple_aes256_gcm.cipher import decrypt, encrypt
from simple_aes256_gcm.errors import AesGcmError
from simple_aes256_gcm.messages import describe_error
from simple_aes256_gcm.models import Ciphertext, Key, Nonce, Plaintext


def parse_key(value: str, is_b64: bool) -> Key:
    """Construye la clave desde el formulario.

    Args:
        value (str): Clave en texto de 32 bytes o en Base64.
        is_b64 (bool): Indica si `value` está codificada en Base64.

    Returns:
        Key: Clave validada.
    """
    return Key.from_base64(value.strip()) if is_b64 else Key.from_str(value)


# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Simple AES-256-GCM", page_icon="🔐", layout="centered")

st.title("🔐 Simple AES-256-GCM")
st.write("Cifrado autenticado de textos cortos. El IV se genera en cada cifrado.")

# La clave es común a ambos formularios.
key_text = st.text_input("Clave", value=config.DEMO_KEY_B64 or config.DEMO_KEY, type="password")
key_is_b64 = st.checkbox("La clave está en Base64", value=bool(config.DEMO_KEY_B64))

st.header("Cifrar")
message = st.text_area("Texto en claro", value=config.DEMO_MESSAGE)
if st.button("Cifrar con AES-GCM"):
    try:
        key = parse_key(key_text, key_is_b64)
        ciphertext, nonce = encrypt(key, Plaintext.from_str(message))
    except AesGcmError as exc:
        st.error(describe_error(exc))
    else:
        st.success("Texto cifrado (AES-GCM-256).")
        st.code(f"IV: {nonce}\nENCRYPTED: {ciphertext}")
        st.caption(f"nonce={len(nonce.data)*8} bits | ct_len={len(ciphertext)} bytes (incluye tag de 128 bits)")

st.header("Descifrar")
nonce_text = st.text_input("IV (Base64)")
ciphertext_text = st.text_area("Ciphertext (Base64)")
if st.button("Descifrar"):
    try:
        key = parse_key(key_text, key_is_b64)
        recovered = decrypt(
            key,
            Ciphertext.from_base64(ciphertext_text.strip()),
            Nonce.from_base64(nonce_text.strip()),
        )
    except AesGcmError as exc:
        st.error(describe_error(exc))
    else:
        st.success("Texto descifrado y autenticado.")
        st.code(recovered)
