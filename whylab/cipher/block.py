from __future__ import annotations

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .errors import InvalidArgument, InvalidKeySize

AES_KEY_SIZES = (16, 24, 32)
BLOCK_SIZE_BITS = 128
ZERO_IV = bytes(16)


def _aes_cbc(key: bytes, iv: bytes) -> Cipher:
    if len(key) not in AES_KEY_SIZES:
        raise InvalidKeySize(f"AES key must be 16, 24 or 32 bytes, got {len(key)}")
    if len(iv) != BLOCK_SIZE_BITS // 8:
        raise InvalidArgument(f"CBC IV must be 16 bytes, got {len(iv)}")
    return Cipher(algorithms.AES(key), modes.CBC(iv))


def aes_cbc_encrypt(data: bytes, key: bytes, iv: bytes = ZERO_IV) -> bytes:
    """AES-CBC with PKCS7 padding. A zero IV is the pipeline default."""
    cipher = _aes_cbc(key, iv)
    padder = padding.PKCS7(BLOCK_SIZE_BITS).padder()
    padded = padder.update(data) + padder.finalize()
    encryptor = cipher.encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def aes_cbc_decrypt(data: bytes, key: bytes, iv: bytes = ZERO_IV) -> bytes:
    cipher = _aes_cbc(key, iv)
    decryptor = cipher.decryptor()
    padded = decryptor.update(data) + decryptor.finalize()
    unpadder = padding.PKCS7(BLOCK_SIZE_BITS).unpadder()
    return unpadder.update(padded) + unpadder.finalize()
