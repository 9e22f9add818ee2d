import pytest

from whylab.cipher.block import ZERO_IV, aes_cbc_decrypt, aes_cbc_encrypt
from whylab.cipher.errors import InvalidArgument, InvalidKeySize


@pytest.mark.parametrize("key_len", [16, 24, 32])
def test_aes_cbc_roundtrip(key_len):
    key = bytes(range(key_len))
    pt = b"why" * 11
    ct = aes_cbc_encrypt(pt, key)
    assert len(ct) % 16 == 0
    assert aes_cbc_decrypt(ct, key) == pt


def test_aes_cbc_pads_full_block():
    key = bytes(32)
    assert len(aes_cbc_encrypt(bytes(16), key)) == 32
    assert len(aes_cbc_encrypt(b"", key)) == 16


def test_aes_cbc_is_deterministic_with_zero_iv():
    key = bytes(range(32))
    assert aes_cbc_encrypt(b"abc", key) == aes_cbc_encrypt(b"abc", key, ZERO_IV)


def test_aes_cbc_reference_vector():
    key = bytes.fromhex("39070459faadce41cba5d7e52bad0b8916944f140aa611e8dc2a942bf3d932dc")
    pt = bytes.fromhex("ce370ae9131a9785262d03b4596b6aa5")
    assert aes_cbc_encrypt(pt, key).hex() == (
        "4f41a10e94958d364993289abb7358249701ad1dd2df2635034b21c4f977fe79"
    )


@pytest.mark.parametrize("key_len", [0, 15, 28, 48, 64])
def test_aes_cbc_rejects_bad_key_size(key_len):
    with pytest.raises(InvalidKeySize):
        aes_cbc_encrypt(b"data", bytes(key_len))


def test_aes_cbc_rejects_bad_iv():
    with pytest.raises(InvalidArgument):
        aes_cbc_encrypt(b"data", bytes(32), iv=bytes(8))
