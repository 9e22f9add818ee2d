import pytest

from whylab.cipher.modexp import (
    DEFAULT_MODULUS,
    modpow_transform,
    signed_int_from_bytes,
    signed_int_to_bytes,
    truncated_modpow,
)
from whylab.cipher.spec import PipelineSpec


def test_default_modulus():
    assert DEFAULT_MODULUS == 2**128 - 159


@pytest.mark.parametrize(
    "value,expected",
    [
        (0, "00"),
        (1, "01"),
        (127, "7f"),
        (128, "0080"),
        (255, "00ff"),
        (-1, "ff"),
        (-128, "80"),
        (-129, "ff7f"),
    ],
)
def test_signed_int_to_bytes_big_endian(value, expected):
    assert signed_int_to_bytes(value).hex() == expected


def test_signed_int_to_bytes_little_endian_keeps_sign_byte_last():
    assert signed_int_to_bytes(128, "little").hex() == "8000"
    assert signed_int_to_bytes(-129, "little").hex() == "7fff"


def test_signed_int_from_bytes():
    assert signed_int_from_bytes(b"") == 0
    assert signed_int_from_bytes(b"\xff") == -1
    assert signed_int_from_bytes(b"\x00\x80") == 128
    assert signed_int_from_bytes(b"\x00\x80", "little") == -32768


def test_truncated_modpow_keeps_sign_of_base():
    assert truncated_modpow(-2, 3, 7) == -1
    assert pow(-2, 3, 7) == 6
    assert truncated_modpow(-2, 2, 7) == 4
    assert truncated_modpow(5, 3, 7) == 6


def test_modpow_transform_standard_reference():
    mixed = bytes.fromhex("1d7d9193f7463fc6c30bd809d7caee996be375b26b0d9cb3e9f5bfd90df4a461")
    assert modpow_transform(mixed).hex() == "46063b65644d3f1814e3cce1491ee12d"


def test_modpow_transform_dotnet_reference():
    mixed = bytes.fromhex("1d7d9193f7463fc6c30bd809d7caee996be375b26b0d9cb3e9f5bfd90df4a461")
    spec = PipelineSpec(profile="dotnet")
    assert modpow_transform(mixed, spec).hex() == "2914217ee280cfafce5f479a853f5222"


def test_modpow_transform_negative_input_profiles_differ():
    negative = b"\xff" * 5     # -1 in both byte orders
    standard = modpow_transform(negative)
    dotnet = modpow_transform(negative, PipelineSpec(profile="dotnet"))

    assert signed_int_from_bytes(standard) >= 0
    assert signed_int_from_bytes(dotnet, "little") < 0


def test_modpow_transform_result_below_modulus():
    out = modpow_transform(b"\x7f" + b"\xff" * 40)
    assert 0 <= signed_int_from_bytes(out) < DEFAULT_MODULUS
