"""Big-integer stage: value ** e mod M over the mixed bytes.

There is no private key and M is public, so this is an opaque deterministic
transform rather than an RSA-style primitive.
"""
from __future__ import annotations

from .spec import DEFAULT_MODULUS, PipelineSpec


def signed_int_from_bytes(data: bytes, byteorder: str = "big") -> int:
    # An empty array decodes to zero, as with System.Numerics.BigInteger.
    if not data:
        return 0
    return int.from_bytes(data, byteorder, signed=True)


def signed_int_to_bytes(value: int, byteorder: str = "big") -> bytes:
    """Minimal two's-complement encoding, keeping a sign byte when needed.

    0 -> b"\\x00", 128 -> b"\\x00\\x80" (big-endian), -1 -> b"\\xff".
    """
    magnitude = value if value >= 0 else ~value
    length = (magnitude.bit_length() + 8) // 8
    return value.to_bytes(length, byteorder, signed=True)


def truncated_modpow(base: int, exponent: int, modulus: int) -> int:
    """Modular power whose result carries the sign of ``base ** exponent``."""
    r = pow(abs(base), exponent, modulus)
    if base < 0 and exponent % 2 == 1:
        return -r
    return r


def modpow_transform(data: bytes, spec: PipelineSpec | None = None) -> bytes:
    spec = spec or PipelineSpec()
    byteorder = "little" if spec.profile == "dotnet" else "big"

    value = signed_int_from_bytes(data, byteorder)
    if spec.profile == "dotnet":
        result = truncated_modpow(value, spec.public_exponent, spec.modulus)
    else:
        result = pow(value, spec.public_exponent, spec.modulus)
    return signed_int_to_bytes(result, byteorder)


__all__ = [
    "DEFAULT_MODULUS",
    "signed_int_from_bytes",
    "signed_int_to_bytes",
    "truncated_modpow",
    "modpow_transform",
]
