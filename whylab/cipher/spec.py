from __future__ import annotations

import hashlib
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from .errors import InvalidArgument


Profile = Literal["standard", "dotnet"]

# 2**128 - 159
DEFAULT_MODULUS = 340282366920938463463374607431768211297

SUPPORTED_HASHES = (
    "sha256",
    "sha224",
    "sha384",
    "sha512",
    "sha1",
    "md5",
    "blake2s",
    "blake2b",
    "sha3_256",
)


class PipelineSpec(BaseModel):
    """Constants of the ObfuscatedEncrypt pipeline.

    The defaults reproduce the reference construction. None of these values
    are secret and the pipeline is NOT a vetted cipher; this model only exists
    so the analysis tooling can vary one knob at a time.

    profile:
      - "standard": big-endian signed integers, floor modulus, textbook Feistel.
      - "dotnet":   little-endian two's complement, truncated remainder and
                    aliased Feistel halves, matching System.Numerics.BigInteger
                    and the by-reference array swap of the C# program.
    """

    hash_name: str = Field(default="sha256")
    key_length: int = Field(default=32, ge=1, le=4096)
    public_exponent: int = Field(default=65537, ge=1)
    modulus: int = Field(default=DEFAULT_MODULUS, gt=1)
    feistel_rounds: int = Field(default=16, ge=1, le=256)
    round_key_length: int = Field(default=8, ge=1, le=256)
    sbox_constant: int = Field(default=42, ge=0, le=255)
    profile: Profile = Field(default="standard")
    strict_permutation: bool = Field(default=False, description="Raise PermutationBug on lossy lengths")

    @field_validator("hash_name")
    @classmethod
    def _lower_hash(cls, v: str) -> str:
        # "SHA3-256" -> "sha3_256", "SHA-256" -> "sha256"
        v = v.strip().lower()
        if v.startswith("sha3-"):
            v = "sha3_" + v[len("sha3-"):]
        return v.replace("-", "")

    @field_validator("profile", mode="before")
    @classmethod
    def _lower_profile(cls, v):
        return v.strip().lower() if isinstance(v, str) else v

    @property
    def digest_size(self) -> int:
        if self.hash_name not in SUPPORTED_HASHES:
            raise InvalidArgument(f"Unsupported hash: {self.hash_name}")
        return hashlib.new(self.hash_name).digest_size
