"""ObfuscatedEncrypt: the composed pipeline.

hash(data || key) -> XOR with expanded key -> permute -> S-box -> modpow
-> Feistel -> AES-CBC under hash(expanded key) -> hash.

Research / education only. Do NOT use in production.
"""
from __future__ import annotations

import base64
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from ..step_logger import StepLogger
from .block import ZERO_IV, aes_cbc_encrypt
from .components import (
    expand_key,
    generate_sbox,
    hash_bytes,
    permute_bytes,
    substitute_bytes,
    xor_bytes,
)
from .errors import InvalidArgument
from .feistel import feistel_network
from .modexp import modpow_transform
from .spec import PipelineSpec


@dataclass(frozen=True)
class PipelineTrace:
    """Every intermediate value of one pipeline run."""
    data: bytes
    key: bytes
    intermediate: bytes
    expanded_key: bytes
    xored: bytes
    permuted: bytes
    substituted: bytes
    reduced: bytes
    feistel_out: bytes
    aes_key: bytes
    cipher_text: bytes
    digest: bytes

    def to_dict(self) -> Dict[str, Any]:
        return {k: v.hex() for k, v in asdict(self).items()}


@dataclass
class ObfuscatedEncrypt:
    spec: PipelineSpec
    step_logger: Optional[StepLogger] = None

    def __post_init__(self):
        if self.step_logger is None:
            self.step_logger = StepLogger()

    def encrypt(self, data: bytes, key: bytes) -> bytes:
        return self.trace(data, key).digest

    def trace(self, data: bytes, key: bytes) -> PipelineTrace:
        if not key:
            raise InvalidArgument("key must be non-empty")
        if not data:
            raise InvalidArgument("data must be non-empty")

        spec = self.spec
        log = self.step_logger.step

        intermediate = hash_bytes(data + key, spec.hash_name)
        log(f"Intermediate hash: {format_digest(intermediate, 'hyphen')}", "CRYPTO")

        expanded = expand_key(key, spec.key_length)
        log("Generating encryption keys...", "CRYPTO")

        xored = xor_bytes(intermediate, expanded)
        permuted = permute_bytes(xored, strict=spec.strict_permutation)
        substituted = substitute_bytes(permuted, generate_sbox(spec.sbox_constant))
        log(f"Mixed bytes: {substituted.hex()}", "CRYPTO")

        reduced = modpow_transform(substituted, spec)
        log(f"Modular exponentiation ({spec.profile}): {len(reduced)} bytes", "MATH")

        feistel_out = feistel_network(
            reduced,
            rounds=spec.feistel_rounds,
            round_key_length=spec.round_key_length,
            alias_halves=spec.profile == "dotnet",
        )
        log(f"Feistel output: {feistel_out.hex()}", "CRYPTO")

        aes_key = hash_bytes(expanded, spec.hash_name)
        cipher_text = aes_cbc_encrypt(feistel_out, aes_key, ZERO_IV)
        digest = hash_bytes(cipher_text, spec.hash_name)
        log(f"Encrypted hash: {format_digest(digest, 'hyphen')}", "CRYPTO")

        return PipelineTrace(
            data=bytes(data),
            key=bytes(key),
            intermediate=intermediate,
            expanded_key=expanded,
            xored=xored,
            permuted=permuted,
            substituted=substituted,
            reduced=reduced,
            feistel_out=feistel_out,
            aes_key=aes_key,
            cipher_text=cipher_text,
            digest=digest,
        )


def build_pipeline(spec: Optional[PipelineSpec] = None, step_logger: Optional[StepLogger] = None) -> ObfuscatedEncrypt:
    return ObfuscatedEncrypt(spec=spec or PipelineSpec(), step_logger=step_logger)


def encrypt(data: bytes, key: bytes, spec: Optional[PipelineSpec] = None) -> bytes:
    """Run the full pipeline and return the final digest."""
    return build_pipeline(spec).encrypt(data, key)


def format_digest(digest: bytes, style: str = "hex") -> str:
    """Render a digest as "hex", "hyphen" (2A-11-63) or "base64"."""
    style = style.lower()
    if style == "hex":
        return digest.hex()
    if style == "hyphen":
        return "-".join(f"{b:02X}" for b in digest)
    if style == "base64":
        return base64.b64encode(digest).decode("ascii")
    raise InvalidArgument(f"Unknown digest format: {style}")
