from .block import aes_cbc_decrypt, aes_cbc_encrypt
from .components import (
    expand_key,
    generate_sbox,
    hash_bytes,
    inverse_sbox,
    is_permutation,
    permutation_collisions,
    permute_bytes,
    round_key,
    substitute_bytes,
    xor_bytes,
)
from .errors import InvalidArgument, InvalidKeySize, PermutationBug, WhyCryptoError
from .feistel import feistel_function, feistel_network
from .modexp import modpow_transform
from .pipeline import ObfuscatedEncrypt, PipelineTrace, build_pipeline, encrypt, format_digest
from .spec import PipelineSpec
from .validator import validate_spec

__all__ = [
    "aes_cbc_decrypt",
    "aes_cbc_encrypt",
    "expand_key",
    "generate_sbox",
    "hash_bytes",
    "inverse_sbox",
    "is_permutation",
    "permutation_collisions",
    "permute_bytes",
    "round_key",
    "substitute_bytes",
    "xor_bytes",
    "InvalidArgument",
    "InvalidKeySize",
    "PermutationBug",
    "WhyCryptoError",
    "feistel_function",
    "feistel_network",
    "modpow_transform",
    "ObfuscatedEncrypt",
    "PipelineTrace",
    "build_pipeline",
    "encrypt",
    "format_digest",
    "PipelineSpec",
    "validate_spec",
]
