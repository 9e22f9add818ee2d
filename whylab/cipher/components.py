"""Byte-level building blocks of the ObfuscatedEncrypt pipeline.

- hash primitive (hashlib, selectable by name)
- key expansion (cyclic repeat + running sum)
- byte mixer: cyclic XOR, (i*7+3) relocation, constant S-box substitution
- Feistel round key schedule

Every function returns a fresh ``bytes`` object and keeps no state between
calls.

Research / education only. Do NOT use in production.
"""

from __future__ import annotations

import hashlib
import logging
from typing import List

from .errors import InvalidArgument, PermutationBug
from .spec import SUPPORTED_HASHES

logger = logging.getLogger(__name__)

PERM_MULTIPLIER = 7
PERM_OFFSET = 3
SBOX_CONSTANT = 42


# ============================================================================
# HASH
# ============================================================================

def hash_bytes(data: bytes, name: str = "sha256") -> bytes:
    """Digest ``data`` with the named hashlib algorithm."""
    if name not in SUPPORTED_HASHES:
        raise InvalidArgument(f"Unsupported hash: {name}")
    return hashlib.new(name, data).digest()


# ============================================================================
# KEY EXPANSION
# ============================================================================

def expand_key(key: bytes, length: int) -> bytes:
    """Stretch ``key`` to ``length`` bytes.

    The key is repeated cyclically, then smoothed with a running sum:
    out[i] = (out[i] + out[i-1]) mod 256.

    >>> list(expand_key(bytes([1, 2, 3]), 6))
    [1, 3, 6, 7, 9, 12]
    """
    if not key:
        raise InvalidArgument("expand_key requires a non-empty key")
    if length < 0:
        raise InvalidArgument(f"expand_key length must be >= 0, got {length}")

    out = bytearray(key[i % len(key)] for i in range(length))
    for i in range(1, length):
        out[i] = (out[i] + out[i - 1]) % 256
    return bytes(out)


# ============================================================================
# BYTE MIXER
# ============================================================================

def xor_bytes(data: bytes, key: bytes) -> bytes:
    """XOR ``data`` with ``key`` repeated cyclically."""
    if data and not key:
        raise InvalidArgument("xor_bytes requires a non-empty key")
    return bytes(b ^ key[i % len(key)] for i, b in enumerate(data))


def permutation_target(i: int, n: int) -> int:
    return (i * PERM_MULTIPLIER + PERM_OFFSET) % n


def permutation_collisions(n: int) -> List[int]:
    """Source indices whose byte is overwritten by a later index.

    Empty exactly when the relocation is a bijection on [0, n), i.e. when
    ``n`` is not a multiple of 7.
    """
    last_writer = {}
    for i in range(n):
        last_writer[permutation_target(i, n)] = i
    survivors = set(last_writer.values())
    return [i for i in range(n) if i not in survivors]


def permute_bytes(data: bytes, *, strict: bool = False) -> bytes:
    """Relocate byte i to position (i*7 + 3) mod n.

    For n divisible by 7 several sources land on the same slot: the highest
    index wins and the slots nobody writes stay zero. That byte loss is kept
    as-is. ``strict=True`` raises PermutationBug instead.
    """
    n = len(data)
    if n and n % PERM_MULTIPLIER == 0:
        lost = permutation_collisions(n)
        if strict:
            raise PermutationBug(
                f"Relocation (i*{PERM_MULTIPLIER}+{PERM_OFFSET}) mod {n} is not a bijection; "
                f"{len(lost)} source bytes would be overwritten"
            )
        logger.warning(
            "Lossy byte permutation: length %d is a multiple of %d, %d bytes overwritten",
            n, PERM_MULTIPLIER, len(lost),
        )

    out = bytearray(n)
    for i, b in enumerate(data):
        out[permutation_target(i, n)] = b
    return bytes(out)


def is_permutation(table: List[int], size: int = 256) -> bool:
    return len(table) == size and sorted(table) == list(range(size))


def generate_sbox(constant: int = SBOX_CONSTANT) -> List[int]:
    """Constant 8-bit S-box: identity shuffled by j = (j + s[i] + constant) mod 256.

    Independent of the key, so every call produces the same table.
    """
    sbox = list(range(256))
    j = 0
    for i in range(256):
        j = (j + sbox[i] + constant) % 256
        sbox[i], sbox[j] = sbox[j], sbox[i]

    if not is_permutation(sbox):
        raise PermutationBug("Generated S-box is not a permutation of 0..255")
    return sbox


def inverse_sbox(sbox: List[int]) -> List[int]:
    if not is_permutation(sbox):
        raise PermutationBug("Cannot invert a non-bijective S-box")
    inv = [0] * 256
    for i, v in enumerate(sbox):
        inv[v] = i
    return inv


def substitute_bytes(data: bytes, sbox: List[int] | None = None) -> bytes:
    """Apply the 8-bit S-box to each byte."""
    table = sbox if sbox is not None else generate_sbox()
    return bytes(table[b] for b in data)


# ============================================================================
# ROUND KEYS
# ============================================================================

def round_key(round_index: int, length: int = 8) -> bytes:
    """Round key r: [(i+1)*(r+1) mod 256 for i in range(length)]."""
    return bytes(((i + 1) * (round_index + 1)) % 256 for i in range(length))
