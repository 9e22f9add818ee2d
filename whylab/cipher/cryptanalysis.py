from __future__ import annotations

import math
import random
from typing import List

import numpy as np


def _hamming_distance_bytes(a: bytes, b: bytes) -> int:
    if len(a) != len(b):
        raise ValueError("hamming distance length mismatch")
    dist = 0
    for x, y in zip(a, b):
        dist += (x ^ y).bit_count()
    return dist


def _flip_bit(data: bytes, bit_index: int) -> bytes:
    byte_i = bit_index // 8
    bit_i = bit_index % 8
    if byte_i < 0 or byte_i >= len(data):
        raise IndexError("bit_index out of range")
    mask = 1 << bit_i
    out = bytearray(data)
    out[byte_i] ^= mask
    return bytes(out)


def _rand_bytes(rng: random.Random, n: int) -> bytes:
    return bytes(rng.randrange(0, 256) for _ in range(n))


def _check_size(sbox: List[int]) -> int:
    n = len(sbox)
    if n not in (16, 256):
        raise ValueError("sbox must be 4-bit (16) or 8-bit (256)")
    return n


def sbox_ddt_max(sbox: List[int]) -> int:
    """Return max entry in DDT excluding dx=0 (scaled by counts, not prob)."""
    n = _check_size(sbox)
    table = np.asarray(sbox, dtype=np.int64)
    xs = np.arange(n)
    max_v = 0
    for dx in range(1, n):
        dy = table ^ table[xs ^ dx]
        max_v = max(max_v, int(np.bincount(dy, minlength=n).max()))
    return max_v


def _parity_signs(n: int) -> np.ndarray:
    # signs[a, x] = (-1) ** popcount(a & x)
    parity = np.array([[(a & x).bit_count() & 1 for x in range(n)] for a in range(n)], dtype=np.int64)
    return 1 - 2 * parity


def sbox_lat_max_abs(sbox: List[int]) -> int:
    """Return max absolute bias*2^m (Walsh) for non-trivial masks."""
    n = _check_size(sbox)
    m = int(math.log2(n))
    if 2**m != n:
        raise ValueError("sbox size must be power of 2")
    signs = _parity_signs(n)
    out_signs = signs[:, np.asarray(sbox, dtype=np.int64)]
    walsh = signs @ out_signs.T
    return int(np.abs(walsh[1:, 1:]).max())
