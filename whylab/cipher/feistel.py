from __future__ import annotations

from .components import round_key, xor_bytes


def feistel_function(half: bytes, key: bytes) -> bytes:
    """Nibble-expand, XOR with the round key, recombine.

    Each byte b becomes ((b << 4) & 0xF0, b & 0x0F); after the XOR the pair
    (x, y) is folded back to (x & 0xF0) | (y & 0x0F).
    """
    expanded = bytearray()
    for b in half:
        expanded.append((b << 4) & 0xF0)
        expanded.append(b & 0x0F)

    expanded = xor_bytes(bytes(expanded), key)
    return bytes(
        (expanded[2 * i] & 0xF0) | (expanded[2 * i + 1] & 0x0F)
        for i in range(len(half))
    )


def feistel_network(
    data: bytes,
    *,
    rounds: int = 16,
    round_key_length: int = 8,
    alias_halves: bool = False,
) -> bytes:
    """Balanced Feistel over ``data``; odd lengths get one trailing zero byte.

    alias_halves reproduces the reference program, where ``left`` and
    ``right`` end up as the same array after the first round. Both halves then
    evolve as x <- x ^ F(x) and the output is x || x.
    """
    if len(data) % 2 != 0:
        data = data + b"\x00"

    half = len(data) // 2
    L, R = data[:half], data[half:]

    for r in range(rounds):
        F = feistel_function(R, round_key(r, round_key_length))
        new_R = xor_bytes(L, F)
        L = new_R if alias_halves else R
        R = new_R

    return L + R
