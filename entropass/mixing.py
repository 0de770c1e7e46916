"""
Bit helpers for the quantum source.

Bit lists are always MSB-first: bit 0 of a list is the high bit of the
first byte, and `bits_to_int` reads a list the same way. Packing and
unpacking therefore round-trip, and `randbelow` can take any prefix of
the mixed stream as an unsigned integer.
"""

from __future__ import annotations

import hashlib
from typing import List


def bits_to_int(bits: List[int]) -> int:
    """Read bits MSB-first as an unsigned integer."""
    value = 0
    for bit in bits:
        value = (value << 1) | bit
    return value


def bits_to_bytes(bits: List[int]) -> bytes:
    """
    Pack bits eight at a time. A short final group is zero-padded on the
    right, so [1, 0, 1] becomes 0b10100000.
    """
    out = bytearray()
    for start in range(0, len(bits), 8):
        group = bits[start : start + 8]
        out.append(bits_to_int(group) << (8 - len(group)))
    return bytes(out)


def bytes_to_bits(data: bytes) -> List[int]:
    return [(byte >> shift) & 1 for byte in data for shift in range(7, -1, -1)]


def xor_bits(a: List[int], b: List[int]) -> List[int]:
    if len(a) != len(b):
        raise ValueError(
            f"Cannot combine bitstreams of different lengths ({len(a)} != {len(b)})."
        )
    return [x ^ y for x, y in zip(a, b)]


def amplify_entropy(bits: List[int], rounds: int = 1) -> List[int]:
    """
    Hash the packed stream with SHA-256 `rounds` times and return the
    256 digest bits. With rounds <= 0 the input is returned unchanged.

    Mixing spreads whatever randomness the measurements hold across the
    digest; it does not create more than the input carried.
    """
    if rounds <= 0:
        return bits

    data = bits_to_bytes(bits)
    for _ in range(rounds):
        data = hashlib.sha256(data).digest()

    return bytes_to_bits(data)
