"""Bit-string encodings used by the chromosomes: binary, Gray and decimal."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["bin_to_dec", "bin_to_gray", "gray_to_bin", "bit_counter"]


def bin_to_dec(bits: Sequence[int]) -> int:
    """Read a most-significant-bit-first sequence of 0/1 values as an integer."""
    number = 0
    for bit in bits:
        number = (number << 1) | int(bit)
    return number


def bin_to_gray(bits: Sequence[int]) -> list[int]:
    """Convert a binary bit sequence to its reflected Gray code."""
    if not bits:
        return []
    return [bits[0], *(prev ^ cur for prev, cur in zip(bits, bits[1:]))]


def gray_to_bin(bits: Sequence[int]) -> list[int]:
    """Decode a reflected Gray code bit sequence back to plain binary."""
    result: list[int] = []
    acc = 0
    for bit in bits:
        acc ^= bit
        result.append(acc)
    return result


def bit_counter(num: int) -> int:
    """Return how many bits are needed to write ``num``; zero needs one bit."""
    if num < 0:
        raise ValueError("bit_counter needs a non-negative number")
    if num == 0:
        return 1
    return num.bit_length()