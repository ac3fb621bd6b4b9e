"""Bit manipulation helpers for 64-bit bitboards."""

from __future__ import annotations

from collections.abc import Iterator

BITS = 64
MASK64 = (1 << BITS) - 1


def popcount(value: int) -> int:
    """Return the number of set bits in the low 64 bits of ``value``."""
    return bin(value & MASK64).count("1")


def lsb(bitboard: int) -> int:
    """Return the index of the least significant set bit, or 64 for an empty board."""
    board = bitboard & MASK64
    if not board:
        return BITS
    return (board & -board).bit_length() - 1


def pop_lsb(bitboard: int) -> tuple[int, int]:
    """Return the index of the least significant set bit and the board with it cleared."""
    board = bitboard & MASK64
    if not board:
        return BITS, 0
    return lsb(board), board & (board - 1)


def msb(value: int) -> int:
    """Return the index of the most significant set bit."""
    board = value & MASK64
    if not board:
        raise ValueError("msb of an empty bitboard is undefined")
    return board.bit_length() - 1


def iter_bits(bitboard: int) -> Iterator[int]:
    """Yield the indices of the set bits, lowest first."""
    board = bitboard & MASK64
    while board:
        index, board = pop_lsb(board)
        yield index


def pext(value: int, mask: int) -> int:
    """Gather the bits of ``value`` selected by ``mask`` into the low bits of the result."""
    value &= MASK64
    result = 0
    for out_bit, bit in enumerate(iter_bits(mask)):
        if (value >> bit) & 1:
            result |= 1 << out_bit
    return result