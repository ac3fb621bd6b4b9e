"""Pawn attack and push bitboards and square naming."""

from __future__ import annotations

from arcanum.bitops import MASK64

NOT_A_FILE = ~0x0101010101010101 & MASK64
NOT_H_FILE = ~0x8080808080808080 & MASK64


def _file(square: int) -> int:
    return square & 0b111


def _rank(square: int) -> int:
    return square >> 3


def white_pawn_attacks(bitboard: int) -> int:
    """Squares attacked by white pawns."""
    return white_pawn_attacks_left(bitboard) | white_pawn_attacks_right(bitboard)


def white_pawn_attacks_left(bitboard: int) -> int:
    """Squares attacked by white pawns capturing towards the A file."""
    return ((bitboard & NOT_A_FILE) << 7) & MASK64


def white_pawn_attacks_right(bitboard: int) -> int:
    """Squares attacked by white pawns capturing towards the H file."""
    return ((bitboard & NOT_H_FILE) << 9) & MASK64


def black_pawn_attacks(bitboard: int) -> int:
    """Squares attacked by black pawns."""
    return black_pawn_attacks_left(bitboard) | black_pawn_attacks_right(bitboard)


def black_pawn_attacks_left(bitboard: int) -> int:
    """Squares attacked by black pawns capturing towards the A file."""
    return (bitboard & NOT_A_FILE) >> 9


def black_pawn_attacks_right(bitboard: int) -> int:
    """Squares attacked by black pawns capturing towards the H file."""
    return (bitboard & NOT_H_FILE) >> 7


def white_pawn_moves(bitboard: int) -> int:
    """Single pushes of white pawns."""
    return ((bitboard & MASK64) << 8) & MASK64


def white_pawn_move(square: int) -> int:
    """Single push of a white pawn on ``square``."""
    return white_pawn_moves(1 << square)


def black_pawn_moves(bitboard: int) -> int:
    """Single pushes of black pawns."""
    return (bitboard & MASK64) >> 8


def black_pawn_move(square: int) -> int:
    """Single push of a black pawn on ``square``."""
    return black_pawn_moves(1 << square)


def square_to_string(square: int) -> str:
    """Name a square index 0..63 in algebraic notation, e.g. ``a1``."""
    if not 0 <= square < 64:
        raise ValueError(f"square index out of range: {square}")
    return f"{chr(ord('a') + _file(square))}{chr(ord('1') + _rank(square))}"