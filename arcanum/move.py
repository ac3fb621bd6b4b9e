"""Moves, move information flags and square names."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag

from arcanum.bitboard import square_to_string


class MoveInfo(IntFlag):
    """Flags describing what a move does."""

    NONE = 0
    PAWN_MOVE = 1
    ROOK_MOVE = 2
    KNIGHT_MOVE = 4
    BISHOP_MOVE = 8
    QUEEN_MOVE = 16
    KING_MOVE = 32
    DOUBLE_MOVE = 64
    ENPASSANT = 128
    CASTLE_WHITE_QUEEN = 256
    CASTLE_WHITE_KING = 512
    CASTLE_BLACK_QUEEN = 1024
    CASTLE_BLACK_KING = 2048
    PROMOTE_ROOK = 4096
    PROMOTE_KNIGHT = 8192
    PROMOTE_BISHOP = 16384
    PROMOTE_QUEEN = 32768
    CAPTURE_PAWN = 65536
    CAPTURE_ROOK = 131072
    CAPTURE_KNIGHT = 262144
    CAPTURE_BISHOP = 524288
    CAPTURE_QUEEN = 1048576


MOVE_MASK = (
    MoveInfo.PAWN_MOVE
    | MoveInfo.ROOK_MOVE
    | MoveInfo.KNIGHT_MOVE
    | MoveInfo.BISHOP_MOVE
    | MoveInfo.QUEEN_MOVE
    | MoveInfo.KING_MOVE
)
CASTLE_MASK = (
    MoveInfo.CASTLE_WHITE_QUEEN
    | MoveInfo.CASTLE_WHITE_KING
    | MoveInfo.CASTLE_BLACK_QUEEN
    | MoveInfo.CASTLE_BLACK_KING
)
PROMOTE_MASK = (
    MoveInfo.PROMOTE_ROOK | MoveInfo.PROMOTE_KNIGHT | MoveInfo.PROMOTE_BISHOP | MoveInfo.PROMOTE_QUEEN
)
CAPTURE_MASK = (
    MoveInfo.CAPTURE_PAWN
    | MoveInfo.CAPTURE_ROOK
    | MoveInfo.CAPTURE_KNIGHT
    | MoveInfo.CAPTURE_BISHOP
    | MoveInfo.CAPTURE_QUEEN
)

_PROMOTION_SUFFIXES = (
    (MoveInfo.PROMOTE_QUEEN, "q"),
    (MoveInfo.PROMOTE_ROOK, "r"),
    (MoveInfo.PROMOTE_BISHOP, "b"),
    (MoveInfo.PROMOTE_KNIGHT, "n"),
)


def moved_piece(move_info: int) -> MoveInfo:
    """The moved-piece bits of ``move_info``."""
    return MoveInfo(move_info & MOVE_MASK)


def castle_side(move_info: int) -> MoveInfo:
    """The castling bits of ``move_info``."""
    return MoveInfo(move_info & CASTLE_MASK)


def promoted_piece(move_info: int) -> MoveInfo:
    """The promotion bits of ``move_info``."""
    return MoveInfo(move_info & PROMOTE_MASK)


def captured_piece(move_info: int) -> MoveInfo:
    """The capture bits of ``move_info``."""
    return MoveInfo(move_info & CAPTURE_MASK)


def is_quiet(move_info: int) -> bool:
    """True when the move neither captures nor promotes."""
    return not move_info & (CAPTURE_MASK | PROMOTE_MASK)


class Square(IntEnum):
    """Board squares, A1 = 0 through H8 = 63, plus NONE."""

    A1 = 0
    B1 = 1
    C1 = 2
    D1 = 3
    E1 = 4
    F1 = 5
    G1 = 6
    H1 = 7
    A2 = 8
    B2 = 9
    C2 = 10
    D2 = 11
    E2 = 12
    F2 = 13
    G2 = 14
    H2 = 15
    A3 = 16
    B3 = 17
    C3 = 18
    D3 = 19
    E3 = 20
    F3 = 21
    G3 = 22
    H3 = 23
    A4 = 24
    B4 = 25
    C4 = 26
    D4 = 27
    E4 = 28
    F4 = 29
    G4 = 30
    H4 = 31
    A5 = 32
    B5 = 33
    C5 = 34
    D5 = 35
    E5 = 36
    F5 = 37
    G5 = 38
    H5 = 39
    A6 = 40
    B6 = 41
    C6 = 42
    D6 = 43
    E6 = 44
    F6 = 45
    G6 = 46
    H6 = 47
    A7 = 48
    B7 = 49
    C7 = 50
    D7 = 51
    E7 = 52
    F7 = 53
    G7 = 54
    H7 = 55
    A8 = 56
    B8 = 57
    C8 = 58
    D8 = 59
    E8 = 60
    F8 = 61
    G8 = 62
    H8 = 63
    NONE = 64


@dataclass(eq=False)
class Move:
    """A move from one square to another with its information flags."""

    from_square: int
    to_square: int
    info: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Move):
            return NotImplemented
        return (
            self.from_square == other.from_square
            and self.to_square == other.to_square
            and promoted_piece(self.info) == promoted_piece(other.info)
        )

    def __hash__(self) -> int:
        return hash((self.from_square, self.to_square, int(promoted_piece(self.info))))

    def __str__(self) -> str:
        text = square_to_string(self.from_square) + square_to_string(self.to_square)
        for flag, suffix in _PROMOTION_SUFFIXES:
            if self.info & flag:
                return text + suffix
        return text


NULL_MOVE = Move(0, 0)