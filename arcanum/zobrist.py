"""Zobrist hashing of positions, with incremental updates after moves."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import IntEnum

from arcanum.bitops import iter_bits, lsb, popcount
from arcanum.move import (
    MoveInfo,
    Move,
    Square,
    captured_piece,
    castle_side,
    moved_piece,
    promoted_piece,
)

_NUM_SQUARES = 64
_EN_PASSANT_SLOTS = _NUM_SQUARES + 1
_PROMOTE_SHIFT = 11
_CAPTURE_SHIFT = 16


class Color(IntEnum):
    """Side to move."""

    WHITE = 0
    BLACK = 1


class PieceType(IntEnum):
    """Piece types in the order used by the hash tables."""

    PAWN = 0
    ROOK = 1
    KNIGHT = 2
    BISHOP = 3
    QUEEN = 4
    KING = 5


def _empty_pieces() -> list[list[int]]:
    return [[0, 0] for _ in PieceType]


@dataclass
class BoardState:
    """The parts of a position that the hash depends on.

    ``pieces[piece_type][color]`` is the bitboard of those pieces.
    """

    pieces: list[list[int]] = field(default_factory=_empty_pieces)
    turn: Color = Color.WHITE
    en_passant: int = Square.NONE


@dataclass(frozen=True)
class Hashes:
    """Full position hash, pawn structure hash and material hash."""

    hash: int = 0
    pawn_hash: int = 0
    material_hash: int = 0


_CASTLE_ROOKS = (
    (MoveInfo.CASTLE_WHITE_QUEEN, Color.WHITE, Square.A1, Square.D1),
    (MoveInfo.CASTLE_WHITE_KING, Color.WHITE, Square.H1, Square.F1),
    (MoveInfo.CASTLE_BLACK_QUEEN, Color.BLACK, Square.A8, Square.D8),
    (MoveInfo.CASTLE_BLACK_KING, Color.BLACK, Square.H8, Square.F8),
)

_HASH_ORDER = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
)


class Zobrist:
    """Random key tables and the hash computations built on them."""

    def __init__(self, seed: int = 0) -> None:
        rng = random.Random(seed)
        self._tables = tuple(
            tuple(tuple(rng.getrandbits(64) for _ in range(_NUM_SQUARES)) for _ in Color)
            for _ in PieceType
        )
        en_passant = [rng.getrandbits(64) for _ in range(_NUM_SQUARES)]
        en_passant.append(0)  # Square.NONE contributes nothing
        self._en_passant = tuple(en_passant)
        self._black_to_move = rng.getrandbits(64)

    def _key(self, piece: int, color: int, square: int) -> int:
        return self._tables[piece][color][square]

    def _add_all(self, piece: PieceType, color: Color, bitboard: int) -> tuple[int, int]:
        position = 0
        material = 0
        for count, square in enumerate(iter_bits(bitboard)):
            material ^= self._key(piece, color, count)
            position ^= self._key(piece, color, square)
        return position, material

    def get_hashes(self, board: BoardState) -> Hashes:
        """Compute all three hashes of ``board`` from scratch."""
        position = 0
        material = 0

        def add(piece: PieceType) -> None:
            nonlocal position, material
            for color in Color:
                pos, mat = self._add_all(piece, color, board.pieces[piece][color])
                position ^= pos
                material ^= mat

        add(PieceType.PAWN)
        pawn = position
        for piece in _HASH_ORDER:
            add(piece)

        if board.turn == Color.BLACK:
            position ^= self._black_to_move

        en_passant = self._en_passant[board.en_passant]
        return Hashes(position ^ en_passant, pawn ^ en_passant, material)

    def get_updated_hashes(
        self,
        board: BoardState,
        move: Move,
        old_en_passant: int,
        new_en_passant: int,
        hashes: Hashes,
    ) -> Hashes:
        """Return the hashes after ``move``.

        ``board`` holds the pieces after the move, with the turn still set to the
        side that made it.
        """
        info = int(move.info)
        turn = board.turn
        position = hashes.hash
        pawn = hashes.pawn_hash
        material = hashes.material_hash

        promotion = int(promoted_piece(info))
        if promotion:
            promote_type = PieceType(lsb(promotion) - _PROMOTE_SHIFT)
            pawn_count = popcount(board.pieces[PieceType.PAWN][turn])
            promote_count = popcount(board.pieces[promote_type][turn]) - 1
            position ^= self._key(PieceType.PAWN, turn, move.from_square)
            position ^= self._key(promote_type, turn, move.to_square)
            pawn ^= self._key(PieceType.PAWN, turn, move.from_square)
            material ^= self._key(promote_type, turn, promote_count)
            material ^= self._key(PieceType.PAWN, turn, pawn_count)
        else:
            piece = PieceType(lsb(int(moved_piece(info))))
            move_hash = self._key(piece, turn, move.from_square) ^ self._key(
                piece, turn, move.to_square
            )
            position ^= move_hash
            if info & MoveInfo.PAWN_MOVE:
                pawn ^= move_hash

        if castle_side(info):
            for flag, color, rook_from, rook_to in _CASTLE_ROOKS:
                if info & flag:
                    position ^= self._key(PieceType.ROOK, color, rook_from)
                    position ^= self._key(PieceType.ROOK, color, rook_to)
                    break

        capture = int(captured_piece(info))
        if capture:
            opponent = Color(turn ^ 1)
            if info & MoveInfo.ENPASSANT:
                target = old_en_passant - 8 if old_en_passant > 32 else old_en_passant + 8
                count = popcount(board.pieces[PieceType.PAWN][opponent])
                key = self._key(PieceType.PAWN, opponent, target)
                position ^= key
                pawn ^= key
                material ^= self._key(PieceType.PAWN, opponent, count)
            elif info & MoveInfo.CAPTURE_PAWN:
                count = popcount(board.pieces[PieceType.PAWN][opponent])
                key = self._key(PieceType.PAWN, opponent, move.to_square)
                position ^= key
                pawn ^= key
                material ^= self._key(PieceType.PAWN, opponent, count)
            else:
                captured = PieceType(lsb(capture) - _CAPTURE_SHIFT)
                count = popcount(board.pieces[captured][opponent])
                position ^= self._key(captured, opponent, move.to_square)
                material ^= self._key(captured, opponent, count)

        en_passant = self._en_passant[old_en_passant] ^ self._en_passant[new_en_passant]
        pawn ^= en_passant
        position ^= en_passant ^ self._black_to_move
        return Hashes(position, pawn, material)

    def update_hashes_after_null_move(self, hashes: Hashes, old_en_passant: int) -> Hashes:
        """Return the hashes after passing the turn, which clears any en passant square."""
        en_passant = self._en_passant[old_en_passant]
        return Hashes(
            hashes.hash ^ en_passant ^ self._black_to_move,
            hashes.pawn_hash ^ en_passant,
            hashes.material_hash,
        )