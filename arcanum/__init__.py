"""Chess engine building blocks: bit operations, pawn bitboards, moves, Zobrist hashing, UCI options and time allocation."""

__version__ = "0.1.0"

__all__ = ["bitops", "bitboard", "move", "utils", "zobrist", "options", "timeman"]