# arcanum

Building blocks for a chess engine, with no dependencies beyond the standard library.

## Modules

- `arcanum.bitops`: operations on 64-bit bitboards held in Python integers.
  - `popcount(value)`: number of set bits.
  - `lsb(bitboard)`: index of the lowest set bit, or 64 for an empty board.
  - `pop_lsb(bitboard)`: a tuple of that index and the board with the bit cleared.
  - `msb(value)`: index of the highest set bit; raises `ValueError` for an empty board.
  - `iter_bits(bitboard)`: yields the indices of the set bits, lowest first.
  - `pext(value, mask)`: gathers the bits of `value` selected by `mask` into the low bits.
- `arcanum.bitboard`: pawn pushes (`white_pawn_moves`, `white_pawn_move`, `black_pawn_moves`,
  `black_pawn_move`) and pawn attacks (`white_pawn_attacks`, `white_pawn_attacks_left`,
  `white_pawn_attacks_right` and the black counterparts), plus `square_to_string`, which names
  a square index 0..63 (`0` is `"a1"`) and raises `ValueError` outside that range.
- `arcanum.move`: the `Move` dataclass (`from_square`, `to_square`, `info`), the `MoveInfo`
  flags, the `Square` enumeration (`A1` = 0 through `H8` = 63, and `NONE` = 64), `NULL_MOVE`,
  and the helpers `moved_piece`, `castle_side`, `promoted_piece`, `captured_piece` and
  `is_quiet`. Two moves are equal when their squares and promotion piece match. `str(move)`
  gives coordinate notation with a promotion suffix (`q`, `r`, `b` or `n`).
- `arcanum.zobrist`: `Zobrist(seed=0)` builds seeded random key tables. `get_hashes(board)`
  computes a `Hashes` value (full hash, pawn hash, material hash) from a `BoardState`
  (`pieces[piece_type][color]` bitboards, `turn`, `en_passant`). `get_updated_hashes` updates
  the hashes after a move, given the board after the move with the turn still set to the mover,
  and `update_hashes_after_null_move` updates them after a passed turn. `Color` and `PieceType`
  index the tables.
- `arcanum.options`: UCI options `SpinOption` (integer, clamped to its range), `CheckOption`,
  `ButtonOption`, `StringOption` and `ComboOption`. Each has `matches(name)` (case-insensitive),
  `list()` (prints the declaration line and returns it) and `set(value)`, which runs the
  optional callback when a value is accepted.
- `arcanum.timeman`: `allocated_time(time, inc, moves_to_go, move_time, move_overhead)` returns
  the milliseconds to spend on the next move, capped by `move_time` when it is positive and
  never below 1.
- `arcanum.utils`: `str_eq_ci(a, b)`, `get_work_path()` (folder of the running program, with a
  trailing separator), `create_log_file(name)` (creates `<name>.log` and sends the `arcanum`
  logger to it) and `uci_out(text)` (prints a line and flushes).

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from arcanum.move import Move, MoveInfo, Square

move = Move(Square.E7, Square.E8, MoveInfo.PAWN_MOVE | MoveInfo.PROMOTE_QUEEN)
print(move)  # e7e8q
```

```python
from arcanum.timeman import allocated_time

# 60 s on the clock, 1 s increment, no moves-to-go, no fixed move time, 10 ms overhead
print(allocated_time(60_000, 1_000, -1, 0, 10))  # 2999
```

```python
from arcanum.options import SpinOption

hash_size = SpinOption("Hash", 32, 0, 8196)
hash_size.list()        # option name Hash type spin default 32 min 0 max 8196
hash_size.set("99999")
print(hash_size.value)  # 8196
```

```python
from arcanum.bitboard import square_to_string
from arcanum.bitops import iter_bits

print([square_to_string(sq) for sq in iter_bits(0b1000_0001)])  # ['a1', 'h1']
```

## What this package does not do

It has no full board representation, no move generation, no search, no evaluation and no
command that runs an engine or reads UCI commands. The pieces here are meant to be used by
code that provides those.