import pytest

from arcanum.bitops import MASK64, iter_bits, lsb, msb, pext, pop_lsb, popcount

SAMPLES = [
    0x0101010101010101,
    0x8080808080808080,
    0x03F79D71B4CB0A89,
    0x4081020408000,
    0x0202020202020202,
    1,
    1 << 63,
]


def test_popcount_full_board():
    assert popcount(MASK64) == 64


def test_popcount_ignores_bits_above_64():
    assert popcount((1 << 70) | 1) == popcount(1)


@pytest.mark.parametrize("value", SAMPLES)
def test_popcount_additive_over_disjoint_parts(value):
    low = value & 0xFFFFFFFF
    high = value & ~0xFFFFFFFF & MASK64
    assert popcount(value) == popcount(low) + popcount(high)


@pytest.mark.parametrize("index", range(64))
def test_single_bit_lsb_and_msb(index):
    assert lsb(1 << index) == index
    assert msb(1 << index) == index


def test_lsb_of_empty_board():
    assert lsb(0) == 64


def test_msb_of_empty_board_raises():
    with pytest.raises(ValueError):
        msb(0)


@pytest.mark.parametrize("value", SAMPLES)
def test_pop_lsb_removes_exactly_lowest_bit(value):
    index, rest = pop_lsb(value)
    assert index == lsb(value)
    assert popcount(rest) == popcount(value) - 1
    assert rest | (1 << index) == value
    assert lsb(rest) > index


@pytest.mark.parametrize("value", SAMPLES)
def test_iter_bits_rebuilds_board(value):
    bits = list(iter_bits(value))
    assert bits == sorted(bits)
    assert len(bits) == popcount(value)
    assert sum(1 << bit for bit in bits) == value


@pytest.mark.parametrize("value", SAMPLES)
def test_pext_with_full_and_empty_mask(value):
    assert pext(value, MASK64) == value
    assert pext(value, 0) == 0


@pytest.mark.parametrize("mask", SAMPLES)
def test_pext_of_mask_itself_is_dense(mask):
    assert pext(mask, mask) == (1 << popcount(mask)) - 1


@pytest.mark.parametrize("shift", [0, 3, 17])
def test_pext_is_shift_invariant(shift):
    value = 0x2D
    mask = 0x3F
    assert pext(value << shift, mask << shift) == pext(value, mask)