import pytest

from cfoundry.bitstring import BitString


def set_bits(bs):
    return [i for i in range(len(bs)) if bs.isset(i)]


def test_new_string_is_clear_and_has_length():
    bs = BitString(13)
    assert len(bs) == 13
    assert set_bits(bs) == []


def test_set_and_clear_single_bits():
    bs = BitString(20)
    bs.set(0)
    bs.set(9)
    bs.set(19)
    assert set_bits(bs) == [0, 9, 19]
    bs.clear(9)
    assert set_bits(bs) == [0, 19]


def test_set_range_across_bytes():
    bs = BitString(30)
    bs.set_range(3, 21)
    assert set_bits(bs) == list(range(3, 22))


def test_set_range_within_one_byte():
    bs = BitString(16)
    bs.set_range(9, 13)
    assert set_bits(bs) == list(range(9, 14))


def test_clear_range_across_bytes():
    bs = BitString(32)
    bs.set_range(0, 31)
    bs.clear_range(5, 26)
    assert set_bits(bs) == list(range(0, 5)) + list(range(27, 32))


def test_clear_range_within_one_byte():
    bs = BitString(8)
    bs.set_range(0, 7)
    bs.clear_range(2, 4)
    assert set_bits(bs) == [0, 1, 5, 6, 7]


def test_range_on_byte_boundaries():
    bs = BitString(24)
    bs.set_range(8, 15)
    assert set_bits(bs) == list(range(8, 16))
    bs.clear_range(8, 15)
    assert set_bits(bs) == []


def test_reversed_range_rejected():
    bs = BitString(16)
    with pytest.raises(ValueError):
        bs.set_range(5, 2)
    with pytest.raises(ValueError):
        bs.clear_range(5, 2)


@pytest.mark.parametrize("nbits", [0, -3])
def test_invalid_size_rejected(nbits):
    with pytest.raises(ValueError):
        BitString(nbits)


def test_out_of_range_bit_rejected():
    bs = BitString(10)
    with pytest.raises(IndexError):
        bs.set(10)
    with pytest.raises(IndexError):
        bs.isset(-1)


def test_intersects():
    a = BitString(16)
    b = BitString(16)
    a.set(3)
    b.set(4)
    assert not a.intersects(b)
    b.set(3)
    assert a.intersects(b)


def test_intersects_requires_same_length():
    a = BitString(16)
    b = BitString(17)
    a.set(1)
    b.set(1)
    assert not a.intersects(b)