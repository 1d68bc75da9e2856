import struct

import pytest

from cfoundry.mempool import MemoryPool

WORD = struct.calcsize("P")


def test_new_pool_is_all_available():
    pool = MemoryPool(256)
    assert pool.available() == 256


def test_alloc_returns_requested_length():
    pool = MemoryPool(256)
    view = pool.alloc(5)
    assert len(view) == 5
    used = 256 - pool.available()
    assert used >= 5
    assert used % WORD == 0


def test_allocations_stay_word_aligned():
    pool = MemoryPool(1024)
    for size in (1, 3, WORD, WORD + 1, 17):
        pool.alloc(size)
        assert (1024 - pool.available()) % WORD == 0


def test_allocations_do_not_overlap():
    pool = MemoryPool(128)
    first = pool.alloc(3)
    second = pool.alloc(3)
    first[:] = b"abc"
    second[:] = b"xyz"
    assert bytes(first) == b"abc"
    assert bytes(second) == b"xyz"


def test_alloc_zero_rejected():
    with pytest.raises(ValueError):
        MemoryPool(64).alloc(0)


def test_exhaustion_raises():
    pool = MemoryPool(WORD * 2)
    pool.alloc(WORD)
    pool.alloc(WORD)
    assert pool.available() == 0
    with pytest.raises(MemoryError):
        pool.alloc(1)


def test_failed_alloc_keeps_space():
    pool = MemoryPool(WORD)
    with pytest.raises(MemoryError):
        pool.alloc(WORD + 1)
    assert pool.available() == WORD


def test_negative_pool_rejected():
    with pytest.raises(ValueError):
        MemoryPool(-1)