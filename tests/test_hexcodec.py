import string

import pytest

from cfoundry import hexcodec


def test_is_digit():
    assert all(hexcodec.is_digit(c) for c in string.hexdigits)
    assert not hexcodec.is_digit("g")
    assert not hexcodec.is_digit("")
    assert not hexcodec.is_digit("ab")


def test_to_nibble_is_upper_case():
    assert hexcodec.to_nibble(10) == "A"


def test_nibble_round_trip():
    assert [hexcodec.from_nibble(hexcodec.to_nibble(v)) for v in range(16)] == list(range(16))


def test_from_nibble_accepts_lower_case():
    assert hexcodec.from_nibble("f") == hexcodec.from_nibble("F")


@pytest.mark.parametrize("value", [-1, 16])
def test_to_nibble_out_of_range(value):
    with pytest.raises(ValueError):
        hexcodec.to_nibble(value)


def test_from_nibble_rejects_non_digit():
    with pytest.raises(ValueError):
        hexcodec.from_nibble("x")


def test_byte_round_trip():
    for v in range(256):
        text = hexcodec.to_byte(v)
        assert len(text) == 2
        assert hexcodec.from_byte(text) == v


@pytest.mark.parametrize("value", [-1, 256])
def test_to_byte_out_of_range(value):
    with pytest.raises(ValueError):
        hexcodec.to_byte(value)


@pytest.mark.parametrize("text", ["zz", "1", "", "g0"])
def test_from_byte_rejects_bad_text(text):
    with pytest.raises(ValueError):
        hexcodec.from_byte(text)


def test_encode_matches_known_form():
    assert hexcodec.encode(b"\x01\xab\xff") == "01ABFF"


def test_encode_agrees_with_bytes_hex():
    data = bytes(range(256))
    assert hexcodec.encode(data) == data.hex().upper()


def test_decode_round_trip():
    data = bytes(range(255, -1, -3))
    assert hexcodec.decode(hexcodec.encode(data)) == data
    assert hexcodec.decode(data.hex()) == data


def test_encode_empty_rejected():
    with pytest.raises(ValueError):
        hexcodec.encode(b"")


@pytest.mark.parametrize("text", ["", "ABC", "GG"])
def test_decode_rejects_bad_text(text):
    with pytest.raises(ValueError):
        hexcodec.decode(text)