import pytest

from minitalk.protocol import (
    ByteDecoder,
    byte_bits,
    is_digit_str,
    message_bits,
    message_bytes,
    render_byte,
)


@pytest.mark.parametrize(
    "text, expected",
    [("123", True), ("0", True), ("", True), ("12a", False), ("-1", False), (" 1", False), (None, False)],
)
def test_is_digit_str(text, expected):
    assert is_digit_str(text) is expected


def test_byte_bits_most_significant_first():
    assert byte_bits(0x80) == [True] + [False] * 7
    assert byte_bits(1) == [False] * 7 + [True]


def test_byte_bits_accepts_characters():
    assert byte_bits("A") == byte_bits(ord("A"))
    assert byte_bits(b"A") == byte_bits(ord("A"))


def test_byte_bits_wraps_negative_char():
    assert byte_bits(-1) == [True] * 8


def test_byte_bits_rejects_long_string():
    with pytest.raises(ValueError):
        byte_bits("ab")


def test_message_bytes_appends_terminator():
    assert message_bytes("hi") == b"hi\0"
    assert message_bytes("") == b"\0"


def test_message_bytes_stops_at_nul():
    assert message_bytes("ab\0cd") == b"ab\0"


def test_message_bits_length():
    bits = list(message_bits("hello"))
    assert len(bits) == 8 * 6
    assert bits[-8:] == [False] * 8


def test_render_byte():
    assert render_byte(0) == b"\n"
    assert render_byte(ord("x")) == b"x"


def test_decoder_returns_none_until_full_byte():
    decoder = ByteDecoder()
    results = [decoder.push(bit) for bit in byte_bits(ord("Z"))]
    assert results[:7] == [None] * 7
    assert results[7] == ord("Z")
    assert decoder.bit_count == 0 and decoder.value == 0


def test_decoder_round_trip_message():
    decoder = ByteDecoder()
    decoded = bytes(b for b in (decoder.push(bit) for bit in message_bits("Salut!")) if b is not None)
    assert decoded == b"Salut!\0"


def test_decoder_round_trip_utf8():
    decoder = ByteDecoder()
    decoded = bytes(b for b in (decoder.push(bit) for bit in message_bits("héllo")) if b is not None)
    assert decoded[:-1].decode("utf-8") == "héllo"