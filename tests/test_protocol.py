import pytest

from sigtalk.protocol import BitDecoder, decode_bits, encode_byte, encode_message


def test_encode_byte_zero_is_all_clear():
    assert encode_byte(0) == (0,) * 8


def test_encode_byte_full_is_all_set():
    assert encode_byte(255) == (1,) * 8


def test_encode_byte_most_significant_first():
    bits = encode_byte(128)
    assert bits[0] == 1
    assert sum(bits) == 1


def test_encode_byte_negative_is_twos_complement():
    assert encode_byte(-1) == encode_byte(255)
    assert encode_byte(-128) == encode_byte(128)


@pytest.mark.parametrize("value", [256, -129, 1000])
def test_encode_byte_out_of_range(value):
    with pytest.raises(ValueError):
        encode_byte(value)


@pytest.mark.parametrize("value", range(256))
def test_byte_round_trip(value):
    assert decode_bits(encode_byte(value)) == bytes([value])


def test_message_length_in_bits():
    assert len(list(encode_message("hello"))) == 5 * 8


def test_text_message_round_trip_utf8():
    text = "olá, mundo"
    assert decode_bits(encode_message(text)) == text.encode("utf-8")


def test_bytes_message_round_trip():
    data = bytes(range(1, 256))
    assert decode_bits(encode_message(data)) == data


def test_message_stops_at_nul():
    assert decode_bits(encode_message(b"ab\0cd")) == b"ab"


def test_empty_message_has_no_bits():
    assert list(encode_message("")) == []


def test_decode_drops_incomplete_byte():
    bits = list(encode_message(b"xy"))[:-3]
    assert decode_bits(bits) == b"x"


def test_decoder_returns_byte_on_eighth_bit():
    decoder = BitDecoder()
    bits = encode_byte(ord("Z"))
    results = [decoder.feed(bit) for bit in bits]
    assert results[:-1] == [None] * 7
    assert results[-1] == ord("Z")
    assert decoder.pending == 0


def test_decoder_pending_counts_bits():
    decoder = BitDecoder()
    decoder.feed(1)
    decoder.feed(0)
    assert decoder.pending == 2


def test_decoder_accepts_bools():
    decoder = BitDecoder()
    results = [decoder.feed(bool(bit)) for bit in encode_byte(77)]
    assert results[-1] == 77


@pytest.mark.parametrize("bad", [2, -1, "1"])
def test_decoder_rejects_non_bits(bad):
    with pytest.raises(ValueError):
        BitDecoder().feed(bad)