import pytest

from formantsay.ulaw import UlawCodec


@pytest.fixture
def codec():
    return UlawCodec()


def test_decode_pins_table_values(codec):
    assert codec.decode(bytes([0x00, 0x7F, 0x80, 0xFF])) == [-32256, 0, 32256, 0]


def test_decode_accepts_memoryview(codec):
    data = bytes([0x00, 0x80])
    assert codec.decode(memoryview(data)) == codec.decode(data)


def test_decode_table_is_antisymmetric(codec):
    low = codec.decode(range(0x80))
    high = codec.decode(range(0x80, 0x100))
    assert high == [-v for v in low]


def test_encode_extremes_round_trip(codec):
    assert codec.decode(codec.encode([32767, -32768, 0])) == [32256, -32256, 0]


def test_encode_length_matches_input(codec):
    samples = list(range(-32768, 32768, 257))
    out = codec.encode(samples)
    assert isinstance(out, bytes)
    assert len(out) == len(samples)


def test_quantize_values_are_table_levels(codec):
    levels = set(codec.decode(range(256)))
    result = codec.quantize(range(-32768, 32768, 97))
    assert set(result) <= levels


def test_quantize_preserves_sign(codec):
    for sample in range(-32768, 32768, 131):
        value = codec.quantize([sample])[0]
        if sample > 0:
            assert value >= 0
        elif sample < 0:
            assert value <= 0


def test_quantize_is_monotonic(codec):
    result = codec.quantize(range(-32768, 32768, 7))
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_quantize_matches_encode_then_decode(codec):
    samples = [-20000, -100, 0, 55, 1234, 30000]
    assert codec.quantize(samples) == codec.decode(codec.encode(samples))


def test_quantize_truncates_floats(codec):
    assert codec.quantize([1.9, -1.9, 100.7]) == codec.quantize([1, -1, 100])


def test_quantize_empty(codec):
    assert codec.quantize([]) == []


def test_encode_rejects_text(codec):
    with pytest.raises(TypeError):
        codec.encode("abc")


def test_decode_rejects_text(codec):
    with pytest.raises(TypeError):
        codec.decode("abc")


def test_encode_rejects_non_numbers(codec):
    with pytest.raises(TypeError):
        codec.encode([None])


def test_repr(codec):
    assert repr(codec) == "UlawCodec()"