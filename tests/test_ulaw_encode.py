import pytest

from formantsay.ulaw_decode import decode, ulaw_to_linear
from formantsay.ulaw_encode import encode, linear_to_ulaw


@pytest.mark.parametrize(
    "sample, code",
    [
        (0, 0xFF),
        (7, 0xFF),
        (8, 0xFE),
        (120, 0xF0),
        (-1, 0x7E),
        (-9, 0x7D),
        (32767, 0x80),
        (-32768, 0x00),
    ],
)
def test_values_fixed_by_table(sample, code):
    assert linear_to_ulaw(sample) == code


def test_sign_selects_code_half():
    for sample in range(-32768, 32768, 97):
        code = linear_to_ulaw(sample)
        if sample >= 0:
            assert code >= 0x80
        else:
            assert code < 0x80


def test_samples_in_same_13_bit_bin_share_code():
    for base in range(-32768, 32768, 8 * 131):
        codes = {linear_to_ulaw(base + offset) for offset in range(8)}
        assert len(codes) == 1


def test_wraps_like_short_cast():
    assert linear_to_ulaw(65536) == linear_to_ulaw(0)
    assert linear_to_ulaw(32768) == linear_to_ulaw(-32768)
    assert linear_to_ulaw(-32769) == linear_to_ulaw(32767)


def test_float_truncates_toward_zero():
    assert linear_to_ulaw(1000.9) == linear_to_ulaw(1000)
    assert linear_to_ulaw(-1000.9) == linear_to_ulaw(-1000)


def test_decoded_value_is_monotonic_in_sample():
    previous = None
    for sample in range(-32768, 32768, 8):
        level = ulaw_to_linear(linear_to_ulaw(sample))
        if previous is not None:
            assert level >= previous
        previous = level


def test_round_trip_error_is_bounded():
    for sample in range(-32768, 32768, 53):
        level = ulaw_to_linear(linear_to_ulaw(sample))
        assert abs(level - sample) <= max(16, abs(sample) // 8)


def test_all_codes_except_negative_zero_are_reachable():
    codes = {linear_to_ulaw(sample) for sample in range(-32768, 32768, 8)}
    assert codes == set(range(256)) - {0x7F}


def test_encode_sequence_matches_single_values():
    samples = [0, 8, -1, 32767, -32768, 1234, -4321]
    data = encode(samples)
    assert isinstance(data, bytes)
    assert list(data) == [linear_to_ulaw(s) for s in samples]


def test_encode_then_decode_round_trip():
    samples = list(range(-30000, 30000, 1499))
    levels = decode(encode(samples))
    assert len(levels) == len(samples)
    for sample, level in zip(samples, levels):
        assert abs(level - sample) <= max(16, abs(sample) // 8)


def test_encode_empty():
    assert encode([]) == b""


def test_encode_accepts_generator():
    assert encode(x for x in (0, 8)) == bytes([0xFF, 0xFE])


@pytest.mark.parametrize("bad", ["12", None, True, [1]])
def test_linear_to_ulaw_rejects_non_numbers(bad):
    with pytest.raises(TypeError):
        linear_to_ulaw(bad)


def test_encode_rejects_text():
    with pytest.raises(TypeError):
        encode("abc")


def test_encode_rejects_bad_items():
    with pytest.raises(TypeError):
        encode([0, "x"])