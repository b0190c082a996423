import pytest

from purecrypt.jh_compressor import f8


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


STATE = bytes(range(128))
DATA = bytes(range(100, 164))


def test_output_is_full_state():
    out = f8(STATE, DATA)
    assert len(out) == 128
    assert out != STATE


def test_deterministic():
    assert f8(STATE, DATA) == f8(bytearray(STATE), bytearray(DATA))


def test_message_injection_structure():
    # F8(H, M) = E8(H ^ (M || 0)) ^ (0 || M)
    data_low = DATA + bytes(64)
    data_high = bytes(64) + DATA
    lhs = _xor(f8(STATE, DATA), data_high)
    rhs = f8(_xor(STATE, data_low), bytes(64))
    assert lhs == rhs


def test_single_bit_change_in_state_diffuses():
    flipped = bytes([STATE[0] ^ 1]) + STATE[1:]
    a = f8(STATE, DATA)
    b = f8(flipped, DATA)
    differing = sum(x != y for x, y in zip(a, b))
    assert differing > 64


def test_single_bit_change_in_data_diffuses():
    flipped = DATA[:-1] + bytes([DATA[-1] ^ 0x80])
    a = f8(STATE, DATA)
    b = f8(STATE, flipped)
    differing = sum(x != y for x, y in zip(a, b))
    assert differing > 64


def test_zero_input_is_not_fixed_point():
    out = f8(bytes(128), bytes(64))
    assert out.count(0) < 32


@pytest.mark.parametrize("size", [0, 64, 127, 129])
def test_bad_state_length(size):
    with pytest.raises(ValueError):
        f8(bytes(size), bytes(64))


@pytest.mark.parametrize("size", [0, 32, 63, 65, 128])
def test_bad_data_length(size):
    with pytest.raises(ValueError):
        f8(bytes(128), bytes(size))