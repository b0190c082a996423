import pytest

from purecrypt.groestl_compressor import (
    compress512,
    compress1024,
    output512,
    output1024,
)


def _iv(size: int, bits: int) -> bytes:
    return bytes(size - 8) + bits.to_bytes(8, "big")


def _single_padded_block(size: int) -> bytes:
    # Empty message: 0x80, zeros, then the block count (one) big-endian.
    return b"\x80" + bytes(size - 9) + (1).to_bytes(8, "big")


def test_empty_message_groestl256():
    cv = compress512(_iv(64, 256), _single_padded_block(64))
    out = output512(cv)
    assert out[32:].hex() == (
        "1a52d11d550039be16107f9c58db9ebcc417f16f736adb2502567119f0083467"
    )


def test_output_lengths():
    assert len(compress512(bytes(64), bytes(64))) == 64
    assert len(output512(bytes(64))) == 64
    assert len(compress1024(bytes(128), bytes(128))) == 128
    assert len(output1024(bytes(128))) == 128


def test_deterministic_and_accepts_bytearray():
    cv = bytearray(range(64))
    block = bytearray(range(64, 128))
    first = compress512(cv, block)
    second = compress512(bytes(cv), bytes(block))
    assert first == second
    assert cv == bytearray(range(64))


def test_different_blocks_give_different_results_512():
    cv = _iv(64, 256)
    a = compress512(cv, bytes(64))
    b = compress512(cv, b"\x01" + bytes(63))
    assert a != b
    assert a != cv


def test_different_blocks_give_different_results_1024():
    cv = _iv(128, 512)
    a = compress1024(cv, bytes(128))
    b = compress1024(cv, bytes(127) + b"\x01")
    assert a != b
    assert a != cv


def test_different_truncation_ivs_differ():
    block = _single_padded_block(64)
    assert output512(compress512(_iv(64, 224), block)) != output512(
        compress512(_iv(64, 256), block)
    )
    block = _single_padded_block(128)
    assert output1024(compress1024(_iv(128, 384), block)) != output1024(
        compress1024(_iv(128, 512), block)
    )


def test_output_differs_from_input():
    cv = _iv(128, 512)
    assert output1024(cv) != cv
    assert output1024(cv) == output1024(cv)


@pytest.mark.parametrize(
    "call",
    [
        lambda: compress512(bytes(63), bytes(64)),
        lambda: compress512(bytes(64), bytes(65)),
        lambda: output512(bytes(128)),
        lambda: compress1024(bytes(128), bytes(64)),
        lambda: compress1024(bytes(64), bytes(128)),
        lambda: output1024(bytes(64)),
    ],
)
def test_wrong_sizes_raise(call):
    with pytest.raises(ValueError):
        call()