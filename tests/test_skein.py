import pytest

from purecrypt.skein import Skein, Skein256, Skein512, Skein1024


def test_skein512_256_empty():
    assert (
        Skein512(digest_size=32).hexdigest()
        == "39ccc4554a8b31853b9de7a1fe638a24cce6b35a55f2431009e18780335d2621"
    )


def test_skein512_256_fox():
    h = Skein512(b"The quick brown fox jumps over the lazy dog", 32)
    assert (
        h.hexdigest()
        == "b3250457e05d3060b1a4bbc1428bc75a3f525ca389aeab96cfa34638d96e492a"
    )


@pytest.mark.parametrize("size", [32, 64])
def test_digest_length(size):
    assert len(Skein256(b"abc", size).digest()) == size
    assert len(Skein512(b"abc", size).digest()) == size
    assert len(Skein1024(b"abc", size).digest()) == size


@pytest.mark.parametrize("size", [32, 64])
@pytest.mark.parametrize("length", [0, 1, 31, 32, 33, 64, 128, 129, 300])
def test_incremental_matches_oneshot(size, length):
    data = bytes(i % 251 for i in range(length))
    pairs = [
        (Skein256(digest_size=size), Skein256(data, size)),
        (Skein512(digest_size=size), Skein512(data, size)),
        (Skein1024(digest_size=size), Skein1024(data, size)),
    ]
    for h, whole in pairs:
        for start in range(0, length, 7):
            h.update(data[start : start + 7])
        assert h.digest() == whole.digest()


def test_digest_is_repeatable():
    pairs = [
        (Skein256(b"hello", 32), Skein256(b"hello world", 32)),
        (Skein512(b"hello", 32), Skein512(b"hello world", 32)),
        (Skein1024(b"hello", 32), Skein1024(b"hello world", 32)),
    ]
    for h, expected in pairs:
        first = h.digest()
        assert h.digest() == first
        h.update(b" world")
        assert h.digest() == expected.digest()


def test_output_size_affects_digest_prefix():
    short = Skein512(b"abc", 32).digest()
    long = Skein512(b"abc", 64).digest()
    assert long[:32] != short


def test_long_output_spans_counter_blocks():
    out = Skein256(b"abc", 80).digest()
    assert len(out) == 80
    assert out[:32] != out[32:64]


def test_copy_is_independent():
    h = Skein1024(b"abc", 64)
    c = h.copy()
    c.update(b"def")
    assert h.digest() == Skein1024(b"abc", 64).digest()
    assert c.digest() == Skein1024(b"abcdef", 64).digest()


def test_reset():
    h = Skein256(b"some data", 32)
    h.reset()
    assert h.digest() == Skein256(digest_size=32).digest()


def test_variants_differ():
    digests = {
        Skein256(b"abc", 32).digest(),
        Skein512(b"abc", 32).digest(),
        Skein1024(b"abc", 32).digest(),
    }
    assert len(digests) == 3


def test_default_digest_size_is_state_size():
    assert len(Skein1024(b"x").digest()) == 128


def test_zero_digest_size_rejected():
    with pytest.raises(ValueError):
        Skein256(b"", 0)


def test_base_class_rejected():
    with pytest.raises(TypeError):
        Skein()