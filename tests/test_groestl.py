import pytest

from purecrypt.groestl import Groestl, Groestl224, Groestl256, Groestl384, Groestl512

ALL = [Groestl224, Groestl256, Groestl384, Groestl512]


def test_groestl256_empty():
    assert (
        Groestl256().hexdigest()
        == "1a52d11d550039be16107f9c58db9ebcc417f16f736adb2502567119f0083467"
    )


def test_groestl256_fox():
    message = b"The quick brown fox jumps over the lazy dog"
    assert (
        Groestl256(message).hexdigest()
        == "8c7ad62eb26a21297bc39c2d7293b4bd4d3399fa8afab29e970471739e28b301"
    )


def test_groestl224_empty():
    assert (
        Groestl224().hexdigest()
        == "f2e180fb5947be964cd584e22e496242c6a329c577fc4ce8c36d34c3"
    )


def test_groestl512_empty():
    assert Groestl512().hexdigest() == (
        "6d3ad29d279110eef3adbd66de2a0345a77baede1557f5d099fce0c03d6dc2ba"
        "8e6d4a6633dfbd66053c20faa87d1a11f39a7fbe4a6c2f009801370308fc4ad8"
    )


@pytest.mark.parametrize(
    "cls, size", [(Groestl224, 28), (Groestl256, 32), (Groestl384, 48), (Groestl512, 64)]
)
def test_digest_size(cls, size):
    assert len(cls(b"abc").digest()) == size


def test_truncated_variants_differ_from_full():
    assert Groestl224().digest() != Groestl256().digest()[-28:]
    assert Groestl384().digest() != Groestl512().digest()[-48:]


@pytest.mark.parametrize("cls", [Groestl256, Groestl512])
@pytest.mark.parametrize("length", [1, 55, 56, 57, 64, 119, 120, 121, 128, 129])
def test_chunked_matches_one_shot(cls, length):
    message = bytes((i * 13) & 0xFF for i in range(length))
    whole = cls(message).digest()
    h = cls()
    for i in range(0, length, 11):
        h.update(message[i : i + 11])
    assert h.digest() == whole


def test_padding_boundary_messages_differ():
    assert Groestl256(bytes(55)).digest() != Groestl256(bytes(56)).digest()
    assert Groestl256(bytes(56)).digest() != Groestl256(bytes(57)).digest()


def test_digest_does_not_consume_state():
    h = Groestl256(b"hello")
    first = h.digest()
    assert h.digest() == first
    h.update(b" world")
    assert h.digest() == Groestl256(b"hello world").digest()


def test_copy_is_independent():
    h = Groestl384(b"prefix")
    clone = h.copy()
    clone.update(b"more")
    assert h.digest() == Groestl384(b"prefix").digest()
    assert clone.digest() == Groestl384(b"prefixmore").digest()


def test_reset():
    h = Groestl256(b"data")
    h.reset()
    assert (
        h.hexdigest()
        == "1a52d11d550039be16107f9c58db9ebcc417f16f736adb2502567119f0083467"
    )


def test_base_class_rejected():
    with pytest.raises(TypeError):
        Groestl()


def test_name():
    assert Groestl512().name == "groestl512"