import pytest

from purecrypt.jh import Jh, Jh224, Jh256, Jh384, Jh512

EMPTY_224 = "2c99df889b019309051c60fecc2bd285a774940e43175b76b2626630"
EMPTY_256 = "46e64619c18bb0a92a5e87185a47eef83ca747b8fcc8e1412921357e326df434"
EMPTY_384 = (
    "2fe5f71b1b3290d3c017fb3c1a4d02a5cbeb03a0476481e25082434a881994b0"
    "ff99e078d2c16b105ad069b569315328"
)
EMPTY_512 = (
    "90ecf2f76f9d2c8017d979ad5ab96b87d58fc8fc4b83060f3f900774faa2c8fa"
    "be69c5f4ff1ec2b61d6b316941cedee117fb04b1f4c5bc1b919ae841c50eec4f"
)


def test_empty_message_kat():
    assert Jh224().hexdigest() == EMPTY_224
    assert Jh256().hexdigest() == EMPTY_256
    assert Jh384().hexdigest() == EMPTY_384
    assert Jh512().hexdigest() == EMPTY_512


@pytest.mark.parametrize("cls, size", [(Jh224, 28), (Jh256, 32), (Jh384, 48), (Jh512, 64)])
def test_digest_size(cls, size):
    assert len(cls(b"abc").digest()) == size


@pytest.mark.parametrize("length", [1, 55, 56, 63, 64, 65, 127, 128, 129])
def test_chunked_matches_one_shot(length):
    message = bytes(range(256))[:length]
    pairs = [
        (Jh224(), Jh224(message)),
        (Jh256(), Jh256(message)),
        (Jh384(), Jh384(message)),
        (Jh512(), Jh512(message)),
    ]
    for h, whole in pairs:
        for i in range(0, length, 7):
            h.update(message[i : i + 7])
        assert h.digest() == whole.digest()


def test_different_messages_differ():
    assert Jh256(b"a").digest() != Jh256(b"b").digest()
    assert Jh256(bytes(64)).digest() != Jh256(bytes(65)).digest()


def test_digest_does_not_consume_state():
    h = Jh256(b"hello")
    first = h.digest()
    assert h.digest() == first
    h.update(b" world")
    assert h.digest() == Jh256(b"hello world").digest()


def test_copy_is_independent():
    h = Jh512(b"prefix")
    clone = h.copy()
    clone.update(b"more")
    assert h.digest() == Jh512(b"prefix").digest()
    assert clone.digest() == Jh512(b"prefixmore").digest()


def test_reset():
    h = Jh224(b"some data")
    h.reset()
    assert h.hexdigest() == EMPTY_224


def test_base_class_rejected():
    with pytest.raises(TypeError):
        Jh()


def test_name():
    assert Jh384().name == "jh384"