"""JH hash functions in their 224, 256, 384 and 512-bit forms."""

from __future__ import annotations

from typing import ClassVar

from purecrypt.jh_compressor import BLOCK_SIZE, f8

_MASK64 = (1 << 64) - 1

JH224_H0 = bytes.fromhex(
    "2dfedd62f99a98acae7cacd619d634e7a4831005bc301216b86038c6c966149466d9899f2580706fce9ea31b1d9b1adc11e8325f7b366e10f994857f02fa06c1"
    "1b4f1b5cd8c840b397f6a17f6e738099dcdf93a5adeaa3d3a431e8dec9539a6822b4a98aec86a1e4d574ac959ce56cf015960deab5ab2bbf9611dcf0dd64ea6e"
)

JH256_H0 = bytes.fromhex(
    "eb98a3412c20d3eb92cdbe7b9cb245c11c93519160d4c7fa260082d67e508a03a4239e267726b945e0fb1a48d41a9477cdb5ab26026b177a56f024420fff2fa8"
    "71a396897f2e4d751d144908f77de262277695f776248f9487d5b6574780296c5c5e272dac8e0d6c518450c657057a0f7be4d367702412ea89e3ab13d31cd769"
)

JH384_H0 = bytes.fromhex(
    "481e3bc6d813398a6d3b5e894ade879b63faea68d480ad2e332ccb21480f826798aec84d9082b928d455ea304111424936f555b2924847ecc7250a93baf43ce1"
    "569b7f8a27db454c9efcbd496397af0e589fc27d26aa80cd80c08b8c9deb2eda8a7981e8f8d5373af43967adddd17a71a9b4d3bda475d394976c3fba9842737f"
)

JH512_H0 = bytes.fromhex(
    "6fd14b963e00aa17636a2e057a15d5438a225e8d0c97ef0be9341259f2b3c361891da0c1536f801e2aa9056bea2b6d80588eccdb2075baa6a90f3a76baf83bf7"
    "0169e60541e34a6946b58a8e2e6fe65a1047a7d0c1843c243b6e71b12d5ac199cf57f6ec9db1f856a706887c5716b156e3c2fcdfe68517fb545a4678cc8cdd4b"
)


class Jh:
    """Base class of the JH hashes; use one of the sized subclasses."""

    digest_size: ClassVar[int] = 0
    block_size: ClassVar[int] = BLOCK_SIZE
    _h0: ClassVar[bytes] = b""

    def __init__(self, data: bytes = b"") -> None:
        if not self._h0:
            raise TypeError("use a sized Jh variant")
        self.reset()
        if data:
            self.update(data)

    @property
    def name(self) -> str:
        return f"jh{self.digest_size * 8}"

    def reset(self) -> None:
        """Return the hash to its state before any data was fed."""
        self._state = self._h0
        self._buffer = bytearray()
        self._length = 0

    def update(self, data: bytes) -> None:
        """Feed more message bytes."""
        data = bytes(data)
        self._length += len(data)
        self._buffer += data
        size = self.block_size
        while len(self._buffer) >= size:
            block = bytes(self._buffer[:size])
            del self._buffer[:size]
            self._state = f8(self._state, block)

    def digest(self) -> bytes:
        """Return the digest of the data fed so far."""
        size = self.block_size
        bit_length = ((self._length * 8) & _MASK64).to_bytes(8, "big")
        tail = bytes(self._buffer)
        state = self._state
        if not tail:
            state = f8(state, b"\x80" + bytes(size - 9) + bit_length)
        else:
            state = f8(state, (tail + b"\x80").ljust(size, b"\0"))
            state = f8(state, bytes(size - 8) + bit_length)
        return state[-self.digest_size :]

    def hexdigest(self) -> str:
        """Return the digest as a hexadecimal string."""
        return self.digest().hex()

    def copy(self) -> Jh:
        """Return an independent copy of this hash state."""
        clone = type(self).__new__(type(self))
        clone._state = self._state
        clone._buffer = bytearray(self._buffer)
        clone._length = self._length
        return clone

    def __repr__(self) -> str:
        return f"<{type(self).__name__} datalen={self._length}>"


class Jh224(Jh):
    """JH-224."""

    digest_size = 28
    _h0 = JH224_H0


class Jh256(Jh):
    """JH-256."""

    digest_size = 32
    _h0 = JH256_H0


class Jh384(Jh):
    """JH-384."""

    digest_size = 48
    _h0 = JH384_H0


class Jh512(Jh):
    """JH-512."""

    digest_size = 64
    _h0 = JH512_H0