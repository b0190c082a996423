"""Grøstl hash functions in their 224, 256, 384 and 512-bit forms."""

from __future__ import annotations

from typing import Callable, ClassVar

from purecrypt.groestl_compressor import (
    STATE_SIZE_512,
    STATE_SIZE_1024,
    compress512,
    compress1024,
    output512,
    output1024,
)

_MASK64 = (1 << 64) - 1

_CORES: dict[int, tuple[Callable[[bytes, bytes], bytes], Callable[[bytes], bytes]]] = {
    STATE_SIZE_512: (compress512, output512),
    STATE_SIZE_1024: (compress1024, output1024),
}


class Groestl:
    """Base class of the Grøstl hashes; use one of the sized subclasses."""

    digest_size: ClassVar[int] = 0
    block_size: ClassVar[int] = 0

    def __init__(self, data: bytes = b"") -> None:
        if not self.block_size:
            raise TypeError("use a sized Groestl variant")
        self.reset()
        if data:
            self.update(data)

    @property
    def name(self) -> str:
        return f"groestl{self.digest_size * 8}"

    def _iv(self) -> bytes:
        return bytes(self.block_size - 8) + (self.digest_size * 8).to_bytes(8, "big")

    def reset(self) -> None:
        """Return the hash to its state before any data was fed."""
        self._cv = self._iv()
        self._buffer = bytearray()
        self._blocks = 0

    def update(self, data: bytes) -> None:
        """Feed more message bytes."""
        compress, _ = _CORES[self.block_size]
        size = self.block_size
        self._buffer += data
        while len(self._buffer) >= size:
            block = bytes(self._buffer[:size])
            del self._buffer[:size]
            self._blocks += 1
            self._cv = compress(self._cv, block)

    def digest(self) -> bytes:
        """Return the digest of the data fed so far."""
        compress, output = _CORES[self.block_size]
        size = self.block_size
        tail = bytes(self._buffer) + b"\x80"
        extra_block = len(tail) > size - 8
        count = (self._blocks + 1 + int(extra_block)) & _MASK64
        footer = count.to_bytes(8, "big")
        cv = self._cv
        if extra_block:
            cv = compress(cv, tail.ljust(size, b"\0"))
            tail = b""
        cv = compress(cv, tail.ljust(size - 8, b"\0") + footer)
        return output(cv)[-self.digest_size :]

    def hexdigest(self) -> str:
        """Return the digest as a hexadecimal string."""
        return self.digest().hex()

    def copy(self) -> Groestl:
        """Return an independent copy of this hash state."""
        clone = type(self).__new__(type(self))
        clone._cv = self._cv
        clone._buffer = bytearray(self._buffer)
        clone._blocks = self._blocks
        return clone

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


class Groestl224(Groestl):
    """Grøstl-224."""

    digest_size = 28
    block_size = STATE_SIZE_512


class Groestl256(Groestl):
    """Grøstl-256."""

    digest_size = 32
    block_size = STATE_SIZE_512


class Groestl384(Groestl):
    """Grøstl-384."""

    digest_size = 48
    block_size = STATE_SIZE_1024


class Groestl512(Groestl):
    """Grøstl-512."""

    digest_size = 64
    block_size = STATE_SIZE_1024