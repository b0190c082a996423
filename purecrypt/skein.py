"""Skein hash functions built on the Threefish block ciphers."""

from __future__ import annotations

import struct
from typing import ClassVar

from purecrypt.threefish import Threefish, Threefish256, Threefish512, Threefish1024

_MASK64 = (1 << 64) - 1

_VERSION = 1
_ID_STRING_LE = 0x33414853
_SCHEMA_VER = (_VERSION << 32) | _ID_STRING_LE
_CFG_TREE_INFO_SEQUENTIAL = 0
_T1_FLAG_FIRST = 1 << 62
_T1_FLAG_FINAL = 1 << 63
_T1_BLK_TYPE_CFG = 4 << 56
_T1_BLK_TYPE_MSG = 48 << 56
_T1_BLK_TYPE_OUT = 63 << 56
_CFG_STR_LEN = 4 * 8


def _process_block(
    cipher: type[Threefish],
    x: bytes,
    t0: int,
    t1: int,
    block: bytes,
    byte_count: int,
) -> tuple[bytes, int, int]:
    """Run one UBI step; return the new chaining value and tweak."""
    t0 = (t0 + byte_count) & _MASK64
    encrypted = cipher(x, t0, t1).encrypt_block(block)
    x = bytes(a ^ b for a, b in zip(encrypted, block))
    return x, t0, t1 & ~_T1_FLAG_FIRST & _MASK64


class Skein:
    """Base class of the Skein hashes; use one of the sized subclasses."""

    _cipher: ClassVar[type[Threefish]] = Threefish
    block_size: ClassVar[int] = 0

    def __init__(self, data: bytes = b"", digest_size: int | None = None) -> None:
        if not self.block_size:
            raise TypeError("use a sized Skein variant")
        if digest_size is None:
            digest_size = self.block_size
        if digest_size <= 0:
            raise ValueError("digest_size must be positive")
        self.digest_size = digest_size
        self._initial_x = self._configure()
        self.reset()
        if data:
            self.update(data)

    @property
    def name(self) -> str:
        return f"skein{self.block_size * 8}-{self.digest_size * 8}"

    def _configure(self) -> bytes:
        cfg = struct.pack(
            "<QQQ",
            _SCHEMA_VER,
            (self.digest_size * 8) & _MASK64,
            _CFG_TREE_INFO_SEQUENTIAL,
        ).ljust(self.block_size, b"\0")
        x, _, _ = _process_block(
            self._cipher,
            bytes(self.block_size),
            0,
            _T1_FLAG_FIRST | _T1_BLK_TYPE_CFG | _T1_FLAG_FINAL,
            cfg,
            _CFG_STR_LEN,
        )
        return x

    def reset(self) -> None:
        """Return the hash to its state before any data was fed."""
        self._x = self._initial_x
        self._t0 = 0
        self._t1 = _T1_FLAG_FIRST | _T1_BLK_TYPE_MSG
        self._buffer = bytearray()

    def update(self, data: bytes) -> None:
        """Feed more message bytes."""
        self._buffer += data
        size = self.block_size
        # The last full block is kept back: it may turn out to be the final one.
        while len(self._buffer) > size:
            block = bytes(self._buffer[:size])
            del self._buffer[:size]
            self._x, self._t0, self._t1 = _process_block(
                self._cipher, self._x, self._t0, self._t1, block, size
            )

    def digest(self) -> bytes:
        """Return the digest of the data fed so far."""
        size = self.block_size
        pos = len(self._buffer)
        final_block = bytes(self._buffer).ljust(size, b"\0")
        x, _, _ = _process_block(
            self._cipher,
            self._x,
            self._t0,
            self._t1 | _T1_FLAG_FINAL,
            final_block,
            pos,
        )
        out = bytearray()
        counter = 0
        while len(out) < self.digest_size:
            ctr_block = struct.pack("<Q", counter).ljust(size, b"\0")
            y, _, _ = _process_block(
                self._cipher,
                x,
                0,
                _T1_FLAG_FIRST | _T1_BLK_TYPE_OUT | _T1_FLAG_FINAL,
                ctr_block,
                8,
            )
            out += y[: self.digest_size - len(out)]
            counter += 1
        return bytes(out)

    def hexdigest(self) -> str:
        """Return the digest as a hexadecimal string."""
        return self.digest().hex()

    def copy(self) -> Skein:
        """Return an independent copy of this hash state."""
        clone = type(self).__new__(type(self))
        clone.digest_size = self.digest_size
        clone._initial_x = self._initial_x
        clone._x = self._x
        clone._t0 = self._t0
        clone._t1 = self._t1
        clone._buffer = bytearray(self._buffer)
        return clone

    def __repr__(self) -> str:
        return f"<{type(self).__name__} digest_size={self.digest_size}>"


class Skein256(Skein):
    """Skein with a 256-bit internal state."""

    _cipher = Threefish256
    block_size = 32


class Skein512(Skein):
    """Skein with a 512-bit internal state."""

    _cipher = Threefish512
    block_size = 64


class Skein1024(Skein):
    """Skein with a 1024-bit internal state."""

    _cipher = Threefish1024
    block_size = 128