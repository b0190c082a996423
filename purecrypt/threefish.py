"""Threefish tweakable block cipher in its 256, 512 and 1024-bit variants."""

from __future__ import annotations

import struct
from typing import ClassVar, Sequence

_MASK64 = (1 << 64) - 1

# Key schedule constant.
C240 = 0x1BD11BDAA9FC1A22

R_256 = (
    (14, 16),
    (52, 57),
    (23, 40),
    (5, 37),
    (25, 33),
    (46, 12),
    (58, 22),
    (32, 32),
)

R_512 = (
    (46, 36, 19, 37),
    (33, 27, 14, 42),
    (17, 49, 36, 39),
    (44, 9, 54, 56),
    (39, 30, 34, 24),
    (13, 50, 10, 17),
    (25, 29, 39, 43),
    (8, 35, 56, 22),
)

R_1024 = (
    (24, 13, 8, 47, 8, 17, 22, 37),
    (38, 19, 10, 55, 49, 18, 23, 52),
    (33, 4, 51, 13, 34, 41, 59, 17),
    (5, 20, 48, 41, 47, 28, 16, 25),
    (41, 9, 37, 31, 12, 47, 44, 30),
    (16, 34, 56, 51, 4, 53, 42, 41),
    (31, 44, 47, 46, 19, 42, 44, 25),
    (9, 48, 35, 52, 23, 31, 37, 20),
)

P_256 = (0, 3, 2, 1)
P_512 = (6, 1, 0, 7, 2, 5, 4, 3)
P_1024 = (0, 15, 2, 11, 6, 13, 4, 9, 14, 1, 8, 5, 10, 3, 12, 7)


def _rotl(x: int, r: int) -> int:
    return ((x << r) | (x >> (64 - r))) & _MASK64


def _rotr(x: int, r: int) -> int:
    return ((x >> r) | (x << (64 - r))) & _MASK64


def _mix(r: int, x0: int, x1: int) -> tuple[int, int]:
    y0 = (x0 + x1) & _MASK64
    y1 = _rotl(x1, r) ^ y0
    return y0, y1


def _inv_mix(r: int, y0: int, y1: int) -> tuple[int, int]:
    x1 = _rotr(y0 ^ y1, r)
    x0 = (y0 - x1) & _MASK64
    return x0, x1


class Threefish:
    """Base class of the Threefish ciphers; use one of the sized subclasses."""

    block_size: ClassVar[int] = 0
    rounds: ClassVar[int] = 0
    _rotations: ClassVar[Sequence[Sequence[int]]] = ()
    _permutation: ClassVar[Sequence[int]] = ()

    def __init__(self, key: bytes, tweak0: int = 0, tweak1: int = 0) -> None:
        if not self.block_size:
            raise TypeError("use a sized Threefish variant")
        key = bytes(key)
        if len(key) != self.block_size:
            raise ValueError(
                f"key must be {self.block_size} bytes, got {len(key)}"
            )
        n_w = self._words
        k = list(self._unpack(key))
        parity = C240
        for word in k:
            parity ^= word
        k.append(parity)
        tweak0 &= _MASK64
        tweak1 &= _MASK64
        t = (tweak0, tweak1, tweak0 ^ tweak1)

        self._subkeys: list[tuple[int, ...]] = []
        for s in range(self.rounds // 4 + 1):
            subkey = [k[(s + i) % (n_w + 1)] for i in range(n_w)]
            subkey[n_w - 3] = (subkey[n_w - 3] + t[s % 3]) & _MASK64
            subkey[n_w - 2] = (subkey[n_w - 2] + t[(s + 1) % 3]) & _MASK64
            subkey[n_w - 1] = (subkey[n_w - 1] + s) & _MASK64
            self._subkeys.append(tuple(subkey))

    @property
    def _words(self) -> int:
        return self.block_size // 8

    def _unpack(self, data: bytes) -> tuple[int, ...]:
        return struct.unpack(f"<{self._words}Q", data)

    def _pack(self, words: Sequence[int]) -> bytes:
        return struct.pack(f"<{self._words}Q", *words)

    def _check_block(self, block: bytes) -> bytes:
        block = bytes(block)
        if len(block) != self.block_size:
            raise ValueError(
                f"block must be {self.block_size} bytes, got {len(block)}"
            )
        return block

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt one block and return the ciphertext."""
        v = list(self._unpack(self._check_block(block)))
        perm = self._permutation
        pairs = self._words // 2
        for i in range(self.rounds // 8):
            for d in range(8):
                prev = tuple(v)
                rot = self._rotations[d]
                subkey = self._subkeys[2 * i + d // 4] if d % 4 == 0 else None
                for j in range(pairs):
                    e0, e1 = prev[2 * j], prev[2 * j + 1]
                    if subkey is not None:
                        e0 = (e0 + subkey[2 * j]) & _MASK64
                        e1 = (e1 + subkey[2 * j + 1]) & _MASK64
                    f0, f1 = _mix(rot[j], e0, e1)
                    v[perm[2 * j]] = f0
                    v[perm[2 * j + 1]] = f1
        last = self._subkeys[self.rounds // 4]
        return self._pack([(x + k) & _MASK64 for x, k in zip(v, last)])

    def decrypt_block(self, block: bytes) -> bytes:
        """Decrypt one block and return the plaintext."""
        words = self._unpack(self._check_block(block))
        last = self._subkeys[self.rounds // 4]
        v = [(x - k) & _MASK64 for x, k in zip(words, last)]
        perm = self._permutation
        pairs = self._words // 2
        for i in reversed(range(self.rounds // 8)):
            for d in reversed(range(8)):
                prev = tuple(v)
                rot = self._rotations[d]
                subkey = self._subkeys[2 * i + d // 4] if d % 4 == 0 else None
                for j in range(pairs):
                    f0, f1 = prev[perm[2 * j]], prev[perm[2 * j + 1]]
                    e0, e1 = _inv_mix(rot[j], f0, f1)
                    if subkey is not None:
                        e0 = (e0 - subkey[2 * j]) & _MASK64
                        e1 = (e1 - subkey[2 * j + 1]) & _MASK64
                    v[2 * j] = e0
                    v[2 * j + 1] = e1
        return self._pack(v)


class Threefish256(Threefish):
    """Threefish with 256-bit key and block."""

    block_size = 32
    rounds = 72
    _rotations = R_256
    _permutation = P_256


class Threefish512(Threefish):
    """Threefish with 512-bit key and block."""

    block_size = 64
    rounds = 72
    _rotations = R_512
    _permutation = P_512


class Threefish1024(Threefish):
    """Threefish with 1024-bit key and block."""

    block_size = 128
    rounds = 80
    _rotations = R_1024
    _permutation = P_1024