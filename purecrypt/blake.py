"""BLAKE hash functions (the SHA-3 finalist) in their 224, 256, 384 and 512-bit forms."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import ClassVar

SIGMA = (
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
    (11, 8, 12, 0, 5, 2, 15, 13, 10, 14, 3, 6, 7, 1, 9, 4),
    (7, 9, 3, 1, 13, 12, 11, 14, 2, 6, 5, 10, 4, 0, 15, 8),
    (9, 0, 5, 7, 2, 4, 10, 15, 14, 1, 11, 12, 6, 8, 3, 13),
    (2, 12, 6, 10, 0, 11, 8, 3, 4, 13, 7, 5, 15, 14, 1, 9),
    (12, 5, 1, 15, 14, 13, 4, 10, 0, 7, 6, 3, 9, 2, 8, 11),
    (13, 11, 7, 14, 12, 1, 3, 9, 5, 0, 15, 4, 8, 6, 2, 10),
    (6, 15, 14, 9, 11, 3, 0, 8, 12, 2, 13, 7, 1, 4, 10, 5),
    (10, 2, 8, 4, 7, 6, 1, 5, 15, 11, 9, 14, 3, 12, 13, 0),
    (0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
    (14, 10, 4, 8, 9, 15, 13, 6, 1, 12, 0, 2, 11, 7, 5, 3),
    (11, 8, 12, 0, 5, 2, 15, 13, 10, 14, 3, 6, 7, 1, 9, 4),
    (7, 9, 3, 1, 13, 12, 11, 14, 2, 6, 5, 10, 4, 0, 15, 8),
    (9, 0, 5, 7, 2, 4, 10, 15, 14, 1, 11, 12, 6, 8, 3, 13),
    (2, 12, 6, 10, 0, 11, 8, 3, 4, 13, 7, 5, 15, 14, 1, 9),
)

BLAKE256_U = (
    0x243F6A88, 0x85A308D3, 0x13198A2E, 0x03707344,
    0xA4093822, 0x299F31D0, 0x082EFA98, 0xEC4E6C89,
    0x452821E6, 0x38D01377, 0xBE5466CF, 0x34E90C6C,
    0xC0AC29B7, 0xC97C50DD, 0x3F84D5B5, 0xB5470917,
)

BLAKE512_U = (
    0x243F6A8885A308D3, 0x13198A2E03707344, 0xA4093822299F31D0, 0x082EFA98EC4E6C89,
    0x452821E638D01377, 0xBE5466CF34E90C6C, 0xC0AC29B7C97C50DD, 0x3F84D5B5B5470917,
    0x9216D5D98979FB1B, 0xD1310BA698DFB5AC, 0x2FFD72DBD01ADFB7, 0xB8E1AFED6A267E96,
    0xBA7C9045F12C7F99, 0x24A19947B3916CF7, 0x0801F2E2858EFC16, 0x636920D871574E69,
)

BLAKE224_IV = (
    0xC1059ED8, 0x367CD507, 0x3070DD17, 0xF70E5939,
    0xFFC00B31, 0x68581511, 0x64F98FA7, 0xBEFA4FA4,
)

BLAKE256_IV = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

BLAKE384_IV = (
    0xCBBB9D5DC1059ED8, 0x629A292A367CD507, 0x9159015A3070DD17, 0x152FECD8F70E5939,
    0x67332667FFC00B31, 0x8EB44A8768581511, 0xDB0C2E0D64F98FA7, 0x47B5481DBEFA4FA4,
)

BLAKE512_IV = (
    0x6A09E667F3BCC908, 0xBB67AE8584CAA73B, 0x3C6EF372FE94F82B, 0xA54FF53A5F1D36F1,
    0x510E527FADE682D1, 0x9B05688C2B3E6C1F, 0x1F83D9ABFB41BD6B, 0x5BE0CD19137E2179,
)

# State indices touched by each G call: four columns, then four diagonals.
_G_INDICES = (
    (0, 4, 8, 12),
    (1, 5, 9, 13),
    (2, 6, 10, 14),
    (3, 7, 11, 15),
    (0, 5, 10, 15),
    (1, 6, 11, 12),
    (2, 7, 8, 13),
    (3, 4, 9, 14),
)


@dataclass(frozen=True)
class _Params:
    word_bits: int
    rounds: int
    rotations: tuple[int, int, int, int]
    constants: tuple[int, ...]
    word_format: str

    @property
    def word_bytes(self) -> int:
        return self.word_bits // 8

    @property
    def mask(self) -> int:
        return (1 << self.word_bits) - 1

    @property
    def block_size(self) -> int:
        return 16 * self.word_bytes


_PARAMS_256 = _Params(32, 14, (16, 12, 8, 7), BLAKE256_U, "I")
_PARAMS_512 = _Params(64, 16, (32, 25, 16, 11), BLAKE512_U, "Q")


def _compress(
    params: _Params, h: tuple[int, ...], block: bytes, t0: int, t1: int
) -> tuple[int, ...]:
    """Compress one message block into the chaining value ``h``."""
    mask = params.mask
    bits = params.word_bits
    u = params.constants
    r1, r2, r3, r4 = params.rotations
    m = struct.unpack(f">16{params.word_format}", block)

    def rotr(x: int, n: int) -> int:
        return ((x >> n) | (x << (bits - n))) & mask

    v = [*h, *u[:4], u[4] ^ t0, u[5] ^ t0, u[6] ^ t1, u[7] ^ t1]
    for sigma in SIGMA[: params.rounds]:
        for (a, b, c, d), x, y in zip(_G_INDICES, sigma[0::2], sigma[1::2]):
            va = (v[a] + v[b] + (m[x] ^ u[y])) & mask
            vd = rotr(v[d] ^ va, r1)
            vc = (v[c] + vd) & mask
            vb = rotr(v[b] ^ vc, r2)
            va = (va + vb + (m[y] ^ u[x])) & mask
            vd = rotr(vd ^ va, r3)
            vc = (vc + vd) & mask
            vb = rotr(vb ^ vc, r4)
            v[a], v[b], v[c], v[d] = va, vb, vc, vd
    return tuple(hi ^ lo ^ hi2 for hi, lo, hi2 in zip(h, v[:8], v[8:]))


class Blake:
    """Base class of the BLAKE hashes; use one of the sized subclasses."""

    digest_size: ClassVar[int] = 0
    _params: ClassVar[_Params | None] = None
    _iv: ClassVar[tuple[int, ...]] = ()

    def __init__(self, data: bytes = b"") -> None:
        if self._params is None:
            raise TypeError("use a sized Blake variant")
        self.reset()
        if data:
            self.update(data)

    @property
    def block_size(self) -> int:
        return self._params.block_size

    @property
    def name(self) -> str:
        return f"blake{self.digest_size * 8}"

    def reset(self) -> None:
        """Return the hash to its state before any data was fed."""
        self._h = self._iv
        self._t = (0, 0)
        self._buffer = bytearray()

    def _advance(self, t: tuple[int, int], nbytes: int) -> tuple[int, int]:
        mask = self._params.mask
        t0 = t[0] + nbytes * 8
        t1 = t[1]
        if t0 > mask:
            t1 = (t1 + 1) & mask
        return t0 & mask, t1

    def update(self, data: bytes) -> None:
        """Feed more message bytes."""
        params = self._params
        size = params.block_size
        self._buffer += data
        while len(self._buffer) >= size:
            block = bytes(self._buffer[:size])
            del self._buffer[:size]
            self._t = self._advance(self._t, size)
            self._h = _compress(params, self._h, block, *self._t)

    def digest(self) -> bytes:
        """Return the digest of the data fed so far."""
        params = self._params
        size = params.block_size
        word_bytes = params.word_bytes
        tail = bytes(self._buffer)
        pos = len(tail)

        t0, t1 = self._advance(self._t, pos)
        msglen = t1.to_bytes(word_bytes, "big") + t0.to_bytes(word_bytes, "big")
        footerlen = 1 + 2 * word_bytes
        full = self.digest_size == 8 * word_bytes
        magic = (0x01 if full else 0x00) | (0x80 if pos + footerlen == size else 0x00)

        h = self._h
        extra_block = pos + footerlen > size
        if extra_block:
            h = _compress(params, h, tail + b"\x80" + bytes(size - pos - 1), t0, t1)
            tail = b""
            pos = 0
        if pos == 0:
            # A block holding only padding is compressed with a zero counter.
            t0 = t1 = 0
        fill = size - footerlen - pos
        padding = bytes(fill) if extra_block else (b"\x80" + bytes(fill))[:fill]
        h = _compress(params, h, tail + padding + bytes([magic]) + msglen, t0, t1)
        return struct.pack(f">8{params.word_format}", *h)[: self.digest_size]

    def hexdigest(self) -> str:
        """Return the digest as a hexadecimal string."""
        return self.digest().hex()

    def copy(self) -> Blake:
        """Return an independent copy of this hash state."""
        clone = type(self).__new__(type(self))
        clone._h = self._h
        clone._t = self._t
        clone._buffer = bytearray(self._buffer)
        return clone

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


class Blake224(Blake):
    """BLAKE-224."""

    digest_size = 28
    _params = _PARAMS_256
    _iv = BLAKE224_IV


class Blake256(Blake):
    """BLAKE-256."""

    digest_size = 32
    _params = _PARAMS_256
    _iv = BLAKE256_IV


class Blake384(Blake):
    """BLAKE-384."""

    digest_size = 48
    _params = _PARAMS_512
    _iv = BLAKE384_IV


class Blake512(Blake):
    """BLAKE-512."""

    digest_size = 64
    _params = _PARAMS_512
    _iv = BLAKE512_IV