"""ChaCha block function and stream position state."""

from __future__ import annotations

import struct

_MASK32 = 0xFFFFFFFF
_MASK64 = (1 << 64) - 1

BLOCK = 64
BUFSZ = 4 * BLOCK

_CONSTANTS = (0x61707865, 0x3320646E, 0x79622D32, 0x6B206574)

_COLUMNS = ((0, 4, 8, 12), (1, 5, 9, 13), (2, 6, 10, 14), (3, 7, 11, 15))
_DIAGONALS = ((0, 5, 10, 15), (1, 6, 11, 12), (2, 7, 8, 13), (3, 4, 9, 14))


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK32


def _quarter_round(s: list[int], a: int, b: int, c: int, d: int) -> None:
    s[a] = (s[a] + s[b]) & _MASK32
    s[d] = _rotl(s[d] ^ s[a], 16)
    s[c] = (s[c] + s[d]) & _MASK32
    s[b] = _rotl(s[b] ^ s[c], 12)
    s[a] = (s[a] + s[b]) & _MASK32
    s[d] = _rotl(s[d] ^ s[a], 8)
    s[c] = (s[c] + s[d]) & _MASK32
    s[b] = _rotl(s[b] ^ s[c], 7)


def _rounds(words: tuple[int, ...], drounds: int) -> list[int]:
    s = list(words)
    for _ in range(drounds):
        for indices in _COLUMNS:
            _quarter_round(s, *indices)
        for indices in _DIAGONALS:
            _quarter_round(s, *indices)
    return s


class ChaCha:
    """Key, nonce and block position of a ChaCha stream."""

    def __init__(self, key: bytes, nonce: bytes) -> None:
        key = bytes(key)
        nonce = bytes(nonce)
        if len(key) != 32:
            raise ValueError(f"key must be 32 bytes, got {len(key)}")
        if len(nonce) < 8:
            raise ValueError(f"nonce must be at least 8 bytes, got {len(nonce)}")
        first = struct.unpack("<I", nonce[:4])[0] if len(nonce) == 12 else 0
        self._b = struct.unpack("<4I", key[:16])
        self._c = struct.unpack("<4I", key[16:])
        self._d = (0, first, *struct.unpack("<2I", nonce[-8:]))

    @classmethod
    def _from_words(
        cls, b: tuple[int, ...], c: tuple[int, ...], d: tuple[int, ...]
    ) -> ChaCha:
        state = cls.__new__(cls)
        state._b = tuple(b)
        state._c = tuple(c)
        state._d = tuple(d)
        return state

    def _pos64(self) -> int:
        return (self._d[1] << 32) | self._d[0]

    def _d_at(self, pos: int) -> tuple[int, ...]:
        pos &= _MASK64
        return (pos & _MASK32, pos >> 32, self._d[2], self._d[3])

    def _block(self, d: tuple[int, ...], drounds: int) -> bytes:
        initial = (*_CONSTANTS, *self._b, *self._c, *d)
        mixed = _rounds(initial, drounds)
        return struct.pack(
            "<16I", *((x + y) & _MASK32 for x, y in zip(mixed, initial))
        )

    def seek64(self, blockct: int) -> None:
        """Set the 64-bit block count used by the next refill."""
        self._d = self._d_at(blockct)

    def seek32(self, blockct: int) -> None:
        """Set the low 32 bits of the block count used by the next refill."""
        self._d = (blockct & _MASK32, *self._d[1:])

    def refill(self, drounds: int) -> bytes:
        """Produce one block of keystream and advance by one block."""
        out = self._block(self._d, drounds)
        self._d = self._d_at(self._pos64() + 1)
        return out

    def refill4(self, drounds: int) -> bytes:
        """Produce four blocks of keystream and advance by four blocks."""
        pos = self._pos64()
        out = b"".join(self._block(self._d_at(pos + i), drounds) for i in range(4))
        self._d = self._d_at(pos + 4)
        return out

    def refill_rounds(self, drounds: int) -> tuple[int, ...]:
        """Return the 16 state words after the rounds, without feed-forward or advancing."""
        return tuple(_rounds((*_CONSTANTS, *self._b, *self._c, *self._d), drounds))

    def set_stream_param(self, param: int, value: int) -> None:
        """Set the 64-bit word ``param`` (0 is the position) of the counter/nonce row."""
        if param not in (0, 1):
            raise ValueError(f"stream parameter must be 0 or 1, got {param}")
        d = list(self._d)
        d[2 * param + 1] = (value >> 32) & _MASK32
        d[2 * param] = value & _MASK32
        self._d = tuple(d)

    def get_stream_param(self, param: int) -> int:
        """Return the 64-bit word ``param`` of the counter/nonce row."""
        if param not in (0, 1):
            raise ValueError(f"stream parameter must be 0 or 1, got {param}")
        return (self._d[2 * param + 1] << 32) | self._d[2 * param]

    def stream32_eq(self, other: ChaCha) -> bool:
        """Whether ``other`` is the same stream, ignoring the 32-bit position."""
        return self._b == other._b and self._c == other._c and self._d[1:] == other._d[1:]

    def stream64_eq(self, other: ChaCha) -> bool:
        """Whether ``other`` is the same stream, ignoring the 64-bit position."""
        return self._b == other._b and self._c == other._c and self._d[2:] == other._d[2:]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ChaCha):
            return NotImplemented
        return (self._b, self._c, self._d) == (other._b, other._c, other._d)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"<ChaCha position={self._pos64()}>"


def init_chacha_x(key: bytes, nonce: bytes, rounds: int) -> ChaCha:
    """Derive an extended-nonce ChaCha state from a 32-byte key and 24-byte nonce."""
    key = bytes(key)
    nonce = bytes(nonce)
    if len(key) != 32:
        raise ValueError(f"key must be 32 bytes, got {len(key)}")
    if len(nonce) != 24:
        raise ValueError(f"nonce must be 24 bytes, got {len(nonce)}")
    setup = ChaCha._from_words(
        struct.unpack("<4I", key[:16]),
        struct.unpack("<4I", key[16:]),
        struct.unpack("<4I", nonce[:16]),
    )
    x = setup.refill_rounds(rounds)
    return ChaCha._from_words(
        x[0:4], x[12:16], (0, 0, *struct.unpack("<2I", nonce[16:]))
    )