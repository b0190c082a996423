"""Grøstl compression and output transformations for the 512- and 1024-bit states.

A chaining value is the state matrix as bytes in column order: byte
``col * 8 + row`` holds the matrix entry at ``row``, ``col``.
"""

from __future__ import annotations

from dataclasses import dataclass

STATE_SIZE_512 = 64
STATE_SIZE_1024 = 128

_ROWS = 8


def _gmul(a: int, b: int) -> int:
    """Multiply two elements of GF(2^8) modulo x^8 + x^4 + x^3 + x + 1."""
    product = 0
    while b:
        if b & 1:
            product ^= a
        a <<= 1
        if a & 0x100:
            a ^= 0x11B
        b >>= 1
    return product


def _ginv(x: int) -> int:
    if x == 0:
        return 0
    result = 1
    base = x
    exponent = 254
    while exponent:
        if exponent & 1:
            result = _gmul(result, base)
        base = _gmul(base, base)
        exponent >>= 1
    return result


def _rotl8(x: int, n: int) -> int:
    return ((x << n) | (x >> (8 - n))) & 0xFF


def _sbox_entry(x: int) -> int:
    b = _ginv(x)
    return b ^ _rotl8(b, 1) ^ _rotl8(b, 2) ^ _rotl8(b, 3) ^ _rotl8(b, 4) ^ 0x63


SBOX = tuple(_sbox_entry(x) for x in range(256))

# First row of the circulant MixBytes matrix; row i is this rotated right by i.
_MIX_ROW = (2, 2, 3, 4, 5, 3, 5, 7)
_MUL = {c: tuple(_gmul(c, x) for x in range(256)) for c in set(_MIX_ROW)}
_MIX = tuple(
    tuple(_MUL[_MIX_ROW[(k - i) % _ROWS]] for k in range(_ROWS))
    for i in range(_ROWS)
)


@dataclass(frozen=True)
class _Variant:
    columns: int
    rounds: int
    shift_p: tuple[int, ...]
    shift_q: tuple[int, ...]

    @property
    def size(self) -> int:
        return self.columns * _ROWS


_V512 = _Variant(8, 10, (0, 1, 2, 3, 4, 5, 6, 7), (1, 3, 5, 7, 0, 2, 4, 6))
_V1024 = _Variant(16, 14, (0, 1, 2, 3, 4, 5, 6, 11), (1, 3, 5, 11, 0, 2, 4, 6))


def _permute(variant: _Variant, state: bytes, is_q: bool) -> bytes:
    """Apply permutation P (or Q when ``is_q``) to a state."""
    cols = variant.columns
    shifts = variant.shift_q if is_q else variant.shift_p
    s = list(state)
    for r in range(variant.rounds):
        # AddRoundConstant
        if is_q:
            s = [b ^ 0xFF for b in s]
            for j in range(cols):
                s[j * _ROWS + 7] ^= (j << 4) ^ r
        else:
            for j in range(cols):
                s[j * _ROWS] ^= (j << 4) ^ r
        # SubBytes and ShiftBytes
        shifted = [
            SBOX[s[((c + shifts[row]) % cols) * _ROWS + row]]
            for c in range(cols)
            for row in range(_ROWS)
        ]
        # MixBytes
        mixed = []
        for c in range(cols):
            column = shifted[c * _ROWS : (c + 1) * _ROWS]
            for tables in _MIX:
                value = 0
                for table, byte in zip(tables, column):
                    value ^= table[byte]
                mixed.append(value)
        s = mixed
    return bytes(s)


def _xor(*parts: bytes) -> bytes:
    return bytes(_xor_bytes(parts))


def _xor_bytes(parts: tuple[bytes, ...]):
    for column in zip(*parts):
        value = 0
        for byte in column:
            value ^= byte
        yield value


def _check(name: str, value: bytes, size: int) -> bytes:
    value = bytes(value)
    if len(value) != size:
        raise ValueError(f"{name} must be {size} bytes, got {len(value)}")
    return value


def _compress(variant: _Variant, cv: bytes, block: bytes) -> bytes:
    cv = _check("cv", cv, variant.size)
    block = _check("block", block, variant.size)
    p = _permute(variant, _xor(cv, block), is_q=False)
    q = _permute(variant, block, is_q=True)
    return _xor(p, q, cv)


def _output(variant: _Variant, cv: bytes) -> bytes:
    cv = _check("cv", cv, variant.size)
    return _xor(_permute(variant, cv, is_q=False), cv)


def compress512(cv: bytes, block: bytes) -> bytes:
    """Compress a 64-byte block into a 64-byte chaining value."""
    return _compress(_V512, cv, block)


def output512(cv: bytes) -> bytes:
    """Apply the output transformation to a 64-byte chaining value."""
    return _output(_V512, cv)


def compress1024(cv: bytes, block: bytes) -> bytes:
    """Compress a 128-byte block into a 128-byte chaining value."""
    return _compress(_V1024, cv, block)


def output1024(cv: bytes) -> bytes:
    """Apply the output transformation to a 128-byte chaining value."""
    return _output(_V1024, cv)