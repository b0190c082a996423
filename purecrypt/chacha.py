"""ChaCha stream ciphers: the original 64-bit-nonce form, the IETF form and XChaCha."""

from __future__ import annotations

from typing import ClassVar

from purecrypt.chacha_core import BLOCK, BUFSZ, ChaCha, init_chacha_x

_MASK64 = (1 << 64) - 1

# Blocks available to a stream: 0 stands for the full 2**64 (wrapping) count.
_BIG_LEN = 0
_SMALL_LEN = 1 << 32


class KeystreamExhaustedError(OverflowError):
    """Raised when a request would run past the end of the keystream."""


def _xor(data: bytes, keystream: bytes) -> bytes:
    if not data:
        return b""
    value = int.from_bytes(data, "little") ^ int.from_bytes(keystream, "little")
    return value.to_bytes(len(data), "little")


class ChaChaStream:
    """Base class of the ChaCha stream ciphers; use one of the concrete variants."""

    key_size: ClassVar[int] = 32
    nonce_size: ClassVar[int] = 0
    drounds: ClassVar[int] = 0
    extended: ClassVar[bool] = False

    def __init__(self, key: bytes, nonce: bytes) -> None:
        if not self.nonce_size:
            raise TypeError("use a concrete ChaCha variant")
        key = bytes(key)
        nonce = bytes(nonce)
        if len(key) != self.key_size:
            raise ValueError(f"key must be {self.key_size} bytes, got {len(key)}")
        if len(nonce) != self.nonce_size:
            raise ValueError(
                f"nonce must be {self.nonce_size} bytes, got {len(nonce)}"
            )
        if self.extended:
            self._state = init_chacha_x(key, nonce, self.drounds)
            self._remaining = _BIG_LEN
            self._fresh = True
        else:
            self._state = ChaCha(key, nonce)
            small = self.nonce_size == 12
            self._remaining = _SMALL_LEN if small else _BIG_LEN
            self._fresh = not small
        self._out = bytes(BLOCK)
        # Keystream bytes left at the end of ``_out``; negative after a seek
        # into the middle of a block that has not been generated yet.
        self._have = 0

    def seek(self, pos: int) -> None:
        """Move to byte offset ``pos`` of the keystream."""
        if pos < 0 or pos > _MASK64:
            raise ValueError(f"stream position out of range: {pos}")
        blockct, offset = divmod(pos, BLOCK)
        if self.nonce_size != 12:
            self._remaining = (_BIG_LEN - blockct) & _MASK64
            self._fresh = blockct == 0
            self._state.seek64(blockct)
        else:
            if not (blockct < _SMALL_LEN or (blockct == _SMALL_LEN and offset == 0)):
                raise ValueError(f"stream position out of range: {pos}")
            self._remaining = _SMALL_LEN - blockct
            self._state.seek32(blockct)
        self._have = -offset

    def apply_keystream(self, data: bytes) -> bytes:
        """XOR ``data`` with the next keystream bytes and return the result."""
        data = bytes(data)
        drounds = self.drounds
        # A pending partial block from a seek is generated before the length check:
        # it is not an effect of this request.
        if self._have < 0:
            self._out = self._state.refill(drounds)
            self._have += BLOCK
            self._remaining = (self._remaining - 1) & _MASK64

        have = self._have
        ready = min(have, len(data))
        rest = len(data) - ready
        blocks_needed = -(-rest // BLOCK)
        remaining = self._remaining - blocks_needed
        if remaining < 0 and not self._fresh:
            raise KeystreamExhaustedError("keystream exhausted")
        self._remaining = remaining & _MASK64
        self._fresh = self._fresh and blocks_needed == 0

        start = BLOCK - have
        pieces = [self._out[start : start + ready]]
        have -= ready

        wide = rest - rest % BUFSZ
        pieces.extend(self._state.refill4(drounds) for _ in range(wide // BUFSZ))

        tail = rest - wide
        while tail:
            self._out = self._state.refill(drounds)
            n = min(tail, BLOCK)
            pieces.append(self._out[:n])
            have = BLOCK - n
            tail -= n

        self._have = have
        return _xor(data, b"".join(pieces))

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


class Ietf(ChaChaStream):
    """IETF ChaCha20 with a 96-bit nonce; limited to 256 GiB of keystream."""

    nonce_size = 12
    drounds = 10


class ChaCha8(ChaChaStream):
    """ChaCha with 8 rounds and a 64-bit nonce."""

    nonce_size = 8
    drounds = 4


class ChaCha12(ChaChaStream):
    """ChaCha with 12 rounds and a 64-bit nonce."""

    nonce_size = 8
    drounds = 6


class ChaCha20(ChaChaStream):
    """ChaCha with 20 rounds and a 64-bit nonce."""

    nonce_size = 8
    drounds = 10


class XChaCha8(ChaChaStream):
    """Extended-nonce ChaCha with 8 rounds."""

    nonce_size = 24
    drounds = 4
    extended = True


class XChaCha12(ChaChaStream):
    """Extended-nonce ChaCha with 12 rounds."""

    nonce_size = 24
    drounds = 6
    extended = True


class XChaCha20(ChaChaStream):
    """Extended-nonce ChaCha with 20 rounds."""

    nonce_size = 24
    drounds = 10
    extended = True