# purecrypt

This package provides cryptographic primitives written in pure Python, using only the standard library.

- **Threefish** (`purecrypt.threefish`): tweakable block ciphers with 256-, 512- and 1024-bit blocks.
- **Hashes**: Skein (`purecrypt.skein`), BLAKE (`purecrypt.blake`), JH (`purecrypt.jh`) and Groestl (`purecrypt.groestl`).
- **ChaCha** (`purecrypt.chacha`): stream ciphers with 64-bit nonces, the IETF variant with a 96-bit nonce, and the extended-nonce XChaCha variants.

Everything works on `bytes` and returns new `bytes`. Keys, nonces and blocks of the wrong length raise `ValueError`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Hashing

The hash objects follow the `hashlib` style. Each one takes optional initial data and has `update()`, `digest()`, `hexdigest()`, `copy()` and `reset()`. It also has the `digest_size`, `block_size` and `name` attributes. `digest()` does not change the state, so you can keep feeding data after calling it.

```python
from purecrypt.blake import Blake256
from purecrypt.groestl import Groestl512
from purecrypt.jh import Jh256
from purecrypt.skein import Skein512

h = Blake256(b"hello ")
h.update(b"world")
print(h.hexdigest())

print(Jh256(b"abc").hexdigest())
print(Groestl512(b"abc").hexdigest())

# Skein takes the output length in bytes; it defaults to the state size.
print(Skein512(b"abc", digest_size=32).hexdigest())
```

| Family  | Classes                                                | Module              |
|---------|--------------------------------------------------------|---------------------|
| BLAKE   | `Blake224`, `Blake256`, `Blake384`, `Blake512`         | `purecrypt.blake`   |
| JH      | `Jh224`, `Jh256`, `Jh384`, `Jh512`                     | `purecrypt.jh`      |
| Groestl | `Groestl224`, `Groestl256`, `Groestl384`, `Groestl512` | `purecrypt.groestl` |
| Skein   | `Skein256`, `Skein512`, `Skein1024`                    | `purecrypt.skein`   |

The compression functions can also be used on their own:

- `purecrypt.jh_compressor.f8(state, data)` takes a 128-byte state and a 64-byte block.
- `purecrypt.groestl_compressor` provides `compress512`, `output512`, `compress1024` and `output1024`.

## Threefish

The key and block lengths are both the block size: 32, 64 or 128 bytes. The two 64-bit tweak words default to 0.

```python
from purecrypt.threefish import Threefish256

key = bytes(range(32))
cipher = Threefish256(key, tweak0=0x0706050403020100, tweak1=0x0F0E0D0C0B0A0908)
ct = cipher.encrypt_block(bytes(32))
assert cipher.decrypt_block(ct) == bytes(32)
```

The classes are `Threefish256`, `Threefish512` and `Threefish1024`.

## ChaCha stream ciphers

Each cipher object keeps its position in the keystream. `apply_keystream(data)` XORs `data` with the next keystream bytes and returns the result. `seek(pos)` moves to a byte offset in the keystream.

```python
from purecrypt.chacha import ChaCha20

key = bytes(32)
nonce = bytes(8)

cipher = ChaCha20(key, nonce)
ciphertext = cipher.apply_keystream(b"attack at dawn")

cipher.seek(0)
assert cipher.apply_keystream(ciphertext) == b"attack at dawn"
```

| Class       | Nonce length | Rounds |
|-------------|--------------|--------|
| `ChaCha8`   | 8 bytes      | 8      |
| `ChaCha12`  | 8 bytes      | 12     |
| `ChaCha20`  | 8 bytes      | 20     |
| `Ietf`      | 12 bytes     | 20     |
| `XChaCha8`  | 24 bytes     | 8      |
| `XChaCha12` | 24 bytes     | 12     |
| `XChaCha20` | 24 bytes     | 20     |

Every cipher takes a 32-byte key.

### End of the keystream

`KeystreamExhaustedError` is a subclass of `OverflowError`. It is raised when a request would run past the end of the keystream.

`Ietf` has a 32-bit block counter, so its keystream is 256 GiB long. Seeking beyond that raises `ValueError`. The other variants have a 64-bit block counter.

### Lower-level interface

`purecrypt.chacha_core` exposes the block function state:

- `ChaCha` provides `refill`, `refill4`, `refill_rounds`, `seek64`, `seek32`, `get_stream_param`, `set_stream_param`, `stream32_eq` and `stream64_eq`.
- `init_chacha_x` derives an extended-nonce state.

## Limitations

- This is a library only. It has no command-line tool.
- It is written in pure Python. It is far slower than native implementations and makes no attempt at constant-time execution.

## Running the tests

```
pytest
```