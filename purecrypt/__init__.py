"""Pure-Python Threefish block ciphers, Skein, BLAKE, JH and Groestl hashes, and ChaCha stream ciphers."""

__version__ = "0.1.0"