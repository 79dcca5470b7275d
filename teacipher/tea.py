"""TEA block cipher (16 rounds) in CBC mode with a salted, padded envelope.

Envelope layout before encryption::

    PadLen(1 byte) + Padding(0-7 bytes) + Salt(2 bytes) + Body + Zero(7 bytes)

The low three bits of the first byte hold the padding length; its upper five
bits are random.
"""

from __future__ import annotations

import random
import struct
from typing import Callable, Optional

DELTA = 0x9E3779B9
ROUNDS = 16
LOG_ROUNDS = 4
SALT_LEN = 2
ZERO_LEN = 7
BLOCK_SIZE = 8
KEY_SIZE = 16
MAX_TEXT_LEN = 511

_MASK = 0xFFFFFFFF

__all__ = [
    "TeaFormatError",
    "encrypt_block",
    "decrypt_block",
    "symmetry_encrypt",
    "symmetry_decrypt",
    "encrypt_text",
]


class TeaFormatError(ValueError):
    """Raised when a ciphertext is not a well-formed envelope."""


def _key_words(key: bytes) -> tuple[int, int, int, int]:
    key = bytes(key)
    if len(key) < KEY_SIZE:
        raise ValueError(f"key must be at least {KEY_SIZE} bytes, got {len(key)}")
    return struct.unpack(">4I", key[:KEY_SIZE])


def _block_words(block: bytes) -> tuple[int, int]:
    block = bytes(block)
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")
    return struct.unpack(">2I", block)


def _encipher(y: int, z: int, k: tuple[int, int, int, int]) -> bytes:
    k0, k1, k2, k3 = k
    total = 0
    for _ in range(ROUNDS):
        total = (total + DELTA) & _MASK
        y = (y + (((z << 4) + k0) ^ (z + total) ^ ((z >> 5) + k1))) & _MASK
        z = (z + (((y << 4) + k2) ^ (y + total) ^ ((y >> 5) + k3))) & _MASK
    return struct.pack(">2I", y, z)


def _decipher(y: int, z: int, k: tuple[int, int, int, int]) -> bytes:
    k0, k1, k2, k3 = k
    total = (DELTA << LOG_ROUNDS) & _MASK
    for _ in range(ROUNDS):
        z = (z - (((y << 4) + k2) ^ (y + total) ^ ((y >> 5) + k3))) & _MASK
        y = (y - (((z << 4) + k0) ^ (z + total) ^ ((z >> 5) + k1))) & _MASK
        total = (total - DELTA) & _MASK
    return struct.pack(">2I", y, z)


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def encrypt_block(block: bytes, key: bytes) -> bytes:
    """Encrypt one 8-byte big-endian block with the first 16 bytes of ``key``."""
    return _encipher(*_block_words(block), _key_words(key))


def decrypt_block(block: bytes, key: bytes) -> bytes:
    """Decrypt one 8-byte big-endian block with the first 16 bytes of ``key``."""
    return _decipher(*_block_words(block), _key_words(key))


def _random_byte() -> int:
    return random.getrandbits(8)


def symmetry_encrypt(
    data: bytes, key: bytes, rng: Optional[Callable[[], int]] = None
) -> bytes:
    """Wrap ``data`` in the padded envelope and encrypt it in CBC mode.

    ``rng`` is called with no arguments for each random byte needed (header,
    padding and salt); only its low eight bits are used.
    """
    data = bytes(data)
    k = _key_words(key)
    draw = rng if rng is not None else _random_byte

    pad_len = (len(data) + 1 + SALT_LEN + ZERO_LEN) % BLOCK_SIZE
    if pad_len:
        pad_len = BLOCK_SIZE - pad_len

    plain = bytearray([(draw() & 0xF8) | pad_len])
    plain.extend(draw() & 0xFF for _ in range(pad_len + SALT_LEN))
    plain += data
    plain += bytes(ZERO_LEN)

    out = bytearray()
    iv = bytes(BLOCK_SIZE)
    for offset in range(0, len(plain), BLOCK_SIZE):
        chunk = _xor(plain[offset:offset + BLOCK_SIZE], iv)
        iv = _encipher(*struct.unpack(">2I", chunk), k)
        out += iv
    return bytes(out)


def symmetry_decrypt(data: bytes, key: bytes) -> bytes:
    """Decrypt an envelope made by :func:`symmetry_encrypt` and return its body.

    Raises :class:`TeaFormatError` if the length is wrong or the trailing
    zero bytes do not check out.
    """
    data = bytes(data)
    if len(data) % BLOCK_SIZE or len(data) < 2 * BLOCK_SIZE:
        raise TeaFormatError(
            f"ciphertext length must be a multiple of {BLOCK_SIZE} and at least "
            f"{2 * BLOCK_SIZE}, got {len(data)}"
        )
    k = _key_words(key)

    plain = bytearray()
    iv = bytes(BLOCK_SIZE)
    for offset in range(0, len(data), BLOCK_SIZE):
        block = data[offset:offset + BLOCK_SIZE]
        plain += _xor(_decipher(*struct.unpack(">2I", block), k), iv)
        iv = block

    pad_len = plain[0] & 0x07
    body_len = len(data) - 1 - pad_len - SALT_LEN - ZERO_LEN
    if body_len < 0:
        raise TeaFormatError("padding length exceeds ciphertext size")

    start = 1 + pad_len + SALT_LEN
    if any(plain[start + body_len:]):
        raise TeaFormatError("trailing zero check failed")
    return bytes(plain[start:start + body_len])


def _latin1(value: object, limit: int, reason: str) -> bytes:
    if not isinstance(value, str) or len(value) > limit:
        raise ValueError(reason)
    try:
        return value.encode("latin-1")
    except UnicodeEncodeError as exc:
        raise ValueError(reason) from exc


def encrypt_text(text: str, key: str) -> str:
    """Encrypt a Latin-1 string together with its terminating NUL byte.

    Both arguments are Latin-1 strings of at most 511 characters; the key
    must hold at least 16. The ciphertext is returned as a Latin-1 string.
    """
    body = _latin1(text, MAX_TEXT_LEN, "invalid_str")
    key_bytes = _latin1(key, MAX_TEXT_LEN, "invalid_key")
    if len(key_bytes) < KEY_SIZE:
        raise ValueError("invalid_key")
    return symmetry_encrypt(body + b"\0", key_bytes).decode("latin-1")