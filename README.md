# teacipher

A pure-Python implementation of the Tiny Encryption Algorithm (16 rounds,
big-endian words) and of a symmetric envelope format built on it, along with
small helpers for hex text and big-endian byte writing. It has no
dependencies outside the standard library.

## Installation

```
pip install teacipher
```

For running the test suite:

```
pip install "teacipher[test]"
pytest
```

## The envelope format

`teacipher.tea.symmetry_encrypt` encrypts a message with TEA in CBC mode
(zero initial vector). Before encryption the plaintext is laid out as

```
PadLen (1 byte) | Padding (0-7 bytes) | Salt (2 bytes) | Body | Zero (7 bytes)
```

so that the whole is a multiple of 8 bytes. The low three bits of the first
byte carry the padding length and its upper five bits are random; the padding
and salt bytes are random too. The ciphertext is therefore always a multiple
of 8 bytes and at least 16 bytes long.

Keys must be at least 16 bytes; only the first 16 are used. A shorter key
raises `ValueError`.

## Usage

### Encrypting and decrypting

```python
import os
import random

from teacipher.tea import TeaFormatError, symmetry_decrypt, symmetry_encrypt

key = os.urandom(16)

ciphertext = symmetry_encrypt(b"hello, world", key)
assert len(ciphertext) % 8 == 0

plaintext = symmetry_decrypt(ciphertext, key)
assert plaintext == b"hello, world"
```

The optional third argument `rng` is a callable taking no arguments that
returns an integer; it is called once for each random byte (header, padding
and salt) and only its low eight bits are used. Without it the module-level
`random` generator is used. A seeded generator gives reproducible
ciphertexts:

```python
gen = random.Random(42)
ciphertext = symmetry_encrypt(b"hello, world", key, lambda: gen.getrandbits(8))
```

`symmetry_decrypt` raises `TeaFormatError` (a subclass of `ValueError`) when
the input is not a valid envelope: a length that is not a multiple of 8 or
shorter than 16 bytes, a padding length that does not fit, or trailing zero
bytes that do not check out (which is what a wrong key usually produces).

```python
try:
    symmetry_decrypt(b"\x00" * 10, key)
except TeaFormatError:
    print("not a TEA envelope")
```

### Text convenience

`encrypt_text(text, key)` takes two `str` values that must be encodable as
Latin-1 and at most 511 characters long; the key must have at least 16
characters. It encrypts the text followed by a terminating NUL byte and
returns the ciphertext decoded as a Latin-1 string. Invalid input raises
`ValueError` with the message `invalid_str` or `invalid_key`. Decrypting the
result with `symmetry_decrypt(result.encode("latin-1"), key.encode("latin-1"))`
gives the text's bytes with the trailing `b"\0"`.

### Single blocks

`encrypt_block` and `decrypt_block` run the raw cipher on one 8-byte block
(any other length raises `ValueError`):

```python
from teacipher.tea import decrypt_block, encrypt_block

block = b"ABCDEFGH"
assert decrypt_block(encrypt_block(block, key), key) == block
```

### Hex helpers

```python
from teacipher.hexutil import HexString, to_bytes, to_hex

assert to_hex(b"\x01\xab") == "01AB"
assert to_bytes("01ab") == b"\x01\xab"
assert to_bytes(b"01AB") == b"\x01\xab"

hs = HexString(b"\x01\xab")
print(str(hs))           # 01AB
print(len(hs))           # 4, the length of the hex text
print(hs.to_bytes(16))   # b'\x01\xab'
```

Hex output is upper case; input is accepted in either case, as `str` or
`bytes`. `to_bytes` raises `ValueError` for text of odd length. Characters
outside the hex alphabet are not rejected: they contribute their own
character code, masked to a byte. `HexString.to_bytes(max_size)` raises
`ValueError` when the decoded result would be longer than `max_size`.

### Big-endian byte writer

`ByteWriter` writes integers in network byte order into a writable buffer you
supply, such as a `bytearray`:

```python
from teacipher.bytewriter import ByteWriter

buffer = bytearray(16)
writer = ByteWriter(buffer)
writer.write_int32(1)
writer.write_int16(2)
writer.write_byte(3)
writer.write_bytes(b"xy")

print(writer.bytes_written())  # 9
print(writer.remaining())      # 7
print(writer.is_end())         # False
```

Each write method returns the number of bytes written and keeps only the low
bits of the value that fit (`write_long` writes 32 bits, `write_uint64` 64).
A write that would run past the end of the buffer raises `IndexError`, and a
read-only buffer is refused with `TypeError`. `skip` moves the position
without writing, `attach` points the writer at a new buffer and resets its
position, and `detach` releases the buffer so that further writes fail until
another is attached.

## What it does not do

This is a library only: there is no command-line tool, and it keeps no keys
or state of its own. TEA is an old cipher with known weaknesses; use it to
interoperate with data in this format, not to protect new data.