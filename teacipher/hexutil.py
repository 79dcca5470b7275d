"""Conversion between bytes and upper-case hexadecimal text."""

from __future__ import annotations

from typing import Union

__all__ = ["to_hex", "to_bytes", "HexString"]

_HEX_DIGITS = "0123456789ABCDEF"


def _nibble(ch: str) -> int:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "f":
        return ord(ch) - ord("a") + 10
    if "A" <= ch <= "F":
        return ord(ch) - ord("A") + 10
    # Characters outside the hex alphabet pass through as their own code.
    return ord(ch)


def to_hex(data: bytes) -> str:
    """Return ``data`` as upper-case hexadecimal text, two digits per byte."""
    return "".join(_HEX_DIGITS[b >> 4] + _HEX_DIGITS[b & 0x0F] for b in bytes(data))


def to_bytes(hex_text: Union[str, bytes]) -> bytes:
    """Decode hexadecimal text of either case into bytes.

    Raises ``ValueError`` if the text has an odd number of characters.
    """
    if isinstance(hex_text, (bytes, bytearray)):
        hex_text = bytes(hex_text).decode("latin-1")
    if len(hex_text) % 2:
        raise ValueError("hex text must have an even number of characters")
    pairs = zip(hex_text[0::2], hex_text[1::2])
    return bytes(((_nibble(hi) << 4) | _nibble(lo)) & 0xFF for hi, lo in pairs)


class HexString:
    """Hexadecimal text form of a byte string."""

    def __init__(self, data: bytes) -> None:
        self._hex = to_hex(data)

    def __str__(self) -> str:
        return self._hex

    def __repr__(self) -> str:
        return f"HexString({self._hex!r})"

    def __len__(self) -> int:
        return len(self._hex)

    def to_bytes(self, max_size: int) -> bytes:
        """Decode back to bytes, refusing results longer than ``max_size``."""
        decoded = to_bytes(self._hex)
        if len(decoded) > max_size:
            raise ValueError(
                f"decoded length {len(decoded)} exceeds maximum size {max_size}"
            )
        return decoded