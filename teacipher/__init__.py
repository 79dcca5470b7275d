"""TEA block cipher with a salted CBC envelope format, plus hex and big-endian byte-writing helpers."""

__version__ = "1.0.0"

__all__ = ["bytewriter", "hexutil", "tea"]