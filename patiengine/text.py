"""Conversion between UTF-8 byte strings and text."""

from __future__ import annotations


def to_wide(data: bytes | bytearray | memoryview) -> str:
    """Decode UTF-8 bytes into text; invalid sequences become U+FFFD."""
    if isinstance(data, str):
        raise TypeError("to_wide expects bytes, not str")
    if not data:
        return ""
    return bytes(data).decode("utf-8", errors="replace")


def to_utf8(text: str) -> bytes:
    """Encode text as UTF-8; unpaired surrogates become U+FFFD."""
    if not isinstance(text, str):
        raise TypeError("to_utf8 expects str")
    if not text:
        return b""
    # Pair up surrogates where possible and replace the ones left alone.
    normalised = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
    return normalised.encode("utf-8")