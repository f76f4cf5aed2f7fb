"""URL-safe, unpadded base64 as used for compressed fingerprints.

The alphabet uses ``-`` and ``_`` in place of ``+`` and ``/`` and no ``=``
padding is ever written or expected. Characters outside the alphabet are
decoded as zero rather than rejected.
"""

from __future__ import annotations

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"
_REVERSED = {ord(char): index for index, char in enumerate(_ALPHABET)}


def encoded_size(size: int) -> int:
    """Return the number of characters ``size`` bytes encode to."""
    return (size * 4 + 2) // 3


def decoded_size(size: int) -> int:
    """Return the number of bytes ``size`` characters decode to."""
    return size * 3 // 4


def encode(data: bytes | bytearray | memoryview) -> str:
    """Encode bytes into the unpadded URL-safe base64 alphabet."""
    raw = bytes(data)
    out: list[str] = []
    for start in range(0, len(raw), 3):
        chunk = raw[start:start + 3]
        value = int.from_bytes(chunk.ljust(3, b"\0"), "big")
        sextets = ((value >> shift) & 63 for shift in (18, 12, 6, 0))
        out.extend(_ALPHABET[s] for s, _ in zip(sextets, range(len(chunk) + 1)))
    return "".join(out)


def decode(data: str | bytes | bytearray | memoryview) -> bytes:
    """Decode unpadded URL-safe base64 text back into bytes.

    A trailing group of a single character carries no whole byte and is
    dropped.
    """
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    out = bytearray()
    for start in range(0, len(raw), 4):
        chunk = raw[start:start + 4]
        value = 0
        for byte in chunk.ljust(4, b"A"):
            value = (value << 6) | _REVERSED.get(byte, 0)
        out.extend(value.to_bytes(3, "big")[:len(chunk) - 1])
    return bytes(out)