"""Padded base64 encoding of symbol identifiers."""

from __future__ import annotations

import base64

SYMBOL_ID_SIZE = 20


def encoded_size(n: int) -> int:
    """Return the length of the padded base64 text for ``n`` octets."""
    if n < 0:
        raise ValueError("size must not be negative")
    return 4 * ((n + 2) // 3)


def encode(data: bytes) -> str:
    """Encode ``data`` as padded base64 text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def to_base64(symbol_id: bytes) -> str:
    """Encode a 20-byte symbol identifier as padded base64 text."""
    raw = bytes(symbol_id)
    if len(raw) != SYMBOL_ID_SIZE:
        raise ValueError(
            f"symbol id must be {SYMBOL_ID_SIZE} bytes, got {len(raw)}"
        )
    return encode(raw)