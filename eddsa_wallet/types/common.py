"""Common type definitions for the EdDSA wallet."""

from typing import NewType, Tuple, Union

__all__ = [
    "HexStr",
    "ChainCode",
    "PointBytes",
    "ScalarBytes",
    "Signature",
    "DerivationPath",
    "Message",
]

# Basic types
HexStr = NewType("HexStr", str)
"""Hexadecimal string representation."""

# Crypto types
ChainCode = NewType("ChainCode", bytes)
"""32-byte chain code."""

PointBytes = NewType("PointBytes", bytes)
"""32-byte canonical Ed25519 point encoding."""

ScalarBytes = NewType("ScalarBytes", bytes)
"""32-byte little-endian scalar."""

Signature = NewType("Signature", bytes)
"""64-byte EdDSA signature (R || s)."""

# Type aliases
DerivationPath = Tuple[int, int, int, int, int]
"""Five child indices, walked in order."""

Message = Union[bytes, bytearray, memoryview, str]
"""Anything that can be signed."""
