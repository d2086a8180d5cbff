"""Type definitions for the EdDSA wallet."""

from ..types.common import (
    HexStr,
    ChainCode,
    PointBytes,
    ScalarBytes,
    Signature,
    DerivationPath,
    Message,
)
from ..types.keys import ExtendedKey, DerivedKeyMaterial

__all__ = [
    # Common types
    "HexStr",
    "ChainCode",
    "PointBytes",
    "ScalarBytes",
    "Signature",
    "DerivationPath",
    "Message",
    
    # Key material
    "ExtendedKey",
    "DerivedKeyMaterial",
]
