"""Key material type definitions."""

from dataclasses import dataclass, field
from typing import Optional

from ..types.common import ChainCode, PointBytes

__all__ = [
    "ExtendedKey",
    "DerivedKeyMaterial",
]


@dataclass(frozen=True)
class ExtendedKey:
    """Decoded fprv payload."""
    
    chain_code: ChainCode
    private_scalar: int = field(repr=False)
    version: bytes = b"\x00\x00\x00\x00"
    depth: int = 0
    parent_fingerprint: bytes = b"\x00\x00\x00\x00"
    child_number: int = 0


@dataclass(frozen=True)
class DerivedKeyMaterial:
    """
    Final key triple produced by walking a derivation path.
    
    The public point is always the canonical 32-byte encoding of
    ``private_scalar * B``.
    """
    
    public_point: PointBytes
    private_scalar: Optional[int] = field(repr=False)
    chain_code: ChainCode = field(repr=False)
    
    @property
    def has_private_key(self) -> bool:
        """Check if the material can sign."""
        return self.private_scalar is not None
    
    @property
    def public_key_hex(self) -> str:
        """Get 0x-prefixed public key hex."""
        return f"0x{self.public_point.hex()}"
