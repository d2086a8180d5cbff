"""Ed25519 public key wrapper."""

from typing import Union

from ..crypto.curve import is_valid_point
from ..crypto.signature import verify_signature
from ..exceptions import ValidationError
from ..types.common import HexStr, Message, PointBytes
from ..utils.encoding import bytes_to_hex
from ..utils.validation import validate_public_key

__all__ = ["PublicKey"]


class PublicKey:
    """
    Ed25519 public key.
    
    Wraps the 32-byte canonical point encoding that ledgers use as the
    account address bytes.
    """
    
    def __init__(self, key: Union[bytes, str, "PublicKey"]) -> None:
        """
        Initialize public key.
        
        Args:
            key: Public key as 32 bytes, hex string, or another PublicKey
            
        Raises:
            ValidationError: If key is not a valid curve point
        """
        if isinstance(key, PublicKey):
            self._point = key._point
            return
            
        key_bytes = validate_public_key(key)
        if not is_valid_point(key_bytes):
            raise ValidationError("Public key is not a valid Ed25519 point")
        self._point = PointBytes(key_bytes)
        
    @property
    def point(self) -> PointBytes:
        """Get public key as bytes."""
        return self._point
        
    def hex(self) -> HexStr:
        """Get 0x-prefixed lowercase hex."""
        return bytes_to_hex(self._point, prefix=True)
        
    def verify(self, signature: bytes, message: Message) -> bool:
        """
        Verify signature.
        
        Returns:
            True if signature is valid
        """
        return verify_signature(self._point, message, signature)
        
    def __bytes__(self) -> bytes:
        return bytes(self._point)
        
    def __eq__(self, other: object) -> bool:
        """Check equality."""
        if not isinstance(other, PublicKey):
            return False
        return self._point == other._point
        
    def __hash__(self) -> int:
        return hash(self._point)
        
    def __repr__(self) -> str:
        return f"PublicKey({self.hex()})"
