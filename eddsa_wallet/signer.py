"""Signing capability consumed by ledger-specific transaction builders."""

from abc import ABC, abstractmethod

from .types.common import HexStr, Signature

__all__ = ["BaseSigner"]


class BaseSigner(ABC):
    """
    Abstract signing capability.
    
    Ledger modules hold a signer instead of subclassing a wallet: they build
    the unsigned message bytes, call ``sign`` and attach the result to the
    account whose address is ``public_key_hex()``.
    """
    
    @abstractmethod
    def public_key_hex(self) -> HexStr:
        """
        Get the signing public key.
        
        Returns:
            0x-prefixed lowercase hex of the 32-byte public key
        """
        raise NotImplementedError
        
    @abstractmethod
    def sign(self, message: bytes) -> Signature:
        """
        Sign message bytes.
        
        Args:
            message: Exact bytes to sign
            
        Returns:
            64-byte Ed25519 signature
            
        Raises:
            SigningError: If signing fails
        """
        raise NotImplementedError
        
    def public_key_bytes(self) -> bytes:
        """Get the raw 32-byte public key."""
        return bytes.fromhex(self.public_key_hex()[2:])
        
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.public_key_hex()})"
