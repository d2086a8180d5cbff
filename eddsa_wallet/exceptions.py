"""EdDSA wallet exceptions hierarchy."""

from typing import Any, Optional

__all__ = [
    "EdDSAWalletError",
    "ValidationError",
    "FormatError",
    "UnknownAssetError",
    "CryptoError",
    "DerivationError",
    "SigningError",
]


class EdDSAWalletError(Exception):
    """Base exception for all EdDSA wallet errors."""
    
    def __init__(
        self, 
        message: str, 
        code: Optional[int] = None, 
        data: Optional[Any] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data
        
    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ValidationError(EdDSAWalletError):
    """Raised when validation fails."""
    pass


class FormatError(ValidationError):
    """Raised when an extended key string is malformed."""
    pass


class UnknownAssetError(EdDSAWalletError, KeyError):
    """Raised when an asset has no registered derivation path."""
    
    def __init__(self, asset: str, message: Optional[str] = None) -> None:
        if message is None:
            message = f"Unsupported asset: {asset!r}"
        super().__init__(message)
        self.asset = asset

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class CryptoError(EdDSAWalletError):
    """Raised when cryptographic operation fails."""
    pass


class DerivationError(CryptoError):
    """Raised when child key derivation hits a degenerate input or result."""
    pass


class SigningError(CryptoError):
    """Raised when a signature cannot be produced."""
    pass
