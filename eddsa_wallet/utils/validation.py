"""Validation utilities for the EdDSA wallet."""

from typing import Any, Sequence

from ..constants import (
    DERIVATION_PATH_LENGTH,
    ED25519_POINT_SIZE,
    FPRV_PREFIX,
    MAX_CHILD_INDEX,
)
from ..exceptions import FormatError, ValidationError
from ..types.common import DerivationPath, Message
from ..utils.encoding import hex_to_bytes

__all__ = [
    "is_valid_extended_key",
    "validate_extended_key",
    "is_valid_child_index",
    "validate_derivation_path",
    "validate_message",
    "validate_public_key",
]


def is_valid_extended_key(extended_key: Any) -> bool:
    """
    Check if an fprv string decodes cleanly.
    
    Args:
        extended_key: Candidate extended key
        
    Returns:
        True if valid, False otherwise
    """
    from ..crypto.extended_key import decode_extended_key
    
    try:
        decode_extended_key(extended_key)
        return True
    except FormatError:
        return False


def validate_extended_key(extended_key: Any) -> str:
    """
    Check the textual shape of an extended key.
    
    Only the type and the literal prefix are checked here; Base58Check
    decoding happens in the codec.
    
    Raises:
        FormatError: If the key is not a string or lacks the prefix
    """
    if not isinstance(extended_key, str):
        raise FormatError(f"Extended key must be a string, got {type(extended_key).__name__}")

    if not extended_key.startswith(FPRV_PREFIX):
        raise FormatError(f"Provided extended key must start with the phrase '{FPRV_PREFIX}'")
        
    return extended_key


def is_valid_child_index(index: Any) -> bool:
    """Check if value is a usable child index."""
    return (
        isinstance(index, int)
        and not isinstance(index, bool)
        and 0 <= index <= MAX_CHILD_INDEX
    )


def validate_derivation_path(path: Sequence[int]) -> DerivationPath:
    """
    Validate derivation path and return it as a tuple.
    
    Args:
        path: Sequence of child indices
        
    Returns:
        Path as a 5-tuple
        
    Raises:
        ValidationError: If length or any index is invalid
    """
    if isinstance(path, (str, bytes)):
        raise ValidationError("Derivation path must be a sequence of integers")
        
    path = tuple(path)
    if len(path) != DERIVATION_PATH_LENGTH:
        raise ValidationError(
            f"Derivation path must have {DERIVATION_PATH_LENGTH} indices, got {len(path)}"
        )
        
    for index in path:
        if not is_valid_child_index(index):
            raise ValidationError(f"Invalid child index: {index!r}")
            
    return path  # type: ignore[return-value]


def validate_message(message: Message) -> bytes:
    """
    Normalize a message to bytes.
    
    Strings are UTF-8 encoded.
    
    Raises:
        ValidationError: If message type is unsupported
    """
    if isinstance(message, str):
        return message.encode("utf-8")
    if isinstance(message, (bytes, bytearray, memoryview)):
        return bytes(message)
    raise ValidationError(f"Cannot sign message of type {type(message).__name__}")


def validate_public_key(key: Any) -> bytes:
    """
    Validate public key and return its 32 raw bytes.
    
    Args:
        key: Public key as bytes or (0x-prefixed) hex string
        
    Raises:
        ValidationError: If key is malformed
    """
    if isinstance(key, str):
        key = hex_to_bytes(key)
    elif isinstance(key, (bytearray, memoryview)):
        key = bytes(key)
    elif not isinstance(key, bytes):
        raise ValidationError(f"Invalid public key type: {type(key).__name__}")
        
    if len(key) != ED25519_POINT_SIZE:
        raise ValidationError(f"Invalid public key length: {len(key)}")
        
    return key
