"""fprv extended key codec."""

from typing import Optional

from ..constants import (
    CHAIN_CODE_SIZE,
    ED25519_N,
    EXTENDED_KEY_LAYOUT,
    EXTENDED_KEY_LENGTH,
    FPRV_PREFIX,
)
from ..exceptions import FormatError, ValidationError
from ..types.common import ChainCode
from ..types.keys import ExtendedKey
from ..utils.encoding import (
    bytes_to_int,
    decode_base58_check,
    encode_base58_check,
    int_to_bytes,
    version_for_prefix,
)
from ..utils.validation import validate_extended_key

__all__ = ["decode_extended_key", "encode_extended_key", "fprv_version"]


def _field(payload: bytes, name: str) -> bytes:
    start, end = EXTENDED_KEY_LAYOUT[name]
    return payload[start:end]


def fprv_version() -> bytes:
    """Version bytes whose payloads encode to strings starting with 'fprv'."""
    return version_for_prefix(FPRV_PREFIX, EXTENDED_KEY_LENGTH)


def decode_extended_key(extended_key: str) -> ExtendedKey:
    """
    Decode an fprv string into its chain code and private scalar.
    
    Args:
        extended_key: Base58Check encoded extended private key
        
    Returns:
        Decoded ExtendedKey
        
    Raises:
        FormatError: If the prefix, checksum or payload length is wrong
    """
    extended_key = validate_extended_key(extended_key)
    
    try:
        payload = decode_base58_check(extended_key)
    except ValidationError as e:
        raise FormatError(f"Extended key is not valid Base58Check: {e.message}") from e
        
    if len(payload) != EXTENDED_KEY_LENGTH:
        raise FormatError(
            f"Extended key is not a valid FPRV: decoded to {len(payload)} bytes, "
            f"expected {EXTENDED_KEY_LENGTH}"
        )
        
    return ExtendedKey(
        chain_code=ChainCode(_field(payload, "chain_code")),
        private_scalar=bytes_to_int(_field(payload, "private_key")),
        version=_field(payload, "version"),
        depth=_field(payload, "depth")[0],
        parent_fingerprint=_field(payload, "parent_fingerprint"),
        child_number=bytes_to_int(_field(payload, "child_number")),
    )


def encode_extended_key(
    chain_code: bytes,
    private_scalar: int,
    depth: int = 0,
    parent_fingerprint: bytes = b"\x00\x00\x00\x00",
    child_number: int = 0,
    version: Optional[bytes] = None
) -> str:
    """
    Serialize a chain code and private scalar as an fprv string.
    
    Args:
        chain_code: 32-byte chain code
        private_scalar: Private scalar, 0 < k < n
        depth: Depth header byte
        parent_fingerprint: 4-byte parent fingerprint header
        child_number: Child number header
        version: 4-byte version, defaults to the fprv version
        
    Returns:
        Base58Check encoded extended key
        
    Raises:
        ValidationError: If any field is out of range
    """
    if len(chain_code) != CHAIN_CODE_SIZE:
        raise ValidationError(f"Chain code must be {CHAIN_CODE_SIZE} bytes")
    if not 0 < private_scalar < ED25519_N:
        raise ValidationError("Private scalar out of range")
    if len(parent_fingerprint) != 4:
        raise ValidationError("Parent fingerprint must be 4 bytes")
    if not 0 <= depth <= 0xFF:
        raise ValidationError(f"Invalid depth: {depth}")
        
    if version is None:
        version = fprv_version()
        
    payload = (
        version
        + bytes([depth])
        + parent_fingerprint
        + int_to_bytes(child_number, 4)
        + chain_code
        + b"\x00"
        + int_to_bytes(private_scalar, 32)
    )
    return encode_base58_check(payload)
