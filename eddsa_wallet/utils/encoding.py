"""Encoding and decoding utilities for the EdDSA wallet."""

import hashlib
from typing import Union

from ..exceptions import ValidationError
from ..types.common import HexStr

__all__ = [
    "hex_to_bytes",
    "bytes_to_hex",
    "int_to_bytes",
    "bytes_to_int",
    "double_sha256",
    "encode_base58",
    "decode_base58",
    "encode_base58_check",
    "decode_base58_check",
    "version_for_prefix",
]

# Constants
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE58_CHECKSUM_SIZE = 4


def hex_to_bytes(hex_str: Union[HexStr, str]) -> bytes:
    """
    Convert hex string to bytes.
    
    Args:
        hex_str: Hex string with or without 0x prefix
        
    Returns:
        Decoded bytes
        
    Raises:
        ValidationError: If hex string is invalid
    """
    try:
        if isinstance(hex_str, str) and hex_str.startswith("0x"):
            hex_str = hex_str[2:]
        return bytes.fromhex(hex_str)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid hex string: {hex_str}") from e


def bytes_to_hex(data: bytes, prefix: bool = False) -> HexStr:
    """
    Convert bytes to lowercase hex string.
    
    Args:
        data: Bytes to encode
        prefix: Add 0x prefix
    """
    hex_str = data.hex()
    if prefix:
        hex_str = f"0x{hex_str}"
    return HexStr(hex_str)


def int_to_bytes(value: int, length: int, byteorder: str = "big") -> bytes:
    """Convert non-negative integer to fixed-length bytes."""
    return value.to_bytes(length, byteorder=byteorder)


def bytes_to_int(data: bytes, byteorder: str = "big") -> int:
    """Convert bytes to non-negative integer."""
    return int.from_bytes(data, byteorder=byteorder)


def double_sha256(data: bytes) -> bytes:
    """SHA256(SHA256(data))."""
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def _base58_to_int(string: str) -> int:
    n = 0
    for char in string:
        index = BASE58_ALPHABET.find(char)
        if index < 0:
            raise ValidationError(f"Invalid Base58 character: {char!r}")
        n = n * 58 + index
    return n


def encode_base58(data: bytes) -> str:
    """
    Encode bytes as Base58 string.
    
    Args:
        data: Bytes to encode
        
    Returns:
        Base58 encoded string
    """
    n = bytes_to_int(data)
    
    encoded = []
    while n:
        n, remainder = divmod(n, 58)
        encoded.append(BASE58_ALPHABET[remainder])
        
    # Each leading zero byte is a leading '1'
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))
    return "1" * leading_zeros + "".join(reversed(encoded))


def decode_base58(string: str) -> bytes:
    """
    Decode Base58 string to bytes.
    
    Args:
        string: Base58 string
        
    Returns:
        Decoded bytes
        
    Raises:
        ValidationError: If string contains invalid characters
    """
    n = _base58_to_int(string)
    body = n.to_bytes((n.bit_length() + 7) // 8, "big")
    
    leading_zeros = len(string) - len(string.lstrip("1"))
    return b"\x00" * leading_zeros + body


def encode_base58_check(data: bytes) -> str:
    """
    Encode bytes as Base58Check (with checksum).
    
    Args:
        data: Bytes to encode
        
    Returns:
        Base58Check encoded string
    """
    checksum = double_sha256(data)[:BASE58_CHECKSUM_SIZE]
    return encode_base58(data + checksum)


def decode_base58_check(string: str) -> bytes:
    """
    Decode Base58Check string.
    
    Args:
        string: Base58Check string
        
    Returns:
        Decoded data (without checksum)
        
    Raises:
        ValidationError: If characters or checksum are invalid
    """
    data = decode_base58(string)
    if len(data) < BASE58_CHECKSUM_SIZE:
        raise ValidationError("Invalid Base58Check string: too short")
        
    payload, checksum = data[:-BASE58_CHECKSUM_SIZE], data[-BASE58_CHECKSUM_SIZE:]
    expected_checksum = double_sha256(payload)[:BASE58_CHECKSUM_SIZE]
    
    if checksum != expected_checksum:
        raise ValidationError("Invalid Base58Check checksum")
        
    return payload


def version_for_prefix(prefix: str, payload_length: int, version_size: int = 4) -> bytes:
    """
    Find version bytes that make Base58Check strings start with ``prefix``.
    
    The version occupies the leading ``version_size`` bytes of a
    ``payload_length`` byte payload. Whatever follows it, the encoded string
    of ``payload || checksum`` starts with ``prefix``.
    
    Args:
        prefix: Required leading Base58 characters
        payload_length: Payload size including the version bytes
        version_size: Number of version bytes
        
    Returns:
        Big-endian version bytes
        
    Raises:
        ValidationError: If no version of that size yields the prefix
    """
    total_bits = (payload_length + BASE58_CHECKSUM_SIZE) * 8
    shift = total_bits - version_size * 8
    lowest_version = 1 << (version_size * 8 - 8)
    
    for length in range(len(prefix) + 1, total_bits // 5 + 2):
        padding = length - len(prefix)
        low = _base58_to_int(prefix + "1" * padding)
        high = _base58_to_int(prefix + "z" * padding)
        
        version = (low >> shift) + 1
        if version >= 1 << (version_size * 8):
            break
        if version < lowest_version:
            continue
        if ((version + 1) << shift) - 1 <= high:
            return version.to_bytes(version_size, "big")
            
    raise ValidationError(f"No {version_size}-byte version encodes to prefix {prefix!r}")
