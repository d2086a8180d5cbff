"""Randomized-nonce EdDSA signatures."""

import hashlib
import logging
import secrets
from typing import Callable, Union

import nacl.exceptions
import nacl.signing

from ..constants import ED25519_N, ED25519_SIGNATURE_SIZE
from ..crypto.curve import scalar_from_bytes, scalar_mult_base, scalar_to_bytes
from ..exceptions import CryptoError, SigningError, ValidationError
from ..types.common import Message, Signature
from ..types.keys import DerivedKeyMaterial
from ..utils.validation import validate_message, validate_public_key

__all__ = [
    "sha512",
    "sign_message",
    "verify_signature",
]

logger = logging.getLogger(__name__)

Hasher = Callable[..., bytes]
"""Takes byte strings, returns the 64-byte digest of their concatenation."""


def sha512(*messages: bytes) -> bytes:
    """SHA-512 digest of concatenated byte strings."""
    h = hashlib.sha512()
    for message in messages:
        h.update(message)
    return h.digest()


def sign_message(
    key_material: DerivedKeyMaterial,
    message: Message,
    hasher: Hasher = sha512
) -> Signature:
    """
    Sign a message with derived key material.
    
    The nonce mixes 32 fresh random bytes with the private scalar and the
    message, so signing the same message twice gives different signatures.
    Each of them verifies as a plain Ed25519 signature against the public
    point.
    
    Args:
        key_material: Derived key material with a private scalar
        message: Bytes to sign (str is UTF-8 encoded)
        hasher: 512-bit hash over concatenated inputs
        
    Returns:
        64-byte signature R || s
        
    Raises:
        SigningError: If there is no private scalar or signing fails
    """
    if key_material is None or key_material.private_scalar is None:
        raise SigningError("Cannot sign without a derived private key")
        
    try:
        message_bytes = validate_message(message)
    except ValidationError as e:
        raise SigningError(e.message) from e
        
    private_scalar = key_material.private_scalar
    seed = secrets.token_bytes(32)
    
    nonce = scalar_from_bytes(hasher(seed, scalar_to_bytes(private_scalar), message_bytes))
    
    try:
        r_point = scalar_mult_base(nonce)
    except CryptoError as e:
        raise SigningError(f"Degenerate nonce: {e.message}") from e
        
    a_point = key_material.public_point
    
    hram = scalar_from_bytes(hasher(r_point, a_point, message_bytes))
    s = (hram * private_scalar + nonce) % ED25519_N
    
    signature = r_point + scalar_to_bytes(s)
    logger.debug(f"Signed {len(message_bytes)} byte message with 0x{a_point.hex()}")
    return Signature(signature)


def verify_signature(
    public_key: Union[bytes, str],
    message: Message,
    signature: bytes
) -> bool:
    """
    Verify a signature with standard Ed25519.
    
    Args:
        public_key: 32-byte public key or its (0x-prefixed) hex
        message: Signed message
        signature: 64-byte signature
        
    Returns:
        True if signature is valid
    """
    try:
        key_bytes = validate_public_key(public_key)
        message_bytes = validate_message(message)
    except ValidationError:
        return False
        
    if not isinstance(signature, (bytes, bytearray, memoryview)):
        return False
    if len(signature) != ED25519_SIGNATURE_SIZE:
        return False
        
    try:
        nacl.signing.VerifyKey(key_bytes).verify(message_bytes, bytes(signature))
        return True
    except (nacl.exceptions.CryptoError, ValueError):
        return False
