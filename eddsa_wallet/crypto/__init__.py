"""Cryptographic primitives for the EdDSA wallet."""

from ..crypto.extended_key import decode_extended_key, encode_extended_key
from ..crypto.hd import EdDSANode, derive_key_material, derive_next_level, hash_for_derive
from ..crypto.keys import PublicKey
from ..crypto.signature import sign_message, verify_signature, sha512

__all__ = [
    # Extended keys
    "decode_extended_key",
    "encode_extended_key",
    
    # Derivation
    "EdDSANode",
    "derive_key_material",
    "derive_next_level",
    "hash_for_derive",
    
    # Keys
    "PublicKey",
    
    # Signatures
    "sign_message",
    "verify_signature",
    "sha512",
]
