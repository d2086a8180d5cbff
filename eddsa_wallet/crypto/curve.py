"""Ed25519 group operations backed by libsodium (PyNaCl)."""

import nacl.bindings
import nacl.exceptions

from ..constants import ED25519_N, ED25519_POINT_SIZE, ED25519_SCALAR_SIZE
from ..exceptions import CryptoError
from ..types.common import PointBytes, ScalarBytes

__all__ = [
    "scalar_to_bytes",
    "scalar_from_bytes",
    "scalar_mult_base",
    "point_add",
    "flatten_point",
    "is_valid_point",
]


def scalar_to_bytes(scalar: int) -> ScalarBytes:
    """Encode scalar as 32 little-endian bytes."""
    return ScalarBytes((scalar % ED25519_N).to_bytes(ED25519_SCALAR_SIZE, "little"))


def scalar_from_bytes(data: bytes) -> int:
    """Decode a little-endian byte string and reduce it modulo n."""
    return int.from_bytes(data, "little") % ED25519_N


def is_valid_point(point: bytes) -> bool:
    """
    Check that ``point`` encodes a prime-order subgroup element.
    
    The identity and other small-order points are rejected.
    """
    if not isinstance(point, bytes) or len(point) != ED25519_POINT_SIZE:
        return False
    return nacl.bindings.crypto_core_ed25519_is_valid_point(point)


def flatten_point(point: bytes) -> PointBytes:
    """
    Return the canonical encoding of a freshly computed point.
    
    libsodium hands results back as compressed affine encodings, so no
    projective state survives between operations. The point is still checked
    so a degenerate intermediate result can never be carried forward.
    
    Raises:
        CryptoError: If the point is off-curve, small-order or the identity
    """
    if not is_valid_point(point):
        raise CryptoError("Degenerate curve point")
    return PointBytes(point)


def scalar_mult_base(scalar: int) -> PointBytes:
    """
    Compute ``scalar * B`` without clamping.
    
    Args:
        scalar: Integer scalar, reduced modulo n first
        
    Returns:
        Canonical 32-byte point
        
    Raises:
        CryptoError: If the scalar is zero modulo n
    """
    reduced = scalar % ED25519_N
    if reduced == 0:
        raise CryptoError("Scalar is zero modulo the curve order")
        
    try:
        point = nacl.bindings.crypto_scalarmult_ed25519_base_noclamp(
            scalar_to_bytes(reduced)
        )
    except nacl.exceptions.CryptoError as e:
        raise CryptoError(f"Scalar multiplication failed: {e}") from e
        
    return flatten_point(point)


def point_add(p: bytes, q: bytes) -> PointBytes:
    """
    Add two points.
    
    Raises:
        CryptoError: If an input is invalid or the sum is degenerate
    """
    try:
        point = nacl.bindings.crypto_core_ed25519_add(p, q)
    except nacl.exceptions.CryptoError as e:
        raise CryptoError(f"Point addition failed: {e}") from e
        
    return flatten_point(point)
