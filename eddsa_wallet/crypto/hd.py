"""Hierarchical key derivation for Ed25519 fprv keys."""

import hmac
import hashlib
import logging
from typing import Optional, Sequence, Tuple

from ..constants import CHAIN_CODE_SIZE, ED25519_N
from ..crypto.curve import point_add, scalar_mult_base
from ..crypto.extended_key import decode_extended_key
from ..exceptions import CryptoError, DerivationError, ValidationError
from ..types.common import ChainCode, PointBytes
from ..types.keys import DerivedKeyMaterial
from ..utils.encoding import bytes_to_int
from ..utils.validation import is_valid_child_index, validate_derivation_path

__all__ = [
    "EdDSANode",
    "hash_for_derive",
    "derive_next_level",
    "derive_key_material",
]

logger = logging.getLogger(__name__)


def hash_for_derive(public_point: bytes, chain_code: bytes, index: int) -> bytes:
    """HMAC-SHA512(chain_code, A || 0x00 || be32(index))."""
    mac = hmac.new(chain_code, digestmod=hashlib.sha512)
    mac.update(public_point)
    mac.update(b"\x00")
    mac.update(index.to_bytes(4, "big"))
    return mac.digest()


def derive_next_level(
    public_point: PointBytes,
    private_scalar: Optional[int],
    chain_code: bytes,
    index: int
) -> Tuple[PointBytes, Optional[int], ChainCode]:
    """
    Derive one non-hardened child level.
    
    The child public key only depends on the parent public key, so a
    public-only level (``private_scalar is None``) can still be derived.
    
    Args:
        public_point: Parent public key
        private_scalar: Parent private scalar, or None
        chain_code: Parent chain code
        index: Child index, 0 <= index < 2**32
        
    Returns:
        Tuple of (child public point, child private scalar, child chain code)
        
    Raises:
        DerivationError: If the index is invalid or a result is degenerate
    """
    if not is_valid_child_index(index):
        raise DerivationError(f"Invalid child index: {index!r}")
    if len(chain_code) != CHAIN_CODE_SIZE:
        raise DerivationError(f"Chain code must be {CHAIN_CODE_SIZE} bytes")
        
    digest = hash_for_derive(public_point, chain_code, index)
    exp = bytes_to_int(digest[:32]) % ED25519_N
    child_chain_code = ChainCode(digest[32:])
    
    try:
        child_public = point_add(public_point, scalar_mult_base(exp))
    except CryptoError as e:
        raise DerivationError(f"Child key {index} does not exist: {e.message}") from e
        
    child_private = None
    if private_scalar is not None:
        child_private = (private_scalar + exp) % ED25519_N
        
    return child_public, child_private, child_chain_code


class EdDSANode:
    """One level of an fprv key hierarchy."""
    
    def __init__(
        self,
        public_point: PointBytes,
        chain_code: ChainCode,
        private_scalar: Optional[int] = None,
        depth: int = 0,
        index: int = 0
    ):
        self.public_point = public_point
        self.chain_code = chain_code
        self.private_scalar = private_scalar
        self.depth = depth
        self.index = index
        
    @classmethod
    def from_private_scalar(cls, private_scalar: int, chain_code: bytes) -> "EdDSANode":
        """
        Create root node from a private scalar.
        
        Raises:
            DerivationError: If the scalar is not in [1, n)
        """
        if not 0 < private_scalar < ED25519_N:
            raise DerivationError("Private scalar must be in the range [1, n)")
        if len(chain_code) != CHAIN_CODE_SIZE:
            raise DerivationError(f"Chain code must be {CHAIN_CODE_SIZE} bytes")
            
        return cls(
            public_point=scalar_mult_base(private_scalar),
            chain_code=ChainCode(bytes(chain_code)),
            private_scalar=private_scalar,
        )
        
    @classmethod
    def from_extended_key(cls, extended_key: str) -> "EdDSANode":
        """Create root node from an fprv string."""
        decoded = decode_extended_key(extended_key)
        return cls.from_private_scalar(decoded.private_scalar, decoded.chain_code)
        
    @property
    def is_private(self) -> bool:
        return self.private_scalar is not None
        
    def neuter(self) -> "EdDSANode":
        """Public-only copy of this node."""
        return EdDSANode(
            public_point=self.public_point,
            chain_code=self.chain_code,
            depth=self.depth,
            index=self.index,
        )
        
    def derive(self, index: int) -> "EdDSANode":
        """Derive child node."""
        public_point, private_scalar, chain_code = derive_next_level(
            self.public_point, self.private_scalar, self.chain_code, index
        )
        return EdDSANode(
            public_point=public_point,
            chain_code=chain_code,
            private_scalar=private_scalar,
            depth=self.depth + 1,
            index=index,
        )
        
    def derive_path(self, path: Sequence[int]) -> "EdDSANode":
        """Derive along every index of ``path`` in order."""
        node = self
        for index in path:
            node = node.derive(index)
        return node
        
    def key_material(self) -> DerivedKeyMaterial:
        """Freeze this node into key material."""
        return DerivedKeyMaterial(
            public_point=self.public_point,
            private_scalar=self.private_scalar,
            chain_code=self.chain_code,
        )
        
    def __repr__(self) -> str:
        kind = "private" if self.is_private else "public"
        return f"EdDSANode(depth={self.depth}, index={self.index}, {kind}, 0x{self.public_point.hex()})"


def derive_key_material(
    chain_code: bytes,
    private_scalar: int,
    path: Sequence[int]
) -> DerivedKeyMaterial:
    """
    Walk a derivation path from a root chain code and private scalar.
    
    Args:
        chain_code: Root chain code
        private_scalar: Root private scalar
        path: Five child indices
        
    Returns:
        Key material of the final level
        
    Raises:
        DerivationError: If the path is malformed or a level is degenerate
    """
    try:
        path = validate_derivation_path(path)
    except ValidationError as e:
        raise DerivationError(e.message) from e
        
    node = EdDSANode.from_private_scalar(private_scalar, chain_code).derive_path(path)
    logger.debug(f"Derived key at depth {node.depth}: 0x{node.public_point.hex()}")
    return node.key_material()
