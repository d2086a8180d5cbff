"""EdDSA wallet backed by an fprv extended key."""

import logging
from typing import Optional

from .assets import lookup
from .constants import DEFAULT_ASSETS, Network
from .crypto.extended_key import decode_extended_key
from .crypto.hd import derive_key_material
from .crypto.keys import PublicKey
from .crypto.signature import Hasher, sha512, sign_message, verify_signature
from .signer import BaseSigner
from .types.common import DerivationPath, HexStr, Message, Signature

__all__ = ["EdDSAWallet"]

logger = logging.getLogger(__name__)


class EdDSAWallet(BaseSigner):
    """
    Wallet holding the key derived for one asset.
    
    The fprv is decoded and walked down the asset's derivation path once, on
    construction. The resulting key material is immutable and never leaves
    the wallet; callers only get the public key and signatures.
    
    Example:
        >>> wallet = EdDSAWallet(fprv, asset="SOL")
        >>> wallet.public_key_hex()
        '0x...'
        >>> signature = wallet.sign(message_bytes)
    """
    
    def __init__(
        self,
        extended_key: str,
        asset: Optional[str] = None,
        network: Network = Network.MAINNET,
        hasher: Hasher = sha512
    ) -> None:
        """
        Initialize wallet.
        
        Args:
            extended_key: fprv extended private key
            asset: Registered asset id, defaults to the network's asset
            network: Network used to pick the default asset
            hasher: 512-bit hash used for signing
            
        Raises:
            FormatError: If the extended key is malformed
            UnknownAssetError: If the asset is not registered
            DerivationError: If derivation hits a degenerate key
        """
        if asset is None:
            asset = DEFAULT_ASSETS[Network(network)]
            
        self._hasher = hasher
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        
        path = lookup(asset)
        decoded = decode_extended_key(extended_key)
        self._key_material = derive_key_material(
            decoded.chain_code, decoded.private_scalar, path
        )
        self._derivation_path = path
        self._public_key = PublicKey(self._key_material.public_point)
        self.asset = asset
        self.network = Network(network)
        
        self._logger.info(f"Derived {asset} key: {self._public_key.hex()}")
        
    @property
    def derivation_path(self) -> DerivationPath:
        """Get the path this wallet was derived along."""
        return self._derivation_path
        
    @property
    def public_key(self) -> PublicKey:
        """Get derived public key."""
        return self._public_key
        
    def public_key_hex(self) -> HexStr:
        """Get 0x-prefixed public key hex."""
        return self._public_key.hex()
        
    def sign(self, message: Message) -> Signature:
        """
        Sign a message.
        
        Args:
            message: Bytes to sign (str is UTF-8 encoded)
            
        Returns:
            64-byte signature, different on every call
            
        Raises:
            SigningError: If signing fails
        """
        return sign_message(self._key_material, message, hasher=self._hasher)
        
    def verify(self, signature: bytes, message: Message) -> bool:
        """Verify a signature against this wallet's public key."""
        return verify_signature(self._public_key.point, message, signature)
        
    def __repr__(self) -> str:
        return f"EdDSAWallet(asset={self.asset}, public_key={self.public_key_hex()})"
