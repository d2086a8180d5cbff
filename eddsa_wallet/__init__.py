"""
EdDSA Wallet Python Library

Derives Ed25519 keys from fprv extended private keys and signs ledger
transactions with randomized-nonce EdDSA signatures.
"""

from typing import Optional

from .assets import lookup, supported_assets
from .constants import Network
from .exceptions import (
    EdDSAWalletError,
    ValidationError,
    FormatError,
    UnknownAssetError,
    CryptoError,
    DerivationError,
    SigningError,
)
from .crypto import PublicKey, decode_extended_key, derive_key_material, sign_message, verify_signature
from .signer import BaseSigner
from .types import DerivedKeyMaterial, ExtendedKey
from .wallet import EdDSAWallet

__version__ = "1.0.0"

__all__ = [
    # Wallet
    "EdDSAWallet",
    "BaseSigner",
    "load_wallet",
    
    # Network
    "Network",
    
    # Exceptions
    "EdDSAWalletError",
    "ValidationError",
    "FormatError",
    "UnknownAssetError",
    "CryptoError",
    "DerivationError",
    "SigningError",
    
    # Core operations
    "decode_extended_key",
    "lookup",
    "supported_assets",
    "derive_key_material",
    "sign_message",
    "verify_signature",
    
    # Types
    "PublicKey",
    "ExtendedKey",
    "DerivedKeyMaterial",
]


def load_wallet(
    extended_key: str,
    asset: Optional[str] = None,
    network: Network = Network.MAINNET
) -> EdDSAWallet:
    """
    Create a wallet for an asset from an fprv.
    
    Args:
        extended_key: fprv extended private key
        asset: Asset id ('SOL', 'SOL_TEST', ...); defaults to the network's asset
        network: Network to pick the default asset for
        
    Returns:
        Ready-to-sign EdDSAWallet
        
    Example:
        >>> wallet = eddsa_wallet.load_wallet(fprv)
        >>> wallet = eddsa_wallet.load_wallet(fprv, network=Network.TESTNET)
        >>> wallet = eddsa_wallet.load_wallet(fprv, asset="SOL_STAKING")
    """
    return EdDSAWallet(extended_key, asset=asset, network=network)
