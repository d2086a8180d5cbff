"""
EdDSA Wallet Library Usage Examples

Set FPRV to an extended private key before running:

    FPRV=fprv... python main.py [ASSET]
"""

import logging
import os
import sys

from eddsa_wallet import EdDSAWallet, EdDSAWalletError, Network, supported_assets
from eddsa_wallet.crypto.extended_key import encode_extended_key

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def wallet_example(fprv: str, asset: str) -> None:
    """Example 1: Derive an asset key and sign a message."""
    print("\n=== Wallet Example ===")
    
    wallet = EdDSAWallet(fprv, asset=asset)
    print(f"Asset: {wallet.asset}")
    print(f"Derivation path: {list(wallet.derivation_path)}")
    print(f"Public key: {wallet.public_key_hex()}")
    
    # The ledger SDK would hand over its serialized unsigned message here
    message = b"example unsigned transaction message"
    signature = wallet.sign(message)
    print(f"Signature: {signature.hex()}")
    print(f"Verifies: {wallet.verify(signature, message)}")
    
    # Randomized nonce: a second signature differs but verifies too
    again = wallet.sign(message)
    print(f"Second signature differs: {again != signature}")
    print(f"Second signature verifies: {wallet.verify(again, message)}")


def all_assets_example(fprv: str) -> None:
    """Example 2: Public keys for every registered asset."""
    print("\n=== Supported Assets Example ===")
    
    for asset in supported_assets():
        wallet = EdDSAWallet(fprv, asset=asset)
        print(f"{asset:<12} {wallet.public_key_hex()}")


def main() -> int:
    fprv = os.environ.get("FPRV")
    if not fprv:
        # Throwaway demo key
        fprv = encode_extended_key(os.urandom(32), int.from_bytes(os.urandom(31), "big") + 1)
        print("FPRV not set, using a random demo key")
        
    asset = sys.argv[1] if len(sys.argv) > 1 else None
    
    try:
        wallet_example(fprv, asset or "SOL")
        all_assets_example(fprv)
        print(f"\nTestnet default: {EdDSAWallet(fprv, network=Network.TESTNET).asset}")
    except EdDSAWalletError as e:
        print(f"Error: {e}")
        return 1
        
    return 0


if __name__ == "__main__":
    sys.exit(main())
