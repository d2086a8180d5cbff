"""Constants for EdDSA key derivation and signing."""

from enum import Enum

__all__ = [
    "Network",
    "ED25519_N",
    "ED25519_POINT_SIZE",
    "ED25519_SCALAR_SIZE",
    "ED25519_SIGNATURE_SIZE",
    "FPRV_PREFIX",
    "EXTENDED_KEY_LENGTH",
    "EXTENDED_KEY_LAYOUT",
    "DERIVATION_PATH_LENGTH",
    "MAX_CHILD_INDEX",
    "CHAIN_CODE_SIZE",
    "DEFAULT_ASSETS",
]


class Network(str, Enum):
    """Target ledger network."""
    
    MAINNET = "mainnet"
    TESTNET = "testnet"


# Curve parameters
ED25519_N = 2 ** 252 + 27742317777372353535851937790883648493
"""Prime order of the Ed25519 base point subgroup."""

ED25519_POINT_SIZE = 32
ED25519_SCALAR_SIZE = 32
ED25519_SIGNATURE_SIZE = 64

# Extended key format
FPRV_PREFIX = "fprv"
EXTENDED_KEY_LENGTH = 78
CHAIN_CODE_SIZE = 32

EXTENDED_KEY_LAYOUT = {
    "version": (0, 4),
    "depth": (4, 5),
    "parent_fingerprint": (5, 9),
    "child_number": (9, 13),
    "chain_code": (13, 45),
    "reserved": (45, 46),
    "private_key": (46, 78),
}
"""Byte ranges of the decoded extended key payload."""

# Derivation
DERIVATION_PATH_LENGTH = 5
MAX_CHILD_INDEX = 2 ** 32 - 1

DEFAULT_ASSETS = {
    Network.MAINNET: "SOL",
    Network.TESTNET: "SOL_TEST",
}
"""Asset used when a wallet is created for a network without naming one."""
