"""
Asset derivation registry.

Every supported asset is pinned to a five level derivation path. The third
index selects the vault account; change it to derive another vault, e.g.
``(44, 501, 3, 0, 0)`` for vault 3.
"""

from types import MappingProxyType
from typing import List, Mapping

from .exceptions import UnknownAssetError
from .types.common import DerivationPath
from .utils.validation import validate_derivation_path

__all__ = ["SUPPORTED_ASSETS", "lookup", "supported_assets", "is_supported_asset"]

SUPPORTED_ASSETS: Mapping[str, DerivationPath] = MappingProxyType({
    asset: validate_derivation_path(path)
    for asset, path in (
        ("SOL", (44, 501, 8, 0, 0)),
        ("SOL_TEST", (44, 501, 8, 0, 0)),
        ("SOL_STAKING", (44, 501, 0, 0, 1)),
    )
})
"""Asset id -> derivation path. Read-only."""


def lookup(asset: str) -> DerivationPath:
    """
    Get the derivation path for an asset.
    
    Raises:
        UnknownAssetError: If the asset is not registered
    """
    try:
        return SUPPORTED_ASSETS[asset]
    except (KeyError, TypeError) as e:
        raise UnknownAssetError(asset) from e


def is_supported_asset(asset: str) -> bool:
    """Check if asset has a registered path."""
    try:
        lookup(asset)
        return True
    except UnknownAssetError:
        return False


def supported_assets() -> List[str]:
    """List registered asset ids."""
    return sorted(SUPPORTED_ASSETS)
