"""Grouping of per-architecture libraries into fat binaries."""

from pathlib import Path
from typing import Dict, Iterable, List

from ..assets import Asset, AssetAbsolutePath
from .location_resolver import target_location


def fat_asset_target_locations(assets: Iterable[Asset]) -> Dict[Path, List[Asset]]:
    """Group assets by the file they end up in.

    Only assets with a file of their own take part. Each group lists the
    original assets in input order, which is the order they get merged in.
    A group with several members becomes one multi-architecture binary, a
    group with a single member is copied as is.

    Args:
        assets: Assets of all architectures, in architecture order

    Returns:
        Mapping from final relative path to the assets to merge there

    Raises:
        UnsupportedAssetPathError: If an asset path variant is unknown
    """
    result: Dict[Path, List[Asset]] = {}
    for asset in assets:
        location = target_location(asset).path
        if not isinstance(location, AssetAbsolutePath):
            continue
        result.setdefault(location.uri, []).append(asset)
    return result
