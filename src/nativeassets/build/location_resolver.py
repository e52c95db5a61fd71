"""Final locations of native assets inside the app bundle.

Dynamic libraries are placed next to each other in the bundle, so an
absolute build-time path is reduced to its file name. The file name is also
what ties the builds of different architectures together for fat binary
merging: libfoo.dylib built for arm64 and for x64 both end up at
libfoo.dylib.

Note: two unrelated libraries with the same file name resolve to the same
location and will be merged into one binary.
"""

from pathlib import Path
from typing import Dict, Iterable

from ..assets import (
    Asset,
    AssetAbsolutePath,
    AssetInExecutable,
    AssetInProcess,
    AssetSystemPath,
)
from ..errors import NativeAssetsError


class UnsupportedAssetPathError(NativeAssetsError):
    """Raised for an asset path variant that has no known final location."""

    def __init__(self, asset: Asset):
        self.asset = asset
        super().__init__(
            f"Unsupported asset path type {type(asset.path).__name__} in asset {asset}"
        )


def target_location(asset: Asset) -> Asset:
    """Get the asset as it will be located in the app bundle.

    Args:
        asset: Asset as produced by the build

    Returns:
        The asset itself if it carries no file, otherwise a copy located at
        the file name of its build-time path

    Raises:
        UnsupportedAssetPathError: If the asset path variant is unknown
    """
    path = asset.path
    if isinstance(path, (AssetSystemPath, AssetInExecutable, AssetInProcess)):
        return asset
    if isinstance(path, AssetAbsolutePath):
        file_name = Path(path.uri).name
        return asset.copy_with(path=AssetAbsolutePath(Path(file_name)))
    raise UnsupportedAssetPathError(asset)


def asset_target_locations(assets: Iterable[Asset]) -> Dict[Asset, Asset]:
    """Map every asset to its final location.

    Different assets may map to equal locations (the same library built for
    several architectures); each keeps its own entry.
    """
    return {asset: target_location(asset) for asset in assets}
