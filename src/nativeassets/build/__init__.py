"""
Native assets build components.

This module provides:
- Final asset locations inside the app bundle
- Grouping of per-architecture libraries into fat binaries
- Link mode validation
- Copying/merging of libraries and manifest writing
- Build orchestration for iOS
"""

from .fat_binary_copier import FatBinaryCopier, FatBinaryError, IAssetCopier
from .fat_groups import fat_asset_target_locations
from .link_mode_guard import UnsupportedLinkModeError, ensure_no_static_linking
from .location_resolver import (
    UnsupportedAssetPathError,
    asset_target_locations,
    target_location,
)
from .manifest_writer import IManifestWriter, ManifestWriteError, ManifestWriter
from .orchestrator_ios import ArchitectureBuildAggregate, BuildOrchestratorIOS
from .package_config import (
    NativeAssetsDisabledError,
    has_no_package_config,
    is_disabled_and_no_native_assets,
)

__all__ = [
    "target_location",
    "asset_target_locations",
    "UnsupportedAssetPathError",
    "fat_asset_target_locations",
    "ensure_no_static_linking",
    "UnsupportedLinkModeError",
    "IAssetCopier",
    "FatBinaryCopier",
    "FatBinaryError",
    "IManifestWriter",
    "ManifestWriter",
    "ManifestWriteError",
    "has_no_package_config",
    "is_disabled_and_no_native_assets",
    "NativeAssetsDisabledError",
    "ArchitectureBuildAggregate",
    "BuildOrchestratorIOS",
]
