"""
Unit tests for final asset locations.

Tests:
- Pass-through of assets without a file
- Reduction of absolute paths to their file name
- Rejection of unknown asset path variants
- One mapping entry per original asset
"""

from dataclasses import dataclass
from pathlib import Path

import pytest

from nativeassets.assets import (
    Asset,
    AssetAbsolutePath,
    AssetInExecutable,
    AssetInProcess,
    AssetPath,
    AssetSystemPath,
    LinkMode,
)
from nativeassets.build.location_resolver import (
    UnsupportedAssetPathError,
    asset_target_locations,
    target_location,
)
from nativeassets.targets import Target


def make_asset(path: AssetPath, target: Target = Target.IOS_ARM64, asset_id: str = "package:foo/foo.dart") -> Asset:
    return Asset(id=asset_id, path=path, link_mode=LinkMode.DYNAMIC, target=target)


@dataclass(frozen=True)
class AssetRemotePath(AssetPath):
    """Path variant unknown to the resolver."""

    url: str


class TestTargetLocation:
    """Test target_location()."""

    @pytest.mark.parametrize("path", [
        AssetSystemPath(Path("libc++.dylib")),
        AssetInExecutable(),
        AssetInProcess(),
    ])
    @pytest.mark.parametrize("target", [Target.IOS_ARM, Target.IOS_ARM64, Target.IOS_X64])
    def test_assets_without_file_are_unchanged(self, path, target):
        """Test system, executable and process assets map to themselves."""
        asset = make_asset(path, target)
        assert target_location(asset) is asset

    def test_absolute_path_reduced_to_file_name(self):
        """Test directories are stripped from absolute paths."""
        asset = make_asset(AssetAbsolutePath(Path("/a/b/libfoo.so")))

        located = target_location(asset)

        assert located.path == AssetAbsolutePath(Path("libfoo.so"))

    def test_other_attributes_preserved(self):
        """Test only the path changes."""
        asset = make_asset(AssetAbsolutePath(Path("/build/arm64/libfoo.dylib")), Target.IOS_X64)

        located = target_location(asset)

        assert located.id == asset.id
        assert located.link_mode == asset.link_mode
        assert located.target == Target.IOS_X64
        assert asset.path == AssetAbsolutePath(Path("/build/arm64/libfoo.dylib"))

    def test_same_file_name_across_architectures(self):
        """Test libraries of different architectures share a location."""
        arm = make_asset(AssetAbsolutePath(Path("/build/ios_arm/libx.so")), Target.IOS_ARM)
        arm64 = make_asset(AssetAbsolutePath(Path("/build/ios_arm64/libx.so")), Target.IOS_ARM64)

        assert target_location(arm).path == target_location(arm64).path

    def test_unknown_path_variant_raises(self):
        """Test unknown path variants are rejected."""
        asset = make_asset(AssetRemotePath("https://example.com/libfoo.dylib"))

        with pytest.raises(UnsupportedAssetPathError) as exc_info:
            target_location(asset)

        assert exc_info.value.asset is asset
        assert "AssetRemotePath" in str(exc_info.value)


class TestAssetTargetLocations:
    """Test asset_target_locations()."""

    def test_empty(self):
        """Test no assets give an empty mapping."""
        assert asset_target_locations([]) == {}

    def test_keeps_entry_per_original_asset(self):
        """Test assets resolving to the same path keep separate entries."""
        arm = make_asset(AssetAbsolutePath(Path("/build/ios_arm/libx.so")), Target.IOS_ARM)
        arm64 = make_asset(AssetAbsolutePath(Path("/build/ios_arm64/libx.so")), Target.IOS_ARM64)

        locations = asset_target_locations([arm, arm64])

        assert list(locations) == [arm, arm64]
        assert locations[arm].path == AssetAbsolutePath(Path("libx.so"))
        assert locations[arm64].path == AssetAbsolutePath(Path("libx.so"))
        assert locations[arm].target == Target.IOS_ARM
        assert locations[arm64].target == Target.IOS_ARM64

    def test_system_asset_unchanged(self):
        """Test system assets map to themselves."""
        system = make_asset(AssetSystemPath(Path("libsqlite3.dylib")), asset_id="package:db/db.dart")

        assert asset_target_locations([system]) == {system: system}
