"""Unit tests for targets, SDKs and build modes."""

from pathlib import Path

import pytest

from nativeassets.assets import Asset, AssetAbsolutePath, LinkMode
from nativeassets.targets import (
    OS,
    Architecture,
    BuildMode,
    DarwinArch,
    EnvironmentType,
    IOSSdk,
    NativeBuildMode,
    Target,
    get_ios_sdk,
    get_native_build_mode,
    get_native_target,
)


class TestTarget:
    """Test Target."""

    def test_str(self):
        assert str(Target.IOS_ARM) == "ios_arm"
        assert str(Target.IOS_ARM64) == "ios_arm64"
        assert str(Target.IOS_X64) == "ios_x64"

    def test_equality(self):
        assert Target(OS.IOS, Architecture.ARM64) == Target.IOS_ARM64
        assert Target.IOS_ARM64 != Target.IOS_X64


class TestMappings:
    """Test translation to builder vocabulary."""

    @pytest.mark.parametrize("arch,target", [
        (DarwinArch.ARMV7, Target.IOS_ARM),
        (DarwinArch.ARM64, Target.IOS_ARM64),
        (DarwinArch.X86_64, Target.IOS_X64),
    ])
    def test_native_target(self, arch, target):
        assert get_native_target(arch) == target

    def test_ios_sdk(self):
        assert get_ios_sdk(EnvironmentType.PHYSICAL) == IOSSdk.IPHONE_OS
        assert get_ios_sdk(EnvironmentType.SIMULATOR) == IOSSdk.IPHONE_SIMULATOR

    @pytest.mark.parametrize("mode,native", [
        (BuildMode.DEBUG, NativeBuildMode.DEBUG),
        (BuildMode.PROFILE, NativeBuildMode.RELEASE),
        (BuildMode.RELEASE, NativeBuildMode.RELEASE),
        (BuildMode.JIT_RELEASE, NativeBuildMode.RELEASE),
    ])
    def test_native_build_mode(self, mode, native):
        assert get_native_build_mode(mode) == native


class TestAsset:
    """Test Asset identity."""

    def test_same_id_different_targets_are_distinct(self):
        """Test the target is part of an asset's identity."""
        path = AssetAbsolutePath(Path("libx.so"))
        arm = Asset("package:x/x.dart", path, LinkMode.DYNAMIC, Target.IOS_ARM)
        arm64 = Asset("package:x/x.dart", path, LinkMode.DYNAMIC, Target.IOS_ARM64)

        assert arm != arm64
        assert len({arm, arm64}) == 2

    def test_copy_with(self):
        asset = Asset("package:x/x.dart", AssetAbsolutePath(Path("/a/libx.so")), LinkMode.DYNAMIC, Target.IOS_ARM)
        copy = asset.copy_with(path=AssetAbsolutePath(Path("libx.so")))

        assert copy.path == AssetAbsolutePath(Path("libx.so"))
        assert copy.id == asset.id
        assert asset.path == AssetAbsolutePath(Path("/a/libx.so"))
