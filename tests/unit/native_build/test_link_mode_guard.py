"""Unit tests for the link mode guard."""

from pathlib import Path

import pytest

from nativeassets.assets import Asset, AssetAbsolutePath, LinkMode
from nativeassets.build.link_mode_guard import (
    UnsupportedLinkModeError,
    ensure_no_static_linking,
)
from nativeassets.errors import NativeAssetsError
from nativeassets.targets import Target


def make_asset(link_mode, asset_id="package:foo/foo.dart"):
    return Asset(
        id=asset_id,
        path=AssetAbsolutePath(Path("/build/libfoo.dylib")),
        link_mode=link_mode,
        target=Target.IOS_ARM64,
    )


class TestEnsureNoStaticLinking:
    """Test ensure_no_static_linking()."""

    def test_empty_is_accepted(self):
        """Test an empty collection passes."""
        ensure_no_static_linking([])

    def test_dynamic_assets_are_accepted(self):
        """Test dynamically linked assets pass."""
        ensure_no_static_linking([make_asset(LinkMode.DYNAMIC), make_asset(LinkMode.DYNAMIC, "package:bar/bar.dart")])

    def test_static_asset_raises(self):
        """Test a single static asset among dynamic ones is rejected."""
        static = make_asset(LinkMode.STATIC, "package:bar/bar.dart")

        with pytest.raises(UnsupportedLinkModeError) as exc_info:
            ensure_no_static_linking([make_asset(LinkMode.DYNAMIC), static])

        assert exc_info.value.asset is static
        assert "package:bar/bar.dart" in str(exc_info.value)

    def test_error_is_native_assets_error(self):
        """Test the error belongs to the package hierarchy."""
        with pytest.raises(NativeAssetsError):
            ensure_no_static_linking([make_asset(LinkMode.STATIC)])
