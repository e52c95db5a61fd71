"""Checks deciding whether native assets take part in a build."""

from typing import List

from ..config import NativeAssetsConfig
from ..errors import NativeAssetsError
from ..runner import INativeAssetsBuildRunner


class NativeAssetsDisabledError(NativeAssetsError):
    """Raised when packages need native assets but the feature is disabled."""

    def __init__(self, packages: List[str]):
        self.packages = packages
        super().__init__(
            f"Package(s) {', '.join(packages)} require the native assets feature "
            "to be enabled. Enable it by setting NATIVE_ASSETS_ENABLED=1."
        )


def has_no_package_config(build_runner: INativeAssetsBuildRunner) -> bool:
    """Check whether the project lacks a package configuration."""
    return not build_runner.has_package_config()


def is_disabled_and_no_native_assets(
    build_runner: INativeAssetsBuildRunner,
    config: NativeAssetsConfig,
) -> bool:
    """Check whether native assets can be skipped because the feature is off.

    Returns:
        False if the feature is enabled, True if it is disabled and no
        package builds native assets

    Raises:
        NativeAssetsDisabledError: If the feature is disabled but packages
            build native assets
    """
    if config.enabled:
        return False
    packages = build_runner.packages_with_native_assets()
    if not packages:
        return True
    raise NativeAssetsDisabledError(packages)
