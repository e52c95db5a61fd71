"""Configuration for native assets builds.

Build Layout:
    <project>/
    └── build/                      # NATIVE_ASSETS_BUILD_DIR overrides this
        └── native_assets/
            └── ios/                # Copied (fat) dynamic libraries
                ├── libfoo.dylib
                └── native_assets.yaml   # Dry run manifest

Environment Variables:
    NATIVE_ASSETS_ENABLED: Enables native assets processing (1/true/yes/on)
    NATIVE_ASSETS_BUILD_DIR: Build root override
"""

import os
from pathlib import Path
from typing import Optional

from .targets import OS

ENABLED_ENV = "NATIVE_ASSETS_ENABLED"
BUILD_DIR_ENV = "NATIVE_ASSETS_BUILD_DIR"

_TRUTHY = {"1", "true", "yes", "on"}


class NativeAssetsConfig:
    """Settings of the native assets feature for one project."""

    def __init__(self, enabled: bool = False, build_root: Optional[Path] = None):
        """Initialize configuration.

        Args:
            enabled: Whether native assets processing is enabled
            build_root: Build root. If None, '<project>/build' is used.
        """
        self.enabled = enabled
        self.build_root = Path(build_root).resolve() if build_root is not None else None

    @classmethod
    def from_environment(cls) -> "NativeAssetsConfig":
        """Create configuration from environment variables."""
        enabled = os.environ.get(ENABLED_ENV, "").strip().lower() in _TRUTHY
        build_dir = os.environ.get(BUILD_DIR_ENV)
        return cls(enabled=enabled, build_root=Path(build_dir) if build_dir else None)

    def get_build_root(self, project_dir: Path) -> Path:
        """Get the build root of a project."""
        if self.build_root is not None:
            return self.build_root
        return Path(project_dir).resolve() / "build"

    def build_dir(self, project_dir: Path, target_os: OS) -> Path:
        """Get the directory native assets for an OS are copied to.

        Args:
            project_dir: Project root
            target_os: Target OS

        Returns:
            Path to '<build_root>/native_assets/<os>'
        """
        return self.get_build_root(project_dir) / "native_assets" / target_os.value
