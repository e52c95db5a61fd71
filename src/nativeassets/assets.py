"""Native asset data model.

An asset is a native code artifact produced by the build of one package for
one target. Its location is described by one of the AssetPath variants:

    AssetSystemPath     - library already present on the target system
    AssetInExecutable   - code statically embedded in the app executable
    AssetInProcess      - code already loaded in the process
    AssetAbsolutePath   - standalone file that must be copied into the app

Only AssetAbsolutePath carries a file that gets relocated and merged.
"""

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Any

from .targets import Target


class LinkMode(Enum):
    """How a native asset is linked."""

    DYNAMIC = "dynamic"
    STATIC = "static"


class LinkModePreference(Enum):
    """Link mode the builder should prefer when a package supports both."""

    DYNAMIC = "dynamic"
    STATIC = "static"
    PREFER_DYNAMIC = "prefer-dynamic"
    PREFER_STATIC = "prefer-static"


@dataclass(frozen=True)
class AssetPath:
    """Base class of all asset location descriptors."""


@dataclass(frozen=True)
class AssetSystemPath(AssetPath):
    """Library provided by the target system, e.g. libc++.dylib."""

    uri: Path


@dataclass(frozen=True)
class AssetInExecutable(AssetPath):
    """Code linked into the application executable."""


@dataclass(frozen=True)
class AssetInProcess(AssetPath):
    """Code already loaded in the running process."""


@dataclass(frozen=True)
class AssetAbsolutePath(AssetPath):
    """Standalone dynamic library file."""

    uri: Path


@dataclass(frozen=True)
class Asset:
    """A native code asset built for a single target.

    Attributes:
        id: Logical asset identity (e.g. 'package:foo/foo.dart')
        path: Location of the asset
        link_mode: Dynamic or static linking
        target: Target the asset was built for
    """

    id: str
    path: AssetPath
    link_mode: LinkMode
    target: Target

    def copy_with(self, **changes: Any) -> "Asset":
        """Return a copy of this asset with the given fields replaced."""
        return replace(self, **changes)

    def __str__(self) -> str:
        return f"Asset({self.id}, {self.path}, {self.link_mode.value}, {self.target})"
