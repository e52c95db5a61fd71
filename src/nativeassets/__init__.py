"""nativeassets - native code assets for multi-architecture iOS app builds."""

from .assets import (
    Asset,
    AssetAbsolutePath,
    AssetInExecutable,
    AssetInProcess,
    AssetPath,
    AssetSystemPath,
    LinkMode,
    LinkModePreference,
)
from .config import NativeAssetsConfig
from .errors import NativeAssetsError
from .runner import BuildResult, CCompilerConfig, DryRunResult, INativeAssetsBuildRunner
from .targets import (
    OS,
    Architecture,
    BuildMode,
    DarwinArch,
    EnvironmentType,
    IOSSdk,
    NativeBuildMode,
    Target,
)

__version__ = "0.1.0"

__all__ = [
    "Asset",
    "AssetPath",
    "AssetAbsolutePath",
    "AssetInExecutable",
    "AssetInProcess",
    "AssetSystemPath",
    "LinkMode",
    "LinkModePreference",
    "NativeAssetsConfig",
    "NativeAssetsError",
    "INativeAssetsBuildRunner",
    "BuildResult",
    "DryRunResult",
    "CCompilerConfig",
    "OS",
    "Architecture",
    "BuildMode",
    "DarwinArch",
    "EnvironmentType",
    "IOSSdk",
    "NativeBuildMode",
    "Target",
]
