"""Native assets manifest.

The manifest tells the app at runtime where the native library of every
asset id is found, per target:

    {
      "format-version": [1, 0, 0],
      "native-assets": {
        "ios_arm64": {
          "package:foo/foo.dart": ["absolute", "libfoo.dylib"]
        }
      }
    }

The file is written in JSON syntax, which is valid YAML.
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

from ..assets import (
    Asset,
    AssetAbsolutePath,
    AssetInExecutable,
    AssetInProcess,
    AssetPath,
    AssetSystemPath,
)
from ..errors import NativeAssetsError

MANIFEST_FILE_NAME = "native_assets.yaml"
FORMAT_VERSION = [1, 0, 0]

logger = logging.getLogger(__name__)


class ManifestWriteError(NativeAssetsError):
    """Raised when the manifest cannot be written."""

    pass


class IManifestWriter(ABC):
    """Interface for persisting the asset location mapping."""

    @abstractmethod
    def write_manifest(self, asset_locations: Dict[Asset, Asset], directory: Path) -> Path:
        """Write the manifest for a mapping of assets to their final locations.

        Args:
            asset_locations: Original asset to located asset, may be empty
            directory: Directory to write the manifest into

        Returns:
            Path to the written manifest
        """
        pass


def encode_asset_path(path: AssetPath) -> List[str]:
    """Encode an asset path as a manifest entry."""
    if isinstance(path, AssetAbsolutePath):
        return ["absolute", Path(path.uri).as_posix()]
    if isinstance(path, AssetSystemPath):
        return ["system", Path(path.uri).as_posix()]
    if isinstance(path, AssetInExecutable):
        return ["executable"]
    if isinstance(path, AssetInProcess):
        return ["process"]
    raise ManifestWriteError(f"Cannot encode asset path type {type(path).__name__}")


def build_manifest(asset_locations: Dict[Asset, Asset]) -> Dict[str, Any]:
    """Build the manifest document, grouped by target and sorted."""
    native_assets: Dict[str, Dict[str, List[str]]] = {}
    for located in asset_locations.values():
        entries = native_assets.setdefault(str(located.target), {})
        entries[located.id] = encode_asset_path(located.path)
    return {
        "format-version": FORMAT_VERSION,
        "native-assets": {
            target: dict(sorted(entries.items()))
            for target, entries in sorted(native_assets.items())
        },
    }


class ManifestWriter(IManifestWriter):
    """Writes native_assets.yaml files."""

    def write_manifest(self, asset_locations: Dict[Asset, Asset], directory: Path) -> Path:
        """Write the manifest atomically.

        Args:
            asset_locations: Original asset to located asset, may be empty
            directory: Directory to write the manifest into (created if needed)

        Returns:
            Path to the written manifest

        Raises:
            ManifestWriteError: If the file cannot be written
        """
        manifest = build_manifest(asset_locations)
        manifest_path = Path(directory) / MANIFEST_FILE_NAME
        temp_file = manifest_path.with_suffix(".tmp")
        logger.debug(f"Writing native assets manifest {manifest_path}")

        try:
            manifest_path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_file, "w", encoding="utf-8") as f:
                json.dump(manifest, f, indent=2)
                f.write("\n")

            # Atomic rename
            temp_file.replace(manifest_path)
        except KeyboardInterrupt:
            temp_file.unlink(missing_ok=True)
            raise
        except OSError as e:
            temp_file.unlink(missing_ok=True)
            raise ManifestWriteError(f"Failed to write manifest {manifest_path}: {e}") from e

        return manifest_path
