"""Fat Binary Copier.

This module copies native libraries into the app build directory, merging
the builds of several architectures into one binary with lipo.

Design:
    - Single-architecture libraries are copied unchanged
    - Multi-architecture groups are merged with 'lipo -create'
    - Code signs every written library, ad-hoc without an identity
    - Wraps tool failures in FatBinaryError
"""

import logging
import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

from ..assets import Asset, AssetAbsolutePath
from ..errors import NativeAssetsError
from ..targets import BuildMode


class FatBinaryError(NativeAssetsError):
    """Raised when copying, merging or signing a library fails."""

    pass


class IAssetCopier(ABC):
    """Interface for writing native libraries into the build directory."""

    @abstractmethod
    def copy_assets(
        self,
        destination_dir: Path,
        fat_assets: Dict[Path, List[Asset]],
        codesign_identity: Optional[str],
        build_mode: BuildMode,
    ) -> None:
        """Write one library per final path.

        Args:
            destination_dir: Directory to write into (may already exist)
            fat_assets: Final relative path to the assets to merge there
            codesign_identity: Identity to sign with, None to sign ad-hoc
            build_mode: Build mode of the app
        """
        pass


class FatBinaryCopier(IAssetCopier):
    """Copies and merges dynamic libraries using lipo and codesign."""

    def __init__(
        self,
        lipo_path: str = "lipo",
        codesign_path: str = "codesign",
        timeout: int = 60,
        logger: Optional[logging.Logger] = None,
    ):
        """Initialize copier.

        Args:
            lipo_path: lipo executable
            codesign_path: codesign executable
            timeout: Timeout in seconds for each tool invocation
            logger: Logger for progress messages
        """
        self.lipo_path = lipo_path
        self.codesign_path = codesign_path
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

    def copy_assets(
        self,
        destination_dir: Path,
        fat_assets: Dict[Path, List[Asset]],
        codesign_identity: Optional[str],
        build_mode: BuildMode,
    ) -> None:
        """Write one (possibly fat) library per final path.

        Raises:
            FatBinaryError: If a source is missing or a tool fails
        """
        if not fat_assets:
            return

        destination_dir = Path(destination_dir)
        destination_dir.mkdir(parents=True, exist_ok=True)
        self.logger.info(f"Copying native assets to {destination_dir}.")

        for final_path, assets in fat_assets.items():
            target = destination_dir / final_path
            sources = [self._source_file(asset) for asset in assets]
            if len(sources) == 1:
                self._copy(sources[0], target)
            else:
                self._run(
                    [self.lipo_path, "-create", "-output", str(target)]
                    + [str(source) for source in sources],
                    f"lipo of {final_path}",
                )
            self.codesign(target, codesign_identity, build_mode)

        self.logger.info(f"Copying native assets to {destination_dir} done.")

    def codesign(self, target: Path, codesign_identity: Optional[str], build_mode: BuildMode) -> None:
        """Sign a library in place.

        Without an identity the library is signed ad-hoc. Only release builds
        get a secure timestamp, which needs network access.
        """
        identity = codesign_identity or "-"
        cmd = [self.codesign_path, "--force", "--sign", identity]
        if build_mode != BuildMode.RELEASE:
            cmd.append("--timestamp=none")
        cmd.append(str(target))
        self._run(cmd, f"codesign of {target.name}")

    @staticmethod
    def _source_file(asset: Asset) -> Path:
        if not isinstance(asset.path, AssetAbsolutePath):
            raise FatBinaryError(f"Asset {asset.id} has no file to copy")
        source = Path(asset.path.uri)
        if not source.exists():
            raise FatBinaryError(f"Native asset file not found: {source}")
        return source

    def _copy(self, source: Path, target: Path) -> None:
        self.logger.debug(f"Copying {source} to {target}")
        try:
            shutil.copyfile(source, target)
        except OSError as e:
            raise FatBinaryError(f"Failed to copy {source} to {target}: {e}") from e

    def _run(self, cmd: List[str], description: str) -> None:
        self.logger.debug(" ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise FatBinaryError(f"Timeout during {description}") from e
        except OSError as e:
            raise FatBinaryError(f"Failed to run {cmd[0]}: {e}") from e

        if result.returncode != 0:
            error_msg = f"Failed {description}\n"
            error_msg += f"stderr: {result.stderr}\n"
            error_msg += f"stdout: {result.stdout}"
            raise FatBinaryError(error_msg)
