"""
Native assets build orchestration for iOS.

This module coordinates the native assets part of an iOS app build:
- Deciding whether native assets are in play at all
- Running the native build once per requested architecture
- Rejecting statically linked assets
- Merging per-architecture libraries into fat binaries
- Writing the asset manifest

The dry run predicts the final asset locations without compiling, so they
can be embedded in the app before the real build has run.
"""

import logging
from dataclasses import dataclass
from functools import reduce
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..assets import Asset, LinkModePreference
from ..config import NativeAssetsConfig
from ..runner import CCompilerConfig, INativeAssetsBuildRunner
from ..targets import (
    OS,
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
from .fat_binary_copier import IAssetCopier
from .fat_groups import fat_asset_target_locations
from .link_mode_guard import ensure_no_static_linking
from .location_resolver import asset_target_locations
from .manifest_writer import IManifestWriter
from .package_config import has_no_package_config, is_disabled_and_no_native_assets


@dataclass(frozen=True)
class ArchitectureBuildAggregate:
    """Assets and dependencies of all architectures built so far.

    Attributes:
        assets: Assets in architecture order
        dependencies: Distinct dependencies in first-reported order
    """

    assets: Tuple[Asset, ...] = ()
    dependencies: Tuple[Path, ...] = ()

    def add(self, assets: Sequence[Asset], dependencies: Sequence[Path]) -> "ArchitectureBuildAggregate":
        """Return a new aggregate including one more architecture's results."""
        return ArchitectureBuildAggregate(
            assets=self.assets + tuple(assets),
            dependencies=tuple(dict.fromkeys(self.dependencies + tuple(dependencies))),
        )


class BuildOrchestratorIOS:
    """
    Orchestrates native assets for iOS app builds.

    Example usage:
        orchestrator = BuildOrchestratorIOS(
            build_runner=runner,
            copier=FatBinaryCopier(),
            manifest_writer=ManifestWriter(),
        )
        dependencies = orchestrator.build(
            project_dir=Path("."),
            darwin_archs=[DarwinArch.ARM64, DarwinArch.X86_64],
            environment_type=EnvironmentType.SIMULATOR,
            build_mode=BuildMode.DEBUG,
            manifest_dir=Path("build/ios/native_assets"),
        )
    """

    def __init__(
        self,
        build_runner: INativeAssetsBuildRunner,
        copier: IAssetCopier,
        manifest_writer: IManifestWriter,
        config: Optional[NativeAssetsConfig] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize orchestrator.

        Args:
            build_runner: Runner for the packages' native builds
            copier: Writes (fat) libraries into the build directory
            manifest_writer: Persists the asset location mapping
            config: Feature configuration (defaults to the environment)
            logger: Logger for progress messages
        """
        self.build_runner = build_runner
        self.copier = copier
        self.manifest_writer = manifest_writer
        self.config = config if config is not None else NativeAssetsConfig.from_environment()
        self.logger = logger or logging.getLogger(__name__)

    def _native_assets_skipped(self) -> bool:
        return has_no_package_config(self.build_runner) or is_disabled_and_no_native_assets(
            self.build_runner, self.config
        )

    def dry_run(self, project_dir: Path, target_os: OS = OS.IOS) -> Optional[Path]:
        """
        Predict the native assets of an iOS build and write their manifest.

        Args:
            project_dir: Project root
            target_os: OS to predict assets for

        Returns:
            Path to the manifest, or None if native assets are not in play

        Raises:
            NativeAssetsDisabledError: If packages need the disabled feature
            UnsupportedLinkModeError: If an asset is statically linked
            UnsupportedAssetPathError: If an asset path variant is unknown
        """
        if self._native_assets_skipped():
            return None

        self.logger.debug(f"Dry running native assets for {target_os}.")
        result = self.build_runner.dry_run(
            link_mode_preference=LinkModePreference.DYNAMIC,
            target_os=target_os,
            working_directory=project_dir,
            include_parent_environment=True,
        )
        ensure_no_static_linking(result.assets)
        self.logger.debug(f"Dry running native assets for {target_os} done.")

        asset_locations = asset_target_locations(result.assets)
        return self.manifest_writer.write_manifest(
            asset_locations, self.config.build_dir(project_dir, target_os)
        )

    def build(
        self,
        project_dir: Path,
        darwin_archs: Sequence[DarwinArch],
        environment_type: EnvironmentType,
        build_mode: BuildMode,
        manifest_dir: Path,
        codesign_identity: Optional[str] = None,
    ) -> List[Path]:
        """
        Build native assets for every architecture and package them.

        Architectures are built one after another, in the given order, which
        is also the order their libraries are merged in.

        Args:
            project_dir: Project root
            darwin_archs: Architectures to build
            environment_type: Device or simulator
            build_mode: Build mode of the app
            manifest_dir: Directory to write the manifest into
            codesign_identity: Identity to sign libraries with

        Returns:
            Files that invalidate this build when changed

        Raises:
            NativeAssetsDisabledError: If packages need the disabled feature
            UnsupportedLinkModeError: If an asset is statically linked
            UnsupportedAssetPathError: If an asset path variant is unknown
        """
        if self._native_assets_skipped():
            self.manifest_writer.write_manifest({}, manifest_dir)
            return []

        targets = [get_native_target(arch) for arch in darwin_archs]
        native_build_mode = get_native_build_mode(build_mode)
        ios_sdk = get_ios_sdk(environment_type)
        c_compiler_config = self.build_runner.c_compiler_config
        target_names = [str(target) for target in targets]

        self.logger.debug(f"Building native assets for {target_names} {native_build_mode.value}.")

        def build_target(aggregate: ArchitectureBuildAggregate, target: Target) -> ArchitectureBuildAggregate:
            return self._build_target(
                aggregate, target, ios_sdk, native_build_mode, project_dir, c_compiler_config
            )

        aggregate = reduce(build_target, targets, ArchitectureBuildAggregate())
        ensure_no_static_linking(aggregate.assets)
        self.logger.debug(f"Building native assets for {target_names} done.")

        fat_assets = fat_asset_target_locations(aggregate.assets)
        self.copier.copy_assets(
            self.config.build_dir(project_dir, OS.IOS),
            fat_assets,
            codesign_identity,
            build_mode,
        )

        asset_locations = asset_target_locations(aggregate.assets)
        self.manifest_writer.write_manifest(asset_locations, manifest_dir)
        return list(aggregate.dependencies)

    def _build_target(
        self,
        aggregate: ArchitectureBuildAggregate,
        target: Target,
        ios_sdk: IOSSdk,
        build_mode: NativeBuildMode,
        project_dir: Path,
        c_compiler_config: Optional[CCompilerConfig],
    ) -> ArchitectureBuildAggregate:
        result = self.build_runner.build(
            link_mode_preference=LinkModePreference.DYNAMIC,
            target=target,
            target_ios_sdk=ios_sdk,
            build_mode=build_mode,
            working_directory=project_dir,
            include_parent_environment=True,
            c_compiler_config=c_compiler_config,
        )
        return aggregate.add(result.assets, result.dependencies)
