"""Abstract interface of the native assets build runner.

The runner invokes the build hooks of every package that ships native code.
It is implemented outside this package; the orchestrator only relies on the
contract defined here.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .assets import Asset, LinkModePreference
from .targets import OS, IOSSdk, NativeBuildMode, Target


@dataclass(frozen=True)
class CCompilerConfig:
    """C toolchain handed to package build hooks.

    Attributes:
        cc: Path to the C compiler
        ld: Path to the linker
        ar: Path to the archiver
        env_script: Script that sets up the toolchain environment
        env_script_arguments: Arguments for env_script
    """

    cc: Optional[Path] = None
    ld: Optional[Path] = None
    ar: Optional[Path] = None
    env_script: Optional[Path] = None
    env_script_arguments: List[str] = field(default_factory=list)


@dataclass
class DryRunResult:
    """Assets predicted by a dry run."""

    assets: List[Asset]


@dataclass
class BuildResult:
    """Assets produced by building one target.

    Attributes:
        assets: Assets built for the target
        dependencies: Files that invalidate the build when changed
    """

    assets: List[Asset]
    dependencies: List[Path] = field(default_factory=list)


class INativeAssetsBuildRunner(ABC):
    """Interface for running the native assets build of a project."""

    @abstractmethod
    def has_package_config(self) -> bool:
        """Check whether the project has a resolved package configuration."""
        pass

    @abstractmethod
    def packages_with_native_assets(self) -> List[str]:
        """Get the names of the packages that build native assets."""
        pass

    @abstractmethod
    def dry_run(
        self,
        link_mode_preference: LinkModePreference,
        target_os: OS,
        working_directory: Path,
        include_parent_environment: bool,
    ) -> DryRunResult:
        """Predict the assets of all packages without compiling anything.

        Args:
            link_mode_preference: Preferred link mode
            target_os: OS to predict assets for
            working_directory: Project root
            include_parent_environment: Pass the current environment to hooks

        Returns:
            DryRunResult with the predicted assets
        """
        pass

    @abstractmethod
    def build(
        self,
        link_mode_preference: LinkModePreference,
        target: Target,
        target_ios_sdk: Optional[IOSSdk],
        build_mode: NativeBuildMode,
        working_directory: Path,
        include_parent_environment: bool,
        c_compiler_config: Optional[CCompilerConfig],
    ) -> BuildResult:
        """Build the native assets of all packages for one target.

        Args:
            link_mode_preference: Preferred link mode
            target: Target to build for
            target_ios_sdk: iOS SDK to build against
            build_mode: Debug or release
            working_directory: Project root
            include_parent_environment: Pass the current environment to hooks
            c_compiler_config: C toolchain for the hooks

        Returns:
            BuildResult with the built assets and their dependencies
        """
        pass

    @property
    @abstractmethod
    def c_compiler_config(self) -> Optional[CCompilerConfig]:
        """C toolchain to hand to build hooks."""
        pass
