"""Build targets for iOS native assets.

Maps the architectures, environments and build modes of an app build onto
the vocabulary of the native assets builder:

    DarwinArch.ARMV7   -> Target.IOS_ARM
    DarwinArch.ARM64   -> Target.IOS_ARM64
    DarwinArch.X86_64  -> Target.IOS_X64

    EnvironmentType.PHYSICAL  -> IOSSdk.IPHONE_OS
    EnvironmentType.SIMULATOR -> IOSSdk.IPHONE_SIMULATOR
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class OS(Enum):
    """Target operating system."""

    IOS = "ios"
    MACOS = "macos"

    def __str__(self) -> str:
        return self.value


class Architecture(Enum):
    """CPU architecture as named by the native assets builder."""

    ARM = "arm"
    ARM64 = "arm64"
    X64 = "x64"


@dataclass(frozen=True)
class Target:
    """An OS and CPU architecture pair."""

    os: OS
    architecture: Architecture

    IOS_ARM: ClassVar["Target"]
    IOS_ARM64: ClassVar["Target"]
    IOS_X64: ClassVar["Target"]

    def __str__(self) -> str:
        return f"{self.os.value}_{self.architecture.value}"


Target.IOS_ARM = Target(OS.IOS, Architecture.ARM)
Target.IOS_ARM64 = Target(OS.IOS, Architecture.ARM64)
Target.IOS_X64 = Target(OS.IOS, Architecture.X64)


class DarwinArch(Enum):
    """Architectures an iOS app can be built for."""

    ARMV7 = "armv7"
    ARM64 = "arm64"
    X86_64 = "x86_64"


class EnvironmentType(Enum):
    """Whether the app runs on a device or in the simulator."""

    PHYSICAL = "physical"
    SIMULATOR = "simulator"


class IOSSdk(Enum):
    """iOS SDK to build against."""

    IPHONE_OS = "iphoneos"
    IPHONE_SIMULATOR = "iphonesimulator"


class BuildMode(Enum):
    """Build mode of the app."""

    DEBUG = "debug"
    PROFILE = "profile"
    RELEASE = "release"
    JIT_RELEASE = "jit_release"


class NativeBuildMode(Enum):
    """Build mode understood by the native assets builder."""

    DEBUG = "debug"
    RELEASE = "release"


_DARWIN_ARCH_TARGETS = {
    DarwinArch.ARMV7: Target.IOS_ARM,
    DarwinArch.ARM64: Target.IOS_ARM64,
    DarwinArch.X86_64: Target.IOS_X64,
}

_ENVIRONMENT_SDKS = {
    EnvironmentType.PHYSICAL: IOSSdk.IPHONE_OS,
    EnvironmentType.SIMULATOR: IOSSdk.IPHONE_SIMULATOR,
}


def get_native_target(darwin_arch: DarwinArch) -> Target:
    """Get the builder target for an iOS architecture."""
    return _DARWIN_ARCH_TARGETS[darwin_arch]


def get_ios_sdk(environment_type: EnvironmentType) -> IOSSdk:
    """Get the SDK to build against for a device or simulator build."""
    return _ENVIRONMENT_SDKS[environment_type]


def get_native_build_mode(build_mode: BuildMode) -> NativeBuildMode:
    """Translate an app build mode into the builder's build mode.

    Only debug builds are built in debug; profile and release variants are
    built optimized.
    """
    if build_mode == BuildMode.DEBUG:
        return NativeBuildMode.DEBUG
    return NativeBuildMode.RELEASE
