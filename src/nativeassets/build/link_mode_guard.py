"""Rejection of statically linked native assets."""

from typing import Iterable

from ..assets import Asset, LinkMode
from ..errors import NativeAssetsError


class UnsupportedLinkModeError(NativeAssetsError):
    """Raised when a native asset is statically linked."""

    def __init__(self, asset: Asset):
        self.asset = asset
        super().__init__(
            f"Native asset {asset.id} for {asset.target} has link mode "
            f"{asset.link_mode.value}. Only dynamic linking is supported for iOS."
        )


def ensure_no_static_linking(assets: Iterable[Asset]) -> None:
    """Fail on the first statically linked asset.

    Raises:
        UnsupportedLinkModeError: If any asset has LinkMode.STATIC
    """
    for asset in assets:
        if asset.link_mode == LinkMode.STATIC:
            raise UnsupportedLinkModeError(asset)
