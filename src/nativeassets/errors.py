"""Exception hierarchy for native assets processing."""


class NativeAssetsError(Exception):
    """Base exception for native assets errors."""

    pass
