"""Exceptions related to cluster-manifests."""

__all__ = [
    "AssetException",
    "InputException",
    "ResolutionError",
    "SerializationError",
    "FileFetchError",
    "CommandException",
    "TemplateFault",
]


class AssetException(Exception):
    """Generic base exception used for this library."""


class InputException(AssetException):
    """Raised when the input files or values are not formatted as expected."""


class ResolutionError(AssetException):
    """Raised when an asset could not be generated or loaded."""

    def __init__(self, asset_name: str, message: str | None) -> None:
        super().__init__(
            f'failed to resolve asset "{asset_name}": {message or "Unknown error"}'
        )
        self.asset_name = asset_name
        self.message = message


class SerializationError(AssetException):
    """Raised when an object could not be marshaled or unmarshaled."""


class FileFetchError(AssetException):
    """Raised when files matching a pattern could not be read."""

    def __init__(self, pattern: str, message: str | None) -> None:
        super().__init__(f"failed to load {pattern} files: {message}")
        self.pattern = pattern


class CommandException(AssetException):
    """Raised when there is a failure running a subcommand."""


class TemplateFault(Exception):
    """Raised when a bundled template can't be parsed or executed.

    Templates ship with the package so this indicates a packaging defect. It
    does not derive from `AssetException` and is not handled by the resolver
    or the command line tool.
    """
