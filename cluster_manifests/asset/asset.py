"""Base types for assets and the files they produce.

An asset is a unit of computed cluster configuration. Each asset declares the
asset types it depends on, computes its own state from the resolved instances
of those dependencies, and optionally serializes that state as a set of files
that can be reloaded on a later run.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, TypeVar

from cluster_manifests.config import AssetsConfig
from cluster_manifests.exceptions import AssetException

if TYPE_CHECKING:
    from .file_store import FileFetcher

__all__ = [
    "Asset",
    "WritableAsset",
    "File",
    "Parents",
    "sort_files",
]

A = TypeVar("A", bound="Asset")


@dataclass(frozen=True)
class File:
    """A named blob of bytes produced by an asset."""

    filename: str
    """The path of the file relative to the asset directory."""

    data: bytes
    """The raw contents of the file."""


def sort_files(files: Iterable[File]) -> list[File]:
    """Return the files ordered by filename."""
    return sorted(files, key=lambda f: f.filename)


class Asset(ABC):
    """Base class for all assets in the dependency graph.

    Asset identity is the asset class: a resolution holds at most one
    instance of each class.
    """

    name: ClassVar[str]
    """A human friendly name for the asset."""

    @abstractmethod
    def dependencies(self) -> list[type["Asset"]]:
        """Return the asset types directly needed to generate this asset."""

    @abstractmethod
    def generate(self, parents: "Parents") -> None:
        """Compute the state of the asset from its resolved dependencies."""

    def __str__(self) -> str:
        return self.name


class WritableAsset(Asset):
    """An asset whose state can be written to and loaded from disk."""

    @abstractmethod
    def files(self) -> list[File]:
        """Return the files generated by the asset."""

    @abstractmethod
    def load(self, fetcher: "FileFetcher") -> bool:
        """Reconstruct the asset from files on disk.

        Returns False if the asset was not found on disk, in which case
        the caller is expected to generate it instead.
        """


class Parents:
    """The resolved dependencies handed to an asset's generate call."""

    def __init__(self, config: AssetsConfig, resolved: dict[type[Asset], Asset]) -> None:
        """Initialize Parents."""
        self._config = config
        self._resolved = resolved

    @property
    def config(self) -> AssetsConfig:
        """The configuration for the current run."""
        return self._config

    def get(self, cls: type[A]) -> A:
        """Return the resolved instance of a declared dependency."""
        if (asset := self._resolved.get(cls)) is None:
            raise AssetException(f"Asset {cls.__name__} is not a resolved dependency")
        if not isinstance(asset, cls):
            raise AssetException(
                f"Asset {cls.__name__} resolved to the wrong type (was {asset.__class__.__name__})"
            )
        return asset

    def __contains__(self, cls: type[Asset]) -> bool:
        return cls in self._resolved
