"""Base class for assets that render cluster config objects as manifests."""

from typing import Any

from cluster_manifests.asset import File, FileFetcher, WritableAsset
from cluster_manifests.manifest import dump_yaml

__all__ = ["ConfigAsset", "MANIFEST_DIR"]

MANIFEST_DIR = "manifests"


class ConfigAsset(WritableAsset):
    """An asset producing one or more manifests under `manifests/`.

    These assets are always regenerated from their dependencies; the
    manifests they produce are persisted and reloaded by the `Manifests`
    asset instead.
    """

    def __init__(self) -> None:
        """Initialize ConfigAsset."""
        self.file_list: list[File] = []

    def add_manifest(self, filename: str, doc: dict[str, Any]) -> None:
        """Serialize the document and add it to the files of this asset."""
        self.file_list.append(
            File(filename=f"{MANIFEST_DIR}/{filename}", data=dump_yaml(doc))
        )

    def files(self) -> list[File]:
        return list(self.file_list)

    def load(self, fetcher: FileFetcher) -> bool:
        return False
