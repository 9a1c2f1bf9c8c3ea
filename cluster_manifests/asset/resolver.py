"""Resolver for the asset dependency graph.

The resolver walks the declared dependencies of the requested assets
depth first and computes each asset after all of its dependencies
(post-order). Every asset type is computed at most once per call to
`resolve` and the same instance is handed to every dependent.

In `ResolveMode.LOAD` writable assets are first loaded from the file
store and only generated when they are not present on disk.
"""

from collections.abc import Iterable
from enum import StrEnum
import logging

from cluster_manifests.config import AssetsConfig
from cluster_manifests.context import asset_trace, resolution_path
from cluster_manifests.exceptions import ResolutionError, TemplateFault

from .asset import Asset, Parents, WritableAsset
from .file_store import FileFetcher

__all__ = [
    "AssetResolver",
    "ResolveMode",
    "resolve",
]

_LOGGER = logging.getLogger(__name__)


class ResolveMode(StrEnum):
    """How an asset's state is obtained."""

    GENERATE = "generate"
    LOAD = "load"


class AssetResolver:
    """Resolves a set of requested assets and all of their dependencies."""

    def __init__(
        self,
        config: AssetsConfig,
        fetcher: FileFetcher | None = None,
        mode: ResolveMode = ResolveMode.GENERATE,
    ) -> None:
        """Initialize AssetResolver."""
        if mode == ResolveMode.LOAD and fetcher is None:
            raise ValueError("A fetcher is required to load assets")
        self._config = config
        self._fetcher = fetcher
        self._mode = mode

    def resolve(self, targets: Iterable[type[Asset]]) -> dict[type[Asset], Asset]:
        """Resolve the targets, returning every resolved asset keyed by type.

        Raises:
            ResolutionError: If any asset failed to generate or load. No
                assets are returned in that case.
        """
        resolved: dict[type[Asset], Asset] = {}
        in_progress: set[type[Asset]] = set()
        for target in targets:
            self._resolve(target, resolved, in_progress)
        _LOGGER.info("Resolved %d assets", len(resolved))
        return resolved

    def _resolve(
        self,
        cls: type[Asset],
        resolved: dict[type[Asset], Asset],
        in_progress: set[type[Asset]],
    ) -> Asset:
        if (existing := resolved.get(cls)) is not None:
            return existing
        asset = cls()
        if cls in in_progress:
            path = " > ".join(resolution_path() + (asset.name,))
            raise ResolutionError(asset.name, f"dependency cycle detected: {path}")
        in_progress.add(cls)
        with asset_trace(asset.name):
            deps = asset.dependencies()
            for dep in deps:
                self._resolve(dep, resolved, in_progress)
            parents = Parents(self._config, {dep: resolved[dep] for dep in deps})
            self._compute(asset, parents)
        in_progress.discard(cls)
        resolved[cls] = asset
        return asset

    def _compute(self, asset: Asset, parents: Parents) -> None:
        """Load or generate a single asset whose dependencies are resolved."""
        try:
            if (
                self._mode == ResolveMode.LOAD
                and isinstance(asset, WritableAsset)
                and self._fetcher is not None
            ):
                if asset.load(self._fetcher):
                    _LOGGER.debug("Loaded %s from disk", asset.name)
                    return
                _LOGGER.debug("%s not found on disk, generating", asset.name)
            asset.generate(parents)
        except (ResolutionError, TemplateFault):
            raise
        except Exception as err:
            raise ResolutionError(asset.name, str(err)) from err
        _LOGGER.debug("Generated %s", asset.name)


def resolve(
    targets: Iterable[type[Asset]],
    config: AssetsConfig,
    fetcher: FileFetcher | None = None,
    mode: ResolveMode = ResolveMode.GENERATE,
) -> dict[type[Asset], Asset]:
    """Resolve the targets with a new resolver."""
    return AssetResolver(config, fetcher, mode).resolve(targets)
