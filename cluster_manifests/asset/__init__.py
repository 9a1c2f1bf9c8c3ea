"""
The asset module provides the dependency graph that cluster configuration is
computed from.

- Each asset declares the asset types it depends on.
- The resolver computes every asset once, after its dependencies.
- Writable assets serialize to files and can be reloaded from a file store.
"""

from .asset import Asset, WritableAsset, File, Parents, sort_files
from .file_store import FileFetcher, DiskFileFetcher, InMemoryFileFetcher, write_files
from .resolver import AssetResolver, ResolveMode, resolve

__all__ = [
    "Asset",
    "WritableAsset",
    "File",
    "Parents",
    "sort_files",
    "FileFetcher",
    "DiskFileFetcher",
    "InMemoryFileFetcher",
    "write_files",
    "AssetResolver",
    "ResolveMode",
    "resolve",
]
