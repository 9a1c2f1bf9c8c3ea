"""
cluster-manifests computes the bootstrap manifests of a cluster from a graph
of assets and persists them to, or reloads them from, an asset directory.
"""

__all__ = [
    "asset",
    "bootkube",
    "installconfig",
    "manifests",
    "tls",
    "exceptions",
    # Note this is exposed for CLI documentation, not to be used as a library
    "tool",
]
