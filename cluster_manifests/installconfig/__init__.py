"""Assets derived directly from the user supplied install config."""

from .cluster_id import ClusterID
from .install_config import InstallConfig

__all__ = [
    "ClusterID",
    "InstallConfig",
]
