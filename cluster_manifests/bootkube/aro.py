"""Azure Red Hat OpenShift values shared by the bootkube templates.

These assets hold no files. They are recomputed on every run and only
reach disk through the manifests rendered from them.
"""

import logging
import re
import secrets

from cluster_manifests.asset import Asset, Parents
from cluster_manifests.installconfig import ClusterID, InstallConfig

__all__ = [
    "ARODNSConfig",
    "AROImageRegistryConfig",
    "IMAGE_REGISTRY_CONTAINER_NAME",
]

_LOGGER = logging.getLogger(__name__)

IMAGE_REGISTRY_CONTAINER_NAME = "image-registry"
IMAGE_REGISTRY_ACCOUNT_PREFIX = "imageregistry"

# Azure storage account names are 3-24 lowercase letters and digits
_STORAGE_ACCOUNT_MAX_LEN = 24
_HTTP_SECRET_BYTES = 64
_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def storage_account_name(infra_id: str) -> str:
    """Return the image registry storage account name for the infra id.

    The tail of the infra id carries its random suffix, so it is kept
    when the name has to be shortened.
    """
    suffix = _NON_ALNUM.sub("", infra_id.lower())
    room = _STORAGE_ACCOUNT_MAX_LEN - len(IMAGE_REGISTRY_ACCOUNT_PREFIX)
    return IMAGE_REGISTRY_ACCOUNT_PREFIX + suffix[-room:]


class ARODNSConfig(Asset):
    """The DNS related addresses of the cluster."""

    name = "ARO DNS Config"

    def __init__(self) -> None:
        """Initialize ARODNSConfig."""
        self.ingress_ip = ""

    def dependencies(self) -> list[type[Asset]]:
        return [InstallConfig]

    def generate(self, parents: Parents) -> None:
        azure = parents.get(InstallConfig).required_config.platform.azure
        if azure is not None and azure.ingress_ip:
            self.ingress_ip = azure.ingress_ip


class AROImageRegistryConfig(Asset):
    """The storage and secret of the integrated image registry."""

    name = "ARO Image Registry Config"

    def __init__(self) -> None:
        """Initialize AROImageRegistryConfig."""
        self.http_secret = ""
        self.account_name = ""
        self.container_name = ""

    def dependencies(self) -> list[type[Asset]]:
        return [ClusterID]

    def generate(self, parents: Parents) -> None:
        cluster_id = parents.get(ClusterID)
        self.http_secret = secrets.token_hex(_HTTP_SECRET_BYTES)
        self.account_name = storage_account_name(cluster_id.infra_id)
        self.container_name = IMAGE_REGISTRY_CONTAINER_NAME
        _LOGGER.debug("Using image registry storage account %s", self.account_name)
