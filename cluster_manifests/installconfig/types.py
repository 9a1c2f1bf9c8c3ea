"""Representation of the install config supplied by the cluster administrator."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Optional

from mashumaro import field_options

from cluster_manifests.exceptions import InputException
from cluster_manifests.manifest import BaseManifest

__all__ = [
    "InstallConfig",
    "ObjectMeta",
    "Networking",
    "ClusterNetworkEntry",
    "MachineNetworkEntry",
    "Platform",
    "AzurePlatform",
    "VSpherePlatform",
    "ImageContentSource",
    "MachinePool",
    "Proxy",
    "PublishingStrategy",
]

INSTALL_CONFIG_VERSION = "v1"
DEFAULT_NETWORK_TYPE = "OVNKubernetes"
AZURE_PUBLIC_CLOUD = "AzurePublicCloud"
DEFAULT_COMPUTE_REPLICAS = 3


class PublishingStrategy(StrEnum):
    """How the cluster endpoints are exposed."""

    EXTERNAL = "External"
    INTERNAL = "Internal"


@dataclass
class ObjectMeta(BaseManifest):
    """Metadata of the install config."""

    name: str
    """The name of the cluster."""


@dataclass
class ClusterNetworkEntry(BaseManifest):
    """A block of IP addresses from which pod IPs are allocated."""

    cidr: str
    """The IP block address pool."""

    host_prefix: Optional[int] = field(
        metadata=field_options(alias="hostPrefix"), default=None
    )
    """The prefix size to allocate to each node from the CIDR."""


@dataclass
class MachineNetworkEntry(BaseManifest):
    """A block of IP addresses used by cluster machines."""

    cidr: str


@dataclass
class Networking(BaseManifest):
    """The configuration of the cluster network."""

    network_type: str = field(
        metadata=field_options(alias="networkType"), default=DEFAULT_NETWORK_TYPE
    )
    """The type of network to install."""

    cluster_network: list[ClusterNetworkEntry] = field(
        metadata=field_options(alias="clusterNetwork"), default_factory=list
    )
    """The IP address pools for pods."""

    machine_network: list[MachineNetworkEntry] = field(
        metadata=field_options(alias="machineNetwork"), default_factory=list
    )
    """The IP address pools for machines."""

    service_network: list[str] = field(
        metadata=field_options(alias="serviceNetwork"), default_factory=list
    )
    """The IP address pools for services."""


@dataclass
class AzurePlatform(BaseManifest):
    """Azure specific platform configuration."""

    region: str
    """The Azure region the cluster is installed in."""

    cloud_name: str = field(
        metadata=field_options(alias="cloudName"), default=AZURE_PUBLIC_CLOUD
    )
    """The name of the Azure cloud environment."""

    resource_group_name: Optional[str] = field(
        metadata=field_options(alias="resourceGroupName"), default=None
    )
    """The resource group that cluster resources are created in."""

    ingress_ip: Optional[str] = field(
        metadata=field_options(alias="ingressIP"), default=None
    )
    """A static private IP for the default router load balancer."""


@dataclass
class VSpherePlatform(BaseManifest):
    """vSphere specific platform configuration."""

    v_center: str = field(metadata=field_options(alias="vCenter"))
    """The domain name or IP address of the vCenter."""

    username: str
    """The user name used to connect to the vCenter."""

    password: str
    """The password for the vCenter user."""

    datacenter: str
    """The name of the datacenter to use in the vCenter."""

    default_datastore: str = field(
        metadata=field_options(alias="defaultDatastore"), default=""
    )
    """The default datastore used for provisioning volumes."""


@dataclass
class Platform(BaseManifest):
    """The platform the cluster is installed on. At most one is set."""

    azure: Optional[AzurePlatform] = None
    vsphere: Optional[VSpherePlatform] = None
    none: Optional[dict[str, Any]] = None

    @property
    def name(self) -> str:
        """Return the name of the configured platform."""
        if self.azure is not None:
            return "azure"
        if self.vsphere is not None:
            return "vsphere"
        return "none"

    @property
    def infrastructure_type(self) -> str:
        """Return the platform type as used by the Infrastructure config."""
        return {"azure": "Azure", "vsphere": "VSphere"}.get(self.name, "None")


@dataclass
class MachinePool(BaseManifest):
    """A pool of machines of the same configuration."""

    name: str
    """The name of the pool, e.g. worker."""

    replicas: int = DEFAULT_COMPUTE_REPLICAS
    """The number of machines in the pool."""


@dataclass
class ImageContentSource(BaseManifest):
    """Sources and repositories for the release-image content."""

    source: str
    """The repository that users refer to, e.g. in image pull specifications."""

    mirrors: list[str] = field(default_factory=list)
    """Repositories that may also contain the same images."""


@dataclass
class Proxy(BaseManifest):
    """Cluster-wide egress proxy settings."""

    http_proxy: Optional[str] = field(
        metadata=field_options(alias="httpProxy"), default=None
    )
    https_proxy: Optional[str] = field(
        metadata=field_options(alias="httpsProxy"), default=None
    )
    no_proxy: Optional[str] = field(
        metadata=field_options(alias="noProxy"), default=None
    )


@dataclass
class InstallConfig(BaseManifest):
    """The configuration for an installation."""

    metadata: ObjectMeta
    """Metadata holding the cluster name."""

    base_domain: str = field(metadata=field_options(alias="baseDomain"))
    """The base domain to which the cluster should belong."""

    pull_secret: str = field(metadata=field_options(alias="pullSecret"))
    """The secret to use when pulling images."""

    api_version: str = field(
        metadata=field_options(alias="apiVersion"), default=INSTALL_CONFIG_VERSION
    )
    """The version of the install config format."""

    networking: Networking = field(default_factory=Networking)
    """The configuration for the cluster network."""

    platform: Platform = field(default_factory=Platform)
    """The configuration for the specific platform."""

    publish: PublishingStrategy = PublishingStrategy.EXTERNAL
    """How the user facing endpoints of the cluster are exposed."""

    compute: list[MachinePool] = field(
        default_factory=lambda: [MachinePool(name="worker")]
    )
    """The machine pools for compute machines."""

    image_content_sources: list[ImageContentSource] = field(
        metadata=field_options(alias="imageContentSources"), default_factory=list
    )
    """Sources and repositories for the release-image content."""

    proxy: Optional[Proxy] = None
    """The cluster-wide proxy settings."""

    ssh_key: Optional[str] = field(metadata=field_options(alias="sshKey"), default=None)
    """The public SSH key for access to the machines."""

    additional_trust_bundle: Optional[str] = field(
        metadata=field_options(alias="additionalTrustBundle"), default=None
    )
    """A PEM-encoded X.509 certificate bundle added to the trust store."""

    @property
    def cluster_domain(self) -> str:
        """The domain of the cluster, i.e. `<name>.<baseDomain>`."""
        return f"{self.metadata.name}.{self.base_domain}"

    def validate(self) -> None:
        """Check the install config for required values.

        Raises:
            InputException: If a required value is missing.
        """
        if self.api_version != INSTALL_CONFIG_VERSION:
            raise InputException(
                f"Invalid install config apiVersion '{self.api_version}', expected '{INSTALL_CONFIG_VERSION}'"
            )
        if not self.metadata.name:
            raise InputException("Invalid install config missing metadata.name")
        if not self.base_domain:
            raise InputException("Invalid install config missing baseDomain")
        if not self.pull_secret:
            raise InputException("Invalid install config missing pullSecret")
        for source in self.image_content_sources:
            if not source.source:
                raise InputException(
                    "Invalid install config imageContentSources entry missing source"
                )
