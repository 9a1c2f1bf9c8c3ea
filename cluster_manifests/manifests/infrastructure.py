"""The cluster Infrastructure config."""

from typing import Any

from cluster_manifests.asset import Asset, Parents
from cluster_manifests.installconfig import ClusterID, InstallConfig

from .config_asset import ConfigAsset

__all__ = ["Infrastructure"]

INFRASTRUCTURE_CONFIG_FILENAME = "cluster-infrastructure-02-config.yml"
API_SERVER_PORT = 6443


class Infrastructure(ConfigAsset):
    """Generates the cluster-infrastructure-*.yml files."""

    name = "Infrastructure Config"

    def dependencies(self) -> list[type[Asset]]:
        return [ClusterID, InstallConfig]

    def generate(self, parents: Parents) -> None:
        cluster_id = parents.get(ClusterID)
        install_config = parents.get(InstallConfig).required_config
        platform_type = install_config.platform.infrastructure_type
        platform_status: dict[str, Any] = {"type": platform_type}
        if (azure := install_config.platform.azure) is not None:
            platform_status["azure"] = {
                "cloudName": azure.cloud_name,
                "resourceGroupName": azure.resource_group_name
                or f"{cluster_id.infra_id}-rg",
            }
        domain = install_config.cluster_domain
        self.add_manifest(
            INFRASTRUCTURE_CONFIG_FILENAME,
            {
                "apiVersion": "config.openshift.io/v1",
                "kind": "Infrastructure",
                "metadata": {"name": "cluster"},
                "spec": {
                    "cloudConfig": {"name": ""},
                    "platformSpec": {"type": platform_type},
                },
                "status": {
                    "apiServerURL": f"https://api.{domain}:{API_SERVER_PORT}",
                    "apiServerInternalURI": f"https://api-int.{domain}:{API_SERVER_PORT}",
                    "etcdDiscoveryDomain": domain,
                    "infrastructureName": cluster_id.infra_id,
                    "platform": platform_type,
                    "platformStatus": platform_status,
                },
            },
        )
