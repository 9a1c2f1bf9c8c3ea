"""The cluster Network config."""

from typing import Any

from cluster_manifests.asset import Asset, Parents
from cluster_manifests.installconfig import InstallConfig

from .config_asset import ConfigAsset

__all__ = ["Networking"]

NETWORK_CONFIG_FILENAME = "cluster-network-02-config.yml"


class Networking(ConfigAsset):
    """Generates the cluster-network-*.yml files."""

    name = "Network Config"

    def dependencies(self) -> list[type[Asset]]:
        return [InstallConfig]

    def generate(self, parents: Parents) -> None:
        networking = parents.get(InstallConfig).required_config.networking
        cluster_network = []
        for entry in networking.cluster_network:
            network: dict[str, Any] = {"cidr": entry.cidr}
            if entry.host_prefix is not None:
                network["hostPrefix"] = entry.host_prefix
            cluster_network.append(network)
        self.add_manifest(
            NETWORK_CONFIG_FILENAME,
            {
                "apiVersion": "config.openshift.io/v1",
                "kind": "Network",
                "metadata": {"name": "cluster"},
                "spec": {
                    "clusterNetwork": cluster_network,
                    "serviceNetwork": list(networking.service_network),
                    "networkType": networking.network_type,
                },
            },
        )
