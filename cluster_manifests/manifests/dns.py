"""The cluster DNS config."""

from cluster_manifests.asset import Asset, Parents
from cluster_manifests.installconfig import InstallConfig

from .config_asset import ConfigAsset

__all__ = ["DNS"]

DNS_CONFIG_FILENAME = "cluster-dns-02-config.yml"


class DNS(ConfigAsset):
    """Generates the cluster-dns-*.yml files."""

    name = "DNS Config"

    def dependencies(self) -> list[type[Asset]]:
        return [InstallConfig]

    def generate(self, parents: Parents) -> None:
        install_config = parents.get(InstallConfig).required_config
        self.add_manifest(
            DNS_CONFIG_FILENAME,
            {
                "apiVersion": "config.openshift.io/v1",
                "kind": "DNS",
                "metadata": {"name": "cluster"},
                "spec": {"baseDomain": install_config.cluster_domain},
            },
        )
