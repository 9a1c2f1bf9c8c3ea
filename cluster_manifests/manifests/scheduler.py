"""The cluster Scheduler config."""

from cluster_manifests.asset import Asset, Parents
from cluster_manifests.installconfig import InstallConfig

from .config_asset import ConfigAsset

__all__ = ["Scheduler"]

SCHEDULER_CONFIG_FILENAME = "cluster-scheduler-02-config.yml"


class Scheduler(ConfigAsset):
    """Generates the cluster-scheduler-*.yml files."""

    name = "Scheduler Config"

    def dependencies(self) -> list[type[Asset]]:
        return [InstallConfig]

    def generate(self, parents: Parents) -> None:
        install_config = parents.get(InstallConfig).required_config
        # Control plane machines run workloads when there are no compute machines
        compute_replicas = sum(pool.replicas for pool in install_config.compute)
        self.add_manifest(
            SCHEDULER_CONFIG_FILENAME,
            {
                "apiVersion": "config.openshift.io/v1",
                "kind": "Scheduler",
                "metadata": {"name": "cluster"},
                "spec": {
                    "mastersSchedulable": compute_replicas == 0,
                    "policy": {"name": ""},
                },
            },
        )
