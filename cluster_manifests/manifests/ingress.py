"""The cluster Ingress config."""

from cluster_manifests.asset import Asset, Parents
from cluster_manifests.installconfig import InstallConfig
from cluster_manifests.installconfig.types import PublishingStrategy

from .config_asset import ConfigAsset

__all__ = ["Ingress"]

INGRESS_CONFIG_FILENAME = "cluster-ingress-02-config.yml"
DEFAULT_INGRESS_CONTROLLER_FILENAME = "cluster-ingress-default-ingresscontroller.yaml"


class Ingress(ConfigAsset):
    """Generates the cluster-ingress-*.yml files."""

    name = "Ingress Config"

    def dependencies(self) -> list[type[Asset]]:
        return [InstallConfig]

    def generate(self, parents: Parents) -> None:
        install_config = parents.get(InstallConfig).required_config
        self.add_manifest(
            INGRESS_CONFIG_FILENAME,
            {
                "apiVersion": "config.openshift.io/v1",
                "kind": "Ingress",
                "metadata": {"name": "cluster"},
                "spec": {"domain": f"apps.{install_config.cluster_domain}"},
            },
        )
        if install_config.publish == PublishingStrategy.INTERNAL:
            self.add_manifest(
                DEFAULT_INGRESS_CONTROLLER_FILENAME,
                {
                    "apiVersion": "operator.openshift.io/v1",
                    "kind": "IngressController",
                    "metadata": {
                        "name": "default",
                        "namespace": "openshift-ingress-operator",
                    },
                    "spec": {
                        "endpointPublishingStrategy": {
                            "type": "LoadBalancerService",
                            "loadBalancer": {"scope": "Internal"},
                        },
                    },
                },
            )
