"""The cluster-wide egress Proxy config."""

from typing import Any

from cluster_manifests.asset import Asset, Parents
from cluster_manifests.installconfig import InstallConfig
from cluster_manifests.installconfig.types import InstallConfig as InstallConfigType

from .config_asset import ConfigAsset

__all__ = ["Proxy", "no_proxy"]

PROXY_CONFIG_FILENAME = "cluster-proxy-01-config.yaml"

_DEFAULT_NO_PROXY = ["127.0.0.1", "localhost", ".svc", ".cluster.local"]


def no_proxy(install_config: InstallConfigType) -> str:
    """Return the hosts and networks that must bypass the proxy, sorted."""
    entries = set(_DEFAULT_NO_PROXY)
    entries.add(f"api-int.{install_config.cluster_domain}")
    networking = install_config.networking
    entries.update(entry.cidr for entry in networking.cluster_network)
    entries.update(entry.cidr for entry in networking.machine_network)
    entries.update(networking.service_network)
    if install_config.proxy is not None and install_config.proxy.no_proxy:
        entries.update(
            entry.strip()
            for entry in install_config.proxy.no_proxy.split(",")
            if entry.strip()
        )
    return ",".join(sorted(entries))


class Proxy(ConfigAsset):
    """Generates the cluster-proxy-*.yml files."""

    name = "Proxy Config"

    def dependencies(self) -> list[type[Asset]]:
        return [InstallConfig]

    def generate(self, parents: Parents) -> None:
        install_config = parents.get(InstallConfig).required_config
        spec: dict[str, Any] = {}
        status: dict[str, Any] = {}
        if (proxy := install_config.proxy) is not None:
            if proxy.http_proxy:
                spec["httpProxy"] = status["httpProxy"] = proxy.http_proxy
            if proxy.https_proxy:
                spec["httpsProxy"] = status["httpsProxy"] = proxy.https_proxy
            if proxy.no_proxy:
                spec["noProxy"] = proxy.no_proxy
            if proxy.http_proxy or proxy.https_proxy:
                status["noProxy"] = no_proxy(install_config)
        if install_config.additional_trust_bundle:
            spec["trustedCA"] = {"name": "user-ca-bundle"}
        self.add_manifest(
            PROXY_CONFIG_FILENAME,
            {
                "apiVersion": "config.openshift.io/v1",
                "kind": "Proxy",
                "metadata": {"name": "cluster"},
                "spec": spec,
                "status": status,
            },
        )
