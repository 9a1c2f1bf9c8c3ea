"""Certificate for the machine config server."""

import dataclasses

from cluster_manifests.asset import Asset, Parents
from cluster_manifests.installconfig import InstallConfig

from .cert_key import SignedCertKey
from .generator import CertConfig, VALIDITY_TEN_YEARS
from .root_ca import RootCA

__all__ = ["MCSCertKey"]


class MCSCertKey(SignedCertKey):
    """The serving certificate of the machine config server."""

    name = "Certificate (mcs)"
    file_basename = "machine-config-server"
    signer = RootCA
    cert_config = CertConfig(
        common_name="system:machine-config-server",
        validity_days=VALIDITY_TEN_YEARS,
        ext_key_usage="serverAuth",
    )

    def dependencies(self) -> list[type[Asset]]:
        return [RootCA, InstallConfig]

    def build_cert_config(self, parents: Parents) -> CertConfig:
        """Add the internal API hostname the machines reach the server at."""
        install_config = parents.get(InstallConfig).required_config
        return dataclasses.replace(
            self.cert_config, dns_names=(f"api-int.{install_config.cluster_domain}",)
        )
