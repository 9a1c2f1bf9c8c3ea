"""The root certificate authority of the cluster."""

from .cert_key import SelfSignedCertKey
from .generator import CertConfig, VALIDITY_TEN_YEARS

__all__ = ["RootCA"]


class RootCA(SelfSignedCertKey):
    """The self-signed CA that issues the machine config server certificate."""

    name = "Root CA"
    file_basename = "root-ca"
    cert_config = CertConfig(
        common_name="root-ca",
        validity_days=VALIDITY_TEN_YEARS,
        is_ca=True,
    )
