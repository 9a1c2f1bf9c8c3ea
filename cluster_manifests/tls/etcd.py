"""Certificate assets for etcd and the etcd metrics endpoint."""

from .cert_key import CertBundle, SelfSignedCertKey, SignedCertKey
from .generator import CertConfig, VALIDITY_TEN_YEARS

__all__ = [
    "EtcdSignerCertKey",
    "EtcdCABundle",
    "EtcdSignerClientCertKey",
    "EtcdMetricSignerCertKey",
    "EtcdMetricCABundle",
    "EtcdMetricSignerClientCertKey",
]


class EtcdSignerCertKey(SelfSignedCertKey):
    """The CA that signs etcd serving, peer and client certificates."""

    name = "Certificate (etcd-signer)"
    file_basename = "etcd-signer"
    cert_config = CertConfig(
        common_name="etcd-signer",
        validity_days=VALIDITY_TEN_YEARS,
        is_ca=True,
    )


class EtcdCABundle(CertBundle):
    """The bundle of CAs that etcd clients trust."""

    name = "Certificate (etcd-ca-bundle)"
    file_basename = "etcd-ca-bundle"
    sources = [EtcdSignerCertKey]


class EtcdSignerClientCertKey(SignedCertKey):
    """The client certificate used to talk to etcd."""

    name = "Certificate (etcd-signer-client)"
    file_basename = "etcd-client"
    signer = EtcdSignerCertKey
    cert_config = CertConfig(
        common_name="etcd",
        organizational_unit="etcd",
        validity_days=VALIDITY_TEN_YEARS,
        ext_key_usage="clientAuth",
    )


class EtcdMetricSignerCertKey(SelfSignedCertKey):
    """The CA that signs certificates for the etcd metrics endpoint."""

    name = "Certificate (etcd-metric-signer)"
    file_basename = "etcd-metric-signer"
    cert_config = CertConfig(
        common_name="etcd-metric-signer",
        validity_days=VALIDITY_TEN_YEARS,
        is_ca=True,
    )


class EtcdMetricCABundle(CertBundle):
    """The bundle of CAs that etcd metrics clients trust."""

    name = "Certificate (etcd-metric-ca-bundle)"
    file_basename = "etcd-metric-ca-bundle"
    sources = [EtcdMetricSignerCertKey]


class EtcdMetricSignerClientCertKey(SignedCertKey):
    """The client certificate used to scrape etcd metrics."""

    name = "Certificate (etcd-metric-signer-client)"
    file_basename = "etcd-metric-signer-client"
    signer = EtcdMetricSignerCertKey
    cert_config = CertConfig(
        common_name="etcd-metric",
        organizational_unit="etcd-metric",
        validity_days=VALIDITY_TEN_YEARS,
        ext_key_usage="clientAuth",
    )
