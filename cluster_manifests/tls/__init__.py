"""Certificate and key assets.

Keys and certificates are produced by a `CertKeyGenerator`; the assets only
hold the PEM encoded bytes and read or write them under `tls/`.
"""

from .cert_key import CertBundle, CertKey, SelfSignedCertKey, SignedCertKey
from .etcd import (
    EtcdCABundle,
    EtcdMetricCABundle,
    EtcdMetricSignerCertKey,
    EtcdMetricSignerClientCertKey,
    EtcdSignerCertKey,
    EtcdSignerClientCertKey,
)
from .generator import CertConfig, CertKeyGenerator, CertKeyPair, OpenSSLCertKeyGenerator
from .mcs import MCSCertKey
from .root_ca import RootCA

__all__ = [
    "CertBundle",
    "CertKey",
    "SelfSignedCertKey",
    "SignedCertKey",
    "CertConfig",
    "CertKeyGenerator",
    "CertKeyPair",
    "OpenSSLCertKeyGenerator",
    "RootCA",
    "EtcdSignerCertKey",
    "EtcdCABundle",
    "EtcdSignerClientCertKey",
    "EtcdMetricSignerCertKey",
    "EtcdMetricCABundle",
    "EtcdMetricSignerClientCertKey",
    "MCSCertKey",
]
