"""Base assets for certificate and key pairs and certificate bundles."""

import logging
from typing import ClassVar

from cluster_manifests.asset import Asset, File, FileFetcher, Parents, WritableAsset
from cluster_manifests.exceptions import InputException

from .generator import CertConfig, CertKeyGenerator, CertKeyPair, OpenSSLCertKeyGenerator

__all__ = [
    "CertKey",
    "SelfSignedCertKey",
    "SignedCertKey",
    "CertBundle",
]

_LOGGER = logging.getLogger(__name__)

TLS_DIR = "tls"


def _generator(parents: Parents) -> CertKeyGenerator:
    return parents.config.cert_generator or OpenSSLCertKeyGenerator()


class CertKey(WritableAsset):
    """A PEM encoded certificate and private key written under `tls/`."""

    file_basename: ClassVar[str]
    """The name of the cert and key files without extension."""

    def __init__(self) -> None:
        """Initialize CertKey."""
        self._cert = b""
        self._key = b""

    def cert(self) -> bytes:
        """Return the PEM encoded certificate."""
        return self._cert

    def key(self) -> bytes:
        """Return the PEM encoded private key."""
        return self._key

    @property
    def pair(self) -> CertKeyPair:
        """The certificate and key as a pair."""
        return CertKeyPair(cert=self._cert, key=self._key)

    @property
    def cert_filename(self) -> str:
        return f"{TLS_DIR}/{self.file_basename}.crt"

    @property
    def key_filename(self) -> str:
        return f"{TLS_DIR}/{self.file_basename}.key"

    def _set(self, pair: CertKeyPair) -> None:
        if not pair.cert or not pair.key:
            raise InputException(f"{self.name} produced an empty certificate or key")
        self._cert = pair.cert
        self._key = pair.key

    def files(self) -> list[File]:
        if not self._cert:
            return []
        return [
            File(filename=self.cert_filename, data=self._cert),
            File(filename=self.key_filename, data=self._key),
        ]

    def load(self, fetcher: FileFetcher) -> bool:
        cert = fetcher.fetch_by_name(self.cert_filename)
        key = fetcher.fetch_by_name(self.key_filename)
        if cert is None or key is None:
            if cert is not None or key is not None:
                _LOGGER.warning(
                    "Ignoring %s, only one of the certificate and key was found",
                    self.name,
                )
            return False
        self._set(CertKeyPair(cert=cert.data, key=key.data))
        return True


class SelfSignedCertKey(CertKey):
    """A certificate authority that signs itself."""

    cert_config: ClassVar[CertConfig]

    def dependencies(self) -> list[type[Asset]]:
        return []

    def generate(self, parents: Parents) -> None:
        self._set(_generator(parents).self_signed(self.cert_config))


class SignedCertKey(CertKey):
    """A certificate signed by another certificate asset."""

    signer: ClassVar[type[CertKey]]

    cert_config: ClassVar[CertConfig]

    def dependencies(self) -> list[type[Asset]]:
        return [self.signer]

    def build_cert_config(self, parents: Parents) -> CertConfig:
        """Return the attributes of the certificate to generate."""
        return self.cert_config

    def generate(self, parents: Parents) -> None:
        ca = parents.get(self.signer)
        self._set(_generator(parents).signed(self.build_cert_config(parents), ca.pair))


class CertBundle(WritableAsset):
    """A concatenation of the certificates of other assets."""

    file_basename: ClassVar[str]

    sources: ClassVar[list[type[CertKey]]]

    def __init__(self) -> None:
        """Initialize CertBundle."""
        self._cert = b""

    def cert(self) -> bytes:
        """Return the PEM encoded bundle."""
        return self._cert

    @property
    def cert_filename(self) -> str:
        return f"{TLS_DIR}/{self.file_basename}.crt"

    def dependencies(self) -> list[type[Asset]]:
        return list(self.sources)

    def generate(self, parents: Parents) -> None:
        certs = []
        for source in self.sources:
            cert = parents.get(source).cert()
            certs.append(cert if cert.endswith(b"\n") else cert + b"\n")
        self._cert = b"".join(certs)

    def files(self) -> list[File]:
        if not self._cert:
            return []
        return [File(filename=self.cert_filename, data=self._cert)]

    def load(self, fetcher: FileFetcher) -> bool:
        if (file := fetcher.fetch_by_name(self.cert_filename)) is None:
            return False
        self._cert = file.data
        return True
