"""Generation of certificate and key pairs.

The tls assets only depend on the `CertKeyGenerator` interface. The
default implementation shells out to the `openssl` command line tool.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
import logging
from pathlib import Path
import secrets
import tempfile

from cluster_manifests.command import Command
from cluster_manifests.exceptions import CommandException

__all__ = [
    "CertConfig",
    "CertKeyPair",
    "CertKeyGenerator",
    "OpenSSLCertKeyGenerator",
    "VALIDITY_TEN_YEARS",
]

_LOGGER = logging.getLogger(__name__)

VALIDITY_TEN_YEARS = 3650

_KEY_BITS = 2048


class CertGenerationException(CommandException):
    """Raised when openssl fails to produce a certificate."""


@dataclass(frozen=True)
class CertConfig:
    """The attributes of a certificate to generate."""

    common_name: str
    """The CN of the subject."""

    organizational_unit: str = "openshift"
    """The OU of the subject."""

    validity_days: int = VALIDITY_TEN_YEARS
    """How long the certificate is valid for."""

    is_ca: bool = False
    """Whether the certificate may sign other certificates."""

    ext_key_usage: str | None = None
    """The extended key usage, e.g. serverAuth or clientAuth."""

    dns_names: tuple[str, ...] = field(default_factory=tuple)
    """Subject alternative DNS names."""

    @property
    def subject(self) -> str:
        """The subject in the openssl `-subj` format."""
        return f"/OU={self.organizational_unit}/CN={self.common_name}"

    def extensions(self) -> list[str]:
        """Return the x509v3 extensions for the certificate."""
        if self.is_ca:
            exts = [
                "basicConstraints=critical,CA:TRUE",
                "keyUsage=critical,keyCertSign,cRLSign,digitalSignature,keyEncipherment",
            ]
        else:
            exts = [
                "basicConstraints=critical,CA:FALSE",
                "keyUsage=critical,digitalSignature,keyEncipherment",
            ]
        if self.ext_key_usage:
            exts.append(f"extendedKeyUsage={self.ext_key_usage}")
        if self.dns_names:
            names = ",".join(f"DNS:{name}" for name in self.dns_names)
            exts.append(f"subjectAltName={names}")
        return exts


@dataclass(frozen=True)
class CertKeyPair:
    """A PEM encoded certificate and its private key."""

    cert: bytes
    key: bytes


class CertKeyGenerator(ABC):
    """Interface for producing certificate and key pairs."""

    @abstractmethod
    def self_signed(self, config: CertConfig) -> CertKeyPair:
        """Generate a self-signed certificate and a new key."""

    @abstractmethod
    def signed(self, config: CertConfig, ca: CertKeyPair) -> CertKeyPair:
        """Generate a certificate signed by the CA and a new key."""


class OpenSSLCertKeyGenerator(CertKeyGenerator):
    """Generates certificates with the openssl command line tool."""

    def __init__(self, openssl: str = "openssl") -> None:
        """Initialize OpenSSLCertKeyGenerator."""
        self._openssl = openssl

    def _command(self, args: list[str], cwd: Path) -> Command:
        return Command([self._openssl] + args, cwd=cwd, exc=CertGenerationException)

    def self_signed(self, config: CertConfig) -> CertKeyPair:
        """Generate a self-signed certificate and a new key."""
        _LOGGER.debug("Generating self-signed certificate %s", config.subject)
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp = Path(tmp_dir)
            args = [
                "req",
                "-x509",
                "-newkey",
                f"rsa:{_KEY_BITS}",
                "-nodes",
                "-keyout",
                "tls.key",
                "-out",
                "tls.crt",
                "-days",
                str(config.validity_days),
                "-subj",
                config.subject,
            ]
            for ext in config.extensions():
                args.extend(["-addext", ext])
            self._command(args, tmp).run()
            return CertKeyPair(
                cert=(tmp / "tls.crt").read_bytes(), key=(tmp / "tls.key").read_bytes()
            )

    def signed(self, config: CertConfig, ca: CertKeyPair) -> CertKeyPair:
        """Generate a certificate signed by the CA and a new key."""
        _LOGGER.debug("Generating signed certificate %s", config.subject)
        with tempfile.TemporaryDirectory() as tmp_dir:
            tmp = Path(tmp_dir)
            (tmp / "ca.crt").write_bytes(ca.cert)
            (tmp / "ca.key").write_bytes(ca.key)
            (tmp / "ext.cnf").write_text("\n".join(config.extensions()) + "\n")
            self._command(
                [
                    "req",
                    "-new",
                    "-newkey",
                    f"rsa:{_KEY_BITS}",
                    "-nodes",
                    "-keyout",
                    "tls.key",
                    "-out",
                    "tls.csr",
                    "-subj",
                    config.subject,
                ],
                tmp,
            ).run()
            self._command(
                [
                    "x509",
                    "-req",
                    "-in",
                    "tls.csr",
                    "-CA",
                    "ca.crt",
                    "-CAkey",
                    "ca.key",
                    "-set_serial",
                    str(secrets.randbits(63)),
                    "-days",
                    str(config.validity_days),
                    "-extfile",
                    "ext.cnf",
                    "-out",
                    "tls.crt",
                ],
                tmp,
            ).run()
            return CertKeyPair(
                cert=(tmp / "tls.crt").read_bytes(), key=(tmp / "tls.key").read_bytes()
            )
