"""Configuration objects for cluster-manifests."""

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .installconfig.types import InstallConfig
    from .tls.generator import CertKeyGenerator


@dataclass
class AssetsConfig:
    """Configuration for a single Generate or Load run.

    Attributes:
        directory: The asset directory that files are written to and loaded from.
        install_config: An install config supplied by the caller. When unset the
            install config must already exist in the asset directory.
        template_dir: Overrides the directory of bundled manifest templates.
        cert_generator: Produces certificate and key pairs for the tls assets.
    """

    directory: Path = Path(".")
    install_config: "InstallConfig | None" = None
    template_dir: Path | None = None
    cert_generator: "CertKeyGenerator | None" = None
