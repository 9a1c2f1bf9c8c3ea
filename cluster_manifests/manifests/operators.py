"""The manifests installed into the cluster by the bootstrap process.

The `Manifests` asset assembles the final `manifests/` directory:

- A `kube-system/cluster-config-v1` ConfigMap holding the redacted install
  config. This control manifest is also the marker that a previous run
  completed when loading from disk.
- Every bundled bootkube template, rendered with a single shared
  `BootkubeTemplateData`.
- The manifests of the cluster config assets, copied unchanged.

The resulting file list is sorted by filename.
"""

import base64
from dataclasses import dataclass
import logging
import posixpath

from cluster_manifests.asset import (
    Asset,
    File,
    FileFetcher,
    Parents,
    WritableAsset,
    sort_files,
)
from cluster_manifests.bootkube import (
    BOOTKUBE_TEMPLATES,
    TEMPLATE_SUFFIX,
    ARODNSConfig,
    AROImageRegistryConfig,
)
from cluster_manifests.exceptions import SerializationError
from cluster_manifests.installconfig import ClusterID, InstallConfig
from cluster_manifests.installconfig.types import PublishingStrategy
from cluster_manifests.tls import (
    EtcdCABundle,
    EtcdMetricCABundle,
    EtcdMetricSignerCertKey,
    EtcdMetricSignerClientCertKey,
    EtcdSignerCertKey,
    EtcdSignerClientCertKey,
    MCSCertKey,
    RootCA,
)

from .config_asset import ConfigAsset, MANIFEST_DIR
from .config_object import ConfigurationObject, config_map
from .dns import DNS
from .image_content_source_policy import ImageContentSourcePolicy
from .infrastructure import Infrastructure
from .ingress import Ingress
from .networking import Networking
from .proxy import Proxy
from .redact import redacted_install_config
from .registries import worker_registries
from .scheduler import Scheduler
from .template import render

__all__ = [
    "Manifests",
    "BootkubeTemplateData",
    "KUBE_SYS_CONFIG_PATH",
]

_LOGGER = logging.getLogger(__name__)

KUBE_SYS_CONFIG_PATH = f"{MANIFEST_DIR}/cluster-config.yaml"
KUBE_SYS_CONFIG_NAMESPACE = "kube-system"
KUBE_SYS_CONFIG_NAME = "cluster-config-v1"
INSTALL_CONFIG_KEY = "install-config"

MANIFEST_PATTERNS = ["*.yaml", "*.yml", "*.json"]

CONFIG_ASSETS: list[type[ConfigAsset]] = [
    Ingress,
    DNS,
    Networking,
    Infrastructure,
    Proxy,
    Scheduler,
    ImageContentSourcePolicy,
]


@dataclass(frozen=True)
class BootkubeTemplateData:
    """The data used to render all bootkube templates."""

    cvo_cluster_id: str
    etcd_ca_bundle: str
    etcd_metric_ca_cert: str
    etcd_metric_signer_cert: str
    etcd_metric_signer_client_cert: str
    etcd_metric_signer_client_key: str
    etcd_metric_signer_key: str
    etcd_signer_cert: str
    etcd_signer_client_cert: str
    etcd_signer_client_key: str
    etcd_signer_key: str
    mcs_tls_cert: str
    mcs_tls_key: str
    pull_secret_base64: str
    root_ca_cert: str
    worker_registries: str
    ingress_ip: str
    ingress_internal: bool
    image_registry_http_secret: str
    image_registry_account_name: str
    image_registry_container_name: str
    cloud_name: str


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def template_data(parents: Parents) -> BootkubeTemplateData:
    """Build the template data from the resolved dependencies."""
    install_config = parents.get(InstallConfig).required_config
    etcd_signer = parents.get(EtcdSignerCertKey)
    etcd_signer_client = parents.get(EtcdSignerClientCertKey)
    etcd_metric_signer = parents.get(EtcdMetricSignerCertKey)
    etcd_metric_signer_client = parents.get(EtcdMetricSignerClientCertKey)
    mcs = parents.get(MCSCertKey)
    dns_config = parents.get(ARODNSConfig)
    registry_config = parents.get(AROImageRegistryConfig)
    azure = install_config.platform.azure
    return BootkubeTemplateData(
        cvo_cluster_id=parents.get(ClusterID).uuid,
        etcd_ca_bundle=parents.get(EtcdCABundle).cert().decode(),
        etcd_metric_ca_cert=parents.get(EtcdMetricCABundle).cert().decode(),
        etcd_metric_signer_cert=_b64(etcd_metric_signer.cert()),
        etcd_metric_signer_client_cert=_b64(etcd_metric_signer_client.cert()),
        etcd_metric_signer_client_key=_b64(etcd_metric_signer_client.key()),
        etcd_metric_signer_key=_b64(etcd_metric_signer.key()),
        etcd_signer_cert=_b64(etcd_signer.cert()),
        etcd_signer_client_cert=_b64(etcd_signer_client.cert()),
        etcd_signer_client_key=_b64(etcd_signer_client.key()),
        etcd_signer_key=_b64(etcd_signer.key()),
        mcs_tls_cert=_b64(mcs.cert()),
        mcs_tls_key=_b64(mcs.key()),
        pull_secret_base64=_b64(install_config.pull_secret.encode()),
        root_ca_cert=parents.get(RootCA).cert().decode(),
        worker_registries=worker_registries(install_config.image_content_sources),
        ingress_ip=dns_config.ingress_ip,
        ingress_internal=install_config.publish == PublishingStrategy.INTERNAL,
        image_registry_http_secret=registry_config.http_secret,
        image_registry_account_name=registry_config.account_name,
        image_registry_container_name=registry_config.container_name,
        cloud_name=azure.cloud_name if azure is not None else "",
    )


def rendered_filename(filename: str) -> str:
    """Return the manifest path for a template file."""
    basename = posixpath.basename(filename)
    if basename.endswith(TEMPLATE_SUFFIX):
        basename = basename[: -len(TEMPLATE_SUFFIX)]
    return f"{MANIFEST_DIR}/{basename}"


class Manifests(WritableAsset):
    """Generates the manifests for all operators installed in the cluster."""

    name = "Common Manifests"

    def __init__(self) -> None:
        """Initialize Manifests."""
        self.kube_sys_config: ConfigurationObject | None = None
        self.file_list: list[File] = []

    def dependencies(self) -> list[type[Asset]]:
        return [
            ClusterID,
            InstallConfig,
            *CONFIG_ASSETS,
            RootCA,
            EtcdSignerCertKey,
            EtcdCABundle,
            EtcdSignerClientCertKey,
            EtcdMetricCABundle,
            EtcdMetricSignerCertKey,
            EtcdMetricSignerClientCertKey,
            MCSCertKey,
            ARODNSConfig,
            AROImageRegistryConfig,
            *BOOTKUBE_TEMPLATES,
        ]

    def generate(self, parents: Parents) -> None:
        """Generate the control manifest and render all manifests."""
        install_config = parents.get(InstallConfig).required_config
        redacted = redacted_install_config(install_config)
        kube_sys_config = config_map(
            KUBE_SYS_CONFIG_NAMESPACE,
            KUBE_SYS_CONFIG_NAME,
            {INSTALL_CONFIG_KEY: redacted.decode("utf-8")},
        )
        try:
            kube_sys_config_data = kube_sys_config.yaml()
        except SerializationError as err:
            raise SerializationError(
                f"failed to create {KUBE_SYS_CONFIG_NAMESPACE}/{KUBE_SYS_CONFIG_NAME} configmap: {err}"
            ) from err

        files = [File(filename=KUBE_SYS_CONFIG_PATH, data=kube_sys_config_data)]
        files.extend(self._bootkube_manifests(parents))
        for cls in CONFIG_ASSETS:
            files.extend(parents.get(cls).files())

        seen: set[str] = set()
        for file in files:
            if file.filename in seen:
                raise SerializationError(f"Duplicate manifest {file.filename}")
            seen.add(file.filename)

        self.kube_sys_config = kube_sys_config
        self.file_list = sort_files(files)
        _LOGGER.info("Generated %d manifests", len(self.file_list))

    def _bootkube_manifests(self, parents: Parents) -> list[File]:
        data = template_data(parents)
        files = []
        for cls in BOOTKUBE_TEMPLATES:
            for template in parents.get(cls).files():
                files.append(
                    File(
                        filename=rendered_filename(template.filename),
                        data=render(template.data, data, name=template.filename),
                    )
                )
        return files

    def files(self) -> list[File]:
        return list(self.file_list)

    def load(self, fetcher: FileFetcher) -> bool:
        """Load the manifests from a previous run.

        Returns False if there are no manifests on disk or the control
        manifest is not among them.
        """
        file_list: list[File] = []
        for pattern in MANIFEST_PATTERNS:
            file_list.extend(fetcher.fetch_by_pattern(f"{MANIFEST_DIR}/{pattern}"))
        if not file_list:
            return False

        kube_sys_config: ConfigurationObject | None = None
        for file in file_list:
            if file.filename == KUBE_SYS_CONFIG_PATH:
                try:
                    kube_sys_config = ConfigurationObject.parse_yaml(file.data)
                except SerializationError as err:
                    raise SerializationError(
                        f"failed to unmarshal {KUBE_SYS_CONFIG_PATH}: {err}"
                    ) from err
        if kube_sys_config is None:
            _LOGGER.info(
                "Found %d manifests without %s, ignoring",
                len(file_list),
                KUBE_SYS_CONFIG_PATH,
            )
            return False

        self.kube_sys_config = kube_sys_config
        self.file_list = sort_files(file_list)
        return True
