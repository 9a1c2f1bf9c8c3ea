"""Assets for the manifest templates that bootstrap the control plane."""

from .aro import ARODNSConfig, AROImageRegistryConfig
from .base import TemplateAsset, TEMPLATE_SUFFIX
from .templates import (
    BOOTKUBE_TEMPLATES,
    CVOOverrides,
    EtcdCAConfigMap,
    EtcdClientSecret,
    EtcdMetricClientSecret,
    EtcdMetricServingCAConfigMap,
    EtcdMetricSignerSecret,
    EtcdNamespace,
    EtcdService,
    EtcdServingCAConfigMap,
    EtcdSignerSecret,
    ImageRegistry,
    IngressService,
    KubeCloudConfig,
    KubeSystemConfigmapRootCA,
    KubevirtInfraNamespace,
    MachineConfigServerTLSSecret,
    OpenshiftConfigSecretPullSecret,
    OpenshiftMachineConfigOperator,
    WorkerRegistries,
)

__all__ = [
    "ARODNSConfig",
    "AROImageRegistryConfig",
    "TemplateAsset",
    "TEMPLATE_SUFFIX",
    "BOOTKUBE_TEMPLATES",
    "CVOOverrides",
    "EtcdCAConfigMap",
    "EtcdClientSecret",
    "EtcdMetricClientSecret",
    "EtcdMetricServingCAConfigMap",
    "EtcdMetricSignerSecret",
    "EtcdNamespace",
    "EtcdService",
    "EtcdServingCAConfigMap",
    "EtcdSignerSecret",
    "ImageRegistry",
    "IngressService",
    "KubeCloudConfig",
    "KubeSystemConfigmapRootCA",
    "KubevirtInfraNamespace",
    "MachineConfigServerTLSSecret",
    "OpenshiftConfigSecretPullSecret",
    "OpenshiftMachineConfigOperator",
    "WorkerRegistries",
]
