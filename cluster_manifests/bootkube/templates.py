"""The bundled bootkube manifest templates."""

from .base import TemplateAsset

__all__ = [
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
    "KubeCloudConfig",
    "KubeSystemConfigmapRootCA",
    "MachineConfigServerTLSSecret",
    "OpenshiftConfigSecretPullSecret",
    "OpenshiftMachineConfigOperator",
    "KubevirtInfraNamespace",
    "WorkerRegistries",
    "IngressService",
    "ImageRegistry",
    "BOOTKUBE_TEMPLATES",
]


class CVOOverrides(TemplateAsset):
    """The ClusterVersion object carrying the cluster id."""

    name = "CVOOverrides"
    template_filename = "cvo-overrides.yaml.template"


class EtcdCAConfigMap(TemplateAsset):
    name = "EtcdCAConfigMap"
    template_filename = "etcd-ca-bundle-configmap.yaml.template"


class EtcdClientSecret(TemplateAsset):
    name = "EtcdClientSecret"
    template_filename = "etcd-client-secret.yaml.template"


class EtcdMetricClientSecret(TemplateAsset):
    name = "EtcdMetricClientSecret"
    template_filename = "etcd-metric-client-secret.yaml.template"


class EtcdMetricServingCAConfigMap(TemplateAsset):
    name = "EtcdMetricServingCAConfigMap"
    template_filename = "etcd-metric-serving-ca-configmap.yaml.template"


class EtcdMetricSignerSecret(TemplateAsset):
    name = "EtcdMetricSignerSecret"
    template_filename = "etcd-metric-signer-secret.yaml.template"


class EtcdNamespace(TemplateAsset):
    name = "EtcdNamespace"
    template_filename = "00_etcd-namespace.yaml.template"


class EtcdService(TemplateAsset):
    name = "EtcdService"
    template_filename = "etcd-service.yaml.template"


class EtcdServingCAConfigMap(TemplateAsset):
    name = "EtcdServingCAConfigMap"
    template_filename = "etcd-serving-ca-configmap.yaml.template"


class EtcdSignerSecret(TemplateAsset):
    name = "EtcdSignerSecret"
    template_filename = "etcd-signer-secret.yaml.template"


class KubeCloudConfig(TemplateAsset):
    name = "KubeCloudConfig"
    template_filename = "kube-cloud-config.yaml.template"


class KubeSystemConfigmapRootCA(TemplateAsset):
    name = "KubeSystemConfigmapRootCA"
    template_filename = "kube-system-configmap-root-ca.yaml.template"


class MachineConfigServerTLSSecret(TemplateAsset):
    name = "MachineConfigServerTLSSecret"
    template_filename = "machine-config-server-tls-secret.yaml.template"


class OpenshiftConfigSecretPullSecret(TemplateAsset):
    """The pull secret copied into the cluster."""

    name = "OpenshiftConfigSecretPullSecret"
    template_filename = "openshift-config-secret-pull-secret.yaml.template"


class OpenshiftMachineConfigOperator(TemplateAsset):
    name = "OpenshiftMachineConfigOperator"
    template_filename = "openshift-machineconfig-operator.yaml.template"


class KubevirtInfraNamespace(TemplateAsset):
    name = "KubevirtInfraNamespace"
    template_filename = "kubevirt-infra-namespace.yaml.template"


class WorkerRegistries(TemplateAsset):
    """MachineConfig writing registries.conf with the configured mirrors."""

    name = "WorkerRegistries"
    template_filename = "99_worker-registries.yaml.template"


class IngressService(TemplateAsset):
    """The load balancer service for the default router."""

    name = "IngressService"
    template_filename = "ingress-service.yaml.template"


class ImageRegistry(TemplateAsset):
    """The image registry operator config backed by Azure blob storage."""

    name = "ImageRegistry"
    template_filename = "image-registry.yaml.template"


BOOTKUBE_TEMPLATES: list[type[TemplateAsset]] = [
    CVOOverrides,
    EtcdCAConfigMap,
    EtcdClientSecret,
    EtcdMetricClientSecret,
    EtcdMetricSignerSecret,
    EtcdMetricServingCAConfigMap,
    EtcdNamespace,
    EtcdService,
    EtcdServingCAConfigMap,
    EtcdSignerSecret,
    KubeCloudConfig,
    KubeSystemConfigmapRootCA,
    MachineConfigServerTLSSecret,
    OpenshiftConfigSecretPullSecret,
    OpenshiftMachineConfigOperator,
    KubevirtInfraNamespace,
    WorkerRegistries,
    IngressService,
    ImageRegistry,
]
