"""Tests for the cluster config assets."""

from typing import Any

import pytest
import yaml

from cluster_manifests.asset import resolve
from cluster_manifests.config import AssetsConfig
from cluster_manifests.installconfig import ClusterID
from cluster_manifests.installconfig.types import (
    AzurePlatform,
    ClusterNetworkEntry,
    MachinePool,
    Platform,
    Proxy as ProxySettings,
    PublishingStrategy,
)
from cluster_manifests.manifests import (
    DNS,
    ImageContentSourcePolicy,
    Infrastructure,
    Ingress,
    Networking,
    Proxy,
    Scheduler,
)
from cluster_manifests.manifests.config_asset import ConfigAsset


def _generate(config: AssetsConfig, cls: type[ConfigAsset]) -> dict[str, Any]:
    asset = resolve([cls], config)[cls]
    assert isinstance(asset, ConfigAsset)
    return {f.filename: yaml.safe_load(f.data) for f in asset.files()}


def test_dns(assets_config: AssetsConfig) -> None:
    """Test the DNS config uses the cluster domain."""
    docs = _generate(assets_config, DNS)
    assert docs == {
        "manifests/cluster-dns-02-config.yml": {
            "apiVersion": "config.openshift.io/v1",
            "kind": "DNS",
            "metadata": {"name": "cluster"},
            "spec": {"baseDomain": "test-cluster.example.com"},
        }
    }


def test_ingress_external(assets_config: AssetsConfig) -> None:
    """Test an external cluster only gets the ingress config."""
    assert assets_config.install_config is not None
    assets_config.install_config.publish = PublishingStrategy.EXTERNAL
    docs = _generate(assets_config, Ingress)
    assert list(docs) == ["manifests/cluster-ingress-02-config.yml"]
    assert docs["manifests/cluster-ingress-02-config.yml"]["spec"] == {
        "domain": "apps.test-cluster.example.com"
    }


def test_ingress_internal(assets_config: AssetsConfig) -> None:
    """Test an internal cluster gets an internal default ingress controller."""
    docs = _generate(assets_config, Ingress)
    assert list(docs) == [
        "manifests/cluster-ingress-02-config.yml",
        "manifests/cluster-ingress-default-ingresscontroller.yaml",
    ]


def test_infrastructure(assets_config: AssetsConfig) -> None:
    """Test the infrastructure config for a cluster without a platform."""
    asset = resolve([Infrastructure], assets_config)
    cluster_id = asset[ClusterID]
    assert isinstance(cluster_id, ClusterID)
    infra = asset[Infrastructure]
    assert isinstance(infra, Infrastructure)
    doc = yaml.safe_load(infra.files()[0].data)
    assert doc["status"] == {
        "apiServerURL": "https://api.test-cluster.example.com:6443",
        "apiServerInternalURI": "https://api-int.test-cluster.example.com:6443",
        "etcdDiscoveryDomain": "test-cluster.example.com",
        "infrastructureName": cluster_id.infra_id,
        "platform": "None",
        "platformStatus": {"type": "None"},
    }


def test_infrastructure_azure(assets_config: AssetsConfig) -> None:
    """Test the Azure platform status."""
    assert assets_config.install_config is not None
    assets_config.install_config.platform = Platform(
        azure=AzurePlatform(region="eastus", resource_group_name="rg1")
    )
    docs = _generate(assets_config, Infrastructure)
    status = docs["manifests/cluster-infrastructure-02-config.yml"]["status"]
    assert status["platform"] == "Azure"
    assert status["platformStatus"] == {
        "type": "Azure",
        "azure": {"cloudName": "AzurePublicCloud", "resourceGroupName": "rg1"},
    }


def test_networking(assets_config: AssetsConfig) -> None:
    """Test the network config."""
    assert assets_config.install_config is not None
    networking = assets_config.install_config.networking
    networking.cluster_network = [ClusterNetworkEntry(cidr="10.128.0.0/14", host_prefix=23)]
    networking.service_network = ["172.30.0.0/16"]
    docs = _generate(assets_config, Networking)
    assert docs["manifests/cluster-network-02-config.yml"]["spec"] == {
        "clusterNetwork": [{"cidr": "10.128.0.0/14", "hostPrefix": 23}],
        "serviceNetwork": ["172.30.0.0/16"],
        "networkType": "OVNKubernetes",
    }


def test_proxy_unset(assets_config: AssetsConfig) -> None:
    """Test the proxy config without a proxy."""
    docs = _generate(assets_config, Proxy)
    doc = docs["manifests/cluster-proxy-01-config.yaml"]
    assert doc["spec"] == {}
    assert doc["status"] == {}


def test_proxy(assets_config: AssetsConfig) -> None:
    """Test the proxy config computes the hosts bypassing the proxy."""
    assert assets_config.install_config is not None
    assets_config.install_config.proxy = ProxySettings(
        http_proxy="http://proxy:3128", no_proxy="example.org, .internal"
    )
    assets_config.install_config.networking.service_network = ["172.30.0.0/16"]
    docs = _generate(assets_config, Proxy)
    doc = docs["manifests/cluster-proxy-01-config.yaml"]
    assert doc["spec"] == {
        "httpProxy": "http://proxy:3128",
        "noProxy": "example.org, .internal",
    }
    no_proxy = doc["status"]["noProxy"].split(",")
    assert no_proxy == sorted(no_proxy)
    assert "api-int.test-cluster.example.com" in no_proxy
    assert "172.30.0.0/16" in no_proxy
    assert ".internal" in no_proxy


@pytest.mark.parametrize(
    ("replicas", "schedulable"),
    [
        ([3], False),
        ([0], True),
        ([0, 1], False),
        ([], True),
    ],
)
def test_scheduler(
    assets_config: AssetsConfig, replicas: list[int], schedulable: bool
) -> None:
    """Test control plane machines are schedulable without compute machines."""
    assert assets_config.install_config is not None
    assets_config.install_config.compute = [
        MachinePool(name=f"pool{i}", replicas=count) for i, count in enumerate(replicas)
    ]
    docs = _generate(assets_config, Scheduler)
    spec = docs["manifests/cluster-scheduler-02-config.yml"]["spec"]
    assert spec["mastersSchedulable"] is schedulable


def test_image_content_source_policy(assets_config: AssetsConfig) -> None:
    """Test a policy per image content source."""
    docs = _generate(assets_config, ImageContentSourcePolicy)
    assert docs == {
        "manifests/image-content-source-policy-0.yaml": {
            "apiVersion": "operator.openshift.io/v1alpha1",
            "kind": "ImageContentSourcePolicy",
            "metadata": {"name": "image-policy-0"},
            "spec": {
                "repositoryDigestMirrors": [
                    {"source": "registry.local", "mirrors": ["mirror1", "mirror2"]}
                ]
            },
        }
    }
