"""Tests for the worker registries configuration."""

from urllib.parse import unquote

from cluster_manifests.installconfig.types import ImageContentSource
from cluster_manifests.manifests.registries import (
    data_url,
    registries_conf,
    worker_registries,
)

EXPECTED_REGISTRIES = """unqualified-search-registries = ["registry.access.redhat.com", "docker.io"]

[[registry]]
  prefix = ""
  location = "registry.local"
  mirror-by-digest-only = true

  [[registry.mirror]]
    location = "mirror1"

  [[registry.mirror]]
    location = "mirror2"
"""


def test_registries_conf_no_sources() -> None:
    """Test the configuration without any mirrors."""
    assert registries_conf([]) == (
        'unqualified-search-registries = ["registry.access.redhat.com", "docker.io"]\n'
    )


def test_registries_conf() -> None:
    """Test a registry block with a mirror block per mirror."""
    sources = [ImageContentSource(source="registry.local", mirrors=["mirror1", "mirror2"])]
    assert registries_conf(sources) == EXPECTED_REGISTRIES


def test_registries_conf_multiple_sources() -> None:
    """Test sources keep their order."""
    sources = [
        ImageContentSource(source="quay.io/b", mirrors=["m1"]),
        ImageContentSource(source="quay.io/a", mirrors=[]),
    ]
    result = registries_conf(sources)
    assert result.count("[[registry]]") == 2
    assert result.count("[[registry.mirror]]") == 1
    assert result.index('"quay.io/b"') < result.index('"quay.io/a"')


def test_data_url() -> None:
    """Test the data url is a single ascii line."""
    url = data_url(b'a = "b"\nc d\n')
    assert url == "data:text/plain,a%20=%20%22b%22%0Ac%20d%0A"
    assert url.isascii()


def test_worker_registries() -> None:
    """Test the data url decodes back to the registries configuration."""
    sources = [ImageContentSource(source="registry.local", mirrors=["mirror1", "mirror2"])]
    url = worker_registries(sources)
    assert "\n" not in url
    prefix, _, payload = url.partition(",")
    assert prefix == "data:text/plain"
    assert unquote(payload) == EXPECTED_REGISTRIES
