"""The minimal kubernetes object used for the cluster config control manifest."""

from dataclasses import dataclass, field
from typing import Optional

from mashumaro import field_options

from cluster_manifests.manifest import BaseManifest

__all__ = ["ConfigurationObject", "ObjectMeta", "config_map"]

CONFIG_MAP_KIND = "ConfigMap"
CONFIG_MAP_VERSION = "v1"


@dataclass
class ObjectMeta(BaseManifest):
    """Name and namespace of a kubernetes object."""

    name: str

    namespace: Optional[str] = None


@dataclass
class ConfigurationObject(BaseManifest):
    """A kubernetes object holding string data."""

    api_version: str = field(metadata=field_options(alias="apiVersion"))
    """The apiVersion of the object."""

    kind: str
    """The kind of the object."""

    metadata: ObjectMeta
    """The name and namespace of the object."""

    data: dict[str, str] = field(default_factory=dict)
    """The string data held by the object."""


def config_map(namespace: str, name: str, data: dict[str, str]) -> ConfigurationObject:
    """Return a ConfigMap holding the data."""
    return ConfigurationObject(
        api_version=CONFIG_MAP_VERSION,
        kind=CONFIG_MAP_KIND,
        metadata=ObjectMeta(name=name, namespace=namespace),
        data=data,
    )
