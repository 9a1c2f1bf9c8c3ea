"""Typed objects that are serialized as YAML documents.

Objects use mashumaro for conversion to and from plain dictionaries and
PyYAML for the text representation. Keys are always emitted in sorted
order so that output is stable across runs.
"""

from dataclasses import dataclass
from typing import Any, TypeVar

from mashumaro import DataClassDictMixin
from mashumaro.config import BaseConfig
import yaml

from .exceptions import SerializationError

__all__ = [
    "BaseManifest",
    "dump_yaml",
    "load_yaml",
]

T = TypeVar("T", bound="BaseManifest")


class _ManifestDumper(yaml.SafeDumper):
    """Dumper that writes multi-line strings as literal blocks."""


def _str_presenter(dumper: yaml.SafeDumper, data: str) -> yaml.ScalarNode:
    """Represent multi-line yaml strings as you'd expect.

    See https://github.com/yaml/pyyaml/issues/240
    """
    return dumper.represent_scalar(
        "tag:yaml.org,2002:str", data, style="|" if data.count("\n") > 0 else None
    )


_ManifestDumper.add_representer(str, _str_presenter)


def dump_yaml(doc: Any) -> bytes:
    """Serialize a document with sorted keys."""
    try:
        content = yaml.dump(
            doc, Dumper=_ManifestDumper, sort_keys=True, default_flow_style=False
        )
    except yaml.YAMLError as err:
        raise SerializationError(f"Unable to serialize document: {err}") from err
    return content.encode("utf-8")


def load_yaml(content: bytes | str) -> Any:
    """Parse a single YAML document."""
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as err:
        raise SerializationError(f"Invalid YAML: {err}") from err


@dataclass
class BaseManifest(DataClassDictMixin):
    """Base class for all serialized objects."""

    @classmethod
    def parse_yaml(cls: type[T], content: bytes | str) -> T:
        """Parse a serialized object."""
        doc = load_yaml(content)
        if not isinstance(doc, dict):
            raise SerializationError(f"Expected a mapping for {cls.__name__}: {doc!r}")
        try:
            return cls.from_dict(doc)
        except (ValueError, TypeError, LookupError) as err:
            raise SerializationError(f"Invalid {cls.__name__}: {err}") from err

    def yaml(self) -> bytes:
        """Return a YAML representation of the object."""
        return dump_yaml(self.to_dict())

    class Config(BaseConfig):
        omit_none = True
        serialize_by_alias = True
