"""The container registries configuration for worker machines."""

from collections.abc import Iterable
from urllib.parse import quote

from cluster_manifests.installconfig.types import ImageContentSource

__all__ = ["worker_registries", "registries_conf", "data_url"]

DEFAULT_SEARCH_REGISTRIES = ["registry.access.redhat.com", "docker.io"]

# RFC 2396 unreserved and reserved characters are left as is
_SAFE_CHARS = "-_.~$&+,/:;=?@"


def data_url(data: bytes, media_type: str = "text/plain") -> str:
    """Return the data as a single line RFC 2397 data URL with ASCII encoding."""
    return f"data:{media_type},{quote(data, safe=_SAFE_CHARS)}"


def registries_conf(sources: Iterable[ImageContentSource]) -> str:
    """Return a registries.conf with a mirror block per image content source."""
    search = ", ".join(f'"{registry}"' for registry in DEFAULT_SEARCH_REGISTRIES)
    lines = [f"unqualified-search-registries = [{search}]\n"]
    for source in sources:
        lines.append(
            f'\n[[registry]]\n  prefix = ""\n  location = "{source.source}"\n'
            "  mirror-by-digest-only = true\n"
        )
        for mirror in source.mirrors:
            lines.append(f'\n  [[registry.mirror]]\n    location = "{mirror}"\n')
    return "".join(lines)


def worker_registries(sources: Iterable[ImageContentSource]) -> str:
    """Return the registries.conf for the image content sources as a data URL."""
    return data_url(registries_conf(sources).encode("utf-8"))
