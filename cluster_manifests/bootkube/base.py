"""Base class for assets backed by a bundled manifest template."""

from importlib import resources
from pathlib import Path
from typing import ClassVar

from cluster_manifests.asset import Asset, File, FileFetcher, Parents, WritableAsset
from cluster_manifests.exceptions import InputException, TemplateFault

__all__ = ["TemplateAsset", "TEMPLATE_SUFFIX"]

TEMPLATE_SUFFIX = ".template"
BOOTKUBE_TEMPLATE_DIR = "bootkube"
MANIFEST_DIR = "manifests"


def read_template(filename: str, template_dir: Path | None = None) -> bytes:
    """Return the raw contents of a bootkube template.

    Templates are read from the package unless a template directory is given.
    """
    if template_dir is not None:
        path = Path(template_dir) / filename
        try:
            return path.read_bytes()
        except OSError as err:
            raise InputException(f"Unable to read template {path}: {err}") from err
    resource = resources.files("cluster_manifests") / "templates" / BOOTKUBE_TEMPLATE_DIR / filename
    try:
        return resource.read_bytes()
    except OSError as err:
        raise TemplateFault(f"Bundled template {filename} is missing: {err}") from err


class TemplateAsset(WritableAsset):
    """An unrendered manifest template.

    The file of the asset holds the raw template; the `Manifests` asset
    renders it with the shared template data.
    """

    template_filename: ClassVar[str]
    """The name of the template file, ending in `.template`."""

    def __init__(self) -> None:
        """Initialize TemplateAsset."""
        self._file: File | None = None

    def dependencies(self) -> list[type[Asset]]:
        return []

    def generate(self, parents: Parents) -> None:
        data = read_template(self.template_filename, parents.config.template_dir)
        self._file = File(filename=f"{MANIFEST_DIR}/{self.template_filename}", data=data)

    def files(self) -> list[File]:
        if self._file is None:
            return []
        return [self._file]

    def load(self, fetcher: FileFetcher) -> bool:
        return False
