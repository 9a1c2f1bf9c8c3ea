"""ImageContentSourcePolicy objects for the configured registry mirrors."""

from cluster_manifests.asset import Asset, Parents
from cluster_manifests.installconfig import InstallConfig

from .config_asset import ConfigAsset

__all__ = ["ImageContentSourcePolicy"]

POLICY_FILENAME_TEMPLATE = "image-content-source-policy-{index}.yaml"


class ImageContentSourcePolicy(ConfigAsset):
    """Generates one image-content-source-policy file per image content source."""

    name = "Image Content Source Policy"

    def dependencies(self) -> list[type[Asset]]:
        return [InstallConfig]

    def generate(self, parents: Parents) -> None:
        install_config = parents.get(InstallConfig).required_config
        for index, source in enumerate(install_config.image_content_sources):
            self.add_manifest(
                POLICY_FILENAME_TEMPLATE.format(index=index),
                {
                    "apiVersion": "operator.openshift.io/v1alpha1",
                    "kind": "ImageContentSourcePolicy",
                    "metadata": {"name": f"image-policy-{index}"},
                    "spec": {
                        "repositoryDigestMirrors": [
                            {"source": source.source, "mirrors": list(source.mirrors)}
                        ],
                    },
                },
            )
