"""Asset holding the install config for the cluster."""

import copy
import logging

from cluster_manifests.asset import Asset, File, FileFetcher, Parents, WritableAsset
from cluster_manifests.exceptions import InputException

from . import types

__all__ = ["InstallConfig", "INSTALL_CONFIG_FILENAME"]

_LOGGER = logging.getLogger(__name__)

INSTALL_CONFIG_FILENAME = "install-config.yaml"


class InstallConfig(WritableAsset):
    """The install config supplied by the user or found in the asset directory."""

    name = "Install Config"

    def __init__(self) -> None:
        """Initialize InstallConfig."""
        self.config: types.InstallConfig | None = None
        self._file: File | None = None

    def dependencies(self) -> list[type[Asset]]:
        return []

    def generate(self, parents: Parents) -> None:
        """Take the install config from the run configuration."""
        if parents.config.install_config is None:
            raise InputException(
                f"An install config is required, none was supplied and {INSTALL_CONFIG_FILENAME} was not found"
            )
        config = copy.deepcopy(parents.config.install_config)
        config.validate()
        self._set(config)

    def files(self) -> list[File]:
        if self._file is None:
            return []
        return [self._file]

    def load(self, fetcher: FileFetcher) -> bool:
        """Load the install config from the asset directory."""
        if (file := fetcher.fetch_by_name(INSTALL_CONFIG_FILENAME)) is None:
            return False
        config = types.InstallConfig.parse_yaml(file.data)
        config.validate()
        _LOGGER.info("Using %s from the asset directory", INSTALL_CONFIG_FILENAME)
        self._set(config)
        return True

    def _set(self, config: types.InstallConfig) -> None:
        self.config = config
        self._file = File(filename=INSTALL_CONFIG_FILENAME, data=config.yaml())

    @property
    def required_config(self) -> types.InstallConfig:
        """The install config, which must have been generated or loaded."""
        if self.config is None:
            raise InputException("Install config has not been resolved")
        return self.config
