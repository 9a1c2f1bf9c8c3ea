"""Removal of secrets from the install config before it is persisted."""

import copy

from cluster_manifests.exceptions import SerializationError
from cluster_manifests.installconfig.types import InstallConfig

__all__ = ["redact_install_config", "redacted_install_config"]


def redact_install_config(config: InstallConfig) -> InstallConfig:
    """Return a copy of the install config with all secrets cleared.

    The pull secret is always cleared, as are the vSphere credentials when
    the vSphere platform is configured. The caller's config is unchanged.
    """
    redacted = copy.deepcopy(config)
    redacted.pull_secret = ""
    if (vsphere := redacted.platform.vsphere) is not None:
        vsphere.username = ""
        vsphere.password = ""
    return redacted


def redacted_install_config(config: InstallConfig) -> bytes:
    """Return the redacted install config serialized as YAML with sorted keys."""
    try:
        return redact_install_config(config).yaml()
    except (SerializationError, TypeError, ValueError) as err:
        raise SerializationError(f"failed to redact install-config: {err}") from err
