"""Asset holding the unique identifiers of the cluster."""

import json
import logging
import re
import secrets
import uuid

from cluster_manifests.asset import Asset, File, FileFetcher, Parents, WritableAsset
from cluster_manifests.exceptions import InputException

from .install_config import InstallConfig

__all__ = ["ClusterID", "generate_infra_id"]

_LOGGER = logging.getLogger(__name__)

CLUSTER_ID_FILENAME = ".cluster-id.json"

# Leaves room for suffixes added to the infra id by cloud resources
_INFRA_ID_MAX_LEN = 27
_RANDOM_LEN = 5
_RANDOM_ALPHABET = "bcdfghjklmnpqrstvwxz2456789"
_NON_ALNUM = re.compile(r"[^a-z0-9-]+")


def generate_infra_id(cluster_name: str, max_len: int = _INFRA_ID_MAX_LEN) -> str:
    """Return a short id from the cluster name with a random suffix."""
    base = _NON_ALNUM.sub("-", cluster_name.lower())
    base = base[: max_len - _RANDOM_LEN - 1].rstrip("-")
    suffix = "".join(secrets.choice(_RANDOM_ALPHABET) for _ in range(_RANDOM_LEN))
    return f"{base}-{suffix}"


class ClusterID(WritableAsset):
    """The cluster UUID and the infrastructure id used to tag resources."""

    name = "Cluster ID"

    def __init__(self) -> None:
        """Initialize ClusterID."""
        self.uuid: str = ""
        self.infra_id: str = ""

    def dependencies(self) -> list[type[Asset]]:
        return [InstallConfig]

    def generate(self, parents: Parents) -> None:
        install_config = parents.get(InstallConfig).required_config
        self.uuid = str(uuid.uuid4())
        self.infra_id = generate_infra_id(install_config.metadata.name)
        _LOGGER.debug("Generated cluster id %s (%s)", self.uuid, self.infra_id)

    def files(self) -> list[File]:
        if not self.uuid:
            return []
        content = json.dumps({"infraID": self.infra_id, "uuid": self.uuid}, sort_keys=True)
        return [File(filename=CLUSTER_ID_FILENAME, data=content.encode())]

    def load(self, fetcher: FileFetcher) -> bool:
        if (file := fetcher.fetch_by_name(CLUSTER_ID_FILENAME)) is None:
            return False
        try:
            doc = json.loads(file.data)
            self.uuid = doc["uuid"]
            self.infra_id = doc["infraID"]
        except (ValueError, KeyError, TypeError) as err:
            raise InputException(f"Invalid {CLUSTER_ID_FILENAME}: {err}") from err
        return True
