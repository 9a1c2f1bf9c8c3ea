"""Assets for the manifests installed into the cluster.

The `Manifests` asset is the top-level asset of the graph. It pulls in the
cluster config assets, the tls assets and the bootkube templates and
assembles them into the sorted contents of the `manifests/` directory.
"""

from .config_object import ConfigurationObject
from .dns import DNS
from .image_content_source_policy import ImageContentSourcePolicy
from .infrastructure import Infrastructure
from .ingress import Ingress
from .networking import Networking
from .operators import Manifests, BootkubeTemplateData, KUBE_SYS_CONFIG_PATH
from .proxy import Proxy
from .redact import redact_install_config, redacted_install_config
from .scheduler import Scheduler

__all__ = [
    "ConfigurationObject",
    "DNS",
    "ImageContentSourcePolicy",
    "Infrastructure",
    "Ingress",
    "Networking",
    "Manifests",
    "BootkubeTemplateData",
    "KUBE_SYS_CONFIG_PATH",
    "Proxy",
    "redact_install_config",
    "redacted_install_config",
    "Scheduler",
]
