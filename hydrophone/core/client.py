import logging
from dataclasses import dataclass, fields
from typing import Optional

import kubernetes

from hydrophone.core.errors import ClusterConnectionError, ClusterVersionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServerVersion:
    """Version information reported by the API server's /version endpoint"""

    major: str
    minor: str
    git_version: str
    git_commit: str = ""
    git_tree_state: str = ""
    build_date: str = ""
    go_version: str = ""
    compiler: str = ""
    platform: str = ""

    @classmethod
    def from_version_info(cls, info):
        return cls(**{f.name: getattr(info, f.name, None) or "" for f in fields(cls)})


class Client:
    """Client wraps the kubernetes api client used to talk to the cluster under test"""

    def __init__(self, api_client, configuration):
        self.api_client = api_client
        self.configuration = configuration

    @classmethod
    def from_kubeconfig(cls, kubeconfig: Optional[str] = None):
        """
        Loads the cluster configuration and builds a client on top of it.
        Without a kubeconfig path, in-cluster config is tried first, then the default kubeconfig location
        """
        configuration = kubernetes.client.Configuration()
        try:
            if kubeconfig:
                logger.debug("Attempting to use kubeconfig file: %s", kubeconfig)
                kubernetes.config.load_kube_config(config_file=kubeconfig, client_configuration=configuration)
            else:
                try:
                    logger.debug("Attempting to use in cluster Kubernetes config")
                    kubernetes.config.load_incluster_config(client_configuration=configuration)
                except kubernetes.config.ConfigException:
                    logger.debug("Not running in cluster, attempting to use default kubeconfig")
                    kubernetes.config.load_kube_config(client_configuration=configuration)
        except (kubernetes.config.ConfigException, OSError) as ex:
            logger.error(f"Failed to initiate Kubernetes client: {ex}")
            raise ClusterConnectionError(str(ex)) from ex

        return cls(kubernetes.client.ApiClient(configuration), configuration)

    @property
    def host(self):
        return self.configuration.host

    def server_version(self) -> ServerVersion:
        try:
            info = kubernetes.client.VersionApi(self.api_client).get_code()
        except Exception as ex:
            raise ClusterVersionError(ex) from ex
        return ServerVersion.from_version_info(info)
