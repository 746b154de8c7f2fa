import logging
from kubernetes import client, config
from kubernetes.config.config_exception import ConfigException

from .errors import ClientConstructionError

logger = logging.getLogger(__name__)


def new_core_v1_api(kubeconfig: str | None = None, context: str | None = None) -> client.CoreV1Api:
    try:
        config.load_kube_config(config_file=kubeconfig, context=context)
    except (ConfigException, FileNotFoundError) as kube_config_error:
        if kubeconfig is not None or context is not None:
            raise ClientConstructionError(f"Could not load kubeconfig: {kube_config_error}") from kube_config_error
        logger.debug("No usable kubeconfig (%s), trying in-cluster configuration", kube_config_error)
        try:
            config.load_incluster_config()
        except ConfigException as e:
            raise ClientConstructionError(f"Could not configure kubernetes client: {e}") from e
    return client.CoreV1Api()
