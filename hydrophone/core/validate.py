import logging
import os

from hydrophone.core.errors import ClusterVersionError, OutputDirectoryError

logger = logging.getLogger(__name__)


def validate_args(client, kube_config, cfg):
    """
    Checks the cluster is reachable, prints the run banner and makes sure the output directory exists

    @param client: cluster client able to report the server version
    @param kube_config: connection configuration exposing the API host
    @param cfg: loaded Config
    @raise ClusterVersionError: the server version could not be fetched
    @raise OutputDirectoryError: the output directory could not be created
    """
    try:
        server_version = client.server_version()
    except ClusterVersionError as ex:
        logger.error(f"Error fetching server version: {ex}")
        raise

    logger.info(f"API endpoint : {kube_config.host}")
    logger.info(f"Server version : {server_version!r}")
    logger.info(f"Running tests : '{cfg.focus}'")
    if cfg.skip:
        logger.info(f"Skipping tests : '{cfg.skip}'")
    logger.info(f"Using conformance image : '{cfg.conformance_image}'")
    logger.info(f"Using busybox image : '{cfg.busybox_image}'")
    logger.info(f"Test framework will start '{cfg.parallel}' threads and use verbosity '{cfg.verbosity}'")

    ensure_output_dir(cfg.output_dir)


def ensure_output_dir(path):
    if os.path.isdir(path):
        return
    try:
        os.makedirs(path, 0o755, exist_ok=True)
    except OSError as ex:
        logger.error(f"Error creating output directory [{path}] : {ex}")
        raise OutputDirectoryError(path, ex) from ex
