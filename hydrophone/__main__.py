#!/usr/bin/env python3

import logging
import sys

from hydrophone.conf.logging import DEFAULT_LEVEL_NAME, setup_logger
from hydrophone.conf.parser import init_args
from hydrophone.core.client import Client
from hydrophone.core.errors import ConfigError, HydrophoneError
from hydrophone.core.validate import validate_args
from hydrophone.plugins import initialize_plugin_manager

logger = logging.getLogger(__name__)


def main(argv=None):
    pm = initialize_plugin_manager()
    try:
        # Using a plugin hook for adding arguments before parsing
        config = init_args(argv, add_args_hook=pm.hook.parser_add_arguments)
    except ConfigError as ex:
        setup_logger(DEFAULT_LEVEL_NAME, None)
        logger.error(ex)
        return 1

    setup_logger(config.log_level, config.log_file)
    # Running all other registered plugins before execution
    pm.hook.load_plugin(config=config)

    try:
        client = Client.from_kubeconfig(config.kubeconfig)
        validate_args(client, client.configuration, config)
    except HydrophoneError:
        # logged where raised
        return 1

    logger.debug(f"Test environment: {config.test_environment()}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
