"""Console entry point."""

import sys
import os

from client.cluster import DFSCluster
from cli.config import Config
from cli.repl import repl_loop
from common.logging_config import setup_logging


def main() -> None:
    """Entry point for the TinyDFS console."""
    log_level = 'DEBUG' if '--debug' in sys.argv else os.getenv('LOG_LEVEL', 'INFO')

    logger = setup_logging('cli', log_level=log_level)

    if '--debug' in sys.argv:
        logger.info("Debug logging enabled")
        sys.argv.remove('--debug')

    cluster = DFSCluster.from_config(Config())
    try:
        cluster.initialize()
        repl_loop(cluster)
    except Exception as e:
        logger.error(f"Console error: {e}", exc_info=True)
        raise
    finally:
        logger.info("Console exiting")


if __name__ == "__main__":
    main()
