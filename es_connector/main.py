"""Elasticsearch connector - Main entry point."""

import logging
import sys

from es_connector.config import get_runtime_config
from es_connector.errors import ConfigurationError
from es_connector.interfaces.cli.commands import cli
from es_connector.startup import startup_checks

logger = logging.getLogger(__name__)

# Commands that run without a connector configuration
UNCHECKED_ARGS = frozenset({"keys", "--help", "-h", "--version"})


def configure_logging() -> None:
    """Configure logging from the runtime configuration."""
    logging.basicConfig(
        level=get_runtime_config().effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def needs_startup_checks(args: list[str]) -> bool:
    """Whether the configured catalog must be valid before running ``args``.

    Commands given an explicit ``--config`` file validate that file themselves.
    """
    if not args or UNCHECKED_ARGS.intersection(args):
        return False
    return not any(
        arg in ("-c", "--config") or arg.startswith("--config=") for arg in args
    )


def main():
    """Main entry point."""
    configure_logging()

    if needs_startup_checks(sys.argv[1:]):
        try:
            startup_checks()
        except ConfigurationError as e:
            logger.error(f"Startup checks failed: {e}")
            sys.exit(1)

    cli()


if __name__ == "__main__":
    main()
