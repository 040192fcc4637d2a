"""
CLI entry point for DuckDNS Updater.

This module provides the command-line interface for updating records.
"""

from __future__ import annotations

import sys

from duckdns_updater.config import load_config, parse_args
from duckdns_updater.logging_config import setup_logging
from duckdns_updater.updater import MissingConfigError, UpdateError, make_update


def main(argv: list[str] | None = None) -> None:
    """
    Update DuckDNS records.

    Parse command-line arguments, resolve the update request and update
    every name. Exit with status 1 if the request is incomplete or any
    name failed.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. If None, uses sys.argv.
    """
    args = parse_args(argv)
    logger = setup_logging(debug=args.debug, log_file=args.log_file)

    request = load_config(args, logger=logger)

    try:
        make_update(request, logger=logger)
    except MissingConfigError as e:
        logger.critical("%s", e)
        sys.exit(1)
    except UpdateError as e:
        logger.critical("Error updating IP address:\n%s", e)
        sys.exit(1)

    logger.debug("IP address updated successfully")


if __name__ == "__main__":
    main()
