"""
Configuration management for DuckDNS Updater.

This module resolves the update request from command-line arguments,
environment variables and a YAML configuration file. Source priority
(high to low):
1. Command-line arguments
2. Environment variables
3. Configuration file

Resolution stops at the first source that leaves the request valid, and a
lower-priority source never overwrites a value that is already set.
"""

from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from pydantic import ValidationError

from duckdns_updater import __version__
from duckdns_updater.models import FileConfig, UpdateRequest

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Final


DEFAULT_CONFIG_PATH: Final[str] = "duckdns.yaml"
ENV_TOKEN: Final[str] = "DUCK_TOKEN"
ENV_NAMES: Final[str] = "DUCK_NAMES"


_logger = logging.getLogger(__name__)


class ConfigValidationError(Exception):
    """
    Exception raised when the configuration file has an invalid shape.

    Attributes
    ----------
    message : str
        Human-readable error message describing the validation failures.
    config_path : Path | None
        Path to the configuration file that failed validation.
    """

    def __init__(self, message: str, config_path: Path | None = None) -> None:
        self.config_path = config_path
        super().__init__(message)


def _format_validation_errors(
    error: ValidationError,
    config_path: Path | None,
) -> str:
    """
    Format Pydantic validation errors into human-readable messages.

    Parameters
    ----------
    error : ValidationError
        Pydantic validation error.
    config_path : Path | None
        Path to the configuration file.

    Returns
    -------
    str
        Human-readable error message.
    """
    lines: list[str] = []

    if config_path:
        lines.append(f'Configuration error in "{config_path}":')
    else:
        lines.append("Configuration error:")

    for err in error.errors():
        field_path = ".".join(str(loc) for loc in err["loc"])
        error_input = err["input"]
        value_repr = (
            f'"{error_input}"' if isinstance(error_input, str) else repr(error_input)
        )
        lines.append(
            f"  [{field_path}]: got {type(error_input).__name__} (value: {value_repr}). {err['msg']}.",
        )

    return "\n".join(lines)


def parse_names_str(value: str) -> list[str]:
    """
    Parse a names value from CLI.

    This function is intended to be used as a `type` converter in `argparse`.
    A single flag may carry several comma-separated names.

    Parameters
    ----------
    value : str
        One name, or several separated by commas (e.g., "home,office").

    Returns
    -------
    list[str]
        The names in the order given. Empty if the value holds no names,
        so an empty "-n" value counts as no names given.
    """
    return [n.strip() for n in value.split(",") if n.strip()]


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Parameters
    ----------
    args : list[str] | None, optional
        Command-line arguments. If None, uses sys.argv.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="duckdns-updater",
        description="Update DuckDNS records for one or more subdomains",
    )

    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        default=False,
        help="Use debug mode",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=Path(DEFAULT_CONFIG_PATH),
        help=f"Config file location (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "-n",
        "--names",
        type=parse_names_str,
        action="extend",
        default=None,
        help=(
            "Names to update with DuckDNS. Just the subdomain section. "
            "Use the flag multiple times to set multiple values."
        ),
    )
    parser.add_argument(
        "-t",
        "--token",
        type=str,
        default="",
        help="Token for updating DuckDNS",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        dest="log_file",
        default=None,
        help="Also write logs to this file",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser.parse_args(args)


def config_from_cli(
    args: argparse.Namespace,
    logger: logging.Logger = _logger,
) -> UpdateRequest:
    """
    Build the update request from command-line arguments.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments.
    logger : logging.Logger, optional
        Logger to report to.

    Returns
    -------
    UpdateRequest
        The request, possibly incomplete.
    """
    request = UpdateRequest(token=args.token or "", names=list(args.names or []))
    logger.debug("Set token from CLI to %s", request.token)
    logger.debug("Set names from CLI to %s", ", ".join(request.names))
    return request


def apply_env_config(
    request: UpdateRequest,
    environ: Mapping[str, str] | None = None,
    logger: logging.Logger = _logger,
) -> None:
    """
    Fill unset fields of the request from environment variables.

    "DUCK_NAMES" holds several names separated by spaces.

    Parameters
    ----------
    request : UpdateRequest
        The request to update in place.
    environ : Mapping[str, str] | None, optional
        Environment to read. If None, uses os.environ.
    logger : logging.Logger, optional
        Logger to report to.
    """
    if environ is None:
        environ = os.environ

    token = environ.get(ENV_TOKEN, "")
    names = environ.get(ENV_NAMES, "")

    if request.token == "" and token:
        request.token = token
        logger.debug("Set token from environment to %s", token)

    if not request.names and names.strip():
        request.names = names.split()
        logger.debug("Set names from environment to %s", ", ".join(request.names))


def load_config_from_file(config_path: Path) -> FileConfig:
    """
    Load configuration from a YAML file.

    Parameters
    ----------
    config_path : Path
        Path to the configuration file.

    Returns
    -------
    FileConfig
        Parsed configuration.

    Raises
    ------
    OSError
        If the configuration file cannot be read.
    yaml.YAMLError
        If the configuration file is not valid YAML.
    ConfigValidationError
        If the document does not have the expected keys and types.
    """
    with config_path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    # An empty document parses to None
    if data is None:
        return FileConfig()
    if not isinstance(data, dict):
        msg = f'Configuration error in "{config_path}": expected a mapping, got {type(data).__name__}.'
        raise ConfigValidationError(msg, config_path)

    try:
        return FileConfig.model_validate(data)
    except ValidationError as e:
        msg = _format_validation_errors(e, config_path)
        raise ConfigValidationError(msg, config_path) from e


def apply_file_config(
    request: UpdateRequest,
    config_path: Path,
    logger: logging.Logger = _logger,
) -> None:
    """
    Fill unset fields of the request from the configuration file.

    A file that cannot be read or parsed leaves the request unchanged.

    Parameters
    ----------
    request : UpdateRequest
        The request to update in place.
    config_path : Path
        Path to the configuration file.
    logger : logging.Logger, optional
        Logger to report to.
    """
    config_path = config_path.expanduser()
    try:
        file_config = load_config_from_file(config_path)
    except OSError as e:
        logger.debug('Error reading file "%s": %s', config_path, e)
        return
    except (yaml.YAMLError, ConfigValidationError) as e:
        logger.debug('Error parsing YAML file "%s": %s', config_path, e)
        return

    if file_config.token == "":
        logger.debug('The token is empty after trying to parse "%s".', config_path)
    elif request.token == "":
        request.token = file_config.token
        logger.debug("Set token from file to %s", file_config.token)

    if not file_config.domains:
        logger.debug('No names/subdomains specified to update from "%s".', config_path)
    elif not request.names:
        request.names = list(file_config.domains)
        logger.debug("Set names from file to %s", ", ".join(request.names))


def load_config(
    args: argparse.Namespace | None = None,
    environ: Mapping[str, str] | None = None,
    logger: logging.Logger = _logger,
) -> UpdateRequest:
    """
    Resolve the update request from all configuration sources.

    Priority (high to low):
    1. Command-line arguments
    2. Environment variables
    3. Configuration file

    Parameters
    ----------
    args : argparse.Namespace | None, optional
        Parsed command-line arguments.
    environ : Mapping[str, str] | None, optional
        Environment to read. If None, uses os.environ.
    logger : logging.Logger, optional
        Logger to report to.

    Returns
    -------
    UpdateRequest
        The merged request. It may still be invalid if no source was complete.
    """
    if args is None:
        args = parse_args()

    request = config_from_cli(args, logger)

    if not request.valid:
        apply_env_config(request, environ, logger)

    if not request.valid:
        apply_file_config(request, args.config, logger)

    return request
