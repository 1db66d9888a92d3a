# linkedin_api_mcp/config/loaders.py
"""
Configuration loading and argument parsing for the LinkedIn API MCP server.

Settings are layered in priority order: command line arguments → environment
variables (including ``.env``) → defaults. The result is validated once and
never mutated afterwards.
"""

import argparse
import logging
from typing import Any, Dict, Optional, Sequence

from pydantic import ValidationError

from linkedin_api_mcp.exceptions import ConfigurationError

from .schema import AppConfig

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="LinkedIn API MCP Server - LinkedIn data tools over the Model Context Protocol"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level (default: WARNING)",
    )

    parser.add_argument(
        "--log-format",
        choices=["compact", "json"],
        help="Log output format (default: compact)",
    )

    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Timeout in seconds for every HarvestAPI request (default: 30)",
    )

    parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="Override the HarvestAPI base URL",
    )

    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print an MCP client configuration snippet and exit",
    )

    return parser


def overrides_from_args(argv: Optional[Sequence[str]] = None) -> Dict[str, Any]:
    """Parse command line arguments into config overrides.

    Overrides are keyed by the same names as the environment variables so
    they replace, rather than compete with, values read from the environment.
    """
    args = build_parser().parse_args(argv)

    overrides: Dict[str, Any] = {}
    if args.log_level:
        overrides["LOG_LEVEL"] = args.log_level
    if args.log_format:
        overrides["LOG_FORMAT"] = args.log_format
    if args.timeout is not None:
        overrides["HARVESTAPI_TIMEOUT"] = args.timeout
    if args.base_url:
        overrides["HARVESTAPI_BASE_URL"] = args.base_url
    if args.print_config:
        overrides["print_config"] = True

    return overrides


def load_config(argv: Optional[Sequence[str]] = None) -> AppConfig:
    """
    Load configuration with clear precedence order.

    Configuration is loaded in the following priority order:
    1. Command line arguments (highest priority)
    2. Environment variables and ``.env``
    3. Defaults (lowest priority)

    Args:
        argv: Command line arguments (defaults to ``sys.argv[1:]``)

    Returns:
        AppConfig: Fully configured, immutable application settings

    Raises:
        ConfigurationError: If configuration validation fails
    """
    overrides = overrides_from_args(argv)

    try:
        config = AppConfig(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}", cause=e) from e

    if not config.has_api_key:
        logger.warning(
            "No HarvestAPI key configured (HARVESTAPI_API_KEY or LINKEDIN_API_KEY); "
            "requests will be sent without authentication"
        )

    return config
