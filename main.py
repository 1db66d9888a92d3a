# main.py
"""
LinkedIn API MCP Server - Main application entry point.

Implements a three-phase startup:
1. Configuration Phase - Environment and command line settings
2. Logging Phase - structlog setup on stderr
3. Server Runtime Phase - HTTP client and MCP server on stdio
"""

import asyncio
import sys

import structlog

from linkedin_api_mcp import __version__
from linkedin_api_mcp.cli import print_client_config
from linkedin_api_mcp.config import load_config
from linkedin_api_mcp.exceptions import ConfigurationError
from linkedin_api_mcp.logging_config import configure_logging
from linkedin_api_mcp.server import serve

logger = structlog.get_logger(__name__)


def main() -> None:
    """Main application entry point with clear phase separation."""

    # Phase 1: Configuration
    try:
        config = load_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)

    # Phase 2: Logging (before any logger usage)
    configure_logging(log_level=config.log_level, json_format=config.log_format == "json")
    logger.info("LinkedIn API MCP Server starting", version=__version__)

    if config.print_config:
        print_client_config(config)
        sys.exit(0)

    logger.debug("Server configuration", config=repr(config))

    # Phase 3: Server Runtime
    try:
        asyncio.run(serve(config))
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error("Server runtime error", exception_type=type(e).__name__, error=str(e))
        sys.exit(1)

    logger.info("Shutting down LinkedIn API MCP server")


if __name__ == "__main__":
    main()
