# linkedin_api_mcp/cli.py
"""
CLI utilities for MCP client configuration generation.

Builds the ``mcpServers`` entry an MCP client (such as Claude Desktop) needs to
launch this server. Environment variable names are listed with placeholder
values; the configured API key is never printed.
"""

import json
import shutil
from typing import Any, Dict

from linkedin_api_mcp.config import AppConfig
from linkedin_api_mcp.constants import DEFAULT_BASE_URL, SERVER_NAME


def build_client_config(config: AppConfig) -> Dict[str, Any]:
    command = shutil.which(SERVER_NAME) or SERVER_NAME

    env_vars: Dict[str, str] = {"HARVESTAPI_API_KEY": "<your-harvestapi-key>"}
    if config.proxy_url:
        env_vars["PROXY_URL"] = "<your-proxy-url>"
    if config.base_url != DEFAULT_BASE_URL:
        env_vars["HARVESTAPI_BASE_URL"] = config.base_url

    return {
        "mcpServers": {
            SERVER_NAME: {
                "command": command,
                "args": [],
                "env": env_vars,
            }
        }
    }


def print_client_config(config: AppConfig) -> None:
    """Print the MCP client configuration snippet to stdout."""
    print(json.dumps(build_client_config(config), indent=2))
