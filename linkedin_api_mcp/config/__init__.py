# linkedin_api_mcp/config/__init__.py
"""
Configuration for the LinkedIn API MCP server.

``load_config`` builds one immutable ``AppConfig`` from the environment and
the command line. The result is passed explicitly to the HTTP client and the
server rather than read from a module-level singleton.
"""

from .loaders import build_parser, load_config
from .schema import AppConfig

__all__ = ["AppConfig", "build_parser", "load_config"]
