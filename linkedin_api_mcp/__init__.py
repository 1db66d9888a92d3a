# linkedin_api_mcp/__init__.py
"""
LinkedIn API MCP Server package.

A Model Context Protocol (MCP) server that exposes the HarvestAPI LinkedIn data
service as a catalog of tools for AI assistants. Every tool call becomes one
authenticated HTTP GET whose JSON envelope is pruned, bounded and returned as a
compact text payload.

Key Features:
- 17 tools covering profiles, companies, jobs, posts, groups and geo IDs
- Per-tool argument validation before any network call
- Field projection per entity type with bounded list sizes
- Compact JSON replies with optional on-disk copies of the shaped result
- Environment-driven configuration with proxy support

Architecture:
- Static tool catalog shared by the MCP handlers and the dispatcher
- One long-lived HTTP connection pool passed explicitly to the dispatcher
- Pure projection functions, no shared mutable state between calls
"""

__version__ = "1.2.0"
