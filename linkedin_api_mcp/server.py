# linkedin_api_mcp/server.py
"""
MCP server implementation for the HarvestAPI LinkedIn tools.

Creates the protocol server, advertises the static tool catalog through
``tools/list`` and routes ``tools/call`` to the dispatcher. Schemas come from
the catalog, so enumerations stay advisory and values outside an advertised
set are forwarded unchanged.

The ``tools/call`` handler is registered directly rather than through the
SDK's ``call_tool`` decorator, which folds every exception into an
``isError`` text result and substitutes ``{}`` for absent arguments. Raising
``McpError`` from a raw request handler is what carries the JSON-RPC error
code (and ``data``) back to the client.
"""

from typing import List

import mcp.types as types
import structlog
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from linkedin_api_mcp.client import HarvestAPIClient
from linkedin_api_mcp.config import AppConfig
from linkedin_api_mcp.constants import SERVER_NAME, SERVER_VERSION
from linkedin_api_mcp.dispatcher import Dispatcher
from linkedin_api_mcp.error_handler import to_mcp_error

logger = structlog.get_logger(__name__)


def create_mcp_server(dispatcher: Dispatcher) -> Server:
    """Create and configure the MCP server with all LinkedIn tools."""
    server: Server = Server(SERVER_NAME, version=SERVER_VERSION)
    tools = [
        types.Tool(
            name=definition.name,
            description=definition.description,
            inputSchema=definition.input_schema,
        )
        for definition in dispatcher.catalog.list()
    ]

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return tools

    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        name = request.params.name
        try:
            result = await dispatcher.dispatch(name, request.params.arguments)
        except Exception as e:
            logger.warning("Tool call failed", tool=name, error=str(e))
            raise to_mcp_error(e, name) from e
        return types.ServerResult(
            types.CallToolResult(
                content=[types.TextContent(type="text", text=result.text)],
                isError=False,
            )
        )

    server.request_handlers[types.CallToolRequest] = call_tool

    return server


async def serve(config: AppConfig) -> None:
    """Run the server on stdio until the client disconnects."""
    async with HarvestAPIClient(config) as client:
        dispatcher = Dispatcher(client)
        server = create_mcp_server(dispatcher)
        logger.info("Serving on stdio", tools=len(dispatcher.catalog), base_url=client.base_url)
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
