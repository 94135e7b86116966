#!/usr/bin/env python3
"""
Repository Health MCP Server - Main Entry Point
================================================
Serves the Repository Health tools over MCP stdio.

This binds the transport-agnostic ToolDispatcher to the MCP SDK's
low-level server:
- tools/list  -> ToolDispatcher.list_tools()
- tools/call  -> ToolDispatcher.call_tool()

stdout carries the protocol, so all logging goes to stderr. The only
fatal condition is failing to bring up the transport.

Author: Risk Armor
"""

import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

import mcp.types as types
import yaml
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from repo_health.auditing.auditor import RepositoryAuditor
from repo_health.security.config import ServerConfig, get_server_config
from repo_health.server.dispatcher import ToolDispatcher, ToolResponse

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ToolCallError(Exception):
    """Raised to hand an error-flagged tool result to the MCP SDK."""
    pass


def to_mcp_tools(descriptors: List[Dict[str, Any]]) -> List[types.Tool]:
    return [
        types.Tool(
            name=d["name"],
            description=d["description"],
            inputSchema=d["inputSchema"],
        )
        for d in descriptors
    ]


def to_mcp_content(response: ToolResponse) -> List[types.TextContent]:
    """
    Convert a dispatcher response into MCP content.

    Raises:
        ToolCallError: If the response is error-flagged; the SDK turns the
            exception into a result with ``isError`` set and the message as
            its only text block
    """
    if response.is_error:
        raise ToolCallError("\n".join(block.text for block in response.content))
    return [types.TextContent(type="text", text=block.text) for block in response.content]


def build_server(config: Optional[ServerConfig] = None,
                 dispatcher: Optional[ToolDispatcher] = None) -> Server:
    """
    Create the MCP server with the Repository Health tools registered.

    Args:
        config: Server configuration (process configuration if omitted)
        dispatcher: Dispatcher handling the tool calls

    Returns:
        Configured low-level MCP Server
    """
    config = config or get_server_config()
    if dispatcher is None:
        dispatcher = ToolDispatcher(RepositoryAuditor(
            base_dir=config.allowed_base_dir,
            max_path_length=config.max_path_length
        ))

    server = Server(config.server_name, version=config.server_version)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return to_mcp_tools(dispatcher.list_tools())

    # The dispatcher validates arguments itself and reports failures with
    # its own messages
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        response = await dispatcher.call_tool(name, arguments)
        return to_mcp_content(response)

    return server


async def run_stdio(server: Server) -> None:
    """Serve requests over stdio until the client disconnects."""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Repository Health MCP Server running on stdio")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main() -> None:
    """Console entry point."""
    try:
        config = get_server_config()
    except (OSError, ValueError, yaml.YAMLError) as e:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT, stream=sys.stderr)
        logger.critical(f"Fatal error: invalid configuration: {e}")
        sys.exit(1)

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper()),
        format=LOG_FORMAT,
        stream=sys.stderr
    )

    try:
        asyncio.run(run_stdio(build_server(config)))
    except KeyboardInterrupt:
        logger.info("Server interrupted")
    except Exception as e:
        logger.critical(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
