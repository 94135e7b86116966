"""
MCP Server Module
=================
Tool dispatch and the MCP stdio binding.
"""

from .dispatcher import TOOL_DEFINITIONS, TextBlock, ToolDispatcher, ToolResponse

__all__ = ['TOOL_DEFINITIONS', 'TextBlock', 'ToolDispatcher', 'ToolResponse']
