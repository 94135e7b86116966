#!/usr/bin/env python3
"""
Tool Dispatcher
===============
Transport-agnostic request handling for the Repository Health tools.

Every call is independent. Argument problems and audit failures are
returned as error-flagged responses so the channel stays usable; no
exception raised by a tool escapes ``call_tool``.

Author: Risk Armor
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from repo_health.auditing.auditor import RepositoryAuditor
from repo_health.auditing.standards import list_standards
from repo_health.reports.issue_formatter import create_issue_content, render_issue_preview

logger = logging.getLogger(__name__)

REPOSITORY_PATH_SCHEMA = {
    "type": "object",
    "properties": {
        "repository_path": {
            "type": "string",
            "description": "Path to the repository to audit",
        },
    },
    "required": ["repository_path"],
}

TOOL_DEFINITIONS = [
    {
        "name": "audit_repository",
        "description": "Audit a repository against enterprise paved-road standards and explain gaps in natural language",
        "inputSchema": REPOSITORY_PATH_SCHEMA,
    },
    {
        "name": "generate_issue_content",
        "description": "Generate GitHub issue content for repository health gaps (can be used to create issues)",
        "inputSchema": REPOSITORY_PATH_SCHEMA,
    },
    {
        "name": "list_standards",
        "description": "List all enterprise paved-road standards that are checked during audits",
        "inputSchema": {
            "type": "object",
            "properties": {},
        },
    },
]


@dataclass
class TextBlock:
    """A single text content block of a tool response."""
    text: str
    type: str = "text"


@dataclass
class ToolResponse:
    """Content blocks returned by a tool plus the error flag."""
    content: List[TextBlock] = field(default_factory=list)
    is_error: bool = False

    @classmethod
    def text(cls, *texts: str) -> 'ToolResponse':
        return cls(content=[TextBlock(text=t) for t in texts])

    @classmethod
    def error(cls, message: str) -> 'ToolResponse':
        return cls(content=[TextBlock(text=message)], is_error=True)


def to_json(data: Any) -> str:
    """Format a record the way tool results carry it."""
    return json.dumps(data, indent=2, ensure_ascii=False)


class ToolDispatcher:
    """
    Routes tool calls by name.

    Tools:
    - audit_repository: structured summary plus narrative
    - generate_issue_content: issue title/body plus preview
    - list_standards: the paved-road checklist
    """

    def __init__(self, auditor: Optional[RepositoryAuditor] = None):
        """
        Initialize the dispatcher.

        Args:
            auditor: Auditor used by the repository tools
        """
        self.auditor = auditor or RepositoryAuditor()
        self._handlers = {
            "audit_repository": self._audit_repository,
            "generate_issue_content": self._generate_issue_content,
            "list_standards": self._list_standards,
        }

    def list_tools(self) -> List[Dict[str, Any]]:
        """
        Descriptors (name, description, inputSchema) of every callable tool.

        This is the answer to the protocol's tools/list request; listing is
        not itself a callable tool.
        """
        return [dict(tool) for tool in TOOL_DEFINITIONS]

    async def call_tool(self, name: str, arguments: Optional[Dict[str, Any]]) -> ToolResponse:
        """
        Invoke a tool.

        Args:
            name: Tool name
            arguments: Argument record, None when the client sent none

        Returns:
            ToolResponse; ``is_error`` is set for unknown tools, missing
            arguments and failed audits
        """
        handler = self._handlers.get(name)
        if handler is None:
            logger.warning(f"Unknown tool requested: {name}")
            return ToolResponse.error(f"Unknown tool: {name}")

        logger.debug(f"Calling tool {name} with arguments {arguments}")
        return await handler(arguments)

    async def _audit_repository(self, arguments: Optional[Dict[str, Any]]) -> ToolResponse:
        if arguments is None:
            return ToolResponse.error("Missing arguments")

        try:
            summary = await self.auditor.audit(arguments.get("repository_path"))
        except Exception as e:
            logger.error(f"audit_repository failed: {e}", exc_info=True)
            return ToolResponse.error(f"Error auditing repository: {e}")

        return ToolResponse.text(
            to_json(summary.to_dict()),
            f"\n\n{summary.narrative}"
        )

    async def _generate_issue_content(self, arguments: Optional[Dict[str, Any]]) -> ToolResponse:
        if arguments is None:
            return ToolResponse.error("Missing arguments")

        try:
            summary = await self.auditor.audit(arguments.get("repository_path"))
            issue = create_issue_content(summary)
        except Exception as e:
            logger.error(f"generate_issue_content failed: {e}", exc_info=True)
            return ToolResponse.error(f"Error generating issue content: {e}")

        return ToolResponse.text(
            to_json(issue.to_dict()),
            render_issue_preview(issue)
        )

    async def _list_standards(self, arguments: Optional[Dict[str, Any]]) -> ToolResponse:
        return ToolResponse.text(to_json(list_standards()))
