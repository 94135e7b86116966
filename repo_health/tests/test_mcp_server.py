"""Tests for the MCP SDK binding of the dispatcher."""

import asyncio
import json

import mcp.types as types
import pytest
from mcp.server.lowlevel import Server

from repo_health.security.config import ServerConfig
from repo_health.server.dispatcher import ToolDispatcher, ToolResponse
from repo_health.server.mcp_server import (
    ToolCallError,
    build_server,
    main,
    to_mcp_content,
    to_mcp_tools,
)


def test_to_mcp_tools():
    tools = to_mcp_tools(ToolDispatcher().list_tools())

    assert all(isinstance(t, types.Tool) for t in tools)
    assert [t.name for t in tools] == ["audit_repository", "generate_issue_content", "list_standards"]
    assert tools[0].inputSchema["required"] == ["repository_path"]


def test_to_mcp_content():
    content = to_mcp_content(ToolResponse.text("{}", "narrative"))

    assert [c.text for c in content] == ["{}", "narrative"]
    assert all(c.type == "text" for c in content)


def test_error_response_raises_for_sdk():
    with pytest.raises(ToolCallError, match="Unknown tool: nope"):
        to_mcp_content(ToolResponse.error("Unknown tool: nope"))


def test_build_server_uses_config():
    config = ServerConfig(server_name="health-test", server_version="9.9.9")
    server = build_server(config)

    assert isinstance(server, Server)
    assert server.name == "health-test"
    assert server.version == "9.9.9"
    assert types.ListToolsRequest in server.request_handlers
    assert types.CallToolRequest in server.request_handlers


# ================================================================================
# REGISTERED tools/call HANDLER
# ================================================================================

def call_registered_tool(server, name, arguments):
    handler = server.request_handlers[types.CallToolRequest]
    request = types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )
    return asyncio.run(handler(request)).root


def test_call_tool_handler_unknown_tool():
    result = call_registered_tool(build_server(ServerConfig()), "nope", {})

    assert result.isError is True
    assert result.content[0].text == "Unknown tool: nope"


@pytest.mark.parametrize("arguments", [None, {}])
def test_call_tool_handler_missing_repository_path(arguments):
    result = call_registered_tool(build_server(ServerConfig()), "audit_repository", arguments)

    assert result.isError is True
    assert result.content[0].text.startswith("Error auditing repository:")


def test_call_tool_handler_audit(make_repo):
    repo = make_repo(["README.md", "LICENSE"])
    result = call_registered_tool(
        build_server(ServerConfig()),
        "audit_repository",
        {"repository_path": str(repo)},
    )

    assert not result.isError
    assert len(result.content) == 2
    assert json.loads(result.content[0].text)["compliancePercentage"] == 20


# ================================================================================
# STARTUP
# ================================================================================

@pytest.mark.parametrize("contents", [
    "log_level: [unclosed\n",
    "max_path_length: abc\n",
    "log_level: 5\n",
])
def test_main_exits_on_invalid_configuration(tmp_path, monkeypatch, contents):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(contents)
    monkeypatch.setenv("REPO_HEALTH_CONFIG", str(config_file))

    with pytest.raises(SystemExit) as exc_info:
        main()

    assert exc_info.value.code == 1
