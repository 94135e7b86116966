"""Run the Repository Health MCP server: ``python -m repo_health``."""

from repo_health.server.mcp_server import main

if __name__ == "__main__":
    main()
