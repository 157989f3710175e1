"""Entry point for running the MCP Pix JIRA server."""

from mcp_pix_jira import main

if __name__ == "__main__":
    main()
