"""Main FastMCP server setup for the Pix JIRA integration."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastmcp import FastMCP

from mcp_pix_jira.jira import JiraClient, JiraConfig
from mcp_pix_jira.utils.env import is_env_truthy

from .context import MainAppContext
from .jira import jira_mcp

logger = logging.getLogger("mcp-pix-jira.server.main")


def create_app_context(test_connection: bool = True) -> MainAppContext:
    """
    Load the JIRA configuration and build the shared client.

    Args:
        test_connection: Check credentials against JIRA before serving

    Returns:
        The context stored in the server lifespan

    Raises:
        ValueError: If the configuration is missing or invalid
        JiraApiError: If the connection test fails
    """
    jira_config = JiraConfig.from_env()
    logger.info(f"Configured for JIRA instance: {jira_config.base_url}")

    jira_client = JiraClient(
        config=jira_config, logger=logging.getLogger("mcp-pix-jira.client")
    )
    if test_connection:
        logger.info("Testing connection to JIRA...")
        jira_client.test_connection()
        logger.info("Successfully connected to JIRA")
    else:
        logger.info("Skipping JIRA connection test")

    return MainAppContext(jira_config=jira_config, jira_client=jira_client)


@asynccontextmanager
async def main_lifespan(app: FastMCP[MainAppContext]) -> AsyncIterator[dict]:
    logger.info("Main Pix JIRA MCP server lifespan starting...")
    app_context = create_app_context(
        test_connection=not is_env_truthy("JIRA_SKIP_CONNECTION_TEST")
    )
    logger.info("Available tools: get_issue, analyze_ticket")

    try:
        yield {"app_lifespan_context": app_context}
    except Exception as e:
        logger.error(f"Error during lifespan: {e}", exc_info=True)
        raise
    finally:
        logger.info("Main Pix JIRA MCP server lifespan shutting down...")
        if app_context.jira_client:
            logger.debug("Closing JIRA HTTP session...")
            app_context.jira_client.session.close()
        logger.info("Main Pix JIRA MCP server lifespan shutdown complete.")


main_mcp = FastMCP(name="Pix JIRA MCP", lifespan=main_lifespan)
main_mcp.mount(jira_mcp)
