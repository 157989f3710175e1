"""Dependency providers for the JIRA client with context awareness.

Provides get_app_context and get_jira_client for use in tool and prompt
functions.
"""

from __future__ import annotations

import logging

from fastmcp import Context

from mcp_pix_jira.jira import JiraClient
from mcp_pix_jira.servers.context import MainAppContext

logger = logging.getLogger("mcp-pix-jira.servers.dependencies")


def get_app_context(ctx: Context) -> MainAppContext | None:
    """Return the MainAppContext stored by the server lifespan, if any."""
    lifespan_ctx_dict = ctx.request_context.lifespan_context  # type: ignore
    return (
        lifespan_ctx_dict.get("app_lifespan_context")
        if isinstance(lifespan_ctx_dict, dict)
        else None
    )


async def get_jira_client(ctx: Context) -> JiraClient:
    """Returns the JiraClient created by the server lifespan.

    Raises:
        ValueError: If the server was started without a JIRA configuration
    """
    app_lifespan_ctx = get_app_context(ctx)
    if app_lifespan_ctx and app_lifespan_ctx.jira_client:
        logger.debug("get_jira_client: Using JiraClient from lifespan_context.")
        return app_lifespan_ctx.jira_client
    logger.error("JIRA client could not be resolved from lifespan context.")
    raise ValueError("JIRA client not available. Ensure server is configured correctly.")
