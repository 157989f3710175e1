"""JIRA FastMCP server instance and tool definitions."""

import logging
from typing import Annotated

from fastmcp import Context, FastMCP
from fastmcp.exceptions import PromptError, ToolError
from pydantic import Field

from mcp_pix_jira.exceptions import IssueKeyValidationError, JiraApiError
from mcp_pix_jira.jira.constants import (
    CUSTOM_FIELDS_MODE_ALLOWLIST,
    ISSUE_KEY_PATTERN,
)
from mcp_pix_jira.jira.issues import get_formatted_issue
from mcp_pix_jira.jira.utils import validate_issue_key
from mcp_pix_jira.prompts import build_analysis_prompt
from mcp_pix_jira.servers.dependencies import get_app_context, get_jira_client

logger = logging.getLogger("mcp-pix-jira.servers.jira")

UNEXPECTED_RETRIEVAL_ERROR = "An unexpected error occurred while retrieving the issue."
UNEXPECTED_ANALYSIS_ERROR = (
    "An unexpected error occurred while preparing ticket analysis."
)

jira_mcp = FastMCP(
    name="Pix JIRA MCP Service",
    instructions=(
        "Provides tools for reading Pix JIRA issues and preparing ticket analyses."
    ),
)


def _custom_field_settings(ctx: Context) -> tuple[str, dict[str, str] | None]:
    app_context = get_app_context(ctx)
    if app_context and app_context.jira_config:
        config = app_context.jira_config
        return config.custom_fields_mode, config.custom_field_labels
    return CUSTOM_FIELDS_MODE_ALLOWLIST, None


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Get Issue", "readOnlyHint": True},
)
async def get_issue(
    ctx: Context,
    issue_key: Annotated[
        str,
        Field(
            description="The JIRA issue key in format PROJECT-NUMBER (e.g., PROJ-1234, PROJ-5678)",
            pattern=ISSUE_KEY_PATTERN,
        ),
    ],
    include_comments: Annotated[
        bool,
        Field(
            description="Whether to include comments in the response (default: true)",
            default=True,
        ),
    ] = True,
) -> str:
    """Retrieves detailed information about a JIRA issue by its key (e.g., PROJ-1234).

    Returns summary, description, status, assignee, priority, labels, fix
    versions, parent issue, related issues, Pix custom fields (Equipe Pix,
    Appli Pix), development info and recent comments.

    Args:
        ctx: The FastMCP context.
        issue_key: JIRA issue key.
        include_comments: Whether to include recent comments.

    Returns:
        Markdown report of the issue.

    Raises:
        ToolError: If the key is invalid or the issue could not be retrieved.
    """
    try:
        jira = await get_jira_client(ctx)
        custom_fields_mode, custom_field_labels = _custom_field_settings(ctx)
        return get_formatted_issue(
            jira,
            issue_key,
            include_comments=include_comments,
            custom_fields_mode=custom_fields_mode,
            custom_field_labels=custom_field_labels,
        )
    except JiraApiError as e:
        raise ToolError(f"Error: {e.message}") from e
    except IssueKeyValidationError as e:
        raise ToolError(f"Error: {e}") from e
    except Exception as e:
        logger.error(f"Failed to fetch issue {issue_key}: {e}", exc_info=True)
        message = (
            f"Failed to retrieve issue: {e}" if str(e) else UNEXPECTED_RETRIEVAL_ERROR
        )
        raise ToolError(f"Error: {message}") from e


async def _prepare_analysis(ctx: Context, issue_key: str) -> str:
    """Build the analysis prompt text; failures become error strings."""
    try:
        jira = await get_jira_client(ctx)
    except Exception as e:
        logger.error(f"Failed to prepare analysis for {issue_key}: {e}")
        raise ValueError(f"Failed to prepare analysis: {e}") from e

    custom_fields_mode, custom_field_labels = _custom_field_settings(ctx)
    result = build_analysis_prompt(
        issue_key, jira, custom_fields_mode, custom_field_labels
    )
    if result.error:
        raise ValueError(result.error)
    return result.content


@jira_mcp.tool(
    tags={"jira", "read"},
    annotations={"title": "Analyze Ticket", "readOnlyHint": True},
)
async def analyze_ticket(
    ctx: Context,
    issue_key: Annotated[
        str,
        Field(
            description="The JIRA issue key to analyze (e.g., PROJ-1234, PROJ-5678)",
            pattern=ISSUE_KEY_PATTERN,
        ),
    ],
) -> str:
    """Prepares a technical analysis prompt for a JIRA ticket.

    The prompt asks for a complexity assessment, potential risks,
    dependencies and a recommended development approach, followed by the
    ticket details.

    Args:
        ctx: The FastMCP context.
        issue_key: JIRA issue key.

    Returns:
        The analysis prompt text.

    Raises:
        ToolError: If the ticket could not be fetched.
    """
    try:
        return await _prepare_analysis(ctx, issue_key)
    except ValueError as e:
        raise ToolError(f"Error: {e}") from e
    except Exception as e:
        logger.error(
            f"Failed to prepare analysis for {issue_key}: {e}", exc_info=True
        )
        message = (
            f"Failed to prepare analysis: {e}" if str(e) else UNEXPECTED_ANALYSIS_ERROR
        )
        raise ToolError(f"Error: {message}") from e


@jira_mcp.prompt(
    name="analyze_ticket",
    description=(
        "Analyzes a JIRA ticket to provide technical insights including complexity "
        "assessment, potential risks, dependencies, and recommended development approach"
    ),
    tags={"jira"},
)
async def analyze_ticket_prompt(
    ctx: Context,
    issue_key: Annotated[
        str, Field(description="The JIRA issue key to analyze (e.g., PROJ-1234)")
    ],
) -> str:
    """Exposes the ticket analysis as an MCP prompt."""
    try:
        validate_issue_key(issue_key)
        return await _prepare_analysis(ctx, issue_key)
    except ValueError as e:
        raise PromptError(f"Error: {e}") from e
