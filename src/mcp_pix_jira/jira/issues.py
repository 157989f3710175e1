"""Issue retrieval rendered for MCP clients."""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from ..logging_config import log_operation
from .constants import CUSTOM_FIELDS_MODE_ALLOWLIST, STANDARD_ISSUE_FIELDS
from .formatter import format_issue
from .utils import build_fetch_options, normalize_issue_key, validate_issue_key

if TYPE_CHECKING:
    from .client import JiraClient

logger = logging.getLogger("mcp-pix-jira.jira.issues")


def get_formatted_issue(
    client: "JiraClient",
    issue_key: str,
    include_comments: bool = True,
    custom_fields_mode: str = CUSTOM_FIELDS_MODE_ALLOWLIST,
    custom_field_labels: Mapping[str, str] | None = None,
) -> str:
    """
    Fetch an issue and render it as a Markdown report.

    The key is validated as given, then normalized (trimmed, upper-cased)
    before the request.

    Args:
        client: JIRA client used for the fetch
        issue_key: The issue key (e.g. PROJ-123)
        include_comments: Also fetch and render the most recent comments
        custom_fields_mode: ``allowlist`` or ``generic``
        custom_field_labels: Friendly labels for allow-list mode

    Returns:
        The formatted report

    Raises:
        IssueKeyValidationError: If the key is malformed; no request is made
        JiraApiError: If the request fails
    """
    validate_issue_key(issue_key)
    normalized_key = normalize_issue_key(issue_key)
    fields, expand = build_fetch_options(STANDARD_ISSUE_FIELDS, include_comments)

    logger.info(f"Fetching issue: {normalized_key}")
    with log_operation(logger, "get_issue", issue_key=normalized_key):
        issue = client.get_issue(normalized_key, fields, expand)
        report = format_issue(issue, custom_fields_mode, custom_field_labels)
    logger.info(f"Successfully retrieved issue: {normalized_key}")
    return report
