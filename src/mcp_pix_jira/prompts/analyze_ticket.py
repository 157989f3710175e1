"""Ticket analysis prompt.

Builds the instructions asking the model for a complexity assessment, risks,
dependencies and a recommended approach, followed by a condensed dump of the
ticket.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..exceptions import JiraApiError
from ..jira.constants import ANALYSIS_FIELDS, CUSTOM_FIELDS_MODE_ALLOWLIST
from ..jira.formatter import collect_custom_fields, format_rich_text
from ..jira.utils import normalize_issue_key
from ..logging_config import log_operation
from ..models.constants import UNKNOWN
from ..models.jira import JiraIssue

if TYPE_CHECKING:
    from ..jira.client import JiraClient

logger = logging.getLogger("mcp-pix-jira.prompts.analyze_ticket")

UNEXPECTED_ERROR_MESSAGE = (
    "An unexpected error occurred while preparing ticket analysis."
)

ANALYSIS_PROMPT_TEMPLATE = """Please analyze the following JIRA ticket and provide:

1. **Complexity Assessment** (Low/Medium/High)
   - Evaluate the technical complexity
   - Consider scope and number of changes required

2. **Potential Risks**
   - Identify technical risks
   - Consider dependencies and integration points
   - Note any security or performance concerns

3. **Dependencies**
   - List technical dependencies (APIs, libraries, services)
   - Identify related tickets or blockers
   - Note any required infrastructure

4. **Recommended Approach**
   - Suggest implementation strategy
   - Recommend breaking down into subtasks if needed
   - Propose testing strategy

---

## Ticket Details

{issue_details}
"""


@dataclass(frozen=True)
class AnalysisPromptResult:
    """Prompt text, or an error message with empty content."""

    content: str
    error: str | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None


def format_issue_for_analysis(
    issue: JiraIssue,
    custom_fields_mode: str = CUSTOM_FIELDS_MODE_ALLOWLIST,
    custom_field_labels: Mapping[str, str] | None = None,
) -> str:
    """Condensed ticket dump used below the analysis instructions."""
    lines = [
        f"**Key:** {issue.key}",
        f"**Type:** {issue.issue_type.name if issue.issue_type else UNKNOWN}",
        f"**Status:** {issue.status.name if issue.status else UNKNOWN}",
    ]
    if issue.priority:
        lines.append(f"**Priority:** {issue.priority.name}")

    lines.extend(["", "**Summary:**", issue.summary or "No summary"])

    if issue.description is not None and issue.description != "":
        lines.extend(["", "**Description:**", format_rich_text(issue.description)])

    if issue.parent:
        lines.extend(
            ["", f"**Parent Issue:** {issue.parent.key} - {issue.parent.summary}"]
        )

    if issue.labels:
        lines.extend(["", f"**Labels:** {', '.join(issue.labels)}"])

    if issue.issue_links:
        related = []
        for link in issue.issue_links:
            if link.outward_issue:
                related.append(
                    f"- {link.type.outward}: {link.outward_issue.key} - "
                    f"{link.outward_issue.summary}"
                )
            if link.inward_issue:
                related.append(
                    f"- {link.type.inward}: {link.inward_issue.key} - "
                    f"{link.inward_issue.summary}"
                )
        if related:
            lines.extend(["", "**Related Issues:**", *related])

    custom_fields = collect_custom_fields(
        issue, custom_fields_mode, custom_field_labels
    )
    if custom_fields:
        lines.extend(["", "**Custom Fields:**"])
        lines.extend(f"- {label}: {text}" for label, text in custom_fields)

    lines.extend(["", f"**View in JIRA:** {issue.browse_url}"])
    return "\n".join(lines)


def create_analysis_prompt_message(issue_details: str) -> str:
    return ANALYSIS_PROMPT_TEMPLATE.format(issue_details=issue_details)


def build_analysis_prompt(
    issue_key: str,
    client: "JiraClient",
    custom_fields_mode: str = CUSTOM_FIELDS_MODE_ALLOWLIST,
    custom_field_labels: Mapping[str, str] | None = None,
) -> AnalysisPromptResult:
    """
    Fetch an issue and build its analysis prompt.

    Args:
        issue_key: The issue key; trimmed and upper-cased before the fetch
        client: JIRA client used for the fetch
        custom_fields_mode: ``allowlist`` or ``generic``
        custom_field_labels: Friendly labels for allow-list mode

    Returns:
        The prompt, or an error message when the fetch or formatting failed.
        ``content`` is empty whenever ``error`` is set.
    """
    logger.info(f"Analyzing ticket: {issue_key}")

    try:
        normalized_key = normalize_issue_key(issue_key)
        with log_operation(logger, "analyze_ticket", issue_key=normalized_key):
            issue = client.get_issue(normalized_key, ANALYSIS_FIELDS, [])
            details = format_issue_for_analysis(
                issue, custom_fields_mode, custom_field_labels
            )
            content = create_analysis_prompt_message(details)
    except JiraApiError as e:
        logger.error(f"Failed to prepare ticket analysis: {e.message}")
        return AnalysisPromptResult(content="", error=e.message)
    except Exception as e:
        logger.error(f"Failed to prepare ticket analysis: {e}", exc_info=True)
        if not str(e):
            return AnalysisPromptResult(content="", error=UNEXPECTED_ERROR_MESSAGE)
        return AnalysisPromptResult(
            content="", error=f"Failed to analyze ticket: {e}"
        )

    logger.info(f"Successfully prepared analysis prompt for: {normalized_key}")
    return AnalysisPromptResult(content=content)
