"""JIRA API module for the MCP Pix JIRA server."""

from .client import JiraClient
from .config import JiraConfig
from .formatter import format_issue, format_issue_summary
from .issues import get_formatted_issue

__all__ = [
    "JiraClient",
    "JiraConfig",
    "format_issue",
    "format_issue_summary",
    "get_formatted_issue",
]
