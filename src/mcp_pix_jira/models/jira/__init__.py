"""
JIRA data models for the MCP Pix JIRA server.

This package provides Pydantic models for JIRA API data structures,
organized by entity type.
"""

from .adf import adf_to_text
from .comment import JiraComment
from .common import (
    JiraIssueType,
    JiraPriority,
    JiraProject,
    JiraStatus,
    JiraStatusCategory,
    JiraUser,
    JiraVersion,
)
from .custom_field import CustomFieldKind, CustomFieldValue, classify_custom_field
from .issue import JiraIssue, JiraParentIssue
from .link import JiraIssueLink, JiraIssueLinkType, JiraLinkedIssue

__all__ = [
    "CustomFieldKind",
    "CustomFieldValue",
    "JiraComment",
    "JiraIssue",
    "JiraIssueLink",
    "JiraIssueLinkType",
    "JiraIssueType",
    "JiraLinkedIssue",
    "JiraParentIssue",
    "JiraPriority",
    "JiraProject",
    "JiraStatus",
    "JiraStatusCategory",
    "JiraUser",
    "JiraVersion",
    "adf_to_text",
    "classify_custom_field",
]
