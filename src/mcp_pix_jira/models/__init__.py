"""
Pydantic models for JIRA API responses.
"""

from .base import ApiModel
from .jira import (
    CustomFieldKind,
    CustomFieldValue,
    JiraComment,
    JiraIssue,
    JiraIssueLink,
    JiraIssueLinkType,
    JiraIssueType,
    JiraLinkedIssue,
    JiraParentIssue,
    JiraPriority,
    JiraProject,
    JiraStatus,
    JiraStatusCategory,
    JiraUser,
    JiraVersion,
)

__all__ = [
    "ApiModel",
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
]
