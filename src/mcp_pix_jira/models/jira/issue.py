"""
JIRA issue models.

This module provides Pydantic models for JIRA issues.
"""

import logging
from collections.abc import Iterable
from typing import Any

from pydantic import Field

from ..base import ApiModel, as_dict, as_list, as_str
from ..constants import (
    BROWSE_PATH,
    CUSTOM_FIELD_PREFIX,
    DEVELOPMENT_FIELD_ID,
    EMPTY_STRING,
    ISSUE_API_PATH,
    JIRA_DEFAULT_KEY,
)
from .comment import JiraComment
from .common import (
    JiraIssueType,
    JiraPriority,
    JiraProject,
    JiraStatus,
    JiraUser,
    JiraVersion,
)
from .custom_field import CustomFieldValue, classify_custom_field
from .link import JiraIssueLink

logger = logging.getLogger("mcp-pix-jira.models.issue")


class JiraParentIssue(ApiModel):
    """The parent (epic or story) of an issue."""

    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING
    issue_type: JiraIssueType | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraParentIssue":
        data = as_dict(data)
        fields = as_dict(data.get("fields"))

        issue_type = None
        if isinstance(fields.get("issuetype"), dict):
            issue_type = JiraIssueType.from_api_response(fields["issuetype"])

        return cls(
            key=as_str(data.get("key"), JIRA_DEFAULT_KEY),
            summary=as_str(fields.get("summary")),
            issue_type=issue_type,
        )


class JiraIssue(ApiModel):
    """
    Model representing a JIRA issue.

    Known fields are decoded into typed models. Every ``customfield_*`` entry
    is classified once into a ``CustomFieldValue`` and kept under its raw
    identifier in ``custom_fields``.
    """

    key: str = JIRA_DEFAULT_KEY
    self_link: str = EMPTY_STRING
    summary: str = EMPTY_STRING
    # Plain string (Server/DC) or an ADF document (Cloud)
    description: str | dict[str, Any] | None = None
    status: JiraStatus | None = None
    issue_type: JiraIssueType | None = None
    priority: JiraPriority | None = None
    project: JiraProject | None = None
    reporter: JiraUser | None = None
    assignee: JiraUser | None = None
    parent: JiraParentIssue | None = None
    labels: list[str] = Field(default_factory=list)
    fix_versions: list[JiraVersion] = Field(default_factory=list)
    issue_links: list[JiraIssueLink] = Field(default_factory=list)
    comments: list[JiraComment] = Field(default_factory=list)
    comment_total: int = 0
    created: str = EMPTY_STRING
    updated: str = EMPTY_STRING
    custom_fields: dict[str, CustomFieldValue] = Field(default_factory=dict)
    base_url: str | None = None

    @property
    def browse_url(self) -> str:
        """
        URL of the issue in the JIRA web UI.

        Derived from the API self link; falls back to ``{base_url}/browse/{key}``
        when the response carried no self link.
        """
        if self.self_link:
            return self.self_link.replace(ISSUE_API_PATH, BROWSE_PATH)
        if self.base_url:
            return f"{self.base_url.rstrip('/')}{BROWSE_PATH}{self.key}"
        return EMPTY_STRING

    def get_custom_field(self, field_id: str) -> CustomFieldValue | None:
        return self.custom_fields.get(field_id)

    @classmethod
    def from_api_response(
        cls,
        data: dict[str, Any],
        base_url: str | None = None,
        opaque_fields: Iterable[str] = (DEVELOPMENT_FIELD_ID,),
        **kwargs: Any,
    ) -> "JiraIssue":
        """
        Create a JiraIssue from a JIRA API response.

        Args:
            data: The issue data from the JIRA API
            base_url: JIRA base URL, used for the browse link fallback
            opaque_fields: Custom field ids whose string values are
                development information blobs
            **kwargs: Ignored

        Returns:
            A JiraIssue instance
        """
        if not data or not isinstance(data, dict):
            logger.debug("Received non-dictionary issue data, returning default")
            return cls(base_url=base_url)

        fields = as_dict(data.get("fields"))

        description = fields.get("description")
        if not isinstance(description, str | dict):
            description = None

        assignee = None
        if isinstance(fields.get("assignee"), dict):
            assignee = JiraUser.from_api_response(fields["assignee"])

        reporter = None
        if isinstance(fields.get("reporter"), dict):
            reporter = JiraUser.from_api_response(fields["reporter"])

        status = None
        if isinstance(fields.get("status"), dict):
            status = JiraStatus.from_api_response(fields["status"])

        issue_type = None
        if isinstance(fields.get("issuetype"), dict):
            issue_type = JiraIssueType.from_api_response(fields["issuetype"])

        priority = None
        if isinstance(fields.get("priority"), dict):
            priority = JiraPriority.from_api_response(fields["priority"])

        project = None
        if isinstance(fields.get("project"), dict):
            project = JiraProject.from_api_response(fields["project"])

        parent = None
        if isinstance(fields.get("parent"), dict):
            parent = JiraParentIssue.from_api_response(fields["parent"])

        labels = [
            str(label) for label in as_list(fields.get("labels")) if label is not None
        ]
        fix_versions = [
            JiraVersion.from_api_response(version)
            for version in as_list(fields.get("fixVersions"))
            if isinstance(version, dict)
        ]
        issue_links = [
            JiraIssueLink.from_api_response(link)
            for link in as_list(fields.get("issuelinks"))
            if isinstance(link, dict)
        ]

        comment_data = as_dict(fields.get("comment"))
        comments = [
            JiraComment.from_api_response(comment)
            for comment in as_list(comment_data.get("comments"))
            if isinstance(comment, dict)
        ]
        total = comment_data.get("total")
        comment_total = total if isinstance(total, int) else len(comments)

        opaque = set(opaque_fields)
        custom_fields = {
            field_id: classify_custom_field(value, opaque=field_id in opaque)
            for field_id, value in fields.items()
            if field_id.startswith(CUSTOM_FIELD_PREFIX)
        }

        return cls(
            key=as_str(data.get("key"), JIRA_DEFAULT_KEY),
            self_link=as_str(data.get("self")),
            summary=as_str(fields.get("summary")),
            description=description,
            status=status,
            issue_type=issue_type,
            priority=priority,
            project=project,
            reporter=reporter,
            assignee=assignee,
            parent=parent,
            labels=labels,
            fix_versions=fix_versions,
            issue_links=issue_links,
            comments=comments,
            comment_total=comment_total,
            created=as_str(fields.get("created")),
            updated=as_str(fields.get("updated")),
            custom_fields=custom_fields,
            base_url=base_url,
        )
