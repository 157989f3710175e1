"""
JIRA issue link models.
"""

from typing import Any

from ..base import ApiModel, as_dict, as_str
from ..constants import EMPTY_STRING, JIRA_DEFAULT_KEY


class JiraIssueLinkType(ApiModel):
    name: str = EMPTY_STRING
    inward: str = "relates to"
    outward: str = "relates to"

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraIssueLinkType":
        data = as_dict(data)
        return cls(
            name=as_str(data.get("name")),
            inward=as_str(data.get("inward")) or "relates to",
            outward=as_str(data.get("outward")) or "relates to",
        )


class JiraLinkedIssue(ApiModel):
    """The issue on the other end of a link."""

    key: str = JIRA_DEFAULT_KEY
    summary: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraLinkedIssue":
        data = as_dict(data)
        fields = as_dict(data.get("fields"))
        return cls(
            key=as_str(data.get("key"), JIRA_DEFAULT_KEY),
            summary=as_str(fields.get("summary")),
        )


class JiraIssueLink(ApiModel):
    """
    Model representing a link between two issues.

    A link carries ``outward_issue`` when the current issue is the source and
    ``inward_issue`` when it is the target; JIRA may send both.
    """

    type: JiraIssueLinkType = JiraIssueLinkType()
    inward_issue: JiraLinkedIssue | None = None
    outward_issue: JiraLinkedIssue | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssueLink":
        data = as_dict(data)

        inward_issue = None
        if isinstance(data.get("inwardIssue"), dict):
            inward_issue = JiraLinkedIssue.from_api_response(data["inwardIssue"])

        outward_issue = None
        if isinstance(data.get("outwardIssue"), dict):
            outward_issue = JiraLinkedIssue.from_api_response(data["outwardIssue"])

        return cls(
            type=JiraIssueLinkType.from_api_response(data.get("type")),
            inward_issue=inward_issue,
            outward_issue=outward_issue,
        )
