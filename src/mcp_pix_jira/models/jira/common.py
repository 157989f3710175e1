"""
Common JIRA entity models.

Small named objects embedded in issue fields: users, statuses, issue types,
priorities, projects and versions.
"""

from typing import Any

from ..base import ApiModel, as_dict, as_str
from ..constants import EMPTY_STRING, UNKNOWN


class JiraUser(ApiModel):
    """
    Model representing a JIRA user.
    """

    display_name: str = UNKNOWN

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraUser":
        """
        Create a JiraUser from a JIRA API response.

        Args:
            data: The user data from the JIRA API

        Returns:
            A JiraUser instance
        """
        if not data or not isinstance(data, dict):
            return cls()

        return cls(
            display_name=as_str(data.get("displayName"), UNKNOWN) or UNKNOWN,
        )


class JiraStatusCategory(ApiModel):
    name: str = UNKNOWN

    @classmethod
    def from_api_response(
        cls, data: dict[str, Any], **kwargs: Any
    ) -> "JiraStatusCategory":
        if not data or not isinstance(data, dict):
            return cls()
        return cls(
            name=as_str(data.get("name"), UNKNOWN) or UNKNOWN,
        )


class JiraStatus(ApiModel):
    """
    Model representing a JIRA issue status.
    """

    name: str = UNKNOWN
    category: JiraStatusCategory | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraStatus":
        if not data or not isinstance(data, dict):
            return cls()

        category = None
        if isinstance(data.get("statusCategory"), dict):
            category = JiraStatusCategory.from_api_response(data["statusCategory"])

        return cls(
            name=as_str(data.get("name"), UNKNOWN) or UNKNOWN,
            category=category,
        )


class JiraIssueType(ApiModel):
    name: str = UNKNOWN

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraIssueType":
        if not data or not isinstance(data, dict):
            return cls()
        return cls(
            name=as_str(data.get("name"), UNKNOWN) or UNKNOWN,
        )


class JiraPriority(ApiModel):
    name: str = UNKNOWN

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraPriority":
        if not data or not isinstance(data, dict):
            return cls()
        return cls(name=as_str(data.get("name"), UNKNOWN) or UNKNOWN)


class JiraProject(ApiModel):
    key: str = EMPTY_STRING
    name: str = UNKNOWN

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraProject":
        if not data or not isinstance(data, dict):
            return cls()
        return cls(
            key=as_str(data.get("key")),
            name=as_str(data.get("name"), UNKNOWN) or UNKNOWN,
        )


class JiraVersion(ApiModel):
    """
    Model representing a fix version.
    """

    name: str = EMPTY_STRING
    released: bool = False
    release_date: str | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraVersion":
        data = as_dict(data)
        release_date = data.get("releaseDate")
        return cls(
            name=as_str(data.get("name")),
            released=bool(data.get("released", False)),
            release_date=as_str(release_date) or None,
        )
