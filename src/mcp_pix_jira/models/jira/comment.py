"""
JIRA comment models.
"""

from typing import Any

from ..base import ApiModel, as_dict, as_str
from ..constants import EMPTY_STRING
from .common import JiraUser


class JiraComment(ApiModel):
    """
    Model representing a JIRA issue comment.

    ``body`` is kept as returned by the API: a plain string (Server/DC and
    rendered fields) or an ADF document (Cloud).
    """

    author: JiraUser | None = None
    body: str | dict[str, Any] | None = None
    created: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "JiraComment":
        """
        Create a JiraComment from a JIRA API response.

        Args:
            data: The comment data from the JIRA API

        Returns:
            A JiraComment instance
        """
        data = as_dict(data)

        author = None
        if isinstance(data.get("author"), dict):
            author = JiraUser.from_api_response(data["author"])

        body = data.get("body")
        if not isinstance(body, str | dict):
            body = None

        return cls(
            author=author,
            body=body,
            created=as_str(data.get("created")),
        )
