"""Utility functions for JIRA operations."""

import re

from ..exceptions import IssueKeyValidationError
from .constants import COMMENT_FIELD, ISSUE_KEY_PATTERN, RENDERED_FIELDS_EXPAND

ISSUE_KEY_RE = re.compile(ISSUE_KEY_PATTERN)


def normalize_issue_key(issue_key: str) -> str:
    """Trim whitespace and upper-case an issue key."""
    return issue_key.strip().upper()


def validate_issue_key(issue_key: str) -> str:
    """
    Check that an issue key looks like ``PROJECT-123``.

    Args:
        issue_key: The key as given by the caller, before normalization

    Returns:
        The key unchanged

    Raises:
        IssueKeyValidationError: If the key does not match the pattern
    """
    if not isinstance(issue_key, str) or not ISSUE_KEY_RE.fullmatch(issue_key):
        raise IssueKeyValidationError(
            f"Invalid issue key '{issue_key}'. "
            "Issue key must be in format: PROJECT-NUMBER (e.g., PROJ-1234)"
        )
    return issue_key


def build_fetch_options(
    base_fields: tuple[str, ...], include_comments: bool
) -> tuple[list[str], list[str]]:
    """
    Build the ``fields`` and ``expand`` lists for an issue fetch.

    Comments are only requested when asked for, together with rendered fields.
    """
    fields = list(base_fields)
    expand: list[str] = []
    if include_comments:
        fields.append(COMMENT_FIELD)
        expand.append(RENDERED_FIELDS_EXPAND)
    return fields, expand
