"""Tests for the exception hierarchy."""

import pytest

from mcp_pix_jira.exceptions import (
    IssueKeyValidationError,
    JiraApiError,
    MCPPixJiraError,
)


def test_jira_api_error_attributes():
    cause = OSError("connection reset")
    error = JiraApiError("Failed to connect to JIRA.", None, cause=cause)

    assert isinstance(error, MCPPixJiraError)
    assert str(error) == "Failed to connect to JIRA."
    assert error.message == "Failed to connect to JIRA."
    assert error.status_code is None
    assert error.cause is cause


@pytest.mark.parametrize(
    ("status_code", "retryable"),
    [(None, False), (400, False), (404, False), (429, True), (500, True), (503, True)],
)
def test_is_retryable(status_code, retryable):
    assert JiraApiError("error", status_code).is_retryable is retryable


def test_repr():
    assert repr(JiraApiError("Not found", 404)) == (
        "JiraApiError(message='Not found', status_code=404)"
    )


def test_issue_key_validation_error_is_value_error():
    error = IssueKeyValidationError("Invalid issue key 'x'")
    assert isinstance(error, ValueError)
    assert isinstance(error, MCPPixJiraError)
