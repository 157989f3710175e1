"""
Test fixtures for JIRA unit tests.
"""

import json
from typing import Any
from unittest.mock import MagicMock

import pytest

from mcp_pix_jira.jira.client import JiraClient
from mcp_pix_jira.jira.config import JiraConfig
from tests.fixtures.jira_mocks import JIRA_BASE_URL


@pytest.fixture
def jira_config():
    """A valid JiraConfig pointing at the mock Pix instance."""
    return JiraConfig(
        url=f"{JIRA_BASE_URL}/",
        email="dev@example.com",
        api_token="secret-token",
    )


@pytest.fixture
def jira_client(jira_config):
    return JiraClient(config=jira_config)


@pytest.fixture
def make_response():
    """
    Factory for fake ``requests.Response`` objects.

    Example:
        response = make_response(404, {"errorMessages": ["Issue does not exist"]})
    """

    def _make(
        status_code: int = 200,
        body: Any = None,
        reason: str | None = "OK",
        raw_text: str | None = None,
    ) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.reason = reason
        if raw_text is not None:
            response.content = raw_text.encode("utf-8")
            response.json.side_effect = ValueError("No JSON object could be decoded")
        elif body is None:
            response.content = b""
            response.json.side_effect = ValueError("No JSON object could be decoded")
        else:
            response.content = json.dumps(body).encode("utf-8")
            response.json.return_value = body
        return response

    return _make
