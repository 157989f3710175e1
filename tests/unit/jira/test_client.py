"""Tests for the JIRA REST client."""

import base64
import logging
from unittest.mock import patch

import pytest
import requests

from mcp_pix_jira.exceptions import JiraApiError
from mcp_pix_jira.jira.client import (
    JiraClient,
    build_basic_auth_header,
    extract_error_message,
)
from mcp_pix_jira.jira.constants import CONNECTION_ERROR_MESSAGE
from mcp_pix_jira.models.jira import JiraIssue
from tests.fixtures.jira_mocks import (
    JIRA_BASE_URL,
    MOCK_JIRA_ISSUE_RESPONSE,
    MOCK_SERVER_INFO_RESPONSE,
)


class TestJiraClientInit:
    """Test class for client construction."""

    def test_basic_auth_header(self):
        header = build_basic_auth_header("dev@example.com", "secret-token")
        expected = base64.b64encode(b"dev@example.com:secret-token").decode("ascii")
        assert header == f"Basic {expected}"

    def test_session_headers(self, jira_client):
        headers = jira_client.session.headers
        assert headers["Authorization"] == build_basic_auth_header(
            "dev@example.com", "secret-token"
        )
        assert headers["Accept"] == "application/json"

    def test_base_url_trailing_slash_is_stripped(self, jira_client):
        assert jira_client.base_url == JIRA_BASE_URL

    def test_custom_logger(self, jira_config):
        custom_logger = logging.getLogger("tests.jira.client")
        client = JiraClient(config=jira_config, logger=custom_logger)
        assert client.logger is custom_logger


class TestJiraClientRequests:
    """Test class for request building and response handling."""

    @patch("requests.Session.request")
    def test_get_issue_sends_fields_and_expand(
        self, mock_request, jira_client, make_response
    ):
        mock_request.return_value = make_response(200, MOCK_JIRA_ISSUE_RESPONSE)

        jira_client.get_issue(
            "PIX-1234", ["summary", "comment"], ["renderedFields"]
        )

        mock_request.assert_called_once_with(
            "GET",
            f"{JIRA_BASE_URL}/rest/api/3/issue/PIX-1234",
            params={"fields": "summary,comment", "expand": "renderedFields"},
            timeout=30,
            verify=True,
        )

    @patch("requests.Session.request")
    def test_empty_fields_and_expand_are_omitted(
        self, mock_request, jira_client, make_response
    ):
        mock_request.return_value = make_response(200, MOCK_JIRA_ISSUE_RESPONSE)

        jira_client.get_issue("PIX-1234", [], [])

        assert mock_request.call_args.kwargs["params"] is None

    @patch("requests.Session.request")
    def test_get_issue_returns_decoded_issue(
        self, mock_request, jira_client, make_response
    ):
        mock_request.return_value = make_response(200, MOCK_JIRA_ISSUE_RESPONSE)

        issue = jira_client.get_issue("PIX-1234")

        assert isinstance(issue, JiraIssue)
        assert issue.key == "PIX-1234"
        assert issue.base_url == JIRA_BASE_URL
        assert issue.get_custom_field("customfield_10000").display() == (
            "2 repositories, last updated 2024-03-05"
        )

    @patch("requests.Session.request")
    def test_get_issue_raw_returns_json(self, mock_request, jira_client, make_response):
        mock_request.return_value = make_response(200, MOCK_JIRA_ISSUE_RESPONSE)

        assert jira_client.get_issue_raw("PIX-1234") == MOCK_JIRA_ISSUE_RESPONSE

    @patch("requests.Session.request")
    def test_empty_body_decodes_to_default_issue(
        self, mock_request, jira_client, make_response
    ):
        mock_request.return_value = make_response(204)

        assert jira_client.get_issue_raw("PIX-1234") == {}

    @patch("requests.Session.request")
    def test_invalid_json_raises(self, mock_request, jira_client, make_response):
        mock_request.return_value = make_response(200, raw_text="<html>")

        with pytest.raises(JiraApiError) as excinfo:
            jira_client.get_issue("PIX-1234")

        assert excinfo.value.message == "JIRA returned an invalid response."
        assert excinfo.value.status_code == 200


class TestJiraClientErrors:
    """Test class for the mapping of failed calls to JiraApiError."""

    @pytest.mark.parametrize(
        ("status_code", "expected"),
        [
            (401, "Authentication failed. Please check your JIRA email and API token."),
            (
                403,
                "Access denied. You do not have permission to access this resource.",
            ),
            (404, "The requested JIRA issue was not found."),
            (429, "Rate limit exceeded. Please try again later."),
            (500, "JIRA service is currently unavailable. Please try again later."),
            (502, "JIRA service is currently unavailable. Please try again later."),
            (503, "JIRA service is currently unavailable. Please try again later."),
        ],
    )
    @patch("requests.Session.request")
    def test_known_status_codes(
        self, mock_request, status_code, expected, jira_client, make_response
    ):
        mock_request.return_value = make_response(
            status_code, {"errorMessages": ["raw server text"]}, reason="Error"
        )

        with pytest.raises(JiraApiError) as excinfo:
            jira_client.get_issue("PIX-1234")

        assert excinfo.value.message == expected
        assert excinfo.value.status_code == status_code

    @patch("requests.Session.request")
    def test_other_status_uses_error_messages(
        self, mock_request, jira_client, make_response
    ):
        mock_request.return_value = make_response(
            400,
            {"errorMessages": ["Field 'foo' does not exist", "Bad request"]},
            reason="Bad Request",
        )

        with pytest.raises(JiraApiError) as excinfo:
            jira_client.get_issue("PIX-1234")

        assert excinfo.value.message == "Field 'foo' does not exist, Bad request"
        assert excinfo.value.status_code == 400

    @patch("requests.Session.request")
    def test_connection_error(self, mock_request, jira_client):
        cause = requests.ConnectionError("Name or service not known")
        mock_request.side_effect = cause

        with pytest.raises(JiraApiError) as excinfo:
            jira_client.get_issue("PIX-1234")

        assert excinfo.value.message == CONNECTION_ERROR_MESSAGE
        assert excinfo.value.status_code is None
        assert excinfo.value.cause is cause
        assert excinfo.value.is_retryable is False

    @patch("requests.Session.request")
    def test_timeout_is_a_connection_error(self, mock_request, jira_client):
        mock_request.side_effect = requests.Timeout("read timed out")

        with pytest.raises(JiraApiError, match="Failed to connect to JIRA"):
            jira_client.get_issue("PIX-1234")


class TestExtractErrorMessage:
    def test_field_errors(self, make_response):
        response = make_response(
            400, {"errorMessages": [], "errors": {"summary": "is required"}}
        )
        assert extract_error_message(response) == "summary: is required"

    def test_reason_fallback(self, make_response):
        response = make_response(418, {"unexpected": True}, reason="I'm a teapot")
        assert extract_error_message(response) == "I'm a teapot"

    def test_non_json_body_falls_back_to_reason(self, make_response):
        response = make_response(400, raw_text="oops", reason="Bad Request")
        assert extract_error_message(response) == "Bad Request"

    def test_status_fallback_without_reason(self, make_response):
        response = make_response(418, raw_text="oops", reason="")
        assert (
            extract_error_message(response)
            == "JIRA API request failed with status 418"
        )


class TestConnection:
    @patch("requests.Session.request")
    def test_connection_success(self, mock_request, jira_client, make_response):
        mock_request.return_value = make_response(200, MOCK_SERVER_INFO_RESPONSE)

        assert jira_client.test_connection() is True
        assert mock_request.call_args.args[1] == f"{JIRA_BASE_URL}/rest/api/3/serverInfo"

    @patch("requests.Session.request")
    def test_connection_failure_is_reraised(
        self, mock_request, jira_client, make_response
    ):
        mock_request.return_value = make_response(401, reason="Unauthorized")

        with pytest.raises(JiraApiError, match="Authentication failed") as excinfo:
            jira_client.test_connection()

        assert excinfo.value.status_code == 401
