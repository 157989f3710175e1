"""Base client module for JIRA API interactions."""

import base64
import logging
from collections.abc import Iterable
from typing import Any

import requests

from ..exceptions import JiraApiError
from ..models.jira import JiraIssue
from .config import JiraConfig
from .constants import (
    CONNECTION_ERROR_MESSAGE,
    DEVELOPMENT_FIELD_ID,
    HTTP_ERROR_MESSAGES,
    ISSUE_ENDPOINT,
    SERVER_INFO_ENDPOINT,
)

DEFAULT_LOGGER_NAME = "mcp-pix-jira.client"


def build_basic_auth_header(email: str, api_token: str) -> str:
    """Return the ``Authorization`` header value for email/API token auth."""
    credentials = base64.b64encode(f"{email}:{api_token}".encode()).decode("ascii")
    return f"Basic {credentials}"


def extract_error_message(response: requests.Response) -> str:
    """
    Pull a readable message out of a failed JIRA response.

    Tries ``errorMessages``, then the field-level ``errors`` mapping, then the
    HTTP reason phrase. Never raises.
    """
    fallback = (
        response.reason
        or f"JIRA API request failed with status {response.status_code}"
    )
    try:
        body = response.json()
    except ValueError:
        return fallback

    if not isinstance(body, dict):
        return fallback

    error_messages = body.get("errorMessages")
    if isinstance(error_messages, list):
        messages = [str(message) for message in error_messages if message]
        if messages:
            return ", ".join(messages)

    errors = body.get("errors")
    if isinstance(errors, dict) and errors:
        return ", ".join(f"{field}: {message}" for field, message in errors.items())

    return fallback


def map_error_message(status_code: int, extracted: str) -> str:
    """Select the user-facing message for an HTTP status."""
    return HTTP_ERROR_MESSAGES.get(status_code, extracted)


class JiraClient:
    """Client for the JIRA Cloud REST API (v3)."""

    def __init__(
        self,
        config: JiraConfig | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the JIRA client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)
            logger: Logger for request diagnostics (defaults to the module logger)

        Raises:
            ValueError: If configuration is invalid or required credentials are missing
        """
        self.config = config or JiraConfig.from_env()
        self.logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)
        self.base_url = self.config.base_url

        self.session = requests.Session()
        self.session.headers.update(
            {
                "Authorization": build_basic_auth_header(
                    self.config.email, self.config.api_token
                ),
                "Accept": "application/json",
            }
        )

    def _request(self, endpoint: str, params: dict[str, str] | None = None) -> Any:
        """Make an authenticated GET request to the JIRA API.

        Args:
            endpoint: API endpoint path
            params: Query parameters as a dictionary

        Returns:
            API response parsed as JSON, or None if no content

        Raises:
            JiraApiError: If the request fails or JIRA answers with a non-2xx status
        """
        url = f"{self.base_url}{endpoint}"
        self.logger.debug(f"GET {url} params={params or {}}")

        try:
            response = self.session.request(
                "GET",
                url,
                params=params or None,
                timeout=self.config.timeout,
                verify=self.config.ssl_verify,
            )
        except requests.RequestException as e:
            self.logger.error(f"JIRA request to {url} failed: {e}")
            raise JiraApiError(CONNECTION_ERROR_MESSAGE, None, cause=e) from e

        if not 200 <= response.status_code < 300:
            extracted = extract_error_message(response)
            self.logger.error(
                f"JIRA API error {response.status_code} for {url}: {extracted}"
            )
            raise JiraApiError(
                map_error_message(response.status_code, extracted),
                response.status_code,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            self.logger.error(f"Invalid JSON in JIRA response from {url}: {e}")
            raise JiraApiError(
                "JIRA returned an invalid response.", response.status_code, cause=e
            ) from e

    @staticmethod
    def _build_issue_params(
        fields: Iterable[str] | None, expand: Iterable[str] | None
    ) -> dict[str, str]:
        params: dict[str, str] = {}
        fields = list(fields or [])
        expand = list(expand or [])
        if fields:
            params["fields"] = ",".join(fields)
        if expand:
            params["expand"] = ",".join(expand)
        return params

    def get_issue_raw(
        self,
        issue_key: str,
        fields: Iterable[str] | None = None,
        expand: Iterable[str] | None = None,
    ) -> dict[str, Any]:
        """Fetch an issue and return the undecoded JSON."""
        data = self._request(
            f"{ISSUE_ENDPOINT}{issue_key}", self._build_issue_params(fields, expand)
        )
        return data if isinstance(data, dict) else {}

    def get_issue(
        self,
        issue_key: str,
        fields: Iterable[str] | None = None,
        expand: Iterable[str] | None = None,
    ) -> JiraIssue:
        """
        Fetch a single issue.

        Args:
            issue_key: The issue key (e.g. PROJ-123)
            fields: Field names to request; ``customfield_*`` selects all
                custom fields
            expand: Expansions to request (e.g. renderedFields)

        Returns:
            The decoded issue

        Raises:
            JiraApiError: If the request fails
        """
        data = self.get_issue_raw(issue_key, fields, expand)
        return JiraIssue.from_api_response(
            data, base_url=self.base_url, opaque_fields=(DEVELOPMENT_FIELD_ID,)
        )

    def test_connection(self) -> bool:
        """
        Check credentials and base URL against the server info endpoint.

        Returns:
            True when JIRA answered successfully

        Raises:
            JiraApiError: Unchanged from the failed request
        """
        try:
            self._request(SERVER_INFO_ENDPOINT)
        except JiraApiError as e:
            self.logger.error(f"JIRA connection test failed: {e.message}")
            raise
        self.logger.info(f"Connected to JIRA at {self.base_url}")
        return True
