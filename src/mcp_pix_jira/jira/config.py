"""Configuration module for JIRA API interactions."""

import re
from dataclasses import dataclass, field
from urllib.parse import urlparse

from ..logging_config import resolve_log_level
from ..utils.env import getenv_stripped, is_env_ssl_verify
from .constants import (
    CUSTOM_FIELD_PREFIX,
    CUSTOM_FIELDS_MODE_ALLOWLIST,
    CUSTOM_FIELDS_MODES,
    DEFAULT_CUSTOM_FIELD_LABELS,
)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
DEFAULT_TIMEOUT = 30


def is_valid_url(url: str | None) -> bool:
    """Return True for absolute http(s) URLs with a host."""
    if not url:
        return False
    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def is_valid_email(email: str | None) -> bool:
    return bool(email) and EMAIL_PATTERN.match(email) is not None


def parse_custom_field_labels(raw: str) -> dict[str, str]:
    """Parse ``customfield_1=Label,customfield_2=Other`` into a mapping.

    Raises:
        ValueError: If an entry is not ``customfield_<id>=<label>``
    """
    labels: dict[str, str] = {}
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        field_id, sep, label = entry.partition("=")
        field_id, label = field_id.strip(), label.strip()
        if not sep or not label or not field_id.startswith(CUSTOM_FIELD_PREFIX):
            raise ValueError(f"Invalid custom field mapping: '{entry}'")
        labels[field_id] = label
    return labels


@dataclass
class JiraConfig:
    """JIRA API configuration.

    Authenticates against JIRA Cloud with an account email and API token
    (HTTP Basic).
    """

    url: str  # Base URL for JIRA
    email: str  # Account email
    api_token: str  # API token
    project_key: str | None = None  # Default project key
    log_level: str = "info"
    custom_fields_mode: str = CUSTOM_FIELDS_MODE_ALLOWLIST
    custom_field_labels: dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_CUSTOM_FIELD_LABELS)
    )
    timeout: int = DEFAULT_TIMEOUT  # Seconds before a request is abandoned
    ssl_verify: bool = True

    @property
    def base_url(self) -> str:
        """The JIRA URL without a trailing slash."""
        return self.url.rstrip("/")

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        invalid: list[str] = []

        url = getenv_stripped("JIRA_BASE_URL")
        if not is_valid_url(url):
            invalid.append("JIRA_BASE_URL")

        email = getenv_stripped("JIRA_EMAIL")
        if not is_valid_email(email):
            invalid.append("JIRA_EMAIL")

        api_token = getenv_stripped("JIRA_API_TOKEN")
        if not api_token:
            invalid.append("JIRA_API_TOKEN")

        log_level = getenv_stripped("LOG_LEVEL", "info")
        try:
            resolve_log_level(log_level)
        except ValueError:
            invalid.append("LOG_LEVEL")

        custom_fields_mode = getenv_stripped(
            "JIRA_CUSTOM_FIELDS_MODE", CUSTOM_FIELDS_MODE_ALLOWLIST
        ).lower()
        if custom_fields_mode not in CUSTOM_FIELDS_MODES:
            invalid.append("JIRA_CUSTOM_FIELDS_MODE")

        custom_field_labels = dict(DEFAULT_CUSTOM_FIELD_LABELS)
        raw_labels = getenv_stripped("JIRA_CUSTOM_FIELDS")
        if raw_labels:
            try:
                custom_field_labels = parse_custom_field_labels(raw_labels)
            except ValueError:
                invalid.append("JIRA_CUSTOM_FIELDS")

        timeout = DEFAULT_TIMEOUT
        raw_timeout = getenv_stripped("JIRA_TIMEOUT")
        if raw_timeout:
            if raw_timeout.isdigit() and int(raw_timeout) > 0:
                timeout = int(raw_timeout)
            else:
                invalid.append("JIRA_TIMEOUT")

        if invalid:
            msg = (
                "Configuration validation failed. Missing or invalid fields: "
                f"{', '.join(invalid)}. Please check your .env file and ensure "
                "all required variables are set."
            )
            raise ValueError(msg)

        return cls(
            url=url,
            email=email,
            api_token=api_token,
            project_key=getenv_stripped("JIRA_PROJECT_KEY"),
            log_level=log_level,
            custom_fields_mode=custom_fields_mode,
            custom_field_labels=custom_field_labels,
            timeout=timeout,
            ssl_verify=is_env_ssl_verify("JIRA_SSL_VERIFY"),
        )
