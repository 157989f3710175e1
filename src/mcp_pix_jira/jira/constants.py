"""Constants shared by the JIRA client, formatter and tools."""

from ..models.constants import (
    BROWSE_PATH,
    CUSTOM_FIELD_PREFIX,
    DEVELOPMENT_FIELD_ID,
    ISSUE_API_PATH,
)

ISSUE_KEY_PATTERN = r"^[A-Z]+-\d+$"

# Asks JIRA for every custom field in a single fields parameter
CUSTOM_FIELD_WILDCARD = f"{CUSTOM_FIELD_PREFIX}*"

ISSUE_ENDPOINT = ISSUE_API_PATH
SERVER_INFO_ENDPOINT = "/rest/api/3/serverInfo"

STANDARD_ISSUE_FIELDS: tuple[str, ...] = (
    "summary",
    "description",
    "status",
    "assignee",
    "reporter",
    "priority",
    "created",
    "updated",
    "labels",
    "fixVersions",
    "issuetype",
    "project",
    "parent",
    "issuelinks",
    CUSTOM_FIELD_WILDCARD,
)

ANALYSIS_FIELDS: tuple[str, ...] = (
    "summary",
    "description",
    "status",
    "assignee",
    "priority",
    "labels",
    "issuetype",
    "parent",
    "issuelinks",
    CUSTOM_FIELD_WILDCARD,
)

COMMENT_FIELD = "comment"
RENDERED_FIELDS_EXPAND = "renderedFields"

RECENT_COMMENTS_LIMIT = 3

CUSTOM_FIELDS_MODE_ALLOWLIST = "allowlist"
CUSTOM_FIELDS_MODE_GENERIC = "generic"
CUSTOM_FIELDS_MODES = (CUSTOM_FIELDS_MODE_ALLOWLIST, CUSTOM_FIELDS_MODE_GENERIC)

# Custom field identifiers of the Pix JIRA instance and their display labels
DEFAULT_CUSTOM_FIELD_LABELS: dict[str, str] = {
    "customfield_10253": "Equipe Pix",
    "customfield_10117": "Appli Pix",
    DEVELOPMENT_FIELD_ID: "Development",
    "customfield_10177": "Période de résolution",
}

CONNECTION_ERROR_MESSAGE = (
    "Failed to connect to JIRA. Please check your network connection and JIRA URL."
)
SERVICE_UNAVAILABLE_MESSAGE = (
    "JIRA service is currently unavailable. Please try again later."
)
HTTP_ERROR_MESSAGES: dict[int, str] = {
    401: "Authentication failed. Please check your JIRA email and API token.",
    403: "Access denied. You do not have permission to access this resource.",
    404: "The requested JIRA issue was not found.",
    429: "Rate limit exceeded. Please try again later.",
    500: SERVICE_UNAVAILABLE_MESSAGE,
    502: SERVICE_UNAVAILABLE_MESSAGE,
    503: SERVICE_UNAVAILABLE_MESSAGE,
}
