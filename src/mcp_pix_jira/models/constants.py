"""
Constants and default values for model classes.
"""

EMPTY_STRING = ""
UNKNOWN = "Unknown"
UNASSIGNED = "Unassigned"

JIRA_DEFAULT_KEY = "UNKNOWN-0"

CUSTOM_FIELD_PREFIX = "customfield_"

# self link -> browse URL substitution
ISSUE_API_PATH = "/rest/api/3/issue/"
BROWSE_PATH = "/browse/"

# Development information field of the Pix JIRA instance; its string value
# embeds a serialized summary of branches and pull requests
DEVELOPMENT_FIELD_ID = "customfield_10000"
