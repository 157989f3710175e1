class MCPPixJiraError(Exception):
    """Base exception for MCP Pix JIRA errors."""

    pass


class JiraApiError(MCPPixJiraError):
    """Raised by the JIRA client for every failed REST call.

    ``message`` is user-facing and safe to return to the caller. ``cause``
    keeps the underlying transport exception for diagnostics only.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause

    @property
    def is_retryable(self) -> bool:
        """True for rate limiting and upstream unavailability (429 and 5xx)."""
        if self.status_code is None:
            return False
        return self.status_code == 429 or self.status_code >= 500

    def __repr__(self) -> str:
        return f"JiraApiError(message={self.message!r}, status_code={self.status_code!r})"


class IssueKeyValidationError(MCPPixJiraError, ValueError):
    """Raised when an issue key does not match PROJECT-NUMBER."""

    pass
