from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp_pix_jira.jira.client import JiraClient
    from mcp_pix_jira.jira.config import JiraConfig


@dataclass(frozen=True)
class MainAppContext:
    """Context holding the JIRA configuration and client for the server lifetime."""

    jira_config: JiraConfig | None = None
    jira_client: JiraClient | None = None
