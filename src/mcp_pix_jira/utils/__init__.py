"""
Utility functions for the MCP Pix JIRA integration.
"""

from .date import format_date, format_datetime, parse_date
from .env import getenv_stripped, is_env_ssl_verify, is_env_truthy

__all__ = [
    "format_date",
    "format_datetime",
    "getenv_stripped",
    "is_env_ssl_verify",
    "is_env_truthy",
    "parse_date",
]
