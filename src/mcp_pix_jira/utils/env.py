"""Environment variable utility functions for MCP Pix JIRA."""

import os


def is_env_truthy(env_var_name: str, default: str = "") -> bool:
    """Check if environment variable is set to a standard truthy value.

    Considers 'true', '1', 'yes' as truthy values (case-insensitive).

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True if the environment variable is set to a truthy value, False otherwise
    """
    return os.getenv(env_var_name, default).lower() in ("true", "1", "yes")


def is_env_ssl_verify(env_var_name: str, default: str = "true") -> bool:
    """Check SSL verification setting with secure defaults.

    Defaults to true unless explicitly set to false values.

    Args:
        env_var_name: Name of the environment variable to check
        default: Default value if environment variable is not set

    Returns:
        True unless explicitly set to false values
    """
    return os.getenv(env_var_name, default).lower() not in ("false", "0", "no")


def getenv_stripped(env_var_name: str, default: str | None = None) -> str | None:
    """Return an environment variable with surrounding whitespace removed.

    Blank values are treated as unset so that ``FOO=`` in a .env file does
    not count as configured.
    """
    value = os.getenv(env_var_name)
    if value is None or not value.strip():
        return default
    return value.strip()
