"""
Base models for JIRA API payloads.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound="ApiModel")


class ApiModel(BaseModel):
    """
    Base model for objects decoded from JIRA REST responses.

    Subclasses implement ``from_api_response`` to turn the raw JSON into a
    model. Decoding is lenient: missing or malformed values fall back to
    defaults instead of raising.
    """

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_api_response(cls: type[T], data: dict[str, Any], **kwargs: Any) -> T:
        """
        Create a model instance from an API response.

        Args:
            data: The raw API response data
            **kwargs: Additional context needed for conversion

        Returns:
            An instance of the model
        """
        raise NotImplementedError("Subclasses must implement from_api_response")


def as_dict(value: Any) -> dict[str, Any]:
    """Return ``value`` if it is a mapping, else an empty dict."""
    return value if isinstance(value, dict) else {}


def as_list(value: Any) -> list[Any]:
    """Return ``value`` if it is a list, else an empty list."""
    return value if isinstance(value, list) else []


def as_str(value: Any, default: str = "") -> str:
    """Stringify scalars; anything else yields ``default``."""
    if value is None or isinstance(value, dict | list):
        return default
    return str(value)
