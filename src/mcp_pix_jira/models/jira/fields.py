"""
Extraction of display values from JIRA field payloads.

Custom fields have no fixed schema: a value can be a scalar, a named object
(``{"value": ...}`` or ``{"name": ...}``), a list of those, or an opaque
string such as the development information field. Every function here is
total: unexpected input yields ``None`` (or a generic fallback), never an
exception.
"""

import json
import logging
import re
from typing import Any

from ...utils.date import format_date

logger = logging.getLogger("mcp-pix-jira.models.fields")

DEVELOPMENT_INFO_FALLBACK = "Development info available (view in JIRA)"

# repository={count=2, dataType=repository} or "repository":{"count":2
REPOSITORY_COUNT_PATTERN = re.compile(
    r'repository\s*=\s*\{\s*count\s*=\s*(\d+)|"repository"\s*:\s*\{\s*"count"\s*:\s*(\d+)'
)
# json={...} embedded in the field string
JSON_ASSIGNMENT_PATTERN = re.compile(r"json\s*=\s*(?=\{)")
# first JSON object when the field is the bare object
JSON_OBJECT_START_PATTERN = re.compile(r'\{\s*"')


def scalar_to_str(value: Any) -> str | None:
    """Stringify str, int, float and bool (as true/false); None otherwise."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str | int | float):
        return str(value) or None
    return None


def extract_scalar_or_named_value(value: Any) -> str | None:
    """
    Extract a display string from a scalar, named object or list.

    Objects prefer their ``value`` property, then ``name``. Lists are
    delegated to :func:`extract_array_value`.

    Args:
        value: Raw field value

    Returns:
        The display string, or None when nothing can be extracted
    """
    scalar = scalar_to_str(value)
    if scalar is not None:
        return scalar

    if isinstance(value, dict):
        for key in ("value", "name"):
            extracted = scalar_to_str(value.get(key))
            if extracted:
                return extracted
        return None

    if isinstance(value, list | tuple):
        return extract_array_value(value)

    return None


def extract_array_items(values: Any) -> list[str]:
    """Extract the display string of each element, dropping empty results."""
    if not isinstance(values, list | tuple):
        return []

    items = []
    for item in values:
        # nested lists are not flattened
        if isinstance(item, list | tuple):
            continue
        text = extract_scalar_or_named_value(item)
        if text:
            items.append(text)
    return items


def extract_array_value(values: Any) -> str | None:
    """
    Join the display strings of a multi-value field.

    Args:
        values: List of named objects or scalars

    Returns:
        Comma-separated values in input order, or None if none are extractable
    """
    items = extract_array_items(values)
    return ", ".join(items) if items else None


def is_development_info(raw: Any) -> bool:
    """True if ``raw`` looks like the string form of the development field."""
    if not isinstance(raw, str):
        return False
    return "cachedValue" in raw or REPOSITORY_COUNT_PATTERN.search(raw) is not None


def _pluralize_repositories(count: int) -> str:
    return f"{count} {'repository' if count == 1 else 'repositories'}"


def _embedded_json_start(raw: str) -> int | None:
    """Index of the embedded JSON object, after ``json=`` when present."""
    assignment = JSON_ASSIGNMENT_PATTERN.search(raw)
    if assignment:
        return assignment.end()
    start = JSON_OBJECT_START_PATTERN.search(raw)
    return start.start() if start else None


def extract_development_summary(raw: Any) -> str | None:
    """
    Summarize the development information field.

    The field is a string embedding a repository count and/or a JSON object
    with ``cachedValue.summary.repository.overall.{count,lastUpdated}``.

    Args:
        raw: Raw development field value

    Returns:
        ``"N repositories, last updated YYYY-MM-DD"`` style text, a generic
        fallback when the embedded JSON cannot be read, or None when the
        string carries no development data
    """
    if not isinstance(raw, str) or not raw:
        return None

    count: int | None = None
    last_updated: str | None = None

    count_match = REPOSITORY_COUNT_PATTERN.search(raw)
    if count_match:
        count = int(count_match.group(1) or count_match.group(2))

    if '"cachedValue"' in raw:
        try:
            start = _embedded_json_start(raw)
            if start is None:
                raise ValueError("no JSON object in development field")
            payload, _ = json.JSONDecoder().raw_decode(raw, start)
            overall = payload["cachedValue"]["summary"]["repository"]["overall"]
            count = int(overall["count"])
            last_updated = overall.get("lastUpdated")
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            logger.debug(f"Could not read embedded development JSON: {e}")
            return DEVELOPMENT_INFO_FALLBACK

    if not count:
        return None

    summary = _pluralize_repositories(count)
    if isinstance(last_updated, str) and last_updated:
        summary += f", last updated {format_date(last_updated)}"
    return summary
