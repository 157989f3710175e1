"""
Decoded custom field values.

Raw custom field JSON is classified once, when the issue is decoded, so the
formatter and the prompt builder never inspect raw shapes themselves.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .fields import (
    extract_array_items,
    extract_development_summary,
    extract_scalar_or_named_value,
    is_development_info,
    scalar_to_str,
)


class CustomFieldKind(str, Enum):
    ABSENT = "absent"
    SCALAR = "scalar"
    NAMED = "named"
    LIST = "list"
    OPAQUE = "opaque"


@dataclass(frozen=True)
class CustomFieldValue:
    """A custom field value tagged with the shape it was decoded from."""

    kind: CustomFieldKind
    text: str | None = None
    items: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_absent(self) -> bool:
        return self.display() is None

    def display(self) -> str | None:
        """Return the display string, or None when there is nothing to show."""
        if self.kind is CustomFieldKind.LIST:
            return ", ".join(self.items) if self.items else None
        if self.kind is CustomFieldKind.OPAQUE:
            return extract_development_summary(self.text)
        return self.text or None


ABSENT_VALUE = CustomFieldValue(CustomFieldKind.ABSENT)


def classify_custom_field(value: Any, opaque: bool = False) -> CustomFieldValue:
    """
    Classify a raw custom field value.

    Args:
        value: Raw JSON value of the field
        opaque: Treat string values as development information blobs

    Returns:
        The decoded value; unrecognized shapes are ``ABSENT``
    """
    if value is None:
        return ABSENT_VALUE

    if isinstance(value, str) and (opaque or is_development_info(value)):
        return CustomFieldValue(CustomFieldKind.OPAQUE, text=value)

    scalar = scalar_to_str(value)
    if scalar is not None:
        return CustomFieldValue(CustomFieldKind.SCALAR, text=scalar)

    if isinstance(value, dict):
        text = extract_scalar_or_named_value(value)
        if text is None:
            return ABSENT_VALUE
        return CustomFieldValue(CustomFieldKind.NAMED, text=text)

    if isinstance(value, list | tuple):
        return CustomFieldValue(
            CustomFieldKind.LIST, items=tuple(extract_array_items(value))
        )

    return ABSENT_VALUE
