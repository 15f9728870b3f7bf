"""Field schema model and typed custom-field values.

A ``FieldSchema`` describes one custom field, either as configured locally or
as reported by the remote create-metadata endpoint. Raw user strings are
classified against a schema into one of the ``TypedValue`` variants below; each
variant knows its own wire representation via ``to_json``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

# Integral numbers at or above this magnitude keep float (exponent) notation.
_EXPONENT_THRESHOLD = 1e21


class DataType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    OPTION = "option"
    PROJECT = "project"
    ARRAY = "array"

    @classmethod
    def parse(cls, raw: str | None) -> DataType | None:
        """Return the matching member, or None for unknown/absent types."""
        if not raw:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


def normalize_identifier(name: str) -> str:
    """Lowercase, trimmed, whitespace-to-hyphen form used for matching."""
    return name.strip().lower().replace(" ", "-")


@dataclass(frozen=True)
class FieldSchema:
    name: str
    key: str
    data_type: str = DataType.STRING.value
    item_type: str | None = None

    @property
    def identifier(self) -> str:
        return normalize_identifier(self.name)

    @property
    def kind(self) -> DataType | None:
        return DataType.parse(self.data_type)

    @property
    def is_custom(self) -> bool:
        return self.key.startswith("customfield_")


@dataclass(frozen=True)
class Scalar:
    value: str

    def to_json(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Number:
    value: float

    def to_json(self) -> Any:
        # Integral values go out as integers so "5" is sent as 5, not 5.0.
        if self.value.is_integer() and abs(self.value) < _EXPONENT_THRESHOLD:
            return int(self.value)
        return self.value


@dataclass(frozen=True)
class Option:
    value: str

    def to_json(self) -> Any:
        return {"value": self.value}


@dataclass(frozen=True)
class ProjectRef:
    value: str

    def to_json(self) -> Any:
        return {"value": self.value}


@dataclass(frozen=True)
class OptionList:
    items: tuple[Option, ...]

    def to_json(self) -> Any:
        return [item.to_json() for item in self.items]


@dataclass(frozen=True)
class StringList:
    items: tuple[str, ...]

    def to_json(self) -> Any:
        return list(self.items)


TypedValue = Scalar | Number | Option | ProjectRef | OptionList | StringList

# Remote key -> typed value. Built per request, never shared.
CustomFieldSet = dict[str, TypedValue]


__all__ = [
    "CustomFieldSet",
    "DataType",
    "FieldSchema",
    "Number",
    "Option",
    "OptionList",
    "ProjectRef",
    "Scalar",
    "StringList",
    "TypedValue",
    "normalize_identifier",
]
