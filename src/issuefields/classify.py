"""Classification of raw custom-field strings into typed values.

Both functions here are pure: they never raise for bad user input and never
log. Unknown names are dropped by ``build_custom_fields``; reporting them is
the job of :mod:`issuefields.validation`.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping

from .models import (
    CustomFieldSet,
    DataType,
    FieldSchema,
    Number,
    Option,
    OptionList,
    ProjectRef,
    Scalar,
    StringList,
    TypedValue,
)

_DECIMAL_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def _split_list(raw: str) -> list[str]:
    return [piece.strip() for piece in raw.strip().split(",")]


def _parse_number(raw: str) -> float | None:
    if not _DECIMAL_RE.fullmatch(raw):
        return None
    value = float(raw)
    if not math.isfinite(value):
        return None
    return value


def classify(raw: str, schema: FieldSchema) -> TypedValue:
    """Turn ``raw`` into the typed value dictated by ``schema``.

    A number that fails to parse stays a :class:`Scalar` holding the original
    text; unknown data types are treated as plain strings.
    """
    kind = schema.kind
    if kind is DataType.OPTION:
        return Option(raw)
    if kind is DataType.PROJECT:
        return ProjectRef(raw)
    if kind is DataType.ARRAY:
        pieces = _split_list(raw)
        if DataType.parse(schema.item_type) is DataType.OPTION:
            return OptionList(tuple(Option(p) for p in pieces))
        return StringList(tuple(pieces))
    if kind is DataType.NUMBER:
        number = _parse_number(raw)
        if number is None:
            return Scalar(raw)
        return Number(number)
    return Scalar(raw)


def build_custom_fields(
    requested: Mapping[str, str] | None,
    configured: Iterable[FieldSchema] | None,
) -> CustomFieldSet | None:
    """Map requested ``name=value`` pairs onto configured remote keys.

    Returns None when there is nothing to send so callers omit the custom
    fields entirely instead of emitting an empty object.
    """
    schemas = list(configured or [])
    if not requested or not schemas:
        return None

    out: CustomFieldSet = {}
    for name, raw in requested.items():
        wanted = name.lower()
        match = next((s for s in schemas if s.identifier == wanted), None)
        if match is None:
            continue
        out[match.key] = classify(raw, match)
    return out


__all__ = ["build_custom_fields", "classify"]
