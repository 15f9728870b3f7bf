"""Call-site glue: validate requested custom fields, then build the typed set.

Creation flows that can afford the extra round trip use
``strict_validation(...)``; transitions usually pass
``LenientFieldValidation()`` and only get a warning.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .classify import build_custom_fields
from .createmeta import SchemaLookup, fetch_field_schema
from .models import CustomFieldSet, FieldSchema
from .validation import FieldValidation, LenientFieldValidation, StrictFieldValidation


def strict_validation(
    lookup: SchemaLookup,
    project: str,
    issue_type_id: str,
    issue_type_name: str | None = None,
) -> StrictFieldValidation:
    available = fetch_field_schema(lookup, project, issue_type_id)
    return StrictFieldValidation(available, issue_type_name or issue_type_id)


def prepare_custom_fields(
    requested: Mapping[str, str] | None,
    configured: Sequence[FieldSchema],
    validation: FieldValidation | None = None,
) -> CustomFieldSet | None:
    if not requested:
        return None
    filtered = (validation or LenientFieldValidation()).filter(requested, configured)
    return build_custom_fields(filtered, configured)


__all__ = ["prepare_custom_fields", "strict_validation"]
