"""Parsing of the remote create-metadata document into field schemas.

The ``fields`` member of an issue type comes in two shapes depending on the
server: an object keyed by field id, or a list of field objects that carry
their own ``fieldId``. Both are accepted.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from .errors import FieldSchemaLookupError, IssueFieldsError
from .models import FieldSchema

SchemaLookup = Callable[[str, str], list[FieldSchema]]


def parse_field(field_id: str | None, raw: dict[str, Any]) -> FieldSchema:
    schema = raw.get("schema") or {}
    key = raw.get("key") or raw.get("fieldId") or field_id or ""
    return FieldSchema(
        name=str(raw.get("name") or ""),
        key=str(key),
        data_type=str(schema.get("type") or ""),
        item_type=schema.get("items"),
    )


def _iter_raw_fields(raw_fields: Any) -> Iterable[tuple[str | None, dict[str, Any]]]:
    if isinstance(raw_fields, dict):
        for fid, meta in raw_fields.items():
            if isinstance(meta, dict):
                yield str(fid), meta
    elif isinstance(raw_fields, list):
        for meta in raw_fields:
            if isinstance(meta, dict):
                yield meta.get("fieldId"), meta


def parse_issue_type_fields(issue_type: dict[str, Any]) -> list[FieldSchema]:
    return [parse_field(fid, meta) for fid, meta in _iter_raw_fields(issue_type.get("fields"))]


def issue_type_fields(
    document: dict[str, Any], project: str, issue_type_id: str
) -> list[FieldSchema]:
    """Pick the fields of ``issue_type_id`` out of a createmeta response."""
    projects = document.get("projects") or []
    if not projects:
        raise IssueFieldsError(f"no project found for key: {project}")
    for issue_type in projects[0].get("issuetypes") or []:
        if str(issue_type.get("id")) == str(issue_type_id):
            return parse_issue_type_fields(issue_type)
    raise IssueFieldsError(
        f"issue type with ID {issue_type_id} not found in project {project}"
    )


def fetch_field_schema(
    lookup: SchemaLookup, project: str, issue_type_id: str
) -> list[FieldSchema]:
    """Run ``lookup`` and wrap any failure with the project and issue type."""
    try:
        return lookup(project, issue_type_id)
    except Exception as exc:
        raise FieldSchemaLookupError(project, issue_type_id, str(exc)) from exc


__all__ = [
    "SchemaLookup",
    "fetch_field_schema",
    "issue_type_fields",
    "parse_field",
    "parse_issue_type_fields",
]
