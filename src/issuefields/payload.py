"""Request payload marshaling.

Static request fields (assignee, resolution, summary, ...) and the typed
custom-field set are merged into one flat ``fields`` object: static fields are
emitted first, skipping anything unset, then custom fields are laid over them
as siblings. With no custom fields the merge is a no-op.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from .models import CustomFieldSet

INSTALLATION_CLOUD = "cloud"
INSTALLATION_LOCAL = "local"


class StaticFields(Protocol):  # pragma: no cover - interface only
    def to_fields(self) -> dict[str, Any]: ...


def merge_fields(
    static: StaticFields | None, custom: CustomFieldSet | None
) -> dict[str, Any]:
    """Static fields first, then custom fields (custom wins on collision)."""
    merged: dict[str, Any] = dict(static.to_fields()) if static is not None else {}
    for key, value in (custom or {}).items():
        merged[key] = value.to_json()
    return merged


def dumps(document: Mapping[str, Any]) -> bytes:
    return json.dumps(document, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def marshal_fields(static: StaticFields | None, custom: CustomFieldSet | None) -> bytes:
    return dumps(merge_fields(static, custom))


def _named(value: str | None) -> dict[str, str] | None:
    return {"name": value} if value else None


def _named_list(values: list[str]) -> list[dict[str, str]]:
    return [{"name": v} for v in values if v]


def _user_ref(user: str | None, installation: str) -> dict[str, str] | None:
    if not user:
        return None
    if installation == INSTALLATION_LOCAL:
        return {"name": user}
    return {"accountId": user}


@dataclass
class TransitionFields:
    assignee: str | None = None
    resolution: str | None = None

    def to_fields(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.assignee is not None:
            out["assignee"] = {"name": self.assignee}
        if self.resolution is not None:
            out["resolution"] = {"name": self.resolution}
        return out


@dataclass
class TransitionRequest:
    """Body of ``POST /issue/{key}/transitions``."""

    transition_id: str
    transition_name: str
    fields: TransitionFields | None = None
    custom_fields: CustomFieldSet | None = None
    comment: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.comment:
            payload["update"] = {"comment": [{"add": {"body": self.comment}}]}
        merged = merge_fields(self.fields, self.custom_fields)
        if merged:
            payload["fields"] = merged
        payload["transition"] = {"id": self.transition_id, "name": self.transition_name}
        return payload

    def to_json(self) -> bytes:
        return dumps(self.to_payload())


@dataclass
class CreateFields:
    """Well-known fields of an issue creation request."""

    project: str
    issue_type: str
    summary: str
    body: str | None = None
    parent: str | None = None
    priority: str | None = None
    reporter: str | None = None
    assignee: str | None = None
    labels: list[str] = field(default_factory=list)
    components: list[str] = field(default_factory=list)
    fix_versions: list[str] = field(default_factory=list)
    affects_versions: list[str] = field(default_factory=list)
    original_estimate: str | None = None
    epic_name: str | None = None
    epic_name_field: str | None = None
    installation: str = INSTALLATION_CLOUD

    def to_fields(self) -> dict[str, Any]:
        candidates: list[tuple[str, Any]] = [
            ("project", {"key": self.project}),
            ("issuetype", {"name": self.issue_type}),
            ("parent", {"key": self.parent} if self.parent else None),
            ("summary", self.summary),
            ("description", self.body or None),
            ("reporter", _user_ref(self.reporter, self.installation)),
            ("assignee", _user_ref(self.assignee, self.installation)),
            ("priority", _named(self.priority)),
            ("labels", [lbl for lbl in self.labels if lbl] or None),
            ("components", _named_list(self.components) or None),
            ("fixVersions", _named_list(self.fix_versions) or None),
            ("versions", _named_list(self.affects_versions) or None),
            (
                "timetracking",
                {"originalEstimate": self.original_estimate}
                if self.original_estimate
                else None,
            ),
        ]
        if self.epic_name and self.epic_name_field:
            candidates.append((self.epic_name_field, self.epic_name))
        return {k: v for k, v in candidates if v is not None}


@dataclass
class CreateRequest:
    """Body of ``POST /issue``."""

    fields: CreateFields
    custom_fields: CustomFieldSet | None = None

    def to_payload(self) -> dict[str, Any]:
        return {"update": {}, "fields": merge_fields(self.fields, self.custom_fields)}

    def to_json(self) -> bytes:
        return dumps(self.to_payload())


__all__ = [
    "CreateFields",
    "CreateRequest",
    "INSTALLATION_CLOUD",
    "INSTALLATION_LOCAL",
    "StaticFields",
    "TransitionFields",
    "TransitionRequest",
    "dumps",
    "marshal_fields",
    "merge_fields",
]
