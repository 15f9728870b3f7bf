"""Thin Jira REST client: field schema lookup plus issue create and transition posts."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import requests

from .createmeta import issue_type_fields
from .errors import JiraAPIError
from .logging import get_logger
from .models import FieldSchema
from .payload import CreateRequest, TransitionRequest

API_PATH_V2 = "/rest/api/2"
USER_AGENT = "issuefields/0.1.0"
HTTP_OK = 200
HTTP_CREATED = 201
HTTP_NO_CONTENT = 204
JSON_HEADERS = {"Accept": "application/json", "Content-Type": "application/json"}


def format_unexpected_response(response: requests.Response) -> JiraAPIError:
    """Build an error from the server's ``errorMessages`` / ``errors`` document."""
    text = response.text or ""
    lines: list[str] = []
    try:
        data = json.loads(text) if text else None
    except ValueError:
        data = None
    if isinstance(data, dict):
        lines.extend(str(m) for m in data.get("errorMessages") or [])
        errors = data.get("errors") or {}
        if isinstance(errors, dict):
            lines.extend(f"{k}: {v}" for k, v in errors.items())
    detail = "\n".join(lines) if lines else text.strip()
    message = f"Unexpected response from Jira (status {response.status_code})"
    if detail:
        message += f":\n{detail}"
    return JiraAPIError(message, status=response.status_code, response_text=text)


@dataclass
class JiraRestClient:
    """Minimal REST collaborator: schema lookup plus create/transition posts.

    Authentication is whatever the injected ``requests.Session`` carries.
    """

    server: str
    session: requests.Session | None = None
    timeout: float = 30
    _session: requests.Session = field(init=False, repr=False)

    def __post_init__(self) -> None:  # pragma: no cover - simple wiring
        self._session = self.session or requests.Session()
        self._session.headers.setdefault("User-Agent", USER_AGENT)

    def _url(self, path: str) -> str:
        return f"{self.server.rstrip('/')}{API_PATH_V2}/{path.lstrip('/')}"

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        expected: int,
        body: bytes | None = None,
    ) -> requests.Response:
        url = self._url(path)
        with get_logger().timed_operation(f"jira_{method.lower()}", path=path):
            response = self._session.request(
                method,
                url,
                params=params,
                data=body,
                headers=JSON_HEADERS,
                timeout=self.timeout,
            )
            if response.status_code != expected:
                raise format_unexpected_response(response)
        return response

    def get_create_meta(self, project: str, issue_type_names: str | None = None) -> dict[str, Any]:
        params = {"projectKeys": project, "expand": "projects.issuetypes.fields"}
        if issue_type_names:
            params["issuetypeNames"] = issue_type_names
        response = self._request("GET", "/issue/createmeta", expected=HTTP_OK, params=params)
        data = response.json()
        return data if isinstance(data, dict) else {}

    def get_issue_type_fields(self, project: str, issue_type_id: str) -> list[FieldSchema]:
        return issue_type_fields(self.get_create_meta(project), project, issue_type_id)

    def create_issue(self, request: CreateRequest) -> dict[str, str]:
        response = self._request("POST", "/issue", expected=HTTP_CREATED, body=request.to_json())
        data = response.json()
        return {"id": str(data.get("id", "")), "key": str(data.get("key", ""))}

    def transition(self, issue_key: str, request: TransitionRequest) -> int:
        response = self._request(
            "POST",
            f"/issue/{issue_key}/transitions",
            expected=HTTP_NO_CONTENT,
            body=request.to_json(),
        )
        return response.status_code


__all__ = ["JiraRestClient", "format_unexpected_response"]
