"""YAML configuration loader for the local custom-field table and client settings."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, cast

import yaml

from .errors import ConfigError
from .logging import StructuredLogger, configure_logging
from .models import FieldSchema
from .payload import INSTALLATION_CLOUD


@dataclass
class FieldsConfig:
    source_file: Path
    server: str | None
    project_key: str | None
    installation: str
    epic_name_field: str | None
    custom_fields: list[FieldSchema] = field(default_factory=list)
    # Logging configuration
    logging_json_enabled: bool = False
    logging_level: str = "INFO"

    def apply_logging(self) -> StructuredLogger:
        return configure_logging(json_logging=self.logging_json_enabled, level=self.logging_level)


def _resolve_env_var(value: Any) -> Any:
    """Resolve environment variable if value starts with $."""
    if isinstance(value, str) and value.startswith("$"):
        return os.getenv(value[1:], value)  # Fallback to original if not found
    return value


def _parse_custom_field(index: int, entry: Any) -> FieldSchema:
    if not isinstance(entry, dict):
        raise ConfigError(f"issue.fields.custom[{index}] must be a mapping")
    name = entry.get("name")
    key = entry.get("key")
    if not isinstance(name, str) or not name.strip():
        raise ConfigError(f"issue.fields.custom[{index}] is missing 'name'")
    if not isinstance(key, str) or not key.strip():
        raise ConfigError(f"issue.fields.custom[{index}] ({name}) is missing 'key'")
    schema = cast(dict[str, Any], entry.get("schema", {}) or {})
    items = schema.get("items")
    return FieldSchema(
        name=name,
        key=key.strip(),
        data_type=str(schema.get("datatype", "") or ""),
        item_type=str(items) if items else None,
    )


def load_config(path: str | Path) -> FieldsConfig:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Configuration file not found: {p}")
    try:
        loaded = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {p}: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ConfigError(f"Configuration in {p} must be a mapping")
    raw = cast(dict[str, Any], loaded)
    project = cast(dict[str, Any], raw.get("project", {}) or {})
    epic = cast(dict[str, Any], raw.get("epic", {}) or {})
    issue = cast(dict[str, Any], raw.get("issue", {}) or {})
    issue_fields = cast(dict[str, Any], issue.get("fields", {}) or {})
    logging_config = cast(dict[str, Any], raw.get("logging", {}) or {})

    custom_raw = issue_fields.get("custom", []) or []
    if not isinstance(custom_raw, list):
        raise ConfigError("issue.fields.custom must be a list")

    return FieldsConfig(
        source_file=p,
        server=_resolve_env_var(raw.get("server")),
        project_key=_resolve_env_var(project.get("key")),
        installation=str(raw.get("installation", INSTALLATION_CLOUD)).lower(),
        epic_name_field=epic.get("name"),
        custom_fields=[_parse_custom_field(i, e) for i, e in enumerate(custom_raw)],
        logging_json_enabled=bool(logging_config.get("json_enabled", False)),
        logging_level=str(logging_config.get("level", "INFO")),
    )


__all__ = ["FieldsConfig", "load_config"]
