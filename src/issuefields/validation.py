"""Custom field availability checks.

There are two tiers:

* ``validate_custom_fields`` (strict) cross-checks requested names against
  both the local configuration and the fields the remote service exposes for
  the target issue type. Any miss fails the whole request with a full
  diagnosis.
* ``warn_unconfigured`` (lenient) only checks the local configuration and
  emits a warning; unknown names are later dropped by the builder.

Call sites that already fetched the remote schema use the strict tier; the
others use the lenient one. ``StrictFieldValidation`` and
``LenientFieldValidation`` wrap the two so the choice can be passed around.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Protocol

from .errors import CustomFieldValidationError
from .logging import get_logger
from .models import FieldSchema

UNCONFIGURED_WARNING = (
    "Some custom fields are not configured and will be ignored. "
    "This will fail with error in the future release.\n"
    "Please make sure that the passed custom fields are valid and configured "
    "accordingly in the config file.\n"
    "Invalid custom fields used in the command: {names}"
)


def _configured_keys(configured: Iterable[FieldSchema]) -> dict[str, str]:
    return {schema.identifier: schema.key for schema in configured}


def validate_custom_fields(
    requested: Mapping[str, str],
    available: Sequence[FieldSchema],
    configured: Iterable[FieldSchema],
    issue_type: str,
) -> dict[str, str]:
    """Return the requested fields if every one is usable on ``issue_type``.

    Raises :class:`CustomFieldValidationError` naming each invalid field, the
    remote keys of those that are configured but missing from the issue
    type's screen, and the custom fields that are available instead.
    """
    if not requested:
        return dict(requested)

    configured_map = _configured_keys(configured)
    available_keys = {field.key for field in available}

    valid: dict[str, str] = {}
    invalid_fields: list[str] = []
    invalid_keys: list[str] = []

    for name, value in requested.items():
        key = configured_map.get(name.lower())
        if key is None:
            invalid_fields.append(name)
            continue
        if key in available_keys:
            valid[name] = value
        else:
            invalid_fields.append(name)
            invalid_keys.append(key)

    if invalid_fields:
        alternatives = [f for f in available if f.is_custom and f.name]
        raise CustomFieldValidationError(
            issue_type, invalid_fields, invalid_keys, alternatives
        )
    return valid


def check_custom_fields(
    requested: Mapping[str, str],
    available: Sequence[FieldSchema],
    configured: Iterable[FieldSchema],
    issue_type: str,
) -> tuple[dict[str, str] | None, CustomFieldValidationError | None]:
    """Pair form of :func:`validate_custom_fields`: ``(filtered, None)`` or ``(None, error)``."""
    try:
        return validate_custom_fields(requested, available, configured, issue_type), None
    except CustomFieldValidationError as exc:
        return None, exc


def warn_unconfigured(
    requested: Mapping[str, str], configured: Iterable[FieldSchema]
) -> None:
    """Log a warning for requested names that match no configured field."""
    if not requested:
        return
    configured_map = _configured_keys(configured)
    invalid = [name for name in requested if name.lower() not in configured_map]
    if invalid:
        get_logger().warning(
            UNCONFIGURED_WARNING.format(names=", ".join(invalid)),
            invalid_fields=invalid,
        )


class FieldValidation(Protocol):  # pragma: no cover - interface only
    def filter(
        self, requested: Mapping[str, str], configured: Sequence[FieldSchema]
    ) -> dict[str, str]: ...


class StrictFieldValidation:
    """Fail fast against the remote field list of one issue type."""

    def __init__(self, available: Sequence[FieldSchema], issue_type: str):
        self.available = list(available)
        self.issue_type = issue_type

    def filter(
        self, requested: Mapping[str, str], configured: Sequence[FieldSchema]
    ) -> dict[str, str]:
        return validate_custom_fields(requested, self.available, configured, self.issue_type)


class LenientFieldValidation:
    """Warn about unconfigured names and pass everything through."""

    def filter(
        self, requested: Mapping[str, str], configured: Sequence[FieldSchema]
    ) -> dict[str, str]:
        warn_unconfigured(requested, configured)
        return dict(requested)


__all__ = [
    "FieldValidation",
    "LenientFieldValidation",
    "StrictFieldValidation",
    "UNCONFIGURED_WARNING",
    "check_custom_fields",
    "validate_custom_fields",
    "warn_unconfigured",
]
