"""issuefields - typed custom-field payloads for Jira issue requests.

High-level public API:

from issuefields import load_config, prepare_custom_fields, TransitionRequest

cfg = load_config('.jira.yml')
custom = prepare_custom_fields({'story-points': '5'}, cfg.custom_fields)
body = TransitionRequest('31', 'Done', custom_fields=custom).to_json()

Raw ``name=value`` pairs are matched against the configured custom fields,
classified by their declared data type, and merged with the static request
fields into one flat JSON object.
"""

from __future__ import annotations

from .classify import build_custom_fields, classify
from .config import FieldsConfig, load_config
from .engine import prepare_custom_fields, strict_validation
from .errors import (
    ConfigError,
    CustomFieldValidationError,
    FieldSchemaLookupError,
    IssueFieldsError,
    JiraAPIError,
)
from .models import FieldSchema
from .payload import (
    CreateFields,
    CreateRequest,
    TransitionFields,
    TransitionRequest,
    marshal_fields,
)
from .validation import (
    LenientFieldValidation,
    StrictFieldValidation,
    validate_custom_fields,
    warn_unconfigured,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "CreateFields",
    "CreateRequest",
    "CustomFieldValidationError",
    "FieldSchema",
    "FieldSchemaLookupError",
    "FieldsConfig",
    "IssueFieldsError",
    "JiraAPIError",
    "LenientFieldValidation",
    "StrictFieldValidation",
    "TransitionFields",
    "TransitionRequest",
    "build_custom_fields",
    "classify",
    "load_config",
    "marshal_fields",
    "prepare_custom_fields",
    "strict_validation",
    "validate_custom_fields",
    "warn_unconfigured",
    "__version__",
]
