from __future__ import annotations

from issuefields.errors import (
    CustomFieldValidationError,
    FieldSchemaLookupError,
    IssueFieldsError,
    JiraAPIError,
    redact,
)
from issuefields.models import FieldSchema


def test_redact_tokens():
    key_header = "-----BEGIN " "PRIVATE KEY-----"
    key_footer = "-----END " "PRIVATE KEY-----"
    sample = (
        "Authorization: Bearer abc.def-ghi plus ATATT3xFfGF0abcdefghijklmnopqrstuvwxyz "
        f"and key block\n{key_header}\nABCDEF\n{key_footer}"
    )
    out = redact(sample)
    assert 'abc.def-ghi' not in out
    assert 'ATATT' not in out
    assert 'ABCDEF' not in out
    assert out.startswith('Authorization: <redacted>')


def test_redact_empty():
    assert redact('') == ''


def test_hierarchy():
    assert issubclass(JiraAPIError, IssueFieldsError)
    assert issubclass(FieldSchemaLookupError, IssueFieldsError)
    assert issubclass(CustomFieldValidationError, IssueFieldsError)


def test_validation_error_layout():
    err = CustomFieldValidationError(
        "Bug",
        ["tags", "bogus"],
        ["customfield_3"],
        [FieldSchema(name="Story Points", key="customfield_1")],
    )
    assert str(err) == (
        "Invalid custom fields for issue type 'Bug': tags, bogus\n\n"
        "These fields are not available on the create/edit screen for this issue type.\n"
        "This is a Jira project configuration issue, not a CLI problem.\n\n"
        "Field IDs: customfield_3\n\n"
        "Available custom fields for 'Bug':\n  story-points (customfield_1)\n\n"
        "To fix this:\n"
        "1. Check your Jira project's screen configuration\n"
        "2. Add the required fields to the issue type's create screen\n"
        "3. Or use only the fields listed as available above"
    )
