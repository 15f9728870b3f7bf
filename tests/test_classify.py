from __future__ import annotations

import pytest

from issuefields.classify import build_custom_fields, classify
from issuefields.models import (
    FieldSchema,
    Number,
    Option,
    OptionList,
    ProjectRef,
    Scalar,
    StringList,
)


def _schema(data_type: str, item_type: str | None = None) -> FieldSchema:
    return FieldSchema(name="Field", key="customfield_1", data_type=data_type, item_type=item_type)


def test_classify_option_keeps_raw_value():
    assert classify(" production", _schema("option")) == Option(" production")


def test_classify_project():
    assert classify("PROJ", _schema("project")) == ProjectRef("PROJ")


def test_classify_array_of_strings_trims_pieces():
    assert classify(" bug, urgent ,later", _schema("array", "string")) == StringList(
        ("bug", "urgent", "later")
    )


def test_classify_array_of_options():
    assert classify("ios, android", _schema("array", "option")) == OptionList(
        (Option("ios"), Option("android"))
    )


def test_classify_array_without_item_type_is_string_list():
    assert classify("a,b", _schema("array")) == StringList(("a", "b"))


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("5", 5.0),
        ("-3.25", -3.25),
        ("1e3", 1000.0),
        (".5", 0.5),
    ],
)
def test_classify_number_parses_decimals(raw: str, expected: float):
    assert classify(raw, _schema("number")) == Number(expected)


@pytest.mark.parametrize(
    "raw", ["five", "", "1_000", " 5", "5\n", "\u0665", "1e\u0663", "nan", "inf", "1e999"]
)
def test_classify_number_falls_back_to_scalar(raw: str):
    assert classify(raw, _schema("number")) == Scalar(raw)


@pytest.mark.parametrize("data_type", ["string", "datetime", "", "user"])
def test_classify_other_types_are_scalar(data_type: str):
    assert classify("value", _schema(data_type)) == Scalar("value")


def test_classify_is_deterministic():
    schema = _schema("array", "option")
    assert classify("x, y", schema) == classify("x, y", schema)


def test_build_story_points_number(configured):
    result = build_custom_fields({"story-points": "5"}, configured)
    assert result == {"customfield_10001": Number(5.0)}


def test_build_tags_string_list(configured):
    result = build_custom_fields({"tags": "bug, urgent"}, configured)
    assert result == {"customfield_10003": StringList(("bug", "urgent"))}


def test_build_matches_case_insensitively(configured):
    result = build_custom_fields({"Environment": "production"}, configured)
    assert result == {"customfield_10002": Option("production")}


def test_build_drops_unknown_names(configured):
    result = build_custom_fields({"unknown": "x", "notes": "hello"}, configured)
    assert result == {"customfield_10006": Scalar("hello")}


def test_build_returns_none_without_input(configured):
    assert build_custom_fields({}, configured) is None
    assert build_custom_fields(None, configured) is None
    assert build_custom_fields({"tags": "a"}, []) is None


def test_build_first_matching_schema_wins():
    schemas = [
        FieldSchema(name="Tags", key="customfield_1", data_type="string"),
        FieldSchema(name="tags", key="customfield_2", data_type="string"),
    ]
    assert build_custom_fields({"tags": "x"}, schemas) == {"customfield_1": Scalar("x")}
