"""Tests for identifier naming helpers"""

import pytest

from apigen.codegen.core import to_title
from apigen.codegen.core.naming import to_enum_constant
from apigen.codegen.languages.java import create_java_sanitizer


@pytest.fixture
def sanitizer():
    return create_java_sanitizer()


@pytest.mark.parametrize(
    "name, expected",
    [
        ("boundingBox", "boundingBox"),
        ("default", "default_"),
        ("continue", "continue_"),
        ("$eval", "$eval"),
        ("no-wait", "no_wait"),
        ("3d", "_3d"),
        ("", "value"),
    ],
)
def test_sanitize_name(sanitizer, name, expected):
    assert sanitizer.sanitize_name(name) == expected


def test_conflict_suffix(sanitizer):
    assert sanitizer.sanitize_name("class", suffix_on_conflict="Value") == "classValue"
    assert sanitizer.sanitize_name("class") == "class_"


def test_to_title_keeps_inner_capitals():
    assert to_title("boundingBox") == "BoundingBox"
    assert to_title("") == ""


def test_enum_constant():
    assert to_enum_constant("no-preference") == "NO_PREFERENCE"
