"""Tests for the element tree built from an IDD"""

import logging

import pytest

from apigen.codegen.core import (
    Enum,
    Interface,
    NestedClass,
    OverrideTables,
    SchemaError,
    TypeOverride,
)

OPTIONS = {
    "name": "Object",
    "properties": {
        "timeout": {"type": "number", "required": False},
        "position": {
            "type": {"name": "Object", "properties": {"x": {"type": "number"}}},
            "required": False,
        },
    },
}


def method(args=None, type_="Promise", **extra):
    return dict(kind="method", type=type_, args=args or {}, **extra)


class TestPaths:
    def test_member_param_and_field_paths(self, make_context):
        idd = {"Page": {"members": {"click": method({"options": {"type": OPTIONS}})}}}
        (page,) = make_context().build(idd)

        click = page.methods[0]
        options = click.params[0]
        nested = page.classes[0]

        assert click.path == "Page.click"
        assert options.path == "Page.click.options"
        # Type references and classes share their owner's path
        assert options.type.path == "Page.click.options"
        assert nested.path == "Page.click.options"
        assert [f.path for f in nested.fields] == [
            "Page.click.options.timeout",
            "Page.click.options.position",
        ]
        assert nested.classes[0].fields[0].path == "Page.click.options.position.x"

    def test_type_scopes(self, make_context):
        idd = {"Page": {"members": {"click": method({"options": {"type": OPTIONS}})}}}
        (page,) = make_context().build(idd)

        nested = page.classes[0]
        position = nested.classes[0]
        assert page.methods[0].params[0].type.type_scope is page
        assert nested.fields[0].type.type_scope is nested
        assert nested.owner_scope is page
        assert position.owner_scope is nested
        assert isinstance(position, NestedClass)

    def test_explicit_names_override_keys(self, make_context):
        idd = {
            "page": {
                "name": "Page",
                "members": {
                    "goto_": method(
                        {"u": {"name": "url", "type": "string"}}, name="goto"
                    )
                },
            }
        }
        (page,) = make_context().build(idd)
        assert page.name == "Page"
        assert page.methods[0].path == "Page.goto"
        assert page.methods[0].params[0].path == "Page.goto.url"


class TestMembers:
    def test_properties_become_methods(self, make_context):
        idd = {
            "Page": {
                "members": {
                    "url": {"kind": "property", "type": "string"},
                    "close": {"kind": "event", "type": "Page"},
                }
            }
        }
        (page,) = make_context().build(idd)
        assert [m.name for m in page.methods] == ["url"]
        assert page.methods[0].params == []
        assert [e.name for e in page.events] == ["close"]

    def test_unknown_kind_is_skipped(self, make_context, caplog):
        members = {"x": {"kind": "namespace"}, "url": {"kind": "property"}}
        idd = {"Page": {"members": members}}
        with caplog.at_level(logging.WARNING, logger="apigen"):
            (page,) = make_context().build(idd)
        assert [m.name for m in page.methods] == ["url"]
        assert "unknown kind" in caplog.text

    def test_missing_kind_is_an_error(self, make_context):
        with pytest.raises(SchemaError):
            make_context().build({"Page": {"members": {"url": {"type": "string"}}}})

    def test_missing_type_is_void(self, make_context):
        idd = {"Page": {"members": {"close": method(type_=None)}}}
        (page,) = make_context().build(idd)
        assert page.methods[0].return_type.resolved.is_void

    def test_required_defaults_to_true(self, make_context):
        idd = {"Page": {"members": {"fill": method({"value": {"type": "string"}})}}}
        (page,) = make_context().build(idd)
        assert page.methods[0].params[0].required


class TestTrailingOptionalIndices:
    def build(self, make_context, flags):
        args = {
            f"p{i}": {"type": "string", "required": required}
            for i, required in enumerate(flags)
        }
        (page,) = make_context().build({"Page": {"members": {"m": method(args)}}})
        return list(page.methods[0].trailing_optional_indices())

    def test_required_then_optionals(self, make_context):
        assert self.build(make_context, [True, False, False]) == [2, 1]

    def test_optional_before_required_is_ignored(self, make_context):
        assert self.build(make_context, [False, True, False]) == [2]

    def test_all_required(self, make_context):
        assert self.build(make_context, [True, True]) == []

    def test_all_optional(self, make_context):
        assert self.build(make_context, [False, False]) == [1, 0]


class TestDeduplication:
    def test_first_enum_wins(self, make_context):
        (page,) = make_context().build({"Page": {"members": {}}})
        first = page.create_enum("State", '"a"|"b"')
        second = page.create_enum("State", '"c"')
        assert isinstance(first, Enum)
        assert second is None
        assert len(page.enums) == 1
        assert page.enums[0].values == ["A", "B"]

    def test_same_override_target_defines_one_enum(self, make_context):
        state = '"load"|"networkidle"'
        tables = OverrideTables(
            type_overrides={
                "Page.waitForLoadState.state": TypeOverride(state, "LoadState"),
                "Page.waitForNavigation.state": TypeOverride(state, "LoadState"),
            }
        )
        idd = {
            "Page": {
                "members": {
                    "waitForLoadState": method({"state": {"type": state}}),
                    "waitForNavigation": method({"state": {"type": state}}),
                }
            }
        }
        (page,) = make_context(tables).build(idd)
        assert [enum.name for enum in page.enums] == ["LoadState"]
        for m in page.methods:
            assert m.params[0].type.custom_type == "LoadState"

    def test_duplicate_class_is_not_compared(self, make_context):
        idd = {"Page": {"members": {"click": method({"options": {"type": OPTIONS}})}}}
        (page,) = make_context().build(idd)
        type_ref = page.methods[0].params[0].type
        other = {"name": "Object", "properties": {"unrelated": {"type": "string"}}}
        assert page.create_nested_class("ClickOptions", type_ref, other) is None
        assert [f.name for f in page.classes[0].fields] == ["timeout", "position"]


class TestContext:
    def test_rejects_non_object(self, make_context):
        with pytest.raises(SchemaError):
            make_context().build(["Page"])

    def test_only_selects_interfaces(self, make_context):
        idd = {"Page": {"members": {}}, "Frame": {"members": {}}}
        interfaces = make_context().build(idd, only=["Frame"])
        assert [i.name for i in interfaces] == ["Frame"]
        assert all(isinstance(i, Interface) for i in interfaces)

    def test_only_with_unknown_name(self, make_context):
        with pytest.raises(SchemaError, match="Worker"):
            make_context().build({"Page": {"members": {}}}, only=["Worker"])
