"""Tests for type-expression classification, parsing and resolution"""

import pytest

from apigen.codegen.core import (
    MissingTypeMappingError,
    OverrideTables,
    TypeExpressionError,
    TypeKind,
    TypeMappingMismatchError,
    TypeOverride,
    classify,
    enum_values,
    parse_type_expression,
)
from apigen.codegen.core.resolver import LiteralType, NamedType, UnionType, strip_null


def page_with(args, method_type="Promise"):
    click = {"kind": "method", "type": method_type, "args": args}
    return {"Page": {"members": {"click": click}}}


class TestClassify:
    @pytest.mark.parametrize(
        "expression",
        ['"load"|"networkidle"', '"only"', 'null|"a"|"b"', 'Array<"Alt"|"Shift">'],
    )
    def test_literal_unions_are_enums(self, expression):
        assert classify(expression) == TypeKind.ENUM

    def test_object_placeholder_is_class(self):
        assert classify("Object") == TypeKind.CLASS
        assert classify("null|Object") == TypeKind.CLASS

    def test_wrapped_object_needs_properties(self):
        props = {"properties": {"x": {"type": "number"}}}
        assert classify("Promise<Object>", props) == TypeKind.CLASS
        assert classify("Array<Object>", props) == TypeKind.CLASS
        assert classify("Promise<Array<Object>>", props) == TypeKind.CLASS
        assert classify("Array<Object>") == TypeKind.BUILTIN

    @pytest.mark.parametrize(
        "expression",
        [
            "string",
            "Promise<void>",
            "Object<string, string>",
            "null|Page",
            "Array<Page>",
        ],
    )
    def test_everything_else_is_builtin(self, expression):
        assert classify(expression) == TypeKind.BUILTIN

    def test_missing_type_is_builtin(self):
        assert classify(None) == TypeKind.BUILTIN


class TestEnumValues:
    def test_hyphens_and_null(self):
        assert enum_values('"a-b"|"c"|null') == ["A_B", "C"]

    def test_order_is_preserved(self):
        assert enum_values('"light"|"dark"|"no-preference"') == [
            "LIGHT",
            "DARK",
            "NO_PREFERENCE",
        ]


class TestParseTypeExpression:
    def test_nested_generics(self):
        node = parse_type_expression("Promise<Array<Object<string, number>>>")
        assert node == NamedType(
            "Promise",
            (
                NamedType(
                    "Array",
                    (NamedType("Object", (NamedType("string"), NamedType("number"))),),
                ),
            ),
        )

    def test_union_with_literals(self):
        node = parse_type_expression('null|"a"|"b"')
        assert node == UnionType(
            (NamedType("null"), LiteralType("a"), LiteralType("b"))
        )

    def test_strip_null(self):
        assert strip_null(parse_type_expression("null|string")) == NamedType("string")
        assert strip_null(parse_type_expression("null")) is None

    @pytest.mark.parametrize("expression", ["Array<string", "Array<>", "string|", "<"])
    def test_malformed_expressions(self, expression):
        with pytest.raises(TypeExpressionError):
            parse_type_expression(expression)


class TestResolution:
    def test_enum_without_override_fails(self, make_context):
        idd = page_with({"state": {"type": '"load"|"networkidle"'}})
        with pytest.raises(MissingTypeMappingError) as exc_info:
            make_context().build(idd)
        assert "Page.click.state" in str(exc_info.value)

    def test_override_source_mismatch(self, make_context):
        tables = OverrideTables(
            type_overrides={"Page.click.state": TypeOverride('"load"', "LoadState")}
        )
        idd = page_with({"state": {"type": '"load"|"networkidle"'}})
        with pytest.raises(TypeMappingMismatchError) as exc_info:
            make_context(tables).build(idd)
        message = str(exc_info.value)
        assert "Unexpected source type for: Page.click.state" in message
        assert 'Expected: "load"' in message
        assert 'found: "load"|"networkidle"' in message

    def test_enum_override_synthesizes_enum(self, make_context):
        tables = OverrideTables(
            type_overrides={
                "Page.click.state": TypeOverride('"load"|"networkidle"', "LoadState")
            }
        )
        idd = page_with({"state": {"type": '"load"|"networkidle"'}})
        (page,) = make_context(tables).build(idd)
        resolved = page.methods[0].params[0].type.resolved
        assert resolved.custom_type == "LoadState"
        assert resolved.synthesized
        assert [enum.name for enum in page.enums] == ["LoadState"]
        assert page.enums[0].values == ["LOAD", "NETWORKIDLE"]

    def test_callback_replaces_synthesis(self, make_context):
        scopes = []
        tables = OverrideTables(
            type_overrides={
                "Page.click.button": TypeOverride(
                    '"left"|"right"', "Mouse.Button", define_types=scopes.append
                )
            }
        )
        idd = page_with({"button": {"type": '"left"|"right"'}})
        (page,) = make_context(tables).build(idd)
        resolved = page.methods[0].params[0].type.resolved
        assert scopes == [page]
        assert resolved.custom_type == "Mouse.Button"
        assert not resolved.synthesized
        assert page.enums == []

    def test_override_on_builtin_is_verbatim(self, make_context):
        tables = OverrideTables(
            type_overrides={"Page.click.path": TypeOverride("string", "File")}
        )
        (page,) = make_context(tables).build(page_with({"path": {"type": "string"}}))
        resolved = page.methods[0].params[0].type.resolved
        assert resolved.custom_type == "File"
        assert resolved.kind == TypeKind.BUILTIN
        assert page.classes == []

    def test_class_name_derivation(self, make_context):
        idd = page_with(
            {
                "options": {
                    "type": {
                        "name": "Object",
                        "properties": {
                            "position": {
                                "type": {
                                    "name": "Object",
                                    "properties": {"x": {"type": "number"}},
                                }
                            }
                        },
                    }
                }
            }
        )
        (page,) = make_context().build(idd)
        options = page.classes[0]
        assert options.name == "ClickOptions"
        # Field-owned classes are named after the field alone
        assert [nested.name for nested in options.classes] == ["Position"]

    def test_builtins_are_not_named(self, make_context):
        (page,) = make_context().build(page_with({"selector": {"type": "string"}}))
        resolved = page.methods[0].params[0].type.resolved
        assert resolved.custom_type is None
        assert resolved.kind == TypeKind.BUILTIN
