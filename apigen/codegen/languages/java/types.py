"""
Java type mapping for resolved IDD types.

Turns ResolvedType values into Java source types: promises are unwrapped
(the Java API is synchronous), arrays and maps become ``List`` and ``Map``,
and primitives are boxed where Java requires a reference type.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from ...core.errors import UnmappedTypeUnionError
from ...core.resolver import (
    LiteralType,
    NamedType,
    ResolvedType,
    TypeKind,
    TypeNode,
    UnionType,
    parse_type_expression,
    strip_null,
)


@dataclass
class JavaTypeConfig:
    """Configuration for Java type mapping behavior."""

    # IDD builtin -> Java type for required values
    primitive_types: Dict[str, str] = field(
        default_factory=lambda: {
            "string": "String",
            "number": "int",
            "boolean": "boolean",
            "void": "void",
            "Object": "Object",
            "Buffer": "byte[]",
        }
    )

    # Reference types used for optional values and generic arguments
    boxed_types: Dict[str, str] = field(
        default_factory=lambda: {
            "int": "Integer",
            "long": "Long",
            "double": "Double",
            "float": "Float",
            "boolean": "Boolean",
        }
    )

    list_type: str = "List"
    map_type: str = "Map"

    # "No value" markers for primitives omitted by overloads
    default_values: Dict[str, str] = field(
        default_factory=lambda: {
            "int": "0",
            "long": "0",
            "short": "0",
            "byte": "0",
            "double": "0.0",
            "float": "0.0",
            "boolean": "false",
        }
    )


class JavaTypeMapper:
    """Maps resolved type references to Java type names."""

    def __init__(self, config: Optional[JavaTypeConfig] = None):
        """Initialize with type configuration."""
        self.config = config or JavaTypeConfig()

    def to_java(self, type_ref) -> str:
        """Java type for a TypeRef, honoring its owner's optionality."""
        return self.map_resolved(type_ref.resolved, optional=type_ref.optional)

    def map_resolved(self, resolved: ResolvedType, optional: bool = False) -> str:
        """
        Map a resolved type to Java.

        Args:
            resolved: Result of type resolution
            optional: Whether the owning member is optional

        Returns:
            Java type as it appears in source

        Raises:
            UnmappedTypeUnionError: If a union remains after stripping
                ``Promise`` and ``null``
            TypeExpressionError: If the expression cannot be parsed
        """
        if resolved.custom_type is not None and not resolved.synthesized:
            return resolved.custom_type
        if resolved.expression is None:
            return "void"

        node = parse_type_expression(resolved.expression)
        leaf = resolved.custom_type if resolved.synthesized else None
        return self._render(node, resolved, leaf, boxed=optional)

    def default_value(self, java_type: str) -> str:
        """Value passed for an omitted parameter of the given Java type."""
        return self.config.default_values.get(java_type, "null")

    def _render(
        self,
        node: TypeNode,
        resolved: ResolvedType,
        leaf: Optional[str],
        boxed: bool,
    ) -> str:
        node = strip_null(node)
        if node is None:
            return "void"

        if leaf is not None and self._is_leaf(node, resolved.kind):
            return leaf

        if isinstance(node, UnionType):
            raise UnmappedTypeUnionError(resolved.path, resolved.expression)

        if isinstance(node, LiteralType):
            return self.config.primitive_types["string"]

        name = node.name
        if name == "Promise":
            if not node.args:
                return "void"
            return self._render(node.args[0], resolved, leaf, boxed)

        if name == "Array" and len(node.args) == 1:
            inner = self._render(node.args[0], resolved, leaf, boxed=True)
            return f"{self.config.list_type}<{inner}>"

        if name == "Object" and len(node.args) == 2:
            key = self._render(node.args[0], resolved, leaf, boxed=True)
            value = self._render(node.args[1], resolved, leaf, boxed=True)
            return f"{self.config.map_type}<{key}, {value}>"

        if node.args:
            args = ", ".join(
                self._render(arg, resolved, leaf, boxed=True) for arg in node.args
            )
            return f"{name}<{args}>"

        java_type = self.config.primitive_types.get(name, name)
        if boxed:
            return self.config.boxed_types.get(java_type, java_type)
        return java_type

    def _is_leaf(self, node: TypeNode, kind: TypeKind) -> bool:
        """True for the literal union or placeholder a synthesized name replaces."""
        if kind == TypeKind.ENUM:
            if isinstance(node, UnionType):
                return any(isinstance(alt, LiteralType) for alt in node.alternatives)
            return isinstance(node, LiteralType)
        if kind == TypeKind.CLASS:
            return (
                isinstance(node, NamedType) and node.name == "Object" and not node.args
            )
        return False
