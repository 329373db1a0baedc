"""
Type-expression resolution.

IDD types are written in a small expression language::

    string | number | boolean | void | Object | SomeInterface
    null|T                      nullable T
    Array<T>  Object<K, V>  Promise<T>
    "a"|"b"|"c"                 literal union, an enum

Resolution happens while the element tree is built: the expression is
classified, the override table is consulted, and enums or nested classes are
synthesized in the enclosing type scope. Conversion of builtin expressions to
target types is left to the language type mapper, which uses
``parse_type_expression`` to get a node tree.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from ...logging_config import get_logger
from .errors import (
    MissingTypeMappingError,
    TypeExpressionError,
    TypeMappingMismatchError,
)
from .overrides import OverrideTables

logger = get_logger(__name__)

OBJECT_PLACEHOLDER = "Object"
NULL = "null"

_WRAPPED_OBJECT_RE = re.compile(r"((?:Promise<|Array<)*)Object(>*)")
_LITERAL_RE = re.compile(r"\"([^\"]*)\"|'([^']*)'")
_TOKEN_RE = re.compile(
    r"\s*(?:"
    r"(?P<literal>\"[^\"]*\"|'[^']*')"
    r"|(?P<name>[A-Za-z_$][\w$.]*)"
    r"|(?P<punct>[<>,|])"
    r")"
)


class TypeKind(Enum):
    """Classification of a type expression."""

    ENUM = "enum"  # union of quoted literals
    CLASS = "class"  # anonymous object placeholder
    BUILTIN = "builtin"  # everything else


@dataclass(frozen=True)
class ResolvedType:
    """
    Result of resolving a type expression at a schema path.

    ``custom_type`` is set when an override or synthesis named the type.
    ``synthesized`` tells whether that name refers to an enum or nested class
    created for this expression (and so replaces only the literal union or
    placeholder inside any container wrappers) rather than a literal target
    type rendered as-is.
    """

    path: str
    expression: Optional[str]
    kind: TypeKind
    custom_type: Optional[str] = None
    synthesized: bool = False

    @property
    def is_void(self) -> bool:
        return self.expression is None

    @property
    def is_nested_class(self) -> bool:
        return self.kind == TypeKind.CLASS and self.synthesized


# Parsed expression nodes


@dataclass(frozen=True)
class NamedType:
    """An identifier with optional generic arguments, e.g. ``Array<T>``."""

    name: str
    args: Tuple["TypeNode", ...] = ()


@dataclass(frozen=True)
class LiteralType:
    """A quoted string literal alternative."""

    value: str


@dataclass(frozen=True)
class UnionType:
    alternatives: Tuple["TypeNode", ...]


TypeNode = Union[NamedType, LiteralType, UnionType]


def classify(
    expression: Optional[str], descriptor: Optional[Dict[str, Any]] = None
) -> TypeKind:
    """
    Classify a type expression.

    Args:
        expression: The expression, or None for a missing (void) type
        descriptor: The type descriptor carrying optional ``properties``

    Returns:
        TypeKind of the expression
    """
    if expression is None:
        return TypeKind.BUILTIN

    compact = expression.replace(" ", "")
    if compact.startswith(('"', "'")) or '|"' in compact or "|'" in compact:
        return TypeKind.ENUM

    stripped = compact.replace("null|", "")
    if stripped == OBJECT_PLACEHOLDER:
        return TypeKind.CLASS

    match = _WRAPPED_OBJECT_RE.fullmatch(stripped)
    if match and match.group(1).count("<") == len(match.group(2)):
        if descriptor and descriptor.get("properties"):
            return TypeKind.CLASS

    return TypeKind.BUILTIN


def enum_values(expression: str) -> List[str]:
    """
    Derive enum constant names from a literal union.

    ``"a-b"|"c"|null`` gives ``["A_B", "C"]``: the ``null`` alternative is
    discarded, quotes are stripped, hyphens become underscores and the result
    is upper-cased. Order follows the expression.
    """
    values = []
    for double_quoted, single_quoted in _LITERAL_RE.findall(expression):
        literal = double_quoted or single_quoted
        values.append(literal.replace("-", "_").upper())
    return values


def parse_type_expression(expression: str) -> TypeNode:
    """
    Parse a type expression into a node tree.

    Raises:
        TypeExpressionError: If the expression is not in the IDD vocabulary
    """
    tokens = _tokenize(expression)
    parser = _Parser(expression, tokens)
    node = parser.parse_union()
    if parser.position != len(tokens):
        raise TypeExpressionError(
            expression, f"unexpected {tokens[parser.position][1]!r}"
        )
    return node


def strip_null(node: TypeNode) -> Optional[TypeNode]:
    """
    Remove ``null`` alternatives from the top of a node.

    Returns None when nothing but ``null`` is left.
    """
    if isinstance(node, UnionType):
        remaining = tuple(alt for alt in node.alternatives if not is_null(alt))
        if not remaining:
            return None
        if len(remaining) == 1:
            return remaining[0]
        return UnionType(remaining)
    if is_null(node):
        return None
    return node


def is_null(node: TypeNode) -> bool:
    return isinstance(node, NamedType) and node.name == NULL and not node.args


def _tokenize(expression: str) -> List[Tuple[str, str]]:
    tokens = []
    position = 0
    text = expression.rstrip()
    while position < len(text):
        match = _TOKEN_RE.match(text, position)
        if not match or match.end() == position:
            raise TypeExpressionError(
                expression, f"unexpected character at offset {position}"
            )
        kind = match.lastgroup
        tokens.append((kind, match.group(kind)))
        position = match.end()
    if not tokens:
        raise TypeExpressionError(expression, "empty expression")
    return tokens


class _Parser:
    """Recursive descent over the token list."""

    def __init__(self, expression: str, tokens: List[Tuple[str, str]]):
        self.expression = expression
        self.tokens = tokens
        self.position = 0

    def _peek(self) -> Optional[str]:
        if self.position < len(self.tokens):
            return self.tokens[self.position][1]
        return None

    def _expect(self, value: str) -> None:
        if self._peek() != value:
            found = self._peek() or "end of expression"
            raise TypeExpressionError(
                self.expression, f"expected {value!r}, found {found!r}"
            )
        self.position += 1

    def parse_union(self) -> TypeNode:
        alternatives = [self.parse_term()]
        while self._peek() == "|":
            self.position += 1
            alternatives.append(self.parse_term())
        if len(alternatives) == 1:
            return alternatives[0]
        return UnionType(tuple(alternatives))

    def parse_term(self) -> TypeNode:
        if self.position >= len(self.tokens):
            raise TypeExpressionError(self.expression, "unexpected end of expression")
        kind, value = self.tokens[self.position]
        self.position += 1

        if kind == "literal":
            return LiteralType(value[1:-1])
        if kind != "name":
            raise TypeExpressionError(self.expression, f"unexpected {value!r}")

        args = []
        if self._peek() == "<":
            self.position += 1
            args.append(self.parse_union())
            while self._peek() == ",":
                self.position += 1
                args.append(self.parse_union())
            self._expect(">")
        return NamedType(value, tuple(args))


class TypeResolver:
    """Classifies type expressions and applies overrides and synthesis."""

    def __init__(self, overrides: OverrideTables):
        self.overrides = overrides

    def resolve(self, type_ref) -> ResolvedType:
        """
        Resolve the expression held by a type reference.

        The owning member's path is the override key. Enums and nested
        classes are created in ``type_ref.type_scope`` as a side effect.

        Args:
            type_ref: TypeRef being constructed

        Returns:
            ResolvedType for the reference

        Raises:
            MissingTypeMappingError: For a literal union without an override
            TypeMappingMismatchError: If the override was written for a
                different expression
        """
        expression = type_ref.expression
        path = type_ref.path
        kind = classify(expression, type_ref.descriptor)

        mapping = self.overrides.find_type_override(path)
        if mapping is None:
            if kind == TypeKind.ENUM:
                raise MissingTypeMappingError(path, expression)
            if kind != TypeKind.CLASS:
                return ResolvedType(path, expression, kind)
            custom_type = type_ref.derived_class_name()
        else:
            if mapping.source != expression:
                raise TypeMappingMismatchError(path, mapping.source, expression)
            custom_type = mapping.target
            if mapping.define_types is not None:
                logger.debug("Custom type definition for %s -> %s", path, custom_type)
                mapping.define_types(type_ref.type_scope)
                return ResolvedType(path, expression, kind, custom_type)
            if kind == TypeKind.BUILTIN:
                return ResolvedType(path, expression, kind, custom_type)

        scope = type_ref.type_scope
        if kind == TypeKind.ENUM:
            scope.create_enum(custom_type, expression)
        else:
            scope.create_nested_class(custom_type, type_ref, type_ref.descriptor)
        return ResolvedType(path, expression, kind, custom_type, synthesized=True)
