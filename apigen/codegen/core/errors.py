"""
Exceptions raised while building and rendering IDD models.

Every one of them is fatal: it signals a mismatch between the interface
description and the hand-maintained override tables, and generation aborts
without writing any output.
"""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class SchemaError(GeneratorError):
    """The interface description document is structurally invalid."""

    pass


class MissingTypeMappingError(GeneratorError):
    """An enum-like literal union has no type override naming it."""

    def __init__(self, path: str, expression: str):
        self.path = path
        self.expression = expression
        super().__init__(
            f"Cannot create enum, type mapping is missing for: {path} ({expression})"
        )


class TypeMappingMismatchError(GeneratorError):
    """A type override was recorded against a different source expression."""

    def __init__(self, path: str, expected: str, found: str):
        self.path = path
        self.expected = expected
        self.found = found
        super().__init__(
            f"Unexpected source type for: {path}. Expected: {expected}; found: {found}"
        )


class UnmappedTypeUnionError(GeneratorError):
    """A union survived wrapper stripping and cannot be expressed."""

    def __init__(self, path: str, expression: str):
        self.path = path
        self.expression = expression
        super().__init__(f"Missing mapping for type union: {path}: {expression}")


class TypeExpressionError(GeneratorError):
    """A type expression could not be parsed."""

    def __init__(self, expression: str, reason: str):
        self.expression = expression
        self.reason = reason
        super().__init__(f"Invalid type expression {expression!r}: {reason}")
