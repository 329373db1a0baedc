"""
Core code generation components.

Provides the element models, type resolution, override tables and base
classes used by all language generators.
"""

from .generator import CodeGenerator, GenerationResult, generate_code
from .errors import (
    GeneratorError,
    SchemaError,
    MissingTypeMappingError,
    TypeMappingMismatchError,
    UnmappedTypeUnionError,
    TypeExpressionError,
)
from .schema import (
    Element,
    TypeRef,
    TypeDefinition,
    Interface,
    Method,
    Param,
    Field,
    Event,
    NestedClass,
    Enum,
)
from .resolver import (
    TypeKind,
    ResolvedType,
    TypeResolver,
    classify,
    enum_values,
    parse_type_expression,
)
from .overrides import OverrideTables, TypeOverride, types_defined_elsewhere
from .context import GenerationContext
from .naming import NameSanitizer, to_title
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Errors
    "GeneratorError",
    "SchemaError",
    "MissingTypeMappingError",
    "TypeMappingMismatchError",
    "UnmappedTypeUnionError",
    "TypeExpressionError",
    # Element models
    "Element",
    "TypeRef",
    "TypeDefinition",
    "Interface",
    "Method",
    "Param",
    "Field",
    "Event",
    "NestedClass",
    "Enum",
    # Type resolution
    "TypeKind",
    "ResolvedType",
    "TypeResolver",
    "classify",
    "enum_values",
    "parse_type_expression",
    # Overrides and per-run state
    "OverrideTables",
    "TypeOverride",
    "types_defined_elsewhere",
    "GenerationContext",
    # Naming utilities
    "NameSanitizer",
    "to_title",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
