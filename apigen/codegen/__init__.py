"""
apigen code generation module.

Generates language bindings from an Interface Description Document.
"""

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.errors import GeneratorError
from .core.context import GenerationContext
from .core.overrides import OverrideTables, TypeOverride
from .core.config import ConfigError, GeneratorConfig, ConfigManager, load_config

# Version info
__version__ = "0.1.0"


# Convenience functions
def generate_from_idd(idd, language="java", config=None):
    """
    Generate source files from a loaded IDD.

    Args:
        idd: Parsed interface description document
        language: Target language name
        config: Generator configuration object, dict or path

    Returns:
        GenerationResult with generated files
    """
    generator = get_generator(language, config)
    return generate_code(generator, idd)


def quick_generate(idd, language="java", **options):
    """
    Quick code generation from IDD data.

    Args:
        idd: IDD as a dict or JSON string
        language: Target language
        **options: Generator options

    Returns:
        Mapping of file name to generated source
    """
    if isinstance(idd, str):
        import json

        idd = json.loads(idd)

    result = generate_from_idd(idd, language, options or None)

    if result.success:
        return result.files
    else:
        raise GeneratorError(f"Code generation failed: {result.error_message}")


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GenerationContext",
    "GeneratorError",
    "OverrideTables",
    "TypeOverride",
    "ConfigError",
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    "generate_code",
    "generate_from_idd",
    "quick_generate",
    "get_generator",
    "get_language_info",
    "list_all_language_info",
    "list_supported_languages",
]
