"""
Java code generator module.

Generates synchronous Java API interfaces from an Interface Description
Document, using curated override tables for what the IDD cannot express.
"""

from ...core.overrides import OverrideTables
from .config import JavaConfig
from .generator import JavaGenerator
from .naming import create_java_sanitizer, METHOD_NAME_OVERRIDES
from .overrides import build_default_overrides
from .types import JavaTypeConfig, JavaTypeMapper

__all__ = [
    "JavaGenerator",
    "JavaConfig",
    "JavaTypeConfig",
    "JavaTypeMapper",
    "METHOD_NAME_OVERRIDES",
    "build_default_overrides",
    "create_java_sanitizer",
    # Factory functions
    "create_generator",
    "create_bare_generator",
]


def create_generator(**kwargs):
    """
    Create a Java generator with the default override tables.

    Args:
        **kwargs: Generator options (package_name, indent_size, overrides, etc.)

    Returns:
        Configured JavaGenerator instance
    """
    return JavaGenerator(kwargs or None)


def create_bare_generator(**kwargs):
    """
    Create a Java generator with empty override tables.

    Only ``java.util.*`` is imported, and every literal union needs a
    ``type_overrides`` entry in the configuration. Useful for IDDs other
    than the browser-automation one.
    """
    tables = OverrideTables(imports={"import java.util.*;": ()})
    return JavaGenerator(kwargs or None, overrides=tables)
