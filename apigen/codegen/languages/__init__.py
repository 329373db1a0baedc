"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .java import JavaGenerator, create_bare_generator, create_generator

__all__ = [
    "JavaGenerator",
    "create_generator",
    "create_bare_generator",
]
