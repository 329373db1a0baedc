"""
Naming utilities for safe code generation.

Handles title-casing of schema names, enum constant derivation and
reserved-word conflicts for generated identifiers.
"""

import re
from typing import Dict, Optional, Set


def to_title(name: str) -> str:
    """
    Upper-case the first character of a name, leaving the rest untouched.

    ``boundingBox`` becomes ``BoundingBox``; unlike ``str.title`` inner
    capitals are preserved.
    """
    if not name:
        return name
    return name[0].upper() + name[1:]


def to_enum_constant(literal: str) -> str:
    """Convert an enum literal such as ``no-preference`` to ``NO_PREFERENCE``."""
    return literal.replace("-", "_").upper()


class NameSanitizer:
    """Turns IDD names into identifiers that are legal in the target language."""

    def __init__(self, reserved_words: Optional[Set[str]] = None):
        self.reserved_words = reserved_words or set()
        self._name_cache: Dict[str, str] = {}

    def sanitize_name(self, name: str, suffix_on_conflict: str = "_") -> str:
        """
        Sanitize a name for safe use in the target language.

        The result is a pure function of the arguments, so the same schema
        name always yields the same identifier.

        Args:
            name: IDD name to sanitize
            suffix_on_conflict: Suffix to add for reserved word conflicts

        Returns:
            Sanitized name safe for use
        """
        cache_key = (name, suffix_on_conflict)
        if cache_key not in self._name_cache:
            cleaned = self._clean_basic(name)
            if cleaned in self.reserved_words:
                cleaned = f"{cleaned}{suffix_on_conflict}"
            self._name_cache[cache_key] = cleaned
        return self._name_cache[cache_key]

    def _clean_basic(self, name: str) -> str:
        """Replace characters invalid in identifiers."""
        cleaned = re.sub(r"[^a-zA-Z0-9_$]", "_", name)

        # Ensure doesn't start with number
        if cleaned and cleaned[0].isdigit():
            cleaned = f"_{cleaned}"

        return cleaned or "value"
