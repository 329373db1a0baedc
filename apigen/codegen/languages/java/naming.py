"""
Java-specific naming utilities and sanitization.

Handles Java reserved words and the renames applied to IDD member names
that are not valid or not idiomatic Java method names.
"""

from ...core.naming import NameSanitizer


# Java reserved words and literals
JAVA_RESERVED_WORDS = {
    "abstract",
    "assert",
    "boolean",
    "break",
    "byte",
    "case",
    "catch",
    "char",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "double",
    "else",
    "enum",
    "extends",
    "false",
    "final",
    "finally",
    "float",
    "for",
    "goto",
    "if",
    "implements",
    "import",
    "instanceof",
    "int",
    "interface",
    "long",
    "native",
    "new",
    "null",
    "package",
    "private",
    "protected",
    "public",
    "return",
    "short",
    "static",
    "strictfp",
    "super",
    "switch",
    "synchronized",
    "this",
    "throw",
    "throws",
    "transient",
    "true",
    "try",
    "void",
    "volatile",
    "while",
}

# IDD member name -> Java method name
METHOD_NAME_OVERRIDES = {
    "continue": "continue_",
    "$eval": "evalOnSelector",
    "$$eval": "evalOnSelectorAll",
    "$": "querySelector",
    "$$": "querySelectorAll",
    "goto": "navigate",
}


def create_java_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Java."""
    return NameSanitizer(JAVA_RESERVED_WORDS)


def validate_java_package_name(name: str) -> list[str]:
    """
    Validate a dotted Java package name.

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not name:
        errors.append("Package name cannot be empty")
        return errors

    for part in name.split("."):
        if not part.isidentifier():
            errors.append(f"'{part}' is not a valid Java identifier")
        elif part in JAVA_RESERVED_WORDS:
            errors.append(f"'{part}' is a Java reserved word")

    return errors
