"""
Java-specific configuration and validation.

Extends the base configuration system with Java-specific settings.
"""

from dataclasses import fields

from ...core.config import ConfigError, GeneratorConfig
from .naming import validate_java_package_name

SUPPORTED_LICENSES = {"apache-2.0", "none"}


class JavaConfig(GeneratorConfig):
    """Java-specific configuration."""

    def __init__(self, **kwargs):
        """Initialize Java configuration with defaults."""
        super().__init__(**kwargs)

        if not self.custom:
            self.custom = {}

        # Set Java defaults
        self.custom.setdefault("license", "apache-2.0")
        self.custom.setdefault("file_extension", ".java")

        self._validate_java_settings()

    @classmethod
    def from_config(cls, config: GeneratorConfig) -> "JavaConfig":
        """Build a JavaConfig from a generic configuration."""
        if isinstance(config, cls):
            return config
        values = {f.name: getattr(config, f.name) for f in fields(GeneratorConfig)}
        values["custom"] = dict(values["custom"])
        return cls(**values)

    @property
    def license(self) -> str:
        return self.custom["license"]

    @property
    def file_extension(self) -> str:
        return self.custom["file_extension"]

    def _validate_java_settings(self):
        """Validate Java-specific configuration."""
        errors = validate_java_package_name(self.package_name)
        if errors:
            raise ConfigError(
                f"Invalid package name '{self.package_name}': {'; '.join(errors)}"
            )

        if self.license not in SUPPORTED_LICENSES:
            raise ConfigError(
                f"Invalid license: {self.license} "
                f"(expected one of {', '.join(sorted(SUPPORTED_LICENSES))})"
            )

        if not self.file_extension.startswith("."):
            raise ConfigError(f"Invalid file_extension: {self.file_extension}")

        if self.indent_size < 1 and not self.use_tabs:
            raise ConfigError(f"Invalid indent_size: {self.indent_size}")
