"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field, fields


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Output settings
    output_dir: Optional[str] = None
    package_name: str = "com.example.api"

    # Code style settings
    indent_size: int = 2
    use_tabs: bool = False
    line_ending: str = "\n"

    # License header
    add_license_header: bool = True
    copyright_holder: str = "Microsoft Corporation"

    # Interfaces to generate (empty means all)
    only: list = field(default_factory=list)

    # Extra override table entries, see OverrideTables.update_from_dict
    overrides: Dict[str, Any] = field(default_factory=dict)

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent(self) -> str:
        """One level of indentation."""
        return "\t" if self.use_tabs else " " * self.indent_size

    def to_dict(self) -> Dict[str, Any]:
        """Flatten the configuration, custom settings included."""
        config_dict = {
            f.name: getattr(self, f.name) for f in fields(self) if f.name != "custom"
        }
        config_dict.update(self.custom)
        return config_dict


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["java"] = {
            "package_name": "com.microsoft.playwright",
            "indent_size": 2,
            "add_license_header": True,
            "copyright_holder": "Microsoft Corporation",
            "custom": {
                "license": "apache-2.0",
                "file_extension": ".java",
            },
        }

    def get_config(
        self,
        language: str = "java",
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        # Start with defaults
        base_config = dict(self._configs.get(language.lower(), {}))
        base_config["custom"] = dict(base_config.get("custom", {}))

        # Load from file if provided
        if config_file:
            file_config = self._load_config_file(config_file)
            self._merge(base_config, file_config)

        # Apply custom overrides
        if custom_config:
            self._merge(base_config, custom_config)

        return self._dict_to_config(base_config)

    def _merge(self, base: Dict[str, Any], update: Dict[str, Any]) -> None:
        """Merge update into base, combining nested custom and overrides dicts."""
        for key, value in update.items():
            if key == "custom" and isinstance(value, dict):
                base[key] = {**base.get(key, {}), **value}
            elif key == "overrides" and isinstance(value, dict):
                base[key] = self._merge_overrides(base.get(key, {}), value)
            else:
                base[key] = value

    def _merge_overrides(
        self, base: Dict[str, Any], update: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Merge override tables entry by entry; list tables are replaced."""
        merged = dict(base)
        for table, entries in update.items():
            current = merged.get(table)
            if isinstance(current, dict) and isinstance(entries, dict):
                merged[table] = {**current, **entries}
            else:
                merged[table] = entries
        return merged

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys become custom settings
        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def list_languages(self) -> list[str]:
        """Get list of languages with default configurations."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig, language: str) -> list[str]:
        """
        Validate configuration for a language.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.indent_size < 0:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        if language == "java":
            parts = config.package_name.split(".") if config.package_name else []
            if not parts or not all(part.isidentifier() for part in parts):
                warnings.append(f"Invalid Java package name: {config.package_name}")

        unknown_tables = set(config.overrides) - {
            "type_overrides",
            "signatures",
            "builders",
            "param_names",
            "method_names",
            "base_interfaces",
        }
        for table in sorted(unknown_tables):
            warnings.append(f"Unknown override table: {table}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str = "java",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)


# Example configuration file for reference
EXAMPLE_JAVA_CONFIG = {
    "package_name": "com.example.browser",
    "indent_size": 2,
    "copyright_holder": "Example Corp.",
    "overrides": {
        "type_overrides": {
            "Page.waitForLoadState.state": {
                "from": '"load"|"domcontentloaded"|"networkidle"',
                "to": "LoadState",
            }
        },
        "method_names": {"goto": "navigate"},
    },
}
