"""
Registry of binding generators.

Maps target language names and their aliases to generator classes and builds
configured generator instances from them.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Type, Union

from .core.config import ConfigError, GeneratorConfig, load_config
from .core.generator import CodeGenerator

ConfigSource = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class GeneratorRegistry:
    """Generator classes keyed by lower-case language name."""

    def __init__(self):
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
    ):
        """
        Register a generator class under a language name.

        Args:
            language: Primary language name (e.g., 'java')
            generator_class: CodeGenerator subclass
            aliases: Alternative names for the language

        Raises:
            RegistryError: If the class is not a generator or an alias is taken
        """
        if not issubclass(generator_class, CodeGenerator):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        language_key = language.lower()
        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == language_key:
                continue
            target = self._aliases.get(alias_key, language_key)
            if alias_key in self._generators or target != language_key:
                raise RegistryError(f"Alias '{alias}' is already registered")
            self._aliases[alias_key] = language_key

        self._generators[language_key] = generator_class

    def resolve(self, language: str) -> str:
        """
        Primary name for a language name or alias.

        Raises:
            RegistryError: If nothing is registered under the name
        """
        language_key = language.lower()
        language_key = self._aliases.get(language_key, language_key)
        if language_key not in self._generators:
            raise RegistryError(
                f"No generator registered for language: {language}. "
                f"Available: {', '.join(self.list_languages())}"
            )
        return language_key

    def is_supported(self, language: str) -> bool:
        language_key = language.lower()
        return language_key in self._generators or language_key in self._aliases

    def list_languages(self) -> List[str]:
        return sorted(self._generators)

    def create_generator(
        self, language: str, config: ConfigSource = None
    ) -> CodeGenerator:
        """
        Build a configured generator.

        Args:
            language: Language name or alias
            config: GeneratorConfig, dict of settings, or config file path

        Returns:
            Generator instance

        Raises:
            RegistryError: If the language is unknown or the config is invalid
        """
        language_key = self.resolve(language)
        generator_class = self._generators[language_key]

        try:
            if isinstance(config, GeneratorConfig):
                final_config = config
            elif isinstance(config, (str, Path)):
                final_config = load_config(language_key, config_file=config)
            else:
                final_config = load_config(language_key, custom_config=config)
            return generator_class(final_config)
        except (ConfigError, TypeError, ValueError) as e:
            raise RegistryError(f"Failed to create {language} generator: {e}") from e

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """Describe a registered generator with its default settings."""
        language_key = self.resolve(language)
        generator = self.create_generator(language_key)
        generator_class = type(generator)
        aliases = [
            alias for alias, target in self._aliases.items() if target == language_key
        ]

        return {
            "name": generator.language_name,
            "class": generator_class.__name__,
            "module": generator_class.__module__,
            "file_extension": generator.file_extension,
            "package_name": generator.config.package_name,
            "aliases": sorted(aliases),
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        from .languages.java import JavaGenerator

        _global_registry = GeneratorRegistry()
        _global_registry.register("java", JavaGenerator, aliases=["jvm"])
    return _global_registry


def get_generator(language: str, config: ConfigSource = None) -> CodeGenerator:
    """Build a generator from the global registry."""
    return get_registry().create_generator(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    """Get information about a supported language."""
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Information for every registered language, keyed by primary name."""
    return {
        language: get_language_info(language)
        for language in list_supported_languages()
    }
