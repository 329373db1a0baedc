"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional, Union
from pathlib import Path

from ...logging_config import get_logger
from .config import ConfigError, GeneratorConfig, load_config
from .context import GenerationContext
from .errors import GeneratorError
from .overrides import OverrideTables
from .schema import Interface
from .templates import TemplateEngine, TemplateError, create_template_engine

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None):
        """Initialize generator with optional configuration."""
        if config is None or isinstance(config, dict):
            config = load_config(self.language_name, custom_config=config)
        self.config = config
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        template_dir = self.get_template_directory()
        if template_dir:
            self._template_engine = create_template_engine(template_dir)
        else:
            # Fallback to in-memory templates
            self._template_engine = create_template_engine()

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    def get_override_tables(self) -> OverrideTables:
        """
        Return the override tables for this run.

        Subclasses start from their curated defaults; entries from the
        ``overrides`` config section are merged on top.
        """
        tables = OverrideTables()
        tables.update_from_dict(self.config.overrides)
        return tables

    def create_context(self) -> GenerationContext:
        """Create a fresh generation context for one run."""
        return GenerationContext(overrides=self.get_override_tables())

    def generate(self, idd: Dict[str, Any]) -> Dict[str, str]:
        """
        Generate one source unit per top-level interface.

        Every interface is built before any is rendered, and nothing is
        returned unless all of them render.

        Args:
            idd: Interface description document

        Returns:
            Mapping of file name to file content, in document order
        """
        context = self.create_context()
        interfaces = context.build(idd, only=self.config.only or None)

        files = {}
        for interface in interfaces:
            lines = self.generate_interface(interface)
            file_name = f"{interface.name}{self.file_extension}"
            code = self.format_code("\n".join(lines))
            files[file_name] = code.replace("\n", self.config.line_ending)
            logger.debug("Rendered %s (%d lines)", file_name, len(lines))
        return files

    @abstractmethod
    def generate_interface(self, interface: Interface) -> List[str]:
        """
        Render a single interface.

        Args:
            interface: Fully built interface model

        Returns:
            Output lines for the interface's source unit
        """
        pass

    def validate_idd(self, idd: Dict[str, Any]) -> List[str]:
        """
        Check an IDD for suspicious but non-fatal shapes.

        Args:
            idd: Interface description document

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        if not isinstance(idd, dict):
            return warnings

        for name, descriptor in idd.items():
            if not isinstance(descriptor, dict):
                continue
            if not descriptor.get("members"):
                warnings.append(f"Interface '{name}' has no members")
        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        The default strips trailing whitespace from every line.
        """
        return "\n".join(line.rstrip() for line in code.split("\n"))

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        files: Dict[str, str],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            files: Generated file contents keyed by file name
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.files = files
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @property
    def code(self) -> str:
        """All generated files concatenated in order."""
        return "\n".join(self.files.values())

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(files={})
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, idd: Dict[str, Any]) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Any generator failure aborts the whole run: the returned result carries
    the error and no files.

    Args:
        generator: Code generator instance
        idd: Interface description document

    Returns:
        GenerationResult with files, warnings, and metadata
    """
    try:
        warnings = generator.validate_idd(idd)
        files = generator.generate(idd)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "package_name": generator.config.package_name,
            "interface_count": len(files),
            "line_count": sum(text.count("\n") + 1 for text in files.values()),
        }

        return GenerationResult(files, warnings, metadata)

    except (GeneratorError, ConfigError, TemplateError) as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
