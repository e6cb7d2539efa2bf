"""
Base generator interface for props code generation.

Defines the contract that target generators implement and the
error-handling pipeline around a single generation pass.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional
from pathlib import Path

from ..logging_config import get_logger
from .config import ConfigError, GeneratorConfig
from .errors import GeneratorError
from .schema import Schema
from .templates import TemplateEngine, TemplateError, create_template_engine

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'cpp')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.h')."""
        pass

    @abstractmethod
    def get_template_directory(self) -> Path:
        """Return the directory containing templates for this generator."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, schema: Schema) -> str:
        """
        Generate the output document for a whole schema.

        Args:
            schema: Parsed component schema

        Returns:
            Generated code as a string
        """
        pass

    def validate_schema(self, schema: Schema) -> List[str]:
        """
        Validate a schema for basic structural issues.

        Generators override this to add target-specific checks.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for module in schema.modules.values():
            if module.components is None:
                warnings.append(f"Module '{module.name}' has no components")

        for component in schema.iter_components():
            if not component.props:
                warnings.append(f"Component '{component.name}' has no props")

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply formatting to generated code.

        Strips trailing whitespace, collapses runs of blank lines and
        terminates the document with exactly one newline.
        """
        formatted_lines = []
        blank_count = 0

        for line in code.split("\n"):
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:  # Allow max 1 consecutive blank line
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

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
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, schema: Schema) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Any generator error aborts the whole pass; no partial output is kept.

    Args:
        generator: Code generator instance
        schema: Schema to generate code for

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_schema(schema)
        for warning in warnings:
            logger.warning(warning)

        code = generator.generate(schema)
        formatted_code = generator.format_code(code)

        components = list(schema.iter_components())
        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "file_name": generator.config.output_file,
            "module_count": len(schema.modules),
            "component_count": len(components),
        }

        logger.info(
            "Generated %s for %d component(s)",
            generator.config.output_file,
            len(components),
        )
        return GenerationResult(formatted_code, warnings, metadata)

    except (GeneratorError, ConfigError, TemplateError) as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
