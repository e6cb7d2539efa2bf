"""
Template engine wrapper for code generation.

Provides a simple interface for Jinja2 template rendering
with common utilities for code generation.
"""

from typing import Dict, Any
from pathlib import Path

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Wrapper for Jinja2 template engine with code generation utilities."""

    def __init__(self, template_dir: Path):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files
        """
        if not template_dir.is_dir():
            raise TemplateError(f"Template directory not found: {template_dir}")
        self.template_dir = template_dir
        self._env = None
        self._setup_environment()

    def _setup_environment(self):
        """Setup Jinja2 environment with code generation utilities."""
        # Generated C++ must never be HTML-escaped
        self._env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

        # Add custom filters for code generation
        self._env.filters["braced"] = self._braced_filter

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Args:
            template_name: Name of template file
            context: Variables to pass to template

        Returns:
            Rendered template content
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except (TemplateNotFound, TemplateSyntaxError, UndefinedError) as e:
            raise TemplateError(
                f"Failed to render template {template_name}: {e}"
            ) from e

    def template_exists(self, template_name: str) -> bool:
        """Check if a template can be loaded."""
        try:
            self._env.get_template(template_name)
        except TemplateNotFound:
            return False
        return True

    # Template filters for code generation

    def _braced_filter(self, value: str) -> str:
        """Wrap a value in braces, as in a brace initializer."""
        return "{" + str(value) + "}"


def create_template_engine(template_dir: Path) -> TemplateEngine:
    """Create a template engine for a template directory."""
    return TemplateEngine(template_dir)
