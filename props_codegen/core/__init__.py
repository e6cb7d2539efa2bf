"""
Core code generation components.

Provides the schema model, configuration, templates and the base
generator pipeline used by the target generators.
"""

from .errors import (
    GeneratorError,
    InvalidSchema,
    EnumNameCollision,
    UnsupportedNesting,
    MissingObjectProperties,
    UnmatchedEnumValue,
)
from .generator import CodeGenerator, GenerationResult, generate_code
from .schema import (
    Schema,
    Module,
    Component,
    Prop,
    TypeAnnotation,
    TypeKind,
    NativePrimitiveKind,
    ExtendsClause,
    ExtendsKind,
    KnownTypeName,
    convert_schema_document,
)
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Errors
    "GeneratorError",
    "InvalidSchema",
    "EnumNameCollision",
    "UnsupportedNesting",
    "MissingObjectProperties",
    "UnmatchedEnumValue",
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Schema system
    "Schema",
    "Module",
    "Component",
    "Prop",
    "TypeAnnotation",
    "TypeKind",
    "NativePrimitiveKind",
    "ExtendsClause",
    "ExtendsKind",
    "KnownTypeName",
    "convert_schema_document",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
