"""
props-codegen: C++ props header generation from component schemas.

Translates a declarative component props schema into a single header
with a props class per component, plus the structs, enums and
conversion routines those props need.
"""

from typing import Any, Dict, Optional, Union

from .core import (
    GeneratorError,
    InvalidSchema,
    EnumNameCollision,
    UnsupportedNesting,
    MissingObjectProperties,
    UnmatchedEnumValue,
    GenerationResult,
    GeneratorConfig,
    ConfigError,
    Schema,
    convert_schema_document,
    generate_code,
    load_config,
)
from .languages.cpp import PropsHeaderGenerator, create_props_header_generator

__version__ = "0.1.0"


def generate_props_header(
    schema: Union[Schema, Dict[str, Any]],
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> GenerationResult:
    """
    Generate a props header from a schema or a parsed schema document.

    Args:
        schema: Schema model or parsed JSON schema document
        config: Configuration object or dictionary of overrides

    Returns:
        GenerationResult with generated header

    Raises:
        InvalidSchema: If the document declares an unknown type annotation
    """
    if isinstance(schema, dict):
        schema = convert_schema_document(schema)

    if isinstance(config, dict):
        config = load_config(custom_config=config)

    generator = create_props_header_generator(config)
    return generate_code(generator, schema)


__all__ = [
    "__version__",
    "generate_props_header",
    "PropsHeaderGenerator",
    "create_props_header_generator",
    "generate_code",
    "GenerationResult",
    "GeneratorConfig",
    "load_config",
    "ConfigError",
    "Schema",
    "convert_schema_document",
    "GeneratorError",
    "InvalidSchema",
    "EnumNameCollision",
    "UnsupportedNesting",
    "MissingObjectProperties",
    "UnmatchedEnumValue",
]
