"""
C++ props header generation.

Synthesizes enums, structs and props classes for a component schema.
"""

from .generator import PropsHeaderGenerator, PropField, create_props_header_generator
from .types import CppTypeMapper, get_native_type, scalar_type_name
from .enums import (
    EnumConstant,
    EnumDecl,
    EnumRepresentation,
    generate_enum,
    generate_enums,
    generate_mask_enum,
)
from .structs import (
    ArrayConversionDecl,
    StructDecl,
    StructField,
    StructMap,
    generate_struct,
    generate_structs,
)
from .imports import get_component_imports, get_conversion_imports, get_local_imports
from .defaults import convert_default_to_string
from .extends import get_base_capability
from .naming import to_safe_cpp_string

__all__ = [
    # Generator
    "PropsHeaderGenerator",
    "PropField",
    "create_props_header_generator",
    # Type mapping
    "CppTypeMapper",
    "get_native_type",
    "scalar_type_name",
    # Enum synthesis
    "EnumConstant",
    "EnumDecl",
    "EnumRepresentation",
    "generate_enum",
    "generate_enums",
    "generate_mask_enum",
    # Struct synthesis
    "ArrayConversionDecl",
    "StructDecl",
    "StructField",
    "StructMap",
    "generate_struct",
    "generate_structs",
    # Includes
    "get_component_imports",
    "get_conversion_imports",
    "get_local_imports",
    # Collaborators
    "convert_default_to_string",
    "get_base_capability",
    "to_safe_cpp_string",
]
