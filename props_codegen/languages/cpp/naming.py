"""
C++ naming utilities for generated declarations.

Struct names are derived from the full path of prop names; enum names
only from the component and the prop that declares them.
"""

import re
from typing import Iterable

from ...core.errors import InvalidSchema

_SEPARATOR = re.compile(r"[^0-9A-Za-z_]+")


def upper_case_first(value: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    return value[:1].upper() + value[1:]


def to_safe_cpp_string(value: str) -> str:
    """
    Map an arbitrary literal to a valid C++ identifier.

    ``"space-between"`` becomes ``"SpaceBetween"`` and ``"top"`` becomes
    ``"Top"``. Identifiers never start with a digit.
    """
    identifier = "".join(upper_case_first(part) for part in _SEPARATOR.split(value))
    if not identifier:
        raise InvalidSchema(f"Cannot derive an identifier from {value!r}")
    if identifier[0].isdigit():
        identifier = f"_{identifier}"
    return identifier


def generate_struct_name(component_name: str, name_parts: Iterable[str] = ()) -> str:
    """Name of the struct synthesized for the object at ``name_parts``."""
    additional = "".join(to_safe_cpp_string(part) for part in name_parts)
    return f"{component_name}{additional}Struct"


def get_enum_name(component_name: str, prop_name: str) -> str:
    """Name of the enum synthesized for an enum-typed prop."""
    return f"{component_name}{to_safe_cpp_string(prop_name)}"


def get_enum_mask_name(enum_name: str) -> str:
    """Name of the storage type of a flag enum."""
    return f"{enum_name}Mask"


def get_array_conversion_key(struct_name: str) -> str:
    """Struct map key of the sequence conversion routine for a struct."""
    return f"{struct_name}Array"
