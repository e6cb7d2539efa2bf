"""
Default-value literals for generated props class members.

Each literal is placed inside a brace initializer, so an empty string
means value-initialization.
"""

import json
from typing import Any

from ...core.errors import InvalidSchema
from ...core.schema import Prop, TypeAnnotation, TypeKind
from .naming import get_enum_mask_name, get_enum_name, to_safe_cpp_string


def _number_literal(value: Any) -> str:
    """Format a floating point default; integral values keep a ``.0``."""
    if value is None:
        return ""
    if float(value).is_integer():
        return f"{float(value):.1f}"
    return repr(float(value))


def _enum_option(
    component_name: str, prop: Prop, annotation: TypeAnnotation
) -> str:
    """Validated ``Enum::Option`` reference for an enum default."""
    if prop.default is None:
        raise InvalidSchema(
            f"A default is required for {annotation.kind.value} "
            f"(see {prop.name} in {component_name})"
        )
    if annotation.options is not None and prop.default not in annotation.options:
        raise InvalidSchema(
            f"Default {prop.default!r} of {component_name}.{prop.name} "
            f"is not one of {list(annotation.options)}"
        )
    enum_name = get_enum_name(component_name, prop.name)
    return f"{enum_name}::{to_safe_cpp_string(prop.default)}"


def convert_default_to_string(component_name: str, prop: Prop) -> str:
    """
    Convert a prop's declared default into a C++ initializer expression.

    Args:
        component_name: Component declaring the prop
        prop: Prop whose default is converted

    Returns:
        Literal expression valid for the prop's mapped C++ type
    """
    annotation = prop.type_annotation
    kind = annotation.kind
    default = prop.default

    if kind == TypeKind.BOOLEAN:
        return "" if default is None else ("true" if default else "false")

    elif kind == TypeKind.STRING:
        return "" if default is None else json.dumps(default, ensure_ascii=False)

    elif kind == TypeKind.INT32:
        return "" if default is None else str(int(default))

    elif kind in (TypeKind.DOUBLE, TypeKind.FLOAT):
        return _number_literal(default)

    elif kind == TypeKind.NATIVE_PRIMITIVE:
        return ""

    elif kind == TypeKind.ARRAY:
        element = annotation.element_type
        if element is not None and element.kind == TypeKind.STRING_ENUM:
            option = _enum_option(component_name, prop, element)
            mask_name = get_enum_mask_name(get_enum_name(component_name, prop.name))
            return f"static_cast<{mask_name}>({option})"
        return ""

    elif kind == TypeKind.OBJECT:
        return ""

    elif kind == TypeKind.STRING_ENUM:
        return _enum_option(component_name, prop, annotation)

    raise InvalidSchema(
        f"Received invalid typeAnnotation for {component_name} prop {prop.name}"
    )
