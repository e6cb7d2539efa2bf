"""
Include resolution for generated props headers.

Walks the same prop tree as the synthesizers and collects the set of
``#include`` lines the generated declarations depend on.
"""

from typing import Iterable, Set

from ...core.errors import InvalidSchema
from ...core.schema import Component, NativePrimitiveKind, Prop, TypeKind
from .extends import get_extends_imports

VECTOR_IMPORT = "#include <vector>"
CINTTYPES_IMPORT = "#include <cinttypes>"
PROPS_CONVERSIONS_IMPORT = "#include <react/core/propsConversions.h>"
IMAGE_CONVERSIONS_IMPORT = "#include <react/components/image/conversions.h>"

NATIVE_PRIMITIVE_IMPORTS = {
    NativePrimitiveKind.COLOR: "#include <react/graphics/Color.h>",
    NativePrimitiveKind.IMAGE_SOURCE: "#include <react/imagemanager/primitives.h>",
    NativePrimitiveKind.POINT: "#include <react/graphics/Geometry.h>",
}

# Only image sources need extra support to be converted inside a struct
NATIVE_CONVERSION_IMPORTS = {
    NativePrimitiveKind.COLOR: None,
    NativePrimitiveKind.IMAGE_SOURCE: IMAGE_CONVERSIONS_IMPORT,
    NativePrimitiveKind.POINT: None,
}


def get_native_primitive_import(primitive: NativePrimitiveKind) -> str:
    """Include declaring a native primitive's host type."""
    if primitive not in NATIVE_PRIMITIVE_IMPORTS:
        raise InvalidSchema(f"Invalid NativePrimitiveTypeAnnotation name, got {primitive}")
    return NATIVE_PRIMITIVE_IMPORTS[primitive]


def _get_native_conversion_import(primitive: NativePrimitiveKind):
    if primitive not in NATIVE_CONVERSION_IMPORTS:
        raise InvalidSchema(f"Invalid NativePrimitiveTypeAnnotation name, got {primitive}")
    return NATIVE_CONVERSION_IMPORTS[primitive]


def get_conversion_imports(properties: Iterable[Prop]) -> Set[str]:
    """Includes needed to convert native primitives nested in structs."""
    imports: Set[str] = set()

    def add_for_primitive(primitive: NativePrimitiveKind):
        include = _get_native_conversion_import(primitive)
        if include:
            imports.add(include)

    for prop in properties:
        annotation = prop.type_annotation

        if annotation.kind == TypeKind.NATIVE_PRIMITIVE:
            add_for_primitive(annotation.primitive)

        if annotation.is_array_of(TypeKind.NATIVE_PRIMITIVE):
            add_for_primitive(annotation.element_type.primitive)

        if annotation.kind == TypeKind.OBJECT:
            imports |= get_conversion_imports(annotation.properties or ())

    return imports


def get_local_imports(properties: Iterable[Prop]) -> Set[str]:
    """Includes needed by the given props and everything nested in them."""
    imports: Set[str] = set()

    def add_for_object(object_properties):
        imports.add(PROPS_CONVERSIONS_IMPORT)
        imports.update(get_conversion_imports(object_properties))
        imports.update(get_local_imports(object_properties))

    for prop in properties:
        annotation = prop.type_annotation

        if annotation.kind == TypeKind.NATIVE_PRIMITIVE:
            imports.add(get_native_primitive_import(annotation.primitive))

        elif annotation.kind == TypeKind.ARRAY:
            imports.add(VECTOR_IMPORT)
            element = annotation.element_type

            if element.kind == TypeKind.STRING_ENUM:
                imports.add(CINTTYPES_IMPORT)
            elif element.kind == TypeKind.NATIVE_PRIMITIVE:
                imports.add(get_native_primitive_import(element.primitive))
            elif element.kind == TypeKind.OBJECT:
                add_for_object(element.properties or ())

        elif annotation.kind == TypeKind.OBJECT:
            add_for_object(annotation.properties or ())

    return imports


def get_component_imports(component: Component) -> Set[str]:
    """All includes one component's props class depends on."""
    imports = get_extends_imports(component.extends_props)
    imports |= get_local_imports(component.props)
    return imports
