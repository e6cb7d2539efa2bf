"""
C++ type system for props code generation.

Maps each prop's declared type annotation to the native C++ type name
used in struct fields and props class members.
"""

from typing import Dict, Sequence

from ...core.errors import InvalidSchema, UnsupportedNesting
from ...core.schema import NativePrimitiveKind, Prop, TypeKind
from .naming import generate_struct_name, get_enum_mask_name, get_enum_name


class CppTypeMapper:
    """
    Maps prop type annotations to C++ type names.

    Every ``TypeKind`` and ``NativePrimitiveKind`` has an explicit case;
    anything else is rejected with ``InvalidSchema``.
    """

    def __init__(self):
        """Initialize the fixed type tables."""
        self._scalar_types = self._build_scalar_type_map()
        self._native_types = self._build_native_type_map()

    def _build_scalar_type_map(self) -> Dict[TypeKind, str]:
        """Build mapping of scalar annotations to C++ types."""
        return {
            TypeKind.BOOLEAN: "bool",
            TypeKind.STRING: "std::string",
            TypeKind.INT32: "int",
            TypeKind.DOUBLE: "double",
            TypeKind.FLOAT: "Float",
        }

    def _build_native_type_map(self) -> Dict[NativePrimitiveKind, str]:
        """Build mapping of native primitives to host types."""
        return {
            NativePrimitiveKind.COLOR: "SharedColor",
            NativePrimitiveKind.IMAGE_SOURCE: "ImageSource",
            NativePrimitiveKind.POINT: "Point",
        }

    def scalar_type_name(self, kind: TypeKind) -> str:
        """Get the C++ type of a scalar annotation."""
        if kind not in self._scalar_types:
            raise InvalidSchema(f"Not a scalar type annotation: {kind}")
        return self._scalar_types[kind]

    def native_type_name(self, primitive: NativePrimitiveKind) -> str:
        """Get the host type of a native primitive."""
        if primitive not in self._native_types:
            raise InvalidSchema(
                f"Received unknown NativePrimitiveTypeAnnotation: {primitive}"
            )
        return self._native_types[primitive]

    def map_prop_type(
        self, component_name: str, prop: Prop, name_parts: Sequence[str] = ()
    ) -> str:
        """
        Map a prop to its C++ type name.

        Args:
            component_name: Component declaring the prop
            prop: The prop to map
            name_parts: Prop names from the component root to the prop's owner

        Returns:
            C++ type name
        """
        annotation = prop.type_annotation
        kind = annotation.kind
        path = list(name_parts) + [prop.name]

        if kind in self._scalar_types:
            return self._scalar_types[kind]

        elif kind == TypeKind.NATIVE_PRIMITIVE:
            return self.native_type_name(annotation.primitive)

        elif kind == TypeKind.ARRAY:
            return self._map_array_type(component_name, prop, path)

        elif kind == TypeKind.OBJECT:
            return generate_struct_name(component_name, path)

        elif kind == TypeKind.STRING_ENUM:
            return get_enum_name(component_name, prop.name)

        raise InvalidSchema(
            f"Received invalid typeAnnotation for {component_name} prop "
            f"{prop.name}, received {kind}"
        )

    def _map_array_type(self, component_name: str, prop: Prop, path: list) -> str:
        """Map array types; arrays of arrays are not supported."""
        element = prop.type_annotation.element_type
        if element is None:
            raise InvalidSchema(
                f"ArrayTypeAnnotation without elementType for {component_name} "
                f"prop {prop.name}"
            )

        if element.kind == TypeKind.ARRAY:
            raise UnsupportedNesting(
                "ArrayTypeAnnotation of type ArrayTypeAnnotation not supported "
                f"(see {prop.name} in {component_name})"
            )

        if element.kind == TypeKind.OBJECT:
            return f"std::vector<{generate_struct_name(component_name, path)}>"

        if element.kind == TypeKind.STRING_ENUM:
            return get_enum_mask_name(get_enum_name(component_name, prop.name))

        element_prop = Prop(name=prop.name, type_annotation=element)
        element_type = self.map_prop_type(component_name, element_prop, path[:-1])
        return f"std::vector<{element_type}>"


_default_mapper = None


def get_type_mapper() -> CppTypeMapper:
    """Get the shared type mapper instance."""
    global _default_mapper
    if _default_mapper is None:
        _default_mapper = CppTypeMapper()
    return _default_mapper


def get_native_type(
    component_name: str, prop: Prop, name_parts: Sequence[str] = ()
) -> str:
    """Convenience wrapper around ``CppTypeMapper.map_prop_type``."""
    return get_type_mapper().map_prop_type(component_name, prop, name_parts)


def scalar_type_name(kind: TypeKind) -> str:
    """Convenience wrapper around ``CppTypeMapper.scalar_type_name``."""
    return get_type_mapper().scalar_type_name(kind)
