"""
Struct synthesis for object-typed props.

Structs are synthesized depth first so that every nested struct is
inserted into the returned map before the struct that references it.
Insertion order of the map is the declaration order of the header.
"""

from dataclasses import dataclass, field
from typing import ClassVar, Dict, Sequence, Tuple, Union

from ...core.errors import InvalidSchema
from ...core.schema import SCALAR_KINDS, Prop, TypeKind
from .naming import generate_struct_name, get_array_conversion_key
from .types import get_native_type


@dataclass(frozen=True)
class StructField:
    """A member of a synthesized struct."""

    type_name: str
    name: str


@dataclass(frozen=True)
class StructDecl:
    """A struct declaration with its ``fromRawValue``/``toString`` routines."""

    template: ClassVar[str] = "struct.h.j2"

    name: str
    fields: Tuple[StructField, ...] = field(default_factory=tuple)

    @property
    def key(self) -> str:
        return self.name


@dataclass(frozen=True)
class ArrayConversionDecl:
    """Element-wise ``fromRawValue`` for a ``std::vector`` of a struct."""

    template: ClassVar[str] = "array_conversion.h.j2"

    struct_name: str

    @property
    def key(self) -> str:
        return get_array_conversion_key(self.struct_name)


StructMap = Dict[str, Union[StructDecl, ArrayConversionDecl]]


def _check_property(component_name: str, prop: Prop) -> None:
    """Reject property kinds a struct field cannot hold."""
    annotation = prop.type_annotation
    kind = annotation.kind

    if kind in SCALAR_KINDS:
        return
    elif kind in (TypeKind.NATIVE_PRIMITIVE, TypeKind.ARRAY, TypeKind.STRING_ENUM):
        return
    elif kind == TypeKind.OBJECT:
        annotation.require_properties(component_name, prop.name)
        return

    raise InvalidSchema(f"Received invalid component property type {kind}")


def generate_struct(
    component_name: str, name_parts: Sequence[str], properties: Sequence[Prop]
) -> StructMap:
    """
    Synthesize the struct for the object at ``name_parts``.

    Field order follows the declared property order. Fields absent from
    the raw value keep their default-initialized state.
    """
    for prop in properties:
        _check_property(component_name, prop)

    struct = StructDecl(
        name=generate_struct_name(component_name, name_parts),
        fields=tuple(
            StructField(
                type_name=get_native_type(component_name, prop, name_parts),
                name=prop.name,
            )
            for prop in properties
        ),
    )
    return {struct.key: struct}


def generate_structs(
    component_name: str, properties: Sequence[Prop], name_parts: Sequence[str] = ()
) -> StructMap:
    """
    Recursively synthesize every struct nested in ``properties``.

    Args:
        component_name: Component owning the props
        properties: Props to walk
        name_parts: Prop names from the component root to ``properties``

    Returns:
        Ordered map of declarations; dependencies precede dependents
    """
    structs: StructMap = {}

    for prop in properties:
        annotation = prop.type_annotation
        path = tuple(name_parts) + (prop.name,)

        if annotation.kind == TypeKind.OBJECT:
            element_properties = annotation.require_properties(
                component_name, prop.name
            )
        elif annotation.is_array_of(TypeKind.OBJECT):
            element_properties = annotation.element_type.require_properties(
                component_name, prop.name
            )
        else:
            continue

        # Depth first: nested structs are ordered first
        structs.update(generate_structs(component_name, element_properties, path))
        structs.update(generate_struct(component_name, path, element_properties))

        if annotation.kind == TypeKind.ARRAY:
            # References the struct above, so it must come after it
            conversion = ArrayConversionDecl(
                struct_name=generate_struct_name(component_name, path)
            )
            structs[conversion.key] = conversion

    return structs
