"""
Core schema representation for props code generation.

Converts the component schema document into an immutable, normalized
model that the generators can walk consistently.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple
from enum import Enum

from .errors import InvalidSchema, MissingObjectProperties


class TypeKind(Enum):
    """Closed set of prop type annotations."""

    BOOLEAN = "BooleanTypeAnnotation"
    STRING = "StringTypeAnnotation"
    INT32 = "Int32TypeAnnotation"
    DOUBLE = "DoubleTypeAnnotation"
    FLOAT = "FloatTypeAnnotation"
    NATIVE_PRIMITIVE = "NativePrimitiveTypeAnnotation"
    ARRAY = "ArrayTypeAnnotation"
    OBJECT = "ObjectTypeAnnotation"
    STRING_ENUM = "StringEnumTypeAnnotation"


SCALAR_KINDS = frozenset(
    {
        TypeKind.BOOLEAN,
        TypeKind.STRING,
        TypeKind.INT32,
        TypeKind.DOUBLE,
        TypeKind.FLOAT,
    }
)


class NativePrimitiveKind(Enum):
    """Opaque host types known to the target platform."""

    COLOR = "ColorPrimitive"
    IMAGE_SOURCE = "ImageSourcePrimitive"
    POINT = "PointPrimitive"


class ExtendsKind(Enum):
    """Kinds of base capability a component can extend."""

    REACT_NATIVE_BUILT_IN_TYPE = "ReactNativeBuiltInType"


class KnownTypeName(Enum):
    """Built-in base capabilities."""

    REACT_NATIVE_CORE_VIEW_PROPS = "ReactNativeCoreViewProps"


@dataclass(frozen=True)
class TypeAnnotation:
    """Declared type of a single prop."""

    kind: TypeKind

    # For native primitives
    primitive: Optional[NativePrimitiveKind] = None

    # For arrays
    element_type: Optional["TypeAnnotation"] = None

    # For objects
    properties: Optional[Tuple["Prop", ...]] = None

    # For string enums
    options: Optional[Tuple[str, ...]] = None

    def is_array_of(self, kind: TypeKind) -> bool:
        """Check whether this is an array whose elements are of ``kind``."""
        return (
            self.kind == TypeKind.ARRAY
            and self.element_type is not None
            and self.element_type.kind == kind
        )

    def require_properties(
        self, component_name: str, prop_name: str
    ) -> Tuple["Prop", ...]:
        """Return the object's property list or fail if it is missing."""
        if self.properties is None:
            raise MissingObjectProperties(
                f"Properties are expected for ObjectTypeAnnotation "
                f"(see {prop_name} in {component_name})"
            )
        return self.properties


@dataclass(frozen=True)
class Prop:
    """A named, typed field of a component declaration."""

    name: str
    type_annotation: TypeAnnotation
    default: Any = None


@dataclass(frozen=True)
class ExtendsClause:
    """Reference to a known base capability."""

    kind: ExtendsKind
    known_type_name: KnownTypeName


@dataclass
class Component:
    """One declared UI element."""

    name: str
    props: List[Prop] = field(default_factory=list)
    extends_props: List[ExtendsClause] = field(default_factory=list)


@dataclass
class Module:
    """A named group of components."""

    name: str
    components: Optional[Dict[str, Component]] = None


@dataclass
class Schema:
    """Ordered mapping from module name to its components."""

    modules: Dict[str, Module] = field(default_factory=dict)

    def iter_components(self) -> Iterator[Component]:
        """Yield every component in schema order, skipping empty modules."""
        for module in self.modules.values():
            if module.components is None:
                continue
            yield from module.components.values()

    def get_component(self, name: str) -> Optional[Component]:
        """Get component by name."""
        for component in self.iter_components():
            if component.name == name:
                return component
        return None


def convert_schema_document(document: Dict[str, Any]) -> Schema:
    """
    Convert a parsed schema document to the internal Schema representation.

    Args:
        document: Parsed JSON of the form ``{"modules": {name: {"components":
            {name: {"props": [...], "extendsProps": [...]}}}}}``

    Returns:
        Schema: Immutable, normalized schema

    Raises:
        InvalidSchema: If an annotation, primitive or extends clause is unknown
    """

    def lookup(enum_cls, value: Any, what: str):
        try:
            return enum_cls(value)
        except ValueError:
            raise InvalidSchema(f"Received unknown {what}: {value!r}") from None

    def convert_annotation(data: Dict[str, Any], context: str) -> TypeAnnotation:
        """Recursively convert one typeAnnotation node."""
        if not isinstance(data, dict) or "type" not in data:
            raise InvalidSchema(f"Missing typeAnnotation for {context}")

        kind = lookup(TypeKind, data["type"], f"typeAnnotation for {context}")

        if kind == TypeKind.NATIVE_PRIMITIVE:
            primitive = lookup(
                NativePrimitiveKind,
                data.get("name"),
                "NativePrimitiveTypeAnnotation",
            )
            return TypeAnnotation(kind=kind, primitive=primitive)

        if kind == TypeKind.ARRAY:
            element = convert_annotation(data.get("elementType"), context)
            return TypeAnnotation(kind=kind, element_type=element)

        if kind == TypeKind.OBJECT:
            raw_properties = data.get("properties")
            properties = None
            if raw_properties is not None:
                properties = tuple(
                    convert_prop(p, f"{context}.{p.get('name')}")
                    for p in raw_properties
                )
            return TypeAnnotation(kind=kind, properties=properties)

        if kind == TypeKind.STRING_ENUM:
            raw_options = data.get("options")
            options = None
            if raw_options is not None:
                options = tuple(option["name"] for option in raw_options)
            return TypeAnnotation(kind=kind, options=options)

        return TypeAnnotation(kind=kind)

    def convert_prop(data: Dict[str, Any], context: str) -> Prop:
        """Convert one prop, lifting its default out of the annotation."""
        raw_annotation = data.get("typeAnnotation")
        annotation = convert_annotation(raw_annotation, context)

        default = raw_annotation.get("default")
        if annotation.is_array_of(TypeKind.STRING_ENUM):
            default = raw_annotation["elementType"].get("default")

        return Prop(name=data["name"], type_annotation=annotation, default=default)

    def convert_extends(data: Dict[str, Any]) -> ExtendsClause:
        kind = lookup(ExtendsKind, data.get("type"), "extended type")
        known = lookup(KnownTypeName, data.get("knownTypeName"), "knownTypeName")
        return ExtendsClause(kind=kind, known_type_name=known)

    schema = Schema()

    for module_name, module_data in document.get("modules", {}).items():
        raw_components = module_data.get("components")
        if raw_components is None:
            # No components in this module
            schema.modules[module_name] = Module(name=module_name)
            continue

        components = {}
        for component_name, component_data in raw_components.items():
            props = [
                convert_prop(p, f"{component_name}.{p.get('name')}")
                for p in component_data.get("props", [])
            ]
            extends = [convert_extends(e) for e in component_data.get("extendsProps", [])]
            components[component_name] = Component(
                name=component_name, props=props, extends_props=extends
            )

        schema.modules[module_name] = Module(name=module_name, components=components)

    return schema
