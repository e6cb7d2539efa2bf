"""
Enum synthesis for string-enum props.

A ``StringEnum`` prop becomes a scalar ``enum class``; an array of a
``StringEnum`` becomes a bitmask enum whose options are assigned
``1 << index`` in declared order. Reordering options therefore changes
the bit values of every persisted mask.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, Iterable, List, Optional, Sequence, Tuple

from ...core.errors import EnumNameCollision, InvalidSchema, UnmatchedEnumValue
from ...core.schema import Prop, TypeKind
from ...logging_config import get_logger
from .naming import get_enum_mask_name, get_enum_name, to_safe_cpp_string

logger = get_logger(__name__)

MASK_SEPARATOR = ", "


class EnumRepresentation(Enum):
    """How an enumeration is declared."""

    SCALAR = "scalar"
    BITMASK = "bitmask"


@dataclass(frozen=True)
class EnumConstant:
    """One named option of a synthesized enum."""

    value: str
    identifier: str
    bit: Optional[int] = None

    @property
    def bit_value(self) -> Optional[int]:
        """Mask value of this option, for bitmask enums."""
        return None if self.bit is None else 1 << self.bit


@dataclass(frozen=True)
class EnumDecl:
    """
    A synthesized enum declaration.

    Besides carrying what the templates render, the declaration mirrors
    the runtime contract of its generated ``fromRawValue``/``toString``
    routines: options are matched in declared order and an unmatched
    string is fatal.
    """

    TEMPLATES: ClassVar[Dict[EnumRepresentation, str]] = {
        EnumRepresentation.SCALAR: "enum.h.j2",
        EnumRepresentation.BITMASK: "mask_enum.h.j2",
    }

    name: str
    representation: EnumRepresentation
    constants: Tuple[EnumConstant, ...] = field(default_factory=tuple)
    mask_name: Optional[str] = None
    mask_type: Optional[str] = None

    @property
    def template(self) -> str:
        return self.TEMPLATES[self.representation]

    @property
    def options(self) -> List[str]:
        return [constant.value for constant in self.constants]

    def _match(self, value: str) -> EnumConstant:
        for constant in self.constants:
            if constant.value == value:
                return constant
        raise UnmatchedEnumValue(f"{value!r} is not a valid {self.name} option")

    def from_raw(self, value: str) -> EnumConstant:
        """Resolve a raw string to its scalar constant."""
        return self._match(value)

    def mask_of(self, values: Iterable[str]) -> int:
        """Combine raw strings into a flag mask."""
        mask = 0
        for value in values:
            mask |= self._match(value).bit_value
        return mask

    def to_string(self, value) -> str:
        """Render a scalar constant or a flag mask back to its literal form."""
        if self.representation == EnumRepresentation.SCALAR:
            return value.value
        return MASK_SEPARATOR.join(
            constant.value for constant in self.constants if value & constant.bit_value
        )


def _unique_constants(
    enum_name: str, options: Sequence[str], flags: bool = False
) -> Tuple[EnumConstant, ...]:
    """Build one constant per option; two options may not share an identifier."""
    constants: Dict[str, EnumConstant] = {}

    for index, option in enumerate(options):
        identifier = to_safe_cpp_string(option)
        if identifier in constants:
            raise InvalidSchema(
                f"Options {constants[identifier].value!r} and {option!r} of "
                f"{enum_name} both map to enumerator {identifier}"
            )
        constants[identifier] = EnumConstant(
            value=option, identifier=identifier, bit=index if flags else None
        )

    return tuple(constants.values())


def generate_enum(component_name: str, prop: Prop) -> Optional[EnumDecl]:
    """Synthesize the scalar enum of a ``StringEnum`` prop."""
    options = prop.type_annotation.options
    if options is None:
        return None

    enum_name = get_enum_name(component_name, prop.name)
    return EnumDecl(
        name=enum_name,
        representation=EnumRepresentation.SCALAR,
        constants=_unique_constants(enum_name, options),
    )


def generate_mask_enum(
    component_name: str,
    prop_name: str,
    options: Sequence[str],
    mask_type: str = "uint32_t",
    mask_width: int = 32,
) -> EnumDecl:
    """Synthesize the bitmask enum of an ``Array(StringEnum)`` prop."""
    enum_name = get_enum_name(component_name, prop_name)

    if len(options) > mask_width:
        raise InvalidSchema(
            f"{enum_name} declares {len(options)} options but {mask_type} "
            f"holds only {mask_width} flags"
        )

    return EnumDecl(
        name=enum_name,
        representation=EnumRepresentation.BITMASK,
        constants=_unique_constants(enum_name, options, flags=True),
        mask_name=get_enum_mask_name(enum_name),
        mask_type=mask_type,
    )


def generate_enums(
    component_name: str,
    props: Iterable[Prop],
    mask_type: str = "uint32_t",
    mask_width: int = 32,
) -> List[EnumDecl]:
    """
    Synthesize the enums declared by a component's props.

    Only top-level props and props of directly nested objects are
    visited; enums nested deeper are not synthesized.

    Raises:
        EnumNameCollision: If two props produce the same enum name
    """
    enums: Dict[str, EnumDecl] = {}

    def add(decl: Optional[EnumDecl]):
        if decl is None:
            return
        if decl.name in enums:
            raise EnumNameCollision(
                f"Enum {decl.name} is declared more than once in {component_name}"
            )
        enums[decl.name] = decl

    for prop in props:
        annotation = prop.type_annotation

        if annotation.is_array_of(TypeKind.STRING_ENUM):
            options = annotation.element_type.options or ()
            add(
                generate_mask_enum(
                    component_name, prop.name, options, mask_type, mask_width
                )
            )

        elif annotation.kind == TypeKind.STRING_ENUM:
            add(generate_enum(component_name, prop))

        elif annotation.kind == TypeKind.OBJECT:
            properties = annotation.require_properties(component_name, prop.name)
            for inner in properties:
                if inner.type_annotation.kind == TypeKind.STRING_ENUM:
                    add(generate_enum(component_name, inner))

    logger.debug("Synthesized %d enum(s) for %s", len(enums), component_name)
    return list(enums.values())
