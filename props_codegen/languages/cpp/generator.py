"""
C++ props header generator.

Renders one props class per component, preceded by the enums and
structs its props need, and wraps every class of a schema in a single
header.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Set

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.schema import Component, Schema, TypeKind
from ...logging_config import get_logger
from .defaults import convert_default_to_string
from .enums import MASK_SEPARATOR, EnumDecl, generate_enums
from .extends import get_class_extend_string
from .imports import get_component_imports
from .structs import StructMap, generate_structs
from .types import get_native_type

logger = get_logger(__name__)


@dataclass(frozen=True)
class PropField:
    """A member of a generated props class."""

    type_name: str
    name: str
    default: str


class PropsHeaderGenerator(CodeGenerator):
    """Code generator for C++ props classes and their conversions."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize the generator with configuration."""
        super().__init__(config)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "cpp"

    @property
    def file_extension(self) -> str:
        """Return C++ header extension."""
        return ".h"

    def get_template_directory(self) -> Path:
        """Return the C++ templates directory."""
        return Path(__file__).parent / "templates"

    def generate(self, schema: Schema) -> str:
        """Generate the complete header for all components of a schema."""
        all_imports: Set[str] = set()
        component_classes = []

        for component in schema.iter_components():
            component_classes.append(self.generate_component(component))
            all_imports |= self.get_component_imports(component)

        context = {
            "banner": self.config.banner,
            "imports": sorted(all_imports),
            "namespaces": self.config.namespaces,
            "component_classes": "\n\n".join(component_classes),
        }
        return self.render_template("props_file.h.j2", context)

    def generate_component(self, component: Component) -> str:
        """Render the props class of one component with its declarations."""
        name = component.name

        structs = generate_structs(name, component.props)
        enums = generate_enums(
            name, component.props, self.config.mask_type, self.config.mask_width
        )
        logger.debug(
            "Rendering %s with %d enum(s) and %d struct declaration(s)",
            name,
            len(enums),
            len(structs),
        )

        sections = [self._render_enums(enums), self._render_structs(structs)]
        context = {
            "declarations": "\n\n".join(section for section in sections if section),
            "class_name": f"{name}{self.config.class_suffix}",
            "extends": get_class_extend_string(component.extends_props),
            "fields": self._generate_fields(component),
        }
        return self.render_template("component.h.j2", context).strip()

    def get_component_imports(self, component: Component) -> Set[str]:
        """Includes required by one component's declarations."""
        return get_component_imports(component)

    def _render_enums(self, enums: List[EnumDecl]) -> str:
        return "\n\n".join(
            self.render_template(
                enum.template, {"enum": enum, "separator": MASK_SEPARATOR}
            )
            for enum in enums
        )

    def _render_structs(self, structs: StructMap) -> str:
        return "\n\n".join(
            self.render_template(decl.template, {"struct": decl})
            for decl in structs.values()
        )

    def _generate_fields(self, component: Component) -> List[PropField]:
        return [
            PropField(
                type_name=get_native_type(component.name, prop),
                name=prop.name,
                default=convert_default_to_string(component.name, prop),
            )
            for prop in component.props
        ]

    def validate_schema(self, schema: Schema) -> List[str]:
        """Validate a schema for C++ generation."""
        warnings = super().validate_schema(schema)

        for component in schema.iter_components():
            for path in _find_deep_enums(component.props):
                warnings.append(
                    f"Enum prop {component.name}.{'.'.join(path)} is nested more "
                    f"than one object deep and will not be declared"
                )

        return warnings


def _find_deep_enums(props, path=(), declares_scalars=True, declares_masks=True):
    """Yield paths of enum-typed props that ``generate_enums`` does not reach."""
    for prop in props:
        annotation = prop.type_annotation
        prop_path = path + (prop.name,)

        if annotation.kind == TypeKind.STRING_ENUM and not declares_scalars:
            yield prop_path
        elif annotation.is_array_of(TypeKind.STRING_ENUM) and not declares_masks:
            yield prop_path

        # Only scalar enums of objects directly under the component are declared
        if annotation.kind == TypeKind.OBJECT:
            yield from _find_deep_enums(
                annotation.properties or (), prop_path, not path, False
            )
        elif annotation.is_array_of(TypeKind.OBJECT):
            yield from _find_deep_enums(
                annotation.element_type.properties or (), prop_path, False, False
            )


def create_props_header_generator(
    config: Optional[GeneratorConfig] = None,
) -> PropsHeaderGenerator:
    """Create a props header generator with default configuration."""
    return PropsHeaderGenerator(config or GeneratorConfig())
