"""Base capability references for generated props classes."""

from typing import List, Set, Tuple

from ...core.errors import InvalidSchema
from ...core.schema import ExtendsClause, ExtendsKind, KnownTypeName

VIEW_PROPS_IMPORT = "#include <react/components/view/ViewProps.h>"


def get_base_capability(clause: ExtendsClause) -> Tuple[str, str]:
    """
    Map an extends clause to its base class reference and required include.

    Returns:
        Tuple of (inheritance fragment, include line)
    """
    if clause.kind == ExtendsKind.REACT_NATIVE_BUILT_IN_TYPE:
        if clause.known_type_name == KnownTypeName.REACT_NATIVE_CORE_VIEW_PROPS:
            return "public ViewProps", VIEW_PROPS_IMPORT
        raise InvalidSchema(f"Invalid knownTypeName: {clause.known_type_name}")

    raise InvalidSchema(f"Invalid extended type: {clause.kind}")


def get_class_extend_string(extends_props: List[ExtendsClause]) -> str:
    """Inheritance clause appended after ``final``; empty without base classes."""
    if not extends_props:
        return ""
    return " : " + ", ".join(get_base_capability(c)[0] for c in extends_props)


def get_extends_imports(extends_props: List[ExtendsClause]) -> Set[str]:
    """Includes required by a component's base classes."""
    return {get_base_capability(clause)[1] for clause in extends_props}
