"""Tests for include resolution and default literals."""

import pytest

from props_codegen.core.errors import InvalidSchema
from props_codegen.languages.cpp.defaults import convert_default_to_string
from props_codegen.languages.cpp.extends import get_class_extend_string
from props_codegen.languages.cpp.imports import (
    CINTTYPES_IMPORT,
    IMAGE_CONVERSIONS_IMPORT,
    PROPS_CONVERSIONS_IMPORT,
    VECTOR_IMPORT,
    get_component_imports,
    get_conversion_imports,
    get_local_imports,
)

from conftest import array_of, native, object_of, prop, scalar, string_enum

COLOR_IMPORT = "#include <react/graphics/Color.h>"
IMAGE_IMPORT = "#include <react/imagemanager/primitives.h>"
POINT_IMPORT = "#include <react/graphics/Geometry.h>"
VIEW_PROPS_IMPORT = "#include <react/components/view/ViewProps.h>"


# ============================================================================
# Import Tests
# ============================================================================


@pytest.mark.unit
def test_color_import(component_for, color_props):
    """Test a color prop needs only the color include."""
    component = component_for(color_props)

    assert get_local_imports(component.props) == {COLOR_IMPORT}


@pytest.mark.unit
def test_scalar_props_need_no_imports(component_for):
    """Test scalars and enums need no includes."""
    component = component_for(
        [prop("a", scalar("BooleanTypeAnnotation")), prop("b", string_enum("x", "y"))]
    )

    assert get_local_imports(component.props) == set()


@pytest.mark.unit
def test_array_of_enum_imports(component_for, edges_props):
    """Test bitmask props need vector and fixed-width integer includes."""
    component = component_for(edges_props)

    assert get_local_imports(component.props) == {VECTOR_IMPORT, CINTTYPES_IMPORT}


@pytest.mark.unit
def test_array_of_primitive_imports(component_for):
    """Test primitive arrays need vector and the primitive include."""
    component = component_for([prop("points", array_of(native("PointPrimitive")))])

    assert get_local_imports(component.props) == {VECTOR_IMPORT, POINT_IMPORT}


@pytest.mark.unit
def test_object_imports_recurse(component_for):
    """Test objects pull in conversions and their inner includes."""
    component = component_for(
        [prop("track", object_of(prop("image", native("ImageSourcePrimitive"))))]
    )

    assert get_local_imports(component.props) == {
        PROPS_CONVERSIONS_IMPORT,
        IMAGE_CONVERSIONS_IMPORT,
        IMAGE_IMPORT,
    }


@pytest.mark.unit
def test_array_of_object_imports(component_for, items_props):
    """Test object arrays need vector and conversions."""
    component = component_for(items_props)

    assert get_local_imports(component.props) == {VECTOR_IMPORT, PROPS_CONVERSIONS_IMPORT}


@pytest.mark.unit
def test_nested_object_imports(component_for):
    """Test includes of deeply nested props are collected."""
    component = component_for(
        [
            prop(
                "outer",
                object_of(prop("inner", object_of(prop("tint", native("ColorPrimitive"))))),
            )
        ]
    )

    assert get_local_imports(component.props) == {PROPS_CONVERSIONS_IMPORT, COLOR_IMPORT}


@pytest.mark.unit
def test_conversion_imports_only_for_image_sources(component_for):
    """Test only image sources need conversion support."""
    component = component_for(
        [
            prop("tint", native("ColorPrimitive")),
            prop("images", array_of(native("ImageSourcePrimitive"))),
        ]
    )

    assert get_conversion_imports(component.props) == {IMAGE_CONVERSIONS_IMPORT}


@pytest.mark.unit
def test_component_imports_include_base_class(component_for, color_props):
    """Test base capabilities contribute their include."""
    with_base = component_for(color_props)
    without_base = component_for(color_props, extends=[])

    assert get_component_imports(with_base) == {VIEW_PROPS_IMPORT, COLOR_IMPORT}
    assert get_component_imports(without_base) == {COLOR_IMPORT}


@pytest.mark.unit
def test_class_extend_string(component_for):
    """Test the inheritance clause is empty without base classes."""
    assert get_class_extend_string(component_for([]).extends_props) == " : public ViewProps"
    assert get_class_extend_string(component_for([], extends=[]).extends_props) == ""


# ============================================================================
# Default Literal Tests
# ============================================================================


def _default_of(component_for, annotation):
    component = component_for([prop("value", annotation)])
    return convert_default_to_string("MyComponent", component.props[0])


@pytest.mark.unit
@pytest.mark.parametrize(
    "annotation,expected",
    [
        (scalar("BooleanTypeAnnotation", True), "true"),
        (scalar("BooleanTypeAnnotation", False), "false"),
        (scalar("BooleanTypeAnnotation"), ""),
        (scalar("StringTypeAnnotation", "hello"), '"hello"'),
        (scalar("StringTypeAnnotation", 'say "hi"'), '"say \\"hi\\""'),
        (scalar("StringTypeAnnotation"), ""),
        (scalar("Int32TypeAnnotation", 3), "3"),
        (scalar("Int32TypeAnnotation", 0), "0"),
        (scalar("DoubleTypeAnnotation", 1), "1.0"),
        (scalar("DoubleTypeAnnotation", 0.5), "0.5"),
        (scalar("FloatTypeAnnotation", 0), "0.0"),
        (scalar("FloatTypeAnnotation"), ""),
        (native("ColorPrimitive"), ""),
        (array_of(scalar("Int32TypeAnnotation")), ""),
        (object_of(prop("x", scalar("Int32TypeAnnotation"))), ""),
    ],
)
def test_default_literals(component_for, annotation, expected):
    """Test default literals per annotation kind."""
    assert _default_of(component_for, annotation) == expected


@pytest.mark.unit
def test_scalar_enum_default(component_for):
    """Test enum defaults reference the enum constant."""
    annotation = string_enum("flex-start", "space-between", default="space-between")

    assert _default_of(component_for, annotation) == "MyComponentValue::SpaceBetween"


@pytest.mark.unit
def test_array_enum_default(component_for, edges_props):
    """Test bitmask defaults cast the constant to the mask type."""
    component = component_for(edges_props)

    assert (
        convert_default_to_string("MyComponent", component.props[0])
        == "static_cast<MyComponentEdgesMask>(MyComponentEdges::Top)"
    )


@pytest.mark.unit
def test_enum_default_is_required(component_for):
    """Test enums without a default are rejected."""
    with pytest.raises(InvalidSchema):
        _default_of(component_for, string_enum("a", "b"))


@pytest.mark.unit
def test_enum_default_must_be_an_option(component_for):
    """Test enum defaults outside the options are rejected."""
    with pytest.raises(InvalidSchema):
        _default_of(component_for, string_enum("a", "b", default="c"))
