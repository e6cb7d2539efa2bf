"""Tests for scalar and bitmask enum synthesis."""

from itertools import combinations

import pytest

from props_codegen.core.errors import EnumNameCollision, InvalidSchema, UnmatchedEnumValue
from props_codegen.languages.cpp.enums import (
    EnumRepresentation,
    generate_enum,
    generate_enums,
    generate_mask_enum,
)

from conftest import array_of, object_of, prop, scalar, string_enum

EDGES = ["top", "left", "bottom", "right"]


# ============================================================================
# Scalar Enum Tests
# ============================================================================


@pytest.mark.unit
def test_generate_enum(component_for, alignment_props):
    """Test a string enum becomes a scalar enum with ordered constants."""
    alignment = component_for(alignment_props).props[0]

    enum = generate_enum("MyComponent", alignment)

    assert enum.name == "MyComponentAlignment"
    assert enum.representation == EnumRepresentation.SCALAR
    assert enum.options == ["left", "right"]
    assert [c.identifier for c in enum.constants] == ["Left", "Right"]
    assert enum.template == "enum.h.j2"


@pytest.mark.unit
def test_generate_enum_without_options(component_for):
    """Test enums without options are not synthesized."""
    mode = component_for([prop("mode", {"type": "StringEnumTypeAnnotation"})]).props[0]

    assert generate_enum("MyComponent", mode) is None


@pytest.mark.unit
def test_scalar_enum_from_raw_and_to_string(component_for, alignment_props):
    """Test raw strings resolve to their constant and back."""
    enum = generate_enum("MyComponent", component_for(alignment_props).props[0])

    right = enum.from_raw("right")
    assert right.identifier == "Right"
    assert enum.to_string(right) == "right"


@pytest.mark.unit
def test_scalar_enum_unmatched_value(component_for, alignment_props):
    """Test an unknown raw string is fatal."""
    enum = generate_enum("MyComponent", component_for(alignment_props).props[0])

    with pytest.raises(UnmatchedEnumValue):
        enum.from_raw("center")


# ============================================================================
# Bitmask Enum Tests
# ============================================================================


@pytest.mark.unit
def test_mask_bits_follow_declared_order():
    """Test option i is assigned 1 << i."""
    enum = generate_mask_enum("MyComponent", "edges", EDGES)

    assert enum.representation == EnumRepresentation.BITMASK
    assert [c.bit_value for c in enum.constants] == [1, 2, 4, 8]
    assert enum.mask_name == "MyComponentEdgesMask"
    assert enum.mask_type == "uint32_t"
    assert enum.template == "mask_enum.h.j2"


@pytest.mark.unit
def test_mask_of_left_and_right():
    """Test combining raw strings into a mask."""
    enum = generate_mask_enum("MyComponent", "edges", EDGES)

    assert enum.mask_of(["left", "right"]) == 10
    assert enum.to_string(10) == "left, right"


@pytest.mark.unit
def test_mask_round_trip_for_every_subset():
    """Test subset -> mask -> strings recovers the subset."""
    enum = generate_mask_enum("MyComponent", "edges", EDGES)

    for size in range(1, len(EDGES) + 1):
        for subset in combinations(EDGES, size):
            mask = enum.mask_of(subset)
            assert set(enum.to_string(mask).split(", ")) == set(subset)

    assert enum.mask_of([]) == 0
    assert enum.to_string(0) == ""


@pytest.mark.unit
def test_mask_unmatched_value():
    """Test an unknown flag is fatal."""
    enum = generate_mask_enum("MyComponent", "edges", EDGES)

    with pytest.raises(UnmatchedEnumValue):
        enum.mask_of(["left", "middle"])


@pytest.mark.unit
def test_mask_width_cap():
    """Test options beyond the mask width are rejected."""
    options = [f"option{i}" for i in range(9)]

    generate_mask_enum("MyComponent", "flags", options[:8], "uint8_t", 8)
    with pytest.raises(InvalidSchema):
        generate_mask_enum("MyComponent", "flags", options, "uint8_t", 8)


# ============================================================================
# Enum Collection Tests
# ============================================================================


@pytest.mark.unit
def test_generate_enums_top_level(component_for, alignment_props, edges_props):
    """Test scalar and bitmask enums are collected in prop order."""
    component = component_for(edges_props + alignment_props)

    enums = generate_enums("MyComponent", component.props)

    assert [e.name for e in enums] == ["MyComponentEdges", "MyComponentAlignment"]
    assert [e.representation for e in enums] == [
        EnumRepresentation.BITMASK,
        EnumRepresentation.SCALAR,
    ]


@pytest.mark.unit
def test_generate_enums_one_object_level_deep(component_for):
    """Test scalar enums of directly nested objects are collected."""
    component = component_for(
        [prop("track", object_of(prop("mode", string_enum("fill", "fit"))))]
    )

    enums = generate_enums("MyComponent", component.props)

    assert [e.name for e in enums] == ["MyComponentMode"]


@pytest.mark.unit
def test_generate_enums_ignores_deeper_enums(component_for):
    """Test enums two objects deep or inside object arrays are not collected."""
    component = component_for(
        [
            prop(
                "a",
                object_of(prop("b", object_of(prop("c", string_enum("x", "y"))))),
            ),
            prop("items", array_of(object_of(prop("kind", string_enum("p", "q"))))),
        ]
    )

    assert generate_enums("MyComponent", component.props) == []


@pytest.mark.unit
def test_generate_enums_name_collision(component_for):
    """Test two enum props sharing a name are reported."""
    component = component_for(
        [
            prop("a", object_of(prop("mode", string_enum("x", "y")))),
            prop("b", object_of(prop("mode", string_enum("x", "y")))),
        ]
    )

    with pytest.raises(EnumNameCollision):
        generate_enums("MyComponent", component.props)


@pytest.mark.unit
def test_generate_enums_respects_mask_width(component_for):
    """Test the configured mask width applies to collected bitmasks."""
    options = [f"o{i}" for i in range(9)]
    component = component_for([prop("flags", array_of(string_enum(*options)))])

    with pytest.raises(InvalidSchema):
        generate_enums("MyComponent", component.props, "uint8_t", 8)


@pytest.mark.unit
def test_generate_enums_skips_other_props(component_for):
    """Test non-enum props produce no enums."""
    component = component_for([prop("n", scalar("Int32TypeAnnotation"))])

    assert generate_enums("MyComponent", component.props) == []


@pytest.mark.unit
def test_options_sharing_an_identifier_rejected(component_for):
    """Test distinct options mapping to one enumerator are reported."""
    mode = component_for([prop("mode", string_enum("on-off", "onOff"))]).props[0]

    with pytest.raises(InvalidSchema, match="OnOff"):
        generate_enum("MyComponent", mode)


@pytest.mark.unit
def test_flags_sharing_an_identifier_rejected():
    """Test distinct flags mapping to one enumerator are reported."""
    with pytest.raises(InvalidSchema, match="FlexStart"):
        generate_mask_enum("MyComponent", "edges", ["flex-start", "top", "flex start"])
