"""Shared pytest fixtures for props-codegen tests."""

import json
from pathlib import Path

import pytest

from props_codegen.core.schema import convert_schema_document

VIEW_PROPS_EXTENDS = {
    "type": "ReactNativeBuiltInType",
    "knownTypeName": "ReactNativeCoreViewProps",
}

COMPONENT_NAME = "MyComponent"


def prop(name, annotation):
    """Build a raw prop entry."""
    return {"name": name, "optional": True, "typeAnnotation": annotation}


def object_of(*properties):
    return {"type": "ObjectTypeAnnotation", "properties": list(properties)}


def array_of(element):
    return {"type": "ArrayTypeAnnotation", "elementType": element}


def string_enum(*options, default=None):
    annotation = {
        "type": "StringEnumTypeAnnotation",
        "options": [{"name": option} for option in options],
    }
    if default is not None:
        annotation["default"] = default
    return annotation


def native(name):
    return {"type": "NativePrimitiveTypeAnnotation", "name": name}


def scalar(kind, default=None):
    annotation = {"type": kind}
    if default is not None:
        annotation["default"] = default
    return annotation


def component_document(props, name=COMPONENT_NAME, extends=None):
    """Build a single-component schema document."""
    if extends is None:
        extends = [VIEW_PROPS_EXTENDS]
    return {
        "modules": {
            f"{name}Module": {
                "components": {name: {"extendsProps": extends, "props": props}}
            }
        }
    }


@pytest.fixture
def schema_for():
    """Return a factory converting a prop list into a one-component Schema."""

    def factory(props, name=COMPONENT_NAME, extends=None):
        return convert_schema_document(component_document(props, name, extends))

    return factory


@pytest.fixture
def component_for(schema_for):
    """Return a factory converting a prop list into a Component."""

    def factory(props, name=COMPONENT_NAME, extends=None):
        return schema_for(props, name, extends).get_component(name)

    return factory


@pytest.fixture
def color_props():
    """One native color prop."""
    return [prop("color", native("ColorPrimitive"))]


@pytest.fixture
def alignment_props():
    """A scalar string enum prop."""
    return [prop("alignment", string_enum("left", "right", default="left"))]


@pytest.fixture
def edges_props():
    """An array-of-enum prop synthesized as a bitmask."""
    return [
        prop(
            "edges",
            array_of(string_enum("top", "left", "bottom", "right", default="top")),
        )
    ]


@pytest.fixture
def insets_props():
    """An object prop with two float properties."""
    return [
        prop(
            "insets",
            object_of(
                prop("top", scalar("FloatTypeAnnotation")),
                prop("left", scalar("FloatTypeAnnotation")),
            ),
        )
    ]


@pytest.fixture
def items_props():
    """An array-of-object prop."""
    return [prop("items", array_of(object_of(prop("id", scalar("Int32TypeAnnotation")))))]


@pytest.fixture
def nested_props():
    """An object prop with a nested object property."""
    return [
        prop(
            "insets",
            object_of(
                prop("inner", object_of(prop("x", scalar("Int32TypeAnnotation")))),
                prop("scale", scalar("DoubleTypeAnnotation")),
            ),
        )
    ]


@pytest.fixture
def kitchen_sink_document():
    """Two modules exercising every annotation kind."""
    slider = component_document(
        [
            prop("disabled", scalar("BooleanTypeAnnotation", False)),
            prop("label", scalar("StringTypeAnnotation", "Slide")),
            prop("steps", scalar("Int32TypeAnnotation", 10)),
            prop("value", scalar("DoubleTypeAnnotation", 0.5)),
            prop("maximum", scalar("FloatTypeAnnotation", 1)),
            prop("tint", native("ColorPrimitive")),
            prop("thumb", native("ImageSourcePrimitive")),
            prop("origin", native("PointPrimitive")),
            prop("size", string_enum("small", "large", default="small")),
            prop(
                "edges",
                array_of(string_enum("top", "left", "bottom", "right", default="top")),
            ),
            prop(
                "track",
                object_of(
                    prop("height", scalar("FloatTypeAnnotation")),
                    prop("image", native("ImageSourcePrimitive")),
                    prop("mode", string_enum("fill", "fit")),
                ),
            ),
            prop("marks", array_of(object_of(prop("at", scalar("DoubleTypeAnnotation"))))),
            prop("colors", array_of(native("ColorPrimitive"))),
        ],
        name="Slider",
    )
    badge = component_document(
        [prop("count", scalar("Int32TypeAnnotation", 0))], name="Badge", extends=[]
    )

    document = {"modules": {}}
    document["modules"].update(slider["modules"])
    document["modules"].update(badge["modules"])
    return document


@pytest.fixture
def schema_file(tmp_path: Path, kitchen_sink_document) -> Path:
    """Write the kitchen sink document to a JSON file."""
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(kitchen_sink_document), encoding="utf-8")
    return path
