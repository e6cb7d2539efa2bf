"""
Exceptions raised while generating props headers.

Every generator-time error aborts the whole generation pass.
"""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class InvalidSchema(GeneratorError):
    """A type annotation, native primitive or extends clause is not recognized."""

    pass


class EnumNameCollision(InvalidSchema):
    """Two enum-typed props of one component map to the same enum name."""

    pass


class UnsupportedNesting(GeneratorError):
    """An array element type is itself an array."""

    pass


class MissingObjectProperties(GeneratorError):
    """An object-typed prop has no property list."""

    pass


class UnmatchedEnumValue(GeneratorError):
    """A raw value matches none of the declared enum options."""

    pass
