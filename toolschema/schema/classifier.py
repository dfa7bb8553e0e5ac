"""Type classifier: map a simple type descriptor to its schema properties."""
from toolschema.schema.properties import (
    ARRAY,
    BOOLEAN,
    INTEGER,
    NUMBER,
    STRING,
    SchemaProperty,
    enums,
    fragment_items,
    remove_nulls,
    to_schema,
)
from toolschema.types import ArrayType, EnumType, Primitive, PrimitiveType, TypeDescriptor

# None is the "not simple" signal: the caller falls through to collection / object handling.
NOT_SIMPLE = None

_PRIMITIVES = {
    Primitive.STRING: STRING,
    Primitive.BOOLEAN: BOOLEAN,
    Primitive.INTEGER: INTEGER,
    Primitive.NUMBER: NUMBER,
}


def classify(
    type_descriptor: TypeDescriptor,
    description: SchemaProperty | None = None,
) -> list[SchemaProperty] | None:
    """Return the schema properties for a simple type, or NOT_SIMPLE.
    Order: string, boolean, integer, number, native array, enum. The description,
    when given, is appended to the produced properties.
    """
    if isinstance(type_descriptor, PrimitiveType):
        return remove_nulls(_PRIMITIVES[type_descriptor.kind], description)

    if isinstance(type_descriptor, ArrayType):
        element = classify(type_descriptor.element)
        if element is NOT_SIMPLE:
            # Structured / collection elements need the builder's visited set.
            return NOT_SIMPLE
        return remove_nulls(ARRAY, fragment_items(to_schema(element)), description)

    if isinstance(type_descriptor, EnumType):
        return remove_nulls(STRING, enums(type_descriptor.values), description)

    return NOT_SIMPLE
