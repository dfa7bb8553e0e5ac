"""Schema properties: composable key/value fragments of a JSON schema."""
from dataclasses import dataclass
from typing import Any, Iterable, Mapping


@dataclass(frozen=True)
class SchemaProperty:
    """One fragment of a schema, e.g. type="string" or description="the city name"."""

    key: str
    value: Any


STRING = SchemaProperty("type", "string")
BOOLEAN = SchemaProperty("type", "boolean")
INTEGER = SchemaProperty("type", "integer")
NUMBER = SchemaProperty("type", "number")
OBJECT = SchemaProperty("type", "object")
ARRAY = SchemaProperty("type", "array")


def description(text: str | None) -> SchemaProperty | None:
    """None when there is no description, so it is dropped by remove_nulls."""
    if text is None:
        return None
    return SchemaProperty("description", text)


def enums(values: Iterable[str]) -> SchemaProperty:
    return SchemaProperty("enum", list(values))


def items(type_property: SchemaProperty) -> SchemaProperty:
    """items={"type": ...} for a simple element type."""
    return SchemaProperty("items", to_schema([type_property]))


def fragment_items(fragment: Mapping[str, Any]) -> SchemaProperty:
    """items=<already merged fragment>."""
    return SchemaProperty("items", dict(fragment))


def properties(fields: Mapping[str, Mapping[str, Any]]) -> SchemaProperty:
    return SchemaProperty("properties", dict(fields))


def remove_nulls(*props: SchemaProperty | None) -> list[SchemaProperty]:
    return [p for p in props if p is not None]


def to_schema(props: Iterable[SchemaProperty | None]) -> dict[str, Any]:
    """Merge properties into one schema dict. Later keys win; None entries are skipped."""
    schema: dict[str, Any] = {}
    for prop in props:
        if prop is None or prop.value is None:
            continue
        schema[prop.key] = prop.value
    return schema
