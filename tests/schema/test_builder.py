from toolschema.schema.builder import expand_fields, resolve_fragment, tool_specification_from
from toolschema.schema.properties import SchemaProperty
from toolschema.types import (
    INTEGER_TYPE,
    NUMBER_TYPE,
    STRING_TYPE,
    ArrayType,
    CallableDescriptor,
    CollectionType,
    EnumType,
    FieldDescriptor,
    ParameterDescriptor,
    StructType,
)

ADDRESS = StructType(
    "Address",
    [
        FieldDescriptor("street", STRING_TYPE),
        FieldDescriptor("zip", INTEGER_TYPE),
    ],
)

ADDRESS_SCHEMA = {
    "type": "object",
    "properties": {"street": {"type": "string"}, "zip": {"type": "integer"}},
}


class TestToolSpecificationFrom:
    """End-to-end builds from callable descriptors."""

    def test_required_and_optional_parameters(self):
        weather = CallableDescriptor(
            natural_name="weather",
            parameters=(
                ParameterDescriptor("city", STRING_TYPE, description="the city name"),
                ParameterDescriptor("days", INTEGER_TYPE, required=False),
            ),
        )
        spec = tool_specification_from(weather)
        assert spec.required == ("city",)
        assert spec.parameters == {
            "city": {"type": "string", "description": "the city name"},
            "days": {"type": "integer"},
        }

    def test_list_parameter(self):
        spec = tool_specification_from(
            CallableDescriptor("tag", (ParameterDescriptor("tags", CollectionType(STRING_TYPE)),))
        )
        assert spec.parameters == {"tags": {"type": "array", "items": {"type": "string"}}}
        assert spec.required == ("tags",)

    def test_structured_parameter(self):
        spec = tool_specification_from(CallableDescriptor("ship", (ParameterDescriptor("address", ADDRESS),)))
        assert spec.parameters == {"address": ADDRESS_SCHEMA}

    def test_memory_id_parameter_is_excluded(self):
        spec = tool_specification_from(
            CallableDescriptor(
                "chat",
                (
                    ParameterDescriptor("session_id", STRING_TYPE, memory_id=True),
                    ParameterDescriptor("text", STRING_TYPE),
                ),
            )
        )
        assert list(spec.parameters) == ["text"]
        assert spec.required == ("text",)

    def test_parameter_order_is_preserved(self):
        params = tuple(ParameterDescriptor(name, STRING_TYPE) for name in ("z", "a", "m"))
        spec = tool_specification_from(CallableDescriptor("order", params))
        assert list(spec.parameters) == ["z", "a", "m"]
        assert spec.required == ("z", "a", "m")

    def test_name_override_and_description_lines(self):
        spec = tool_specification_from(
            CallableDescriptor("get_weather", name="weather", description_lines=("Line one", "Line two"))
        )
        assert spec.name == "weather"
        assert spec.description == "Line one\nLine two"

    def test_blank_name_override_uses_natural_name(self):
        spec = tool_specification_from(CallableDescriptor("get_weather", name="  "))
        assert spec.name == "get_weather"

    def test_empty_description_is_empty_string(self):
        spec = tool_specification_from(CallableDescriptor("noop"))
        assert spec.description == ""
        assert spec.parameters == {}
        assert spec.required == ()

    def test_building_twice_gives_equal_specifications(self):
        node = StructType("Node")
        node.set_fields([FieldDescriptor("next", node), FieldDescriptor("tags", CollectionType(STRING_TYPE))])
        descriptor = CallableDescriptor(
            "walk",
            (ParameterDescriptor("start", node), ParameterDescriptor("address", ADDRESS, required=False)),
        )
        assert tool_specification_from(descriptor) == tool_specification_from(descriptor)


class TestResolveFragment:
    def test_description_on_every_kind(self):
        assert resolve_fragment(CollectionType(INTEGER_TYPE), "ids") == {
            "type": "array",
            "items": {"type": "integer"},
            "description": "ids",
        }
        assert resolve_fragment(ADDRESS, "where to ship") == dict(ADDRESS_SCHEMA, description="where to ship")
        assert resolve_fragment(EnumType("Unit", ("C", "F")), "unit") == {
            "type": "string",
            "enum": ["C", "F"],
            "description": "unit",
        }

    def test_untyped_collection_defaults_to_object_items(self):
        assert resolve_fragment(CollectionType()) == {"type": "array", "items": {"type": "object"}}

    def test_collection_of_structs(self):
        assert resolve_fragment(CollectionType(ADDRESS)) == {"type": "array", "items": ADDRESS_SCHEMA}

    def test_native_array_of_structs(self):
        assert resolve_fragment(ArrayType(ADDRESS)) == {"type": "array", "items": ADDRESS_SCHEMA}

    def test_collection_of_collections(self):
        assert resolve_fragment(CollectionType(CollectionType(NUMBER_TYPE))) == {
            "type": "array",
            "items": {"type": "array", "items": {"type": "number"}},
        }

    def test_nested_field_descriptions(self):
        customer = StructType(
            "Customer",
            [
                FieldDescriptor("name", STRING_TYPE, description="full name"),
                FieldDescriptor("address", ADDRESS, description="billing address"),
            ],
        )
        assert resolve_fragment(customer) == {
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": "full name"},
                "address": dict(ADDRESS_SCHEMA, description="billing address"),
            },
        }

    def test_static_and_synthetic_fields_are_skipped(self):
        inner = StructType(
            "Inner",
            [
                FieldDescriptor("outer", StructType("Outer", []), synthetic=True),
                FieldDescriptor("VERSION", INTEGER_TYPE, static=True),
                FieldDescriptor("value", STRING_TYPE),
            ],
        )
        assert resolve_fragment(inner) == {"type": "object", "properties": {"value": {"type": "string"}}}

    def test_struct_without_fields_has_empty_properties(self):
        assert resolve_fragment(StructType("Anything", [])) == {"type": "object", "properties": {}}


class TestCycles:
    def test_direct_self_reference_is_truncated(self):
        node = StructType("Node")
        node.set_fields([FieldDescriptor("value", INTEGER_TYPE), FieldDescriptor("next", node, description="tail")])
        assert resolve_fragment(node) == {
            "type": "object",
            "properties": {
                "value": {"type": "integer"},
                "next": {"type": "object", "description": "tail"},
            },
        }

    def test_indirect_cycle_is_truncated(self):
        a = StructType("A")
        b = StructType("B")
        a.set_fields([FieldDescriptor("b", b)])
        b.set_fields([FieldDescriptor("a", a)])
        assert resolve_fragment(a) == {
            "type": "object",
            "properties": {"b": {"type": "object", "properties": {"a": {"type": "object"}}}},
        }

    def test_list_of_self_terminates(self):
        tree = StructType("Tree")
        tree.set_fields([FieldDescriptor("label", STRING_TYPE), FieldDescriptor("children", CollectionType(tree))])
        assert resolve_fragment(tree) == {
            "type": "object",
            "properties": {
                "label": {"type": "string"},
                "children": {"type": "array", "items": {"type": "object"}},
            },
        }

    def test_native_array_of_self_terminates(self):
        tree = StructType("Tree")
        tree.set_fields([FieldDescriptor("children", ArrayType(tree))])
        assert resolve_fragment(tree) == {
            "type": "object",
            "properties": {"children": {"type": "array", "items": {"type": "object"}}},
        }

    def test_sibling_fields_of_the_same_type_both_expand(self):
        person = StructType("Person", [FieldDescriptor("home", ADDRESS), FieldDescriptor("work", ADDRESS)])
        assert resolve_fragment(person) == {
            "type": "object",
            "properties": {"home": ADDRESS_SCHEMA, "work": ADDRESS_SCHEMA},
        }

    def test_cousin_reuse_after_cycle(self):
        node = StructType("Node")
        node.set_fields([FieldDescriptor("next", node)])
        pair = StructType("Pair", [FieldDescriptor("left", node), FieldDescriptor("right", node)])
        expected_node = {"type": "object", "properties": {"next": {"type": "object"}}}
        assert resolve_fragment(pair) == {
            "type": "object",
            "properties": {"left": expected_node, "right": expected_node},
        }

    def test_expand_fields_returns_none_for_a_type_on_the_path(self):
        visited = {ADDRESS}
        assert expand_fields(ADDRESS, visited) is None
        assert visited == {ADDRESS}

    def test_visited_set_is_empty_after_expansion(self):
        visited = set()
        result = expand_fields(ADDRESS, visited)
        assert result == SchemaProperty("properties", ADDRESS_SCHEMA["properties"])
        assert visited == set()
