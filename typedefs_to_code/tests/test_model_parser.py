import logging

import pytest

from typedefs_to_code.pipeline.errors import InvalidDefinitionError
from typedefs_to_code.pipeline.model_ast import (
    ArrayOf,
    EnumDefinition,
    ModelParser,
    Primitive,
    RecordDefinition,
    Reference,
    Required,
)


@pytest.fixture
def parser():
    return ModelParser()


class TestFieldSpecs:
    def test_bare_primitive_is_optional(self, parser):
        assert parser.parse_field_spec("T", "f", "string") == Primitive("string")

    def test_bare_reference(self, parser):
        assert parser.parse_field_spec("T", "f", "Address") == Reference("Address")

    def test_object_form_without_flags(self, parser):
        assert parser.parse_field_spec("T", "f", {"type": "id"}) == Primitive("id")

    def test_required(self, parser):
        assert parser.parse_field_spec("T", "f", {"type": "number", "required": True}) == Required(Primitive("number"))

    def test_required_false_is_optional(self, parser):
        assert parser.parse_field_spec("T", "f", {"type": "number", "required": False}) == Primitive("number")

    def test_array_of_primitive(self, parser):
        assert parser.parse_field_spec("T", "f", {"type": "array", "arrayType": "string"}) == ArrayOf(Primitive("string"))

    def test_required_array_of_reference(self, parser):
        spec = parser.parse_field_spec("T", "f", {"type": "array", "arrayType": "Tag", "required": True})
        assert spec == Required(ArrayOf(Reference("Tag")))

    def test_array_without_array_type(self, parser):
        with pytest.raises(InvalidDefinitionError) as exc_info:
            parser.parse_field_spec("T", "f", {"type": "array"})
        assert exc_info.value.type_name == "T"
        assert "arrayType" in exc_info.value.rule

    def test_bare_array_token(self, parser):
        with pytest.raises(InvalidDefinitionError):
            parser.parse_field_spec("T", "f", "array")

    def test_missing_type(self, parser):
        with pytest.raises(InvalidDefinitionError):
            parser.parse_field_spec("T", "f", {"required": True})

    @pytest.mark.parametrize("type_info", [3, None, ["string"], ""])
    def test_invalid_shapes(self, parser, type_info):
        with pytest.raises(InvalidDefinitionError):
            parser.parse_field_spec("T", "f", type_info)


class TestDefinitions:
    def test_record(self, parser):
        model = parser.parse({"Point": {"fields": {"x": "number", "y": "number"}}})
        point = model["Point"]
        assert isinstance(point, RecordDefinition)
        assert [f.name for f in point.fields] == ["x", "y"]
        assert point.extends is None
        assert not point.db_base
        assert not point.is_alias

    def test_field_order_is_preserved(self, parser):
        model = parser.parse({"T": {"fields": {"z": "string", "a": "string", "m": "string"}}})
        assert [f.name for f in model["T"].fields] == ["z", "a", "m"]

    def test_db_base(self, parser):
        model = parser.parse({"Doc": {"fields": {"a": "string"}, "meta": {"dbBase": True}}})
        assert model["Doc"].db_base

    def test_pure_extension_without_fields_key(self, parser):
        model = parser.parse({"Base": {"fields": {"a": "string"}}, "Alias": {"extends": "Base"}})
        alias = model["Alias"]
        assert isinstance(alias, RecordDefinition)
        assert alias.is_alias

    def test_pure_extension_with_empty_fields(self, parser):
        model = parser.parse({"Base": {"fields": {"a": "string"}}, "Alias": {"extends": "Base", "fields": {}}})
        assert model["Alias"].is_alias

    def test_enum(self, parser):
        model = parser.parse({"Color": {"values": ["RED", "GREEN"]}})
        assert isinstance(model["Color"], EnumDefinition)
        assert model["Color"].values == ["RED", "GREEN"]

    def test_fields_take_priority_over_values(self, parser):
        model = parser.parse({"T": {"fields": {"a": "string"}, "values": ["A"]}})
        assert isinstance(model["T"], RecordDefinition)

    def test_neither_fields_nor_values(self, parser):
        with pytest.raises(InvalidDefinitionError) as exc_info:
            parser.parse({"Broken": {"meta": {"dbBase": True}}})
        assert exc_info.value.type_name == "Broken"

    def test_definition_must_be_an_object(self, parser):
        with pytest.raises(InvalidDefinitionError):
            parser.parse({"Broken": "string"})

    def test_values_must_be_strings(self, parser):
        with pytest.raises(InvalidDefinitionError):
            parser.parse({"Broken": {"values": ["A", 1]}})

    def test_empty_values(self, parser):
        with pytest.raises(InvalidDefinitionError) as exc_info:
            parser.parse({"Empty": {"values": []}})
        assert exc_info.value.type_name == "Empty"

    @pytest.mark.parametrize("value", ["{", "}}", "in-progress", "1st", ""])
    def test_values_must_be_graphql_names(self, parser, value):
        with pytest.raises(InvalidDefinitionError):
            parser.parse({"Broken": {"values": ["OK", value]}})

    @pytest.mark.parametrize("field_name", ["{", "content-type", "2fa", "a b"])
    def test_field_names_must_be_graphql_names(self, parser, field_name):
        with pytest.raises(InvalidDefinitionError):
            parser.parse({"Broken": {"fields": {field_name: "string"}}})

    def test_underscore_names(self, parser):
        model = parser.parse({"T": {"fields": {"_id": "id", "created_at": "string"}}, "E": {"values": ["_A", "B_2"]}})
        assert [f.name for f in model["T"].fields] == ["_id", "created_at"]
        assert model["E"].values == ["_A", "B_2"]

    def test_enum_cannot_extend(self, parser):
        with pytest.raises(InvalidDefinitionError):
            parser.parse({"Base": {"fields": {"a": "string"}}, "E": {"values": ["A"], "extends": "Base"}})

    def test_record_cannot_extend_enum(self, parser):
        with pytest.raises(InvalidDefinitionError) as exc_info:
            parser.parse({"Color": {"values": ["RED"]}, "Shade": {"extends": "Color"}})
        assert exc_info.value.type_name == "Shade"

    def test_missing_parent_is_left_to_tree_builder(self, parser):
        model = parser.parse({"Orphan": {"extends": "Ghost"}})
        assert model["Orphan"].extends == "Ghost"

    def test_unknown_reference_is_logged(self, parser, caplog):
        with caplog.at_level(logging.WARNING):
            model = parser.parse({"T": {"fields": {"owner": {"type": "array", "arrayType": "Nobody"}}}})
        assert model["T"].fields[0].spec == ArrayOf(Reference("Nobody"))
        assert "T.owner references unknown type Nobody" in caplog.text
