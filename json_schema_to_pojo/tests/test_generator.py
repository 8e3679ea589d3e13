"""
Tests for mapping schema documents into the type model.
"""

import logging
import unittest
from decimal import Decimal
from pathlib import Path

import pytest

from json_schema_to_pojo import CodeModel, GenerationConfig, RuleFactory, SchemaMapper
from json_schema_to_pojo.errors import SchemaResolutionError
from json_schema_to_pojo.generator import find_schema_files, generate
from json_schema_to_pojo.model import ContainerType, DefinedClass

SCHEMA_DIR = Path(__file__).parent / "test_data" / "schema"
JACKSON = "com.fasterxml.jackson.annotation"


def generate_class(schema_file, class_name="Person", **config):
    mapper = SchemaMapper(RuleFactory(GenerationConfig(**config)))
    code_model = CodeModel()
    java_type = mapper.generate(code_model, class_name, "com.example", SCHEMA_DIR / schema_file)
    return java_type, code_model


def generate_inline(content, class_name="Example", **config):
    mapper = SchemaMapper(RuleFactory(GenerationConfig(**config)))
    code_model = CodeModel()
    java_type = mapper.generate_from_content(code_model, class_name, "com.example", content)
    return java_type, code_model


def field_types(cls):
    return {name: field.type.full_name for name, field in cls.fields.items()}


class TestPersonSchema(unittest.TestCase):
    def setUp(self):
        self.person, self.code_model = generate_class("person.json")

    def test_classes(self):
        self.assertIsInstance(self.person, DefinedClass)
        self.assertEqual(self.person.full_name, "com.example.Person")
        self.assertEqual([cls.name for cls in self.code_model.classes()], ["Person", "Address", "Status"])

    def test_fields_in_declared_order(self):
        self.assertEqual(
            list(self.person.fields),
            ["name", "age", "height", "email", "birthday", "address", "tags", "friends", "status", "additionalProperties"],
        )

    def test_field_types(self):
        self.assertEqual(
            field_types(self.person),
            {
                "name": "java.lang.String",
                "age": "java.lang.Integer",
                "height": "java.lang.Double",
                "email": "java.lang.String",
                "birthday": "java.util.Date",
                "address": "com.example.Address",
                "tags": "java.util.Set<java.lang.String>",
                "friends": "java.util.List<com.example.Person>",
                "status": "com.example.Status",
                "additionalProperties": "java.util.Map<java.lang.String,java.lang.Object>",
            },
        )

    def test_self_reference_is_the_class_itself(self):
        friends = self.person.fields["friends"].type
        self.assertIs(friends.type_args[0], self.person)

    def test_accessors(self):
        names = [method.name for method in self.person.methods]
        self.assertIn("getName", names)
        self.assertIn("setName", names)
        self.assertIn("getAdditionalProperties", names)
        self.assertIn("setAdditionalProperty", names)
        self.assertNotIn("withName", names)

    def test_container_fields_are_initialised(self):
        self.assertEqual(self.person.fields["tags"].init, "new LinkedHashSet<>()")
        self.assertEqual(self.person.fields["friends"].init, "new ArrayList<>()")
        self.assertEqual(self.person.fields["additionalProperties"].init, "new LinkedHashMap<>()")

    def test_jackson_annotations(self):
        order = self.person.get_annotation(f"{JACKSON}.JsonPropertyOrder")
        self.assertEqual(order.params["value"], ["name", "age", "height", "email", "birthday", "address", "tags", "friends", "status"])
        self.assertTrue(self.person.has_annotation(f"{JACKSON}.JsonInclude"))
        name = self.person.fields["name"]
        self.assertEqual(name.get_annotation(f"{JACKSON}.JsonPropertyDescription").params, {"value": "Full name"})
        self.assertTrue(self.person.fields["additionalProperties"].has_annotation(f"{JACKSON}.JsonIgnore"))

    def test_no_constraints_by_default(self):
        for field in self.person.fields.values():
            self.assertFalse(any("validation" in a.kind for a in field.annotations), field)


class TestAddressSchema(unittest.TestCase):
    def test_json_names_are_kept(self):
        address, _ = generate_class("address.json", "Address")

        field = address.fields["postOfficeBox"]

        self.assertEqual(field.json_name, "post-office-box")
        self.assertEqual(field.get_annotation(f"{JACKSON}.JsonProperty").params, {"value": "post-office-box"})
        self.assertEqual(field.getter.name, "getPostOfficeBox")
        self.assertEqual(field.setter.name, "setPostOfficeBox")

    def test_builders(self):
        address, _ = generate_class("address.json", "Address", generate_builders=True)

        builder = address.fields["locality"].builder

        self.assertEqual(builder.name, "withLocality")
        self.assertEqual(builder.return_type.full_name, "com.example.Address")
        self.assertIsNotNone(address.get_method("withAdditionalProperty"))


class TestReferences:
    def test_self_reference(self):
        self_ref, code_model = generate_class("selfRef.json", "SelfRef")

        assert self_ref.fields["parent"].type is self_ref
        assert self_ref.fields["children"].type.type_args[0] is self_ref
        assert len(code_model.classes()) == 1

    def test_embedded_definition(self):
        top, code_model = generate_class("embeddedRef.json", "EmbeddedRef")

        embedded = top.fields["embeddedProp"].type
        assert embedded.full_name == "com.example.Embedded"
        assert list(embedded.fields) == ["value", "additionalProperties"]

    def test_relative_document_reference_is_shared(self):
        order, code_model = generate_class("nested/order.json", "Order")

        shipping = order.fields["shippingAddress"].type
        billing = order.fields["billingAddress"].type
        assert shipping is billing
        assert shipping.full_name == "com.example.Address"
        assert order.fields["id"].type.full_name == "java.util.UUID"
        assert [cls.name for cls in code_model.classes()] == ["Order", "Address"]

    def test_same_document_from_two_roots(self):
        mapper = SchemaMapper(RuleFactory())
        code_model = CodeModel()

        address = mapper.generate(code_model, "Address", "com.example", SCHEMA_DIR / "address.json")
        person = mapper.generate(code_model, "Person", "com.example", SCHEMA_DIR / "person.json")

        assert person.fields["address"].type is address

    def test_missing_reference(self):
        with pytest.raises(SchemaResolutionError, match="missing.json"):
            generate_inline({"type": "object", "properties": {"a": {"$ref": "missing.json"}}})


class TestEnums(unittest.TestCase):
    def test_enum_document(self):
        enum, _ = generate_class("enum.json", "Choice")

        self.assertTrue(enum.is_enum)
        self.assertEqual([c.name for c in enum.enum_constants], ["ONE", "SECOND_ONE", "_3RD_ONE"])
        self.assertEqual([c.value for c in enum.enum_constants], ["one", "secondOne", "3rd one"])
        self.assertEqual(enum.value_type.full_name, "java.lang.String")
        self.assertTrue(enum.get_method("value").has_annotation(f"{JACKSON}.JsonValue"))
        self.assertTrue(enum.get_method("fromValue").has_annotation(f"{JACKSON}.JsonCreator"))

    def test_java_enum_names(self):
        enum, _ = generate_inline({"type": "integer", "enum": [1, 2], "javaEnumNames": ["LOW", "HIGH"]}, "Level")

        self.assertEqual([(c.name, c.value) for c in enum.enum_constants], [("LOW", 1), ("HIGH", 2)])
        self.assertEqual(enum.value_type.full_name, "java.lang.Integer")

    def test_mismatched_java_enum_names_are_ignored(self):
        enum, _ = generate_inline({"enum": ["a", "b"], "javaEnumNames": ["ONLY_ONE"]}, "Letter")

        self.assertEqual([c.name for c in enum.enum_constants], ["A", "B"])

    def test_duplicate_constant_names_are_made_unique(self):
        enum, _ = generate_inline({"enum": ["a-b", "a_b", "A B"]}, "Clash")

        self.assertEqual([c.name for c in enum.enum_constants], ["A_B", "A_B_1", "A_B_2"])

    def test_null_values_are_skipped(self):
        enum, _ = generate_inline({"type": ["string", "null"], "enum": ["x", None]}, "Nullable")

        self.assertEqual([c.value for c in enum.enum_constants], ["x"])


class TestConstraintAnnotations(unittest.TestCase):
    def setUp(self):
        self.person, self.code_model = generate_class("person.json", include_jsr303_annotations=True)

    def annotation(self, field_name, simple_name, namespace="javax.validation.constraints"):
        return self.person.fields[field_name].get_annotation(f"{namespace}.{simple_name}")

    def test_size_and_required(self):
        self.assertEqual(self.annotation("name", "Size").params, {"min": 1, "max": 100})
        self.assertIsNotNone(self.annotation("name", "NotNull"))
        self.assertIsNone(self.annotation("age", "NotNull"))

    def test_numeric_bounds(self):
        self.assertEqual(self.annotation("age", "DecimalMin").params, {"value": "0"})
        self.assertEqual(self.annotation("age", "DecimalMax").params, {"value": "150"})
        # Double is not a supported numeric constraint type
        self.assertIsNone(self.annotation("height", "DecimalMin"))

    def test_pattern(self):
        self.assertEqual(self.annotation("email", "Pattern").params, {"regexp": "^[^@]+@[^@]+$"})

    def test_items_size(self):
        self.assertEqual(self.annotation("tags", "Size").params, {"max": 10})

    def test_cascading_validation(self):
        address_type = self.person.fields["address"].type
        address = self.code_model.package("com.example").get_class("Address")

        self.assertTrue(address_type.has_annotation("javax.validation.Valid"))
        self.assertEqual(address_type.full_name, address.full_name)
        self.assertFalse(address.has_annotation("javax.validation.Valid"))

        friend_type = self.person.fields["friends"].type.type_args[0]
        self.assertTrue(friend_type.has_annotation("javax.validation.Valid"))
        self.assertFalse(self.person.has_annotation("javax.validation.Valid"))

    def test_enum_items_are_not_cascaded(self):
        cls, _ = generate_inline(
            {"type": "object", "properties": {"levels": {"type": "array", "items": {"enum": ["a", "b"]}}}},
            include_jsr303_annotations=True,
        )

        item_type = cls.fields["levels"].type.type_args[0]
        self.assertIsInstance(item_type, DefinedClass)
        self.assertEqual(item_type.annotations, [])

    def test_required_on_referenced_document(self):
        address = self.code_model.package("com.example").get_class("Address")

        required = [name for name, field in address.fields.items() if field.has_annotation("javax.validation.constraints.NotNull")]
        self.assertEqual(required, ["locality", "region", "countryName"])

    def test_existing_array_types_are_cascaded(self):
        cls, _ = generate_inline(
            {"type": "object", "properties": {"things": {"type": "object", "existingJavaType": "com.example.Thing[]"}}},
            include_jsr303_annotations=True,
        )

        things = cls.fields["things"].type
        self.assertEqual(things.full_name, "com.example.Thing[]")
        self.assertTrue(things.has_annotation("javax.validation.Valid"))

    def test_jakarta(self):
        person, _ = generate_class("person.json", include_jsr303_annotations=True, use_jakarta_validation=True)

        self.assertTrue(person.fields["name"].has_annotation("jakarta.validation.constraints.Size"))
        self.assertTrue(person.fields["address"].type.has_annotation("jakarta.validation.Valid"))


class TestTypeSelection:
    def test_primitives(self):
        person, _ = generate_class("person.json", use_primitives=True)

        assert person.fields["age"].type.full_name == "int"
        assert person.fields["height"].type.full_name == "double"
        assert person.fields["name"].type.full_name == "java.lang.String"

    @pytest.mark.parametrize(
        "node,config,expected",
        [
            ({"type": "integer"}, {}, "java.lang.Integer"),
            ({"type": "integer", "maximum": 3000000000}, {}, "java.lang.Long"),
            ({"type": "integer"}, {"use_long_integers": True}, "java.lang.Long"),
            ({"type": "integer"}, {"use_big_integers": True}, "java.math.BigInteger"),
            ({"type": "number"}, {"use_big_decimals": True}, "java.math.BigDecimal"),
            ({"type": "boolean"}, {}, "java.lang.Boolean"),
            ({"type": ["null", "string"]}, {}, "java.lang.String"),
            ({}, {}, "java.lang.Object"),
            ({"type": "array"}, {}, "java.util.List<java.lang.Object>"),
            ({"existingJavaType": "java.time.LocalDate"}, {}, "java.time.LocalDate"),
            ({"type": "string", "format": "uuid"}, {"format_type_mapping": {"uuid": "java.lang.String"}}, "java.lang.String"),
            ({"type": "string", "format": "date"}, {"date_type": "java.time.LocalDate"}, "java.time.LocalDate"),
        ],
    )
    def test_property_types(self, node, config, expected):
        cls, _ = generate_inline({"type": "object", "properties": {"value": node}}, **config)

        assert cls.fields["value"].type.full_name == expected

    def test_object_without_type(self):
        cls, _ = generate_inline({"properties": {"inner": {"properties": {"x": {"type": "string"}}}}})

        assert cls.fields["inner"].type.full_name == "com.example.Inner"

    def test_array_items_are_named_singular(self):
        cls, code_model = generate_inline(
            {"type": "object", "properties": {"addresses": {"type": "array", "items": {"type": "object", "properties": {"street": {"type": "string"}}}}}}
        )

        assert cls.fields["addresses"].type.full_name == "java.util.List<com.example.Address>"

    def test_default_values(self):
        cls, _ = generate_inline(
            {
                "type": "object",
                "properties": {
                    "label": {"type": "string", "default": "none"},
                    "count": {"type": "integer", "default": 3},
                    "enabled": {"type": "boolean", "default": True},
                    "ratio": {"type": "number", "default": Decimal("0.5")},
                    "items": {"type": "array", "default": [1]},
                },
            }
        )

        assert cls.fields["label"].init == '"none"'
        assert cls.fields["count"].init == "3"
        assert cls.fields["enabled"].init == "true"
        assert cls.fields["ratio"].init == "0.5D"
        assert cls.fields["items"].init == "new ArrayList<>()"


class TestObjectOptions:
    def test_java_keywords(self):
        cls, _ = generate_inline(
            {"type": "object", "properties": {"class": {"type": "string"}, "public": {"type": "boolean"}}},
            use_primitives=True,
        )

        assert list(cls.fields)[:2] == ["_class", "_public"]
        assert cls.fields["_class"].getter.name == "getClass_"
        assert cls.fields["_class"].setter.name == "setClass_"
        assert cls.fields["_public"].getter.name == "isPublic"

    def test_additional_properties_false(self):
        cls, _ = generate_inline({"type": "object", "additionalProperties": False, "properties": {"a": {"type": "string"}}})

        assert list(cls.fields) == ["a"]
        assert cls.get_method("getAdditionalProperties") is None

    def test_additional_properties_disabled_by_config(self):
        cls, _ = generate_inline({"type": "object", "properties": {"a": {"type": "string"}}}, include_additional_properties=False)

        assert list(cls.fields) == ["a"]

    def test_typed_additional_properties(self):
        cls, _ = generate_inline({"type": "object", "additionalProperties": {"type": "integer"}})

        field = cls.fields["additionalProperties"]
        assert isinstance(field.type, ContainerType)
        assert field.type.full_name == "java.util.Map<java.lang.String,java.lang.Integer>"
        assert cls.get_method("setAdditionalProperty").params[1].type.full_name == "java.lang.Integer"

    def test_additional_properties_object_class(self):
        cls, code_model = generate_inline(
            {"type": "object", "additionalProperties": {"type": "object", "properties": {"x": {"type": "string"}}}}, "Bag"
        )

        assert cls.fields["additionalProperties"].type.type_args[1].full_name == "com.example.BagProperty"

    def test_name_clash_is_skipped(self, caplog):
        with caplog.at_level(logging.WARNING):
            cls, _ = generate_inline({"type": "object", "properties": {"a_b": {"type": "string"}, "aB": {"type": "integer"}}})

        assert cls.fields["aB"].type.full_name == "java.lang.String"
        assert cls.fields["aB"].json_name == "a_b"
        assert "clashes" in caplog.text

    def test_property_names_without_legal_characters(self):
        cls, _ = generate_inline({"type": "object", "properties": {"-": {"type": "string"}, "ok": {"type": "string"}}})

        assert list(cls.fields)[:2] == ["__EMPTY__", "ok"]
        assert cls.fields["__EMPTY__"].json_name == "-"
        assert cls.fields["__EMPTY__"].getter.name == "get__EMPTY__"

    def test_property_names_with_dots(self):
        cls, _ = generate_inline({"type": "object", "properties": {"a.b": {"type": "object", "properties": {"c": {"type": "string"}}}}})

        assert cls.fields["aB"].type.full_name == "com.example.AB"

    def test_dynamic_accessors(self):
        cls, _ = generate_inline({"type": "object", "properties": {"a": {"type": "string"}}}, include_dynamic_accessors=True)

        names = [method.name for method in cls.methods]
        for expected in ("declaredPropertyOrNotFound", "get", "declaredProperty", "set"):
            assert expected in names
        assert "NOT_FOUND_VALUE" in cls.fields
        assert cls.get_method("get").extra["additional_properties"] is cls.fields["additionalProperties"]

    def test_class_names_are_unique(self):
        cls, code_model = generate_inline(
            {
                "type": "object",
                "properties": {
                    "item": {"type": "object", "properties": {"a": {"type": "string"}}},
                    "items": {"type": "array", "items": {"type": "object", "properties": {"b": {"type": "string"}}}},
                },
            }
        )

        assert [c.name for c in code_model.classes()] == ["Example", "Item", "Item__1"]


class TestObjectMethods:
    def test_methods_use_instance_fields(self):
        cls, _ = generate_inline({"type": "object", "properties": {"a": {"type": "string"}}}, include_dynamic_accessors=True)

        to_string = cls.get_method("toString")
        assert to_string.has_annotation("java.lang.Override")
        assert [field.name for field in to_string.extra["fields"]] == ["a", "additionalProperties"]
        assert [field.name for field in cls.get_method("hashCode").extra["fields"]] == ["a", "additionalProperties"]
        assert cls.get_method("equals").params[0].type.full_name == "java.lang.Object"
        assert [m.name for m in cls.methods][-3:] == ["toString", "hashCode", "equals"]

    def test_excluded_from_equals_and_hash_code(self):
        cls, _ = generate_inline(
            {
                "type": "object",
                "additionalProperties": False,
                "excludedFromEqualsAndHashCode": ["b"],
                "properties": {
                    "a": {"type": "string"},
                    "b": {"type": "string"},
                    "c": {"type": "string", "excludedFromEqualsAndHashCode": True},
                },
            }
        )

        assert [field.name for field in cls.get_method("equals").extra["fields"]] == ["a"]
        assert [field.name for field in cls.get_method("hashCode").extra["fields"]] == ["a"]
        assert [field.name for field in cls.get_method("toString").extra["fields"]] == ["a", "b", "c"]

    def test_disabled(self):
        cls, _ = generate_inline(
            {"type": "object", "properties": {"a": {"type": "string"}}}, include_to_string=False, include_hashcode_and_equals=False
        )

        for name in ("toString", "hashCode", "equals"):
            assert cls.get_method(name) is None

    def test_enums_have_no_object_methods(self):
        cls, _ = generate_inline({"enum": ["a", "b"]}, "Level")

        assert cls.is_enum
        assert [m.name for m in cls.methods] == ["value", "fromValue"]


class TestGenerate:
    def test_find_schema_files(self):
        files = find_schema_files([SCHEMA_DIR])

        assert [f.relative_to(SCHEMA_DIR).as_posix() for f in files] == [
            "address.json",
            "embeddedRef.json",
            "enum.json",
            "nested/order.json",
            "person.json",
            "selfRef.json",
        ]
        assert find_schema_files([SCHEMA_DIR / "person.json"]) == [SCHEMA_DIR / "person.json"]

    def test_generate_writes_one_file_per_class(self, tmp_path):
        config = GenerationConfig(target_package="com.example", add_generation_comment=False)

        written = generate(config, [SCHEMA_DIR / "person.json"], tmp_path)

        package_dir = tmp_path / "com" / "example"
        assert sorted(p.name for p in written) == ["Address.java", "Person.java", "Status.java"]
        assert all(p.parent == package_dir for p in written)
        assert "public class Person {" in (package_dir / "Person.java").read_text()

    def test_generate_directory(self, tmp_path):
        config = GenerationConfig(target_package="com.example", add_generation_comment=False)

        written = generate(config, [SCHEMA_DIR], tmp_path)

        assert sorted(p.stem for p in written) == ["Address", "Embedded", "EmbeddedRef", "Enum", "Order", "Person", "SelfRef", "Status"]

    def test_remove_old_output(self, tmp_path):
        stale = tmp_path / "org" / "old" / "Stale.java"
        stale.parent.mkdir(parents=True)
        stale.write_text("class Stale {}")
        config = GenerationConfig(target_package="com.example", remove_old_output=True)

        written = generate(config, [SCHEMA_DIR / "enum.json"], tmp_path)

        assert not (tmp_path / "org").exists()
        assert [p.relative_to(tmp_path).as_posix() for p in written] == ["com/example/Enum.java"]

    def test_failed_run_keeps_old_output(self, tmp_path):
        stale = tmp_path / "out" / "Stale.java"
        stale.parent.mkdir()
        stale.write_text("class Stale {}")
        schema = tmp_path / "broken.json"
        schema.write_text('{"type": "object", "properties": {"a": {"$ref": "missing.json"}}}')

        with pytest.raises(SchemaResolutionError):
            generate(GenerationConfig(remove_old_output=True), [schema], tmp_path / "out")

        assert stale.exists()


if __name__ == "__main__":
    pytest.main([__file__])
