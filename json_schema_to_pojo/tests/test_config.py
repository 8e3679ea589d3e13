"""
Tests for GenerationConfig and its enumerated options.
"""

import dataclasses

import pytest

from json_schema_to_pojo.config import AnnotationStyle, GenerationConfig, InclusionLevel
from json_schema_to_pojo.errors import ConfigurationError


class TestGenerationConfig:
    def test_defaults(self):
        config = GenerationConfig()

        assert config.annotation_style == "jackson2"
        assert config.inclusion_level == "NON_NULL"
        assert config.property_word_delimiters == "- _"
        assert config.ref_fragment_path_delimiters == "#/."
        assert config.include_getters and config.include_setters
        assert not config.include_jsr303_annotations
        assert config.validation_namespace == "javax.validation"
        assert config.include_to_string and config.include_hashcode_and_equals
        assert not config.remove_old_output

    def test_jakarta_namespace(self):
        assert GenerationConfig(use_jakarta_validation=True).validation_namespace == "jakarta.validation"

    def test_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            GenerationConfig().use_primitives = True

    def test_format_type_mapping_is_read_only(self):
        mapping = {"uuid": "java.lang.String"}
        config = GenerationConfig(format_type_mapping=mapping)

        mapping["uri"] = "java.lang.String"

        assert dict(config.format_type_mapping) == {"uuid": "java.lang.String"}
        with pytest.raises(TypeError):
            config.format_type_mapping["uri"] = "java.lang.String"

    def test_replace(self):
        config = GenerationConfig()

        changed = config.replace(use_primitives=True, target_package="com.example")

        assert changed.use_primitives
        assert changed.target_package == "com.example"
        assert not config.use_primitives

    def test_from_dict_ignores_unknown_keys(self):
        config = GenerationConfig.from_dict({"use_primitives": True, "not_an_option": 1, "format_type_mapping": {"uuid": "java.lang.String"}})

        assert config.use_primitives
        assert config.format_type_mapping == {"uuid": "java.lang.String"}

    def test_to_dict_round_trips(self):
        config = GenerationConfig(target_package="com.example", generate_builders=True, format_type_mapping={"uuid": "java.lang.String"})

        assert GenerationConfig.from_dict(config.to_dict()) == config


class TestEnumeratedOptions:
    @pytest.mark.parametrize(
        "value,expected",
        [("jackson", AnnotationStyle.JACKSON), ("Jackson2", AnnotationStyle.JACKSON2), ("NONE", AnnotationStyle.NONE)],
    )
    def test_annotation_style(self, value, expected):
        assert AnnotationStyle.parse(value) is expected

    @pytest.mark.parametrize("value", ["gson", "", None])
    def test_bad_annotation_style(self, value):
        with pytest.raises(ConfigurationError) as excinfo:
            AnnotationStyle.parse(value)
        assert excinfo.value.value == value

    @pytest.mark.parametrize("value", ["non_null", "NON_EMPTY", "Always"])
    def test_inclusion_level(self, value):
        assert InclusionLevel.parse(value).value == value.upper()

    def test_bad_inclusion_level(self):
        with pytest.raises(ConfigurationError, match="SOMETIMES"):
            InclusionLevel.parse("SOMETIMES")


if __name__ == "__main__":
    pytest.main([__file__])
