"""
Tests for the @Size constraint rule driven by minLength / maxLength.
"""

from unittest.mock import Mock, PropertyMock, patch

import pytest

from json_schema_to_pojo.config import GenerationConfig
from json_schema_to_pojo.model import ArrayType, ClassRef, CodeModel, ContainerType, PrimitiveType
from json_schema_to_pojo.rules import RuleFactory

APPLICABLE_TYPES = [
    ClassRef("java.lang.String"),
    ContainerType.list_of(ClassRef("java.lang.String")),
    ContainerType.set_of(ClassRef("java.lang.Integer")),
    ContainerType.map_of(ClassRef("java.lang.String"), ClassRef("java.lang.Object")),
    ClassRef("java.util.Collection"),
    ArrayType(PrimitiveType("byte")),
]

NOT_APPLICABLE_TYPES = [
    ClassRef("java.util.UUID"),
    ClassRef("java.lang.Integer"),
    PrimitiveType("int"),
    ClassRef("java.math.BigDecimal"),
]


def make_field(type_):
    cls = CodeModel().package("com.example").define_class("Example")
    return cls.field("value", type_)


def make_rule(**config):
    return RuleFactory(GenerationConfig(**config)).get_min_length_max_length_rule()


class TestMinLengthMaxLengthRule:
    @pytest.mark.parametrize("use_jakarta", [False, True])
    @pytest.mark.parametrize("type_", APPLICABLE_TYPES, ids=lambda t: t.full_name)
    def test_applies_to_supported_types(self, type_, use_jakarta):
        rule = make_rule(include_jsr303_annotations=True, use_jakarta_validation=use_jakarta)
        field = make_field(type_)

        rule.apply("value", {"minLength": 1, "maxLength": 10}, None, field, None)

        namespace = "jakarta.validation" if use_jakarta else "javax.validation"
        annotation = field.get_annotation(f"{namespace}.constraints.Size")
        assert annotation is not None
        assert annotation.params == {"min": 1, "max": 10}

    @pytest.mark.parametrize("type_", NOT_APPLICABLE_TYPES, ids=lambda t: t.full_name)
    def test_ignores_unsupported_types(self, type_):
        rule = make_rule(include_jsr303_annotations=True)
        field = make_field(type_)

        with patch.object(GenerationConfig, "validation_namespace", new_callable=PropertyMock) as namespace:
            rule.apply("value", {"minLength": 1, "maxLength": 10}, None, field, None)

        assert field.annotations == []
        namespace.assert_not_called()

    def test_only_max_length(self):
        rule = make_rule(include_jsr303_annotations=True)
        field = make_field(ClassRef("java.lang.String"))

        rule.apply("value", {"maxLength": 8}, None, field, None)

        assert field.get_annotation("javax.validation.constraints.Size").params == {"max": 8}

    def test_only_min_length(self):
        rule = make_rule(include_jsr303_annotations=True)
        field = make_field(ClassRef("java.lang.String"))

        rule.apply("value", {"minLength": 2}, None, field, None)

        assert field.get_annotation("javax.validation.constraints.Size").params == {"min": 2}

    def test_no_keyword_reads_nothing(self):
        rule = make_rule(include_jsr303_annotations=True)
        field = Mock()

        with patch.object(GenerationConfig, "validation_namespace", new_callable=PropertyMock) as namespace:
            rule.apply("value", {"type": "string"}, None, field, None)

        assert field.mock_calls == []
        namespace.assert_not_called()

    def test_disabled_leaves_field_untouched(self):
        rule = make_rule(include_jsr303_annotations=False)
        field = Mock()

        rule.apply("value", {"minLength": 1, "maxLength": 10}, None, field, None)

        assert field.mock_calls == []


if __name__ == "__main__":
    pytest.main([__file__])
