"""
Rule factory: one shared instance of every rule for a generation run.
"""

from __future__ import annotations

from ..annotators import Annotator, AnnotatorFactory
from ..config import GenerationConfig
from ..schema import SchemaStore
from .additional_properties_rule import AdditionalPropertiesRule
from .array_rule import ArrayRule
from .base import Rule
from .constraint_rules import (
    DigitsRule,
    MinItemsMaxItemsRule,
    MinimumMaximumRule,
    MinLengthMaxLengthRule,
    PatternRule,
    RequiredArrayRule,
)
from .dynamic_properties_rule import DynamicPropertiesRule
from .enum_rule import EnumRule
from .format_rule import FormatRule
from .name_helper import NameHelper
from .object_rule import ObjectRule
from .properties_rule import PropertiesRule
from .property_rule import PropertyRule
from .schema_rule import SchemaRule
from .type_rule import TypeRule
from .valid_rule import ValidRule


class RuleFactory:
    """
    Creates and hands out the rules of a run.

    Every rule is built once, when the factory is created, and shares the
    factory's configuration, annotator and schema store.
    """

    def __init__(
        self,
        config: GenerationConfig | None = None,
        annotator: Annotator | None = None,
        schema_store: SchemaStore | None = None,
    ):
        self.generation_config = config if config is not None else GenerationConfig()
        self.annotator = annotator if annotator is not None else AnnotatorFactory(self.generation_config).build()
        self.schema_store = schema_store if schema_store is not None else SchemaStore()

        self._name_helper = NameHelper(self.generation_config)

        self._schema_rule = SchemaRule(self)
        self._type_rule = TypeRule(self)
        self._object_rule = ObjectRule(self)
        self._properties_rule = PropertiesRule(self)
        self._property_rule = PropertyRule(self)
        self._array_rule = ArrayRule(self)
        self._enum_rule = EnumRule(self)
        self._format_rule = FormatRule(self)
        self._additional_properties_rule = AdditionalPropertiesRule(self)
        self._dynamic_properties_rule = DynamicPropertiesRule(self)
        self._required_array_rule = RequiredArrayRule(self)
        self._valid_rule = ValidRule(self)
        self._digits_rule = DigitsRule(self)
        self._min_length_max_length_rule = MinLengthMaxLengthRule(self)
        self._min_items_max_items_rule = MinItemsMaxItemsRule(self)
        self._minimum_maximum_rule = MinimumMaximumRule(self)
        self._pattern_rule = PatternRule(self)

        self._keyword_rules: dict[str, Rule] = {
            "$ref": self._schema_rule,
            "enum": self._enum_rule,
            "type": self._type_rule,
            "properties": self._properties_rule,
            "items": self._array_rule,
            "format": self._format_rule,
            "minimum": self._minimum_maximum_rule,
            "maximum": self._minimum_maximum_rule,
            "minLength": self._min_length_max_length_rule,
            "maxLength": self._min_length_max_length_rule,
            "minItems": self._min_items_max_items_rule,
            "maxItems": self._min_items_max_items_rule,
            "integerDigits": self._digits_rule,
            "fractionalDigits": self._digits_rule,
            "pattern": self._pattern_rule,
            "required": self._required_array_rule,
            "additionalProperties": self._additional_properties_rule,
        }

    def rule_for_keyword(self, keyword: str) -> Rule | None:
        """The rule handling a schema keyword, or None if no rule does."""
        return self._keyword_rules.get(keyword)

    def get_name_helper(self) -> NameHelper:
        return self._name_helper

    def get_schema_rule(self) -> SchemaRule:
        return self._schema_rule

    def get_type_rule(self) -> TypeRule:
        return self._type_rule

    def get_object_rule(self) -> ObjectRule:
        return self._object_rule

    def get_properties_rule(self) -> PropertiesRule:
        return self._properties_rule

    def get_property_rule(self) -> PropertyRule:
        return self._property_rule

    def get_array_rule(self) -> ArrayRule:
        return self._array_rule

    def get_enum_rule(self) -> EnumRule:
        return self._enum_rule

    def get_format_rule(self) -> FormatRule:
        return self._format_rule

    def get_additional_properties_rule(self) -> AdditionalPropertiesRule:
        return self._additional_properties_rule

    def get_dynamic_properties_rule(self) -> DynamicPropertiesRule:
        return self._dynamic_properties_rule

    def get_required_array_rule(self) -> RequiredArrayRule:
        return self._required_array_rule

    def get_valid_rule(self) -> ValidRule:
        return self._valid_rule

    def get_digits_rule(self) -> DigitsRule:
        return self._digits_rule

    def get_min_length_max_length_rule(self) -> MinLengthMaxLengthRule:
        return self._min_length_max_length_rule

    def get_min_items_max_items_rule(self) -> MinItemsMaxItemsRule:
        return self._min_items_max_items_rule

    def get_minimum_maximum_rule(self) -> MinimumMaximumRule:
        return self._minimum_maximum_rule

    def get_pattern_rule(self) -> PatternRule:
        return self._pattern_rule
