"""
Rules module.

Each rule handles one aspect of a schema (a keyword or a kind of node)
and builds or decorates part of the type model. Rules are created and
shared through the RuleFactory.
"""

from __future__ import annotations

from .additional_properties_rule import AdditionalPropertiesRule
from .array_rule import ArrayRule
from .base import Rule
from .constraint_rules import (
    ConstraintRule,
    DigitsRule,
    MinItemsMaxItemsRule,
    MinimumMaximumRule,
    MinLengthMaxLengthRule,
    PatternRule,
    RequiredArrayRule,
)
from .dynamic_properties_rule import NOT_FOUND_VALUE_FIELD, DynamicPropertiesRule
from .enum_rule import EnumRule
from .format_rule import FormatRule
from .name_helper import NameHelper
from .object_rule import ObjectRule
from .properties_rule import PropertiesRule
from .property_rule import PropertyRule
from .rule_factory import RuleFactory
from .schema_rule import SchemaRule
from .type_rule import TypeRule
from .valid_rule import ValidRule

__all__ = [
    "Rule",
    "RuleFactory",
    "ConstraintRule",
    "DigitsRule",
    "MinLengthMaxLengthRule",
    "MinItemsMaxItemsRule",
    "MinimumMaximumRule",
    "PatternRule",
    "RequiredArrayRule",
    "FormatRule",
    "ValidRule",
    "DynamicPropertiesRule",
    "NOT_FOUND_VALUE_FIELD",
    "NameHelper",
    "SchemaRule",
    "TypeRule",
    "ObjectRule",
    "PropertiesRule",
    "PropertyRule",
    "ArrayRule",
    "EnumRule",
    "AdditionalPropertiesRule",
]
