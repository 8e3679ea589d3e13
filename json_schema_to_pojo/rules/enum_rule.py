"""
Enum rule: generates an enum for a schema with an "enum" list.
"""

from __future__ import annotations

from typing import Any

from ..model import FINAL, PRIVATE, PUBLIC, STATIC, DefinedClass, JType, MethodParam, Package
from ..schema import Schema
from .base import Rule
from .type_rule import get_type_name

SCALAR_TYPES = ("string", "integer", "number", "boolean")


class EnumRule(Rule):
    """
    Defines an enum whose constants carry the JSON values.

    Constant names come from "javaEnumNames" when it lists one name per
    value, otherwise from the values themselves. The value type follows the
    schema's scalar "type" and defaults to String.
    """

    def apply(self, node_name: str, node: Any, parent: Any, package: Package, schema: Schema) -> JType:
        if schema.is_generated:
            return schema.java_type

        rule_factory = self.rule_factory
        name_helper = rule_factory.get_name_helper()

        cls = package.define_class(name_helper.get_class_name(node_name, node), DefinedClass.ENUM)
        bound = schema.set_java_type_if_empty(cls)
        if bound is not cls:
            return bound

        type_name = get_type_name(node)
        if type_name not in SCALAR_TYPES:
            type_name = "string"
        cls.value_type = rule_factory.get_type_rule().get_scalar_type(type_name, node)

        values = [value for value in node["enum"] if value is not None]
        java_names = node.get("javaEnumNames")
        if not (isinstance(java_names, list) and len(java_names) == len(values)):
            java_names = [name_helper.get_enum_constant_name(value) for value in values]

        used = set()
        for java_name, value in zip(java_names, values):
            unique_name = java_name
            index = 0
            while unique_name in used:
                index += 1
                unique_name = f"{java_name}_{index}"
            used.add(unique_name)
            cls.enum_constant(unique_name, value)

        cls.field("value", cls.value_type, (PRIVATE, FINAL))

        value_method = cls.method("value", cls.value_type, body_kind="enum_value")
        rule_factory.annotator.enum_value_method(cls, value_method)

        creator = cls.method(
            "fromValue",
            cls.ref(),
            params=[MethodParam("value", cls.value_type)],
            mods=(PUBLIC, STATIC),
            body_kind="enum_from_value",
        )
        rule_factory.annotator.enum_creator_method(cls, creator)

        return cls
