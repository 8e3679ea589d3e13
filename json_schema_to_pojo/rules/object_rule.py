"""
Object rule: generates a class for an object schema.
"""

from __future__ import annotations

from typing import Any

from ..model import OBJECT, STATIC, STRING, ClassRef, DefinedClass, FieldVar, JType, MethodParam, Package, PrimitiveType
from ..schema import Schema
from .base import Rule

OVERRIDE = "java.lang.Override"


class ObjectRule(Rule):
    """
    Defines a class and fills it from the schema.

    The class is bound to the schema before any property is visited, so a
    property that refers back to this schema (directly or through other
    schemas) receives the class being built instead of recursing forever.
    """

    def apply(self, node_name: str, node: Any, parent: Any, package: Package, schema: Schema) -> JType:
        if schema.is_generated:
            return schema.java_type

        name_helper = self.rule_factory.get_name_helper()
        cls = package.define_class(name_helper.get_class_name(node_name, node))
        bound = schema.set_java_type_if_empty(cls)
        if bound is not cls:
            return bound

        self.rule_factory.annotator.property_inclusion(cls, node)

        self.rule_factory.get_properties_rule().apply(node_name, node.get("properties", {}), node, cls, schema)
        self.rule_factory.get_additional_properties_rule().apply(node_name, node.get("additionalProperties"), node, cls, schema)
        self.rule_factory.get_dynamic_properties_rule().apply(node_name, node.get("properties"), node, cls, schema)
        self.rule_factory.get_required_array_rule().apply(node_name, node, parent, cls, schema)

        if self.config.include_to_string:
            self.add_to_string(cls)
        if self.config.include_hashcode_and_equals:
            fields = self.equality_fields(cls, node)
            self.add_hash_code(cls, fields)
            self.add_equals(cls, fields)

        return cls

    @staticmethod
    def instance_fields(cls: DefinedClass) -> list[FieldVar]:
        return [field for field in cls.fields.values() if STATIC not in field.mods]

    def equality_fields(self, cls: DefinedClass, node: Any) -> list[FieldVar]:
        """
        Instance fields that take part in equals and hashCode.

        A property is left out when the object lists its JSON name in
        "excludedFromEqualsAndHashCode", or when the property itself sets
        "excludedFromEqualsAndHashCode": true.
        """
        excluded = set(node.get("excludedFromEqualsAndHashCode") or [])
        for name, property_node in (node.get("properties") or {}).items():
            if isinstance(property_node, dict) and property_node.get("excludedFromEqualsAndHashCode") is True:
                excluded.add(name)
        return [field for field in self.instance_fields(cls) if field.json_name not in excluded]

    def add_to_string(self, cls: DefinedClass) -> None:
        method = cls.method("toString", ClassRef(STRING), body_kind="to_string", extra={"fields": self.instance_fields(cls)})
        method.annotate(OVERRIDE)

    def add_hash_code(self, cls: DefinedClass, fields: list[FieldVar]) -> None:
        method = cls.method("hashCode", PrimitiveType("int"), body_kind="hash_code", extra={"fields": fields})
        method.annotate(OVERRIDE)

    def add_equals(self, cls: DefinedClass, fields: list[FieldVar]) -> None:
        method = cls.method(
            "equals",
            PrimitiveType("boolean"),
            params=[MethodParam("other", ClassRef(OBJECT))],
            body_kind="equals",
            extra={"fields": fields},
        )
        method.annotate(OVERRIDE)
