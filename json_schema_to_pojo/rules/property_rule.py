"""
Property rule: turns one property of an object schema into a field and
its accessors.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import Any

from ..model import ContainerType, DefinedClass, FieldVar, JType, MethodParam
from ..schema import Schema, escape_segment
from .base import Rule
from .type_rule import get_type_name

logger = logging.getLogger(__name__)

# Keywords handled by constraint rules that read the whole property node
CONSTRAINT_KEYWORDS = (
    "minimum",
    "maximum",
    "minItems",
    "maxItems",
    "minLength",
    "maxLength",
    "integerDigits",
    "fractionalDigits",
)


def container_init(type_: JType) -> str | None:
    """Initialiser for container fields, e.g. "new ArrayList<>()"."""
    if isinstance(type_, ContainerType) and type_.implementation:
        return f"new {type_.implementation.rsplit('.', 1)[-1]}<>()"
    return None


def default_value_init(type_: JType, value: Any) -> str | None:
    """Java literal for a "default" value of a scalar field, if it has one."""
    name = type_.boxify().full_name
    if isinstance(value, bool):
        return ("true" if value else "false") if name == "java.lang.Boolean" else None
    if name == "java.lang.String" and isinstance(value, str):
        return json.dumps(value)
    if name == "java.lang.Integer" and isinstance(value, int):
        return str(value)
    if name == "java.lang.Long" and isinstance(value, int):
        return f"{value}L"
    if name == "java.lang.Double" and isinstance(value, (int, Decimal)):
        return f"{value}D"
    return None


class PropertyRule(Rule):
    """
    Declares the field for a property, then lets the annotator and the
    constraint rules decorate it and adds getter, setter and builder.

    The property schema is addressed as <object fragment>/properties/<name>
    so that nested schemas get stable ids in the schema store.
    """

    def apply(self, node_name: str, node: Any, parent: Any, cls: DefinedClass, schema: Schema) -> DefinedClass:
        rule_factory = self.rule_factory
        config = self.config
        name_helper = rule_factory.get_name_helper()

        property_name = name_helper.get_property_name(node_name, node)
        if property_name in cls.fields:
            logger.warning("Property '%s' of %s clashes with an existing field '%s', skipping", node_name, cls.full_name, property_name)
            return cls

        path = f"#{schema.fragment}/properties/{escape_segment(node_name)}"
        property_schema = rule_factory.schema_store.create_relative(schema, path, config.ref_fragment_path_delimiters)

        java_type = rule_factory.get_schema_rule().apply(node_name, node, parent, cls.package_ref, property_schema)
        resolved = self.resolve_refs(node, property_schema)

        if get_type_name(resolved) in ("object", "array"):
            java_type = rule_factory.get_valid_rule().apply(node_name, resolved, node, java_type, property_schema)

        field = cls.field(property_name, java_type, init=container_init(java_type))
        field.json_name = node_name
        if "default" in resolved and field.init is None:
            field.init = default_value_init(java_type, resolved["default"])

        rule_factory.annotator.property_field(field, cls, node_name, resolved)

        self.apply_constraints(node_name, resolved, node, field, property_schema)

        if config.include_getters:
            self.add_getter(cls, field, node_name, node)
        if config.include_setters:
            self.add_setter(cls, field, node_name, node)
        if config.generate_builders:
            self.add_builder(cls, field, node_name, node)

        return cls

    def resolve_refs(self, node: Any, schema: Schema) -> Any:
        """
        The content that defines a property: the $ref target (followed to
        the end), overlaid with any sibling keywords of the property node.
        """
        if not isinstance(node, dict):
            return {}

        resolved = node
        store = self.rule_factory.schema_store
        while isinstance(resolved, dict) and isinstance(resolved.get("$ref"), str):
            schema = store.create_relative(schema, resolved["$ref"], self.config.ref_fragment_path_delimiters)
            resolved = schema.content

        if resolved is node:
            return node
        overlay = {k: v for k, v in node.items() if k != "$ref"}
        return {**resolved, **overlay} if isinstance(resolved, dict) else overlay

    def apply_constraints(self, node_name: str, node: Any, parent: Any, field: FieldVar, schema: Schema) -> None:
        rules = []
        for keyword in CONSTRAINT_KEYWORDS:
            rule = self.rule_factory.rule_for_keyword(keyword)
            if keyword in node and rule not in rules:
                rules.append(rule)
        for rule in rules:
            rule.apply(node_name, node, parent, field, schema)

        if "pattern" in node:
            self.rule_factory.get_pattern_rule().apply(node_name, node["pattern"], node, field, schema)

    def add_getter(self, cls: DefinedClass, field: FieldVar, node_name: str, node: Any) -> None:
        name = self.rule_factory.get_name_helper().get_getter_name(node_name, field.type, node)
        getter = cls.method(name, field.type, body_kind="getter", target_field=field)
        field.getter = getter
        self.rule_factory.annotator.property_getter(getter, cls, node_name)

    def add_setter(self, cls: DefinedClass, field: FieldVar, node_name: str, node: Any) -> None:
        name = self.rule_factory.get_name_helper().get_setter_name(node_name, node)
        setter = cls.method(name, None, params=[MethodParam(field.name, field.type)], body_kind="setter", target_field=field)
        field.setter = setter
        self.rule_factory.annotator.property_setter(setter, cls, node_name)

    def add_builder(self, cls: DefinedClass, field: FieldVar, node_name: str, node: Any) -> None:
        name = self.rule_factory.get_name_helper().get_builder_name(node_name, node)
        builder = cls.method(name, cls.ref(), params=[MethodParam(field.name, field.type)], body_kind="builder", target_field=field)
        field.builder = builder
