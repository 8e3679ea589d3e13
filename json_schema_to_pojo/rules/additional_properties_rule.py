"""
Additional properties rule: a map holding properties not declared in the
schema.
"""

from __future__ import annotations

import logging
from typing import Any

from ..model import OBJECT, STRING, ClassRef, ContainerType, DefinedClass, MethodParam
from ..schema import Schema
from .base import Rule
from .property_rule import container_init

logger = logging.getLogger(__name__)

ADDITIONAL_PROPERTIES_FIELD = "additionalProperties"


class AdditionalPropertiesRule(Rule):
    """
    Adds Map<String, T> additionalProperties with a getter, a single-entry
    setter and (optionally) a builder.

    Skipped when the schema sets "additionalProperties": false or the
    configuration turns the map off. A schema value types the map values;
    anything else gives Object.
    """

    def apply(self, node_name: str, node: Any, parent: Any, cls: DefinedClass, schema: Schema) -> DefinedClass:
        if node is False or not self.config.include_additional_properties:
            return cls
        if ADDITIONAL_PROPERTIES_FIELD in cls.fields:
            logger.warning("%s already declares %s, not adding the map", cls.full_name, ADDITIONAL_PROPERTIES_FIELD)
            return cls

        rule_factory = self.rule_factory
        annotator = rule_factory.annotator

        if isinstance(node, dict) and node:
            path = f"#{schema.fragment}/additionalProperties"
            value_schema = rule_factory.schema_store.create_relative(schema, path, self.config.ref_fragment_path_delimiters)
            value_type = rule_factory.get_schema_rule().apply(cls.name + "Property", node, parent, cls.package_ref, value_schema)
            value_type = value_type.boxify()
        else:
            value_type = ClassRef(OBJECT)

        map_type = ContainerType.map_of(ClassRef(STRING), value_type)
        field = cls.field(ADDITIONAL_PROPERTIES_FIELD, map_type, init=container_init(map_type))
        annotator.additional_properties_field(field, cls, ADDITIONAL_PROPERTIES_FIELD)

        getter = cls.method("getAdditionalProperties", map_type, body_kind="getter", target_field=field)
        field.getter = getter
        annotator.any_getter(getter, cls)

        params = [MethodParam("name", ClassRef(STRING)), MethodParam("value", value_type)]
        setter = cls.method("setAdditionalProperty", None, params=list(params), body_kind="map_put", target_field=field)
        field.setter = setter
        annotator.any_setter(setter, cls)

        if self.config.generate_builders:
            builder = cls.method("withAdditionalProperty", cls.ref(), params=list(params), body_kind="map_put_builder", target_field=field)
            field.builder = builder

        return cls
