"""
Properties rule: visits the properties of an object schema in order.
"""

from __future__ import annotations

from typing import Any

from ..model import DefinedClass
from ..schema import Schema
from .base import Rule


class PropertiesRule(Rule):
    """Applies the property rule to each property, in declared order."""

    def apply(self, node_name: str, node: Any, parent: Any, cls: DefinedClass, schema: Schema) -> DefinedClass:
        if not isinstance(node, dict):
            return cls

        property_rule = self.rule_factory.get_property_rule()
        for property_name, property_node in node.items():
            property_rule.apply(property_name, property_node, parent, cls, schema)

        self.rule_factory.annotator.property_order(cls, node)
        return cls
