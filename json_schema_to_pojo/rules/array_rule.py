"""
Array rule: maps an array schema to a List or Set of its item type.
"""

from __future__ import annotations

from typing import Any

from ..model import OBJECT, ClassRef, ContainerType, DefinedClass, JType, Package
from ..schema import Schema
from ..utils import make_singular
from .base import Rule


class ArrayRule(Rule):
    """
    "uniqueItems": true gives a Set, anything else a List. Items are walked
    as their own schema (named after the singular of the property), and
    object items are marked for cascading validation.
    """

    def apply(self, node_name: str, node: Any, parent: Any, package: Package, schema: Schema) -> JType:
        items = node.get("items")

        if isinstance(items, dict):
            path = f"#{schema.fragment}/items"
            items_schema = self.rule_factory.schema_store.create_relative(schema, path, self.config.ref_fragment_path_delimiters)
            item_type = self.rule_factory.get_schema_rule().apply(make_singular(node_name), items, node, package, items_schema)
            if isinstance(item_type, DefinedClass) and not item_type.is_enum:
                item_type = self.rule_factory.get_valid_rule().apply(node_name, items, node, item_type, items_schema)
        else:
            item_type = ClassRef(OBJECT)

        # Type arguments cannot be primitive
        item_type = item_type.boxify()

        if node.get("uniqueItems") is True:
            return ContainerType.set_of(item_type)
        return ContainerType.list_of(item_type)
