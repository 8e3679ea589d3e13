"""
Type rule: maps the JSON "type" of a schema to a model type.
"""

from __future__ import annotations

from typing import Any

from ..model import OBJECT, STRING, ClassRef, JType, Package, resolve_type_name
from ..schema import Schema
from .base import Rule

DEFAULT_TYPE_NAME = "any"

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def get_type_name(node: Any) -> str:
    """
    The JSON type of a schema node.

    For a list of types the first non-"null" entry wins. A node without a
    type is an object when it declares properties, "any" otherwise.
    """
    if not isinstance(node, dict):
        return DEFAULT_TYPE_NAME

    type_ = node.get("type")
    if isinstance(type_, list):
        names = [t for t in type_ if isinstance(t, str) and t != "null"]
        if names:
            return names[0]
        return "null" if type_ else DEFAULT_TYPE_NAME
    if isinstance(type_, str):
        return type_
    if "properties" in node:
        return "object"
    return DEFAULT_TYPE_NAME


class TypeRule(Rule):
    """
    Chooses the type for a schema node.

    "existingJavaType" names a type directly. Objects and arrays are
    delegated to their rules; scalars map to java.lang types (or their
    primitives when use_primitives is set) and may be refined by "format".
    """

    def apply(self, node_name: str, node: Any, parent: Any, package: Package, schema: Schema) -> JType:
        if isinstance(node, dict) and isinstance(node.get("existingJavaType"), str):
            return resolve_type_name(node["existingJavaType"])

        type_name = get_type_name(node)

        if type_name == "object":
            return self.rule_factory.get_object_rule().apply(node_name, node, parent, package, schema)
        if type_name == "array":
            return self.rule_factory.get_array_rule().apply(node_name, node, parent, package, schema)

        java_type = self.get_scalar_type(type_name, node)
        if self.config.use_primitives:
            java_type = java_type.unboxify()

        if isinstance(node, dict) and "format" in node:
            java_type = self.rule_factory.get_format_rule().apply(node_name, node["format"], node, java_type, schema)

        return java_type

    def get_scalar_type(self, type_name: str, node: Any) -> JType:
        if type_name == "string":
            return ClassRef(STRING)
        if type_name == "number":
            return ClassRef("java.math.BigDecimal" if self.config.use_big_decimals else "java.lang.Double")
        if type_name == "integer":
            return self.get_integer_type(node)
        if type_name == "boolean":
            return ClassRef("java.lang.Boolean")
        return ClassRef(OBJECT)

    def get_integer_type(self, node: Any) -> JType:
        if self.config.use_big_integers:
            return ClassRef("java.math.BigInteger")
        if self.config.use_long_integers or self._exceeds_int_range(node):
            return ClassRef("java.lang.Long")
        return ClassRef("java.lang.Integer")

    @staticmethod
    def _exceeds_int_range(node: Any) -> bool:
        if not isinstance(node, dict):
            return False
        for keyword in ("minimum", "maximum"):
            bound = node.get(keyword)
            if isinstance(bound, int) and not isinstance(bound, bool) and not INT_MIN <= bound <= INT_MAX:
                return True
        return False
