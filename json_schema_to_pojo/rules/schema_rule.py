"""
Entry rule for any schema node: follows $ref, then dispatches on content.
"""

from __future__ import annotations

import logging
import posixpath
from typing import Any
from urllib.parse import unquote, urlsplit

from ..model import JType, Package
from ..schema import Schema
from .base import Rule

logger = logging.getLogger(__name__)


def name_from_ref(ref: str, default: str) -> str:
    """
    Derive a class name hint from a reference.

    Examples:
        "#/definitions/address" -> "address"
        "common/person.json" -> "person"
        "#" -> default
    """
    if "#" in ref:
        fragment = ref.split("#", 1)[1]
        segments = [s for s in fragment.split("/") if s]
        if segments:
            return unquote(segments[-1])
    path = urlsplit(ref.split("#", 1)[0]).path
    stem = posixpath.splitext(posixpath.basename(path))[0]
    return stem or default


class SchemaRule(Rule):
    """
    Applies a schema node: resolves "$ref" through the schema store, reuses
    the type already bound to the schema if there is one, and otherwise
    generates an enum or a type and binds it.
    """

    def apply(self, node_name: str, node: Any, parent: Any, package: Package, schema: Schema) -> JType:
        if isinstance(node, dict) and isinstance(node.get("$ref"), str):
            ref = node["$ref"]
            store = self.rule_factory.schema_store
            schema = store.create_relative(schema, ref, self.config.ref_fragment_path_delimiters)
            logger.debug("Resolved $ref %s to %s", ref, schema.id)
            if schema.is_generated:
                return schema.java_type
            return self.apply(name_from_ref(ref, node_name), schema.content, parent, package, schema)

        if schema.is_generated:
            return schema.java_type

        if isinstance(node, dict) and isinstance(node.get("enum"), list):
            java_type = self.rule_factory.get_enum_rule().apply(node_name, node, parent, package, schema)
        else:
            java_type = self.rule_factory.get_type_rule().apply(node_name, node, parent, package, schema)

        return schema.set_java_type_if_empty(java_type)
