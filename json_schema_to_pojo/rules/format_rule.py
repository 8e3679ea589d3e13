"""
Format rule: replaces a property's base type based on its "format".
"""

from __future__ import annotations

import logging
from typing import Any

from ..model import JType, resolve_type_name
from .base import Rule

logger = logging.getLogger(__name__)

BUILTIN_FORMAT_TYPES = {
    "date-time": "java.util.Date",
    "date": "java.lang.String",
    "time": "java.lang.String",
    "utc-millisec": "java.lang.Long",
    "regex": "java.util.regex.Pattern",
    "color": "java.lang.String",
    "style": "java.lang.String",
    "phone": "java.lang.String",
    "uri": "java.net.URI",
    "email": "java.lang.String",
    "ip-address": "java.lang.String",
    "ipv6": "java.lang.String",
    "host-name": "java.lang.String",
    "uuid": "java.util.UUID",
}


class FormatRule(Rule):
    """
    Maps a format value to a type.

    Lookup order: the configured format_type_mapping, the date/time type
    overrides, then the built-in table. An unknown format leaves the base
    type unchanged.
    """

    def apply(self, node_name: str, node: Any, parent: Any, base_type: JType, schema) -> JType:
        type_name = self.get_type_name(node)
        if type_name is None:
            logger.debug("Unknown format '%s' for %s, keeping %s", node, node_name, base_type.full_name)
            return base_type

        type_ = resolve_type_name(type_name)
        if self.config.use_primitives:
            type_ = type_.unboxify()
        return type_

    def get_type_name(self, format_: Any) -> str | None:
        if not isinstance(format_, str):
            return None

        mapping = self.config.format_type_mapping
        if format_ in mapping:
            return mapping[format_]

        overrides = {
            "date-time": self.config.date_time_type,
            "date": self.config.date_type,
            "time": self.config.time_type,
        }
        if overrides.get(format_):
            return overrides[format_]

        return BUILTIN_FORMAT_TYPES.get(format_)
