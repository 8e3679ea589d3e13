"""
Turns JSON names into Java identifiers.
"""

from __future__ import annotations

import re
from typing import Any

from ..config import GenerationConfig
from ..model import JType
from ..utils import capitalize, uncapitalize

ILLEGAL_CHARACTER_REGEX = re.compile(r"[^0-9a-zA-Z_$]")

# Identifier used when a name has no legal characters left
EMPTY_NAME = "__EMPTY__"

JAVA_KEYWORDS = frozenset(
    {
        "abstract",
        "assert",
        "boolean",
        "break",
        "byte",
        "case",
        "catch",
        "char",
        "class",
        "const",
        "continue",
        "default",
        "do",
        "double",
        "else",
        "enum",
        "extends",
        "false",
        "final",
        "finally",
        "float",
        "for",
        "goto",
        "if",
        "implements",
        "import",
        "instanceof",
        "int",
        "interface",
        "long",
        "native",
        "new",
        "null",
        "package",
        "private",
        "protected",
        "public",
        "return",
        "short",
        "static",
        "strictfp",
        "super",
        "switch",
        "synchronized",
        "this",
        "throw",
        "throws",
        "transient",
        "true",
        "try",
        "void",
        "volatile",
        "while",
        "_",
    }
)


def is_keyword(name: str) -> bool:
    return name in JAVA_KEYWORDS


class NameHelper:
    """
    Builds field, accessor, class and enum constant names.

    Word delimiters come from the configuration: the character after a
    delimiter is upper-cased and the delimiters are dropped, while the
    first word keeps its case. The JSON name can be overridden with a
    "javaName" keyword on the property schema.
    """

    def __init__(self, config: GenerationConfig):
        self.config = config

    def replace_illegal_characters(self, name: str) -> str:
        return ILLEGAL_CHARACTER_REGEX.sub("_", name)

    def normalize_name(self, name: str) -> str:
        name = self.capitalize_trailing_words(name)
        if name[:1].isdigit():
            name = "_" + name
        return name

    def capitalize_trailing_words(self, name: str) -> str:
        """
        Examples (default delimiters "- _"):
            "PROPERTY_ONE" -> "PropertyOne"
            "property_one" -> "propertyOne"
            "PROPERTY_four" -> "PROPERTYFour"
            "ABC" -> "Abc"
        """
        delimiters = self.config.property_word_delimiters
        all_upper = self._all_upper_case_beside_delimiters(name, delimiters)

        if any(c in delimiters for c in name):
            capitalized = self._capitalize_words(name, delimiters, fully=all_upper)
            name = name[0] + capitalized[1:]
            return "".join(c for c in name if c not in delimiters)

        if all_upper:
            return self._capitalize_words(name, delimiters, fully=True)
        return name

    def get_property_name(self, json_name: str, node: Any = None) -> str:
        name = self.get_field_name(json_name, node)
        name = self.replace_illegal_characters(name)
        name = self.normalize_name(name) or EMPTY_NAME
        name = uncapitalize(name)
        if is_keyword(name):
            name = "_" + name
        if is_keyword(name):
            name += "_"
        return name

    def get_field_name(self, json_name: str, node: Any = None) -> str:
        """The name to derive identifiers from: javaName if set, else the JSON name."""
        if isinstance(node, dict) and isinstance(node.get("javaName"), str):
            return node["javaName"]
        return json_name

    def get_getter_name(self, json_name: str, type_: JType, node: Any = None) -> str:
        prefix = "is" if type_.is_primitive and type_.full_name == "boolean" else "get"
        getter_name = self._accessor_name(prefix, json_name, node)
        if getter_name == "getClass":
            getter_name = "getClass_"
        return getter_name

    def get_setter_name(self, json_name: str, node: Any = None) -> str:
        setter_name = self._accessor_name("set", json_name, node)
        if setter_name == "setClass":
            setter_name = "setClass_"
        return setter_name

    def get_builder_name(self, json_name: str, node: Any = None) -> str:
        return self._accessor_name("with", json_name, node)

    def get_class_name(self, node_name: str, node: Any = None) -> str:
        if isinstance(node, dict) and isinstance(node.get("javaName"), str):
            return node["javaName"]
        name = self.normalize_name(self.replace_illegal_characters(node_name))
        return capitalize(name) or "Object_"

    def get_enum_constant_name(self, value: Any) -> str:
        """
        Examples:
            "one" -> "ONE"
            "twoWords" -> "TWO_WORDS"
            "1st" -> "_1ST"
            "" -> "__EMPTY__"
        """
        text = "null" if value is None else str(value)
        text = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", "_", text)
        text = re.sub(r"(?<=[A-Z])(?=[A-Z][a-z])", "_", text)
        text = re.sub(r"[^A-Z0-9_]+", "_", text.upper())
        text = re.sub(r"_+", "_", text).strip("_")
        if not text:
            return EMPTY_NAME
        if text[0].isdigit():
            text = "_" + text
        return text

    def _accessor_name(self, prefix: str, json_name: str, node: Any) -> str:
        name = self.get_field_name(json_name, node)
        name = self.replace_illegal_characters(name)
        name = self.capitalize_trailing_words(name) or EMPTY_NAME
        if len(name) > 1 and name[1].isupper():
            return prefix + name
        return prefix + capitalize(name)

    @staticmethod
    def _all_upper_case_beside_delimiters(name: str, delimiters: str) -> bool:
        return not any(c.islower() for c in name if c not in delimiters)

    @staticmethod
    def _capitalize_words(name: str, delimiters: str, fully: bool) -> str:
        result = []
        capitalize_next = True
        for c in name:
            if c in delimiters:
                capitalize_next = True
                result.append(c)
            elif capitalize_next:
                result.append(c.upper())
                capitalize_next = False
            else:
                result.append(c.lower() if fully else c)
        return "".join(result)
