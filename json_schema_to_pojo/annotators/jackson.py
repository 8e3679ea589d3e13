"""
Jackson 2 annotations.
"""

from __future__ import annotations

from typing import Any

from ..config import InclusionLevel
from ..model import DefinedClass, EnumConstant, FieldVar, MethodDef
from .base import Annotator

JACKSON_ANNOTATION = "com.fasterxml.jackson.annotation"


class Jackson2Annotator(Annotator):
    """
    Annotates generated classes for Jackson 2 data binding.

    The JSON name of each property is kept in @JsonProperty, so renamed
    fields still serialize under their original name.
    """

    def property_order(self, cls: DefinedClass, properties_node: dict[str, Any]) -> None:
        cls.annotate(f"{JACKSON_ANNOTATION}.JsonPropertyOrder").param("value", list(properties_node))

    def property_inclusion(self, cls: DefinedClass, schema_node: Any) -> None:
        level = InclusionLevel.parse(self.config.inclusion_level)
        include = EnumConstant(f"{JACKSON_ANNOTATION}.JsonInclude.Include", level.value)
        cls.annotate(f"{JACKSON_ANNOTATION}.JsonInclude").param("value", include)

    def property_field(self, field: FieldVar, cls: DefinedClass, property_name: str, property_node: Any) -> None:
        field.annotate(f"{JACKSON_ANNOTATION}.JsonProperty").param("value", property_name)
        if isinstance(property_node, dict) and isinstance(property_node.get("description"), str):
            field.annotate(f"{JACKSON_ANNOTATION}.JsonPropertyDescription").param("value", property_node["description"])

    def property_getter(self, getter: MethodDef, cls: DefinedClass, property_name: str) -> None:
        getter.annotate(f"{JACKSON_ANNOTATION}.JsonProperty").param("value", property_name)

    def property_setter(self, setter: MethodDef, cls: DefinedClass, property_name: str) -> None:
        setter.annotate(f"{JACKSON_ANNOTATION}.JsonProperty").param("value", property_name)

    def additional_properties_field(self, field: FieldVar, cls: DefinedClass, property_name: str) -> None:
        field.annotate(f"{JACKSON_ANNOTATION}.JsonIgnore")

    def any_getter(self, getter: MethodDef, cls: DefinedClass) -> None:
        getter.annotate(f"{JACKSON_ANNOTATION}.JsonAnyGetter")

    def any_setter(self, setter: MethodDef, cls: DefinedClass) -> None:
        setter.annotate(f"{JACKSON_ANNOTATION}.JsonAnySetter")

    def enum_value_method(self, cls: DefinedClass, method: MethodDef) -> None:
        method.annotate(f"{JACKSON_ANNOTATION}.JsonValue")

    def enum_creator_method(self, cls: DefinedClass, method: MethodDef) -> None:
        method.annotate(f"{JACKSON_ANNOTATION}.JsonCreator")
