"""
Annotator interface.

The rules call an annotator at fixed points of generation so that it can
add serialization annotations. The base class does nothing at each point;
concrete annotators override the hooks they need.
"""

from __future__ import annotations

from typing import Any

from ..config import GenerationConfig
from ..model import DefinedClass, FieldVar, MethodDef


class Annotator:
    """Annotator with no-op hooks."""

    def __init__(self, config: GenerationConfig | None = None):
        self.config = config if config is not None else GenerationConfig()

    def property_order(self, cls: DefinedClass, properties_node: dict[str, Any]) -> None:
        pass

    def property_inclusion(self, cls: DefinedClass, schema_node: Any) -> None:
        pass

    def property_field(self, field: FieldVar, cls: DefinedClass, property_name: str, property_node: Any) -> None:
        pass

    def property_getter(self, getter: MethodDef, cls: DefinedClass, property_name: str) -> None:
        pass

    def property_setter(self, setter: MethodDef, cls: DefinedClass, property_name: str) -> None:
        pass

    def additional_properties_field(self, field: FieldVar, cls: DefinedClass, property_name: str) -> None:
        pass

    def any_getter(self, getter: MethodDef, cls: DefinedClass) -> None:
        pass

    def any_setter(self, setter: MethodDef, cls: DefinedClass) -> None:
        pass

    def enum_value_method(self, cls: DefinedClass, method: MethodDef) -> None:
        pass

    def enum_creator_method(self, cls: DefinedClass, method: MethodDef) -> None:
        pass


class NoopAnnotator(Annotator):
    """Adds no annotations at all."""

    pass


class CompositeAnnotator(Annotator):
    """Forwards every hook to each of its annotators, in order."""

    def __init__(self, *annotators: Annotator):
        super().__init__(annotators[0].config if annotators else None)
        self.annotators = list(annotators)

    def property_order(self, cls, properties_node):
        for annotator in self.annotators:
            annotator.property_order(cls, properties_node)

    def property_inclusion(self, cls, schema_node):
        for annotator in self.annotators:
            annotator.property_inclusion(cls, schema_node)

    def property_field(self, field, cls, property_name, property_node):
        for annotator in self.annotators:
            annotator.property_field(field, cls, property_name, property_node)

    def property_getter(self, getter, cls, property_name):
        for annotator in self.annotators:
            annotator.property_getter(getter, cls, property_name)

    def property_setter(self, setter, cls, property_name):
        for annotator in self.annotators:
            annotator.property_setter(setter, cls, property_name)

    def additional_properties_field(self, field, cls, property_name):
        for annotator in self.annotators:
            annotator.additional_properties_field(field, cls, property_name)

    def any_getter(self, getter, cls):
        for annotator in self.annotators:
            annotator.any_getter(getter, cls)

    def any_setter(self, setter, cls):
        for annotator in self.annotators:
            annotator.any_setter(setter, cls)

    def enum_value_method(self, cls, method):
        for annotator in self.annotators:
            annotator.enum_value_method(cls, method)

    def enum_creator_method(self, cls, method):
        for annotator in self.annotators:
            annotator.enum_creator_method(cls, method)
