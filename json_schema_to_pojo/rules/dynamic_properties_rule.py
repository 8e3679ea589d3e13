"""
Dynamic property accessors: get(name), set(name, value), with(name, value).
"""

from __future__ import annotations

from typing import Any

from ..model import FINAL, OBJECT, PROTECTED, STATIC, ClassRef, DefinedClass, FieldRef, MethodParam, PrimitiveType
from .base import Rule

NOT_FOUND_VALUE_FIELD = "NOT_FOUND_VALUE"


class DynamicPropertiesRule(Rule):
    """
    Adds methods that read and write declared properties by their JSON
    name, falling back to the additional properties map when a class has
    one.

    The internal lookup returns a shared NOT_FOUND_VALUE marker for names
    that are not declared; get_or_add_not_found_var creates that field once
    per class.
    """

    def apply(self, node_name: str, node: Any, parent: Any, cls: DefinedClass, schema) -> DefinedClass:
        config = self.config
        include_getters = config.include_dynamic_accessors or config.include_dynamic_getters
        include_setters = config.include_dynamic_accessors or config.include_dynamic_setters
        include_builders = config.include_dynamic_builders or (config.include_dynamic_accessors and config.generate_builders)
        if not (include_getters or include_setters or include_builders):
            return cls

        properties = [(field.json_name, field) for field in cls.fields.values() if field.json_name is not None]
        additional = cls.fields.get("additionalProperties")
        extra = {"properties": properties, "additional_properties": additional}

        if include_getters:
            not_found = self.get_or_add_not_found_var(cls)
            self._add_method(
                cls,
                "declaredPropertyOrNotFound",
                ClassRef(OBJECT),
                [MethodParam("name", ClassRef("java.lang.String")), MethodParam("notFoundValue", ClassRef(OBJECT))],
                "dynamic_get_internal",
                extra,
                mods=(PROTECTED,),
            )
            self._add_method(
                cls,
                "get",
                ClassRef(OBJECT),
                [MethodParam("name", ClassRef("java.lang.String"))],
                "dynamic_get",
                dict(extra, not_found=not_found),
            )

        if include_setters or include_builders:
            self._add_method(
                cls,
                "declaredProperty",
                PrimitiveType("boolean"),
                [MethodParam("name", ClassRef("java.lang.String")), MethodParam("value", ClassRef(OBJECT))],
                "dynamic_set_internal",
                extra,
                mods=(PROTECTED,),
            )

        value_params = [MethodParam("name", ClassRef("java.lang.String")), MethodParam("value", ClassRef(OBJECT))]
        if include_setters:
            self._add_method(cls, "set", None, value_params, "dynamic_set", extra)
        if include_builders:
            self._add_method(cls, "with", cls.ref(), value_params, "dynamic_with", extra)

        return cls

    def get_or_add_not_found_var(self, cls: DefinedClass) -> FieldRef:
        """
        Return a reference to the class's NOT_FOUND_VALUE field, declaring
        it on first use.
        """
        field = cls.fields.get(NOT_FOUND_VALUE_FIELD)
        if field is None:
            field = cls.field(NOT_FOUND_VALUE_FIELD, ClassRef(OBJECT), (PROTECTED, STATIC, FINAL), "new Object()")
        return FieldRef(cls, field)

    @staticmethod
    def _add_method(cls: DefinedClass, name, return_type, params, body_kind, extra, mods=None):
        if cls.get_method(name) is not None:
            return
        kwargs = {"params": params, "body_kind": body_kind, "extra": extra}
        if mods is not None:
            kwargs["mods"] = mods
        cls.method(name, return_type, **kwargs)
