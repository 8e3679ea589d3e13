"""
Type model module.

Contains the output representation built by the rules: types, classes,
fields, methods and annotation descriptors.
"""

from __future__ import annotations

from .annotations import Annotatable, AnnotationDescriptor, EnumConstant
from .code_model import (
    FINAL,
    PRIVATE,
    PROTECTED,
    PUBLIC,
    STATIC,
    CodeModel,
    DefinedClass,
    EnumConstantDef,
    FieldRef,
    FieldVar,
    MethodDef,
    MethodParam,
    Package,
)
from .types import (
    OBJECT,
    STRING,
    ArrayType,
    ClassRef,
    ContainerType,
    JType,
    PrimitiveType,
    resolve_type_name,
)

__all__ = [
    "Annotatable",
    "AnnotationDescriptor",
    "EnumConstant",
    "CodeModel",
    "Package",
    "DefinedClass",
    "EnumConstantDef",
    "FieldVar",
    "FieldRef",
    "MethodDef",
    "MethodParam",
    "JType",
    "PrimitiveType",
    "ClassRef",
    "ContainerType",
    "ArrayType",
    "resolve_type_name",
    "OBJECT",
    "STRING",
    "PUBLIC",
    "PROTECTED",
    "PRIVATE",
    "STATIC",
    "FINAL",
]
