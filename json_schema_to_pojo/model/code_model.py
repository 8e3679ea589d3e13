"""
Mutable output model: packages, classes, fields and methods.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .annotations import Annotatable
from .types import ClassRef, JType

logger = logging.getLogger(__name__)

PUBLIC = "public"
PROTECTED = "protected"
PRIVATE = "private"
STATIC = "static"
FINAL = "final"


class FieldVar(Annotatable):
    """A field of a generated class."""

    def __init__(self, owner: DefinedClass, name: str, type_: JType, mods: tuple[str, ...] = (PRIVATE,), init: str | None = None):
        self.owner = owner
        self.name = name
        self.type = type_
        self.mods = tuple(mods)
        self.init = init
        # Original JSON property name, kept for serialization metadata
        self.json_name: str | None = None
        self.getter: MethodDef | None = None
        self.setter: MethodDef | None = None
        self.builder: MethodDef | None = None

    def __repr__(self) -> str:
        return f"FieldVar({self.owner.name}.{self.name}: {self.type.full_name})"


@dataclass
class FieldRef:
    """A static reference to a field, rendered as Owner.FIELD."""

    owner: DefinedClass
    field: FieldVar

    def __str__(self) -> str:
        return f"{self.owner.full_name}.{self.field.name}"


@dataclass
class MethodParam:
    """A method parameter."""

    name: str
    type: JType


@dataclass(eq=False)
class MethodDef(Annotatable):
    """A method of a generated class.

    The body is described by `body_kind` (getter, setter, builder,
    dynamic_get, ...) and rendered by the writer.
    """

    name: str
    return_type: JType | None = None  # None means void
    params: list[MethodParam] = field(default_factory=list)
    mods: tuple[str, ...] = (PUBLIC,)
    body_kind: str = ""
    # Field the body reads or writes, if any
    target_field: FieldVar | None = None
    # Extra data for the writer (e.g. dynamic accessor property table)
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass
class EnumConstantDef:
    """A constant of a generated enum."""

    name: str
    value: Any


class DefinedClass(ClassRef):
    """A class or enum generated by the rules."""

    CLASS = "class"
    ENUM = "enum"

    def __init__(self, package: Package, name: str, kind: str = CLASS):
        qualified_name = f"{package.name}.{name}" if package.name else name
        super().__init__(qualified_name)
        self.package_ref = package
        self.kind = kind
        self.fields: dict[str, FieldVar] = {}
        self.methods: list[MethodDef] = []
        self.enum_constants: list[EnumConstantDef] = []
        # Type of the enum value (for enums)
        self.value_type: JType | None = None

    @property
    def is_enum(self) -> bool:
        return self.kind == DefinedClass.ENUM

    def ref(self) -> ClassRef:
        """A plain reference to this class, safe to annotate per use."""
        return ClassRef(self.erasure_name)

    def annotated(self, kind: str) -> JType:
        return self.ref().annotated(kind)

    def field(self, name: str, type_: JType, mods: tuple[str, ...] = (PRIVATE,), init: str | None = None) -> FieldVar:
        """Declare a new field; field names are unique within a class."""
        if name in self.fields:
            raise ValueError(f"Field {name} already exists in {self.full_name}")
        field_var = FieldVar(self, name, type_, mods, init)
        self.fields[name] = field_var
        return field_var

    def method(self, name: str, return_type: JType | None = None, **kwargs) -> MethodDef:
        method = MethodDef(name, return_type, **kwargs)
        self.methods.append(method)
        return method

    def get_method(self, name: str) -> MethodDef | None:
        return next((m for m in self.methods if m.name == name), None)

    def enum_constant(self, name: str, value: Any) -> EnumConstantDef:
        constant = EnumConstantDef(name, value)
        self.enum_constants.append(constant)
        return constant

    def __repr__(self) -> str:
        return f"DefinedClass({self.full_name})"

    # Identity semantics: two generated classes are never interchangeable
    __eq__ = object.__eq__
    __hash__ = object.__hash__


class Package:
    """A package of the code model."""

    def __init__(self, code_model: CodeModel, name: str):
        self.code_model = code_model
        self.name = name
        self.classes: dict[str, DefinedClass] = {}

    def define_class(self, name: str, kind: str = DefinedClass.CLASS) -> DefinedClass:
        """Define a class, appending __1, __2, ... when the name is taken."""
        unique_name = name
        index = 0
        while unique_name in self.classes:
            index += 1
            unique_name = f"{name}__{index}"
        cls = DefinedClass(self, unique_name, kind)
        self.classes[unique_name] = cls
        logger.debug("Defined %s %s", kind, cls.full_name)
        return cls

    def get_class(self, name: str) -> DefinedClass | None:
        return self.classes.get(name)


class CodeModel:
    """Root of the output model."""

    def __init__(self):
        self.packages: dict[str, Package] = {}

    def package(self, name: str) -> Package:
        if name not in self.packages:
            self.packages[name] = Package(self, name)
        return self.packages[name]

    def classes(self) -> list[DefinedClass]:
        """All defined classes, in definition order per package."""
        return [cls for package in self.packages.values() for cls in package.classes.values()]
