"""
Type variants of the target type model.

Every type knows its fully qualified name and how to move between its
primitive and boxed forms. Types used in declarations are plain values:
annotating a type for a single use goes through annotated(), which
returns a copy and leaves the original untouched.
"""

from __future__ import annotations

import copy

from .annotations import Annotatable

PRIMITIVE_TO_BOXED = {
    "boolean": "java.lang.Boolean",
    "byte": "java.lang.Byte",
    "char": "java.lang.Character",
    "short": "java.lang.Short",
    "int": "java.lang.Integer",
    "long": "java.lang.Long",
    "float": "java.lang.Float",
    "double": "java.lang.Double",
    "void": "java.lang.Void",
}

BOXED_TO_PRIMITIVE = {boxed: primitive for primitive, boxed in PRIMITIVE_TO_BOXED.items()}

COLLECTION_TYPES = {
    "java.util.Collection",
    "java.util.List",
    "java.util.ArrayList",
    "java.util.LinkedList",
    "java.util.Set",
    "java.util.HashSet",
    "java.util.LinkedHashSet",
    "java.util.SortedSet",
    "java.util.TreeSet",
}

MAP_TYPES = {
    "java.util.Map",
    "java.util.HashMap",
    "java.util.LinkedHashMap",
    "java.util.SortedMap",
    "java.util.TreeMap",
}


class JType(Annotatable):
    """Base class for all types of the model."""

    is_primitive = False
    is_array = False

    @property
    def full_name(self) -> str:
        raise NotImplementedError

    @property
    def name(self) -> str:
        """Simple name, without package."""
        return self.full_name.rsplit(".", 1)[-1]

    @property
    def is_container(self) -> bool:
        return False

    def boxify(self) -> JType:
        return self

    def unboxify(self) -> JType:
        return self

    def annotated(self, kind: str) -> JType:
        """Return a copy of this type carrying a type-use annotation."""
        clone = copy.copy(self)
        clone.__dict__["_annotations"] = dict(self._annotation_map())
        clone.annotate(kind)
        return clone

    def __eq__(self, other: object) -> bool:
        return isinstance(other, JType) and type(self).is_primitive == type(other).is_primitive and self.full_name == other.full_name

    def __hash__(self) -> int:
        return hash(self.full_name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.full_name})"


class PrimitiveType(JType):
    """A primitive scalar: boolean, byte, short, int, long, float, double, char or void."""

    is_primitive = True

    def __init__(self, kind: str):
        if kind not in PRIMITIVE_TO_BOXED:
            raise ValueError(f"Not a primitive type: {kind}")
        self.kind = kind

    @property
    def full_name(self) -> str:
        return self.kind

    def boxify(self) -> JType:
        return ClassRef(PRIMITIVE_TO_BOXED[self.kind])


class ClassRef(JType):
    """A reference to a named class, optionally parameterised."""

    def __init__(self, qualified_name: str, type_args: list[JType] | None = None):
        self._qualified_name = qualified_name
        self.type_args: list[JType] = list(type_args or [])

    @property
    def erasure_name(self) -> str:
        return self._qualified_name

    @property
    def full_name(self) -> str:
        if self.type_args:
            args = ",".join(arg.full_name for arg in self.type_args)
            return f"{self.erasure_name}<{args}>"
        return self.erasure_name

    @property
    def name(self) -> str:
        return self.erasure_name.rsplit(".", 1)[-1]

    @property
    def package(self) -> str:
        return self.erasure_name.rsplit(".", 1)[0] if "." in self.erasure_name else ""

    @property
    def is_container(self) -> bool:
        return self.erasure_name in COLLECTION_TYPES or self.erasure_name in MAP_TYPES

    def unboxify(self) -> JType:
        primitive = BOXED_TO_PRIMITIVE.get(self.erasure_name)
        return PrimitiveType(primitive) if primitive else self


class ContainerType(ClassRef):
    """A collection or map type with its element (and key) types."""

    COLLECTION = "collection"
    MAP = "map"

    def __init__(self, qualified_name: str, kind: str, type_args: list[JType], implementation: str = ""):
        super().__init__(qualified_name, type_args)
        self.kind = kind
        # Concrete class used to initialise fields of this type
        self.implementation = implementation

    @property
    def is_container(self) -> bool:
        return True

    @property
    def element_type(self) -> JType:
        return self.type_args[-1]

    @staticmethod
    def list_of(element: JType) -> ContainerType:
        return ContainerType("java.util.List", ContainerType.COLLECTION, [element], "java.util.ArrayList")

    @staticmethod
    def set_of(element: JType) -> ContainerType:
        return ContainerType("java.util.Set", ContainerType.COLLECTION, [element], "java.util.LinkedHashSet")

    @staticmethod
    def map_of(key: JType, value: JType) -> ContainerType:
        return ContainerType("java.util.Map", ContainerType.MAP, [key, value], "java.util.LinkedHashMap")


class ArrayType(JType):
    """An array of an element type."""

    is_array = True

    def __init__(self, element: JType):
        self.element = element

    @property
    def full_name(self) -> str:
        return f"{self.element.full_name}[]"

    @property
    def name(self) -> str:
        return f"{self.element.name}[]"


OBJECT = "java.lang.Object"
STRING = "java.lang.String"


def resolve_type_name(type_name: str) -> JType:
    """Build a type from a name such as "int", "byte[]" or "java.util.UUID"."""
    type_name = type_name.strip()
    if type_name.endswith("[]"):
        return ArrayType(resolve_type_name(type_name[:-2]))
    if type_name in PRIMITIVE_TO_BOXED:
        return PrimitiveType(type_name)
    return ClassRef(type_name)
