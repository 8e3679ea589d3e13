"""
Bean validation constraint rules.

Each rule adds one kind of constraint annotation to a field. A rule does
nothing unless constraint annotations are enabled, the schema carries its
keyword and the field type is one the constraint supports; in that case
neither the field nor the validation namespace is touched at all.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

from ..model import FieldVar, JType
from ..model.types import COLLECTION_TYPES, MAP_TYPES
from .base import Rule

# Types that bean validation supports for numeric constraints
NUMERIC_CONSTRAINT_TYPES = frozenset(
    {
        "java.math.BigDecimal",
        "java.math.BigInteger",
        "java.lang.String",
        "java.lang.Byte",
        "java.lang.Short",
        "java.lang.Integer",
        "java.lang.Long",
    }
)

SIZE_CONSTRAINT_TYPES = frozenset({"java.lang.String", "java.lang.reflect.Array"} | COLLECTION_TYPES | MAP_TYPES)

PATTERN_CONSTRAINT_TYPES = frozenset({"java.lang.String"})


def boxed_type_name(type_: JType) -> str:
    """Fully qualified name of the boxed type, without type arguments."""
    return type_.boxify().full_name.split("<", 1)[0]


class ConstraintRule(Rule):
    """Base for rules that annotate a field with a validation constraint."""

    keywords: tuple[str, ...] = ()
    supported_types: frozenset[str] = frozenset()

    def apply(self, node_name: str, node: Any, parent: Any, field: FieldVar, schema) -> FieldVar:
        if not self.config.include_jsr303_annotations:
            return field
        if not self.is_present(node):
            return field
        if not self.is_applicable(field.type):
            return field

        self.annotate(field, node, self.config.validation_namespace)
        return field

    def is_present(self, node: Any) -> bool:
        return isinstance(node, dict) and any(keyword in node for keyword in self.keywords)

    def is_applicable(self, type_: JType) -> bool:
        return boxed_type_name(type_) in self.supported_types

    @abstractmethod
    def annotate(self, field: FieldVar, node: Any, namespace: str) -> None:
        """Add the constraint annotation for node to field."""


class DigitsRule(ConstraintRule):
    """integerDigits + fractionalDigits -> @Digits(integer, fraction)."""

    keywords = ("integerDigits", "fractionalDigits")
    supported_types = NUMERIC_CONSTRAINT_TYPES

    def is_present(self, node: Any) -> bool:
        # Both counts are required
        return isinstance(node, dict) and all(keyword in node for keyword in self.keywords)

    def annotate(self, field: FieldVar, node: Any, namespace: str) -> None:
        annotation = field.annotate(f"{namespace}.constraints.Digits")
        annotation.param("integer", node["integerDigits"])
        annotation.param("fraction", node["fractionalDigits"])


class MinLengthMaxLengthRule(ConstraintRule):
    """minLength / maxLength -> @Size(min, max)."""

    keywords = ("minLength", "maxLength")
    supported_types = SIZE_CONSTRAINT_TYPES

    def is_applicable(self, type_: JType) -> bool:
        return type_.is_array or super().is_applicable(type_)

    def annotate(self, field: FieldVar, node: Any, namespace: str) -> None:
        annotation = field.annotate(f"{namespace}.constraints.Size")
        if "minLength" in node:
            annotation.param("min", node["minLength"])
        if "maxLength" in node:
            annotation.param("max", node["maxLength"])


class MinItemsMaxItemsRule(MinLengthMaxLengthRule):
    """minItems / maxItems -> @Size(min, max) on collections and arrays."""

    keywords = ("minItems", "maxItems")

    def annotate(self, field: FieldVar, node: Any, namespace: str) -> None:
        annotation = field.annotate(f"{namespace}.constraints.Size")
        if "minItems" in node:
            annotation.param("min", node["minItems"])
        if "maxItems" in node:
            annotation.param("max", node["maxItems"])


class MinimumMaximumRule(ConstraintRule):
    """minimum / maximum -> @DecimalMin / @DecimalMax.

    Bounds are passed as their exact text so that no precision is lost.
    """

    keywords = ("minimum", "maximum")
    supported_types = NUMERIC_CONSTRAINT_TYPES

    def annotate(self, field: FieldVar, node: Any, namespace: str) -> None:
        if "minimum" in node:
            field.annotate(f"{namespace}.constraints.DecimalMin").param("value", str(node["minimum"]))
        if "maximum" in node:
            field.annotate(f"{namespace}.constraints.DecimalMax").param("value", str(node["maximum"]))


class PatternRule(ConstraintRule):
    """pattern -> @Pattern(regexp).

    Unlike the other constraint rules this one receives the pattern text
    itself as its node.
    """

    supported_types = PATTERN_CONSTRAINT_TYPES

    def is_present(self, node: Any) -> bool:
        return isinstance(node, str)

    def annotate(self, field: FieldVar, node: Any, namespace: str) -> None:
        field.annotate(f"{namespace}.constraints.Pattern").param("regexp", node)


class RequiredArrayRule(Rule):
    """required: [...] -> @NotNull on the named fields of a class.

    Applied to the object node with the generated class as target. The
    field's JSON name is matched, so renamed fields are still found.
    """

    def apply(self, node_name: str, node: Any, parent: Any, cls, schema):
        if not self.config.include_jsr303_annotations:
            return cls
        required = node.get("required") if isinstance(node, dict) else None
        if not isinstance(required, list):
            return cls

        names = set(required)
        for field in cls.fields.values():
            if field.json_name in names and not field.type.is_primitive:
                field.annotate(f"{self.config.validation_namespace}.constraints.NotNull")
        return cls
