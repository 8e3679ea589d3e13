"""
Annotation descriptors attached to classes, fields, methods and types.

A descriptor only records the annotation kind (its fully qualified name)
and its parameters; turning it into source text is the writer's job.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class EnumConstant:
    """A reference to an enum constant used as an annotation value."""

    type_name: str  # e.g. "com.fasterxml.jackson.annotation.JsonInclude.Include"
    name: str  # e.g. "NON_NULL"


@dataclass
class AnnotationDescriptor:
    """An annotation kind plus its ordered parameters."""

    kind: str
    params: dict[str, Any] = field(default_factory=dict)

    @property
    def simple_name(self) -> str:
        return self.kind.rsplit(".", 1)[-1]

    def param(self, name: str, value: Any) -> AnnotationDescriptor:
        """Set a parameter, keeping the position of an existing one."""
        self.params[name] = value
        return self


class Annotatable:
    """Mixin for model nodes that carry annotation descriptors.

    Descriptors are keyed by kind: annotating twice with the same kind
    returns the descriptor added first, so rules can be re-applied safely.
    """

    def _annotation_map(self) -> dict[str, AnnotationDescriptor]:
        try:
            return self.__dict__["_annotations"]
        except KeyError:
            annotations: dict[str, AnnotationDescriptor] = {}
            self.__dict__["_annotations"] = annotations
            return annotations

    @property
    def annotations(self) -> list[AnnotationDescriptor]:
        return list(self._annotation_map().values())

    def annotate(self, kind: str) -> AnnotationDescriptor:
        annotations = self._annotation_map()
        if kind not in annotations:
            annotations[kind] = AnnotationDescriptor(kind)
        return annotations[kind]

    def has_annotation(self, kind: str) -> bool:
        return kind in self._annotation_map()

    def get_annotation(self, kind: str) -> AnnotationDescriptor | None:
        return self._annotation_map().get(kind)
