"""
Cascade rule: marks class-typed properties for cascading validation.
"""

from __future__ import annotations

from typing import Any

from ..model import JType
from .base import Rule


class ValidRule(Rule):
    """
    Adds @Valid to a type when constraint annotations are enabled.

    The annotation is attached to a copy of the type, so a generated class
    referenced from several places is never modified. Arrays are annotated
    like any reference type. Primitives and containers are returned
    unchanged: the element types of a container get their own annotation
    when the item schema is walked.
    """

    def apply(self, node_name: str, node: Any, parent: Any, type_: JType, schema) -> JType:
        if not self.config.include_jsr303_annotations:
            return type_
        if type_.is_primitive or type_.is_container:
            return type_
        return type_.annotated(f"{self.config.validation_namespace}.Valid")
