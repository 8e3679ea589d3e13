"""
Base class for schema rules.

Every rule shares one signature:

    apply(node_name, node, parent, target, schema) -> result

where `node_name` is the property (or class) name being processed, `node`
the JSON content the rule reads, `parent` the enclosing JSON node (or
None), `target` the model node built so far and `schema` the Schema the
node belongs to. Rules keep no per-call state, so a single instance of
each is shared by a whole run and may be re-entered from other rules.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..config import GenerationConfig
    from ..schema import Schema
    from .rule_factory import RuleFactory


class Rule(ABC):
    """Abstract base class for all rules."""

    def __init__(self, rule_factory: RuleFactory):
        self.rule_factory = rule_factory

    @property
    def config(self) -> GenerationConfig:
        return self.rule_factory.generation_config

    @abstractmethod
    def apply(self, node_name: str, node: Any, parent: Any, target: Any, schema: Schema | None) -> Any:
        """
        Apply the rule.

        Args:
            node_name: Name of the property or class being processed
            node: JSON content read by the rule
            parent: Enclosing JSON node, if any
            target: Model node built so far
            schema: Schema the node belongs to

        Returns:
            The resulting model node
        """
