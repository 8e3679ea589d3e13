"""JSON Schema to POJO Generator

A Python package for generating JavaBean-style Java classes from JSON
Schema documents. Schemas are resolved into a memoized schema graph,
mapped to a type model by a set of rules and rendered with Jinja2
templates.
"""

__version__ = "1.0.0"
__author__ = "François Lagunas"

from .config import AnnotationStyle, GenerationConfig, InclusionLevel
from .errors import ConfigurationError, JsonSchemaToPojoError, SchemaResolutionError
from .generator import SchemaMapper, generate
from .model import CodeModel
from .rules import RuleFactory
from .schema import Schema, SchemaStore
from .writer import JavaWriter

__all__ = [
    "AnnotationStyle",
    "CodeModel",
    "ConfigurationError",
    "GenerationConfig",
    "InclusionLevel",
    "JavaWriter",
    "JsonSchemaToPojoError",
    "RuleFactory",
    "Schema",
    "SchemaMapper",
    "SchemaResolutionError",
    "SchemaStore",
    "generate",
]
