"""
Annotators module.

Annotators add serialization annotations to the type model at the
extension points the rules expose.
"""

from __future__ import annotations

from .base import Annotator, CompositeAnnotator, NoopAnnotator
from .factory import AnnotatorFactory
from .jackson import Jackson2Annotator

__all__ = [
    "Annotator",
    "AnnotatorFactory",
    "CompositeAnnotator",
    "Jackson2Annotator",
    "NoopAnnotator",
]
