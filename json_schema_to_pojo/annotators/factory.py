"""
Builds the annotator for a run from its configuration.
"""

from __future__ import annotations

import importlib
import logging

from ..config import AnnotationStyle, GenerationConfig
from ..errors import ConfigurationError
from .base import Annotator, CompositeAnnotator, NoopAnnotator
from .jackson import Jackson2Annotator

logger = logging.getLogger(__name__)


class AnnotatorFactory:
    """Creates annotators by style name or by class path."""

    def __init__(self, config: GenerationConfig):
        self.config = config

    def get_annotator(self, style: str | AnnotationStyle) -> Annotator:
        """
        Annotator for an annotation style.

        Raises:
            ConfigurationError: If the style is not recognised
        """
        style = AnnotationStyle.parse(style)
        if style in (AnnotationStyle.JACKSON, AnnotationStyle.JACKSON2):
            return Jackson2Annotator(self.config)
        return NoopAnnotator(self.config)

    def get_custom_annotator(self, class_path: str) -> Annotator:
        """
        Instantiate an annotator class given as "module.Class" or
        "module:Class". The class is called with the configuration.

        Raises:
            ConfigurationError: If the class cannot be imported or is not an Annotator
        """
        if ":" in class_path:
            module_name, _, class_name = class_path.partition(":")
        else:
            module_name, _, class_name = class_path.rpartition(".")
        if not module_name or not class_name:
            raise ConfigurationError(f"Invalid custom annotator: {class_path}", class_path)

        try:
            module = importlib.import_module(module_name)
            annotator_class = getattr(module, class_name)
        except (ImportError, AttributeError) as e:
            raise ConfigurationError(f"Cannot load custom annotator {class_path}: {e}", class_path) from e

        if not (isinstance(annotator_class, type) and issubclass(annotator_class, Annotator)):
            raise ConfigurationError(f"Custom annotator {class_path} is not an Annotator", class_path)

        logger.debug("Using custom annotator %s", class_path)
        return annotator_class(self.config)

    def build(self) -> Annotator:
        """The annotator for the configured style, combined with the custom annotator if any."""
        annotator = self.get_annotator(self.config.annotation_style)
        if self.config.custom_annotator:
            return CompositeAnnotator(annotator, self.get_custom_annotator(self.config.custom_annotator))
        return annotator
