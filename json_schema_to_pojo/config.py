"""
Configuration for a generation run.

A single GenerationConfig is created per run and shared, unchanged, by
every rule, annotator and writer.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from .errors import ConfigurationError


class AnnotationStyle(str, Enum):
    """Serialization annotation style applied by the annotator."""

    JACKSON = "jackson"
    JACKSON2 = "jackson2"
    NONE = "none"

    @staticmethod
    def parse(value: str) -> AnnotationStyle:
        try:
            return AnnotationStyle(value.lower())
        except (ValueError, AttributeError) as e:
            raise ConfigurationError(f"Unrecognised annotation style: {value}", value) from e


class InclusionLevel(str, Enum):
    """Jackson property inclusion policy."""

    ALWAYS = "ALWAYS"
    NON_ABSENT = "NON_ABSENT"
    NON_DEFAULT = "NON_DEFAULT"
    NON_EMPTY = "NON_EMPTY"
    NON_NULL = "NON_NULL"
    USE_DEFAULTS = "USE_DEFAULTS"

    @staticmethod
    def parse(value: str) -> InclusionLevel:
        try:
            return InclusionLevel(value.upper())
        except (ValueError, AttributeError) as e:
            raise ConfigurationError(f"Unrecognised inclusion level: {value}", value) from e


@dataclass(frozen=True)
class GenerationConfig:
    """Configuration options for type model generation."""

    # Package that receives generated classes
    target_package: str = ""

    # Serialization annotations: "jackson", "jackson2" or "none"
    annotation_style: str = "jackson2"

    # Extra annotator class, as "module.Class" or "module:Class"
    custom_annotator: str = ""

    # Jackson inclusion policy for generated classes
    inclusion_level: str = "NON_NULL"

    # Add bean validation (JSR-303) constraint annotations
    include_jsr303_annotations: bool = False

    # Use jakarta.validation instead of javax.validation
    use_jakarta_validation: bool = False

    # Custom format -> fully qualified type name (read-only once created)
    format_type_mapping: Mapping[str, str] = field(default_factory=dict)

    # Use primitives (int, boolean, ...) instead of wrapper types
    use_primitives: bool = False

    # Numeric type selection
    use_long_integers: bool = False
    use_big_integers: bool = False
    use_big_decimals: bool = False

    # Characters that separate words in property names
    property_word_delimiters: str = "- _"

    # Characters that separate segments in $ref fragments
    ref_fragment_path_delimiters: str = "#/."

    # Overrides for the types of date/time formats
    date_time_type: str = ""
    date_type: str = ""
    time_type: str = ""

    # Accessor generation
    include_getters: bool = True
    include_setters: bool = True
    generate_builders: bool = False

    # Object methods generated from the declared fields
    include_to_string: bool = True
    include_hashcode_and_equals: bool = True

    # Generate an additionalProperties map unless the schema forbids it
    include_additional_properties: bool = True

    # Dynamic get/set/with accessors
    include_dynamic_accessors: bool = False
    include_dynamic_getters: bool = False
    include_dynamic_setters: bool = False
    include_dynamic_builders: bool = False

    # Add generation comment at top of rendered files
    add_generation_comment: bool = True

    # Empty the target directory before writing
    remove_old_output: bool = False

    def __post_init__(self):
        object.__setattr__(self, "format_type_mapping", MappingProxyType(dict(self.format_type_mapping)))

    @property
    def validation_namespace(self) -> str:
        """Package prefix for bean validation annotations."""
        return "jakarta.validation" if self.use_jakarta_validation else "javax.validation"

    def replace(self, **changes) -> GenerationConfig:
        """Return a copy with the given fields changed."""
        return dataclasses.replace(self, **changes)

    @staticmethod
    def from_dict(d: dict) -> GenerationConfig:
        """Create a config from a dictionary, ignoring unknown keys."""
        known = {f.name for f in dataclasses.fields(GenerationConfig)}
        return GenerationConfig(**{k: v for k, v in d.items() if k in known})

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        d = {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}
        d["format_type_mapping"] = dict(self.format_type_mapping)
        return d
