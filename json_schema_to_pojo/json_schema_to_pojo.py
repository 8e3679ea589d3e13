import json
import logging

import click

from .config import GenerationConfig
from .errors import ConfigurationError, SchemaResolutionError
from .generator import generate

logger = logging.getLogger(__name__)


def parse_format_type_mapping(values) -> dict[str, str]:
    mapping = {}
    for value in values:
        format_, sep, type_name = value.partition(":")
        if not sep or not format_ or not type_name:
            raise click.BadParameter(f"expected FORMAT:TYPE, got '{value}'", param_hint="--format-type-mapping")
        mapping[format_] = type_name
    return mapping


@click.command()
@click.option(
    "--source",
    "-s",
    "sources",
    multiple=True,
    required=True,
    type=click.Path(exists=True, resolve_path=True),
    help="Schema file or directory of schema files (repeatable)",
)
@click.option("--target", "-t", required=True, type=click.Path(file_okay=False, resolve_path=True), help="Output directory")
@click.option("--package", "-p", default=None, type=str, help="Package of the generated classes")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True), help="JSON configuration file")
@click.option("--use-primitives", "-P", is_flag=True, default=False, help="Use primitives instead of wrapper types")
@click.option("--word-delimiters", default=None, type=str, help="Characters that separate words in property names")
@click.option("--annotation-style", "-a", default=None, type=str, help="jackson, jackson2 or none")
@click.option("--custom-annotator", default=None, type=str, help="Extra annotator class, as module.Class or module:Class")
@click.option("--inclusion-level", default=None, type=str, help="Jackson inclusion level, e.g. NON_NULL")
@click.option("--jsr303-annotations", is_flag=True, default=False, help="Add bean validation annotations")
@click.option("--use-jakarta-validation", is_flag=True, default=False, help="Use jakarta.validation instead of javax.validation")
@click.option("--format-type-mapping", multiple=True, type=str, help="Map a format to a type, as FORMAT:TYPE (repeatable)")
@click.option("--disable-getters", is_flag=True, default=False, help="Do not generate getters")
@click.option("--disable-setters", is_flag=True, default=False, help="Do not generate setters")
@click.option("--generate-builders", is_flag=True, default=False, help="Add withX builder methods")
@click.option("--omit-tostring", is_flag=True, default=False, help="Do not generate toString()")
@click.option("--omit-hashcode-and-equals", is_flag=True, default=False, help="Do not generate hashCode() and equals()")
@click.option("--include-dynamic-accessors", is_flag=True, default=False, help="Add get/set/with by property name")
@click.option("--include-dynamic-getters", is_flag=True, default=False)
@click.option("--include-dynamic-setters", is_flag=True, default=False)
@click.option("--include-dynamic-builders", is_flag=True, default=False)
@click.option("--remove-old-output", is_flag=True, default=False, help="Empty the target directory before writing")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
def json_schema_to_pojo(
    sources,
    target,
    package,
    config,
    use_primitives,
    word_delimiters,
    annotation_style,
    custom_annotator,
    inclusion_level,
    jsr303_annotations,
    use_jakarta_validation,
    format_type_mapping,
    disable_getters,
    disable_setters,
    generate_builders,
    omit_tostring,
    omit_hashcode_and_equals,
    include_dynamic_accessors,
    include_dynamic_getters,
    include_dynamic_setters,
    include_dynamic_builders,
    remove_old_output,
    verbose,
):
    """Generate Java classes from JSON Schema documents."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if config is not None:
        with open(config) as f:
            config = GenerationConfig.from_dict(json.load(f))
    else:
        config = GenerationConfig()

    # CLI options override the config file when set
    overrides = {}
    if package is not None:
        overrides["target_package"] = package
    if word_delimiters is not None:
        overrides["property_word_delimiters"] = word_delimiters
    if annotation_style is not None:
        overrides["annotation_style"] = annotation_style
    if custom_annotator is not None:
        overrides["custom_annotator"] = custom_annotator
    if inclusion_level is not None:
        overrides["inclusion_level"] = inclusion_level
    if format_type_mapping:
        overrides["format_type_mapping"] = {**config.format_type_mapping, **parse_format_type_mapping(format_type_mapping)}

    flags = {
        "use_primitives": use_primitives,
        "include_jsr303_annotations": jsr303_annotations,
        "use_jakarta_validation": use_jakarta_validation,
        "generate_builders": generate_builders,
        "include_dynamic_accessors": include_dynamic_accessors,
        "include_dynamic_getters": include_dynamic_getters,
        "include_dynamic_setters": include_dynamic_setters,
        "include_dynamic_builders": include_dynamic_builders,
        "remove_old_output": remove_old_output,
    }
    overrides.update({name: True for name, value in flags.items() if value})
    negated_flags = {
        "include_getters": disable_getters,
        "include_setters": disable_setters,
        "include_to_string": omit_tostring,
        "include_hashcode_and_equals": omit_hashcode_and_equals,
    }
    overrides.update({name: False for name, value in negated_flags.items() if value})
    config = config.replace(**overrides)

    try:
        written = generate(config, sources, target)
    except ConfigurationError as e:
        raise click.UsageError(str(e)) from e
    except SchemaResolutionError as e:
        raise click.ClickException(str(e)) from e

    logger.info("Wrote %d file(s) to %s", len(written), target)
