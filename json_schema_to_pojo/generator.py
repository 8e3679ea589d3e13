"""
Schema mapper and the end-to-end generation entry point.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any, Iterable

from .config import GenerationConfig
from .model import CodeModel, JType
from .rules import RuleFactory
from .writer import JavaWriter

logger = logging.getLogger(__name__)


class SchemaMapper:
    """Maps schema documents into a code model."""

    def __init__(self, rule_factory: RuleFactory | None = None):
        self.rule_factory = rule_factory if rule_factory is not None else RuleFactory()

    def generate(self, code_model: CodeModel, class_name: str, package_name: str, schema_uri: str | Path) -> JType:
        """
        Generate the types for a schema document.

        Args:
            code_model: Model receiving the generated classes
            class_name: Name hint for the top-level type
            package_name: Package of the generated classes
            schema_uri: URI (or path) of the schema document

        Returns:
            The type generated for the document root
        """
        config = self.rule_factory.generation_config
        schema = self.rule_factory.schema_store.create(schema_uri, config.ref_fragment_path_delimiters)
        package = code_model.package(package_name)
        logger.debug("Generating %s from %s", class_name, schema.id)
        return self.rule_factory.get_schema_rule().apply(class_name, schema.content, None, package, schema)

    def generate_from_content(
        self,
        code_model: CodeModel,
        class_name: str,
        package_name: str,
        content: Any,
        base_uri: str | Path | None = None,
    ) -> JType:
        """
        Generate the types for an in-memory schema.

        The content is registered under base_uri (by default a file named
        after the class in the current directory), against which relative
        references are resolved.
        """
        if base_uri is None:
            base_uri = Path.cwd() / f"{class_name}.json"
        uri = self.rule_factory.schema_store.register(base_uri, content)
        return self.generate(code_model, class_name, package_name, uri)


def find_schema_files(sources: Iterable[str | Path]) -> list[Path]:
    """Expand source files and directories into the list of *.json files."""
    files = []
    for source in sources:
        path = Path(source)
        if path.is_dir():
            files.extend(sorted(p for p in path.rglob("*.json") if p.is_file()))
        else:
            files.append(path)
    return files


def remove_old_output(target_dir: str | Path) -> None:
    """Delete everything below target_dir, keeping the directory itself."""
    target = Path(target_dir)
    if not target.is_dir():
        return
    for child in sorted(target.iterdir()):
        logger.info("Removing old output %s", child)
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()


def generate(config: GenerationConfig, sources: Iterable[str | Path], target_dir: str | Path) -> list[Path]:
    """
    Generate Java sources for every schema file under sources.

    With remove_old_output set, the target directory is emptied once every
    schema has been mapped, so a failing run leaves earlier output in place.

    Returns:
        Paths of the written files
    """
    rule_factory = RuleFactory(config)
    mapper = SchemaMapper(rule_factory)
    name_helper = rule_factory.get_name_helper()
    code_model = CodeModel()

    for schema_file in find_schema_files(sources):
        class_name = name_helper.get_class_name(schema_file.stem)
        logger.info("Processing %s", schema_file)
        mapper.generate(code_model, class_name, config.target_package, schema_file)

    if config.remove_old_output:
        remove_old_output(target_dir)

    return JavaWriter(config).write(code_model, target_dir)
