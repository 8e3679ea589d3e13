"""
Renders the type model as Java source files.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import jinja2

from ..cli_utils import reconstruct_command_line
from ..config import GenerationConfig
from ..model import (
    AnnotationDescriptor,
    ArrayType,
    CodeModel,
    ContainerType,
    DefinedClass,
    EnumConstant,
    FieldVar,
    JType,
    MethodDef,
)

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates" / "java"

IMPLICIT_PACKAGE = "java.lang"

OBJECT_METHOD_KINDS = ("to_string", "hash_code", "equals")


def java_string(value: str) -> str:
    """A Java string literal for value."""
    return json.dumps(value)


def split_nested(qualified_name: str) -> tuple[str, str]:
    """
    Split a name into its top-level class and the name used in code.

    Examples:
        "java.util.List" -> ("java.util.List", "List")
        "com.fasterxml.jackson.annotation.JsonInclude.Include"
            -> ("com.fasterxml.jackson.annotation.JsonInclude", "JsonInclude.Include")
    """
    parts = qualified_name.split(".")
    for i, part in enumerate(parts):
        if part[:1].isupper():
            return ".".join(parts[: i + 1]), ".".join(parts[i:])
    return qualified_name, parts[-1]


def type_annotations(type_: JType) -> list[AnnotationDescriptor]:
    """Type-use annotations of a type; a generated class's own annotations are not."""
    if isinstance(type_, DefinedClass):
        return []
    return type_.annotations


def to_string_expression(field: FieldVar, scope: ImportScope) -> str:
    """Value appended to the toString() buffer for a field."""
    this = f"this.{field.name}"
    if field.type.is_primitive:
        return this
    if isinstance(field.type, ArrayType):
        return f'(({this} == null) ? "<null>" : {scope.name("java.util.Arrays")}.toString({this}))'
    return f'(({this} == null) ? "<null>" : {this})'


def hash_code_expression(field: FieldVar, scope: ImportScope) -> str:
    """int expression folded into hashCode() for a field."""
    this = f"this.{field.name}"
    if isinstance(field.type, ArrayType):
        return f"{scope.name('java.util.Arrays')}.hashCode({this})"
    if not field.type.is_primitive:
        return f"(({this} == null) ? 0 : {this}.hashCode())"

    kind = field.type.full_name
    if kind == "int":
        return this
    if kind == "boolean":
        return f"({this} ? 1 : 0)"
    if kind == "long":
        return f"((int) ({this} ^ ({this} >>> 32)))"
    if kind == "double":
        bits = f"Double.doubleToLongBits({this})"
        return f"((int) ({bits} ^ ({bits} >>> 32)))"
    if kind == "float":
        return f"Float.floatToIntBits({this})"
    return f"((int) {this})"


def equals_expression(field: FieldVar, scope: ImportScope) -> str:
    """boolean expression comparing a field of this and rhs in equals()."""
    this, rhs = f"this.{field.name}", f"rhs.{field.name}"
    if isinstance(field.type, ArrayType):
        return f"{scope.name('java.util.Arrays')}.equals({this}, {rhs})"
    if not field.type.is_primitive:
        return f"(({this} == {rhs}) || (({this} != null) && {this}.equals({rhs})))"

    kind = field.type.full_name
    if kind == "double":
        return f"(Double.doubleToLongBits({this}) == Double.doubleToLongBits({rhs}))"
    if kind == "float":
        return f"(Float.floatToIntBits({this}) == Float.floatToIntBits({rhs}))"
    return f"({this} == {rhs})"


class ImportScope:
    """
    Imports of one compilation unit.

    A simple name is bound to the first class that asks for it; any other
    class with the same simple name is written fully qualified.
    """

    def __init__(self, cls: DefinedClass):
        self.package = cls.package_ref.name
        self._names: dict[str, str] = {}
        self.name(cls.erasure_name)

    def name(self, qualified_name: str) -> str:
        outer, display = split_nested(qualified_name)
        simple = outer.rsplit(".", 1)[-1]
        bound = self._names.setdefault(simple, outer)
        return display if bound == outer else qualified_name

    @property
    def imports(self) -> list[str]:
        result = []
        for qualified in self._names.values():
            package = qualified.rsplit(".", 1)[0] if "." in qualified else ""
            if package not in (IMPLICIT_PACKAGE, self.package, ""):
                result.append(qualified)
        return sorted(result)

    def type_name(self, type_: JType, annotations: bool = False) -> str:
        prefix = "".join(self.annotation(a) + " " for a in type_annotations(type_)) if annotations else ""
        if isinstance(type_, ArrayType):
            return prefix + self.type_name(type_.element) + "[]"
        if type_.is_primitive:
            return prefix + type_.full_name
        name = self.name(type_.erasure_name)
        if type_.type_args:
            name += "<" + ", ".join(self.type_name(arg, annotations=True) for arg in type_.type_args) + ">"
        return prefix + name

    def erasure(self, type_: JType) -> str:
        if isinstance(type_, ArrayType) or type_.is_primitive:
            return self.type_name(type_)
        return self.name(type_.erasure_name)

    def annotation(self, annotation: AnnotationDescriptor) -> str:
        name = "@" + self.name(annotation.kind)
        if not annotation.params:
            return name
        if list(annotation.params) == ["value"]:
            return f"{name}({self.annotation_value(annotation.params['value'])})"
        params = ", ".join(f"{key} = {self.annotation_value(value)}" for key, value in annotation.params.items())
        return f"{name}({params})"

    def annotation_value(self, value: Any) -> str:
        if isinstance(value, EnumConstant):
            return f"{self.name(value.type_name)}.{value.name}"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (list, tuple)):
            return "{" + ", ".join(self.annotation_value(v) for v in value) + "}"
        if isinstance(value, str):
            return java_string(value)
        return str(value)


class JavaWriter:
    """Writes one .java file per generated class."""

    def __init__(self, config: GenerationConfig | None = None):
        self.config = config if config is not None else GenerationConfig()
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )
        self.prefix_template = self.jinja_env.get_template("prefix.java.jinja2")
        self.class_template = self.jinja_env.get_template("class.java.jinja2")
        self.enum_template = self.jinja_env.get_template("enum.java.jinja2")

    def write(self, code_model: CodeModel, target_dir: str | Path) -> list[Path]:
        """
        Write every class of the model below target_dir, in package directories.

        Returns:
            Paths of the written files
        """
        written = []
        for cls in code_model.classes():
            directory = Path(target_dir).joinpath(*[p for p in cls.package_ref.name.split(".") if p])
            directory.mkdir(parents=True, exist_ok=True)
            path = directory / f"{cls.name}.java"
            with open(path, "w", encoding="utf-8") as f:
                f.write(self.render(cls))
            logger.debug("Wrote %s", path)
            written.append(path)
        return written

    def render(self, cls: DefinedClass) -> str:
        """Java source of a single class or enum."""
        scope = ImportScope(cls)
        if cls.is_enum:
            body = self.enum_template.render(self.prepare_enum_info(cls, scope))
        else:
            body = self.class_template.render(self.prepare_class_info(cls, scope))

        prefix = self.prefix_template.render(
            generation_comment=self._generate_command_comment(),
            package=cls.package_ref.name,
            imports=scope.imports,
        )
        return prefix + body

    def prepare_class_info(self, cls: DefinedClass, scope: ImportScope) -> dict[str, Any]:
        fields = [self.prepare_field_info(field, scope) for field in cls.fields.values()]
        methods = [self.prepare_method_info(cls, method, scope) for method in cls.methods]
        return {
            "annotations": [scope.annotation(a) for a in cls.annotations],
            "name": cls.name,
            "fields": fields,
            "methods": methods,
        }

    def prepare_field_info(self, field: FieldVar, scope: ImportScope) -> dict[str, Any]:
        annotations = [scope.annotation(a) for a in field.annotations]
        annotations += [scope.annotation(a) for a in type_annotations(field.type)]
        declaration = f"{' '.join(field.mods)} {scope.type_name(field.type)} {field.name}"
        if field.init is not None:
            if isinstance(field.type, ContainerType) and field.type.implementation:
                scope.name(field.type.implementation)
            declaration += f" = {field.init}"
        return {"annotations": annotations, "declaration": declaration, "name": field.name}

    def prepare_method_info(self, cls: DefinedClass, method: MethodDef, scope: ImportScope) -> dict[str, Any]:
        return_type = scope.type_name(method.return_type) if method.return_type is not None else "void"
        params = ", ".join(f"{scope.type_name(p.type)} {p.name}" for p in method.params)
        info = {
            "annotations": [scope.annotation(a) for a in method.annotations],
            "signature": f"{' '.join(method.mods)} {return_type} {method.name}({params})",
            "body_kind": method.body_kind,
            "class_name": cls.name,
            "field": method.target_field.name if method.target_field is not None else None,
            "params": [p.name for p in method.params],
        }

        if method.body_kind.startswith("dynamic_"):
            info.update(self.prepare_dynamic_info(method, scope))
            if method.body_kind == "dynamic_set_internal":
                info["annotations"].insert(0, '@SuppressWarnings("unchecked")')
        elif method.body_kind in OBJECT_METHOD_KINDS:
            info.update(self.prepare_object_method_info(method, scope))

        return info

    def prepare_dynamic_info(self, method: MethodDef, scope: ImportScope) -> dict[str, Any]:
        properties = []
        for json_name, field in method.extra.get("properties", []):
            boxed = field.type.boxify()
            properties.append(
                {
                    "json_name": java_string(json_name),
                    "field": field.name,
                    "check_type": scope.erasure(boxed),
                    "cast_type": scope.type_name(boxed),
                    "description": boxed.name,
                }
            )

        additional = method.extra.get("additional_properties")
        info = {"properties": properties, "additional": additional.name if additional is not None else None}
        if additional is not None:
            info["additional_value_type"] = scope.type_name(additional.type.type_args[-1])
        not_found = method.extra.get("not_found")
        if not_found is not None:
            info["not_found"] = f"{scope.name(not_found.owner.erasure_name)}.{not_found.field.name}"
        return info

    def prepare_object_method_info(self, method: MethodDef, scope: ImportScope) -> dict[str, Any]:
        fields = method.extra.get("fields", [])
        if method.body_kind == "to_string":
            return {"fields": [{"name": field.name, "value": to_string_expression(field, scope)} for field in fields]}
        if method.body_kind == "hash_code":
            return {"hash_codes": [hash_code_expression(field, scope) for field in fields]}
        comparisons = [equals_expression(field, scope) for field in fields]
        return {"equals": "(" + " && ".join(comparisons) + ")" if comparisons else ""}

    def prepare_enum_info(self, cls: DefinedClass, scope: ImportScope) -> dict[str, Any]:
        value_type = scope.type_name(cls.value_type)
        methods = {method.body_kind: method for method in cls.methods}
        scope.name("java.util.HashMap")
        scope.name("java.util.Map")
        return {
            "annotations": [scope.annotation(a) for a in cls.annotations],
            "name": cls.name,
            "value_type": value_type,
            "map_type": scope.name("java.util.Map"),
            "hash_map_type": scope.name("java.util.HashMap"),
            "constants": [{"name": c.name, "value": self.literal(cls.value_type, c.value, scope)} for c in cls.enum_constants],
            "value_annotations": self._method_annotations(methods.get("enum_value"), scope),
            "creator_annotations": self._method_annotations(methods.get("enum_from_value"), scope),
        }

    def literal(self, type_: JType, value: Any, scope: ImportScope) -> str:
        """Java literal of an enum value for the enum's value type."""
        name = type_.boxify().full_name
        if name == "java.lang.Boolean":
            return "true" if value else "false"
        if name == "java.lang.Integer":
            return str(value)
        if name == "java.lang.Long":
            return f"{value}L"
        if name == "java.lang.Double":
            return f"{value}D"
        if name in ("java.math.BigDecimal", "java.math.BigInteger"):
            return f"new {scope.name(name)}({java_string(str(value))})"
        return java_string(str(value))

    @staticmethod
    def _method_annotations(method: MethodDef | None, scope: ImportScope) -> list[str]:
        if method is None:
            return []
        return [scope.annotation(a) for a in method.annotations]

    def _generate_command_comment(self) -> str:
        """Generate a command line comment for the generated file"""
        if not self.config.add_generation_comment:
            return ""

        try:
            from ..json_schema_to_pojo import json_schema_to_pojo as click_command  # noqa

            command_line = reconstruct_command_line(click_command)
        except (ImportError, AttributeError):
            command_line = "json_schema_to_pojo"

        from .. import __version__

        return f"// Generated by json_schema_to_pojo v{__version__} : {command_line}"
