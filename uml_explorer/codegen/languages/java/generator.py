"""
Java code generator implementation.

Generates Java class, abstract class and interface skeletons from the
design model, one source text for the whole project.
"""

from typing import Dict, List, Optional

from ....logging_config import get_logger
from ...core.config import load_config
from ...core.generator import CodeGenerator
from ...core.model import (
    ClassDef,
    Language,
    Method,
    MethodKind,
    Project,
    RelationshipType,
)
from ...core.naming import (
    CLASS_FALLBACK,
    MEMBER_FALLBACK,
    PARAM_FALLBACK,
    generic_param,
    sanitize_identifier,
    visibility_keyword,
)
from ...core.types import map_return_type, map_type

logger = get_logger(__name__)

DEFAULT_INDENT = "\t"


def java_class_name(cls: ClassDef) -> str:
    """Class name with generic parameter, both sanitized."""
    name = sanitize_identifier(cls.name, CLASS_FALLBACK)
    param = generic_param(cls)
    if param:
        return f"{name}<{sanitize_identifier(param, CLASS_FALLBACK)}>"
    return name


def _extends_clause(cls: ClassDef, project: Project) -> str:
    for relationship in project.relationships:
        if (
            relationship.type != RelationshipType.EXTENDS
            or relationship.from_class_id != cls.id
        ):
            continue
        base = project.find_class(relationship.to_class_id)
        if base is not None:
            return f" extends {java_class_name(base)}"
    return ""


def _implements_clause(cls: ClassDef, project: Project) -> str:
    names = []
    for relationship in project.relationships:
        if (
            relationship.type != RelationshipType.IMPLEMENTS
            or relationship.from_class_id != cls.id
        ):
            continue
        interface = project.find_class(relationship.to_class_id)
        if interface is not None:
            names.append(java_class_name(interface))
    return f" implements {', '.join(names)}" if names else ""


def class_declaration(cls: ClassDef, project: Project) -> str:
    """Opening line of a class block."""
    name = java_class_name(cls)
    if cls.is_interface:
        return f"public interface {name} {{"

    clauses = _extends_clause(cls, project) + _implements_clause(cls, project)
    if cls.is_abstract:
        return f"public abstract class {name}{clauses} {{"
    return f"public class {name}{clauses} {{"


def format_params(method: Method) -> str:
    return ", ".join(
        f"{map_type(Language.JAVA, p.type)} "
        f"{sanitize_identifier(p.name, PARAM_FALLBACK)}"
        for p in method.params
    )


def method_lines(cls: ClassDef, method: Method, indent: str) -> List[str]:
    """
    Lines for one method.

    Interface methods are bare signatures; abstract methods carry the
    abstract modifier and no body; everything else gets an empty body.
    A constructor is named after the class and has no return type.
    """
    params = format_params(method)
    name = sanitize_identifier(method.name, MEMBER_FALLBACK)
    visibility = visibility_keyword(method.visibility)
    class_name = sanitize_identifier(cls.name, CLASS_FALLBACK)

    if cls.is_interface:
        if method.is_constructor:
            return [f"{indent}void {class_name}({params});"]
        ret = map_return_type(Language.JAVA, method.return_type)
        return [f"{indent}{ret} {name}({params});"]

    if method.is_constructor:
        signature = f"{visibility} {class_name}({params})"
    else:
        ret = map_return_type(Language.JAVA, method.return_type)
        if method.kind == MethodKind.ABSTRACT:
            return [f"{indent}{visibility} abstract {ret} {name}({params});"]
        signature = f"{visibility} {ret} {name}({params})"

    return [f"{indent}{signature} {{", indent * 2, f"{indent}}}"]


def generate_java(project: Project, indent: str = DEFAULT_INDENT) -> str:
    """
    Generate Java source for every class of the project.

    Args:
        project: Design model
        indent: One indentation level

    Returns:
        Source text with a blank line before each class block
    """
    out: List[str] = []

    for cls in project.classes:
        out.append("")
        out.append(class_declaration(cls, project))
        out.append("")

        for fld in cls.fields:
            ftype = map_type(Language.JAVA, fld.type)
            name = sanitize_identifier(fld.name, MEMBER_FALLBACK)
            out.append(f"{indent}{visibility_keyword(fld.visibility)} {ftype} {name};")

        if cls.fields and cls.methods:
            out.append("")

        for method in cls.methods:
            out.extend(method_lines(cls, method, indent))
            out.append("")

        if out[-1] == "":
            out.pop()
        out.append("}")
        out.append("")

    if out and out[-1] == "":
        out.pop()
    return "\n".join(out)


class JavaGenerator(CodeGenerator):
    """Code generator for Java class skeletons."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    def generate(self, project: Project) -> Dict[str, str]:
        """Generate the Java source file."""
        logger.debug("Generating Java for %d classes", len(project.classes))
        code = generate_java(project, self.config.indent)
        return {self.output_name(f"Generated{self.file_extension}"): code}

    def validate_project(self, project: Project) -> List[str]:
        """Add Java-specific notes to the base warnings."""
        warnings = super().validate_project(project)

        for cls in project.classes:
            extends = [
                r
                for r in project.relationships
                if r.type == RelationshipType.EXTENDS
                and r.from_class_id == cls.id
                and project.resolve(r) is not None
            ]
            if len(extends) > 1:
                warnings.append(
                    f"{java_class_name(cls)} extends {len(extends)} classes; "
                    f"only the first is used"
                )
            if cls.is_interface and any(m.is_constructor for m in cls.methods):
                warnings.append(
                    f"Interface {java_class_name(cls)} declares a constructor; "
                    f"rendered as a void signature"
                )

        return warnings


def create_java_generator(config: Optional[Dict] = None) -> JavaGenerator:
    """Create a Java generator, optionally overriding the default settings."""
    return JavaGenerator(load_config("java", custom_config=config))
