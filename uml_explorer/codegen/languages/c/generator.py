"""
C code generator implementation.

Generates a header with struct declarations and function prototypes,
plus an implementation file with stub bodies. Methods become free
functions taking an explicit ``self`` pointer.
"""

from pathlib import Path
from typing import Dict, List, Optional

from ....export import C_HEADER_FILENAME
from ....logging_config import get_logger
from ...core.config import load_config
from ...core.generator import CodeGenerator
from ...core.model import ClassDef, Language, Method, Project
from ...core.naming import (
    CLASS_FALLBACK,
    MEMBER_FALLBACK,
    PARAM_FALLBACK,
    sanitize_identifier,
)
from ...core.templates import TemplateEngine, create_template_engine
from ...core.types import (
    VOID_TYPE,
    default_return_value,
    map_return_type,
    map_type,
    needs_boolean_include,
)

logger = get_logger(__name__)

DEFAULT_INDENT = "\t"
DEFAULT_HEADER_NAME = C_HEADER_FILENAME
CONSTRUCTOR_SUFFIX = "init"

TEMPLATE_DIR = Path(__file__).parent / "templates"
STRUCT_TEMPLATE = "struct.h.j2"
FUNCTION_TEMPLATE = "function.c.j2"


def struct_name(cls: ClassDef) -> str:
    return sanitize_identifier(cls.name, CLASS_FALLBACK)


def function_name(cls: ClassDef, method: Method) -> str:
    """``Class_member``, or ``Class_init`` for a constructor."""
    if method.is_constructor:
        return f"{struct_name(cls)}_{CONSTRUCTOR_SUFFIX}"
    return f"{struct_name(cls)}_{sanitize_identifier(method.name, MEMBER_FALLBACK)}"


def function_return_type(method: Method) -> str:
    """Mapped return type; constructors always return void."""
    if method.is_constructor:
        return VOID_TYPE
    return map_return_type(Language.C, method.return_type)


def function_signature(cls: ClassDef, method: Method) -> str:
    """Signature shared by the prototype and the stub."""
    params = [f"{struct_name(cls)}* self"]
    params.extend(
        f"{map_type(Language.C, p.type)} {sanitize_identifier(p.name, PARAM_FALLBACK)}"
        for p in method.params
    )
    return (
        f"{function_return_type(method)} {function_name(cls, method)}"
        f"({', '.join(params)})"
    )


def _include_lines(project: Project) -> List[str]:
    lines = ["#include <stddef.h>"]
    if needs_boolean_include(project):
        lines.append("#include <stdbool.h>")
    return lines


def _trim_trailing_blank(lines: List[str]) -> List[str]:
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def struct_lines(
    cls: ClassDef, engine: TemplateEngine, indent: str, add_comments: bool
) -> List[str]:
    """Struct declaration, or an opaque typedef for interfaces."""
    fields = [
        {
            "type": map_type(Language.C, f.type),
            "name": sanitize_identifier(f.name, MEMBER_FALLBACK),
            "visibility": f.visibility.value,
        }
        for f in cls.fields
    ]
    return engine.render_lines(
        STRUCT_TEMPLATE,
        {
            "name": struct_name(cls),
            "is_interface": cls.is_interface,
            "fields": fields,
            "indent": indent,
            "add_comments": add_comments,
        },
    )


def prototype_lines(cls: ClassDef, add_comments: bool) -> List[str]:
    lines = []
    for method in cls.methods:
        line = f"{function_signature(cls, method)};"
        if add_comments:
            line += f" /* {method.visibility.value} */"
        lines.append(line)
    return lines


def stub_lines(cls: ClassDef, engine: TemplateEngine, indent: str) -> List[str]:
    """Function bodies for one class, separated by blank lines."""
    out = []
    for method in cls.methods:
        out.extend(engine.render_lines(
            FUNCTION_TEMPLATE,
            {
                "signature": function_signature(cls, method),
                "indent": indent,
                "return_value": default_return_value(function_return_type(method)),
            },
        ))
        out.append("")
    return _trim_trailing_blank(out)


def generate_c_header(
    project: Project,
    indent: str = DEFAULT_INDENT,
    add_comments: bool = True,
    engine: Optional[TemplateEngine] = None,
) -> str:
    """
    Generate the C header.

    Args:
        project: Design model
        indent: One indentation level
        add_comments: Annotate members and prototypes with their visibility
        engine: Template engine holding the C templates

    Returns:
        Header text
    """
    engine = engine or create_template_engine(TEMPLATE_DIR)
    out = ["#pragma once", ""]
    out.extend(_include_lines(project))
    out.append("")

    for cls in project.classes:
        out.extend(struct_lines(cls, engine, indent, add_comments))
        out.append("")
        out.extend(prototype_lines(cls, add_comments))
        out.append("")

    return "\n".join(_trim_trailing_blank(out))


def generate_c_source(
    project: Project,
    header_name: str = DEFAULT_HEADER_NAME,
    indent: str = DEFAULT_INDENT,
    engine: Optional[TemplateEngine] = None,
) -> str:
    """
    Generate the C implementation file.

    Classes without methods are left out; they only live in the header.

    Args:
        project: Design model
        header_name: File name used in the include directive
        indent: One indentation level
        engine: Template engine holding the C templates

    Returns:
        Implementation text
    """
    engine = engine or create_template_engine(TEMPLATE_DIR)
    out = [f'#include "{header_name}"']
    out.extend(_include_lines(project))
    out.append("")

    for cls in project.classes:
        if not cls.methods:
            continue
        out.append(f"// {cls.kind.value} {struct_name(cls)}")
        out.extend(stub_lines(cls, engine, indent))
        out.append("")

    return "\n".join(_trim_trailing_blank(out))


class CGenerator(CodeGenerator):
    """Code generator for C header and implementation skeletons."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "c"

    @property
    def file_extension(self) -> str:
        """Return C header file extension."""
        return ".h"

    def get_template_directory(self) -> Optional[Path]:
        """Return the directory holding the C templates."""
        return TEMPLATE_DIR if TEMPLATE_DIR.exists() else None

    def generate(self, project: Project) -> Dict[str, str]:
        """Generate the header and implementation files."""
        logger.debug("Generating C for %d classes", len(project.classes))
        header_name = self.config.header_name
        header = generate_c_header(
            project,
            indent=self.config.indent,
            add_comments=self.config.add_comments,
            engine=self.template_engine,
        )
        source = generate_c_source(
            project,
            header_name=header_name,
            indent=self.config.indent,
            engine=self.template_engine,
        )
        return {header_name: header, self.config.source_name: source}

    def validate_project(self, project: Project) -> List[str]:
        """Add C-specific notes to the base warnings."""
        warnings = super().validate_project(project)

        for template in (STRUCT_TEMPLATE, FUNCTION_TEMPLATE):
            if not self.template_exists(template):
                warnings.append(f"Required template {template} not found")

        for cls in project.classes:
            if cls.generic_param and cls.generic_param.strip():
                warnings.append(
                    f"Generic parameter of {struct_name(cls)} has no C equivalent "
                    f"and is dropped"
                )
            if cls.is_interface and cls.fields:
                warnings.append(
                    f"Interface {struct_name(cls)} is opaque; its fields are not emitted"
                )

        return warnings


def create_c_generator(config: Optional[Dict] = None) -> CGenerator:
    """Create a C generator, optionally overriding the default settings."""
    return CGenerator(load_config("c", custom_config=config))
