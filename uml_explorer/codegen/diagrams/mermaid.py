"""
Mermaid class diagram generator.

Emits the diagram-description text handed to the Mermaid renderer.
"""

from typing import Dict, List, Optional

from ...export import MERMAID_FILENAME
from ...logging_config import get_logger
from ..core.generator import CodeGenerator
from ..core.model import (
    ClassDef,
    ClassKind,
    Method,
    Project,
    Relationship,
    RelationshipType,
)
from ..core.naming import (
    MEMBER_FALLBACK,
    PARAM_FALLBACK,
    display_name,
    fallback_text,
    sanitize_diagram_id,
    visibility_symbol,
)
from ..core.types import DEFAULT_VALUE_TYPE, VOID_TYPE

logger = get_logger(__name__)

HEADER = "classDiagram"
MEMBER_INDENT = "  "

# The renderer rejects an empty classDiagram.
PLACEHOLDER_DIAGRAM = [
    HEADER,
    "class StartHere {",
    "  +AddClasses(): void",
    "}",
]

STEREOTYPES = {
    ClassKind.INTERFACE: "<<interface>>",
    ClassKind.ABSTRACT: "<<abstract>>",
}


def class_identifier(cls: ClassDef) -> str:
    """Class identifier with the generic parameter in tilde notation."""
    raw = display_name(cls)
    for ch in "<>,":
        raw = raw.replace(ch, "~")
    return sanitize_diagram_id(raw)


def format_params(method: Method) -> str:
    """Parameters as ``name: type`` pairs."""
    return ", ".join(
        f"{fallback_text(p.name, PARAM_FALLBACK)}: "
        f"{fallback_text(p.type, DEFAULT_VALUE_TYPE)}"
        for p in method.params
    )


def member_lines(cls: ClassDef) -> List[str]:
    """Field lines followed by method lines."""
    lines = []
    for fld in cls.fields:
        name = fallback_text(fld.name, MEMBER_FALLBACK)
        ftype = fallback_text(fld.type, DEFAULT_VALUE_TYPE)
        lines.append(f"{visibility_symbol(fld.visibility)}{name}: {ftype}")

    for method in cls.methods:
        symbol = visibility_symbol(method.visibility)
        params = format_params(method)
        if method.is_constructor:
            lines.append(f"{symbol}{class_identifier(cls)}({params})")
        else:
            name = fallback_text(method.name, MEMBER_FALLBACK)
            ret = fallback_text(method.return_type, VOID_TYPE)
            lines.append(f"{symbol}{name}({params}): {ret}")
    return lines


def relationship_line(project: Project, relationship: Relationship) -> Optional[str]:
    """Arrow line for a relationship, or None when an end does not resolve."""
    resolved = project.resolve(relationship)
    if resolved is None:
        return None
    source, target = resolved
    from_name = class_identifier(source)
    to_name = class_identifier(target)

    if relationship.type == RelationshipType.EXTENDS:
        return f"{to_name} <|-- {from_name}"
    if relationship.type == RelationshipType.IMPLEMENTS:
        return f"{to_name} <|.. {from_name}"

    arrow = "*--" if relationship.type == RelationshipType.COMPOSITION else "o--"
    multiplicity = relationship.to_multiplicity.value
    if multiplicity:
        return f'{from_name} {arrow} "{multiplicity}" {to_name}'
    return f"{from_name} {arrow} {to_name}"


def generate_mermaid(project: Project) -> str:
    """
    Generate a Mermaid class diagram.

    Args:
        project: Design model

    Returns:
        Diagram text, a placeholder diagram when there are no classes
    """
    if not project.classes:
        return "\n".join(PLACEHOLDER_DIAGRAM)

    lines = [HEADER]
    for cls in project.classes:
        lines.append(f"class {class_identifier(cls)} {{")
        stereotype = STEREOTYPES.get(cls.kind)
        if stereotype:
            lines.append(f"{MEMBER_INDENT}{stereotype}")
        lines.extend(f"{MEMBER_INDENT}{line}" for line in member_lines(cls))
        lines.append("}")

    for relationship in project.relationships:
        line = relationship_line(project, relationship)
        if line is None:
            logger.debug("Skipping unresolved relationship %s", relationship.id)
            continue
        lines.append(line)

    return "\n".join(lines)


class MermaidGenerator(CodeGenerator):
    """Generator for Mermaid class diagrams."""

    @property
    def language_name(self) -> str:
        return "mermaid"

    @property
    def file_extension(self) -> str:
        return ".mmd"

    def generate(self, project: Project) -> Dict[str, str]:
        return {self.output_name(MERMAID_FILENAME): generate_mermaid(project)}
