"""
Plain-text UML diagram generator.

Draws each class as a box made of '|' and '-' only, so the diagram
needs no renderer and survives any monospace viewer.
"""

from typing import Dict, List, Optional

from ...export import ASCII_FILENAME
from ...logging_config import get_logger
from ..core.generator import CodeGenerator
from ..core.model import (
    ClassDef,
    MethodKind,
    Project,
    Relationship,
    RelationshipType,
    make_class,
)
from ..core.naming import (
    CLASS_FALLBACK,
    MEMBER_FALLBACK,
    PARAM_FALLBACK,
    display_name,
    fallback_text,
    to_math_italic,
    visibility_symbol,
)
from ..core.types import DEFAULT_VALUE_TYPE, VOID_TYPE

logger = get_logger(__name__)

MIN_WIDTH = 12
NO_FIELDS = "(no variables)"
NO_METHODS = "(no methods)"
INTERFACE_PREFIX = "«interface» "
PLACEHOLDER_CLASS_NAME = "StartHere"
RELATIONSHIPS_HEADING = "Relationships:"


def class_title(cls: ClassDef) -> str:
    """Title line: italic for abstract classes, prefixed for interfaces."""
    title = display_name(cls)
    if cls.is_interface:
        return f"{INTERFACE_PREFIX}{title}"
    if cls.is_abstract:
        return to_math_italic(title)
    return title


def field_lines(cls: ClassDef) -> List[str]:
    return [
        f"{visibility_symbol(f.visibility)}"
        f"{fallback_text(f.name, MEMBER_FALLBACK)}: "
        f"{fallback_text(f.type, DEFAULT_VALUE_TYPE)}"
        for f in cls.fields
    ]


def method_lines(cls: ClassDef) -> List[str]:
    lines = []
    for method in cls.methods:
        symbol = visibility_symbol(method.visibility)
        params = ", ".join(
            f"{fallback_text(p.name, PARAM_FALLBACK)}: "
            f"{fallback_text(p.type, DEFAULT_VALUE_TYPE)}"
            for p in method.params
        )
        if method.is_constructor:
            name = fallback_text(cls.name, CLASS_FALLBACK)
            if cls.is_abstract:
                name = to_math_italic(name)
            lines.append(f"{symbol}{name}({params})")
            continue

        name = fallback_text(method.name, MEMBER_FALLBACK)
        if method.kind == MethodKind.ABSTRACT:
            name = to_math_italic(name)
        ret = fallback_text(method.return_type, VOID_TYPE)
        lines.append(f"{symbol}{name}({params}): {ret}")
    return lines


def pad_right(text: str, width: int) -> str:
    return text + " " * max(0, width - len(text))


def center(text: str, width: int) -> str:
    missing = max(0, width - len(text))
    left = missing // 2
    return " " * left + text + " " * (missing - left)


def class_box(cls: ClassDef) -> str:
    """
    Draw one class box.

    The interior width is the longest content line, at least MIN_WIDTH.
    Empty compartments get a placeholder line.
    """
    title = class_title(cls)
    fields = field_lines(cls)
    methods = method_lines(cls)

    width = max([MIN_WIDTH] + [len(line) for line in [title, *fields, *methods]])
    border = "|" + "-" * (width + 2) + "|"
    separator = "-" * (width + 2)

    def row(text: str) -> str:
        return f"| {text} |"

    out = [border, row(center(title, width)), separator]
    out.extend(row(pad_right(line, width)) for line in fields or [NO_FIELDS])
    out.append(separator)
    out.extend(row(pad_right(line, width)) for line in methods or [NO_METHODS])
    out.append(border)
    return "\n".join(out)


def relationship_line(project: Project, relationship: Relationship) -> Optional[str]:
    """Relationship in plain-name arrow notation, None if it does not resolve."""
    resolved = project.resolve(relationship)
    if resolved is None:
        return None
    source, target = resolved
    from_name = display_name(source)
    to_name = display_name(target)

    if relationship.type == RelationshipType.EXTENDS:
        return f"{from_name} --|> {to_name}"
    if relationship.type == RelationshipType.IMPLEMENTS:
        return f"{from_name} ..|> {to_name}"

    arrow = "*--" if relationship.type == RelationshipType.COMPOSITION else "o--"
    multiplicity = relationship.to_multiplicity.value
    if multiplicity:
        arrow = f"{arrow} ({multiplicity})"
    return f"{from_name} {arrow} {to_name}"


def generate_ascii_uml(project: Project) -> str:
    """
    Generate the plain-text class diagram.

    Args:
        project: Design model

    Returns:
        Boxes separated by blank lines, followed by a relationship list
        when any relationship resolves
    """
    if not project.classes:
        return class_box(make_class(id="placeholder", name=PLACEHOLDER_CLASS_NAME))

    parts = [class_box(cls) for cls in project.classes]

    relationship_lines = []
    for relationship in project.relationships:
        line = relationship_line(project, relationship)
        if line is None:
            logger.debug("Skipping unresolved relationship %s", relationship.id)
            continue
        relationship_lines.append(f"- {line}")

    if relationship_lines:
        parts.append("\n".join([RELATIONSHIPS_HEADING, *relationship_lines]))

    return "\n\n".join(parts)


class AsciiUmlGenerator(CodeGenerator):
    """Generator for the plain-text boxed diagram."""

    @property
    def language_name(self) -> str:
        return "ascii"

    @property
    def file_extension(self) -> str:
        return ".txt"

    def generate(self, project: Project) -> Dict[str, str]:
        return {self.output_name(ASCII_FILENAME): generate_ascii_uml(project)}
