"""
Type mapping for the source skeleton generators.

Translates the free-text type tokens of the model into source types
for each target language, and provides the core type catalogs offered
by the type chooser.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from .model import CUSTOM_TYPE, Language, Project


VOID_TYPE = "void"
DEFAULT_VALUE_TYPE = "String"

C_BOOL_TYPE = "bool"
C_POINTER_MARKER = "*"

# Lookup tables per target. Tokens not listed pass through verbatim.
TYPE_TABLES: Dict[Language, Dict[str, str]] = {
    Language.JAVA: {},
    Language.C: {
        "String": "char*",
        "boolean": C_BOOL_TYPE,
        "Boolean": C_BOOL_TYPE,
        "bool": C_BOOL_TYPE,
    },
}


@dataclass(frozen=True)
class CoreType:
    """An entry of the type chooser."""

    value: str
    label: Optional[str] = None

    @property
    def display(self) -> str:
        return self.label or self.value


JAVA_VALUE_TYPES = [
    CoreType("String"),
    CoreType("int"),
    CoreType("long"),
    CoreType("double"),
    CoreType("float"),
    CoreType("boolean"),
    CoreType("char"),
]

C_VALUE_TYPES = [
    CoreType("char*", "char* (string)"),
    CoreType("int"),
    CoreType("long"),
    CoreType("double"),
    CoreType("float"),
    CoreType("bool"),
    CoreType("size_t"),
]

_VALUE_TYPES: Dict[Language, List[CoreType]] = {
    Language.JAVA: JAVA_VALUE_TYPES,
    Language.C: C_VALUE_TYPES,
}


def _lookup(language: Language, token: str) -> str:
    return TYPE_TABLES[language].get(token, token)


def map_type(language: Language, raw: str) -> str:
    """
    Map a field or parameter type to the target language.

    Args:
        language: Target language
        raw: Type text as typed by the user (may be empty)

    Returns:
        Source type token
    """
    token = (raw or "").strip() or DEFAULT_VALUE_TYPE
    return _lookup(language, token)


def map_return_type(language: Language, raw: str) -> str:
    """Map a return type; empty text maps to the void marker."""
    token = (raw or "").strip() or VOID_TYPE
    return _lookup(language, token)


def needs_boolean_include(project: Project) -> bool:
    """Whether any field, return or parameter type maps to the C bool type."""
    for cls in project.classes:
        for fld in cls.fields:
            if map_type(Language.C, fld.type) == C_BOOL_TYPE:
                return True
        for method in cls.methods:
            if map_return_type(Language.C, method.return_type) == C_BOOL_TYPE:
                return True
            for param in method.params:
                if map_type(Language.C, param.type) == C_BOOL_TYPE:
                    return True
    return False


def default_return_value(mapped_type: str) -> Optional[str]:
    """
    Zero value returned by a C stub.

    Returns:
        Literal to return, or None for void functions
    """
    if mapped_type == VOID_TYPE:
        return None
    if mapped_type == C_BOOL_TYPE:
        return "false"
    if mapped_type.endswith(C_POINTER_MARKER):
        return "NULL"
    return "0"


def core_types(language: Language, include_void: bool = False) -> List[CoreType]:
    """Core types offered by the type chooser for a language."""
    options = list(_VALUE_TYPES[language])
    if include_void:
        options.insert(0, CoreType(VOID_TYPE))
    return options


def type_choice(language: Language, value: str, include_void: bool = False) -> str:
    """
    Chooser entry selected for a type value.

    Returns:
        The core type value, an empty string for an empty value, or
        CUSTOM_TYPE when the value is free text
    """
    normalized = (value or "").strip()
    if not normalized:
        return ""
    if any(option.value == normalized for option in core_types(language, include_void)):
        return normalized
    return CUSTOM_TYPE
