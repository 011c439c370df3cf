"""
Naming utilities for safe code generation.

Handles identifier sanitization, visibility notation and the display
names shared by the diagram and source generators.
"""

import re
from typing import Dict

from .model import ClassDef, Visibility


# Placeholders for empty free-text names
CLASS_FALLBACK = "Unnamed"
MEMBER_FALLBACK = "unnamed"
PARAM_FALLBACK = "arg"

_IDENTIFIER_INVALID = re.compile(r"[^A-Za-z0-9_]")
# The diagram grammar writes generics as Name~T~, so the tilde survives.
_DIAGRAM_ID_INVALID = re.compile(r"[^A-Za-z0-9_~]")

VISIBILITY_SYMBOLS: Dict[Visibility, str] = {
    Visibility.PRIVATE: "-",
    Visibility.PUBLIC: "+",
    Visibility.PROTECTED: "#",
}

# Offsets into the Mathematical Alphanumeric Symbols block
_ITALIC_UPPER_START = 0x1D434
_ITALIC_LOWER_START = 0x1D44E


def fallback_text(raw: str, fallback: str) -> str:
    """Trim text, substituting the fallback when nothing is left."""
    return (raw or "").strip() or fallback


def sanitize_identifier(raw: str, fallback: str = MEMBER_FALLBACK) -> str:
    """
    Sanitize free text into a source identifier.

    Args:
        raw: Name as typed by the user
        fallback: Word used when the name is empty

    Returns:
        Text containing only ASCII letters, digits and underscores
    """
    return _IDENTIFIER_INVALID.sub("_", fallback_text(raw, fallback))


def sanitize_diagram_id(raw: str) -> str:
    """Sanitize a class identifier for the diagram grammar."""
    return _DIAGRAM_ID_INVALID.sub("_", fallback_text(raw, CLASS_FALLBACK))


def visibility_symbol(visibility: Visibility) -> str:
    """Map visibility to its diagram symbol."""
    return VISIBILITY_SYMBOLS[visibility]


def visibility_keyword(visibility: Visibility) -> str:
    """Map visibility to the source keyword."""
    return visibility.value


def to_math_italic(text: str) -> str:
    """
    Render Latin letters in mathematical italic.

    Every A-Z and a-z is replaced by its italic code point; other
    characters pass through unchanged. Iteration is per code point.
    """
    out = []
    for ch in text:
        code = ord(ch)
        if 0x41 <= code <= 0x5A:
            out.append(chr(_ITALIC_UPPER_START + code - 0x41))
        elif 0x61 <= code <= 0x7A:
            out.append(chr(_ITALIC_LOWER_START + code - 0x61))
        else:
            out.append(ch)
    return "".join(out)


def generic_param(cls: ClassDef) -> str:
    """Trimmed generic parameter, or an empty string."""
    return (cls.generic_param or "").strip()


def display_name(cls: ClassDef) -> str:
    """Class name with its generic parameter in angle brackets."""
    name = fallback_text(cls.name, CLASS_FALLBACK)
    param = generic_param(cls)
    return f"{name}<{param}>" if param else name
