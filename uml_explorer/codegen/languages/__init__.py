"""
Language-specific source skeleton generators.

One package per supported target language.
"""

from .java import JavaGenerator, generate_java
from .c import CGenerator, generate_c_header, generate_c_source

__all__ = [
    "JavaGenerator",
    "generate_java",
    "CGenerator",
    "generate_c_header",
    "generate_c_source",
]
