"""
C code generator module.

Generates a header/implementation pair with structs and function stubs.
"""

from .generator import (
    CGenerator,
    create_c_generator,
    generate_c_header,
    generate_c_source,
)

__all__ = [
    "CGenerator",
    "create_c_generator",
    "generate_c_header",
    "generate_c_source",
]
