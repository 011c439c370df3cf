"""
Java code generator module.

Generates Java class, abstract class and interface skeletons.
"""

from .generator import JavaGenerator, create_java_generator, generate_java

__all__ = [
    "JavaGenerator",
    "create_java_generator",
    "generate_java",
]
