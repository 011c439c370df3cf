"""
Diagram generators.

Mermaid diagram-description text and the self-rendered plain-text diagram.
"""

from .mermaid import MermaidGenerator, generate_mermaid
from .ascii import AsciiUmlGenerator, generate_ascii_uml

__all__ = [
    "MermaidGenerator",
    "generate_mermaid",
    "AsciiUmlGenerator",
    "generate_ascii_uml",
]
