"""
UML Explorer Code Generation Module

Derives diagram texts and source skeletons from a single design model.
"""

from typing import Any, Dict, Optional, Union
from pathlib import Path

from .registry import (
    GeneratorRegistry,
    RegistryError,
    generators_for_project,
    get_generator,
    get_language_info,
    get_registry,
    list_all_language_info,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .core.model import Project, project_from_dict
from .core.config import GeneratorConfig, ConfigManager, load_config
from .diagrams import generate_ascii_uml, generate_mermaid
from .languages import generate_c_header, generate_c_source, generate_java

# Version info
__version__ = "0.1.0"


def generate_from_project(
    project: Project,
    language: str,
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> GenerationResult:
    """
    Run one generator on a project.

    Args:
        project: Design model
        language: Generator name or alias ('mermaid', 'ascii', 'java', 'c')
        config: Generator configuration as object, dict or file path

    Returns:
        GenerationResult with the generated files
    """
    generator = get_generator(language, config)
    return generate_code(generator, project)


def generate_all(
    project: Project,
    config_file: Optional[Union[str, Path]] = None,
) -> Dict[str, GenerationResult]:
    """
    Run every generator that applies to the project.

    Both diagrams are always produced; the source skeleton follows
    ``project.language``.

    Args:
        project: Design model
        config_file: Optional JSON configuration applied to each generator

    Returns:
        Dict mapping generator name to its result
    """
    results = {}
    for name in generators_for_project(project.language):
        config = load_config(name, config_file=config_file)
        results[name] = generate_from_project(project, name, config)
    return results


def quick_generate(data: Dict[str, Any], language: str = "mermaid", **options) -> str:
    """
    Quick generation from a project description.

    Args:
        data: Project description (parsed JSON)
        language: Generator name
        **options: Generator options

    Returns:
        Generated text, outputs joined by blank lines
    """
    result = generate_from_project(project_from_dict(data), language, options or None)

    if result.success:
        return result.code
    raise GeneratorError(f"Code generation failed: {result.error_message}")


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "GeneratorConfig",
    "ConfigManager",
    "Project",
    "project_from_dict",
    "generate_code",
    "generate_from_project",
    "generate_all",
    "quick_generate",
    "generate_mermaid",
    "generate_ascii_uml",
    "generate_java",
    "generate_c_header",
    "generate_c_source",
    "get_generator",
    "get_language_info",
    "get_registry",
    "list_all_language_info",
    "list_supported_languages",
    "load_config",
]
