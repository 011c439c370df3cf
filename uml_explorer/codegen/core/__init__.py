"""
Core code generation components.

Provides the design model and the utilities used by all generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .model import (
    CONSTRUCTOR_RETURN_TYPE,
    CUSTOM_TYPE,
    ClassDef,
    ClassKind,
    Field,
    Language,
    Method,
    MethodKind,
    ModelError,
    Multiplicity,
    Param,
    Project,
    Relationship,
    RelationshipType,
    Visibility,
    make_class,
    make_field,
    make_method,
    make_param,
    make_project,
    make_relationship,
    project_from_dict,
)
from .naming import sanitize_identifier, sanitize_diagram_id, visibility_symbol
from .types import map_type, map_return_type, needs_boolean_include
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Design model
    "CONSTRUCTOR_RETURN_TYPE",
    "CUSTOM_TYPE",
    "ClassDef",
    "ClassKind",
    "Field",
    "Language",
    "Method",
    "MethodKind",
    "ModelError",
    "Multiplicity",
    "Param",
    "Project",
    "Relationship",
    "RelationshipType",
    "Visibility",
    "make_class",
    "make_field",
    "make_method",
    "make_param",
    "make_project",
    "make_relationship",
    "project_from_dict",
    # Naming and types
    "sanitize_identifier",
    "sanitize_diagram_id",
    "visibility_symbol",
    "map_type",
    "map_return_type",
    "needs_boolean_include",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
