"""UML Explorer: derive diagrams and source skeletons from one design model."""

from .codegen import (
    Project,
    generate_all,
    generate_from_project,
    project_from_dict,
    quick_generate,
)
from .export import write_artifacts
from .logging_config import get_logger, setup_logging
from .utils import load_project

__version__ = "0.1.0"

__all__ = [
    "Project",
    "generate_all",
    "generate_from_project",
    "get_logger",
    "load_project",
    "project_from_dict",
    "quick_generate",
    "setup_logging",
    "write_artifacts",
]
