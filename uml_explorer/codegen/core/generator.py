"""
Base generator interface for all generation targets.

Defines the contract that the diagram and source generators implement.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Any, Optional
from pathlib import Path

from ...logging_config import get_logger
from .config import GeneratorConfig, get_config_manager, load_config
from .model import Project
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or load_config(self.language_name)
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target (e.g., 'mermaid', 'java')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension of the main output (e.g., '.java')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Returns:
            Path to template directory or None for in-memory templates
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, project: Project) -> Dict[str, str]:
        """
        Generate every output of this target.

        Args:
            project: Design model snapshot

        Returns:
            Dictionary mapping output file name to text
        """
        pass

    def validate_project(self, project: Project) -> List[str]:
        """
        Report substitutions the generator will make.

        These are informational: generation never fails because of them.

        Args:
            project: Project to inspect

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for relationship in project.unresolved_relationships():
            warnings.append(
                f"Relationship {relationship.id} ({relationship.type.value}) "
                f"references a missing class and is skipped"
            )

        for cls in project.classes:
            label = cls.name.strip() or "Unnamed"
            if not cls.name.strip():
                warnings.append("Class without a name rendered as 'Unnamed'")
            for fld in cls.fields:
                if not fld.name.strip():
                    warnings.append(f"Field without a name in {label}")
            for method in cls.methods:
                if not method.name.strip() and not method.is_constructor:
                    warnings.append(f"Method without a name in {label}")

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply the configured line ending.

        Args:
            code: Generated text with '\\n' line breaks

        Returns:
            Formatted text
        """
        if self.config.line_ending == "\n":
            return code
        return code.replace("\n", self.config.line_ending)

    def output_name(self, default: str) -> str:
        """Output file name from configuration, or the given default."""
        return self.config.output_file or default

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        files: Dict[str, str],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            files: Output file name mapped to generated text
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.files = files
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @property
    def code(self) -> str:
        """All outputs joined, for single-output display."""
        return "\n\n".join(self.files.values())

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(files={})
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, project: Project) -> GenerationResult:
    """
    Generate output using the specified generator with error handling.

    Args:
        generator: Generator instance
        project: Project to generate from

    Returns:
        GenerationResult with files, warnings, and metadata
    """
    try:
        warnings = get_config_manager().validate_config(generator.config)
        warnings.extend(generator.validate_project(project))

        files = {
            name: generator.format_code(text)
            for name, text in generator.generate(project).items()
        }

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "class_count": len(project.classes),
            "relationship_count": len(project.relationships),
            "target_language": project.language.value,
            "files": list(files),
        }

        logger.debug(
            "Generated %s output: %d file(s), %d warning(s)",
            generator.language_name,
            len(files),
            len(warnings),
        )
        return GenerationResult(files, warnings, metadata)

    except Exception as e:
        logger.error("Generation with %s failed: %s", generator.language_name, e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
