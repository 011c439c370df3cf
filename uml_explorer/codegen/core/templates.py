"""
Template engine wrapper for code generation.

Thin layer over Jinja2 used by the generators that render text from
template files.
"""

from typing import Dict, Any, Optional
from pathlib import Path

from jinja2 import (
    DictLoader,
    Environment,
    FileSystemLoader,
    TemplateNotFound,
    TemplateSyntaxError,
    UndefinedError,
)


class TemplateError(Exception):
    """Exception raised for template-related errors."""

    pass


class TemplateEngine:
    """Jinja2 environment set up for source text rather than markup."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize template engine.

        Args:
            template_dir: Directory containing template files; without one,
                templates are added in memory with ``add_template``
        """
        self.template_dir = template_dir
        if template_dir and template_dir.exists():
            loader = FileSystemLoader(str(template_dir))
        else:
            loader = DictLoader({})

        # Block tags sit on their own lines; trim them with their newline.
        self._env = Environment(
            loader=loader,
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters["c_comment"] = c_comment

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with the given context.

        Raises:
            TemplateError: If the template is missing or fails to render
        """
        try:
            template = self._env.get_template(template_name)
            return template.render(**context)
        except (TemplateNotFound, TemplateSyntaxError, UndefinedError) as e:
            raise TemplateError(f"Failed to render template {template_name}: {e}") from e

    def render_lines(self, template_name: str, context: Dict[str, Any]) -> list[str]:
        """Render a template and split the result into lines."""
        return self.render_template(template_name, context).splitlines()

    def add_template(self, name: str, content: str):
        """Add an in-memory template, shadowing files of the same name."""
        if not isinstance(self._env.loader, DictLoader):
            self._env.loader = DictLoader({})
        self._env.loader.mapping[name] = content

    def template_exists(self, template_name: str) -> bool:
        """Check if a template can be loaded."""
        try:
            self._env.get_template(template_name)
            return True
        except TemplateNotFound:
            return False


def c_comment(value: Any) -> str:
    """Wrap text in a C block comment."""
    return f"/* {value} */"


def create_template_engine(template_dir: Optional[Path] = None) -> TemplateEngine:
    """Create a template engine, file based when the directory exists."""
    return TemplateEngine(template_dir)
