"""
Generator registry.

Maps generator names and aliases to generator classes. Each entry also
records whether it draws a diagram or emits source for a target language,
which is how the set of outputs for a project is chosen.
"""

from dataclasses import dataclass, field
from typing import Dict, Type, Optional, Any, List, Union
from pathlib import Path

from ..logging_config import get_logger
from .core.generator import CodeGenerator
from .core.config import GeneratorConfig, load_config
from .core.model import Language

logger = get_logger(__name__)

ConfigSource = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


@dataclass
class GeneratorEntry:
    """One registered generator."""

    name: str
    generator_class: Type[CodeGenerator]
    aliases: List[str] = field(default_factory=list)
    # None for diagrams, which every project gets
    target: Optional[Language] = None

    @property
    def is_diagram(self) -> bool:
        return self.target is None


class GeneratorRegistry:
    """Name and alias lookup for generators."""

    def __init__(self):
        self._entries: Dict[str, GeneratorEntry] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        name: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        target: Optional[Language] = None,
        replace: bool = False,
    ):
        """
        Register a generator.

        Args:
            name: Primary name (e.g. 'mermaid', 'java')
            generator_class: Class implementing CodeGenerator
            aliases: Alternative names
            target: Target language served, None for a diagram generator
            replace: Overwrite an existing entry instead of keeping it

        Raises:
            RegistryError: If the class is not a generator or an alias is taken
        """
        if not (isinstance(generator_class, type) and issubclass(generator_class, CodeGenerator)):
            raise RegistryError(f"{generator_class!r} is not a CodeGenerator subclass")

        key = name.lower()
        if key in self._entries and not replace:
            logger.debug("Generator %s already registered", key)
            return

        alias_keys = [a.lower() for a in aliases or [] if a.lower() != key]
        if not replace:
            for alias in alias_keys:
                owner = self._aliases.get(alias)
                if alias in self._entries or (owner and owner != key):
                    raise RegistryError(f"Alias '{alias}' is already in use")

        self._entries[key] = GeneratorEntry(key, generator_class, alias_keys, target)
        for alias in alias_keys:
            self._aliases[alias] = key

    def unregister(self, name: str):
        """Remove a generator and its aliases."""
        key = name.lower()
        self._entries.pop(key, None)
        self._aliases = {a: t for a, t in self._aliases.items() if t != key}

    def resolve_name(self, name: str) -> str:
        """
        Primary name for a name or alias.

        Raises:
            RegistryError: If nothing is registered under the name
        """
        key = name.lower()
        if key in self._entries:
            return key
        if key in self._aliases:
            return self._aliases[key]
        raise RegistryError(
            f"No generator registered for: {name}. "
            f"Available: {', '.join(self.list_languages())}"
        )

    def entry(self, name: str) -> GeneratorEntry:
        return self._entries[self.resolve_name(name)]

    def create_generator(self, name: str, config: ConfigSource = None) -> CodeGenerator:
        """
        Instantiate a generator with its defaults merged with ``config``.

        Args:
            name: Generator name or alias
            config: GeneratorConfig used as is, or overrides as a dict or a
                JSON file path

        Raises:
            RegistryError: If the name is unknown or the config is unusable
        """
        entry = self.entry(name)

        if isinstance(config, GeneratorConfig):
            return entry.generator_class(config)

        if isinstance(config, (str, Path)):
            kwargs = {"config_file": config}
        elif isinstance(config, dict):
            kwargs = {"custom_config": config}
        elif config is None:
            kwargs = {}
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        try:
            final_config = load_config(entry.name, **kwargs)
        except Exception as e:
            raise RegistryError(f"Failed to configure {entry.name} generator: {e}") from e
        return entry.generator_class(final_config)

    def list_languages(self) -> List[str]:
        """Sorted primary names."""
        return sorted(self._entries)

    def get_aliases_for_language(self, name: str) -> List[str]:
        return sorted(a for a, t in self._aliases.items() if t == name.lower())

    def is_supported(self, name: str) -> bool:
        key = name.lower()
        return key in self._entries or key in self._aliases

    def names_for_project(self, language: Language) -> List[str]:
        """Diagram generators in registration order, then the source generator."""
        diagrams = [e.name for e in self._entries.values() if e.is_diagram]
        sources = [e.name for e in self._entries.values() if e.target == language]
        return diagrams + sources

    def get_language_info(self, name: str) -> Dict[str, Any]:
        """
        Describe a registered generator.

        Raises:
            RegistryError: If the name is not registered
        """
        entry = self.entry(name)
        generator = self.create_generator(entry.name)

        return {
            "name": entry.name,
            "class": entry.generator_class.__name__,
            "file_extension": generator.file_extension,
            "aliases": self.get_aliases_for_language(entry.name),
            "module": entry.generator_class.__module__,
            "kind": "diagram" if entry.is_diagram else "source",
        }


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    """Register the built-in generators."""
    from .diagrams import AsciiUmlGenerator, MermaidGenerator
    from .languages.c import CGenerator
    from .languages.java import JavaGenerator

    registry.register("mermaid", MermaidGenerator, aliases=["mmd"])
    registry.register("ascii", AsciiUmlGenerator, aliases=["text", "txt"])
    registry.register(Language.JAVA.value, JavaGenerator, target=Language.JAVA)
    registry.register(Language.C.value, CGenerator, aliases=["h"], target=Language.C)


# Public API functions using the global registry


def register_generator(
    name: str,
    generator_class: Type[CodeGenerator],
    aliases: Optional[List[str]] = None,
    target: Optional[Language] = None,
):
    """Register a generator in the global registry."""
    get_registry().register(name, generator_class, aliases, target)


def get_generator(name: str, config: ConfigSource = None) -> CodeGenerator:
    """Get generator instance from global registry."""
    return get_registry().create_generator(name, config)


def list_supported_languages() -> List[str]:
    """List all registered generators."""
    return get_registry().list_languages()


def is_language_supported(name: str) -> bool:
    """Check if a generator name or alias is registered."""
    return get_registry().is_supported(name)


def get_language_info(name: str) -> Dict[str, Any]:
    """Get information about a registered generator."""
    return get_registry().get_language_info(name)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all registered generators."""
    return {name: get_language_info(name) for name in list_supported_languages()}


def generators_for_project(language: Language) -> List[str]:
    """Generator names run for a project: both diagrams plus its source target."""
    return get_registry().names_for_project(language)
