"""
Configuration management for code generation.

A configuration is built in layers: the generator's defaults, then a JSON
file, then explicit overrides. In the file, top-level keys apply to every
generator and a section named after a generator applies to it alone::

    {"use_tabs": false, "indent_size": 2, "c": {"add_comments": false}}
"""

import json
from pathlib import Path
from typing import Dict, Any, List, Optional, Union
from dataclasses import dataclass, field, fields

from ...export import (
    ASCII_FILENAME,
    C_HEADER_FILENAME,
    C_SOURCE_FILENAME,
    JAVA_FILENAME,
    MERMAID_FILENAME,
)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


@dataclass
class GeneratorConfig:
    """Settings shared by all generators."""

    # Output names
    output_file: Optional[str] = None
    header_name: str = C_HEADER_FILENAME
    source_name: str = C_SOURCE_FILENAME

    # Code style
    indent_size: int = 4
    use_tabs: bool = True
    line_ending: str = "\n"

    # Visibility comments in C output
    add_comments: bool = True

    # Keys no generator knows about
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def indent(self) -> str:
        """One indentation level."""
        return "\t" if self.use_tabs else " " * self.indent_size


GENERATOR_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "mermaid": {"output_file": MERMAID_FILENAME},
    "ascii": {"output_file": ASCII_FILENAME},
    "java": {"output_file": JAVA_FILENAME},
    "c": {"header_name": C_HEADER_FILENAME, "source_name": C_SOURCE_FILENAME},
}

# Expected value types of the known settings
_SETTING_TYPES = {
    "output_file": (str, type(None)),
    "header_name": str,
    "source_name": str,
    "indent_size": int,
    "use_tabs": bool,
    "line_ending": str,
    "add_comments": bool,
    "custom": dict,
}


class ConfigManager:
    """Builds generator configurations from defaults, files and overrides."""

    def __init__(self, defaults: Optional[Dict[str, Dict[str, Any]]] = None):
        self._defaults = {
            name: dict(values)
            for name, values in (defaults or GENERATOR_DEFAULTS).items()
        }

    def get_config(self, language: Optional[str] = None,
                   custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Get complete configuration for a generator.

        Args:
            language: Generator name; None gives the bare defaults
            custom_config: Overrides applied last
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration

        Raises:
            ConfigError: If the file is unusable or a setting has the wrong type
        """
        merged = dict(self._defaults.get(language or "", {}))

        if config_file:
            merged.update(self._file_settings(self._load_config_file(config_file), language))

        if custom_config:
            merged.update(custom_config)

        return self._dict_to_config(merged)

    def _file_settings(self, data: Dict[str, Any], language: Optional[str]) -> Dict[str, Any]:
        """Flatten a config file for one generator."""
        shared = {k: v for k, v in data.items() if k not in self._defaults}
        section = data.get(language) if language else None
        if section is None:
            return shared
        if not isinstance(section, dict):
            raise ConfigError(f"Section '{language}' must be a JSON object")
        shared.update(section)
        return shared

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            config = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert merged settings to a GeneratorConfig, unknown keys to ``custom``."""
        known = {f.name for f in fields(GeneratorConfig)}
        config_args = {k: v for k, v in config_dict.items() if k in known}
        extra = {k: v for k, v in config_dict.items() if k not in known}

        for key, value in config_args.items():
            expected = _SETTING_TYPES[key]
            # bool is an int subclass; reject it where a number is expected
            if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
                raise ConfigError(f"Invalid value for {key}: {value!r}")

        if extra:
            config_args["custom"] = {**config_args.get("custom", {}), **extra}

        return GeneratorConfig(**config_args)

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Check settings that are well typed but unlikely to be intended.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.indent_size < 1:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        if config.line_ending not in {"\n", "\r\n"}:
            warnings.append(f"Invalid line_ending: {config.line_ending!r}")

        if not config.header_name.endswith(".h"):
            warnings.append(f"Header name should end with .h: {config.header_name}")

        if not config.source_name.endswith(".c"):
            warnings.append(f"Source name should end with .c: {config.source_name}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(language: Optional[str] = None,
                custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
    """Build a configuration with the global manager."""
    return get_config_manager().get_config(language, custom_config, config_file)
