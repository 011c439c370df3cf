"""
CLI integration for code generation functionality.

Provides the ``codegen`` subcommand: load a project description, run one
or all generators, and print or save the results.
"""

import argparse
from typing import Any, Dict, List

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from . import (
    GenerationResult,
    GeneratorConfig,
    generate_from_project,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
    load_config,
)
from .core.config import ConfigError
from .core.model import Project
from .registry import generators_for_project, get_registry, is_language_supported
from ..export import ExportError, write_artifacts
from ..logging_config import get_logger
from ..utils import ProjectLoaderError, load_project

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()

# Pygments lexer per generator; diagrams print as plain text
SYNTAX_LEXERS = {"mermaid": "text", "ascii": "text", "java": "java", "c": "c"}


def create_codegen_subparser(subparsers) -> argparse.ArgumentParser:
    """
    Create a dedicated codegen subcommand parser.

    For use with: uml-explorer codegen [options]

    Args:
        subparsers: Subparser group from main parser

    Returns:
        Configured subparser for codegen command
    """
    parser = subparsers.add_parser(
        "codegen",
        help="Generate diagrams and source skeletons from a design model",
        description="Generate Mermaid, ASCII, Java or C output from a project description",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  uml-explorer codegen --language mermaid project.json
  uml-explorer codegen -l java --output-dir build project.json
  uml-explorer codegen --all --output-dir build project.json
  uml-explorer codegen --list-languages
  uml-explorer codegen --language-info c
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Project description (JSON)")
    input_group.add_argument("--url", help="URL to fetch the project description from")

    # Target selection
    target_group = parser.add_mutually_exclusive_group(required=False)
    target_group.add_argument(
        "--language", "-l", help="Generator to run (mermaid, ascii, java, c)"
    )
    target_group.add_argument(
        "--all",
        action="store_true",
        help="Run both diagrams plus the project's target language",
    )

    parser.add_argument(
        "--output-dir", "-o", help="Directory to write files to (default: stdout)"
    )

    parser.add_argument("--config", help="Configuration file path (JSON)")

    # Style options
    parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't add visibility comments to generated C code",
    )

    parser.add_argument(
        "--spaces",
        type=int,
        metavar="N",
        help="Indent with N spaces instead of tabs",
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List available generators and exit",
    )
    info_group.add_argument(
        "--language-info",
        metavar="LANGUAGE",
        help="Show detailed info about a generator and exit",
    )

    parser.set_defaults(func=handle_codegen_command)
    return parser


def handle_codegen_command(args: argparse.Namespace) -> int:
    """
    Handle the codegen subcommand.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        # Handle info commands
        if args.list_languages:
            return _list_languages()

        if args.language_info:
            return _show_language_info(args.language_info)

        if not (args.language or args.all):
            console.print("[red]✗[/red] --language or --all is required")
            return 1

        if not (args.file or args.url):
            console.print("[red]✗[/red] Input source required (file or --url)")
            return 1

        if args.language and not _validate_language(args.language):
            return 1

        project = _get_project_input(args)

        if args.all:
            languages = generators_for_project(project.language)
        else:
            languages = [get_registry().resolve_name(args.language)]

        return _generate_and_output(project, languages, args)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.error("codegen failed: %s", e)
        return 1


def _list_languages() -> int:
    """List available generators with details."""
    language_info = list_all_language_info()

    if not language_info:
        console.print("[yellow]⚠️ No generators available[/yellow]")
        return 0

    table = Table(
        title="📋 Available Generators", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Generator", style="bold green", no_wrap=True)
    table.add_column("Kind", style="magenta")
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(
            f"🔧 {lang_name}", info["kind"], info["file_extension"], info["class"], aliases
        )

    console.print()
    console.print(table)
    console.print()

    console.print(
        Panel(
            "[bold]Usage:[/bold] uml-explorer codegen --language [cyan]NAME[/cyan] [dim]project.json[/dim]\n"
            "[bold]Info:[/bold] uml-explorer codegen --language-info [cyan]NAME[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )

    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific generator."""
    if not _validate_language(language, silent=True):
        console.print(f"[red]✗ Generator '{language}' is not available[/red]")
        console.print("[dim]Use --list-languages to see available options[/dim]")
        return 1

    info = get_language_info(language)

    info_text = f"""[bold]Generator:[/bold] {info['name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(info_text, title=f"🔧 {info['name'].title()} Generator", border_style="green")
    )

    config = get_generator(language).config

    config_table = Table(
        title="⚙️  Default Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")

    for setting, value in _config_rows(info["name"], config).items():
        config_table.add_row(setting, value)

    console.print()
    console.print(config_table)

    examples_text = f"""Print to the terminal:
[cyan]uml-explorer codegen --language {info['name']} project.json[/cyan]

Write files:
[cyan]uml-explorer codegen -l {info['name']} --output-dir build project.json[/cyan]"""

    console.print()
    console.print(Panel(examples_text, title="💡 Usage Examples", border_style="blue"))

    return 0


def _config_rows(language: str, config: GeneratorConfig) -> Dict[str, str]:
    """Settings shown for a generator's default configuration."""
    if language == "c":
        rows = {
            "Header File": config.header_name,
            "Source File": config.source_name,
            "Add Comments": str(config.add_comments),
        }
    else:
        rows = {"Output File": str(config.output_file)}
    rows["Use Tabs"] = str(config.use_tabs)
    rows["Indent Size"] = str(config.indent_size)
    return rows


def _validate_language(language: str, silent: bool = False) -> bool:
    """Validate that a generator name or alias is registered."""
    if is_language_supported(language):
        return True
    if not silent:
        console.print(f"[red]✗ Unknown generator '{language}'[/red]")
        console.print(
            f"[dim]Available generators: {', '.join(list_supported_languages())}[/dim]"
        )
    return False


def _get_project_input(args: argparse.Namespace) -> Project:
    """Load the project description named on the command line."""
    try:
        source, project = load_project(file_path=args.file, url=args.url)
    except (ProjectLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load input: {e}") from e

    console.print(f"📄 Loaded: {source}")
    return project


def _build_config(args: argparse.Namespace, language: str) -> GeneratorConfig:
    """Build configuration for one generator from file and CLI arguments."""
    overrides: Dict[str, Any] = {}

    if args.no_comments:
        overrides["add_comments"] = False

    if args.spaces is not None:
        overrides["use_tabs"] = False
        overrides["indent_size"] = args.spaces

    try:
        return load_config(
            language, custom_config=overrides or None, config_file=args.config
        )
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _generate_and_output(
    project: Project, languages: List[str], args: argparse.Namespace
) -> int:
    """Generate every requested output and handle display with rich formatting."""
    results: Dict[str, GenerationResult] = {}

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        for language in languages:
            config = _build_config(args, language)
            task = progress.add_task(f"[green]Generating {language} output...", total=None)
            results[language] = generate_from_project(project, language, config)
            progress.remove_task(task)

    exit_code = 0
    for language, result in results.items():
        if not result.success:
            console.print(f"[red]✗ {language} generation failed:[/red] {result.error_message}")
            if result.exception:
                console.print(f"[dim]Details: {result.exception}[/dim]")
            exit_code = 1
            continue

        if args.output_dir:
            _save_result(language, result, args.output_dir)
        else:
            _print_result(language, result)

        if args.verbose and result.metadata:
            _print_metadata(result)

        if result.warnings:
            console.print("\n[yellow]⚠️  Warnings:[/yellow]")
            for warning in result.warnings:
                console.print(f"  [yellow]•[/yellow] {warning}")
            console.print()

    return exit_code


def _save_result(language: str, result: GenerationResult, output_dir: str):
    """Write a result's files into the output directory."""
    try:
        paths = write_artifacts(result.files, output_dir)
    except ExportError as e:
        raise CLIError(str(e)) from e

    for path in paths:
        console.print(f"[green]✓[/green] {language} output saved to [cyan]{path}[/cyan]")


def _print_result(language: str, result: GenerationResult):
    """Print each generated file with syntax highlighting."""
    lexer = SYNTAX_LEXERS.get(language, "text")
    border = "═" * 20

    for name, text in result.files.items():
        console.print(f"\n[green]{border} 📄 {name} {border}[/green]\n")
        console.print(Syntax(text, lexer, theme="monokai"))


def _print_metadata(result: GenerationResult):
    """Print result metadata as a table."""
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )

    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(metadata_table)
