"""
CLI integration for code generation functionality.

Provides the ``generate``, ``languages`` and ``info`` subcommands.
"""

import argparse
from pathlib import Path
from typing import Any, Dict

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from . import (
    ConfigError,
    GenerationResult,
    RegistryError,
    generate_code,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
    load_config,
)
from .registry import is_language_supported
from ..logging_config import get_logger
from ..utils import IDDLoaderError, load_idd, write_generated_files

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_codegen_subparsers(subparsers) -> None:
    """
    Register the code generation subcommands.

    Args:
        subparsers: Subparser group from main parser
    """
    parser = subparsers.add_parser(
        "generate",
        help="Generate bindings from an interface description",
        description="Generate one source file per interface of an IDD",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  apigen generate api.json -o src/main/java/com/microsoft/playwright
  apigen generate --url https://example.com/api.json --dry-run --only Page
  apigen generate api.json --config apigen.json --package com.example.api
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("file", nargs="?", help="IDD JSON file")
    input_group.add_argument("--url", help="URL to fetch the IDD from")

    parser.add_argument(
        "--language", "-l", default="java", help="Target language (default: java)"
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="DIR",
        help="Output directory (default: current directory)",
    )
    parser.add_argument(
        "--config", metavar="FILE", help="Configuration file path (JSON)"
    )
    parser.add_argument(
        "--package-name", "--package", help="Package name for generated code"
    )
    parser.add_argument(
        "--only",
        nargs="+",
        metavar="NAME",
        help="Generate only these interfaces",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated code instead of writing files",
    )
    parser.set_defaults(func=handle_generate_command)

    languages = subparsers.add_parser(
        "languages", help="List supported target languages"
    )
    languages.set_defaults(func=lambda args: list_languages())

    info = subparsers.add_parser("info", help="Show details about a target language")
    info.add_argument("language", help="Language name or alias")
    info.set_defaults(func=lambda args: show_language_info(args.language))


def handle_generate_command(args: argparse.Namespace) -> int:
    """
    Handle the generate subcommand.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        if not _validate_language(args.language):
            return 1

        source, idd = _load_input(args)
        logger.debug("Loaded %d interface(s) from %s", len(idd), source)
        config = _build_config(args)
        generator = get_generator(args.language, config)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            task = progress.add_task(
                f"[green]Generating {args.language} code from {source}...", total=None
            )
            result = generate_code(generator, idd)
            progress.remove_task(task)

        return _output_result(result, args)

    except (CLIError, RegistryError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    if not language_info:
        console.print("[yellow]⚠️ No code generators available[/yellow]")
        return 0

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(
            f"🔧 {lang_name}", info["file_extension"], info["class"], aliases
        )

    console.print()
    console.print(table)
    console.print()

    console.print(
        Panel(
            "[bold]Usage:[/bold] apigen generate [dim]api.json[/dim] "
            "--language [cyan]LANGUAGE[/cyan]\n"
            "[bold]Info:[/bold] apigen info [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    if not _validate_language(language, silent=True):
        console.print(f"[red]✗ Language '{language}' is not supported[/red]")
        console.print("[dim]Use 'apigen languages' to see available options[/dim]")
        return 1

    try:
        info = get_language_info(language)
        generator = get_generator(language)
    except RegistryError as e:
        console.print(f"[red]✗ Error getting language info:[/red] {e}")
        return 1

    info_text = f"""[bold]Language:[/bold] {info['name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(
            info_text,
            title=f"🔧 {info['name'].title()} Generator",
            border_style="green",
        )
    )

    config_table = Table(
        title="⚙️  Default Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")

    config = generator.config
    config_table.add_row("Package Name", str(config.package_name))
    config_table.add_row("Indent Size", str(config.indent_size))
    config_table.add_row("License Header", str(config.add_license_header))
    config_table.add_row("Copyright Holder", str(config.copyright_holder))

    tables = generator.get_override_tables()
    config_table.add_row("Type Overrides", str(len(tables.type_overrides)))
    config_table.add_row("Signature Overrides", str(len(tables.signatures)))
    config_table.add_row("Base Interfaces", ", ".join(tables.base_interfaces) or "none")

    console.print()
    console.print(config_table)

    examples_text = f"""Generate into a source directory:
[cyan]apigen generate -l {language} -o src/main/java api.json[/cyan]

Preview a single interface:
[cyan]apigen generate -l {language} --only Page --dry-run api.json[/cyan]

Custom package name:
[cyan]apigen generate -l {language} --package com.example.api api.json[/cyan]"""

    console.print()
    console.print(
        Panel(examples_text, title="💡 Usage Examples", border_style="blue")
    )
    return 0


def _validate_language(language: str, silent: bool = False) -> bool:
    """Validate that a language is supported."""
    if not is_language_supported(language):
        if not silent:
            supported = list_supported_languages()
            console.print(f"[red]✗ Unsupported language '{language}'[/red]")
            console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
        return False
    return True


def _load_input(args: argparse.Namespace):
    """Load the IDD named on the command line."""
    try:
        return load_idd(file_path=args.file, url=args.url)
    except (IDDLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load input: {e}") from e


def _build_config(args: argparse.Namespace):
    """Build configuration from the config file and CLI arguments."""
    config_dict: Dict[str, Any] = {}

    if args.package_name:
        config_dict["package_name"] = args.package_name
    if args.only:
        config_dict["only"] = list(args.only)
    if args.output:
        config_dict["output_dir"] = args.output

    try:
        return load_config(
            args.language.lower(),
            custom_config=config_dict,
            config_file=args.config,
        )
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _output_result(result: GenerationResult, args: argparse.Namespace) -> int:
    """Write or print generated files with rich formatting."""
    if not result.success:
        console.print(f"[red]✗ {result.error_message}[/red]")
        return 1

    if args.dry_run:
        for name, text in result.files.items():
            syntax = Syntax(text, "java", theme="monokai")
            console.print(Panel(syntax, title=f"📄 {name}"))
    else:
        output_dir = Path(args.output or ".")
        try:
            written = write_generated_files(output_dir, result.files)
        except IDDLoaderError as e:
            console.print(f"[red]✗ {e}[/red]")
            return 1
        console.print(
            f"[green]✓[/green] Generated {len(written)} file(s) "
            f"in [cyan]{output_dir}[/cyan]"
        )

    if getattr(args, "verbose", False) and result.metadata:
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

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")
        console.print()

    return 0
