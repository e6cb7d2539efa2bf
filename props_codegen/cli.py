"""
Command-line interface for props header generation.

Loads a component schema from a file or URL, runs a generation pass and
writes the resulting header.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .core.config import ConfigError, GeneratorConfig, load_config
from .core.errors import GeneratorError
from .core.generator import GenerationResult, generate_code
from .languages.cpp import create_props_header_generator
from .logging_config import configure_logging, get_logger
from .utils import SchemaLoadError, load_schema

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``props-codegen``."""
    parser = argparse.ArgumentParser(
        prog="props-codegen",
        description="Generate a C++ props header from a component schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  props-codegen schema.json
  props-codegen schema.json --output-dir generated/
  props-codegen --url https://example.com/schema.json --stdout
  props-codegen schema.json --namespace facebook --namespace react
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("schema", nargs="?", help="JSON schema file")
    input_group.add_argument("--url", help="URL to fetch the schema from")

    # Output options (mutually exclusive)
    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--output-dir",
        "-o",
        metavar="DIR",
        default=".",
        help="Directory to write the header to (default: current directory)",
    )
    output_group.add_argument(
        "--stdout", action="store_true", help="Print the header instead of writing it"
    )

    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--namespace",
        action="append",
        metavar="NS",
        help="Enclosing namespace, outermost first (repeatable)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation warnings and result metadata",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point of the ``props-codegen`` command.

    Args:
        argv: Arguments to parse; ``sys.argv[1:]`` when omitted

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = create_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = _build_config(args)
        source, schema = _load_input(args)

        generator = create_props_header_generator(config)
        result = generate_code(generator, schema)

        if not result.success:
            raise CLIError(result.error_message)

        if args.verbose:
            _show_result_details(source, result)

        _output_result(result, config, args)
        return 0

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Merge the config file and command line overrides."""
    overrides = {}
    if args.namespace:
        overrides["namespaces"] = args.namespace

    try:
        return load_config(overrides, args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _load_input(args: argparse.Namespace):
    """Load the schema from the positional file or ``--url``."""
    try:
        return load_schema(file_path=args.schema, url=args.url)
    except FileNotFoundError as e:
        raise CLIError(str(e)) from e
    except SchemaLoadError as e:
        raise CLIError(f"Failed to load schema: {e}") from e
    except GeneratorError as e:
        raise CLIError(f"Invalid schema: {e}") from e


def _output_result(
    result: GenerationResult, config: GeneratorConfig, args: argparse.Namespace
):
    """Write the header to disk or print it."""
    if args.stdout:
        sys.stdout.write(result.code)
        return

    output_path = Path(args.output_dir) / config.output_file
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result.code, encoding="utf-8")
    except OSError as e:
        raise CLIError(f"Failed to write {output_path}: {e}") from e

    logger.info("Wrote %s", output_path)
    console.print(f"[green]✓[/green] Generated code saved to [cyan]{output_path}[/cyan]")


def _show_result_details(source: str, result: GenerationResult):
    """Show warnings, metadata and a preview of the generated header."""
    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")

    table = Table(title="Generation Metadata", box=box.SIMPLE, show_header=False)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("source", source)
    for key, value in result.metadata.items():
        table.add_row(key, str(value))

    console.print()
    console.print(table)

    console.print(Syntax(result.code, "cpp", theme="monokai", line_numbers=True))
