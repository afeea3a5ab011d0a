"""
Command-line interface for wrapper generation.

Loads component metadata, generates wrappers and writes them out.
"""

from __future__ import annotations

import argparse
import logging
import sys

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .codegen import (
    ConfigError,
    GenerationResult,
    generate_components,
    get_target_info,
    list_supported_targets,
    load_config,
)
from .codegen.core.config import GeneratorConfig, get_config_manager
from .codegen.core.schema import ComponentMetadata
from .codegen.registry import RegistryError, is_target_supported
from .logging_config import get_logger, setup_logging
from .output import OutputError, write_results
from .utils import MetadataLoaderError, load_components

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``wrapgen`` command."""
    parser = argparse.ArgumentParser(
        prog="wrapgen",
        description="Generate framework wrapper classes for custom elements",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  wrapgen components.json -o src/proxies
  wrapgen components.json --model my-input=value:myChange --dry-run
  wrapgen --url https://example.com/docs.json --exclude my-internal
  wrapgen --list-targets
        """.strip(),
    )

    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("file", nargs="?", help="Component metadata JSON file")
    input_group.add_argument("--url", help="URL to fetch component metadata from")

    parser.add_argument(
        "--target", "-t", default="vue", help="Target framework (default: vue)"
    )
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--output-dir", "-o", metavar="DIR", help="Directory for generated modules"
    )
    parser.add_argument(
        "--no-index", action="store_true", help="Don't write the index barrel module"
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="TAG",
        help="Tag name to skip (repeatable)",
    )
    parser.add_argument(
        "--model",
        action="append",
        default=[],
        metavar="TAG=PROP:EVENT",
        help="Two-way binding for a tag (repeatable)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated code instead of writing files",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show debug logging"
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-targets", action="store_true", help="List supported targets and exit"
    )
    info_group.add_argument(
        "--list-components",
        action="store_true",
        help="List components found in the metadata and exit",
    )

    return parser


def parse_model_option(value: str) -> tuple[str, dict[str, str]]:
    """
    Parse a ``TAG=PROP:EVENT`` option.

    Raises:
        CLIError: If the value is malformed
    """
    tag, sep, binding = value.partition("=")
    prop, sep2, event = binding.partition(":")
    if not (sep and sep2 and tag and prop and event):
        raise CLIError(f"Invalid --model value '{value}', expected TAG=PROP:EVENT")
    return tag.strip(), {"propName": prop.strip(), "eventName": event.strip()}


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    overrides = {}

    try:
        base = load_config(args.target, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e

    if args.output_dir:
        overrides["output_dir"] = args.output_dir

    if args.no_index:
        overrides["index_file"] = None

    if args.exclude:
        overrides["exclude_components"] = list(base.exclude_components) + args.exclude

    if args.model:
        model_config = dict(base.model_config)
        for value in args.model:
            tag, entry = parse_model_option(value)
            model_config[tag] = entry
        overrides["model_config"] = model_config

    try:
        return load_config(args.target, custom_config=overrides, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _list_targets() -> int:
    """List supported targets with details."""
    table = Table(title="Supported Targets", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Target", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for target in list_supported_targets():
        info = get_target_info(target)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(target, info["file_extension"], info["class"], aliases)

    console.print(table)
    return 0


def _list_components(components: list[ComponentMetadata], config: GeneratorConfig) -> int:
    """Show the components found in the metadata."""
    table = Table(title="Components", box=box.SIMPLE, header_style="bold cyan")
    table.add_column("Tag", style="bold")
    table.add_column("Props", justify="right")
    table.add_column("Events", justify="right")
    table.add_column("Methods", justify="right")
    table.add_column("Model")
    table.add_column("Excluded")

    for component in sorted(components, key=lambda c: c.tag_name):
        try:
            model = config.get_model(component.tag_name)
            binding = f"{model.prop_name} / {model.event_name}" if model else ""
        except ConfigError:
            binding = "[red]invalid[/red]"
        table.add_row(
            component.tag_name,
            str(len(component.properties)),
            str(len(component.events)),
            str(len(component.methods)),
            binding,
            "yes" if config.is_excluded(component.tag_name) else "",
        )

    console.print(table)
    return 0


def _print_results(results: list[GenerationResult]):
    """Print generated code with syntax highlighting."""
    for result in results:
        if not result.success:
            continue
        title = result.metadata["module_name"] + result.metadata["file_extension"]
        console.print(
            Panel(
                Syntax(result.code, "typescript", theme="monokai"),
                title=title,
                border_style="green",
            )
        )


def _report(results: list[GenerationResult]) -> int:
    """Report failures and the warning count; return the exit code."""
    failed = [r for r in results if not r.success]

    # Individual warnings were already logged during generation
    warning_count = sum(len(r.warnings) for r in results)
    if warning_count:
        console.print(f"[yellow]⚠ {warning_count} warning(s)[/yellow]")

    for result in failed:
        console.print(
            f"[red]✗ <{result.component.tag_name}>:[/red] {result.error_message}"
        )

    return 1 if failed else 0


def run(args: argparse.Namespace) -> int:
    """Run the command for parsed arguments."""
    if args.list_targets:
        return _list_targets()

    if not is_target_supported(args.target):
        raise CLIError(
            f"Unsupported target '{args.target}'. "
            f"Supported targets: {', '.join(list_supported_targets())}"
        )

    if not (args.file or args.url):
        raise CLIError("Input source required (file or --url)")

    config = _build_config(args)
    for warning in get_config_manager().validate_config(config):
        logger.warning(warning)

    try:
        source, components = load_components(file_path=args.file, url=args.url)
    except (MetadataLoaderError, FileNotFoundError) as e:
        raise CLIError(str(e)) from e

    if args.list_components:
        return _list_components(components, config)

    try:
        results = generate_components(components, args.target, config)
    except (ConfigError, RegistryError) as e:
        raise CLIError(str(e)) from e

    if args.dry_run:
        _print_results(results)
    else:
        try:
            paths = write_results(results, config.output_dir, config.index_file)
        except OutputError as e:
            raise CLIError(str(e)) from e
        console.print(
            f"[green]✓[/green] Generated {len(paths)} file(s) from {source} "
            f"in [cyan]{config.output_dir}[/cyan]"
        )

    return _report(results)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``wrapgen`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        return run(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
