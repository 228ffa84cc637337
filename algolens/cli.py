"""Command-line interface for algolens."""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console

from . import __version__
from .config import OUTPUT_FORMATS, Config
from .core.catalog import CatalogKind, KnowledgeBase
from .engine.errors import CatalogError, ConfigError
from .reporting import OutputFormat, ResultRenderer
from .service import AnalysisService
from .utils.logging_setup import get_logger, log_operation, setup_logging

logger = get_logger(__name__)
err_console = Console(stderr=True, highlight=False)

# Exit code for a malformed catalog or config; these are fatal at startup.
EXIT_STARTUP_ERROR = 2


def _fail_startup(error: Exception):
    err_console.print(f"[red]✗ {error}[/red]")
    sys.exit(EXIT_STARTUP_ERROR)


@click.group(name="algolens")
@click.version_option(__version__, prog_name="algolens")
@click.option(
    "--config", "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to configuration file (default: search for .algolens.yml)"
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, config_path, verbose):
    """Recognize known algorithms and data structures in code snippets."""
    try:
        config = Config.from_file(config_path) if config_path else Config.find_and_load(Path.cwd())
        config.validate()
    except ConfigError as e:
        _fail_startup(e)

    level = "DEBUG" if verbose else str(config.get("logging.level", "WARNING"))
    setup_logging(
        level=level,
        file=bool(config.get("logging.file", False)),
        log_dir=config.get("logging.log_dir"),
    )
    ctx.obj = config


def _read_snippet(file: Optional[str], code: Optional[str]) -> str:
    if file and code is not None:
        raise click.UsageError("Pass either FILE or --code, not both")
    if code is not None:
        return code
    if file == "-":
        return sys.stdin.read()
    if file:
        try:
            return Path(file).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise click.BadParameter(f"Cannot read {file}: {e}", param_hint="FILE")
    raise click.UsageError("Either FILE (or '-' for stdin) or --code must be provided")


@cli.command()
@click.argument("file", required=False, type=click.Path(allow_dash=True, dir_okay=False))
@click.option("--code", help="Code to analyze as a string")
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default: output.format from config)"
)
@click.option("--explain", is_flag=True, help="Show which rule matched each entry")
@click.option("--no-keywords", is_flag=True, help="Disable category-keyword matching")
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Replacement catalog file (YAML or JSON)"
)
@click.option("--language", help="Language label recorded with the snippet")
@click.pass_obj
def analyze(config: Config, file, code, output_format, explain, no_keywords, catalog_path, language):
    """Analyze a code snippet from FILE, stdin ('-') or --code."""
    snippet = _read_snippet(file, code)

    if no_keywords:
        config.set("detection.keyword_matching", False)
    if catalog_path:
        config.set("catalog.path", catalog_path)
    output_format = OutputFormat(output_format or config.get("output.format", "text"))

    log_operation(logger, "analyze", source=file or "--code", length=len(snippet))
    try:
        service = AnalysisService.from_config(config)
    except CatalogError as e:
        _fail_startup(e)

    result = service.analyze(snippet, language=language)

    explanations = None
    if explain and output_format == OutputFormat.TEXT:
        explanations = service.explain(snippet)

    ResultRenderer(output_format).render(result, explanations)


@cli.command()
@click.option(
    "--kind",
    type=click.Choice(["algorithms", "data-structures", "all"]),
    default="all",
    help="Which catalog to list"
)
@click.option("--category", help="Only entries in this category (display label, e.g. 'Sorting')")
@click.option(
    "--format", "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default="text",
    help="Output format"
)
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(exists=True, dir_okay=False),
    help="Replacement catalog file (YAML or JSON)"
)
@click.pass_obj
def catalog(config: Config, kind, category, output_format, catalog_path):
    """List knowledge base entries."""
    path = catalog_path or config.get("catalog.path")
    try:
        knowledge_base = KnowledgeBase.from_file(path) if path else KnowledgeBase.default()
    except CatalogError as e:
        _fail_startup(e)

    kinds = list(CatalogKind)
    if kind != "all":
        kinds = [CatalogKind(kind.replace("-", "_"))]

    renderer = ResultRenderer(OutputFormat(output_format))
    for catalog_kind in kinds:
        selected = knowledge_base.catalog(catalog_kind)
        entries = list(selected)
        if category:
            try:
                wanted = catalog_kind.parse_category(category)
            except CatalogError:
                if kind != "all":
                    raise click.BadParameter(
                        f"Unknown {catalog_kind.value} category {category!r}; "
                        f"known: {', '.join(str(c) for c in selected.categories())}",
                        param_hint="--category",
                    )
                continue
            entries = selected.by_category(wanted)
        title = catalog_kind.value.replace("_", " ").title()
        renderer.render_catalog(title, entries)


@cli.command(name="validate-catalog")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def validate_catalog(path):
    """Check that a replacement catalog file is well formed."""
    try:
        knowledge_base = KnowledgeBase.from_file(path)
    except CatalogError as e:
        err_console.print(f"[red]✗ Invalid catalog: {e}[/red]")
        sys.exit(1)

    Console(highlight=False).print(
        f"[green]✓ Catalog is valid[/green]: "
        f"{len(knowledge_base.algorithms)} algorithms, "
        f"{len(knowledge_base.data_structures)} data structures"
    )


def main():
    """Main CLI entry point."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\nOperation cancelled by user.", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
