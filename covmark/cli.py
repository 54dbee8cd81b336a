"""CLI entry point — command definitions using Click.

Commands:
    init          Generate a template config file
    annotate      Resolve a document's coverage file and emit the annotations
    states        List coverage states with their labels and style tokens
"""

import json
import sys
import warnings
from pathlib import Path
from typing import Any

import click

from covmark import __version__

DEFAULT_CONFIG = "covmark.yaml"


# ---------------------------------------------------------------------------
# Helpers shared by all data commands
# ---------------------------------------------------------------------------

def _load_config(ctx: click.Context):
    """Load config, apply command line overrides. Exits on error."""
    from covmark.config import ConfigError, load

    obj = ctx.obj
    config_path = obj["config_path"]
    if config_path is None and Path(DEFAULT_CONFIG).exists():
        config_path = DEFAULT_CONFIG

    try:
        config = load(config_path)
    except ConfigError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)

    if obj["suffix"]:
        config.suffix = obj["suffix"]

    if obj["verbose"]:
        source = config_path or "defaults"
        click.echo(f"[verbose] Using config from {source} (suffix '{config.suffix}')", err=True)

    return config


def _emit_json(data: Any, ctx: click.Context) -> None:
    """Write JSON to stdout or to the file specified by --output."""
    obj = ctx.obj
    indent = 2 if obj["pretty"] else None
    text = json.dumps(data, indent=indent, ensure_ascii=False)

    output_path: str | None = obj["output_path"]
    if output_path:
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(text)
        click.echo(f"Report written to '{output_path}'", err=True)
    else:
        click.echo(text)


def _handle_source_errors(func):
    """Decorator that catches source exceptions and exits cleanly."""
    import functools

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        from covmark.source import (
            CoverageSourceError,
            DocumentNotFoundError,
            SourceReadError,
        )

        try:
            return func(*args, **kwargs)
        except DocumentNotFoundError as exc:
            click.echo(f"Not found: {exc}", err=True)
            sys.exit(1)
        except SourceReadError as exc:
            click.echo(f"Read error: {exc}", err=True)
            sys.exit(1)
        except CoverageSourceError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)

    return wrapper


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------

@click.group()
@click.option("--config", "config_path", default=None,
              help=f"Path to the configuration file (default: ./{DEFAULT_CONFIG} if present).")
@click.option("--output", "output_path", default=None,
              help="Write JSON output to a file instead of stdout.")
@click.option("--pretty", is_flag=True, default=False,
              help="Pretty-print the JSON output.")
@click.option("--suffix", default=None,
              help="Coverage file suffix (overrides config).")
@click.option("--verbose", is_flag=True, default=False,
              help="Enable verbose logging.")
@click.version_option(__version__, prog_name="covmark")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, output_path: str | None,
        pretty: bool, suffix: str | None, verbose: bool) -> None:
    """Coverage annotation tool: resolve coverage record files, export as JSON."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["output_path"] = output_path
    ctx.obj["pretty"] = pretty
    ctx.obj["suffix"] = suffix
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------

@cli.command("init")
@click.option("--output", "output_path", default=DEFAULT_CONFIG, show_default=True,
              help="Path where the template config file will be written.")
def init_command(output_path: str) -> None:
    """Generate a template covmark.yaml file."""
    from covmark.config import ConfigError, generate_template
    try:
        generate_template(output_path)
        click.echo(f"Template written to '{output_path}'.")
    except ConfigError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)


# ---------------------------------------------------------------------------
# annotate
# ---------------------------------------------------------------------------

@cli.command("annotate")
@click.argument("document")
@click.option("--coverage", "coverage_path", default=None,
              help="Coverage record file. If omitted, DOCUMENT + suffix is used.")
@click.pass_context
@_handle_source_errors
def annotate_command(ctx: click.Context, document: str, coverage_path: str | None) -> None:
    """Resolve the coverage records of DOCUMENT into annotations."""
    from covmark.report import build_report
    from covmark.session import CoverageSession
    from covmark.source import CoverageWarning

    config = _load_config(ctx)
    session = CoverageSession(
        document,
        suffix=config.suffix,
        encoding=config.encoding,
        coverage_path=coverage_path,
    )

    if ctx.obj["verbose"]:
        click.echo(f"[verbose] Reading coverage records from '{session.coverage_path}'", err=True)

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        annotations = session.apply()

    coverage_warnings = [w for w in caught if issubclass(w.category, CoverageWarning)]
    if coverage_warnings:
        for w in coverage_warnings:
            click.echo(f"Warning: {w.message}", err=True)
        return

    if ctx.obj["verbose"]:
        click.echo(f"[verbose] Resolved {len(annotations)} annotation(s)", err=True)

    _emit_json(build_report(document, annotations, session.coverage_path), ctx)


# ---------------------------------------------------------------------------
# states
# ---------------------------------------------------------------------------

@cli.command("states")
@click.pass_context
def states_command(ctx: click.Context) -> None:
    """List coverage states with their labels and style tokens."""
    from covmark.report import states_table

    _emit_json(states_table(), ctx)
