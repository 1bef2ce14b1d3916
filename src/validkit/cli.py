from __future__ import annotations

import logging
import pathlib
import sys
from typing import Optional

import typer
import structlog
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import load_config, ValidkitConfig
from .registry import build_registry, run_rule

console = Console()
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="validkit — stateless value validators")


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"validkit {__version__}")
        raise typer.Exit()


def _configure_logging(cfg: ValidkitConfig, verbose: bool) -> None:
    renderer = (
        structlog.processors.JSONRenderer()
        if cfg.logging.json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[structlog.processors.add_log_level, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if verbose else logging.WARNING),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=False,
    )


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to .validkit.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    try:
        cfg = load_config(config) if config else ValidkitConfig()
    except (OSError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Cannot load config {escape(str(config))}:[/red] {escape(str(e))}")
        raise typer.Exit(code=2)
    _configure_logging(cfg, verbose)
    ctx.obj = {"config": cfg, "registry": build_registry(cfg)}
    if verbose:
        log.debug("verbose_enabled", config=str(config) if config else None)


@app.command()
def check(
    ctx: typer.Context,
    rule: str = typer.Argument(..., help="Rule name (see `validkit rules`)"),
    value: str = typer.Argument(..., help="Value to validate"),
):
    """Validate a single VALUE against RULE. Exit code 1 if rejected."""
    registry = ctx.obj["registry"]
    try:
        err = run_rule(registry, rule, value)
    except KeyError:
        console.print(f"[red]Unknown rule:[/red] {escape(rule)}. Run `validkit rules` to list them.")
        raise typer.Exit(code=2)

    if err is None:
        console.print("[green]valid[/green]")
        return
    log.debug("check_failed", rule=rule, code=err.code, reason=err.reason)
    console.print(f"[red]invalid[/red]: {escape(err.message)} ({err.code})")
    raise typer.Exit(code=1)


@app.command()
def rules(ctx: typer.Context):
    """List the available rule names."""
    registry = ctx.obj["registry"]
    table = Table(title="validkit rules")
    table.add_column("rule", style="cyan", no_wrap=True)
    table.add_column("description")
    for r in registry.values():
        table.add_row(r.name, r.description)
    console.print(table)
