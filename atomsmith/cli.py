"""CLI entry point for atomsmith."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from atomsmith.config import AtomsmithConfig, load_config, load_rules
from atomsmith.config.loader import DEFAULT_CONFIG_TEMPLATE
from atomsmith.errors import AtomsmithError
from atomsmith.orchestrator import BuildReport, Orchestrator
from atomsmith.output import OutputWriter, WriteOutcome
from atomsmith.rules import StaticConfig, StylesheetGenerator, TokenExtractor
from atomsmith.scanner import CorpusScanner

app = typer.Typer(
    name="atomsmith",
    help="Generate atomic CSS from the class names your sources use.",
)

config_app = typer.Typer(help="Manage atomsmith configuration.")
app.add_typer(config_app, name="config")

# Status goes to stderr so a stylesheet on stdout stays clean
console = Console(stderr=True)

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}

# Global state
_config: AtomsmithConfig | None = None


def _get_config() -> AtomsmithConfig:
    if _config is None:
        return load_config()
    return _config


def _setup_logging(level: str) -> None:
    package_logger = logging.getLogger("atomsmith")
    package_logger.handlers = [RichHandler(console=console, show_path=False)]
    package_logger.setLevel(_LOG_LEVELS[level])


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to atomsmith.yaml")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except AtomsmithError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    _setup_logging("debug" if verbose else _config.log_level)


def _report_build(report: BuildReport) -> None:
    if report.outcome is WriteOutcome.UNCHANGED:
        console.print(f"[yellow]{escape(report.destination or '')} unchanged[/yellow]")
    elif report.outcome is WriteOutcome.WRITTEN:
        console.print(
            f"[green]Wrote[/green] {escape(report.destination or '')} "
            f"({report.tokens} classes, {report.duration:.2f}s)"
        )


@app.command()
def build(
    inputs: Annotated[
        list[Path] | None, typer.Argument(help="Files or directories to scan")
    ] = None,
    recursive: Annotated[
        bool, typer.Option("--recursive", "-R", help="Descend into nested directories")
    ] = False,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Stylesheet destination (default: stdout)")
    ] = None,
    exclude: Annotated[
        list[str] | None, typer.Option("--exclude", "-x", help="Glob of files to skip")
    ] = None,
    rtl: Annotated[bool, typer.Option("--rtl", help="Swap start/end to right/left")] = False,
    namespace: Annotated[
        str | None, typer.Option("--namespace", "-n", help="Selector prefix, e.g. '#atomic'")
    ] = None,
    helpers_namespace: Annotated[
        str | None, typer.Option("--helpers-namespace", "-H", help="Selector prefix for helpers")
    ] = None,
    ie: Annotated[bool, typer.Option("--ie", help="Emit legacy-browser hacks")] = False,
    watch: Annotated[bool, typer.Option("--watch", "-w", help="Rebuild on changes")] = False,
) -> None:
    """Scan INPUTS for atomic classes and generate their stylesheet."""
    cfg = _get_config()
    if not inputs:
        console.print("[red]Error:[/red] no input files or directories given")
        raise typer.Exit(1)

    overrides = {"rtl": rtl or cfg.options.rtl, "ie": ie or cfg.options.ie}
    if namespace is not None:
        overrides["namespace"] = namespace
    if helpers_namespace is not None:
        overrides["helpers_namespace"] = helpers_namespace
    options = cfg.options.model_copy(update=overrides)

    try:
        rules = load_rules(cfg)
        generator = StylesheetGenerator(rules)
    except AtomsmithError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    scanner = CorpusScanner(
        TokenExtractor(rules),
        exclude=[*cfg.exclude, *(exclude or [])],
        on_excluded=lambda path: console.print(f"[dim]excluded {escape(str(path))}[/dim]"),
    )
    orchestrator = Orchestrator(
        inputs,
        scanner=scanner,
        generator=generator,
        writer=OutputWriter(output or cfg.output.path),
        static_config=StaticConfig(custom=cfg.custom, breakpoints=cfg.breakpoints),
        options=options,
        recursive=recursive or cfg.recursive,
        class_names=cfg.class_names,
        on_build=_report_build,
    )

    try:
        if watch:
            console.print(f"[bold]Watching[/bold] {len(inputs)} input(s)... (Ctrl+C to stop)")
            asyncio.run(orchestrator.watch())
        else:
            asyncio.run(orchestrator.run_once())
    except AtomsmithError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("Watcher stopped.")


@app.command()
def rules() -> None:
    """List the rules available to class names."""
    cfg = _get_config()
    try:
        loaded = load_rules(cfg)
    except AtomsmithError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(title=f"Rules ({len(loaded)})")
    table.add_column("Matcher", style="cyan")
    table.add_column("Name")
    table.add_column("Type", style="yellow")
    table.add_column("Styles", style="green")
    for rule in loaded:
        styles = "; ".join(f"{prop}: {value}" for prop, value in rule.styles.items())
        table.add_row(rule.matcher, rule.name or "-", rule.type, escape(styles))
    Console().print(table)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    Console().print(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default atomsmith.yaml in current directory."""
    target = Path("atomsmith.yaml")
    if target.exists() and not force:
        console.print("[yellow]atomsmith.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    console.print(f"[green]Created[/green] {target}")
