from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional, Tuple

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cmdpick import __version__
from cmdpick.catalog import CATALOG_ENV, SAMPLE_TOML, load_catalog
from cmdpick.command import Commands
from cmdpick.errors import CmdpickError
from cmdpick.tui import run_picker
from cmdpick.suggestion import suggest

# ------------------------------------------------------------
# App setup
# ------------------------------------------------------------
app = typer.Typer(
    add_completion=False,
    help='Pick a shell command by keyword. Usage: cmd="$(cmdpick)"; eval "$cmd"',
)
console = Console()
err_console = Console(stderr=True)

log = logging.getLogger("cmdpick")


class Settings:
    def __init__(self, catalog: Optional[Path], prompt: Optional[str]):
        self.catalog = catalog
        self.prompt = prompt


def _setup_logging(verbose: bool, log_file: Optional[Path]) -> None:
    handlers: List[logging.Handler] = []
    if verbose:
        handlers.append(RichHandler(console=err_console, show_path=False))
    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        handlers.append(fh)
    if not handlers:
        handlers.append(RichHandler(console=err_console, show_path=False, level=logging.WARNING))
    logging.basicConfig(level=logging.DEBUG if (verbose or log_file) else logging.WARNING,
                        format="%(message)s", handlers=handlers, force=True)


def _fail(e: CmdpickError) -> NoReturn:
    typer.echo(f"Error: {e}", err=True)
    raise typer.Exit(1)


def _load(ctx: typer.Context) -> Tuple[Commands, str]:
    settings: Settings = ctx.obj
    try:
        commands, prompt = load_catalog(settings.catalog)
    except CmdpickError as e:
        _fail(e)
    return commands, settings.prompt if settings.prompt is not None else prompt


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"cmdpick {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    catalog: Optional[Path] = typer.Option(
        None, "--catalog", "-c",
        help=f"Catalog TOML file (default: ${CATALOG_ENV}, else ~/.cmdpick.toml, else built-in commands)",
    ),
    prompt: Optional[str] = typer.Option(None, "--prompt", "-p", help="Prompt shown before the input"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging on stderr"),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write debug logs to this file"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True,
                                 help="Show the version and exit"),
):
    """Run the interactive picker when no subcommand is given."""
    _setup_logging(verbose, log_file)
    ctx.obj = Settings(catalog, prompt)
    if ctx.invoked_subcommand is None:
        _pick(ctx)


# ------------------------------------------------------------
# Picker
# ------------------------------------------------------------
def _pick(ctx: typer.Context) -> None:
    commands, prompt = _load(ctx)
    try:
        chosen = run_picker(commands, prompt=prompt)
    except CmdpickError as e:
        _fail(e)
    log.debug("picked %r", chosen)
    # an empty line on cancel keeps `read cmd` happy
    sys.stdout.write((chosen or "") + "\n")
    sys.stdout.flush()


@app.command("pick")
def pick(ctx: typer.Context):
    """Pick a command interactively and print it on stdout."""
    _pick(ctx)


# ------------------------------------------------------------
# Catalog browsing
# ------------------------------------------------------------
def _commands_table(title: str, commands) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("Command", style="bold")
    table.add_column("Description", overflow="fold")
    table.add_column("Keywords")
    for cmd in commands:
        table.add_row(escape(cmd.cmd), escape(cmd.some_description),
                      escape(", ".join(dict.fromkeys(cmd.keywords))))
    return table


@app.command("list")
def list_commands(
    ctx: typer.Context,
    keywords: List[str] = typer.Option([], "--keyword", "-k", help="Only commands with this keyword (repeatable)"),
):
    """List catalog commands (optionally only those carrying every --keyword)."""
    commands, _ = _load(ctx)
    if keywords:
        shown = suggest(commands, "", keywords).commands
    else:
        shown = list(commands)
    if not shown:
        console.print("No commands found.")
        raise typer.Exit(0)
    console.print(_commands_table("Commands", shown))


@app.command("keywords")
def list_keywords(ctx: typer.Context):
    """Show all keywords and how many commands carry each."""
    commands, _ = _load(ctx)
    table = Table(title="Keywords", show_lines=False)
    table.add_column("Keyword", style="bold")
    table.add_column("Commands", justify="right")
    for kw, cmds in commands.items():
        table.add_row(escape(kw), str(len(cmds)))
    console.print(table)


@app.command("search")
def search(
    ctx: typer.Context,
    prefix: str = typer.Argument("", help="Keyword prefix (omit to match all)"),
    keywords: List[str] = typer.Option([], "--keyword", "-k", help="Validated keyword (repeatable)"),
):
    """Run one suggestion pass without the interactive UI."""
    commands, _ = _load(ctx)
    unknown = [kw for kw in keywords if not commands.has_keyword(kw)]
    if unknown:
        err_console.print(f"[dim]Ignoring unknown keyword(s): {escape(', '.join(unknown))}[/]")
    valid = [kw for kw in keywords if commands.has_keyword(kw)]
    result = suggest(commands, prefix, valid)

    if result.keywords:
        console.print("[bold]Keywords:[/]", escape(" ".join(result.keywords)))
    if not result.commands:
        console.print("No results.")
        raise typer.Exit(0)
    console.print(_commands_table(f"Search: {prefix or '*'}", result.commands))


@app.command("placeholders")
def placeholders(ctx: typer.Context):
    """Show the {placeholders} of every command that has some."""
    commands, _ = _load(ctx)
    rows = [cmd for cmd in commands if cmd.template.has_placeholders]
    if not rows:
        console.print("No command has placeholders.")
        raise typer.Exit(0)
    table = Table(title="Placeholders", show_lines=False)
    table.add_column("Command", style="bold")
    table.add_column("Placeholders")
    for cmd in rows:
        names = ", ".join("{" + name + "}" for name in cmd.template.names)
        table.add_row(escape(cmd.cmd), escape(names))
    console.print(table)


@app.command("template-toml")
def template_toml():
    """Print a TOML template for a catalog file."""
    console.print(SAMPLE_TOML.strip(), markup=False, highlight=False)


@app.command("show")
def show(
    ctx: typer.Context,
    keywords: List[str] = typer.Argument(..., help="Keywords the command must carry"),
):
    """Show the commands carrying all the given keywords."""
    commands, _ = _load(ctx)
    matched = suggest(commands, "", keywords).commands
    if not matched:
        typer.echo(f"No command carries: {' '.join(keywords)}", err=True)
        raise typer.Exit(1)
    for cmd in matched:
        name = escape(cmd.cmd)
        header = f"[bold]{name}[/] — {escape(cmd.description)}" if cmd.description else f"[bold]{name}[/]"
        console.print(Panel(header))
        console.print("[bold]Keywords:[/]", escape(", ".join(dict.fromkeys(cmd.keywords))))
        if cmd.template.has_placeholders:
            console.print("[bold]Placeholders:[/]", escape(", ".join("{" + n + "}" for n in cmd.template.names)))
