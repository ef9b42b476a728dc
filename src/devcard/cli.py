from __future__ import annotations

import logging
import webbrowser
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from .actions import build_registry
from .config import DEFAULT_CONFIG_PATH, load_config, write_default_config
from .dispatch import DispatchLoop
from .model import MenuConfigError, build_menu
from .prompter import MenuPrompter
from .render import Renderer

app = typer.Typer(
    add_completion=False,
    help="devcard: your business card, in the terminal.",
)
console = Console()

_CONFIG_HELP = f"Profile TOML file (default: {DEFAULT_CONFIG_PATH}, built-in profile if absent)"


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


# ── `show` command ─────────────────────────────────────────────────────────────

@app.command()
def show(
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, dir_okay=False, help=_CONFIG_HELP),
    no_banner: bool = typer.Option(False, "--no-banner", help="Skip the ASCII banner"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging to stderr"),
) -> None:
    """Show the card and the interactive link menu."""
    _setup_logging(verbose)
    card = load_config(config)

    menu = build_menu(card.links)
    registry = build_registry(card.links, console, opener=webbrowser.open, theme=card.theme)
    try:
        loop = DispatchLoop(MenuPrompter(menu, console), registry, console, menu=menu)
    except MenuConfigError as e:
        console.print(f"[bold red]Invalid menu configuration:[/bold red] {e}")
        raise typer.Exit(code=2)

    renderer = Renderer(console, card.theme)
    raise typer.Exit(code=loop.run(startup=lambda: renderer.startup(card, banner=not no_banner)))


# ── `links` command ────────────────────────────────────────────────────────────

@app.command()
def links(
    config: Path | None = typer.Option(None, "--config", "-c", exists=True, dir_okay=False, help=_CONFIG_HELP),
) -> None:
    """Print every configured link and exit."""
    card = load_config(config)
    Renderer(console, card.theme).links_table(card.links)


# ── `init` command ─────────────────────────────────────────────────────────────

@app.command()
def init(
    config: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", "-c", help="Where to write the profile"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a starter profile you can edit."""
    if not write_default_config(config, force=force):
        console.print(Panel(
            f"[bold yellow]{config} already exists.[/bold yellow]\n"
            "Edit it directly, or re-run with [bold]--force[/bold] to start over.",
            border_style="yellow",
        ))
        raise typer.Exit(code=1)
    console.print(f"[bold green]✓ Wrote starter profile → {config}[/bold green]")


@app.callback(invoke_without_command=True)
def _default(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        show(config=None, no_banner=False, verbose=False)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
