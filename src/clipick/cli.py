"""CLI commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Annotated

import typer
from rich.console import Console
from rich.table import Table

if TYPE_CHECKING:
    from clipick.api import Picker
    from clipick.config import Config

app = typer.Typer(
    name="clipick",
    help="Arrow-key pickers for the terminal.",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

DEMO_LANGUAGES = ["Swift", "Python", "JavaScript", "C#", "Java", "Go", "Ruby", "Kotlin"]
DEMO_MOVIES = [
    "Iron Man", "The Incredible Hulk", "Iron Man 2", "Thor",
    "Captain America: The First Avenger", "The Avengers", "Iron Man 3", "Thor: The Dark World",
    "Captain America: The Winter Soldier", "Guardians of the Galaxy", "Avengers: Age of Ultron",
    "Ant-Man", "Captain America: Civil War", "Doctor Strange", "Guardians of the Galaxy Vol. 2",
    "Spider-Man: Homecoming", "Thor: Ragnarok", "Black Panther", "Avengers: Infinity War",
    "Ant-Man and The Wasp",
]  # fmt: skip


def _get_config() -> Config:
    """Lazy import and load config."""
    from clipick.config import Config

    return Config.load()


def _get_picker(summary_console: Console) -> Picker:
    """Lazy import and create a picker that draws its frames on stderr."""
    from clipick.api import Picker
    from clipick.ui.terminal import TerminalInput

    # Frames go to stderr; stdout carries only the answer.
    screen = TerminalInput(console=Console(stderr=True, highlight=False))
    return Picker(input_handler=screen, console=summary_console)


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log debug output to stderr")
    ] = False,
) -> None:
    """Arrow-key pickers for the terminal."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@app.command()
def single(
    title: Annotated[str, typer.Argument(help="Title shown above the list")],
    items: Annotated[list[str], typer.Argument(help="Items to choose from")],
) -> None:
    """Pick one item and print it."""
    from clipick.api import SelectionCancelledError

    picker = _get_picker(err_console)
    try:
        choice = picker.required_single_selection(title, items)
    except SelectionCancelledError:
        err_console.print("[red]Selection cancelled[/red]")
        raise typer.Exit(1)
    console.print(choice, markup=False, highlight=False)


@app.command()
def multi(
    title: Annotated[str, typer.Argument(help="Title shown above the list")],
    items: Annotated[list[str], typer.Argument(help="Items to choose from")],
) -> None:
    """Pick any number of items and print one per line."""
    picker = _get_picker(err_console)
    for choice in picker.multi_selection(title, items):
        console.print(choice, markup=False, highlight=False)


@app.command()
def demo() -> None:
    """Walk through a sample single and multi selection."""
    picker = _get_picker(console)

    if picker.get_permission("Wanna pick a favorite programming language?"):
        picker.single_selection("Choose Your Favorite Programming Language", DEMO_LANGUAGES)

    if picker.get_permission("Wanna pick your favorite marvel movies?"):
        picker.multi_selection("Select Your Favorite Marvel Movies", DEMO_MOVIES)


config_app = typer.Typer(help="Show or change settings.")
app.add_typer(config_app, name="config")


@config_app.callback(invoke_without_command=True)
def show_config(ctx: typer.Context) -> None:
    """Show effective settings."""
    if ctx.invoked_subcommand is not None:
        return
    cfg = _get_config()

    table = Table(title=f"clipick config ({cfg.config_dir})")
    table.add_column("Key")
    table.add_column("Value")
    table.add_column("Description", style="dim")
    for name, desc, enabled in cfg.get_toggles():
        table.add_row(name, "on" if enabled else "off", desc)
    for name, desc, value in cfg.get_settings():
        table.add_row(name, str(value), desc)
    console.print(table)


@config_app.command("set")
def set_config(
    key: Annotated[str, typer.Argument(help="Setting name, as listed by `clipick config`")],
    value: Annotated[str, typer.Argument(help="New value, e.g. 6, on, off")],
) -> None:
    """Change a setting in the config file."""
    cfg = _get_config()
    try:
        cfg.set(key, value)
    except KeyError:
        err_console.print(f"[red]Error:[/red] Unknown setting '{key}'")
        raise typer.Exit(1)
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    console.print(f"[green]✓[/green] {key} = {cfg.get(key)}")


if __name__ == "__main__":
    app()
