"""CLI interface for quicktodo."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from quicktodo import __version__
from quicktodo.config import CONFIG_FILE, TodoConfig
from quicktodo.logging_setup import setup_logging
from quicktodo.session import TodoSession
from quicktodo.store import TaskStore
from quicktodo.ui import ConsoleUI

console = Console(highlight=False)
logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="quicktodo")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Config file (default: {CONFIG_FILE})",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write full debug logs to this file",
)
@click.pass_context
def main(
    ctx: click.Context,
    config_path: Path | None,
    verbose: bool,
    log_file: Path | None,
) -> None:
    """quicktodo - a console to-do list manager.

    Tasks live in memory for the length of a session.

    \b
    Usage:
      quicktodo              # Start an interactive session
      quicktodo run --empty  # Start without the sample tasks
      quicktodo demo         # Walk through the store operations
      quicktodo config       # Show the effective configuration
    """
    config = TodoConfig.load(config_path)
    setup_logging("DEBUG" if verbose else config.log_level, log_file)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config

    # If no subcommand, start a session
    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@main.command()
@click.option("--empty", "-e", is_flag=True, help="Start without the sample tasks")
@click.pass_context
def run(ctx: click.Context, empty: bool) -> None:
    """Start an interactive to-do session."""
    config: TodoConfig = ctx.obj["config"]

    store = TaskStore(seed=config.seed_sample_data and not empty)
    ui = ConsoleUI(console=console, display=config.display)
    logger.debug("Starting session with %d tasks", len(store))

    TodoSession(store, ui, config).run()
    console.print("[dim]Goodbye.[/dim]")


@main.command()
@click.pass_context
def demo(ctx: click.Context) -> None:
    """Run the sample scenario against a fresh store and show the result."""
    config: TodoConfig = ctx.obj["config"]
    ui = ConsoleUI(console=console, display=config.display)

    store = TaskStore(seed=True)
    ui.display_tasks(store.list_all(), "SAMPLE TASKS")

    task = store.add("Pay bills", category="Finance")
    console.print(f"  [green]✓[/green] add('Pay bills', category='Finance') -> id {task.id}")

    shopping = store.tasks_by_category("Shopping")
    console.print(
        "  [green]✓[/green] tasks_by_category('Shopping') -> "
        + ", ".join(str(t.id) for t in shopping)
    )
    console.print(f"  [green]✓[/green] complete(2) -> {store.complete(2)}")
    console.print(f"  [green]✓[/green] delete(99) -> {store.delete(99)}")
    console.print(
        "  [green]✓[/green] unique_categories() -> " + ", ".join(store.unique_categories())
    )
    console.print()

    ui.display_tasks(store.list_all(), "RESULT")


@main.command("config")
@click.pass_context
def show_config(ctx: click.Context) -> None:
    """Show the effective configuration."""
    config: TodoConfig = ctx.obj["config"]

    console.print(Panel.fit("[bold]Configuration[/bold]", title="quicktodo"))
    console.print()

    general_table = Table(title="General", show_header=True)
    general_table.add_column("Setting", style="cyan")
    general_table.add_column("Value", style="white")
    seed_icon = "[green]✓[/green]" if config.seed_sample_data else "[dim]✗[/dim]"
    general_table.add_row("Sample data", seed_icon)
    general_table.add_row("Log level", config.log_level)
    general_table.add_row("Date format", config.display.date_format)
    general_table.add_row("Message delay", f"{config.display.message_delay:g}s")
    general_table.add_row("Error delay", f"{config.display.error_delay:g}s")

    console.print(general_table)
    console.print()

    lists_table = Table(title="Pick Lists", show_header=True)
    lists_table.add_column("List", style="cyan")
    lists_table.add_column("Values", style="white")
    lists_table.add_row("Categories", ", ".join(config.categories) or "[dim]none[/dim]")
    lists_table.add_row("Tags", ", ".join(config.tags) or "[dim]none[/dim]")

    console.print(lists_table)


if __name__ == "__main__":
    main()
