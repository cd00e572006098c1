"""Console helpers: headers, menus, validated prompts and task tables."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable, Sequence

import click
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from quicktodo.config import DisplayConfig
from quicktodo.models import Task

HEADER_WIDTH = 38

MENU_OPTIONS: list[str] = [
    "Add todo",
    "Mark as done",
    "Delete todo",
    "Filter by category",
    "Exit",
]


class ConsoleUI:
    """Reads validated input and renders output for the interactive session.

    Input goes through ``click.prompt`` so it can be driven by click's test
    runner; output goes through a rich ``Console``.
    """

    def __init__(
        self,
        console: Console | None = None,
        display: DisplayConfig | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.console = console or Console(highlight=False)
        self.display = display or DisplayConfig()
        self._sleep = sleep or time.sleep

    # -------------------- output --------------------

    def clear(self) -> None:
        """Clear the screen when attached to a terminal."""
        if self.console.is_terminal:
            self.console.clear()

    def display_header(self, title: str) -> None:
        """Print the title centered inside a double-line box."""
        self.console.print(
            Panel(
                Text(title, justify="center", style="bold"),
                box=box.DOUBLE,
                width=HEADER_WIDTH,
            )
        )
        self.console.print()

    def display_message(self, message: str | Text, delay: float | None = None) -> None:
        """Print a message and hold it on screen for ``delay`` seconds."""
        self.console.print(message)
        if delay is None:
            delay = self.display.message_delay
        if delay > 0:
            self._sleep(delay)

    def display_error(self, message: str) -> None:
        """Print an error message and hold it for the error delay."""
        # Exception text may contain square brackets; keep it out of markup
        self.display_message(Text(message, style="red"), self.display.error_delay)

    def display_menu(self) -> None:
        """Print the main menu."""
        self.console.print()
        for number, label in enumerate(MENU_OPTIONS, 1):
            self.console.print(f"{number}. {label}")

    def display_tasks(self, tasks: Sequence[Task], title: str | None = None) -> None:
        """Render tasks as a table, optionally under a boxed header."""
        if title:
            self.display_header(title)

        if not tasks:
            self.console.print("[dim]No tasks found.[/dim]")
            return

        table = Table(show_header=True, box=box.SIMPLE)
        table.add_column("ID", style="cyan", justify="right")
        table.add_column("Done", width=4)
        table.add_column("Title", style="white")
        table.add_column("Created", style="dim")
        table.add_column("Category", style="magenta")
        table.add_column("Tags", style="dim")

        for task in tasks:
            done = "[green]✓[/green]" if task.is_completed else "[dim]○[/dim]"
            table.add_row(
                str(task.id),
                done,
                Text(task.title),
                task.created_date.strftime(self.display.date_format),
                Text(task.category),
                Text(", ".join(task.tags)),
            )

        self.console.print(table)

    # -------------------- input --------------------

    def _read_line(self, prompt: str) -> str:
        return click.prompt(prompt, default="", show_default=False, prompt_suffix=" ")

    def read_string(self, prompt: str) -> str:
        """Prompt until a non-blank string is entered."""
        while True:
            value = self._read_line(prompt)
            if value.strip():
                return value
            self.display_message("Input cannot be empty. Please try again.")

    def read_integer(self, prompt: str) -> int:
        """Prompt until an integer is entered."""
        while True:
            value = self._read_line(prompt)
            try:
                return int(value.strip())
            except ValueError:
                self.display_message("Invalid input. Please enter a number.")

    def select_from_list(
        self,
        prompt: str,
        options: Iterable[str],
        include_none: bool = True,
    ) -> str | None:
        """Let the user pick one option by number.

        Returns None when the trailing "None" entry is chosen.
        """
        choices = list(options)
        upper = len(choices) + 1 if include_none else len(choices)

        while True:
            self.console.print()
            self.console.print(prompt)
            for number, option in enumerate(choices, 1):
                self.console.print(f"{number}. {option}", markup=False)
            if include_none:
                self.console.print(f"{len(choices) + 1}. None")

            selection = self.read_integer(f"Select option (1-{upper}):")
            if 1 <= selection <= len(choices):
                return choices[selection - 1]
            if include_none and selection == len(choices) + 1:
                return None

            self.display_message("Invalid selection. Please try again.")

    def select_multiple_from_list(self, prompt: str, options: Iterable[str]) -> list[str]:
        """Let the user pick any number of options as comma separated numbers.

        ``0`` selects nothing; entries that are not valid option numbers are
        ignored.
        """
        choices = list(options)

        self.console.print()
        self.console.print(prompt)
        for number, option in enumerate(choices, 1):
            self.console.print(f"{number}. {option}", markup=False)
        self.console.print()
        self.console.print("Enter numbers separated by commas (e.g., 1,3,4) or 0 to select none:")

        raw = self.read_string("Selection:")
        if raw.strip() == "0":
            return []

        selected: list[str] = []
        for part in raw.split(","):
            try:
                index = int(part.strip())
            except ValueError:
                continue
            if 1 <= index <= len(choices):
                selected.append(choices[index - 1])
        return selected
