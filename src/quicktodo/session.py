"""Interactive menu loop that drives a TaskStore from the console."""

from __future__ import annotations

import logging

import click

from quicktodo.config import TodoConfig
from quicktodo.store import TaskStore, ValidationError
from quicktodo.ui import ConsoleUI

logger = logging.getLogger(__name__)

ALL_TASKS = "All Tasks"


class TodoSession:
    """One interactive run of the to-do manager.

    The session owns no task state; every read and write goes through the
    store it was given.
    """

    def __init__(self, store: TaskStore, ui: ConsoleUI, config: TodoConfig | None = None) -> None:
        self.store = store
        self.ui = ui
        self.config = config or TodoConfig()
        self.running = False

    def run(self) -> None:
        """Show tasks and the menu until the user exits or input ends."""
        self.running = True
        actions = {
            1: self.add_todo,
            2: self.mark_done,
            3: self.delete_todo,
            4: self.filter_by_category,
            5: self.stop,
        }

        while self.running:
            self.display_tasks()
            self.ui.display_menu()

            try:
                choice = self.ui.read_integer("\nChoice:")
            except click.Abort:
                logger.debug("Input closed, leaving session")
                break

            action = actions.get(choice)
            if action is None:
                self.ui.display_message("Invalid choice! Please try again.")
                continue

            try:
                action()
            except click.Abort:
                logger.debug("Input closed, leaving session")
                break
            except Exception as e:
                logger.exception("Menu action %d failed", choice)
                self.ui.display_error(f"An error occurred: {e}")

    def stop(self) -> None:
        """End the loop after the current action."""
        self.running = False

    def display_tasks(self) -> None:
        """Show every task under the main header."""
        self.ui.clear()
        self.ui.display_tasks(self.store.list_all(), "TODO MANAGER")

    def add_todo(self) -> None:
        """Collect title, category and tags, then add the task."""
        self.ui.clear()
        self.ui.display_header("ADD NEW TODO")

        title = self.ui.read_string("Enter todo title:")
        category = self.ui.select_from_list("Select a category:", self.config.categories)
        tags = self.ui.select_multiple_from_list(
            "Select tags (multiple allowed):", self.config.tags
        )

        try:
            task = self.store.add(title, category or "", tags)
        except ValidationError as e:
            self.ui.display_error(f"Error: {e}")
            return

        logger.info("Added task %d", task.id)
        self.ui.display_message("Todo added successfully!")

    def mark_done(self) -> None:
        """Mark the task with the entered ID as completed."""
        self.ui.clear()
        self.ui.display_header("MARK AS COMPLETE")

        task_id = self.ui.read_integer("Enter todo ID:")
        if self.store.complete(task_id):
            self.ui.display_message("Todo marked as done!")
        else:
            self.ui.display_message("Todo not found!")

    def delete_todo(self) -> None:
        """Delete the task with the entered ID."""
        self.ui.clear()
        self.ui.display_header("DELETE TODO")

        task_id = self.ui.read_integer("Enter todo ID to delete:")
        if self.store.delete(task_id):
            self.ui.display_message("Todo deleted successfully!")
        else:
            self.ui.display_message("Todo not found!")

    def filter_by_category(self) -> None:
        """Pick one of the categories in use and list its tasks."""
        self.ui.clear()
        self.ui.display_header("FILTER BY CATEGORY")

        categories = self.store.unique_categories()
        if not categories:
            self.ui.display_message("No categories found!", self.config.display.error_delay)
            return

        selected = self.ui.select_from_list(
            "Select a category to filter by:",
            [*categories, ALL_TASKS],
            include_none=False,
        )

        self.ui.clear()
        if selected is None or selected == ALL_TASKS:
            self.display_tasks()
        else:
            self.ui.display_tasks(
                self.store.tasks_by_category(selected),
                f"TASKS IN {selected.upper()}",
            )

        click.pause("\nPress any key to return to main menu...")
