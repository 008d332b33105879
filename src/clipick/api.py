"""Public Python API for interactive terminal pickers.

Usage:
    from clipick import Picker

    picker = Picker()
    language = picker.single_selection("Pick a language", ["Python", "Go", "Rust"])
    toppings = picker.multi_selection("Toppings", ["Cheese", "Olives", "Basil"])
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from rich.console import Console
from rich.markup import escape

from clipick.config import Config
from clipick.models import PickerInfo, display_name
from clipick.ui.base import prompt_title
from clipick.ui.composer import PickerComposer
from clipick.ui.prompts import ConsolePrompter

if TYPE_CHECKING:
    from clipick.ui.base import PickerInput
    from clipick.ui.handlers import BaseSelectionHandler

T = TypeVar("T")

logger = logging.getLogger("clipick.api")


class PickerError(Exception):
    """Base class for errors raised by the pickers and prompts."""


class SelectionCancelledError(PickerError):
    """The user quit a required selection or refused a required permission."""

    def __init__(self, message: str = "Selection cancelled"):
        super().__init__(message)


class InputRequiredError(PickerError):
    """A required text prompt got an empty answer."""

    def __init__(self, message: str = "Input required"):
        super().__init__(message)


class InputClosedError(PickerError, EOFError):
    """Keyboard input ended before the picker got an answer."""

    def __init__(self, message: str = "Input closed"):
        super().__init__(message)


class Picker:
    """Interactive prompts and pickers on the real terminal."""

    def __init__(
        self,
        input_handler: PickerInput | None = None,
        config: Config | None = None,
        console: Console | None = None,
        prompter: ConsolePrompter | None = None,
    ) -> None:
        self.config = config or Config.load()
        self.console = console or Console()
        if input_handler is None:
            from clipick.ui.terminal import TerminalInput

            input_handler = TerminalInput()
        self.composer = PickerComposer(input_handler, self.config.padding)
        self.prompter = prompter or ConsolePrompter(
            self.console,
            permission_retries=self.config.permission_retries,
            input_retries=self.config.input_retries,
        )

    # --- input ---

    def get_input(self, prompt: Any) -> str:
        return self.prompter.get_input(prompt_title(prompt))

    def get_required_input(self, prompt: Any) -> str:
        answer = self.get_input(prompt)
        if not answer:
            raise InputRequiredError()
        return answer

    # --- permission ---

    def get_permission(self, prompt: Any) -> bool:
        return self.prompter.get_permission(prompt_title(prompt))

    def required_permission(self, prompt: Any) -> None:
        if not self.get_permission(prompt):
            raise SelectionCancelledError()

    # --- selection ---

    def single_selection(self, title: Any, items: Sequence[T]) -> T | None:
        info = PickerInfo(prompt_title(title), list(items))
        selection = self._run(self.composer.make_single_selection_handler, info)

        if selection is not None and self.config.show_results:
            self.console.print("\nclipick SingleSelection result:")
            self.console.print(f"  [green]✔[/green] {escape(display_name(selection))}\n")
        return selection

    def required_single_selection(self, title: Any, items: Sequence[T]) -> T:
        selection = self.single_selection(title, items)
        if selection is None:
            raise SelectionCancelledError()
        return selection

    def multi_selection(self, title: Any, items: Sequence[T]) -> list[T]:
        info = PickerInfo(prompt_title(title), list(items))
        selections = self._run(self.composer.make_multi_selection_handler, info)

        if selections and self.config.show_results:
            self.console.print("\nclipick MultiSelection results:\n")
            for item in selections:
                self.console.print(f" [green]✔[/green] {escape(display_name(item))}")
            self.console.print("")
        return selections

    def _run(self, make_handler: Callable[..., BaseSelectionHandler], info: PickerInfo) -> Any:
        """Build and run a handler, always handing the terminal back afterwards."""
        handler = None
        try:
            handler = make_handler(info, self.config.new_screen)
            return handler.capture_user_input()
        finally:
            if handler is not None:
                handler.end_selection()
            else:
                # Interrupted while the screen was being set up.
                self.composer.release_screen()
            logger.debug("Selection session closed")
