"""Protocols for swappable terminal drivers and picker front-ends."""

from collections.abc import Sequence
from typing import Any, Protocol, TypeVar

from clipick.models import Direction, SpecialKey

T = TypeVar("T")


class PickerInput(Protocol):
    """Terminal capabilities the selection handlers draw and read through.

    Rows and columns are 1-based, matching ANSI cursor addressing.
    """

    def read_screen_size(self) -> tuple[int, int]:
        """Return (rows, cols)."""
        ...

    def read_cursor_position(self) -> tuple[int, int]:
        """Return (row, col) of the cursor."""
        ...

    def key_pressed(self) -> bool:
        """Non-blocking check for pending input."""
        ...

    def read_direction_key(self) -> Direction | None:
        """Read an arrow key, None for anything else."""
        ...

    def read_special_key(self) -> SpecialKey | None:
        """Read enter/space/quit, None for anything else."""
        ...

    def write(self, text: str) -> None: ...

    def move_to(self, row: int, col: int) -> None: ...

    def move_right(self) -> None: ...

    def move_to_home(self) -> None: ...

    def clear_screen(self) -> None: ...

    def clear_input_buffer(self) -> None: ...

    def enter_alternate_screen(self) -> None: ...

    def exit_alternate_screen(self) -> None: ...

    def restore_normal_input(self) -> None:
        """Show the cursor and put the terminal back in its original mode."""
        ...

    def cursor_off(self) -> None: ...

    def cursor_on(self) -> None: ...


class CommandLineInput(Protocol):
    """Free-text prompts."""

    def get_input(self, prompt: Any) -> str:
        """Ask for text, "" if nothing was typed."""
        ...

    def get_required_input(self, prompt: Any) -> str:
        """Ask for text, raising InputRequiredError if nothing was typed."""
        ...


class CommandLinePermission(Protocol):
    """Yes/no prompts."""

    def get_permission(self, prompt: Any) -> bool: ...

    def required_permission(self, prompt: Any) -> None:
        """Raise SelectionCancelledError unless the user says yes."""
        ...


class CommandLineSelection(Protocol):
    """Item pickers."""

    def single_selection(self, title: Any, items: Sequence[T]) -> T | None:
        """Return the chosen item or None if cancelled."""
        ...

    def required_single_selection(self, title: Any, items: Sequence[T]) -> T:
        """Return the chosen item, raising SelectionCancelledError if cancelled."""
        ...

    def multi_selection(self, title: Any, items: Sequence[T]) -> list[T]:
        """Return chosen items in list order; quitting returns []."""
        ...


def prompt_title(prompt: Any) -> str:
    """Resolve a prompt given as a string or an object with a ``title``."""
    if isinstance(prompt, str):
        return prompt
    return prompt.title
