"""Selection state for a single picker session."""

from typing import Generic, TypeVar

from clipick.models import Option

T = TypeVar("T")

APP_LABEL = "clipick"


class SelectionState(Generic[T]):
    """Options, title, and the highlighted line for one picker session.

    The state never clamps ``active_line`` itself; the handlers own the bounds.
    """

    def __init__(
        self,
        options: list[Option[T]],
        top_line: int,
        title: str,
        is_single_selection: bool,
    ):
        self.options = options
        self.top_line = top_line
        self.title = title
        self.is_single_selection = is_single_selection
        self.active_line = top_line

    @property
    def selected_options(self) -> list[Option[T]]:
        return [o for o in self.options if o.is_selected]

    @property
    def range_of_lines(self) -> tuple[int, int]:
        """(minimum, maximum) line held by an option."""
        return self.top_line, self.top_line + len(self.options) - 1

    @property
    def active_option(self) -> Option[T] | None:
        for option in self.options:
            if option.line == self.active_line:
                return option
        return None

    @property
    def top_line_text(self) -> str:
        mode = "single" if self.is_single_selection else "multi"
        return f"{APP_LABEL} ({mode}-selection)"

    @property
    def bottom_line_text(self) -> str:
        if self.is_single_selection:
            return "Tap 'enter' to select. Type 'q' to quit."
        return "Select multiple items with 'spacebar'. Tap 'enter' to finish."

    def show_as_selected(self, option: Option[T]) -> bool:
        """Single mode fills the active line; multi mode fills toggled options."""
        if self.is_single_selection:
            return option.line == self.active_line
        return option.is_selected

    def toggle_selection(self, line: int) -> None:
        """Flip the option at ``line``. Unknown lines are ignored."""
        for option in self.options:
            if option.line == line:
                option.is_selected = not option.is_selected
                return
