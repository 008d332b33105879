"""Key-driven selection loops for single and multi pickers."""

import logging
from typing import Generic, TypeVar

from clipick.models import Direction, PickerPadding, SpecialKey
from clipick.state import SelectionState

from .base import PickerInput
from .renderer import ViewportRenderer

T = TypeVar("T")

logger = logging.getLogger("clipick.session")


class BaseSelectionHandler(Generic[T]):
    """Navigation, rendering, and teardown shared by both pickers."""

    def __init__(
        self,
        state: SelectionState[T],
        input_handler: PickerInput,
        padding: PickerPadding | None = None,
    ):
        self.state = state
        self.input_handler = input_handler
        self.padding = padding or PickerPadding()
        self.renderer = ViewportRenderer(input_handler, self.padding)

    def end_selection(self) -> None:
        """Leave the alternate screen and give the terminal back."""
        self.input_handler.exit_alternate_screen()
        self.input_handler.restore_normal_input()

    def scroll_and_render_options(self) -> None:
        self.renderer.render(self.state)

    def handle_arrow_keys(self) -> None:
        direction = self.input_handler.read_direction_key()
        if direction is None:
            return

        minimum, maximum = self.state.range_of_lines
        if direction is Direction.UP:
            if self.state.active_line > minimum:
                self._move(-1, maximum)
        elif direction is Direction.DOWN:
            if self.state.options:
                self._move(1, maximum)

    def _move(self, delta: int, maximum: int) -> None:
        target = self.state.active_line + delta
        if target > maximum:
            logger.debug("Active line clamped at %d", maximum)
        self.state.active_line = max(self.state.top_line, min(maximum, target))
        self.scroll_and_render_options()


class SingleSelectionHandler(BaseSelectionHandler[T]):
    """Returns the highlighted item on enter, None on quit."""

    def capture_user_input(self) -> T | None:
        logger.debug("Single selection started with %d options", len(self.state.options))
        self.scroll_and_render_options()
        while True:
            self.input_handler.clear_input_buffer()
            if not self.input_handler.key_pressed():
                continue

            key = self.input_handler.read_special_key()
            if key is SpecialKey.ENTER:
                option = self.state.active_option
                logger.debug("Single selection finished: %s", option.title if option else None)
                return option.item if option else None
            if key is SpecialKey.QUIT:
                logger.debug("Single selection cancelled")
                return None
            if key is SpecialKey.SPACE:
                continue

            self.handle_arrow_keys()


class MultiSelectionHandler(BaseSelectionHandler[T]):
    """Toggles items with space; enter returns them, quit returns nothing."""

    def capture_user_input(self) -> list[T]:
        logger.debug("Multi selection started with %d options", len(self.state.options))
        self.scroll_and_render_options()
        while True:
            self.input_handler.clear_input_buffer()
            if not self.input_handler.key_pressed():
                continue

            key = self.input_handler.read_special_key()
            if key is SpecialKey.ENTER:
                selected = [o.item for o in self.state.selected_options]
                logger.debug("Multi selection finished with %d items", len(selected))
                return selected
            if key is SpecialKey.SPACE:
                self.state.toggle_selection(self.state.active_line)
                self.scroll_and_render_options()
                continue
            if key is SpecialKey.QUIT:
                logger.debug("Multi selection quit, discarding selections")
                return []

            self.handle_arrow_keys()
