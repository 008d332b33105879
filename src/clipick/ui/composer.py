"""Wires selection state and a terminal driver into ready-to-run handlers."""

from typing import TypeVar

from clipick.models import Option, PickerInfo, PickerPadding
from clipick.state import SelectionState

from .base import PickerInput
from .handlers import MultiSelectionHandler, SingleSelectionHandler

T = TypeVar("T")


class PickerComposer:
    """Builds handlers around an injected terminal driver."""

    def __init__(self, input_handler: PickerInput, padding: PickerPadding | None = None):
        self.input_handler = input_handler
        self.padding = padding or PickerPadding()

    def make_single_selection_handler(
        self, info: PickerInfo[T], new_screen: bool = True
    ) -> SingleSelectionHandler[T]:
        state = self._make_state(info, new_screen, is_single_selection=True)
        return SingleSelectionHandler(state, self.input_handler, self.padding)

    def make_multi_selection_handler(
        self, info: PickerInfo[T], new_screen: bool = True
    ) -> MultiSelectionHandler[T]:
        state = self._make_state(info, new_screen, is_single_selection=False)
        return MultiSelectionHandler(state, self.input_handler, self.padding)

    def release_screen(self) -> None:
        """Undo screen setup when no handler was built to do it."""
        self.input_handler.exit_alternate_screen()
        self.input_handler.restore_normal_input()

    def _make_state(
        self, info: PickerInfo[T], new_screen: bool, is_single_selection: bool
    ) -> SelectionState[T]:
        self._configure_screen(new_screen)
        row, _ = self.input_handler.read_cursor_position()
        top_line = row + self.padding.top
        options = [Option(item, top_line + i) for i, item in enumerate(info.items)]
        return SelectionState(options, top_line, info.title, is_single_selection)

    def _configure_screen(self, new_screen: bool) -> None:
        if new_screen:
            self.input_handler.enter_alternate_screen()
        self.input_handler.cursor_off()
        self.input_handler.clear_screen()
        self.input_handler.move_to_home()
