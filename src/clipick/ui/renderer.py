"""Full-frame rendering of a selection session."""

import logging

from rich.markup import escape

from clipick.models import Option, PickerPadding
from clipick.state import SelectionState

from .base import PickerInput
from .panel_builder import (
    SCROLL_DOWN_INDICATOR,
    SCROLL_UP_INDICATOR,
    calculate_visible_range,
    center_text,
    displayable_count,
    format_glyph,
    format_option_label,
)

logger = logging.getLogger("clipick.render")


class ViewportRenderer:
    """Repaints the whole picker on every call; keeps no memory of prior frames."""

    def __init__(self, input_handler: PickerInput, padding: PickerPadding):
        self.input_handler = input_handler
        self.padding = padding

    def render(self, state: SelectionState) -> tuple[int, int]:
        """Draw header, visible options, and footer. Returns the (start, end) drawn."""
        rows, cols = self.input_handler.read_screen_size()
        displayable = displayable_count(rows, self.padding.vertical)
        start, end = calculate_visible_range(
            state.active_line, len(state.options), displayable, self.padding.top
        )

        self._render_header(state, start, cols)
        for i in range(start, end):
            option = state.options[i]
            row = i - start + (self.padding.top + 1)
            self._render_option(state, option, row)
        self._render_footer(state, end)

        logger.debug("Rendered options %d-%d of %d", start, end, len(state.options))
        return start, end

    def _render_header(self, state: SelectionState, start: int, columns: int) -> None:
        out = self.input_handler
        out.clear_screen()
        out.move_to_home()
        out.write(center_text(state.top_line_text, columns))
        out.write("\n")
        out.write("\n")
        out.write(escape(state.title))
        out.write("\n")
        if start > 0:
            out.write(SCROLL_UP_INDICATOR)

    def _render_footer(self, state: SelectionState, end: int) -> None:
        out = self.input_handler
        out.write("\n")
        if end < len(state.options):
            out.write(SCROLL_DOWN_INDICATOR)
        out.write("\n")
        out.write(state.bottom_line_text)

    def _render_option(self, state: SelectionState, option: Option, row: int) -> None:
        out = self.input_handler
        out.move_to(row, 0)
        out.move_right()
        out.write(format_glyph(state.show_as_selected(option)))
        out.move_right()
        out.write(format_option_label(option.title, option.line == state.active_line))
