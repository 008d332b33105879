"""Tests for full-frame rendering."""

from clipick.models import PickerPadding
from clipick.testing import ScriptedInput
from clipick.ui.panel_builder import (
    SCROLL_DOWN_INDICATOR,
    SCROLL_UP_INDICATOR,
    SELECTED_GLYPH,
    UNSELECTED_GLYPH,
    center_text,
)
from clipick.ui.renderer import ViewportRenderer


def _render(state, screen_size=(26, 100)):
    out = ScriptedInput(screen_size=screen_size)
    bounds = ViewportRenderer(out, PickerPadding()).render(state)
    return out, bounds


class TestHeaderAndFooter:
    def test_header_order(self, make_state):
        state = make_state(top_line=5)
        out, _ = _render(state)

        header = out.written_text[:5]
        assert header == [center_text(state.top_line_text, 100), "\n", "\n", state.title, "\n"]
        assert header[0].strip() == "clipick (single-selection)"

    def test_footer_without_scroll_indicator(self, make_state):
        state = make_state(items=["A", "B"], top_line=5)
        out, _ = _render(state)

        assert out.written_text[-3:] == ["\n", "\n", state.bottom_line_text]

    def test_every_render_is_a_full_repaint(self, make_state):
        state = make_state(top_line=5)
        out = ScriptedInput()
        renderer = ViewportRenderer(out, PickerPadding())

        renderer.render(state)
        renderer.render(state)

        assert out.clear_count == 2

    def test_mode_labels(self, make_state):
        out, _ = _render(make_state(top_line=5, single=False))
        assert "clipick (multi-selection)" in out.written_text[0]
        assert out.written_text[-1] == (
            "Select multiple items with 'spacebar'. Tap 'enter' to finish."
        )

    def test_title_markup_is_escaped(self, make_state):
        out, _ = _render(make_state(top_line=5, title="[red]Pick[/red]"))
        assert out.written_text[3] == "\\[red]Pick\\[/red]"


class TestScrolling:
    def test_first_screenful_shows_down_indicator_only(self, make_state):
        state = make_state(top_line=5)
        out, (start, end) = _render(state)

        assert (start, end) == (0, 20)
        assert SCROLL_UP_INDICATOR not in out.written_text
        assert out.written_text[-4:] == ["\n", SCROLL_DOWN_INDICATOR, "\n", state.bottom_line_text]

    def test_options_drawn_below_top_padding(self, make_state):
        out, _ = _render(make_state(top_line=5))
        assert out.moves[0] == (5, 0)
        assert out.moves[-1] == (24, 0)
        assert len(out.moves) == 20

    def test_last_option_scrolls_into_view(self, make_state):
        state = make_state(top_line=5)
        state.active_line = state.range_of_lines[1]
        out, (start, end) = _render(state)

        assert (start, end) == (5, 25)
        assert SCROLL_UP_INDICATOR in out.written_text
        assert SCROLL_DOWN_INDICATOR not in out.written_text
        assert "[underline]Item 25[/underline]" in out.written_text

    def test_short_list_has_no_indicators(self, make_state):
        out, (start, end) = _render(make_state(items=["A", "B", "C"], top_line=5))

        assert (start, end) == (0, 3)
        assert SCROLL_UP_INDICATOR not in out.written_text
        assert SCROLL_DOWN_INDICATOR not in out.written_text

    def test_empty_list_draws_header_and_footer(self, make_state):
        state = make_state(items=[], top_line=5)
        out, (start, end) = _render(state)

        assert start == end == 0
        assert out.moves == []
        assert out.written_text[-1] == state.bottom_line_text


class TestGlyphs:
    def test_single_mode_fills_only_active_line(self, make_state):
        state = make_state(top_line=5)
        state.active_line = 7
        out, _ = _render(state)

        assert out.written_text.count(SELECTED_GLYPH) == 1
        glyph_index = out.written_text.index(SELECTED_GLYPH)
        assert out.written_text[glyph_index + 1] == "[underline]Item 3[/underline]"

    def test_multi_mode_fills_toggled_options(self, make_state):
        state = make_state(top_line=5, single=False)
        state.toggle_selection(6)
        state.toggle_selection(8)
        out, _ = _render(state)

        assert out.written_text.count(SELECTED_GLYPH) == 2
        assert out.written_text.count(UNSELECTED_GLYPH) == 18
        assert "[underline]Item 1[/underline]" in out.written_text
        assert "[grey74]Item 2[/grey74]" in out.written_text
