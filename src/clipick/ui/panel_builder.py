"""Shared utilities for laying out the scrolling option list."""

from rich.markup import escape

SELECTED_GLYPH = "[bright_green]●[/bright_green]"
UNSELECTED_GLYPH = "[grey74]○[/grey74]"
SCROLL_UP_INDICATOR = "[bright_green]↑[/bright_green]"
SCROLL_DOWN_INDICATOR = "[bright_green]↓[/bright_green]"


def displayable_count(rows: int, vertical_padding: int) -> int:
    """Number of option rows that fit between header and footer."""
    return max(0, rows - vertical_padding)


def calculate_visible_range(
    active_line: int,
    option_count: int,
    displayable: int,
    top_padding: int,
) -> tuple[int, int]:
    """Calculate the slice of options to draw.

    The window starts sliding once ``active_line`` passes the first screenful
    and always stays inside ``[0, option_count]``.

    Args:
        active_line: Screen line of the highlighted option
        option_count: Total number of options
        displayable: Option rows that fit on screen
        top_padding: Lines reserved above the list

    Returns:
        Tuple of (start, end) option indices, end exclusive
    """
    start = min(max(0, active_line - (displayable + top_padding)), option_count)
    end = min(start + displayable, option_count)
    return start, end


def center_text(text: str, width: int) -> str:
    """Left-pad text so it sits centred in ``width`` columns."""
    spaces = (width - len(text)) // 2
    return " " * max(0, spaces) + text


def format_option_label(title: str, is_active: bool) -> str:
    """Underline the active label, dim the rest."""
    label = escape(title)
    if is_active:
        return f"[underline]{label}[/underline]"
    return f"[grey74]{label}[/grey74]"


def format_glyph(is_selected: bool) -> str:
    return SELECTED_GLYPH if is_selected else UNSELECTED_GLYPH
