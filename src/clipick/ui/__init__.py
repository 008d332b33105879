"""UI module."""

from .base import (
    CommandLineInput,
    CommandLinePermission,
    CommandLineSelection,
    PickerInput,
    prompt_title,
)
from .composer import PickerComposer
from .handlers import BaseSelectionHandler, MultiSelectionHandler, SingleSelectionHandler
from .panel_builder import calculate_visible_range, center_text
from .prompts import ConsolePrompter
from .renderer import ViewportRenderer

__all__ = [
    "BaseSelectionHandler",
    "CommandLineInput",
    "CommandLinePermission",
    "CommandLineSelection",
    "ConsolePrompter",
    "MultiSelectionHandler",
    "PickerComposer",
    "PickerInput",
    "SingleSelectionHandler",
    "ViewportRenderer",
    "calculate_visible_range",
    "center_text",
    "prompt_title",
]
