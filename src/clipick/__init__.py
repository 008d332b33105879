"""clipick - arrow-key pickers for command-line programs."""

from clipick.api import (
    InputClosedError,
    InputRequiredError,
    Picker,
    PickerError,
    SelectionCancelledError,
)
from clipick.models import DisplayableItem, Option, PickerInfo, PickerPadding

__version__ = "0.1.0"

__all__ = [
    "DisplayableItem",
    "InputClosedError",
    "InputRequiredError",
    "Option",
    "Picker",
    "PickerError",
    "PickerInfo",
    "PickerPadding",
    "SelectionCancelledError",
]
