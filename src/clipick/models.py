"""Data models for clipick."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class DisplayableItem(Protocol):
    """Anything that can label itself in a picker list."""

    @property
    def display_name(self) -> str: ...


T = TypeVar("T")


def display_name(item: Any) -> str:
    """Return the label for an item. Plain strings label themselves."""
    if isinstance(item, str):
        return item
    return item.display_name


class Direction(Enum):
    """Arrow keys understood by the pickers."""

    UP = "up"
    DOWN = "down"


class SpecialKey(Enum):
    """Non-navigation keys understood by the pickers."""

    ENTER = "enter"
    SPACE = "space"
    QUIT = "quit"


@dataclass(frozen=True)
class PickerPadding:
    """Lines reserved above and below the option list."""

    top: int = 4
    bottom: int = 2

    def __post_init__(self) -> None:
        if self.top < 2:
            raise ValueError(f"top padding must be at least 2, got {self.top}")
        if self.bottom < 0:
            raise ValueError(f"bottom padding must not be negative, got {self.bottom}")

    @property
    def vertical(self) -> int:
        return self.top + self.bottom


@dataclass
class Option(Generic[T]):
    """One item in the list, pinned to the screen line it was created on."""

    item: T
    line: int
    is_selected: bool = False

    @property
    def title(self) -> str:
        return display_name(self.item)


@dataclass(frozen=True)
class PickerInfo(Generic[T]):
    """Title and items for one picker session."""

    title: str
    items: list[T] = field(default_factory=list)
