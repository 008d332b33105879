"""Test doubles for code that uses clipick.

``ScriptedInput`` replaces the terminal driver under the real handlers.
``MockPicker`` replaces the whole ``Picker`` with pre-programmed answers.

Example:
    mock = MockPicker(
        selection_result=MockSelectionResult(single_responses=[1, None]),
    )
    mock.single_selection("Fruit", ["Apple", "Banana"])  # "Banana"
    mock.single_selection("Fruit", ["Apple", "Banana"])  # None (cancelled)
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar

from clipick.api import InputRequiredError, SelectionCancelledError
from clipick.models import Direction, SpecialKey
from clipick.ui.base import prompt_title

T = TypeVar("T")

ScriptKey = Direction | SpecialKey | None


class ScriptExhaustedError(RuntimeError):
    """A handler asked for another key after the script ran out."""


class ScriptedInput:
    """Deterministic PickerInput that replays a fixed key script.

    Each script entry is one key press: a Direction, a SpecialKey, or None
    for a key the pickers don't recognise.
    """

    def __init__(
        self,
        keys: Sequence[ScriptKey] = (),
        screen_size: tuple[int, int] = (26, 100),
        cursor_position: tuple[int, int] = (1, 1),
    ):
        self.keys: list[ScriptKey] = list(keys)
        self.screen_size = screen_size
        self.cursor_position = cursor_position
        self.written_text: list[str] = []
        self.moves: list[tuple[int, int]] = []
        self.clear_count = 0
        self.entered_alternate_screen = False
        self.exited_alternate_screen = False
        self.restored_normal_input = False
        self.cursor_hidden = False

    def press(self, *keys: ScriptKey) -> None:
        self.keys.extend(keys)

    @property
    def output(self) -> str:
        return "".join(self.written_text)

    def read_screen_size(self) -> tuple[int, int]:
        return self.screen_size

    def read_cursor_position(self) -> tuple[int, int]:
        return self.cursor_position

    def key_pressed(self) -> bool:
        if not self.keys:
            raise ScriptExhaustedError("No scripted keys left")
        return True

    def read_special_key(self) -> SpecialKey | None:
        if self.keys and isinstance(self.keys[0], SpecialKey):
            return self.keys.pop(0)
        return None

    def read_direction_key(self) -> Direction | None:
        if not self.keys:
            return None
        key = self.keys.pop(0)
        return key if isinstance(key, Direction) else None

    def write(self, text: str) -> None:
        self.written_text.append(text)

    def move_to(self, row: int, col: int) -> None:
        self.moves.append((row, col))

    def move_right(self) -> None:
        pass

    def move_to_home(self) -> None:
        pass

    def clear_screen(self) -> None:
        self.clear_count += 1

    def clear_input_buffer(self) -> None:
        pass

    def enter_alternate_screen(self) -> None:
        self.entered_alternate_screen = True

    def exit_alternate_screen(self) -> None:
        self.exited_alternate_screen = True

    def restore_normal_input(self) -> None:
        self.restored_normal_input = True
        self.cursor_hidden = False

    def cursor_off(self) -> None:
        self.cursor_hidden = True

    def cursor_on(self) -> None:
        self.cursor_hidden = False


@dataclass
class MockInputResult:
    """Text answers: a list consumed in order, or a dict keyed by prompt."""

    default_value: str = ""
    responses: list[str] | dict[str, str] = field(default_factory=list)


@dataclass
class MockPermissionResult:
    """Yes/no answers: a list consumed in order, or a dict keyed by prompt."""

    grant_by_default: bool = True
    responses: list[bool] | dict[str, bool] = field(default_factory=list)


@dataclass
class MockSelectionResult:
    """Selection answers given as indices into the items.

    A single-selection index of None means the user cancelled.
    """

    default_index: int | None = 0
    single_responses: list[int | None] | dict[str, int | None] = field(default_factory=list)
    multi_responses: list[list[int]] | dict[str, list[int]] = field(default_factory=list)


def _next_response(responses: list | dict, prompt: str, default: Any) -> Any:
    if isinstance(responses, dict):
        return responses.get(prompt, default)
    if not responses:
        return default
    return responses.pop(0)


class MockPicker:
    """Picker stand-in that answers from pre-programmed results."""

    def __init__(
        self,
        input_result: MockInputResult | None = None,
        permission_result: MockPermissionResult | None = None,
        selection_result: MockSelectionResult | None = None,
    ):
        self.input_result = input_result or MockInputResult()
        self.permission_result = permission_result or MockPermissionResult()
        self.selection_result = selection_result or MockSelectionResult()

    def get_input(self, prompt: Any) -> str:
        result = self.input_result
        return _next_response(result.responses, prompt_title(prompt), result.default_value)

    def get_required_input(self, prompt: Any) -> str:
        answer = self.get_input(prompt)
        if not answer:
            raise InputRequiredError()
        return answer

    def get_permission(self, prompt: Any) -> bool:
        result = self.permission_result
        return _next_response(result.responses, prompt_title(prompt), result.grant_by_default)

    def required_permission(self, prompt: Any) -> None:
        if not self.get_permission(prompt):
            raise SelectionCancelledError()

    def single_selection(self, title: Any, items: Sequence[T]) -> T | None:
        result = self.selection_result
        index = _next_response(result.single_responses, prompt_title(title), result.default_index)
        if index is None or not 0 <= index < len(items):
            return None
        return items[index]

    def required_single_selection(self, title: Any, items: Sequence[T]) -> T:
        selection = self.single_selection(title, items)
        if selection is None:
            raise SelectionCancelledError()
        return selection

    def multi_selection(self, title: Any, items: Sequence[T]) -> list[T]:
        indices = _next_response(self.selection_result.multi_responses, prompt_title(title), [])
        return [items[i] for i in indices if 0 <= i < len(items)]
