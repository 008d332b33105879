"""Tests for the MockPicker stand-in."""

import pytest

from clipick import InputRequiredError, SelectionCancelledError
from clipick.testing import (
    MockInputResult,
    MockPermissionResult,
    MockPicker,
    MockSelectionResult,
)

FRUITS = ["Apple", "Banana", "Cherry"]
COLORS = ["Red", "Green", "Blue", "Yellow"]


class TestMockInput:
    def test_ordered_then_default(self):
        mock = MockPicker(input_result=MockInputResult("default", ["Alice", "Bob"]))

        assert mock.get_input("Name:") == "Alice"
        assert mock.get_input("Name:") == "Bob"
        assert mock.get_input("Name:") == "default"

    def test_keyed_by_prompt(self):
        mock = MockPicker(
            input_result=MockInputResult(responses={"Name:": "Alice", "Email:": "a@x.io"})
        )

        assert mock.get_input("Email:") == "a@x.io"
        assert mock.get_input("Name:") == "Alice"
        assert mock.get_input("Other:") == ""

    def test_required_input(self):
        mock = MockPicker(input_result=MockInputResult(responses=["Alice", ""]))

        assert mock.get_required_input("Name:") == "Alice"
        with pytest.raises(InputRequiredError):
            mock.get_required_input("Name:")


class TestMockPermission:
    def test_ordered_then_default(self):
        mock = MockPicker(permission_result=MockPermissionResult(False, [True, False, True]))

        assert [mock.get_permission("Go?") for _ in range(4)] == [True, False, True, False]

    def test_grants_by_default(self):
        assert MockPicker().get_permission("Go?") is True

    def test_keyed_by_prompt(self):
        mock = MockPicker(
            permission_result=MockPermissionResult(responses={"Continue?": True, "Delete?": False})
        )

        assert mock.get_permission("Delete?") is False
        assert mock.get_permission("Continue?") is True

    def test_required_permission(self):
        mock = MockPicker(permission_result=MockPermissionResult(responses=[True, False]))

        mock.required_permission("Continue?")
        with pytest.raises(SelectionCancelledError):
            mock.required_permission("Continue?")


class TestMockSingleSelection:
    def test_ordered_with_cancel_and_default(self):
        mock = MockPicker(selection_result=MockSelectionResult(0, single_responses=[1, None, 2]))

        assert mock.single_selection("Pick:", FRUITS) == "Banana"
        assert mock.single_selection("Pick:", FRUITS) is None
        assert mock.single_selection("Pick:", FRUITS) == "Cherry"
        assert mock.single_selection("Pick:", FRUITS) == "Apple"

    def test_out_of_range_is_none(self):
        mock = MockPicker(selection_result=MockSelectionResult(single_responses=[10, -1]))

        assert mock.single_selection("Pick:", FRUITS) is None
        assert mock.single_selection("Pick:", FRUITS) is None

    def test_empty_items(self):
        assert MockPicker().single_selection("Pick:", []) is None

    def test_keyed_by_prompt(self):
        mock = MockPicker(
            selection_result=MockSelectionResult(single_responses={"Fruit:": 2, "None:": None})
        )

        assert mock.single_selection("Fruit:", FRUITS) == "Cherry"
        assert mock.single_selection("None:", FRUITS) is None
        assert mock.single_selection("Missing:", FRUITS) == "Apple"

    def test_required_single_selection(self):
        mock = MockPicker(selection_result=MockSelectionResult(single_responses=[1, None]))

        assert mock.required_single_selection("Color:", COLORS) == "Green"
        with pytest.raises(SelectionCancelledError):
            mock.required_single_selection("Color:", COLORS)


class TestMockMultiSelection:
    def test_ordered(self):
        mock = MockPicker(
            selection_result=MockSelectionResult(
                multi_responses=[[0, 2], [1, 3], [], [0, 10, 2]]
            )
        )

        assert mock.multi_selection("Colors:", COLORS) == ["Red", "Blue"]
        assert mock.multi_selection("Colors:", COLORS) == ["Green", "Yellow"]
        assert mock.multi_selection("Colors:", COLORS) == []
        assert mock.multi_selection("Colors:", COLORS) == ["Red", "Blue"]
        assert mock.multi_selection("Colors:", COLORS) == []

    def test_keyed_by_prompt(self):
        mock = MockPicker(
            selection_result=MockSelectionResult(multi_responses={"Colors:": [3, 1]})
        )

        assert mock.multi_selection("Colors:", COLORS) == ["Yellow", "Green"]
        assert mock.multi_selection("Other:", COLORS) == []
