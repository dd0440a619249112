"""Unit tests for SelectableList selection and activation ordering."""

from __future__ import annotations

import itertools

import pytest

from pomotrack_cli.models.selectable import SelectableList
from pomotrack_cli.models.task import Task


class RecordingItem:
    """Activatable item that appends its hook calls to a shared log."""

    def __init__(self, name: str, log: list[tuple[str, str]]):
        self.name = name
        self.log = log

    def activate(self) -> None:
        self.log.append(("activate", self.name))

    def deactivate(self) -> None:
        self.log.append(("deactivate", self.name))


def _make_list(names, log):
    return SelectableList(RecordingItem(n, log) for n in names)


# ---------------------------------------------------------------------------
# Basics
# ---------------------------------------------------------------------------


class TestSelectableListBasics:
    def test_starts_unselected(self):
        items = _make_list("abc", [])
        assert items.selected_index is None
        assert items.selected() is None
        assert len(items) == 3

    def test_items_are_fixed_tuple(self):
        items = _make_list("ab", [])
        assert isinstance(items.items, tuple)
        assert [i.name for i in items] == ["a", "b"]
        assert items[1].name == "b"

    def test_select_out_of_range_raises(self):
        log = []
        items = _make_list("ab", log)
        with pytest.raises(IndexError):
            items.select(2)
        with pytest.raises(IndexError):
            items.select(-1)
        assert log == []
        assert items.selected_index is None


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------


class TestSelectNext:
    def test_first_next_selects_index_zero(self):
        log = []
        items = _make_list("abc", log)
        items.select_next()
        assert items.selected_index == 0
        assert log == [("activate", "a")]

    def test_next_wraps_around(self):
        log = []
        items = _make_list("abc", log)
        for _ in range(4):
            items.select_next()
        assert items.selected_index == 0

    def test_transition_deactivates_before_activating(self):
        log = []
        items = _make_list("ab", log)
        items.select_next()
        items.select_next()
        assert log == [
            ("activate", "a"),
            ("deactivate", "a"),
            ("activate", "b"),
        ]

    def test_single_item_list_reselects_itself(self):
        log = []
        items = _make_list("a", log)
        items.select_next()
        items.select_next()
        assert items.selected_index == 0
        assert log == [("activate", "a"), ("deactivate", "a"), ("activate", "a")]


class TestSelectPrevious:
    def test_first_previous_selects_index_zero(self):
        items = _make_list("abc", [])
        items.select_previous()
        assert items.selected_index == 0

    def test_previous_wraps_to_last(self):
        items = _make_list("abc", [])
        items.select_next()
        items.select_previous()
        assert items.selected_index == 2

    def test_previous_steps_back(self):
        items = _make_list("abc", [])
        items.select(2)
        items.select_previous()
        assert items.selected_index == 1


class TestClearSelection:
    def test_clear_deactivates_current(self):
        log = []
        items = _make_list("ab", log)
        items.select_next()
        items.clear_selection()
        assert items.selected_index is None
        assert log[-1] == ("deactivate", "a")

    def test_clear_when_unselected_is_noop(self):
        log = []
        items = _make_list("ab", log)
        items.clear_selection()
        assert log == []


class TestEmptyList:
    def test_navigation_is_noop(self):
        items = SelectableList([])
        items.select_next()
        items.select_previous()
        items.clear_selection()
        assert items.selected_index is None
        assert items.selected() is None


# ---------------------------------------------------------------------------
# Invariants over navigation sequences
# ---------------------------------------------------------------------------


class TestNavigationInvariants:
    @pytest.mark.parametrize("length", [1, 2, 3, 5])
    def test_index_in_range_and_hooks_paired(self, length):
        """Every activate after the first is preceded by exactly one deactivate."""
        moves = ["next", "previous"]
        for sequence in itertools.product(moves, repeat=5):
            log = []
            items = _make_list([str(i) for i in range(length)], log)
            for move in sequence:
                if move == "next":
                    items.select_next()
                else:
                    items.select_previous()
                assert 0 <= items.selected_index < length

            kinds = [kind for kind, _ in log]
            assert kinds[0] == "activate"
            assert kinds[1:] == ["deactivate", "activate"] * (len(sequence) - 1)

            # Each deactivate targets the item activated just before it
            for i in range(1, len(log), 2):
                assert log[i][1] == log[i - 1][1]

    def test_three_tasks_wrap_and_close_previous_period(self, wall_clock):
        tasks = [Task(n, clock=wall_clock) for n in ("a", "b", "c")]
        items = SelectableList(tasks)

        items.select_next()
        for expected_prev, expected_next in ((0, 1), (1, 2), (2, 0)):
            wall_clock.advance(10)
            items.select_next()
            prev = tasks[expected_prev]
            assert not prev.work_periods[-1].is_open
            assert items.selected_index == expected_next
            assert tasks[expected_next].work_periods[-1].is_open

        assert items.selected_index == 0
        assert [t.period_count for t in tasks] == [2, 1, 1]
        assert tasks[0].total_duration().total_seconds() == 10
