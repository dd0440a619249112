"""Circular single-selection list that notifies items on selection change."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, Protocol, TypeVar


class Activatable(Protocol):
    """Items that want to know when they gain or lose the selection."""

    def activate(self) -> None: ...

    def deactivate(self) -> None: ...


T = TypeVar("T", bound=Activatable)


class SelectableList(Generic[T]):
    """Fixed, ordered collection with at most one selected item.

    Every change of selection deactivates the previously selected item
    before activating the newly selected one. Navigating an empty list is
    a no-op and leaves the selection empty.
    """

    def __init__(self, items: Iterable[T]):
        self._items: tuple[T, ...] = tuple(items)
        self._selected: int | None = None

    @property
    def items(self) -> tuple[T, ...]:
        return self._items

    @property
    def selected_index(self) -> int | None:
        return self._selected

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def selected(self) -> T | None:
        """Return the selected item, or None when nothing is selected."""
        if self._selected is None:
            return None
        return self._items[self._selected]

    def select(self, index: int | None) -> None:
        """Move the selection to *index* (None clears it).

        Raises:
            IndexError: If *index* is outside the list.
        """
        if index is not None and not 0 <= index < len(self._items):
            raise IndexError(
                f"Selection index {index} out of range for {len(self._items)} items"
            )

        current = self.selected()
        if current is not None:
            current.deactivate()

        self._selected = index

        if index is not None:
            self._items[index].activate()

    def select_next(self) -> None:
        if not self._items:
            return

        if self._selected is None:
            index = 0
        else:
            index = (self._selected + 1) % len(self._items)
        self.select(index)

    def select_previous(self) -> None:
        if not self._items:
            return

        if self._selected is None:
            index = 0
        elif self._selected == 0:
            index = len(self._items) - 1
        else:
            index = self._selected - 1
        self.select(index)

    def clear_selection(self) -> None:
        self.select(None)
