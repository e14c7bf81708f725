"""Ordered collection with an optional single selection.

Every operation is total: an empty list turns navigation into a no-op and
the selected index never leaves ``range(len(items))``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class SelectableList(Generic[T]):
    """Items in insertion order plus the index of the highlighted item.

    Attributes:
        items: Stored items. Duplicates allowed, never sorted.
        selected: Index of the highlighted item, or None.
    """

    items: list[T] = field(default_factory=list)
    selected: int | None = None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def selected_item(self) -> T | None:
        if self.selected is None:
            return None
        return self.items[self.selected]

    def push(self, item: T) -> None:
        """Append an item. The selection is left untouched."""
        self.items.append(item)

    def select_first_if_present(self) -> None:
        """Highlight index 0 when there is anything to highlight."""
        if self.items:
            self.selected = 0

    def next(self) -> None:
        """Move the selection down, wrapping from the last item to the first."""
        if not self.items:
            return
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = (self.selected + 1) % len(self.items)

    def previous(self) -> None:
        """Move the selection up, wrapping from the first item to the last."""
        if not self.items:
            return
        if self.selected is None:
            self.selected = 0
        elif self.selected == 0:
            self.selected = len(self.items) - 1
        else:
            self.selected -= 1

    def unselect(self) -> None:
        self.selected = None
