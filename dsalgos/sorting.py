"""Bubble sort in ascending and descending order."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, MutableSequence
from typing import Any


class SortingAlgorithm(ABC):
    """An algorithm that sorts a mutable sequence in place."""

    @abstractmethod
    def sort(self, items: MutableSequence[Any]) -> None:
        """Sort ``items`` in place."""


class _BubbleSort(SortingAlgorithm):
    descending = False

    def _out_of_order(self, left: Any, right: Any) -> bool:
        return left < right if self.descending else left > right

    def sort(self, items: MutableSequence[Any]) -> None:
        for unsorted_end in range(len(items) - 1, 0, -1):
            for j in range(unsorted_end):
                if self._out_of_order(items[j], items[j + 1]):
                    items[j], items[j + 1] = items[j + 1], items[j]


class BubbleUp(_BubbleSort):
    """Bubble sort into ascending order."""

    descending = False

    def sort(self, items: MutableSequence[Any]) -> None:
        super().sort(items)


class BubbleDown(_BubbleSort):
    """Bubble sort into descending order."""

    descending = True

    def sort(self, items: MutableSequence[Any]) -> None:
        super().sort(items)


def bubble_sort(items: Iterable[Any], descending: bool = False) -> list[Any]:
    """Return a new list of ``items`` bubble-sorted."""
    result = list(items)
    (BubbleDown() if descending else BubbleUp()).sort(result)
    return result