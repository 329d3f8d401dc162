"""Example runs of the linked lists and bubble sort."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from typing import Any, Optional, TextIO

from dsalgos.linkedlist import DoublyLinkedList, EmptyListError
from dsalgos.linkedlist import SinglyLinkedList
from dsalgos.sorting import BubbleDown, BubbleUp

_BUBBLE_EXAMPLE = (64, 34, 25, 12, 22, 11, 96)


def _stream(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


def _report(out: TextIO, remove: Callable[[], Any]) -> None:
    try:
        value = remove()
    except EmptyListError as exc:
        out.write(f"{exc}\n")
    else:
        out.write(f"Removed: {value}\n")


def singly_demo(out: Optional[TextIO] = None) -> None:
    """Run the singly linked list example."""
    out = _stream(out)
    lst = SinglyLinkedList()
    lst.add_first(10)
    lst.add_first(5)
    lst.add_last(20)
    lst.add_first(0)
    lst.print(out)

    _report(out, lst.remove_first)
    lst.print(out)

    _report(out, lst.remove_last)
    lst.print(out)

    _report(out, lst.remove_last)
    _report(out, lst.remove_first)
    lst.print(out)

    _report(out, lst.remove_first)


def doubly_demo(out: Optional[TextIO] = None) -> None:
    """Run the doubly linked list example."""
    out = _stream(out)
    lst = DoublyLinkedList()
    lst.add_first(6)
    lst.add_first(4)
    lst.add_last(8)
    lst.add_first(2)
    lst.add_last(10)
    lst.print(out)

    _report(out, lst.remove_last)
    lst.print(out)

    _report(out, lst.remove_first)
    lst.print(out)

    _report(out, lst.remove_first)
    _report(out, lst.remove_last)
    _report(out, lst.remove_first)
    lst.print(out)

    _report(out, lst.remove_first)


def _format_array(items: Sequence[Any]) -> str:
    return "".join(f"{item} " for item in items)


def bubble_demo(out: Optional[TextIO] = None) -> None:
    """Run the bubble sort example in both directions."""
    out = _stream(out)
    for sorter, label in (
        (BubbleUp(), "Array Bubbled Up (Ascending): "),
        (BubbleDown(), "Array Bubbled Down (Descending): "),
    ):
        data = list(_BUBBLE_EXAMPLE)
        out.write(f"Original Array: {_format_array(data)}\n")
        sorter.sort(data)
        out.write(f"{label}{_format_array(data)}\n")
        out.write("\n")


_DEMOS = {
    "singly": singly_demo,
    "doubly": doubly_demo,
    "bubble": bubble_demo,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one demo, or all of them when none is named."""
    parser = argparse.ArgumentParser(prog="dsalgos", description=__doc__)
    parser.add_argument(
        "demo",
        nargs="?",
        default="all",
        choices=[*_DEMOS, "all"],
        help="which example to run (default: all)",
    )
    args = parser.parse_args(argv)
    selected = _DEMOS.values() if args.demo == "all" else [_DEMOS[args.demo]]
    for demo in selected:
        demo(sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())