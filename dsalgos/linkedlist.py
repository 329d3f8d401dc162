"""Singly and doubly linked lists with insertion and removal at both ends."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from typing import Any, Optional, TextIO

EMPTY_MESSAGE = "List is empty"


class EmptyListError(IndexError):
    """Raised when removing from a list that holds no elements."""

    def __init__(self, message: str = EMPTY_MESSAGE) -> None:
        super().__init__(message)


class LinkedList(ABC):
    """Common interface of the linked lists."""

    @abstractmethod
    def add_first(self, element: Any) -> None:
        """Insert an element at the front."""

    @abstractmethod
    def add_last(self, element: Any) -> None:
        """Insert an element at the back."""

    @abstractmethod
    def remove_first(self) -> Any:
        """Remove and return the front element."""

    @abstractmethod
    def remove_last(self) -> Any:
        """Remove and return the back element."""

    @abstractmethod
    def render(self) -> str:
        """Return the printable form of the list."""

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write the rendered list and a newline to ``file`` (stdout by default)."""
        stream = sys.stdout if file is None else file
        stream.write(self.render() + "\n")


class _SinglyNode:
    __slots__ = ("element", "next")

    def __init__(self, element: Any, next: Optional[_SinglyNode] = None) -> None:
        self.element = element
        self.next = next


class SinglyLinkedList(LinkedList):
    """A list whose nodes link forward only."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_SinglyNode] = None
        self._tail: Optional[_SinglyNode] = None
        self._size = 0
        for item in items:
            self.add_last(item)

    def _nodes(self) -> Iterator[_SinglyNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.element for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def add_first(self, element: Any) -> None:
        self._head = _SinglyNode(element, self._head)
        if self._tail is None:
            self._tail = self._head
        self._size += 1

    def add_last(self, element: Any) -> None:
        node = _SinglyNode(element)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove_first(self) -> Any:
        if self._head is None:
            raise EmptyListError()
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.element

    def remove_last(self) -> Any:
        if self._head is None:
            raise EmptyListError()
        if self._head.next is None:
            return self.remove_first()
        previous = self._head
        for node in self._nodes():
            if node.next is None:
                break
            previous = node
        last = previous.next
        previous.next = None
        self._tail = previous
        self._size -= 1
        return last.element

    def render(self) -> str:
        if self._head is None:
            return EMPTY_MESSAGE
        return " -> ".join(str(element) for element in self)


class _DoublyNode:
    __slots__ = ("element", "prev", "next")

    def __init__(self, element: Any) -> None:
        self.element = element
        self.prev: Optional[_DoublyNode] = None
        self.next: Optional[_DoublyNode] = None


class DoublyLinkedList(LinkedList):
    """A list with nodes linked both ways between head and tail sentinels."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head = _DoublyNode(None)
        self._tail = _DoublyNode(None)
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0
        for item in items:
            self.add_last(item)

    def __iter__(self) -> Iterator[Any]:
        node = self._head.next
        while node is not self._tail:
            yield node.element
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail.prev
        while node is not self._head:
            yield node.element
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _add_between(self, pred: _DoublyNode, succ: _DoublyNode, element: Any) -> None:
        node = _DoublyNode(element)
        node.prev = pred
        node.next = succ
        pred.next = node
        succ.prev = node
        self._size += 1

    def _unlink(self, node: _DoublyNode) -> Any:
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        return node.element

    def _is_empty(self) -> bool:
        return self._head.next is self._tail

    def add_first(self, element: Any) -> None:
        self._add_between(self._head, self._head.next, element)

    def add_last(self, element: Any) -> None:
        self._add_between(self._tail.prev, self._tail, element)

    def remove_first(self) -> Any:
        if self._is_empty():
            raise EmptyListError()
        return self._unlink(self._head.next)

    def remove_last(self) -> Any:
        if self._is_empty():
            raise EmptyListError()
        return self._unlink(self._tail.prev)

    def render(self) -> str:
        if self._is_empty():
            return EMPTY_MESSAGE
        forward = " -> ".join(str(element) for element in self)
        backward = " <- ".join(str(element) for element in reversed(self))
        return f"From head: {forward}\nFrom tail: {backward}"