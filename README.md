# dsalgos

This package provides a singly linked list, a doubly linked list and a bubble
sort. It also includes short demonstrations of each one.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Linked lists

`dsalgos.linkedlist` provides `SinglyLinkedList` and `DoublyLinkedList`. Both derive from the abstract `LinkedList` base class. Each constructor takes an optional iterable of starting items, which are added at the back in order.

The two lists share these methods:

- `add_first(element)`
- `add_last(element)`
- `remove_first()`
- `remove_last()`
- `render()`
- `print(file=None)`

Both lists also support `len()` and iteration. `DoublyLinkedList` supports `reversed()` as well.

If you remove from an empty list, the list raises `EmptyListError`. This is a subclass of `IndexError`, and its message is `List is empty`.

```python
from dsalgos.linkedlist import DoublyLinkedList, EmptyListError

items = DoublyLinkedList()
items.add_first(6)
items.add_first(4)
items.add_last(8)
items.print()
# From head: 4 -> 6 -> 8
# From tail: 8 <- 6 <- 4

items.remove_last()   # 8
list(items)           # [4, 6]
list(reversed(items)) # [6, 4]
len(items)            # 2

items.remove_first()
items.remove_first()
try:
    items.remove_first()
except EmptyListError as exc:
    print(exc)        # List is empty
```

`render()` returns the text of the list:

- A `SinglyLinkedList` renders as `0 -> 5 -> 10`.
- A `DoublyLinkedList` renders as two lines: one read from the head and one read from the tail.
- An empty list renders as `List is empty`.

`print()` writes the rendered text followed by a newline. It writes to standard output unless you give it another stream in `file`.

## Sorting

`dsalgos.sorting` provides two classes:

- `BubbleUp` sorts into ascending order.
- `BubbleDown` sorts into descending order.

Both implement `SortingAlgorithm.sort(items)`, which sorts a mutable sequence in place.

`bubble_sort(items, descending=False)` takes any iterable and returns a new sorted list. It leaves its input unchanged.

```python
from dsalgos.sorting import BubbleUp, bubble_sort

data = [64, 34, 25, 12, 22, 11, 96]
BubbleUp().sort(data)
data                                   # [11, 12, 22, 25, 34, 64, 96]
bubble_sort([3, 1, 2], descending=True)  # [3, 2, 1]
```

## Demonstrations

The `dsalgos-demo` command runs example sessions and prints what they produce.

To run all three sessions, give no argument:

```
dsalgos-demo
```

To run a single session, name it with `singly`, `doubly` or `bubble`:

```
dsalgos-demo doubly
```

The linked-list sessions add and remove elements until the list is empty. Each session ends by trying one more removal, which prints `List is empty`.

The same sessions are also available as functions in `dsalgos.demo`:

- `singly_demo(out=None)`
- `doubly_demo(out=None)`
- `bubble_demo(out=None)`

Each function writes to `out`, or to standard output if `out` is not given.