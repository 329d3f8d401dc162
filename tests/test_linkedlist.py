import io

import pytest

from dsalgos.linkedlist import (
    DoublyLinkedList,
    EmptyListError,
    LinkedList,
    SinglyLinkedList,
)


def test_add_first_and_last_order():
    for lst in (SinglyLinkedList(), DoublyLinkedList()):
        lst.add_first(10)
        lst.add_first(5)
        lst.add_last(20)
        lst.add_first(0)
        assert list(lst) == [0, 5, 10, 20]
        assert len(lst) == 4


def test_constructor_keeps_order():
    items = [3, 1, 4, 1, 5]
    assert list(SinglyLinkedList(items)) == items
    assert list(DoublyLinkedList(items)) == items


def test_remove_first_and_last():
    for lst in (SinglyLinkedList([1, 2, 3, 4]), DoublyLinkedList([1, 2, 3, 4])):
        assert lst.remove_first() == 1
        assert lst.remove_last() == 4
        assert list(lst) == [2, 3]
        assert len(lst) == 2


def test_drain_from_both_ends():
    items = list(range(7))
    for lst in (SinglyLinkedList(items), DoublyLinkedList(items)):
        removed = []
        while len(lst):
            removed.append(lst.remove_first())
            if len(lst):
                removed.append(lst.remove_last())
        assert sorted(removed) == items
        assert list(lst) == []


@pytest.mark.parametrize("method", ["remove_first", "remove_last"])
def test_remove_from_empty_raises(method):
    with pytest.raises(EmptyListError, match="List is empty"):
        getattr(SinglyLinkedList(), method)()
    with pytest.raises(EmptyListError, match="List is empty"):
        getattr(DoublyLinkedList(), method)()


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        SinglyLinkedList().remove_first()
    with pytest.raises(IndexError):
        DoublyLinkedList().remove_first()


def test_reuse_after_emptied():
    for lst in (SinglyLinkedList([1]), DoublyLinkedList([1])):
        assert lst.remove_last() == 1
        lst.add_last(2)
        lst.add_first(3)
        assert list(lst) == [3, 2]


def test_render_empty():
    assert SinglyLinkedList().render() == "List is empty"
    assert DoublyLinkedList().render() == "List is empty"


def test_singly_render():
    assert SinglyLinkedList([0, 5, 10, 20]).render() == "0 -> 5 -> 10 -> 20"


def test_singly_render_single():
    assert SinglyLinkedList([7]).render() == "7"


def test_doubly_render_lines_mirror():
    lst = DoublyLinkedList([2, 4, 6, 8, 10])
    head_line, tail_line = lst.render().split("\n")
    assert head_line.startswith("From head: ")
    assert tail_line.startswith("From tail: ")
    forward = head_line[len("From head: "):].split(" -> ")
    backward = tail_line[len("From tail: "):].split(" <- ")
    assert forward == ["2", "4", "6", "8", "10"]
    assert backward == list(reversed(forward))


def test_doubly_reversed():
    items = [1, 2, 3]
    assert list(reversed(DoublyLinkedList(items))) == items[::-1]


def test_print_writes_render():
    for lst in (SinglyLinkedList([1, 2]), DoublyLinkedList([1, 2])):
        buffer = io.StringIO()
        lst.print(buffer)
        assert buffer.getvalue() == lst.render() + "\n"


def test_print_defaults_to_stdout(capsys):
    SinglyLinkedList().print()
    assert capsys.readouterr().out == "List is empty\n"
    DoublyLinkedList().print()
    assert capsys.readouterr().out == "List is empty\n"


def test_base_is_abstract():
    with pytest.raises(TypeError):
        LinkedList()