from algokit.structures.linked_list import DoublyLinkedList, LinkedList, Node


def test_linked_list_keeps_append_order():
    items = LinkedList()
    for value in (1, 2, 3):
        items.append(value)
    assert list(items) == [1, 2, 3]
    assert len(items) == 3


def test_linked_list_from_iterable():
    items = LinkedList("abc")
    assert list(items) == ["a", "b", "c"]


def test_linked_list_empty():
    items = LinkedList()
    assert list(items) == []
    assert len(items) == 0


def test_node_links():
    items = LinkedList([1, 2])
    assert isinstance(items.head, Node)
    assert items.head.value == 1
    assert items.head.next.value == 2
    assert items.head.next.next is None


def test_doubly_push_front_reverses_order():
    items = DoublyLinkedList()
    for value in (5, 3, 1, 9, 7):
        items.push_front(value)
    assert list(items) == [7, 9, 1, 3, 5]
    assert len(items) == 5


def test_doubly_bubble_sort_source_example():
    items = DoublyLinkedList()
    data = (5, 3, 1, 9, 7)
    for value in data:
        items.push_front(value)
    items.bubble_sort()
    assert list(items) == sorted(data)


def test_doubly_bubble_sort_with_duplicates():
    items = DoublyLinkedList()
    data = (4, 4, -2, 0, 4, 1)
    for value in data:
        items.push_front(value)
    items.bubble_sort()
    assert list(items) == sorted(data)


def test_doubly_bubble_sort_empty_and_single():
    empty = DoublyLinkedList()
    empty.bubble_sort()
    assert list(empty) == []
    single = DoublyLinkedList()
    single.push_front(42)
    single.bubble_sort()
    assert list(single) == [42]


def test_doubly_prev_links():
    items = DoublyLinkedList()
    items.push_front(2)
    items.push_front(1)
    assert items.head.prev is None
    assert items.head.next.prev is items.head