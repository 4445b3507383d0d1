import pytest

from cubscene.linkedlist import LinkedList, Node


def test_push_back_keeps_insertion_order():
    lst = LinkedList()
    for item in ["a", "b", "c"]:
        lst.push_back(item)
    assert list(lst) == ["a", "b", "c"]
    assert len(lst) == 3


def test_push_front_reverses_order():
    lst = LinkedList()
    for item in [1, 2, 3]:
        lst.push_front(item)
    assert list(lst) == [3, 2, 1]


def test_constructor_from_iterable():
    assert list(LinkedList(range(5))) == list(range(5))
    assert len(LinkedList(range(5))) == 5


def test_empty_list():
    lst = LinkedList()
    assert len(lst) == 0
    assert list(lst) == []
    assert lst.last() is None


def test_last_returns_final_node():
    lst = LinkedList([1, 2, 3])
    node = lst.last()
    assert isinstance(node, Node) and node.content == 3
    assert node.next is None
    lst.push_front(0)
    assert lst.last().content == 3
    lst.push_back(4)
    assert lst.last().content == 4


def test_pop_front_calls_deleter_and_returns_content():
    seen = []
    lst = LinkedList(["x", "y"])
    assert lst.pop_front(seen.append) == "x"
    assert seen == ["x"]
    assert list(lst) == ["y"]
    assert len(lst) == 1


def test_pop_front_to_empty_resets_last():
    lst = LinkedList([1])
    lst.pop_front()
    assert lst.last() is None
    lst.push_back(2)
    assert list(lst) == [2]


def test_pop_front_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()


def test_clear_deletes_every_content_in_order():
    seen = []
    lst = LinkedList([1, 2, 3])
    lst.clear(seen.append)
    assert seen == [1, 2, 3]
    assert len(lst) == 0
    assert list(lst) == []


def test_each_visits_all():
    seen = []
    LinkedList("abc").each(seen.append)
    assert seen == ["a", "b", "c"]


def test_map_builds_new_list_and_leaves_original():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda v: v * 10)
    assert list(mapped) == [v * 10 for v in [1, 2, 3]]
    assert list(lst) == [1, 2, 3]
    assert len(mapped) == len(lst)


def test_map_failure_cleans_up_partial_result():
    deleted = []

    def func(value):
        if value == 3:
            raise RuntimeError("boom")
        return value

    with pytest.raises(RuntimeError):
        LinkedList([1, 2, 3, 4]).map(func, deleted.append)
    assert deleted == [1, 2]