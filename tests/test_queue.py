import pytest

from tsecrawl.queue import Queue


def search_int(element, key):
    return element == key


def test_new_queue_is_empty():
    q = Queue()
    assert len(q) == 0
    assert list(q) == []


def test_put_get_fifo_order():
    q = Queue()
    q.put(10)
    q.put(20)
    q.put(30)
    assert len(q) == 3
    assert q.get() == 10
    assert q.get() == 20
    assert q.get() == 30
    assert len(q) == 0


def test_get_from_empty_returns_none():
    q = Queue()
    assert q.get() is None
    q.put(1)
    q.get()
    assert q.get() is None


def test_apply_visits_in_order():
    q = Queue([1, 2, 3])
    seen = []
    q.apply(seen.append)
    assert seen == [1, 2, 3]


def test_apply_on_empty_queue_calls_nothing():
    seen = []
    Queue().apply(seen.append)
    assert seen == []


def test_search_finds_element():
    q = Queue()
    for value in (10, 20, 30):
        q.put(value)
    assert q.search(search_int, 20) == 20
    assert len(q) == 3


def test_search_missing_returns_none():
    q = Queue([10, 20, 30])
    assert q.search(search_int, 99) is None


def test_search_returns_the_stored_object():
    first = {"id": 1}
    q = Queue([first, {"id": 2}])
    found = q.search(lambda element, key: element["id"] == key, 1)
    assert found is first


def test_remove_middle():
    q = Queue([1, 2, 3])
    assert q.remove(search_int, 2) == 2
    assert q.search(search_int, 2) is None
    assert list(q) == [1, 3]


def test_remove_front_and_back():
    q = Queue([1, 2, 3])
    assert q.remove(search_int, 1) == 1
    assert q.remove(search_int, 3) == 3
    assert list(q) == [2]
    q.put(4)
    assert list(q) == [2, 4]


def test_remove_only_element_then_put():
    q = Queue([7])
    assert q.remove(search_int, 7) == 7
    assert len(q) == 0
    q.put(8)
    assert q.get() == 8


def test_remove_missing_returns_none():
    q = Queue([1, 2])
    assert q.remove(search_int, 5) is None
    assert list(q) == [1, 2]


def test_concat():
    q1 = Queue()
    q2 = Queue()
    q1.put(1)
    q1.put(2)
    q2.put(3)
    q2.put(4)
    q1.concat(q2)
    seen = []
    q1.apply(seen.append)
    assert seen == [1, 2, 3, 4]
    assert len(q2) == 0


def test_concat_into_empty():
    q1 = Queue()
    q2 = Queue([5, 6])
    q1.concat(q2)
    assert list(q1) == [5, 6]
    assert list(q2) == []


def test_concat_with_self_raises():
    q = Queue([1])
    with pytest.raises(ValueError):
        q.concat(q)