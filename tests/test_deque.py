import pytest

from ftcontainers.deque import Deque


def make(*values):
    deq = Deque()
    for value in values:
        deq.push_back(value)
    return deq


def test_empty_deque():
    empty = Deque()
    assert empty.begin() == empty.end()
    assert empty.empty()
    assert len(empty) == 0
    assert empty.max_size() == 4611686018427387903


def test_basic_push_both_ends():
    deq = Deque()
    deq.push_back(5)
    deq.push_back(42)
    deq.push_front(6)
    deq.push_front(24)
    assert len(deq) == 4
    assert deq.front() == 24
    assert deq.begin().get() == 24
    assert deq.back() == 42
    assert (deq.end() - 1).get() == 42
    for i in range(4):
        assert deq[i] == deq.at(i)
    assert list(deq) == [24, 6, 5, 42]


def test_reverse_iteration():
    deq = Deque([24, 6, 5, 42])
    assert list(reversed(deq)) == [42, 5, 6, 24]
    it, stop = deq.rbegin(), deq.rend()
    seen = []
    while it != stop:
        seen.append(it.get())
        it = it + 1
    assert seen == [42, 5, 6, 24]


def test_push_back_then_pop_back():
    deq = make(5, 42, 3)
    assert len(deq) == 3
    assert list(reversed(deq)) == [3, 42, 5]
    deq.pop_back()
    assert list(deq) == [5, 42]
    deq.pop_back()
    assert list(deq) == [5]
    deq.pop_back()
    assert list(deq) == []


def test_push_front_then_pop_front():
    deq = Deque()
    deq.push_front(3)
    deq.push_front(42)
    deq.push_front(5)
    assert len(deq) == 3
    assert list(deq) == [5, 42, 3]
    deq.pop_front()
    assert list(deq) == [42, 3]
    deq.pop_front()
    assert list(deq) == [3]
    deq.pop_front()
    assert list(deq) == []


def test_pop_on_empty_is_noop():
    deq = Deque()
    deq.pop_back()
    deq.pop_front()
    assert len(deq) == 0


def test_clear_leaves_copy_intact():
    deq = make(5, 42, 3)
    deq2 = deq.copy()
    deq.clear()
    assert len(deq) == 0
    assert len(deq2) == 3
    assert list(deq2) == [5, 42, 3]


def test_erase():
    deq = make(5, 42, 3)
    pos = deq.erase(deq.begin() + 1)
    assert deq[pos] == 3
    assert deq.front() == 5
    assert deq.back() == 3
    assert len(deq) == 2

    pos = deq.erase(deq.end() - 1)
    assert pos == len(deq)
    assert deq.front() == 5
    assert deq.back() == 5
    assert len(deq) == 1

    pos = deq.erase(deq.begin())
    assert pos == len(deq)
    assert len(deq) == 0

    deq2 = make(5, 42, 3)
    pos = deq2.erase_range(deq2.begin(), deq2.end())
    assert pos == len(deq2)
    assert len(deq2) == 0


def test_erase_range_middle():
    deq = make(1, 2, 3, 4, 5)
    assert deq.erase_range(1, 4) == 1
    assert list(deq) == [1, 5]


def test_erase_errors():
    with pytest.raises(IndexError):
        Deque().erase(0)
    deq = make(5, 42, 3)
    with pytest.raises(IndexError):
        deq.erase_range(0, 4)
    with pytest.raises(IndexError):
        deq.erase_range(2, 1)
    with pytest.raises(ValueError):
        deq.erase(make(1).begin())


def test_assign():
    deq = Deque()
    deq.assign_fill(5, 42)
    assert list(deq) == [42] * 5
    deq2 = Deque()
    deq2.assign_fill(5, 43)
    assert len(deq2) == 5
    deq.assign(deq2)
    assert list(deq) == [43] * 5
    deq2.assign_fill(5, 44)
    assert list(deq) == [43] * 5
    assert list(deq2) == [44] * 5


def test_insert():
    deq = Deque()
    assert len(deq) == 0
    deq.insert(deq.begin(), 5)
    assert deq.front() == 5
    assert deq.back() == 5
    assert len(deq) == 1

    deq.insert(deq.begin(), 42, 2)
    assert list(deq) == [42, 42, 5]

    deq2 = Deque()
    deq2.insert_all(deq2.begin(), deq)
    assert deq2.front() == 42
    assert deq2.back() == 5
    assert len(deq2) == 3

    deq2.insert_all(deq2.end(), deq)
    assert list(deq2) == [42, 42, 5, 42, 42, 5]

    deq3 = Deque()
    deq3.insert(deq3.begin(), 66, 66)
    assert len(deq3) == 66
    deq3.insert(deq3.begin() + 20, 66, 66)
    assert len(deq3) == 132
    assert all(v == 66 for v in deq3)


def test_insert_keeps_order_in_middle():
    deq = make(1, 5)
    deq.insert_all(1, [2, 3, 4])
    assert list(deq) == [1, 2, 3, 4, 5]
    assert deq.insert(1, 9) == 1
    assert list(deq) == [1, 9, 2, 3, 4, 5]


def test_insert_out_of_range():
    with pytest.raises(IndexError):
        make(1).insert(3, 0)
    with pytest.raises(ValueError):
        make(1).insert(0, 0, -1)


def test_resize():
    deq = make(5, 42)
    assert len(deq) == 2
    deq.resize(5, 43)
    assert list(deq) == [5, 42, 43, 43, 43]
    deq.resize(1)
    assert deq.back() == 5
    assert len(deq) == 1
    deq.resize(0)
    assert len(deq) == 0
    deq.resize(5)
    assert list(deq) == [0, 0, 0, 0, 0]
    with pytest.raises(ValueError):
        deq.resize(-1)


def test_comparison():
    deq = make(5, 42)
    deq2 = make(5, 42)
    deq3 = make(5, 42, 43)
    deq4 = make(99, 42, 43)

    assert deq == deq2
    assert not (deq != deq2)
    assert not (deq < deq2)
    assert not (deq > deq2)
    assert deq <= deq2
    assert deq >= deq2

    assert not (deq == deq3)
    assert deq != deq3
    assert deq < deq3
    assert not (deq > deq3)
    assert deq <= deq3
    assert not (deq >= deq3)

    assert not (deq4 == deq)
    assert deq4 != deq
    assert not (deq4 < deq)
    assert deq4 > deq
    assert not (deq4 <= deq)
    assert deq4 >= deq


def test_swap():
    deq = make(5, 42, 43)
    deq2 = make(12, 30, 60)
    deq.swap(deq2)
    assert [deq[0], deq[1], deq[2]] == [12, 30, 60]
    assert [deq2[0], deq2[1], deq2[2]] == [5, 42, 43]
    deq.swap(deq2)
    assert list(deq) == [5, 42, 43]
    assert list(deq2) == [12, 30, 60]
    with pytest.raises(TypeError):
        deq.swap([1, 2])


def test_filled_and_setitem():
    deq = Deque.filled(3, 7)
    assert list(deq) == [7, 7, 7]
    deq[1] = 8
    assert list(deq) == [7, 8, 7]
    deq.begin().set(1)
    assert deq.front() == 1
    with pytest.raises(ValueError):
        Deque.filled(-1)


def test_access_errors():
    deq = make(5)
    with pytest.raises(IndexError):
        deq.at(1)
    with pytest.raises(IndexError):
        deq.at(-1)
    with pytest.raises(IndexError):
        Deque().front()
    with pytest.raises(IndexError):
        Deque().back()


def test_copy_is_independent():
    deq = make(1, 2, 3)
    dup = deq.copy()
    dup.push_back(4)
    assert list(deq) == [1, 2, 3]
    assert list(dup) == [1, 2, 3, 4]