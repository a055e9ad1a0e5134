import pytest

from leetkit.heaps import MaxHeap, MinHeap

VALUES = [5, 3, 8, 1, 9, 2, 7, 3, -4]


def test_min_heap_pops_in_ascending_order():
    heap = MinHeap()
    for v in VALUES:
        heap.push(v)
    assert len(heap) == len(VALUES)
    popped = [heap.pop() for _ in range(len(VALUES))]
    assert popped == sorted(VALUES)
    assert len(heap) == 0


def test_max_heap_pops_in_descending_order():
    heap = MaxHeap()
    for v in VALUES:
        heap.push(v)
    popped = [heap.pop() for _ in range(len(VALUES))]
    assert popped == sorted(VALUES, reverse=True)


def test_peek_does_not_remove():
    lo, hi = MinHeap(), MaxHeap()
    for v in VALUES:
        lo.push(v)
        hi.push(v)
    assert lo.peek() == min(VALUES)
    assert hi.peek() == max(VALUES)
    assert len(lo) == len(VALUES)
    assert len(hi) == len(VALUES)


@pytest.mark.parametrize("cls", [MinHeap, MaxHeap])
def test_empty_heap_raises(cls):
    heap = cls()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()


@pytest.mark.parametrize("cls", [MinHeap, MaxHeap])
def test_drained_heap_raises(cls):
    heap = cls()
    heap.push(10)
    assert heap.pop() == 10
    with pytest.raises(IndexError):
        heap.pop()