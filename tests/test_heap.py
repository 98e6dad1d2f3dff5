import pytest

from algoplay.heap import CAPACITY, MaxHeap, main


def _build(values):
    heap = MaxHeap()
    for value in values:
        heap.insert(value)
    return heap


def _assert_heap_order(heap):
    values = dict(heap.describe(1))
    for pos, value in values.items():
        for child in (2 * pos, 2 * pos + 1):
            if child in values:
                assert values[child] <= value


def test_demo_tree_layout():
    heap = _build([2, 5, 3, 1, 7])
    assert heap.describe(1) == [(1, 7), (2, 5), (4, 1), (5, 2), (3, 3)]


def test_len_tracks_inserts_and_deletes():
    heap = _build([4, 8, 1])
    assert len(heap) == 3
    heap.delete_root()
    assert len(heap) == 2


@pytest.mark.parametrize(
    "values",
    [[2, 5, 3, 1, 7], [1, 2, 3, 4, 5, 6], [9, 9, 1, 9, 0], [42], [-3, 10, -7, 0]],
)
def test_drain_yields_descending(values):
    heap = _build(values)
    assert list(heap.drain()) == sorted(values, reverse=True)
    assert len(heap) == 0


def test_delete_root_returns_maximum_and_keeps_order():
    values = [5, 17, 3, 11, 8, 2, 14]
    heap = _build(values)
    assert heap.delete_root() == max(values)
    _assert_heap_order(heap)
    assert sorted(v for _, v in heap.describe(1)) == sorted(values)[:-1]


def test_describe_subtree_and_out_of_range():
    heap = _build([2, 5, 3, 1, 7])
    positions = [pos for pos, _ in heap.describe(2)]
    assert positions == [2, 4, 5]
    assert heap.describe(6) == []


def test_delete_from_empty_raises():
    with pytest.raises(IndexError):
        MaxHeap().delete_root()


def test_capacity_limit():
    heap = _build(range(CAPACITY))
    with pytest.raises(OverflowError):
        heap.insert(1)


def test_main_prints_remaining_in_descending_order(capsys):
    values = [4, 9, 2, 6]
    assert main([str(v) for v in values]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    last = [int(token) for token in lines[-1].split()]
    assert last == sorted(values, reverse=True)[1:]