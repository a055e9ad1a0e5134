import pytest

from leetkit.linkedlist import ListNode, build_linked_list, linked_list_to_list


@pytest.mark.parametrize("val", [5, 0])
def test_new_list_node(val):
    assert ListNode(val) == ListNode(val=val, next=None)


@pytest.mark.parametrize(
    ("nums", "want"),
    [
        ([], None),
        ([1], ListNode(1)),
        ([1, 2, 3], ListNode(1, ListNode(2, ListNode(3)))),
    ],
    ids=["Empty array", "Single element array", "Multiple elements array"],
)
def test_build_linked_list(nums, want):
    assert build_linked_list(nums) == want


def test_to_list_nil_list():
    assert linked_list_to_list(None) == []


def test_to_list_single_node():
    assert ListNode(1).to_list() == [1]


def test_to_list_multiple_nodes():
    head = ListNode(1, ListNode(2, ListNode(3)))
    assert head.to_list() == [1, 2, 3]
    assert linked_list_to_list(head) == [1, 2, 3]


def test_iteration_yields_values():
    head = build_linked_list([4, 5, 6])
    assert list(head) == [4, 5, 6]


def test_round_trip():
    values = [9, -2, 0, 7, 7]
    assert linked_list_to_list(build_linked_list(values)) == values


def test_build_accepts_generator():
    head = build_linked_list(x for x in [1, 2])
    assert head == ListNode(1, ListNode(2))