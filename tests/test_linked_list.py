import io

from jsonmap.linked_list import ListNode, SinglyList, add_two_numbers
from jsonmap.logger import Logger


def build(values):
    lst = SinglyList()
    for v in values:
        lst.push(v)
    return lst


def values_of(node):
    out = []
    while node is not None:
        out.append(node.val)
        node = node.next
    return out


def test_push_keeps_order_and_length():
    lst = build([1, 2, 3])
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3


def test_empty_list():
    lst = SinglyList()
    assert list(lst) == []
    assert len(lst) == 0


def test_delete_head_middle_and_tail():
    lst = build([4, 5, 6, 7])
    lst.delete(4)
    lst.delete(6)
    lst.delete(7)
    assert list(lst) == [5]
    assert len(lst) == 1


def test_delete_all_occurrences():
    lst = build([2, 2, 3, 2, 2])
    lst.delete(2)
    assert list(lst) == [3]


def test_delete_missing_value():
    lst = build([1, 2])
    lst.delete(9)
    assert list(lst) == [1, 2]


def test_print_nodes_logs_each_value():
    out = io.StringIO()
    logger = Logger(out)
    build([8, 9]).print_nodes(logger)
    lines = out.getvalue().splitlines()
    assert len(lines) == 2
    assert lines[0].endswith("print_nodes, node[0] = 8")
    assert lines[1].endswith("print_nodes, node[1] = 9")


def test_add_two_numbers_worked_example():
    a = build([2, 4, 3]).head
    b = build([5, 6, 4]).head
    assert values_of(add_two_numbers(a, b)) == [7, 0, 8]


def test_add_two_numbers_carry_extends():
    a = build([9, 9]).head
    b = build([1]).head
    assert values_of(add_two_numbers(a, b)) == [0, 0, 1]


def test_add_two_numbers_empty_inputs():
    assert values_of(add_two_numbers(None, None)) == [0]
    assert values_of(add_two_numbers(ListNode(5), None)) == [5]