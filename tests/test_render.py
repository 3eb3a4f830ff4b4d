import io

import pytest

from bintree.node import Node
from bintree.render import print_tree, render


def _attach(parent, value, side):
    child = Node(value, parent)
    setattr(parent, side, child)
    return child


@pytest.fixture
def full_tree():
    root = Node(98)
    left = _attach(root, 12, "left")
    _attach(left, 6, "left")
    _attach(left, 16, "right")
    right = _attach(root, 402, "right")
    _attach(right, 256, "left")
    _attach(right, 512, "right")
    return root


def test_worked_example(full_tree):
    expected = (
        "       .-------(098)-------.\n"
        "  .--(012)--.         .--(402)--.\n"
        "(006)     (016)     (256)     (512)\n"
    )
    assert render(full_tree) == expected


def test_empty_tree_renders_nothing():
    assert render(None) == ""


def test_single_node():
    assert render(Node(98)) == "(098)\n"


def test_negative_value_padding():
    assert render(Node(-5)) == "(-05)\n"


def test_line_count_matches_height(full_tree):
    full_tree.right.insert_left(128)
    lines = render(full_tree).splitlines()
    assert len(lines) == full_tree.height() + 1


def test_every_value_is_drawn(full_tree):
    full_tree.insert_left(54)
    full_tree.right.insert_right(128)
    text = render(full_tree)
    for value in full_tree.preorder():
        assert f"({value:03d})" in text


def test_no_trailing_spaces(full_tree):
    full_tree.left.insert_right(54)
    for line in render(full_tree).splitlines():
        assert line == line.rstrip(" ")


def test_subtree_rendered_from_its_own_root(full_tree):
    lines = render(full_tree.left).splitlines()
    assert len(lines) == 2
    assert "(012)" in lines[0]
    assert "(006)" in lines[1] and "(016)" in lines[1]


def test_print_tree_writes_render_output(full_tree):
    buffer = io.StringIO()
    print_tree(full_tree, buffer)
    assert buffer.getvalue() == render(full_tree)


def test_print_tree_empty_writes_nothing():
    buffer = io.StringIO()
    print_tree(None, buffer)
    assert buffer.getvalue() == ""


def test_print_tree_defaults_to_stdout(full_tree, capsys):
    print_tree(full_tree)
    assert capsys.readouterr().out == render(full_tree)