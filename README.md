# bintree

A small binary tree of integers.

Each node knows its parent. This lets you measure a node's depth and find its sibling or uncle. You can also do the following:

- measure a subtree's height, size and balance
- count its leaves and its inner nodes
- check whether it is full or perfect

Traversals are generators. A renderer draws the tree as text.

## Installing

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Building a tree

```python
from bintree.node import Node

root = Node(98)
root.insert_left(12)
root.insert_right(402)
root.left.insert_right(54)
root.insert_right(128)  # 128 takes 402's place; 402 becomes 128's right child
```

`Node(value, parent=None)` creates a node that records its parent. It does not attach itself to that parent. To attach it, assign it to `parent.left` or `parent.right`:

```python
child = Node(7, root.left)
root.left.left = child
```

`insert_left` and `insert_right` create the child, attach it and return it. If the slot already holds a child, the old child moves down one level. It becomes the new node's child on the same side.

## Measuring

All of these are methods of `Node` and apply to the subtree rooted at that node:

```python
root.height()             # edges on the longest downward path: 2
root.right.depth()        # edges up to the root: 1
root.size()               # number of nodes: 5
root.leaf_count()         # nodes without children: 2
root.internal_count()     # nodes with at least one child: 3
root.balance()            # left height minus right height: 0
root.is_full()            # every node has zero or two children: False
root.is_perfect()         # size == 2 ** (height + 1) - 1: False
root.is_leaf()            # False
root.is_root()            # True
root.left.sibling()       # the other child of the parent, or None
root.left.right.uncle()   # the parent's sibling, or None
```

A child's height counts as one more than the child's own height. A missing child counts as 0.

## Traversing

```python
list(root.preorder())   # root, left, right: [98, 12, 54, 128, 402]
list(root.inorder())    # left, root, right: [12, 54, 98, 128, 402]
list(root.postorder())  # left, right, root: [54, 12, 402, 128, 98]
```

Each traversal yields the node values. It works without recursion, so deep trees do not hit Python's recursion limit.

## Rendering

```python
from bintree.render import render, print_tree

text = render(root)   # the drawing as a string, each line ending in "\n"
print_tree(root)      # writes the drawing to standard output
print_tree(root, file=some_text_stream)
```

The drawing has one line per level. Each value is shown in a box of at least three digits, such as `(098)`. Dashes and dots link parents to their children. For the tree built above:

```
  .-------(098)--.
(012)--.       (128)--.
     (054)          (402)
```

`render(None)` returns an empty string.

## What it does not do

The package has no command-line program. It has no explicit delete operation: a tree is freed when nothing refers to it any more. Nodes hold plain integers. There is no ordering, search or self-balancing, so this is not a binary search tree.