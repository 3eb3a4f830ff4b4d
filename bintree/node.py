"""Binary tree nodes with parent links and the usual structural queries."""

from __future__ import annotations

from collections.abc import Iterator


class Node:
    """A binary tree node holding an integer value.

    The node keeps a reference to its parent. Building a node does not attach
    it to that parent: assign it to ``parent.left`` or ``parent.right``, or
    use :meth:`insert_left` and :meth:`insert_right`.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Node | None = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Node | None = None
        self.right: Node | None = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def _children(self) -> Iterator[Node]:
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; the old left child becomes its left child."""
        new_node = Node(value, self)
        if self.left is not None:
            new_node.left = self.left
            self.left.parent = new_node
        self.left = new_node
        return new_node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; the old right child becomes its right child."""
        new_node = Node(value, self)
        if self.right is not None:
            new_node.right = self.right
            self.right.parent = new_node
        self.right = new_node
        return new_node

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def preorder(self) -> Iterator[int]:
        """Yield values in root, left, right order."""
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def inorder(self) -> Iterator[int]:
        """Yield values in left, root, right order."""
        stack: list[Node] = []
        current: Node | None = self
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node.value
            current = node.right

    def postorder(self) -> Iterator[int]:
        """Yield values in left, right, root order."""
        stack: list[tuple[Node, bool]] = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                yield node.value
                continue
            stack.append((node, True))
            if node.right is not None:
                stack.append((node.right, False))
            if node.left is not None:
                stack.append((node.left, False))

    def height(self) -> int:
        """Return the number of edges on the longest downward path."""
        level = [self]
        height = 0
        while True:
            level = [child for node in level for child in node._children()]
            if not level:
                return height
            height += 1

    def depth(self) -> int:
        """Return the number of edges between this node and the root."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def _nodes(self) -> Iterator[Node]:
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(node._children())

    def size(self) -> int:
        """Return the number of nodes in the subtree."""
        return sum(1 for _ in self._nodes())

    def leaf_count(self) -> int:
        """Return the number of leaves in the subtree."""
        return sum(1 for node in self._nodes() if node.is_leaf())

    def internal_count(self) -> int:
        """Return the number of nodes with at least one child."""
        return sum(1 for node in self._nodes() if not node.is_leaf())

    def balance(self) -> int:
        """Return left subtree height minus right subtree height."""
        left = self.left.height() + 1 if self.left is not None else 0
        right = self.right.height() + 1 if self.right is not None else 0
        return left - right

    def is_full(self) -> bool:
        """Return True if every node has either zero or two children."""
        return all(
            (node.left is None) == (node.right is None) for node in self._nodes()
        )

    def is_perfect(self) -> bool:
        """Return True if all levels of the subtree are completely filled."""
        return self.size() == (1 << (self.height() + 1)) - 1

    def sibling(self) -> Node | None:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        if parent.right is self:
            return parent.left
        return None

    def uncle(self) -> Node | None:
        """Return the sibling of this node's parent, if any."""
        if self.parent is None:
            return None
        return self.parent.sibling()