"""
Department model
"""

from dataclasses import dataclass, field
from typing import Iterator, List


@dataclass
class Department:
    """
    A node of a customer's department tree.

    A department owns its children exclusively. Attach nodes with `add_child`
    so the tree stays acyclic; there is no back-reference to the parent.
    Traversal and comparison use an explicit stack, so trees of any finite
    depth are supported.
    """

    name: str
    children: List['Department'] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, children={len(self.children)})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Department):
            return NotImplemented
        stack = [(self, other)]
        while stack:
            left, right = stack.pop()
            if left.name != right.name or len(left.children) != len(right.children):
                return False
            stack.extend(zip(left.children, right.children))
        return True

    def add_child(self, child: 'Department') -> 'Department':
        """
        Appends `child` to this department's children and returns it.

        :raises ValueError: if `child` is this department or one of its ancestors.
        """
        if any(node is self for node in child.walk()):
            raise ValueError(f"Attaching department {child.name!r} would create a cycle")
        self.children.append(child)
        return child

    def walk(self) -> Iterator['Department']:
        """Yields this department and all of its descendants, depth-first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def size(self) -> int:
        return sum(1 for _ in self.walk())
