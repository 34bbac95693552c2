"""
Composite pattern: treat single nodes and groups of nodes the same way.

A node with a non-empty name is a leaf. A node without one is a composite and answers
`say_name` by asking its children, depth first, in the order they were added.
"""

from typing import Any, List, Optional, Union

from pattern_catalog.core.exceptions import InvalidArgumentError, UnsupportedOperationError


class Node:
    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name
        self.children: List["Node"] = []

    @property
    def is_leaf(self) -> bool:
        return bool(self.name)

    def add_child(self, node: "Node") -> "Node":
        if not isinstance(node, Node):
            raise InvalidArgumentError("Child must be a Node", argument="node", value=node)
        self.children.append(node)
        return self

    def say_name(self) -> Union[str, List[str]]:
        """
        Returns:
            "Node:<name>" for a leaf, otherwise the flattened list of every
            named descendant's result
        """
        if self.is_leaf:
            return f"Node:{self.name}"

        names: List[str] = []
        for child in self.children:
            result = child.say_name()
            if isinstance(result, list):
                names.extend(result)
            else:
                names.append(result)
        return names

    def traverse(self, operation: str) -> List[Any]:
        """Invoke `operation` on every child and collect the results."""
        results = []
        for child in self.children:
            method = getattr(child, operation, None)
            if not callable(method):
                raise UnsupportedOperationError(
                    f"Node does not support '{operation}'", capability=operation
                )
            results.append(method())
        return results

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"Node({self.name!r})"
        return f"Node(children={len(self.children)})"
