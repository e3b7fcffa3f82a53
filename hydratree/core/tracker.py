"""Activation tracking for model builders.

The tracker remembers, for every parent node, which of its direct children
have to run after the parent resolves. Selection only grows: once a node is
registered, every later execution through the same builder includes it.
"""

from typing import Dict, Iterator, List

from .node import Node


class ActivationTracker:
    """Accumulating parent -> children registry.

    Child collections keep registration order and never hold duplicates,
    so activating a node twice, or activating a node whose ancestors were
    already registered, leaves the tracker unchanged.
    """

    def __init__(self):
        # dict values stand in for an insertion-ordered set
        self._children: Dict[Node, Dict[Node, None]] = {}

    def activate(self, node: Node) -> None:
        """Register a node and every ancestor below the root for execution.

        The root always runs, so activating it does nothing. For any other
        node, each hop of the parent chain is recorded as a required child of
        its own parent, connecting the requested node to the root.
        """
        current = node
        while current.parent is not None:
            siblings = self._children.setdefault(current.parent, {})
            siblings[current] = None
            current = current.parent

    def children_of(self, node: Node) -> List[Node]:
        """Return the registered direct children of a node (possibly empty)."""
        return list(self._children.get(node, ()))

    def is_activated(self, node: Node) -> bool:
        """True if the node itself has been registered under its parent."""
        if node.parent is None:
            return True
        return node in self._children.get(node.parent, ())

    def activated(self) -> Iterator[Node]:
        """Yield every registered non-root node."""
        for children in self._children.values():
            yield from children

    def clear(self) -> None:
        """Forget every registration."""
        self._children.clear()

    def __len__(self) -> int:
        """Number of parents with at least one registered child."""
        return len(self._children)

    def __bool__(self) -> bool:
        return bool(self._children)

    def __repr__(self) -> str:
        pairs = ", ".join(
            f"{parent.name}: [{', '.join(child.name for child in children)}]"
            for parent, children in self._children.items()
        )
        return f"ActivationTracker({{{pairs}}})"
