"""Tree node description.

A node pairs a name with an async fetch operation and an optional
reference to the node whose output it consumes.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Iterator, Optional

Operation = Callable[..., Awaitable[Any]]


@dataclass(frozen=True, eq=False)
class Node:
    """One fetch step in a hydration tree.

    Nodes are immutable and compared by identity, so two trees can reuse
    the same name and operation without their activation state colliding.
    A node without a parent is the root of its tree.

    Attributes:
        name: Identifier, unique within a tree; also the key the node's
            output is stored under in the hydrated model
        operation: Async callable receiving the parent's resolved output
            (the root receives the compile arguments instead)
        parent: Node whose output feeds this one, or None for the root
    """

    name: str
    operation: Operation = field(repr=False)
    parent: Optional["Node"] = None

    def __post_init__(self):
        # Names double as with_<name> accessors and model attributes
        if not isinstance(self.name, str) or not self.name.isidentifier():
            raise TypeError(f"Node name must be a Python identifier, got {self.name!r}")
        if not callable(self.operation):
            raise TypeError(f"Operation for node '{self.name}' is not callable")

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def ancestors(self) -> Iterator["Node"]:
        """Yield the parent chain, nearest parent first, root last."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    @property
    def depth(self) -> int:
        """Number of hops between this node and the root."""
        return sum(1 for _ in self.ancestors())

    def run(self, *args: Any, **kwargs: Any) -> Awaitable[Any]:
        """Invoke the node's operation."""
        return self.operation(*args, **kwargs)

    def __repr__(self) -> str:
        parent = self.parent.name if self.parent is not None else None
        return f"Node(name={self.name!r}, parent={parent!r})"
