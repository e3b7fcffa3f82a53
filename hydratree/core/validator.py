"""Construction-time validation of node sets.

Runs once when a builder is declared. Nothing is re-checked afterwards;
the node set of a builder cannot change.
"""

from typing import Dict, Iterable, List, Sequence

from ..errors import (
    AmbiguousRootError,
    CyclicTreeError,
    DuplicateNodeError,
    EmptyTreeError,
    NoRootError,
    ReservedNameError,
    UnknownParentError,
)
from .merger import HydratedModel
from .node import Node

_RESERVED_NAMES = frozenset(dir(HydratedModel))


def extract_root(nodes: Sequence[Node]) -> Node:
    """Return the single node without a parent.

    Raises:
        NoRootError: every node has a parent
        AmbiguousRootError: more than one node lacks a parent
    """
    roots = [node for node in nodes if node.parent is None]

    if not roots:
        raise NoRootError()

    if len(roots) > 1:
        raise AmbiguousRootError([node.name for node in roots])

    return roots[0]


def index_by_name(nodes: Iterable[Node]) -> Dict[str, Node]:
    """Map node names to nodes, rejecting duplicates."""
    by_name: Dict[str, Node] = {}
    for node in nodes:
        if node.name in by_name:
            raise DuplicateNodeError(node.name)
        by_name[node.name] = node
    return by_name


def _check_names_free(nodes: Sequence[Node]) -> None:
    # model.<name> must reach the node's output, not a dict method
    for node in nodes:
        if node.name in _RESERVED_NAMES:
            raise ReservedNameError(node.name)


def _check_parents_known(nodes: Sequence[Node]) -> None:
    members = {id(node) for node in nodes}
    for node in nodes:
        if node.parent is not None and id(node.parent) not in members:
            raise UnknownParentError(node.name, node.parent.name)


def _check_reaches_root(nodes: Sequence[Node], root: Node) -> None:
    # A chain longer than the node count has to revisit a node.
    limit = len(nodes)
    for node in nodes:
        chain: List[str] = [node.name]
        current = node
        while current is not root:
            current = current.parent
            chain.append(current.name)
            if len(chain) > limit:
                raise CyclicTreeError(chain)


def validate_tree(nodes: Sequence[Node]) -> Node:
    """Validate a node set and return its root.

    Checks, in order: the set is non-empty, names are unique and readable
    as model attributes, there is exactly one root, every parent belongs
    to the set, and every parent chain ends at that root.

    Args:
        nodes: Every node of the tree, in declaration order

    Returns:
        The root node

    Raises:
        ConfigurationError: one of the subclasses above, naming the problem
    """
    if not nodes:
        raise EmptyTreeError()

    index_by_name(nodes)
    _check_names_free(nodes)
    root = extract_root(nodes)
    _check_parents_known(nodes)
    _check_reaches_root(nodes, root)
    return root
