"""Model builder.

A builder is declared from a set of nodes, accumulates which branches
should be fetched, and compiles the activated tree into one model.

Example:
    >>> movie = Node("movie", fetch_movie)
    >>> progress = Node("progress", fetch_progress, parent=movie)
    >>> builder = declare_model(movie, progress)
    >>> model = await builder.with_progress().compile(10)
    >>> model.progress
"""

from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Union

import structlog

from .config import ExecutionConfig
from .core import (
    ActivationTracker,
    HydratedModel,
    LayeredExecutor,
    Node,
    index_by_name,
    validate_tree,
)
from .errors import ConfigurationError, UnknownNodeError

_LOGGER = structlog.get_logger("hydratree.builder")


class ModelBuilder:
    """Selects branches of a node tree and compiles them into a model.

    Every non-root node gets an activation method named after it
    (``with_<name>`` by default). Activation is sticky: a branch selected
    once stays selected for every later compile through the same builder,
    so a partially configured builder can be reused and extended. Call
    reset() to start over explicitly.

    Activation and compile calls on one builder are not safe against each
    other; callers running them concurrently must serialize them.
    """

    def __init__(self, *nodes: Node, config: Optional[ExecutionConfig] = None):
        """Validate the node set and prepare an empty selection.

        Args:
            *nodes: Every node of the tree, root included
            config: Execution settings (defaults to ExecutionConfig())

        Raises:
            ConfigurationError: the nodes don't form a single-rooted tree,
                or the config is invalid
        """
        self._config = config or ExecutionConfig()
        errors = self._config.validate()
        if errors:
            raise ConfigurationError(f"Invalid configuration: {', '.join(errors)}")

        self._nodes: Sequence[Node] = tuple(nodes)
        self._root = validate_tree(self._nodes)
        self._by_name: Dict[str, Node] = index_by_name(self._nodes)
        self._tracker = ActivationTracker()
        self._executor = LayeredExecutor(self._root, self._tracker, self._config)

        _LOGGER.debug("declared model", root=self._root.name, nodes=len(self._nodes))

    @property
    def root(self) -> Node:
        return self._root

    @property
    def nodes(self) -> Sequence[Node]:
        return self._nodes

    @property
    def config(self) -> ExecutionConfig:
        return self._config

    @property
    def tracker(self) -> ActivationTracker:
        return self._tracker

    def node(self, name: str) -> Node:
        """Look up a node by name.

        Raises:
            UnknownNodeError: no node has that name
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownNodeError(name) from None

    def activate(self, target: Union[str, Node]) -> "ModelBuilder":
        """Mark a node, and the path from it to the root, for execution.

        Args:
            target: Node name or one of this builder's nodes

        Returns:
            This builder, for chaining
        """
        node = self.node(target) if isinstance(target, str) else target
        if self._by_name.get(node.name) is not node:
            raise UnknownNodeError(node.name)

        self._tracker.activate(node)
        _LOGGER.debug("activated node", node=node.name)
        return self

    def select(self, *names: str) -> "ModelBuilder":
        """Activate several nodes by name."""
        for name in names:
            self.activate(name)
        return self

    def reset(self) -> "ModelBuilder":
        """Drop the whole selection; only the root runs afterwards."""
        self._tracker.clear()
        return self

    @property
    def activated_names(self) -> List[str]:
        """Names of every node that will run besides the root, in declaration order."""
        return [
            node.name
            for node in self._nodes
            if not node.is_root and self._tracker.is_activated(node)
        ]

    async def compile(self, *args: Any, **kwargs: Any) -> HydratedModel:
        """Run the root and every activated branch.

        Args:
            *args: Arguments for the root node's operation
            **kwargs: Keyword arguments for the root node's operation

        Returns:
            The root's fields at the top level, plus one entry per executed
            node keyed by its name

        Raises:
            Exception: the first node failure, unchanged
        """
        model = await self._executor.run(*args, **kwargs)
        _LOGGER.debug("compiled model", root=self._root.name, fields=len(model))
        return model

    def _accessor(self, node: Node) -> Callable[[], "ModelBuilder"]:
        def accessor() -> "ModelBuilder":
            return self.activate(node)

        accessor.__name__ = self._config.accessor_name(node.name)
        accessor.__doc__ = f"Activate '{node.name}' and its ancestors."
        return accessor

    def __getattr__(self, name: str) -> Any:
        # Only reached for attributes that don't exist on the instance
        if name.startswith("_"):
            raise AttributeError(name)

        node_name = self._config.node_name_for(name)
        node = self._by_name.get(node_name) if node_name is not None else None
        if node is None or node.is_root:
            raise AttributeError(
                f"'{type(self).__name__}' object has no attribute '{name}'"
            )
        return self._accessor(node)

    def __dir__(self) -> Iterable[str]:
        accessors = [
            self._config.accessor_name(node.name)
            for node in self._nodes
            if not node.is_root
        ]
        return list(super().__dir__()) + accessors

    def __repr__(self) -> str:
        return (
            f"ModelBuilder(root={self._root.name!r}, nodes={len(self._nodes)}, "
            f"activated={self.activated_names!r})"
        )


def declare_model(*nodes: Node, config: Optional[ExecutionConfig] = None) -> ModelBuilder:
    """Create a builder for a tree of nodes.

    Args:
        *nodes: Every node of the tree, root included
        config: Optional execution settings

    Returns:
        A ModelBuilder with nothing but the root selected
    """
    return ModelBuilder(*nodes, config=config)
