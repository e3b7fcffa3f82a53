"""Layered execution of activated trees.

Runs the root first, then walks the activated part of the tree one layer
at a time. Every node in a layer starts concurrently and receives the
resolved output of its own parent. Children are discovered only after
their parent resolves, so the executor keeps two collections: the layer
being run and the layer being collected for the next pass.
"""

import asyncio
from typing import Any, List, Optional, Tuple

import structlog

from ..config import ExecutionConfig
from .merger import HydratedModel, merge_layer, merge_root
from .node import Node
from .tracker import ActivationTracker

_LOGGER = structlog.get_logger("hydratree.executor")

Pending = Tuple[Node, Any]


class LayeredExecutor:
    """Breadth-first, layer-by-layer runner for one builder.

    The executor reads the tracker at run time and never writes to it.
    A fresh model is built for each call to run().
    """

    def __init__(
        self,
        root: Node,
        tracker: ActivationTracker,
        config: Optional[ExecutionConfig] = None,
    ):
        """Initialize executor.

        Args:
            root: Validated root node of the tree
            tracker: Activation state shared with the owning builder
            config: Execution settings (defaults to ExecutionConfig())
        """
        self.root = root
        self.tracker = tracker
        self.config = config or ExecutionConfig()

    async def run(self, *args: Any, **kwargs: Any) -> HydratedModel:
        """Execute the root and every activated branch.

        Args:
            *args: Positional arguments for the root operation
            **kwargs: Keyword arguments for the root operation

        Returns:
            The merged model

        Raises:
            Exception: whatever the first failing node operation raised,
                unchanged. Layers after the failing one never start.
        """
        root_output = await self._run_node(self.root, 0, *args, **kwargs)
        model = merge_root(self.root, root_output)

        if not self.tracker:
            return model

        pending: List[Pending] = [
            (child, root_output) for child in self.tracker.children_of(self.root)
        ]
        depth = 0

        while pending:
            # Swap the whole queue out; children found below go to the next layer
            layer, pending = pending, []
            depth += 1
            _LOGGER.debug(
                "running layer", depth=depth, nodes=[node.name for node, _ in layer]
            )

            outputs = await self._run_layer(layer, depth)
            resolved = [(node, output) for (node, _), output in zip(layer, outputs)]
            model = merge_layer(model, resolved)

            for node, output in resolved:
                for child in self.tracker.children_of(node):
                    pending.append((child, output))

        return model

    async def _run_layer(self, layer: List[Pending], depth: int) -> List[Any]:
        if self.config.max_concurrency is None:
            calls = [self._run_node(node, depth, arg) for node, arg in layer]
        else:
            semaphore = asyncio.Semaphore(self.config.max_concurrency)
            calls = [
                self._run_bounded(semaphore, node, depth, arg) for node, arg in layer
            ]
        # gather raises the first failure; siblings keep running unobserved
        return await asyncio.gather(*calls)

    async def _run_bounded(
        self, semaphore: asyncio.Semaphore, node: Node, depth: int, arg: Any
    ) -> Any:
        async with semaphore:
            return await self._run_node(node, depth, arg)

    async def _run_node(self, node: Node, depth: int, *args: Any, **kwargs: Any) -> Any:
        try:
            return await node.run(*args, **kwargs)
        except Exception as e:
            _LOGGER.warning(
                "node operation failed",
                node=node.name,
                depth=depth,
                error=type(e).__name__,
            )
            raise
