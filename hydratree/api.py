"""High-level API for HydraTree.

Small helpers around ModelBuilder for one-off hydration and for
compiling one builder against many root inputs.
"""

import asyncio
from typing import Any, Iterable, List, Optional, Sequence

from .builder import ModelBuilder
from .config import ExecutionConfig
from .core import HydratedModel, Node, Operation


def node(name: str, operation: Operation, parent: Optional[Node] = None) -> Node:
    """Create a node.

    Args:
        name: Node name, unique within its tree
        operation: Async callable taking the parent's output
        parent: Parent node, or None for the root

    Returns:
        New Node instance
    """
    return Node(name, operation, parent)


async def hydrate(
    nodes: Sequence[Node],
    *args: Any,
    select: Iterable[str] = (),
    config: Optional[ExecutionConfig] = None,
    **kwargs: Any,
) -> HydratedModel:
    """Declare, select and compile in one call.

    Uses a throwaway builder, so nothing selected here leaks into other
    calls.

    Args:
        nodes: Every node of the tree, root included
        *args: Arguments for the root operation
        select: Names of the nodes to fetch
        config: Optional execution settings
        **kwargs: Keyword arguments for the root operation

    Returns:
        The hydrated model

    Example:
        >>> model = await hydrate([movie, progress], 10, select=["progress"])
    """
    builder = ModelBuilder(*nodes, config=config)
    builder.select(*select)
    return await builder.compile(*args, **kwargs)


async def hydrate_many(builder: ModelBuilder, inputs: Iterable[Any]) -> List[HydratedModel]:
    """Compile one builder for several root inputs concurrently.

    Each input is passed as the single argument of the root operation.
    Results keep the order of ``inputs``; the first failure propagates.

    Args:
        builder: Builder whose current selection is used for every input
        inputs: Root inputs, one model per item

    Returns:
        List of hydrated models
    """
    tasks = [builder.compile(value) for value in inputs]
    return list(await asyncio.gather(*tasks))
