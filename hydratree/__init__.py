"""HydraTree - Layered data hydration from async fetch trees.

HydraTree composes independently defined async fetch operations, arranged
as a single-rooted tree of named nodes, into one composite model. Each
node only sees the output of its own parent, so the same fetcher can hang
under unrelated roots. Callers activate just the branches they need:

    from hydratree import Node, declare_model

    movie = Node("movie", fetch_movie)
    progress = Node("progress", fetch_progress, parent=movie)

    builder = declare_model(movie, progress)
    model = await builder.with_progress().compile(10)
"""

__version__ = "0.1.0"

from .core import (
    Node,
    ActivationTracker,
    LayeredExecutor,
    HydratedModel,
)
from .builder import ModelBuilder, declare_model
from .config import ExecutionConfig
from .errors import (
    HydrationError,
    ConfigurationError,
    EmptyTreeError,
    NoRootError,
    AmbiguousRootError,
    DuplicateNodeError,
    ReservedNameError,
    UnknownParentError,
    CyclicTreeError,
    UnknownNodeError,
)
from .api import node, hydrate, hydrate_many

__all__ = [
    "__version__",
    # Core
    "Node",
    "ActivationTracker",
    "LayeredExecutor",
    "HydratedModel",
    # Builder
    "ModelBuilder",
    "declare_model",
    # Configuration
    "ExecutionConfig",
    # Errors
    "HydrationError",
    "ConfigurationError",
    "EmptyTreeError",
    "NoRootError",
    "AmbiguousRootError",
    "DuplicateNodeError",
    "ReservedNameError",
    "UnknownParentError",
    "CyclicTreeError",
    "UnknownNodeError",
    # High-level API
    "node",
    "hydrate",
    "hydrate_many",
]
