"""Core engine for hydration trees.

Nodes, construction-time validation, activation tracking, layered
execution and result merging. The builder in hydratree.builder ties
these together.
"""

from .node import Node, Operation
from .validator import extract_root, validate_tree, index_by_name
from .tracker import ActivationTracker
from .executor import LayeredExecutor
from .merger import HydratedModel, merge, merge_layer, merge_root

__all__ = [
    # Node
    'Node',
    'Operation',
    # Validation
    'extract_root',
    'validate_tree',
    'index_by_name',
    # Activation
    'ActivationTracker',
    # Execution
    'LayeredExecutor',
    # Merging
    'HydratedModel',
    'merge',
    'merge_layer',
    'merge_root',
]
