"""
Error types for HydraTree.

Construction problems are reported through ConfigurationError and its
subclasses. Failures raised by node operations are never wrapped: the
builder re-raises the original exception unchanged, the same way the
fail-fast traversal policy does.
"""

from typing import Iterable, Sequence


class HydrationError(Exception):
    """Base class for all errors raised by HydraTree itself."""


class ConfigurationError(HydrationError):
    """The node set or execution config cannot form a usable builder."""


class EmptyTreeError(ConfigurationError):
    """Raised when a builder is declared without any nodes."""

    def __init__(self):
        super().__init__("Cannot declare a model without nodes")


class NoRootError(ConfigurationError):
    """Raised when every supplied node has a parent."""

    def __init__(self):
        super().__init__("No root node found")


class AmbiguousRootError(ConfigurationError):
    """Raised when more than one supplied node lacks a parent."""

    def __init__(self, names: Sequence[str]):
        self.names = list(names)
        super().__init__(
            f"You can only have one root node, found {len(self.names)}: "
            f"{', '.join(self.names)}"
        )


class DuplicateNodeError(ConfigurationError):
    """Raised when two nodes in one tree share a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Node name '{name}' is used more than once")


class ReservedNameError(ConfigurationError):
    """Raised when a node name would be shadowed by a model attribute."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Node name '{name}' clashes with a HydratedModel attribute"
        )


class UnknownParentError(ConfigurationError):
    """Raised when a node points at a parent outside the declared set."""

    def __init__(self, name: str, parent_name: str):
        self.name = name
        self.parent_name = parent_name
        super().__init__(
            f"Node '{name}' has parent '{parent_name}' which is not part of the tree"
        )


class CyclicTreeError(ConfigurationError):
    """Raised when a parent chain never reaches the root."""

    def __init__(self, names: Iterable[str]):
        self.names = list(names)
        super().__init__(
            f"Parent chain does not reach the root: {' -> '.join(self.names)}"
        )


class UnknownNodeError(HydrationError, KeyError):
    """Raised when selecting a node name that the tree does not contain."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown node: '{self.name}'"
