"""Configuration for model builders.

Holds the knobs that shape how a builder exposes activation methods
and how its layered executor schedules node operations.
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass
class ExecutionConfig:
    """Settings shared by a builder and its executor."""

    max_concurrency: Optional[int] = None  # Operations in flight per layer (None = all)
    accessor_prefix: str = "with_"         # Prefix of generated activation methods

    def validate(self) -> List[str]:
        """Validate configuration consistency.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if self.max_concurrency is not None and self.max_concurrency < 1:
            errors.append("max_concurrency must be at least 1")

        if not self.accessor_prefix:
            errors.append("accessor_prefix cannot be empty")
        elif not self.accessor_prefix.isidentifier():
            errors.append(f"accessor_prefix '{self.accessor_prefix}' is not a valid identifier")

        return errors

    def accessor_name(self, node_name: str) -> str:
        """Name of the activation method generated for a node."""
        return f"{self.accessor_prefix}{node_name}"

    def node_name_for(self, accessor: str) -> Optional[str]:
        """Reverse of accessor_name; None when the prefix doesn't match."""
        if not accessor.startswith(self.accessor_prefix):
            return None
        return accessor[len(self.accessor_prefix):] or None
