"""Result merging.

Folds node outputs into the composite model returned by a compile call.
The root's output forms the top level; every other node's output is
nested under the node's name.
"""

import dataclasses
from typing import Any, Iterable, Mapping, Tuple

from .node import Node


class HydratedModel(dict):
    """Composite result of a compile call.

    A plain dict whose keys are also readable as attributes, so
    ``model["three"]`` and ``model.three`` are equivalent.
    """

    def __getattr__(self, name: str) -> Any:
        try:
            return self[name]
        except KeyError:
            raise AttributeError(
                f"'{type(self).__name__}' has no field '{name}'"
            ) from None

    def __dir__(self):
        return list(super().__dir__()) + [key for key in self if isinstance(key, str)]

    def copy(self) -> "HydratedModel":
        return type(self)(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)})"


def _fields_of(output: Any):
    """Top-level fields of a root output, or None if it has none."""
    if isinstance(output, Mapping):
        return dict(output)
    if dataclasses.is_dataclass(output) and not isinstance(output, type):
        return {f.name: getattr(output, f.name) for f in dataclasses.fields(output)}
    if hasattr(output, "__dict__") and not callable(output):
        return dict(vars(output))
    return None


def merge_root(root: Node, output: Any) -> HydratedModel:
    """Start a model from the root's output.

    Mappings, dataclass instances and plain attribute objects are spread
    into the top level. Any other value (a bare number, a list) has no
    fields to spread and is stored under the root's name instead.
    """
    fields = _fields_of(output)
    if fields is None:
        return HydratedModel({root.name: output})
    return HydratedModel(fields)


def merge(result: Mapping[str, Any], name: str, output: Any) -> HydratedModel:
    """Return a new model with ``output`` stored under ``name``."""
    merged = HydratedModel(result)
    merged[name] = output
    return merged


def merge_layer(
    result: Mapping[str, Any],
    resolved: Iterable[Tuple[Node, Any]],
) -> HydratedModel:
    """Merge every (node, output) pair of one layer into a new model."""
    merged = HydratedModel(result)
    for node, output in resolved:
        merged[node.name] = output
    return merged
