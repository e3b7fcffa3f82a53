"""Test fixtures for HydraTree consumers.

These helpers record node invocations and let a test hold operations
open, so execution can be stepped through one layer at a time.
"""

import asyncio
from typing import Any, Callable, Dict, List, Optional, Tuple

from ..core import Node


class OperationSpy:
    """Async operation wrapper that records every call.

    Example:
        spy = OperationSpy(lambda x: {'value': x}, gated=True)
        node = Node('zero', spy)
        ...
        assert spy.call_count == 1
        spy.release()
    """

    def __init__(
        self,
        result: Callable[[Any], Any],
        gated: bool = False,
        error: Optional[BaseException] = None,
    ):
        """Initialize spy.

        Args:
            result: Computes the operation's output from its input
            gated: If True, calls wait for release() before returning
            error: Exception raised instead of returning a result
        """
        self._result = result
        self._error = error
        self._gate = asyncio.Event() if gated else None
        self.calls: List[Any] = []

    async def __call__(self, arg: Any) -> Any:
        self.calls.append(arg)
        if self._gate is not None:
            await self._gate.wait()
        else:
            await asyncio.sleep(0)
        if self._error is not None:
            raise self._error
        return self._result(arg)

    @property
    def call_count(self) -> int:
        return len(self.calls)

    @property
    def called(self) -> bool:
        return bool(self.calls)

    def release(self) -> None:
        """Let pending and future calls finish."""
        if self._gate is not None:
            self._gate.set()


async def settle(rounds: int = 10) -> None:
    """Give the event loop a few turns so scheduled tasks can progress."""
    for _ in range(rounds):
        await asyncio.sleep(0)


def build_sample_tree(
    gated: bool = False,
    failing: Optional[Dict[str, BaseException]] = None,
) -> Tuple[Dict[str, Node], Dict[str, OperationSpy]]:
    """Build the eight-node sample tree used across the test suite.

    Structure::

                 zero
               /      \\
            one        two
           /   \\        |
        three  four    five
                      /    \\
                    six    seven

    ``zero`` returns ``{'value': <input>}``; every other node returns
    ``{'value': <its index>}``.

    Args:
        gated: Create spies that wait for release()
        failing: Node names mapped to the exception that node raises

    Returns:
        (nodes by name, spies by name)
    """
    failing = failing or {}
    layout = [
        ('zero', None, None),
        ('one', 'zero', 1),
        ('two', 'zero', 2),
        ('three', 'one', 3),
        ('four', 'one', 4),
        ('five', 'two', 5),
        ('six', 'five', 6),
        ('seven', 'five', 7),
    ]

    nodes: Dict[str, Node] = {}
    spies: Dict[str, OperationSpy] = {}
    for name, parent, value in layout:
        if value is None:
            result = lambda x: {'value': x}
        else:
            result = lambda _, v=value: {'value': v}
        spy = OperationSpy(result, gated=gated, error=failing.get(name))
        spies[name] = spy
        nodes[name] = Node(name, spy, nodes[parent] if parent else None)

    return nodes, spies
