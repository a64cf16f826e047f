"""Depth-first traversal with node-type dispatch.

The walker visits named nodes in pre-order (source order) and calls every
handler registered for the node's type. The mapping is explicit: there is
no reflection over handler names.

Python 3.13+.
"""

from collections.abc import Callable, Iterator, Mapping, Sequence

from tree_sitter import Node

__all__ = ["NodeHandler", "VisitorTable", "iter_named", "walk"]

type NodeHandler = Callable[[Node], None]
type VisitorTable = Mapping[str, Sequence[NodeHandler]]


def iter_named(root: Node) -> Iterator[Node]:
    """Yield ``root`` and all its named descendants in pre-order.

    Iterative, so deeply nested sources cannot exhaust the Python stack.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.named_children))


def walk(root: Node, visitors: VisitorTable) -> int:
    """Dispatch every named node under ``root`` to its handlers.

    Returns:
        Number of handler invocations
    """
    calls = 0
    for node in iter_named(root):
        handlers = visitors.get(node.type)
        if not handlers:
            continue
        for handler in handlers:
            handler(node)
            calls += 1
    return calls
