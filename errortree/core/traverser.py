"""Tree traversal for errortree.

The walker visits every node of an error tree in depth-first pre-order. It
works through an ErrorTreeAdapter, so it is independent of how the nodes
themselves are shaped.
"""

import logging
from typing import Any, FrozenSet, Iterator, Tuple

from .adapter import ErrorTreeAdapter
from .node import NodeKind

logger = logging.getLogger(__name__)


class DepthFirstPreOrderWalker:
    """Depth-first pre-order traversal of an error tree.

    Visits a node before anything it wraps. Single-child chains are followed
    iteratively; each child of a multi-child node is walked recursively, in
    order, and the multi-child node's own loop stops there.

    A node reachable through several branches is visited once per branch.
    With cycle detection on, a node that reappears among its own ancestors
    ends that branch.
    """

    def __init__(self, adapter: ErrorTreeAdapter):
        """Initialize walker with an adapter.

        Args:
            adapter: ErrorTreeAdapter for classifying nodes
        """
        self.adapter = adapter

    def traverse(self, root: Any) -> Iterator[Tuple[Any, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting error (None yields nothing)

        Yields:
            Tuples of (node, depth) where depth counts wrapping levels
            from root
        """
        if root is None:
            return
        yield from self._traverse(root, 0, frozenset())

    def _traverse(self, node: Any, depth: int,
                  ancestors: FrozenSet[int]) -> Iterator[Tuple[Any, int]]:
        track_cycles = self.adapter.detects_cycles()
        path = set(ancestors)

        while True:
            if track_cycles:
                if id(node) in path:
                    log_cycle(node)
                    return
                path.add(id(node))

            # Yield parent first (pre-order)
            yield (node, depth)

            shape = self.adapter.classify(node)
            if shape.kind is NodeKind.MULTI:
                branch_path = frozenset(path)
                for child in shape.children:
                    if child is not None:
                        yield from self._traverse(child, depth + 1, branch_path)
                return

            if shape.kind is NodeKind.SINGLE and shape.child is not None:
                node = shape.child
                depth += 1
                continue

            return


def log_cycle(node: Any) -> None:
    """Report a branch cut because node wraps one of its own ancestors."""
    logger.warning(
        "Error tree cycle detected at %s(%r); branch skipped",
        type(node).__name__, node,
    )
