"""Core components: node classification, adapters and traversal."""

from .adapter import ErrorTreeAdapter, ExceptionAdapter
from .node import NodeKind, NodeShape
from .traverser import DepthFirstPreOrderWalker

__all__ = [
    "ErrorTreeAdapter",
    "ExceptionAdapter",
    "NodeKind",
    "NodeShape",
    "DepthFirstPreOrderWalker",
]
