"""errortree - Multiple-error matching over the tree structure of errors.

An error may wrap one other error (``raise ... from ...``, or an ``unwrap()``
method), many other errors (``ExceptionGroup``, or ``unwrap()`` returning a
list), or nothing. errortree answers two questions about such a tree:

    from errortree import exactly_is, scan

    exactly_is(err, target)   # does EVERY branch lead to target?
    scan(err, OSError)        # ALL nodes that are OSError, in pre-order

Both work with any error shape through a pluggable ErrorTreeAdapter.
"""

import logging

__version__ = "0.1.0"

from .api import count_matches, exactly_is, iter_scan, scan, walk
from .config import DEFAULT_CONFIG, MatchConfig
from .core import (
    DepthFirstPreOrderWalker,
    ErrorTreeAdapter,
    ExceptionAdapter,
    NodeKind,
    NodeShape,
)
from .errors import ConfigurationError, ErrorTreeError, InvalidTargetError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # API
    "exactly_is",
    "scan",
    "iter_scan",
    "walk",
    "count_matches",
    # Core
    "ErrorTreeAdapter",
    "ExceptionAdapter",
    "DepthFirstPreOrderWalker",
    "NodeKind",
    "NodeShape",
    # Config
    "MatchConfig",
    "DEFAULT_CONFIG",
    # Errors
    "ErrorTreeError",
    "InvalidTargetError",
    "ConfigurationError",
]
