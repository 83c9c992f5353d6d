"""ErrorTreeAdapter abstraction for errortree.

The adapter is what makes errortree work with any error type. Error nodes are
opaque; the adapter knows HOW to find out whether a node wraps one error,
wraps many, or wraps nothing, and whether it brings its own match predicate.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Any, Callable, Optional

from ..config import DEFAULT_CONFIG, MatchConfig
from ..errors import ConfigurationError
from .node import NodeShape


class ErrorTreeAdapter(ABC):
    """Abstract adapter for classifying nodes of an error tree.

    Traversal code only ever talks to nodes through ``classify``, so a
    single tree may freely mix exceptions, exception groups and foreign
    error objects. Classification is re-done at every visit and never
    cached.
    """

    @abstractmethod
    def classify(self, node: Any) -> NodeShape:
        """Describe the structure and match capability of a node.

        Args:
            node: Any error node (never None; callers handle None)

        Returns:
            NodeShape for this node
        """
        pass

    # Capability flags - adapters declare what they support

    def detects_cycles(self) -> bool:
        """Check if traversal should cut branches that loop back.

        Cycle detection tracks the nodes on the current root-to-node path
        by identity. Adapters over trees that are known to be acyclic can
        return False to skip the bookkeeping.

        Returns:
            True if cyclic branches should be cut
        """
        return True


class ExceptionAdapter(ErrorTreeAdapter):
    """Adapter for Python exceptions and duck-typed error objects.

    Classification order for a node:

    1. ``BaseExceptionGroup`` instances are multi-child (``.exceptions``).
    2. An ``unwrap()`` method returning a list, tuple or iterator (such as
       a generator) is multi-child; returning anything else (including
       None) is single-child. Other iterables, e.g. a dict payload, are
       treated as a single wrapped node.
    3. A ``BaseException`` with ``__cause__`` set is single-child. With
       ``follow_context`` the unsuppressed ``__context__`` is used when
       there is no cause.
    4. Everything else is a leaf.

    A callable ``matches`` attribute becomes the node's match predicate.
    """

    def __init__(self, config: Optional[MatchConfig] = None):
        """Initialize adapter with a configuration.

        Args:
            config: MatchConfig (defaults to DEFAULT_CONFIG)

        Raises:
            ConfigurationError: If config is invalid
        """
        self.config = config or DEFAULT_CONFIG

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

    def classify(self, node: Any) -> NodeShape:
        matcher = self._get_matcher(node)

        if isinstance(node, BaseExceptionGroup):
            return NodeShape.multi(node.exceptions, matcher)

        unwrap = getattr(node, self.config.unwrap_method, None)
        if callable(unwrap):
            wrapped = unwrap()
            if isinstance(wrapped, (list, tuple, Iterator)):
                return NodeShape.multi(wrapped, matcher)
            return NodeShape.single(wrapped, matcher)

        if isinstance(node, BaseException):
            chained = self._get_chained(node)
            if chained is not None:
                return NodeShape.single(chained, matcher)

        return NodeShape.leaf(matcher)

    def detects_cycles(self) -> bool:
        return self.config.detect_cycles

    def _get_matcher(self, node: Any) -> Optional[Callable[[Any], bool]]:
        matcher = getattr(node, self.config.match_method, None)
        return matcher if callable(matcher) else None

    def _get_chained(self, exc: BaseException) -> Optional[BaseException]:
        if not self.config.follow_cause:
            return None
        if exc.__cause__ is not None:
            return exc.__cause__
        if self.config.follow_context and not exc.__suppress_context__:
            return exc.__context__
        return None


def resolve_adapter(adapter: Optional[ErrorTreeAdapter] = None,
                    config: Optional[MatchConfig] = None) -> ErrorTreeAdapter:
    """Pick the adapter for a call.

    Args:
        adapter: Explicit adapter, used as-is
        config: Config for a default ExceptionAdapter

    Returns:
        ErrorTreeAdapter instance

    Raises:
        ConfigurationError: If both adapter and config are given
    """
    if adapter is not None:
        if config is not None:
            raise ConfigurationError(
                "Pass either an adapter or a config, not both"
            )
        return adapter
    if config is None:
        return _DEFAULT_ADAPTER
    return ExceptionAdapter(config)


_DEFAULT_ADAPTER = ExceptionAdapter()
