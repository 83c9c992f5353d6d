"""High-level API for errortree.

This module provides the functional interface for matching against an error
tree. Every function accepts an optional ``adapter`` (to traverse foreign
error types) or ``config`` (to tune the default exception adapter).
"""

from typing import Any, FrozenSet, Iterator, List, Optional, Tuple, Type, TypeVar, Union

from .config import MatchConfig
from .core.adapter import ErrorTreeAdapter, resolve_adapter
from .core.node import NodeKind
from .core.traverser import DepthFirstPreOrderWalker, log_cycle
from .matching import is_assignable, is_comparable, node_equals_target, validate_scan_target

T = TypeVar("T")

ScanTarget = Union[Type[T], Tuple[Type[Any], ...]]


def exactly_is(
    err: Any,
    target: Any,
    *,
    adapter: Optional[ErrorTreeAdapter] = None,
    config: Optional[MatchConfig] = None,
) -> bool:
    """Report whether every branch of err's tree matches target.

    The tree consists of err itself, followed by the errors obtained by
    repeatedly unwrapping it. A node matches if it equals target (when
    target is comparable) or if its ``matches(target)`` method returns True.
    When a node wraps several errors, each of them must match on its own;
    a node wrapping no errors at all does not match.

    For example, this tree matches ``target`` because every branch reaches
    it when viewed from the root::

        err
        ├── target
        ├── wrapErr
        │   └── multiErr
        │       ├── target
        │       └── target
        └── multiErr
            ├── wrapErr
            │   └── target
            └── target

    Args:
        err: Root of the error tree (may be None)
        target: Value to look for (may be None)
        adapter: Adapter for classifying nodes
        config: Config for the default exception adapter

    Returns:
        True if all branches match. ``exactly_is(None, None)`` is True and
        a None target matches nothing else.

    Example:
        >>> boom = ValueError("boom")
        >>> exactly_is(ExceptionGroup("many", [boom, boom]), boom)
        True
    """
    if target is None:
        return err is None

    tree_adapter = resolve_adapter(adapter, config)
    return _exactly_is(err, target, is_comparable(target), tree_adapter, frozenset())


def _exactly_is(node: Any, target: Any, comparable: bool,
                adapter: ErrorTreeAdapter, ancestors: FrozenSet[int]) -> bool:
    track_cycles = adapter.detects_cycles()
    path = set(ancestors)

    while True:
        if node is None:
            return False

        if track_cycles:
            if id(node) in path:
                log_cycle(node)
                return False
            path.add(id(node))

        shape = adapter.classify(node)
        if node_equals_target(node, shape, target, comparable):
            return True

        if shape.kind is NodeKind.MULTI:
            if not shape.children:
                return False
            branch_path = frozenset(path)
            return all(
                _exactly_is(child, target, comparable, adapter, branch_path)
                for child in shape.children
            )

        if shape.kind is NodeKind.SINGLE:
            node = shape.child
            continue

        return False


def iter_scan(
    err: Any,
    target: ScanTarget[T],
    *,
    adapter: Optional[ErrorTreeAdapter] = None,
    config: Optional[MatchConfig] = None,
) -> Iterator[T]:
    """Lazily yield every node in err's tree assignable to target.

    Same order and validation as ``scan``. The target is validated when
    this function is called, not when iteration starts.

    Raises:
        InvalidTargetError: If target can never match an error
    """
    types = validate_scan_target(target)
    walker = DepthFirstPreOrderWalker(resolve_adapter(adapter, config))
    return (node for node, _ in walker.traverse(err) if is_assignable(node, types))


def scan(
    err: Any,
    target: ScanTarget[T],
    *,
    adapter: Optional[ErrorTreeAdapter] = None,
    config: Optional[MatchConfig] = None,
) -> List[T]:
    """Find all matches to target in err's tree.

    Always traverses the whole tree, even after target has been found.
    Matches are returned in depth-first pre-order; a node that wraps other
    errors is listed before them, and a node reached through several
    branches is listed once per branch.

    For example, scanning this tree for ``PathError``::

        err
        ├── targetA (PathError)
        ├── wrapErr
        │   └── multiErr
        │       ├── targetB (PathError)
        │       └── targetC (PathError)
        └── multiErr
            ├── wrapErr
            │   └── targetD (PathError)
            └── targetE (PathError)

    returns ``[targetA, targetB, targetC, targetD, targetE]``.

    A node matches if ``isinstance(node, target)``. Prefer the narrowest
    target type: ``object`` (or ``typing.Any``) matches every node.

    Args:
        err: Root of the error tree (None gives an empty list)
        target: Exception type, abstract base class, runtime-checkable
            Protocol, ``object``/``Any``, or a tuple of those
        adapter: Adapter for classifying nodes
        config: Config for the default exception adapter

    Returns:
        List of matching nodes (empty if nothing matches)

    Raises:
        InvalidTargetError: If target is a concrete non-exception type, a
            non-runtime Protocol, or not a type at all

    Example:
        >>> group = ExceptionGroup("io", [OSError("a"), ValueError("b")])
        >>> scan(group, OSError)
        [OSError('a')]
    """
    return list(iter_scan(err, target, adapter=adapter, config=config))


def walk(
    err: Any,
    *,
    adapter: Optional[ErrorTreeAdapter] = None,
    config: Optional[MatchConfig] = None,
) -> Iterator[Any]:
    """Yield every node of err's tree in depth-first pre-order.

    Equivalent to ``iter_scan(err, object)``.

    Example:
        >>> try:
        ...     try:
        ...         raise KeyError("k")
        ...     except KeyError as exc:
        ...         raise RuntimeError("lookup failed") from exc
        ... except RuntimeError as exc:
        ...     [type(e).__name__ for e in walk(exc)]
        ['RuntimeError', 'KeyError']
    """
    walker = DepthFirstPreOrderWalker(resolve_adapter(adapter, config))
    return (node for node, _ in walker.traverse(err))


def count_matches(
    err: Any,
    target: ScanTarget[T],
    *,
    adapter: Optional[ErrorTreeAdapter] = None,
    config: Optional[MatchConfig] = None,
) -> int:
    """Count the nodes ``scan`` would return without building the list."""
    count = 0
    for _ in iter_scan(err, target, adapter=adapter, config=config):
        count += 1
    return count
