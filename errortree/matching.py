"""Node-level match rules for errortree.

Two different rules are applied at each visited node:

- ``exactly_is`` asks whether a node *is* the target: plain equality when the
  target supports it, otherwise (or additionally) the node's own
  ``matches(target)`` predicate.
- ``scan`` asks whether a node's runtime type is assignable to the target
  type, which is an ``isinstance`` check after the target has been
  validated.
"""

import inspect
import logging
from abc import ABC, ABCMeta
from typing import Any, Tuple

from .core.node import NodeShape
from .errors import InvalidTargetError

logger = logging.getLogger(__name__)


def is_comparable(target: Any) -> bool:
    """Check if target supports equality comparison.

    Hashable values are treated as comparable, mirroring the types usable
    as dict keys. Mutable value types (lists, ``eq=True`` dataclasses that
    are not frozen) are not, so they only match through a node's own
    predicate.
    """
    try:
        hash(target)
    except TypeError:
        return False
    return True


def node_equals_target(node: Any, shape: NodeShape, target: Any,
                       comparable: bool) -> bool:
    """Check if a single node matches target for ``exactly_is``.

    Args:
        node: The visited node
        shape: The node's classification (carries its match predicate)
        target: The value being searched for
        comparable: Result of ``is_comparable(target)``, computed once per call

    Returns:
        True if the node equals target or its predicate accepts target
    """
    if comparable and node == target:
        return True
    return shape.matches(target)


def _is_protocol(cls: type) -> bool:
    return bool(getattr(cls, "_is_protocol", False))


def _is_runtime_protocol(cls: type) -> bool:
    return bool(getattr(cls, "_is_runtime_protocol", False))


def _is_interface_abc(cls: type) -> bool:
    # Concrete classes built on an ABC (numbers, collections.abc, protocol
    # implementations) are not interfaces; abstract or marker ABCs are.
    if not isinstance(cls, ABCMeta):
        return False
    if inspect.isabstract(cls):
        return True
    return ABC in cls.__bases__ or (type(cls) is ABCMeta and cls.__bases__ == (object,))


def _check_target_type(target: Any, candidate: Any) -> type:
    if candidate is Any or candidate is object:
        return object

    if not isinstance(candidate, type):
        raise InvalidTargetError(target, f"{type(candidate).__name__} is not a type")

    if issubclass(candidate, BaseException):
        return candidate

    if _is_protocol(candidate):
        if not _is_runtime_protocol(candidate):
            raise InvalidTargetError(
                target, f"Protocol {candidate.__name__} is not @runtime_checkable"
            )
        return candidate

    if _is_interface_abc(candidate):
        return candidate

    raise InvalidTargetError(
        target, f"{candidate.__name__} is neither an interface nor an exception type"
    )


def validate_scan_target(target: Any) -> Tuple[type, ...]:
    """Validate a scan target and normalize it for ``isinstance``.

    Accepted targets, alone or in a non-empty tuple:

    - ``object`` and ``typing.Any`` (match every node)
    - ``BaseException`` subclasses
    - ``@runtime_checkable`` Protocols
    - abstract base classes, and marker ABCs deriving directly from
      ``abc.ABC`` (or declaring ``metaclass=ABCMeta``)

    Args:
        target: A type or tuple of types

    Returns:
        Tuple of types suitable as the second argument of ``isinstance``

    Raises:
        InvalidTargetError: If any part of target can never match an error
    """
    candidates = target if isinstance(target, tuple) else (target,)
    if not candidates:
        raise InvalidTargetError(target, "empty tuple")

    types = tuple(_check_target_type(target, candidate) for candidate in candidates)
    logger.debug("Scan target %r normalized to %r", target, types)
    return types


def is_assignable(node: Any, types: Tuple[type, ...]) -> bool:
    """Check if a node's runtime type is assignable to a validated target."""
    return isinstance(node, types)
