"""Node classification for errortree.

A NodeShape is intentionally kept simple - it's the answer to "what can this
error do?" at a single point in the tree. Working out the answer is delegated
to the ErrorTreeAdapter, which is what lets errortree walk any error type.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Optional, Sequence


class NodeKind(Enum):
    """Structural role of an error node."""
    LEAF = "leaf"        # Wraps nothing
    SINGLE = "single"    # Wraps exactly one child (which may be None)
    MULTI = "multi"      # Wraps an ordered sequence of children


@dataclass(frozen=True)
class NodeShape:
    """Tagged variant describing one visited node.

    Exactly one of ``child`` / ``children`` is meaningful, selected by
    ``kind``. ``matcher`` is the node's custom-match predicate, if any.
    """

    kind: NodeKind
    child: Any = None
    children: Sequence[Any] = ()
    matcher: Optional[Callable[[Any], bool]] = None

    @classmethod
    def leaf(cls, matcher: Optional[Callable[[Any], bool]] = None) -> "NodeShape":
        return cls(NodeKind.LEAF, matcher=matcher)

    @classmethod
    def single(cls, child: Any,
               matcher: Optional[Callable[[Any], bool]] = None) -> "NodeShape":
        return cls(NodeKind.SINGLE, child=child, matcher=matcher)

    @classmethod
    def multi(cls, children: Iterable[Any],
              matcher: Optional[Callable[[Any], bool]] = None) -> "NodeShape":
        return cls(NodeKind.MULTI, children=tuple(children), matcher=matcher)

    def matches(self, target: Any) -> bool:
        """Run the node's custom-match predicate against target.

        Nodes without a predicate never match this way.
        """
        if self.matcher is None:
            return False
        return bool(self.matcher(target))
