"""Error types used to build test trees.

Each class exercises one capability the default ExceptionAdapter looks for:
single-child ``unwrap()``, multi-child ``unwrap()``, a custom ``matches()``
predicate, value equality, and unhashable (uncomparable) errors.
"""

from abc import ABC, ABCMeta
from collections.abc import Sized
from typing import Callable, List, Optional, Protocol, runtime_checkable


class ErrorT(Exception):
    """Value-comparable error: two ErrorT with the same text are equal."""

    def __init__(self, s: str = ""):
        super().__init__(s)
        self.s = s

    def __eq__(self, other):
        if type(other) is not ErrorT:
            return NotImplemented
        return self.s == other.s

    def __hash__(self):
        return hash((ErrorT, self.s))

    def __str__(self):
        return f"errorT({self.s})"

    def __repr__(self):
        return f"ErrorT({self.s!r})"


class WrapError(Exception):
    """Wraps exactly one error (which may be None)."""

    def __init__(self, err: Optional[BaseException]):
        super().__init__("wrapErr")
        self.err = err

    def unwrap(self):
        return self.err


class MultiError(Exception):
    """Wraps any number of errors, including zero."""

    def __init__(self, *errs):
        super().__init__("multiError")
        self.errs = list(errs)

    def unwrap(self) -> List[Optional[BaseException]]:
        return self.errs


class Poser(Exception):
    """Error that decides for itself which targets it matches."""

    def __init__(self, msg: str, f: Optional[Callable[[object], bool]] = None):
        super().__init__(msg)
        self.f = f

    def matches(self, target) -> bool:
        return self.f is not None and self.f(target)


class ErrorUncomparable(Exception):
    """Unhashable error that matches any other ErrorUncomparable."""

    __hash__ = None

    def __init__(self):
        super().__init__("uncomparable error")
        self.f: List[str] = []

    def matches(self, target) -> bool:
        return isinstance(target, ErrorUncomparable)


class PlainUncomparable(Exception):
    """Unhashable error with no predicate: it can match nothing."""

    __hash__ = None


class PathError(Exception):
    """Error carrying an operation name, with a timeout() capability."""

    def __init__(self, op: str = "", path: str = ""):
        super().__init__(f"{op} {path}".strip())
        self.op = op
        self.path = path

    def timeout(self) -> bool:
        return False


@runtime_checkable
class Timeout(Protocol):
    """Anything that can say whether it timed out."""

    def timeout(self) -> bool:
        ...


class NotRuntimeTimeout(Protocol):
    def timeout(self) -> bool:
        ...


class Retryable(ABC):
    """Marker interface registered onto error types."""
    pass


class TransientError(Exception):
    pass


Retryable.register(TransientError)


class MarkerMeta(metaclass=ABCMeta):
    """Marker interface declared through the metaclass."""
    pass


class Bag(Sized):
    """Concrete container built on an ABC; not an error, not an interface."""

    def __init__(self, *items):
        self.items = list(items)

    def __len__(self):
        return len(self.items)


class Clock(Timeout):
    """Concrete implementation of a runtime-checkable Protocol."""

    def timeout(self) -> bool:
        return True
