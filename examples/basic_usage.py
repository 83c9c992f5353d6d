#!/usr/bin/env python
"""Basic errortree usage.

Shows exactly_is and scan over a tree built from exception groups and
``raise ... from ...`` chains.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from errortree import exactly_is, scan


class PathError(OSError):
    def __init__(self, op: str):
        super().__init__(f"{op}: path error")
        self.op = op


def chained(outer: BaseException, cause: BaseException) -> BaseException:
    outer.__cause__ = cause
    return outer


def exactly_is_example():
    """Every branch must reach error_a; one branch does not."""
    error_a = ValueError("error A")
    err = ExceptionGroup("batch", [
        chained(RuntimeError("wrap"), ExceptionGroup("inner", [error_a, error_a])),
        chained(RuntimeError("wrap"), error_a),
        ExceptionGroup("tail", [error_a, error_a, ValueError("wrong error")]),
    ])
    print(exactly_is(err, error_a))


def scan_example():
    """Collect every PathError in the tree, in pre-order."""
    err = ExceptionGroup("batch", [
        ExceptionGroup("first", [ValueError("error"), PathError("poser A")]),
        chained(RuntimeError("wrap"), PathError("poser B")),
        ExceptionGroup("last", [
            ValueError("error"),
            ValueError("error"),
            chained(RuntimeError("wrap"), PathError("poser C")),
        ]),
    ])
    for match in scan(err, PathError):
        print(match.op)


if __name__ == "__main__":
    exactly_is_example()  # False
    scan_example()        # poser A / poser B / poser C
